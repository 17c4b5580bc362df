"""Choice rendering interfaces.

Defines the abstract base class for the strategies that turn an ordered set
of option labels into the fragment substituted for a choice placeholder.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseChoiceRenderer(ABC):
    """Abstract base class for choice rendering strategies.

    Each strategy handles one family of choice styles. Text styles return a
    string; presentation styles (buttons, carousels) return the normalized
    labels for the channel layer to lay out.
    """

    @abstractmethod
    def render(self, labels: list[str], config: Any) -> str | list[str]:
        """Render choice labels.

        Args:
            labels: Option labels in display order.
            config: The resolved TemplateConfig supplying case, separators
                and the choice format.

        Returns:
            The rendered fragment, or the label list for presentation styles.
        """

    @property
    @abstractmethod
    def styles(self) -> set[Any]:
        """Return the ChoiceStyle values handled by this renderer."""
