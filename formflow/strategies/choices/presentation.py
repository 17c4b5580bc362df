"""Choice styles laid out by the channel layer (buttons, carousels)."""

from formflow.interfaces.choices import BaseChoiceRenderer
from formflow.strategies.choices.base import normalized_labels
from formflow.strategies.template_engine.models import ChoiceStyle, TemplateConfig


class PresentationChoiceRenderer(BaseChoiceRenderer):
    """Returns the case-normalized labels, in order, without text formatting.

    An unresolved DEFAULT style is treated like AUTO.
    """

    def render(self, labels: list[str], config: TemplateConfig) -> list[str]:
        return normalized_labels(labels, config)

    @property
    def styles(self) -> set[ChoiceStyle]:
        return {
            ChoiceStyle.DEFAULT,
            ChoiceStyle.AUTO,
            ChoiceStyle.BUTTONS,
            ChoiceStyle.CAROUSEL,
        }
