"""Per-line choice rendering: one numbered choice per line."""

from formflow.interfaces.choices import BaseChoiceRenderer
from formflow.strategies.choices.base import normalized_labels, require_option
from formflow.strategies.template_engine.models import ChoiceStyle, TemplateConfig


class PerLineChoiceRenderer(BaseChoiceRenderer):
    """Formats each choice through the record's choice format.

    With the usual ``{0}. {1}`` format, ``["Red", "Green"]`` renders as
    ``1. Red`` and ``2. Green`` on separate lines.
    """

    def render(self, labels: list[str], config: TemplateConfig) -> str:
        """Render one line per choice, numbered from 1."""
        if not labels:
            return ""

        choice_format = require_option(config, "choice_format")
        return "\n".join(
            choice_format.format(number, label)
            for number, label in enumerate(normalized_labels(labels, config), start=1)
        )

    @property
    def styles(self) -> set[ChoiceStyle]:
        return {ChoiceStyle.PER_LINE}
