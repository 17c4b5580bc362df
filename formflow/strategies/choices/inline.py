"""Inline choice rendering: all choices on one line."""

from formflow.interfaces.choices import BaseChoiceRenderer
from formflow.strategies.choices.base import normalized_labels, require_option
from formflow.strategies.template_engine.language import join_with_last
from formflow.strategies.template_engine.models import ChoiceStyle, TemplateConfig


class InlineChoiceRenderer(BaseChoiceRenderer):
    """Joins choices into a single sentence fragment.

    ``(Red, Green or Blue)`` for INLINE, ``Red, Green or Blue`` for
    INLINE_NO_PAREN. A record with ``choice_parens=False`` also drops the
    parentheses for INLINE.
    """

    def __init__(self, parenthesize: bool = True) -> None:
        """Initialize the renderer.

        Args:
            parenthesize: Render the INLINE style (True) or INLINE_NO_PAREN.
        """
        self._parenthesize = parenthesize

    def render(self, labels: list[str], config: TemplateConfig) -> str:
        """Render choices inline, separated by the choice separators."""
        if not labels:
            return ""

        labels = normalized_labels(labels, config)
        if len(labels) == 1:
            joined = labels[0]
        else:
            joined = join_with_last(
                labels,
                require_option(config, "choice_separator"),
                require_option(config, "choice_last_separator"),
            )

        if self._parenthesize and config.choice_parens is not False:
            return f"({joined})"
        return joined

    @property
    def styles(self) -> set[ChoiceStyle]:
        if self._parenthesize:
            return {ChoiceStyle.INLINE}
        return {ChoiceStyle.INLINE_NO_PAREN}
