"""Automatic text layout: inline for a few choices, one per line otherwise."""

import logging

from formflow.interfaces.choices import BaseChoiceRenderer
from formflow.strategies.choices.inline import InlineChoiceRenderer
from formflow.strategies.choices.per_line import PerLineChoiceRenderer
from formflow.strategies.template_engine.models import ChoiceStyle, TemplateConfig

logger = logging.getLogger(__name__)

DEFAULT_INLINE_THRESHOLD = 4


class AutoTextChoiceRenderer(BaseChoiceRenderer):
    """Picks inline or per-line rendering from the number of choices.

    Attributes:
        inline_threshold: Label counts below this render inline.
    """

    def __init__(self, inline_threshold: int = DEFAULT_INLINE_THRESHOLD) -> None:
        """Initialize the renderer.

        Args:
            inline_threshold: Label counts below this render inline.
        """
        self._inline_threshold = max(1, inline_threshold)
        self._inline = InlineChoiceRenderer(parenthesize=True)
        self._per_line = PerLineChoiceRenderer()

    @property
    def inline_threshold(self) -> int:
        return self._inline_threshold

    def render(self, labels: list[str], config: TemplateConfig) -> str:
        """Render inline below the threshold, per line at or above it."""
        if len(labels) < self._inline_threshold:
            return self._inline.render(labels, config)
        logger.debug(
            f"{len(labels)} choices reach inline threshold {self._inline_threshold}, "
            f"rendering per line"
        )
        return self._per_line.render(labels, config)

    @property
    def styles(self) -> set[ChoiceStyle]:
        return {ChoiceStyle.AUTO_TEXT}
