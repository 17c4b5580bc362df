"""Component Factory for strategy instantiation.

Wires the randomness source, selector, cascade, renderers and term compiler
from settings so callers never construct them by hand.
"""

import logging

from formflow.core.config import Settings, get_settings
from formflow.interfaces.choices import BaseChoiceRenderer
from formflow.interfaces.randomness import BaseRandomSource
from formflow.interfaces.terms import BaseTermCompiler
from formflow.strategies.choices import renderer_for
from formflow.strategies.prompts import PromptFormatter
from formflow.strategies.randomness import ThreadSafeRandomSource
from formflow.strategies.template_engine import ChoiceStyle, DefaultCascade, PatternSelector
from formflow.strategies.terms import PhraseTermCompiler

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating engine components based on configuration.

    Components are created on first use and cached, so every selector built
    by one factory shares a single random source.

    Example:
        ```python
        factory = ComponentFactory(get_settings())

        cascade = factory.get_cascade()
        formatter = factory.get_prompt_formatter()
        compiler = factory.get_term_compiler()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Application settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._random_source_cache: BaseRandomSource | None = None
        self._selector_cache: PatternSelector | None = None
        self._cascade_cache: DefaultCascade | None = None
        self._term_compiler_cache: BaseTermCompiler | None = None
        self._formatter_cache: PromptFormatter | None = None
        self._renderer_cache: dict[ChoiceStyle, BaseChoiceRenderer] = {}

    def get_random_source(self) -> BaseRandomSource:
        """Get the shared random source, seeded from settings when configured."""
        if self._random_source_cache is None:
            logger.info(
                f"Instantiating random source: seeded={self._settings.random_seed is not None}"
            )
            self._random_source_cache = ThreadSafeRandomSource(seed=self._settings.random_seed)
        return self._random_source_cache

    def get_pattern_selector(self) -> PatternSelector:
        """Get a pattern selector drawing from the shared random source."""
        if self._selector_cache is None:
            self._selector_cache = PatternSelector(self.get_random_source())
        return self._selector_cache

    def get_cascade(self) -> DefaultCascade:
        """Get the default cascade whose global defaults come from settings."""
        if self._cascade_cache is None:
            logger.info("Instantiating default cascade from settings")
            self._cascade_cache = DefaultCascade.from_settings(self._settings)
        return self._cascade_cache

    def get_choice_renderer(self, style: ChoiceStyle | str) -> BaseChoiceRenderer:
        """Get the renderer for a choice style.

        Args:
            style: A ChoiceStyle or its string value, e.g. "per_line".

        Returns:
            A BaseChoiceRenderer implementation instance.

        Raises:
            ValueError: If the choice style is unknown.
        """
        try:
            style = ChoiceStyle(style)
        except ValueError:
            raise ValueError(
                f"Unknown choice style: {style}. "
                f"Valid options: {', '.join(s.value for s in ChoiceStyle)}"
            ) from None

        if style not in self._renderer_cache:
            logger.debug(f"Instantiating choice renderer: {style.value}")
            self._renderer_cache[style] = renderer_for(
                style, auto_text_threshold=self._settings.auto_text_inline_threshold
            )
        return self._renderer_cache[style]

    def get_term_compiler(self) -> BaseTermCompiler:
        """Get the term compiler."""
        if self._term_compiler_cache is None:
            self._term_compiler_cache = PhraseTermCompiler()
        return self._term_compiler_cache

    def get_prompt_formatter(self) -> PromptFormatter:
        """Get a prompt formatter wired to the shared selector and cascade."""
        if self._formatter_cache is None:
            self._formatter_cache = PromptFormatter(
                self.get_pattern_selector(),
                self.get_cascade(),
                auto_text_threshold=self._settings.auto_text_inline_threshold,
            )
        return self._formatter_cache
