"""Choice style dispatch and the list/choice rendering entry points."""

from formflow.interfaces.choices import BaseChoiceRenderer
from formflow.strategies.choices.auto_text import DEFAULT_INLINE_THRESHOLD, AutoTextChoiceRenderer
from formflow.strategies.choices.base import require_option
from formflow.strategies.choices.inline import InlineChoiceRenderer
from formflow.strategies.choices.per_line import PerLineChoiceRenderer
from formflow.strategies.choices.presentation import PresentationChoiceRenderer
from formflow.strategies.template_engine.language import join_with_last, normalize_case
from formflow.strategies.template_engine.models import ChoiceStyle, TemplateConfig


def renderer_for(
    style: ChoiceStyle,
    auto_text_threshold: int = DEFAULT_INLINE_THRESHOLD,
) -> BaseChoiceRenderer:
    """Return the renderer responsible for a choice style.

    Raises:
        ValueError: If the style is not a ChoiceStyle.
    """
    match style:
        case ChoiceStyle.INLINE:
            return InlineChoiceRenderer(parenthesize=True)
        case ChoiceStyle.INLINE_NO_PAREN:
            return InlineChoiceRenderer(parenthesize=False)
        case ChoiceStyle.PER_LINE:
            return PerLineChoiceRenderer()
        case ChoiceStyle.AUTO_TEXT:
            return AutoTextChoiceRenderer(inline_threshold=auto_text_threshold)
        case ChoiceStyle.DEFAULT | ChoiceStyle.AUTO | ChoiceStyle.BUTTONS | ChoiceStyle.CAROUSEL:
            return PresentationChoiceRenderer()
        case _:
            raise ValueError(
                f"Unknown choice style: {style}. "
                f"Valid options: {', '.join(s.value for s in ChoiceStyle)}"
            )


def render_choices(
    labels: list[str],
    config: TemplateConfig,
    style: ChoiceStyle | None = None,
    auto_text_threshold: int = DEFAULT_INLINE_THRESHOLD,
) -> str | list[str]:
    """Render choice labels for a choice placeholder.

    Args:
        labels: Option labels in display order.
        config: Resolved record supplying case, separators and format.
        style: Overrides the record's choice_style when given.
        auto_text_threshold: Label count from which AUTO_TEXT renders per line.

    Returns:
        The rendered text, or the normalized labels for presentation styles.
    """
    style = style if style is not None else config.choice_style
    return renderer_for(style, auto_text_threshold).render(list(labels), config)


def render_list(values: list[str], config: TemplateConfig) -> str:
    """Render values for a list placeholder, e.g. ``Red, Green and Blue``."""
    values = [normalize_case(value, config.value_case) for value in values]
    if len(values) < 2:
        return values[0] if values else ""
    return join_with_last(
        values,
        require_option(config, "separator"),
        require_option(config, "last_separator"),
    )
