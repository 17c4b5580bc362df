"""Prompt formatting: pattern selection plus placeholder substitution.

Patterns use a small set of placeholders:

- ``{&}``  the field description, in the record's field case
- ``{}``   the field's current value, in the record's value case
- ``{[]}`` a list of values joined with the list separators
- ``{||}`` the choices, rendered in the record's choice style

Any other brace expression is left untouched, as is a placeholder whose
value was not supplied.
When the choice style leaves the choices to the channel layer, ``{||}`` is
removed together with the spacing around it.
"""

import logging
import re

from formflow.interfaces.errors import EmptyPatternListError
from formflow.strategies.choices.auto_text import DEFAULT_INLINE_THRESHOLD
from formflow.strategies.choices.registry import render_choices, render_list
from formflow.strategies.template_engine.cascade import DefaultCascade
from formflow.strategies.template_engine.language import normalize_case
from formflow.strategies.template_engine.models import (
    CHOICES_MARKER,
    FieldDeclaration,
    Prompt,
    TemplateConfig,
    TemplateUsage,
)
from formflow.strategies.template_engine.selector import PatternSelector

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{(&|\|\||\[\])?\}")
_CHOICES_BETWEEN_WORDS = re.compile(r"(?<=\S)[ \t]*\{\|\|\}[ \t]*(?=\S)")
_CHOICES_AT_EDGE = re.compile(r"[ \t]*\{\|\|\}[ \t]*")


def _drop_choices_marker(pattern: str) -> str:
    """Remove the choices marker together with the spacing around it."""
    pattern = _CHOICES_BETWEEN_WORDS.sub(" ", pattern)
    return _CHOICES_AT_EDGE.sub("", pattern).strip()


class PromptFormatter:
    """Turns a resolved record into the text of one prompt.

    Example:
        ```python
        formatter = PromptFormatter(PatternSelector(ThreadSafeRandomSource()), cascade)
        formatter.format(prompt, field="colour", choices=["Red", "Green"])
        # 'Please select a colour (Red or Green)'
        ```
    """

    def __init__(
        self,
        selector: PatternSelector,
        cascade: DefaultCascade,
        auto_text_threshold: int = DEFAULT_INLINE_THRESHOLD,
    ) -> None:
        """Initialize the formatter.

        Args:
            selector: Picks the pattern for each prompt.
            cascade: Resolves field prompts against scope and global defaults.
            auto_text_threshold: Label count from which AUTO_TEXT renders per line.
        """
        self._selector = selector
        self._cascade = cascade
        self._auto_text_threshold = auto_text_threshold

    def format(
        self,
        config: TemplateConfig,
        field: str | None = None,
        value: str | None = None,
        values: list[str] | None = None,
        choices: list[str] | None = None,
    ) -> str:
        """Select a pattern from the record and fill in its placeholders.

        Args:
            config: Resolved record to format.
            field: Description substituted for ``{&}``.
            value: Current value substituted for ``{}``.
            values: Values substituted for ``{[]}``.
            choices: Choice labels substituted for ``{||}``.

        Returns:
            The prompt text.

        Raises:
            EmptyPatternListError: If the record has no patterns.
        """
        pattern = self._selector.select(config)
        rendered_choices: str | list[str] | None = None
        if choices is not None and CHOICES_MARKER in pattern:
            rendered_choices = render_choices(
                choices, config, auto_text_threshold=self._auto_text_threshold
            )
            if isinstance(rendered_choices, list):
                # Laid out by the channel layer.
                pattern = _drop_choices_marker(pattern)

        def substitute(match: re.Match[str]) -> str:
            token = match.group(1)
            if token == "&" and field is not None:
                return normalize_case(field, config.field_case)
            if token is None and value is not None:
                return normalize_case(value, config.value_case)
            if token == "[]" and values is not None:
                return render_list(values, config)
            if token == "||" and isinstance(rendered_choices, str):
                return rendered_choices
            return match.group(0)

        return _PLACEHOLDER.sub(substitute, pattern)

    def prompt_for(
        self,
        declaration: FieldDeclaration,
        usage: TemplateUsage = TemplateUsage.STRING,
        type_prompt: TemplateConfig | None = None,
        value: str | None = None,
        choices: list[str] | None = None,
    ) -> str:
        """Resolve and format the prompt asking for a field.

        The field's own prompt is used when declared, otherwise the template
        for ``usage`` (field-level override first, then the global one).

        Args:
            declaration: The field being asked about.
            usage: Template usage to fall back to when no prompt is declared.
            type_prompt: Type-level record the field prompt inherits from.
            value: Current value of the field, if any.
            choices: Choice labels for enumerated fields.

        Returns:
            The prompt text.

        Raises:
            EmptyPatternListError: If neither a prompt nor a template exists.
            UnresolvedTemplateError: If the cascade leaves options unset.
        """
        prompt: TemplateConfig | None = declaration.prompt
        if prompt is None:
            template = self._cascade.resolve_template(usage, declaration.template(usage))
            if template is None:
                logger.error(f"No prompt or {usage.value} template for field {declaration.name}")
                raise EmptyPatternListError(
                    f"No prompt declared for field {declaration.name!r} "
                    f"and no template registered for usage {usage.value!r}"
                )
            prompt = Prompt.from_template(template)
        else:
            self._cascade.resolve(prompt, type_prompt)

        return self.format(
            prompt,
            field=declaration.description,
            value=value,
            choices=choices,
        )
