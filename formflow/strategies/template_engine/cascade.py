"""Default cascade for template records.

A record declared on a field only sets the options its author cared about.
Everything else is pulled from the type-level record and finally from the
global defaults, without ever overwriting an option that was set.
"""

import logging
from typing import TYPE_CHECKING

from formflow.interfaces.errors import EmptyPatternListError, UnresolvedTemplateError
from formflow.strategies.template_engine.models import (
    TEMPLATE_OPTIONS,
    Template,
    TemplateConfig,
    TemplateUsage,
    is_unset,
)

if TYPE_CHECKING:
    from formflow.core.config import Settings

logger = logging.getLogger(__name__)


def apply_defaults(specific: TemplateConfig, general: TemplateConfig) -> None:
    """Fill the unset options of a record from a more general one.

    Mutates ``specific`` in place. Options already set on ``specific`` are
    left alone, so applying the same ``general`` record again is a no-op.

    Args:
        specific: The record being resolved.
        general: The fallback record from the enclosing scope.
    """
    for name in TEMPLATE_OPTIONS:
        if is_unset(getattr(specific, name)):
            setattr(specific, name, getattr(general, name))


class DefaultCascade:
    """Resolves records against scope records and the global defaults.

    Holds the global default record plus the globally registered templates
    for each built-in usage.

    Example:
        ```python
        cascade = DefaultCascade.from_settings(get_settings())
        prompt = Prompt.of("What {&} would you like? {||}")
        cascade.resolve(prompt, type_level_prompt)
        ```
    """

    def __init__(
        self,
        global_defaults: TemplateConfig,
        templates: list[Template] | None = None,
    ) -> None:
        """Initialize the cascade.

        Args:
            global_defaults: Record supplying every option; must be resolved.
            templates: Globally registered templates, one per usage.

        Raises:
            UnresolvedTemplateError: If global_defaults leaves options unset.
        """
        unresolved = global_defaults.unresolved_options()
        if unresolved:
            logger.error(f"Global template defaults are incomplete: {unresolved}")
            raise UnresolvedTemplateError(unresolved)

        self._global_defaults = global_defaults
        self._templates: dict[TemplateUsage, Template] = {}
        for template in templates or []:
            self.register(template)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "DefaultCascade":
        """Build a cascade whose global defaults come from settings."""
        global_defaults = TemplateConfig(
            allow_default=settings.default_allow_default,
            choice_case=settings.default_choice_case,
            choice_format=settings.default_choice_format,
            choice_last_separator=settings.default_choice_last_separator,
            choice_parens=settings.default_choice_parens,
            choice_separator=settings.default_choice_separator,
            choice_style=settings.default_choice_style,
            feedback=settings.default_feedback,
            field_case=settings.default_field_case,
            last_separator=settings.default_last_separator,
            separator=settings.default_separator,
            value_case=settings.default_value_case,
            localizable=False,
        )
        return cls(global_defaults)

    @property
    def global_defaults(self) -> TemplateConfig:
        return self._global_defaults

    def register(self, template: Template) -> None:
        """Register (or replace) the global template for its usage.

        The template is resolved against the global defaults on registration.
        """
        apply_defaults(template, self._global_defaults)
        if template.usage in self._templates:
            logger.debug(f"Replacing global template for usage {template.usage.value}")
        self._templates[template.usage] = template

    def template(self, usage: TemplateUsage) -> Template | None:
        """Return the global template registered for a usage."""
        return self._templates.get(usage)

    def resolve(self, record: TemplateConfig, *scopes: TemplateConfig | None) -> TemplateConfig:
        """Resolve a record through its enclosing scopes.

        Scopes are applied from most specific to most general, then the
        global defaults. ``None`` scopes are skipped so callers can pass an
        optional type-level record directly.

        Args:
            record: The record to resolve, mutated in place.
            *scopes: Enclosing scope records, most specific first.

        Returns:
            The same record, now fully resolved.

        Raises:
            UnresolvedTemplateError: If any option is still unset.
            EmptyPatternListError: If the record declares no patterns.
        """
        for scope in scopes:
            if scope is not None:
                apply_defaults(record, scope)
        apply_defaults(record, self._global_defaults)

        unresolved = record.unresolved_options()
        if unresolved:
            raise UnresolvedTemplateError(unresolved)
        if not record.patterns:
            logger.error("Resolved a template record with no patterns")
            raise EmptyPatternListError("Template record declares no patterns")
        return record

    def resolve_template(
        self, usage: TemplateUsage, *overrides: Template | None
    ) -> Template | None:
        """Resolve the template for a usage, preferring the first override given.

        The chosen override is resolved against any remaining overrides and
        then the global template for the usage.
        """
        chain = [t for t in overrides if t is not None]
        global_template = self._templates.get(usage)
        if not chain:
            return global_template
        if global_template is not None:
            chain.append(global_template)
        return self.resolve(chain[0], *chain[1:])
