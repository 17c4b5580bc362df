"""Helpers shared by the choice renderers."""

from formflow.interfaces.errors import UnresolvedTemplateError
from formflow.strategies.template_engine.language import normalize_case
from formflow.strategies.template_engine.models import TemplateConfig


def normalized_labels(labels: list[str], config: TemplateConfig) -> list[str]:
    """Apply the record's choice case to every label."""
    return [normalize_case(label, config.choice_case) for label in labels]


def require_option(config: TemplateConfig, name: str) -> str:
    """Return a string option, failing if the cascade never set it."""
    value = getattr(config, name)
    if value is None:
        raise UnresolvedTemplateError([name])
    return value
