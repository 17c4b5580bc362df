"""Concrete strategy implementations."""

from formflow.strategies.template_engine import (
    DefaultCascade,
    PatternSelector,
    TemplateConfig,
)
from formflow.strategies.choices import (
    render_choices,
    render_list,
)
from formflow.strategies.terms import (
    PhraseTermCompiler,
    TermSpec,
    expand_terms,
)
from formflow.strategies.randomness import (
    SeededRandomSource,
    ThreadSafeRandomSource,
)
from formflow.strategies.prompts import (
    PromptFormatter,
)

__all__ = [
    "DefaultCascade",
    "PatternSelector",
    "PhraseTermCompiler",
    "PromptFormatter",
    "SeededRandomSource",
    "TemplateConfig",
    "TermSpec",
    "ThreadSafeRandomSource",
    "expand_terms",
    "render_choices",
    "render_list",
]
