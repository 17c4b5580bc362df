"""Template engine strategies.

Implements the template declaration records, the default cascade that
resolves them, and pattern selection.
"""

from formflow.strategies.template_engine.cascade import DefaultCascade, apply_defaults
from formflow.strategies.template_engine.language import join_with_last, normalize_case
from formflow.strategies.template_engine.models import (
    CaseNormalization,
    ChoiceStyle,
    Describe,
    FeedbackOptions,
    FieldDeclaration,
    NumericConstraint,
    PatternConstraint,
    Prompt,
    Template,
    TemplateConfig,
    TemplateUsage,
)
from formflow.strategies.template_engine.selector import PatternSelector

__all__ = [
    "CaseNormalization",
    "ChoiceStyle",
    "DefaultCascade",
    "Describe",
    "FeedbackOptions",
    "FieldDeclaration",
    "NumericConstraint",
    "PatternConstraint",
    "PatternSelector",
    "Prompt",
    "Template",
    "TemplateConfig",
    "TemplateUsage",
    "apply_defaults",
    "join_with_last",
    "normalize_case",
]
