"""Abstract base classes and shared value types."""

from formflow.interfaces.choices import BaseChoiceRenderer
from formflow.interfaces.errors import (
    EmptyPatternListError,
    InvalidPhraseLengthError,
    TemplateConfigurationError,
    UnresolvedTemplateError,
)
from formflow.interfaces.randomness import BaseRandomSource
from formflow.interfaces.terms import (
    BaseTermCompiler,
    PrebuiltMatcher,
    RawPhrase,
    TermAlternative,
    TermMatcher,
)

__all__ = [
    "BaseChoiceRenderer",
    "BaseRandomSource",
    "BaseTermCompiler",
    "EmptyPatternListError",
    "InvalidPhraseLengthError",
    "PrebuiltMatcher",
    "RawPhrase",
    "TemplateConfigurationError",
    "TermAlternative",
    "TermMatcher",
    "UnresolvedTemplateError",
]
