"""Term compilation: declared phrases to recognizer matchers."""

from formflow.strategies.terms.compiler import (
    PhraseTermCompiler,
    classify_alternative,
    expand_terms,
)
from formflow.strategies.terms.spec import TermSpec

__all__ = [
    "PhraseTermCompiler",
    "TermSpec",
    "classify_alternative",
    "expand_terms",
]
