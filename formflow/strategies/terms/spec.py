"""Term declarations for fields and values."""

from pydantic import BaseModel, ConfigDict, Field

from formflow.interfaces.errors import InvalidPhraseLengthError
from formflow.interfaces.terms import BaseTermCompiler, TermAlternative, TermMatcher
from formflow.strategies.terms.compiler import PhraseTermCompiler, classify_alternative


class TermSpec(BaseModel):
    """The alternatives used to recognize one field or value.

    Declarations are immutable: compiling returns matchers and never rewrites
    the declared alternatives, so compiling twice yields the same result.
    """

    model_config = ConfigDict(frozen=True)

    alternatives: tuple[TermAlternative, ...]
    max_phrase: int | None = Field(
        default=None,
        ge=1,
        description="Longest word run to generate; None treats alternatives as final",
    )

    @classmethod
    def declare(cls, *alternatives: str | TermAlternative) -> "TermSpec":
        """Declare terms, tagging plain strings as phrases or prebuilt matchers."""
        return cls(alternatives=tuple(classify_alternative(alt) for alt in alternatives))

    def with_max_phrase(self, max_phrase: int) -> "TermSpec":
        """Return a copy that expands phrases into runs of up to max_phrase words."""
        if max_phrase < 1:
            raise InvalidPhraseLengthError(f"max_phrase must be at least 1, got {max_phrase}")
        return self.model_copy(update={"max_phrase": max_phrase})

    def compile(
        self,
        max_phrase_length: int | None = None,
        compiler: BaseTermCompiler | None = None,
    ) -> list[TermMatcher]:
        """Compile the declared alternatives into matchers.

        Args:
            max_phrase_length: Overrides the declared max_phrase when given.
            compiler: Compiler to use; defaults to PhraseTermCompiler.

        Returns:
            The matchers for this declaration.
        """
        compiler = compiler or PhraseTermCompiler()
        length = max_phrase_length if max_phrase_length is not None else self.max_phrase
        if length is None:
            return compiler.compile(self.alternatives)
        return compiler.expand(self.alternatives, length)
