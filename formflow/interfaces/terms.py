"""Term compilation interfaces.

Defines the tagged term alternatives a field can declare and the matcher
objects the term compiler hands to the recognizer.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

from formflow.interfaces.errors import TemplateConfigurationError


@dataclass(frozen=True)
class RawPhrase:
    """A plain word or phrase that the compiler anchors at word boundaries.

    Attributes:
        text: The phrase as authored, e.g. "good morning".
    """

    text: str


@dataclass(frozen=True)
class PrebuiltMatcher:
    """A hand-written regular expression used verbatim.

    Boundary handling is entirely the author's responsibility.

    Attributes:
        pattern: The regular expression source.
    """

    pattern: str


TermAlternative = RawPhrase | PrebuiltMatcher


@dataclass(frozen=True)
class TermMatcher:
    """A compiled matcher for one term.

    Attributes:
        source: The phrase (or prebuilt pattern) this matcher was built from.
        pattern: The regular expression source used for matching.
        prebuilt: True when the pattern was supplied verbatim by the author.
    """

    source: str
    pattern: str
    prebuilt: bool = False
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.pattern, re.IGNORECASE)
        except re.error as e:
            raise TemplateConfigurationError(
                f"Invalid term pattern {self.pattern!r}: {e}"
            ) from e
        object.__setattr__(self, "regex", compiled)

    def search(self, text: str) -> re.Match[str] | None:
        """Find the first occurrence of this term in free-form text."""
        return self.regex.search(text)

    def matches(self, text: str) -> bool:
        """Return True if the term occurs anywhere in the text."""
        return self.regex.search(text) is not None


class BaseTermCompiler(ABC):
    """Abstract base class for term compilation strategies.

    Turns declared alternatives into the flat list of matchers used by the
    recognizer for a single field or value.
    """

    @abstractmethod
    def expand(
        self,
        alternatives: Sequence[TermAlternative],
        max_phrase_length: int,
    ) -> list[TermMatcher]:
        """Expand phrases into bounded word runs and compile them.

        Args:
            alternatives: Declared alternatives in declaration order.
            max_phrase_length: Longest word run to generate; must be >= 1.

        Returns:
            Matchers in declaration order, duplicates preserved.

        Raises:
            InvalidPhraseLengthError: If max_phrase_length < 1.
        """
        ...

    @abstractmethod
    def compile(self, alternatives: Sequence[TermAlternative]) -> list[TermMatcher]:
        """Compile alternatives as final patterns, one matcher each.

        Args:
            alternatives: Declared alternatives in declaration order.

        Returns:
            One matcher per alternative.
        """
        ...
