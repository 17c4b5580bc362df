"""Phrase-to-matcher compiler.

Turns the terms declared on a field or value into regular expressions the
recognizer runs against free-form input. Plain phrases are lowercased,
escaped and anchored at word boundaries so "cat" never matches inside
"category". With a maximum phrase length, multi-word phrases are also split
into their shorter contiguous word runs so that "good morning" is recognized
from "good" or "morning" alone.
"""

import logging
import re
from collections.abc import Sequence

from formflow.interfaces.errors import InvalidPhraseLengthError
from formflow.interfaces.terms import (
    BaseTermCompiler,
    PrebuiltMatcher,
    RawPhrase,
    TermAlternative,
    TermMatcher,
)

logger = logging.getLogger(__name__)

# Anchors that reject matches running into neighbouring word characters.
# Unlike \b these also hold when the term starts or ends with punctuation.
_WORD_START = r"(?<!\w)"
_WORD_END = r"(?!\w)"

# A term starting with this is taken to be a hand-written expression.
GROUPING_MARKER = "("


def classify_alternative(alternative: str | TermAlternative) -> TermAlternative:
    """Tag a declared alternative as a raw phrase or a prebuilt matcher.

    Tagged alternatives are returned unchanged. Plain strings starting with
    the grouping marker are prebuilt matchers; anything else is a phrase.
    """
    if isinstance(alternative, (RawPhrase, PrebuiltMatcher)):
        return alternative
    if alternative.startswith(GROUPING_MARKER):
        return PrebuiltMatcher(alternative)
    return RawPhrase(alternative)


def word_runs(words: Sequence[str], max_length: int) -> list[list[str]]:
    """Return every contiguous run of 1..max_length words.

    Runs are ordered by length, then by start position:

    >>> word_runs(["good", "morning"], 2)
    [['good'], ['morning'], ['good', 'morning']]
    """
    runs = []
    for length in range(1, min(len(words), max_length) + 1):
        for start in range(len(words) - length + 1):
            runs.append(list(words[start:start + length]))
    return runs


def phrase_pattern(words: Sequence[str]) -> str:
    """Build an anchored expression matching the words separated by whitespace."""
    body = r"\s+".join(re.escape(word) for word in words)
    return f"{_WORD_START}{body}{_WORD_END}"


class PhraseTermCompiler(BaseTermCompiler):
    """Compiles phrases into word-boundary anchored, case-insensitive matchers."""

    def expand(
        self,
        alternatives: Sequence[TermAlternative],
        max_phrase_length: int,
    ) -> list[TermMatcher]:
        """Expand each phrase into bounded word runs.

        Prebuilt matchers pass through unmodified. Nothing is de-duplicated.

        Args:
            alternatives: Declared alternatives in declaration order.
            max_phrase_length: Longest word run to generate.

        Returns:
            Matchers for every run of every alternative, in declaration order.

        Raises:
            InvalidPhraseLengthError: If max_phrase_length < 1.
        """
        if max_phrase_length < 1:
            raise InvalidPhraseLengthError(
                f"max_phrase_length must be at least 1, got {max_phrase_length}"
            )

        matchers: list[TermMatcher] = []
        for alternative in alternatives:
            matchers.extend(self._matchers_for(alternative, max_phrase_length))

        logger.debug(
            f"Expanded {len(alternatives)} alternatives into {len(matchers)} matchers "
            f"(max_phrase_length={max_phrase_length})"
        )
        return matchers

    def compile(self, alternatives: Sequence[TermAlternative]) -> list[TermMatcher]:
        """Compile each alternative into exactly one matcher."""
        matchers: list[TermMatcher] = []
        for alternative in alternatives:
            matchers.extend(self._matchers_for(alternative, None))
        return matchers

    def _matchers_for(
        self, alternative: TermAlternative, max_phrase_length: int | None
    ) -> list[TermMatcher]:
        """Build the matchers for one alternative.

        A raw phrase yields one matcher per word run, or a single matcher for
        the whole phrase when max_phrase_length is None.
        """
        match alternative:
            case PrebuiltMatcher(pattern=pattern):
                return [TermMatcher(source=pattern, pattern=pattern, prebuilt=True)]
            case RawPhrase(text=text):
                words = text.lower().split()
                if max_phrase_length is None:
                    runs = [words] if words else []
                else:
                    runs = word_runs(words, max_phrase_length)
                return [TermMatcher(source=" ".join(run), pattern=phrase_pattern(run)) for run in runs]
            case _:
                raise TypeError(
                    f"Expected RawPhrase or PrebuiltMatcher, got {type(alternative).__name__}"
                )


_default_compiler = PhraseTermCompiler()


def expand_terms(
    alternatives: Sequence[str | TermAlternative],
    max_phrase_length: int,
) -> list[TermMatcher]:
    """Expand declared alternatives with the default compiler.

    Example:
        ```python
        [m.source for m in expand_terms(["good morning"], 2)]
        # ['good', 'morning', 'good morning']
        ```
    """
    return _default_compiler.expand(
        [classify_alternative(alt) for alt in alternatives], max_phrase_length
    )
