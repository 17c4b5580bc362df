"""Language helpers for display text: case normalization and list joining."""

import re

from formflow.strategies.template_engine.models import CaseNormalization

_WORD_START = re.compile(r"(^|\s)(\w)")


def normalize_case(text: str, case: CaseNormalization) -> str:
    """Apply a case normalization to a piece of display text.

    INITIAL_UPPER lowercases the text and capitalizes the first letter of
    every word. NONE and an unresolved DEFAULT leave the text unchanged.

    Args:
        text: The text to normalize.
        case: The normalization to apply.

    Returns:
        The normalized text.
    """
    match case:
        case CaseNormalization.LOWER:
            return text.lower()
        case CaseNormalization.UPPER:
            return text.upper()
        case CaseNormalization.INITIAL_UPPER:
            return _WORD_START.sub(
                lambda m: m.group(1) + m.group(2).upper(), text.lower()
            )
        case _:
            return text


def join_with_last(items: list[str], separator: str, last_separator: str) -> str:
    """Join items, using last_separator between the final pair.

    >>> join_with_last(["Red", "Green", "Blue"], ", ", " or ")
    'Red, Green or Blue'
    """
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return separator.join(items[:-1]) + last_separator + items[-1]
