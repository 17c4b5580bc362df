"""Pattern selection.

Picks one of a record's candidate patterns so repeated prompts do not read
the same every time.
"""

import logging

from formflow.interfaces.errors import EmptyPatternListError
from formflow.interfaces.randomness import BaseRandomSource
from formflow.strategies.template_engine.models import TemplateConfig

logger = logging.getLogger(__name__)


class PatternSelector:
    """Selects a pattern from a template record.

    A single pattern is returned as-is without touching the random source;
    with several, each is equally likely.
    """

    def __init__(self, random_source: BaseRandomSource) -> None:
        """Initialize the selector.

        Args:
            random_source: Provider of uniform indices, shared across threads.
        """
        self._random_source = random_source

    def select(self, record: TemplateConfig) -> str:
        """Return one pattern from the record.

        Args:
            record: The template record to select from.

        Returns:
            One of the record's patterns.

        Raises:
            EmptyPatternListError: If the record declares no patterns.
        """
        patterns = record.patterns
        if not patterns:
            raise EmptyPatternListError("Cannot select a pattern from an empty pattern list")
        if len(patterns) == 1:
            return patterns[0]

        choice = self._random_source.next_index(len(patterns))
        logger.debug(f"Selected pattern {choice + 1} of {len(patterns)}")
        return patterns[choice]
