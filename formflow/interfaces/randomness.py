"""Abstract randomness capability used by the pattern selector.

Pattern selection only needs "draw a uniform index in [0, n)", so that is
the whole interface. Production wiring supplies a thread-safe generator,
tests supply a seeded or scripted one.
"""

from abc import ABC, abstractmethod


class BaseRandomSource(ABC):
    """Abstract base class for randomness providers.

    Example:
        ```python
        class FixedRandomSource(BaseRandomSource):
            def next_index(self, upper: int) -> int:
                return 0
        ```
    """

    @abstractmethod
    def next_index(self, upper: int) -> int:
        """Draw a uniformly distributed index.

        Args:
            upper: Exclusive upper bound; must be at least 1.

        Returns:
            An integer in the range [0, upper).

        Raises:
            ValueError: If upper is less than 1.
        """
        ...
