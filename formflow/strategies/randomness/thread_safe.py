"""Thread-safe random source for pattern selection.

A single generator is shared by every selector in the process; the lock is
held only for the one draw.
"""

import logging
import random
import threading

from formflow.interfaces.randomness import BaseRandomSource

logger = logging.getLogger(__name__)


class ThreadSafeRandomSource(BaseRandomSource):
    """Uniform index source guarded by a lock.

    Attributes:
        seed: Optional seed, for reproducible runs.
    """

    def __init__(self, seed: int | None = None) -> None:
        """Initialize the random source.

        Args:
            seed: Seed for the underlying generator. None seeds from the OS.
        """
        self._generator = random.Random(seed)
        self._lock = threading.Lock()
        logger.debug(f"ThreadSafeRandomSource initialized: seeded={seed is not None}")

    def next_index(self, upper: int) -> int:
        """Draw an index in [0, upper)."""
        if upper < 1:
            raise ValueError(f"upper must be at least 1, got {upper}")
        with self._lock:
            return self._generator.randrange(upper)


class SeededRandomSource(ThreadSafeRandomSource):
    """Deterministic random source for tests and reproducible transcripts."""

    def __init__(self, seed: int = 0) -> None:
        super().__init__(seed=seed)
