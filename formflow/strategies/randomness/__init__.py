"""Concrete randomness providers."""

from formflow.strategies.randomness.thread_safe import SeededRandomSource, ThreadSafeRandomSource

__all__ = [
    "SeededRandomSource",
    "ThreadSafeRandomSource",
]
