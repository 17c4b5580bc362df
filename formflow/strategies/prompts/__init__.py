"""Prompt text generation from resolved template records."""

from formflow.strategies.prompts.formatter import PromptFormatter

__all__ = [
    "PromptFormatter",
]
