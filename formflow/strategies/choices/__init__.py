"""Choice rendering strategies, one per family of choice styles."""

from formflow.strategies.choices.auto_text import AutoTextChoiceRenderer
from formflow.strategies.choices.inline import InlineChoiceRenderer
from formflow.strategies.choices.per_line import PerLineChoiceRenderer
from formflow.strategies.choices.presentation import PresentationChoiceRenderer
from formflow.strategies.choices.registry import render_choices, render_list, renderer_for

__all__ = [
    "AutoTextChoiceRenderer",
    "InlineChoiceRenderer",
    "PerLineChoiceRenderer",
    "PresentationChoiceRenderer",
    "render_choices",
    "render_list",
    "renderer_for",
]
