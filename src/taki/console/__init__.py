"""Terminal front end for local TAKI games."""

from taki.console.display import StateRenderer, StatsRenderer, render_card
from taki.console.input import ConsoleIO

__all__ = [
    "StateRenderer",
    "StatsRenderer",
    "render_card",
    "ConsoleIO",
]
