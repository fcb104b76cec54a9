"""Console player: reads choices from the keyboard, prints the table."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from taki.console.display import StateRenderer, StatsRenderer
from taki.engine.errors import GameAborted
from taki.engine.session import Player
from taki.engine.stats import StatEntry
from taki.model.cards import Card, Color

logger = logging.getLogger(__name__)

WELCOME = "************  Welcome to TAKI game !!! ***********"

DRAW_ACTION = "take a card from the deck"
FINISH_ACTION = "finish your turn"

# Menu order of the color prompt
COLOR_MENU = {
    1: Color.YELLOW,
    2: Color.RED,
    3: Color.BLUE,
    4: Color.GREEN,
}


class ConsoleIO:
    """Handles all terminal input and output for a local game."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.state_renderer = StateRenderer()
        self.stats_renderer = StatsRenderer()

    def _read(self, prompt: str = "") -> str:
        try:
            return self.input_fn(prompt).strip()
        except (EOFError, KeyboardInterrupt) as e:
            raise GameAborted("Input closed") from e

    def _read_int(self, prompt: str) -> int:
        """Keep asking until the player types a whole number."""
        self.output_fn(prompt)
        while True:
            raw = self._read()
            try:
                return int(raw)
            except ValueError:
                self.output_fn(f"Invalid input '{raw}'. Enter a number.")

    def welcome(self) -> None:
        self.output_fn(WELCOME)

    def present_state(self, discard_top: Card, player: Player) -> None:
        self.output_fn(self.state_renderer.render(discard_top, player))

    def request_card_choice(self, lower: int, upper: int, in_sequence: bool = False) -> int:
        """Ask for a card number; ``lower`` (0) means draw, or finish a sequence.

        The range is only shown, not enforced: the engine checks it.
        """
        zero_action = FINISH_ACTION if in_sequence else DRAW_ACTION
        return self._read_int(
            f"Please enter {lower} if you want to {zero_action}\n"
            f"or {lower + 1}-{upper} if you want to put one of your cards in the middle:"
        )

    def request_color_choice(self) -> Color:
        menu = "\n".join(f"{n} - {color.name.capitalize()}" for n, color in COLOR_MENU.items())
        choice = self._read_int(f"Please enter your color choice:\n{menu}")
        while choice not in COLOR_MENU:
            self.output_fn(f"Invalid color {choice}. Enter 1-{len(COLOR_MENU)}.")
            choice = self._read_int("Please enter your color choice:")
        return COLOR_MENU[choice]

    def request_player_count(self) -> int:
        return self._read_int("Please enter the number of players:")

    def request_player_name(self, index: int) -> str:
        self.output_fn(f"Please enter the first name of player #{index + 1}:")
        raw = self._read()
        # First name only
        return raw.split()[0] if raw else ""

    def report_invalid_choice(self, reason: str) -> None:
        logger.debug(f"Rejected: {reason}")
        self.output_fn(f"Invalid choice! {reason}. Try again.")

    def report_winner(self, name: str) -> None:
        self.output_fn(f"\nThe winner is... {name}! Congratulations!")

    def report_statistics(self, entries: Sequence[StatEntry]) -> None:
        self.output_fn(self.stats_renderer.render(entries))
