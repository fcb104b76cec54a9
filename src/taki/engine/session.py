"""Game session: setup, turn loop and end-of-game reporting."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence

from taki.engine.resolver import Outcome, resolve_play
from taki.engine.stats import StatEntry, Statistics
from taki.engine.turns import TurnOrder
from taki.model.cards import Card, Color, random_normal_card
from taki.model.hand import Hand

logger = logging.getLogger(__name__)

MAX_NAME_LEN = 20


class PlayerIO(Protocol):
    """What the engine needs from whoever sits at the terminal."""

    def present_state(self, discard_top: Card, player: "Player") -> None:
        """Show the discard top and the active player's hand."""
        ...

    def request_card_choice(self, lower: int, upper: int, in_sequence: bool = False) -> int:
        """Ask for a number in ``lower..upper``. Range is checked by the engine.

        ``lower`` means "draw a card", or "end the sequence" when ``in_sequence``.
        """
        ...

    def request_color_choice(self) -> Color:
        ...

    def request_player_count(self) -> int:
        ...

    def request_player_name(self, index: int) -> str:
        ...

    def report_invalid_choice(self, reason: str) -> None:
        ...

    def report_winner(self, name: str) -> None:
        ...

    def report_statistics(self, entries: Sequence[StatEntry]) -> None:
        ...


@dataclass
class SessionConfig:
    """Configuration for a game session."""

    seed: Optional[int] = None
    start_cards: int = 4
    min_players: int = 2
    max_name_len: int = MAX_NAME_LEN

    def __post_init__(self):
        """Generate seed if not provided, check limits."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)
        if not 1 <= self.max_name_len <= MAX_NAME_LEN:
            raise ValueError(f"max_name_len must be in 1..{MAX_NAME_LEN}, got {self.max_name_len}")


@dataclass
class Player:
    """A seated player and their cards."""

    name: str
    hand: Hand = field(default_factory=Hand)

    def __post_init__(self):
        if len(self.name) > MAX_NAME_LEN:
            raise ValueError(f"Player name longer than {MAX_NAME_LEN} characters: {self.name!r}")


class GameSession:
    """Runs one game of TAKI from seating to statistics."""

    def __init__(self, io: PlayerIO, config: Optional[SessionConfig] = None):
        self.io = io
        self.config = config or SessionConfig()
        self.seed = self.config.seed
        self.rng = random.Random(self.seed)

        self.players: list[Player] = []
        self.turns: Optional[TurnOrder] = None
        self.discard_top: Optional[Card] = None
        self.stats = Statistics()
        self.winner: Optional[Player] = None

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def current_player(self) -> Player:
        return self.players[self.turns.active_index]

    # Setup

    def setup(self) -> None:
        """Ask for the table and deal."""
        count = self.io.request_player_count()
        while count < self.config.min_players:
            self.io.report_invalid_choice(f"At least {self.config.min_players} players are needed")
            count = self.io.request_player_count()

        names = [self._clean_name(self.io.request_player_name(i), i) for i in range(count)]
        self.seat_players(names)

    def seat_players(self, names: Sequence[str]) -> None:
        """Seat players, flip the first discard and deal starting hands."""
        if len(names) < self.config.min_players:
            raise ValueError(f"Need at least {self.config.min_players} players, got {len(names)}")

        self.discard_top = random_normal_card(self.rng)
        self.players = [Player(name=name) for name in names]
        self.turns = TurnOrder(len(self.players))

        for player in self.players:
            for _ in range(self.config.start_cards):
                self.draw_card(player)

        logger.info(f"Seated {self.player_count} players (seed {self.seed}), first card {self.discard_top}")

    def _clean_name(self, raw: str, index: int) -> str:
        name = raw.strip()[: self.config.max_name_len]
        return name or f"Player {index + 1}"

    # Play

    def draw_card(self, player: Player) -> Card:
        """Give ``player`` a fresh random card and count it."""
        card = player.hand.draw(self.rng)
        self.stats.record(card)
        logger.debug(f"{player.name} draws {card}")
        return card

    def play_turn(self) -> Outcome:
        """Let the active player draw or play, re-prompting until the move is valid."""
        if self.turns is None:
            raise RuntimeError("Players not seated")

        self.turns.normalize()
        player = self.current_player
        self.io.present_state(self.discard_top, player)

        while True:
            choice = self.io.request_card_choice(0, player.hand.size)
            if choice == 0:
                self.draw_card(player)
                outcome = Outcome.played()
                break

            outcome = resolve_play(self, choice - 1)
            if not outcome.is_rejected:
                break
            self.io.report_invalid_choice(outcome.reason)

        if outcome.is_won:
            self.winner = player
            logger.info(f"{player.name} wins")
        else:
            self.turns.advance()
        return outcome

    def run(self) -> Player:
        """Play a full game and report the result.

        Returns:
            The winning player
        """
        if not self.players:
            self.setup()

        while self.winner is None:
            self.play_turn()

        self.finish()
        return self.winner

    def finish(self) -> None:
        """Sort statistics and hand the results to the IO layer."""
        self.stats.sort()
        self.io.report_winner(self.winner.name)
        self.io.report_statistics(self.stats.entries)
