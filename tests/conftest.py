"""Shared fixtures: a scripted stand-in for the terminal."""

from __future__ import annotations

from typing import Optional, Sequence

import pytest

from taki.engine.session import GameSession, Player, SessionConfig
from taki.engine.stats import StatEntry
from taki.model.cards import Card, Color
from taki.model.hand import Hand


class ScriptedIO:
    """PlayerIO that replays prepared answers and records what it was told."""

    def __init__(
        self,
        choices: Sequence[int] = (),
        colors: Sequence[Color] = (),
        player_counts: Sequence[int] = (),
        names: Sequence[str] = (),
    ):
        self.choices = list(choices)
        self.colors = list(colors)
        self.player_counts = list(player_counts)
        self.names = list(names)

        self.presented: list[tuple[Card, str]] = []
        self.prompts: list[tuple[int, int, bool]] = []
        self.invalid: list[str] = []
        self.winner: Optional[str] = None
        self.statistics: Optional[list[StatEntry]] = None

    def present_state(self, discard_top: Card, player: Player) -> None:
        self.presented.append((discard_top, player.name))

    def request_card_choice(self, lower: int, upper: int, in_sequence: bool = False) -> int:
        self.prompts.append((lower, upper, in_sequence))
        assert self.choices, "Ran out of scripted card choices"
        return self.choices.pop(0)

    def request_color_choice(self) -> Color:
        assert self.colors, "Ran out of scripted colors"
        return self.colors.pop(0)

    def request_player_count(self) -> int:
        assert self.player_counts, "Ran out of scripted player counts"
        return self.player_counts.pop(0)

    def request_player_name(self, index: int) -> str:
        assert self.names, "Ran out of scripted names"
        return self.names.pop(0)

    def report_invalid_choice(self, reason: str) -> None:
        self.invalid.append(reason)

    def report_winner(self, name: str) -> None:
        self.winner = name

    def report_statistics(self, entries: Sequence[StatEntry]) -> None:
        self.statistics = list(entries)


@pytest.fixture
def make_session():
    """Factory for a seated session with fixed hands and discard top."""

    def _make(
        hands: Sequence[Sequence[Card]],
        top: Card = Card.normal(3, Color.RED),
        choices: Sequence[int] = (),
        colors: Sequence[Color] = (),
        seed: int = 1,
    ) -> GameSession:
        io = ScriptedIO(choices=choices, colors=colors)
        session = GameSession(io, SessionConfig(seed=seed))
        session.seat_players([f"P{i}" for i in range(len(hands))])
        for player, cards in zip(session.players, hands):
            player.hand = Hand()
            for card in cards:
                player.hand.add(card)
        session.discard_top = top
        return session

    return _make


@pytest.fixture
def scripted_io():
    """Factory for a bare ScriptedIO."""
    return ScriptedIO
