"""Turn order: active seat and play direction."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """Direction of play around the table."""

    FORWARD = 1
    BACKWARD = -1

    def flipped(self) -> "Direction":
        return Direction.BACKWARD if self is Direction.FORWARD else Direction.FORWARD


class TurnOrder:
    """Tracks whose turn it is.

    The index may leave ``0..player_count-1`` after a skip or a Plus step
    back; ``normalize()`` at the start of the next turn brings it back.
    The wrap happens then and not earlier, so a skip over the table edge
    lands on the right seat even if the direction flips in between.
    """

    def __init__(self, player_count: int):
        if player_count < 1:
            raise ValueError(f"Need at least one player, got {player_count}")
        self.player_count = player_count
        self._index = 0
        self._direction = Direction.FORWARD

    @property
    def index(self) -> int:
        """Raw index, possibly out of range until the next ``normalize()``."""
        return self._index

    @property
    def active_index(self) -> int:
        assert 0 <= self._index < self.player_count, f"Turn index {self._index} not normalized"
        return self._index

    @property
    def direction(self) -> Direction:
        return self._direction

    def advance(self) -> None:
        self._index += self._direction.value

    def step_back(self) -> None:
        """Move one seat against the direction, so the next advance returns here."""
        self._index -= self._direction.value

    def skip_one(self) -> None:
        """Bypass the next player in turn order."""
        self.advance()

    def reverse_direction(self) -> None:
        self._direction = self._direction.flipped()

    def normalize(self) -> int:
        """Wrap the index back into range and return it."""
        if self._index >= self.player_count:
            self._index -= self.player_count
        elif self._index < 0:
            self._index += self.player_count
        return self.active_index

    def __repr__(self) -> str:
        return f"TurnOrder(index={self._index}, direction={self._direction.name}, players={self.player_count})"
