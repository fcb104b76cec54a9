"""Per-player card storage."""

from __future__ import annotations

import random
from typing import Iterator, Optional

from taki.engine.errors import AllocationFailure, InvalidChoice
from taki.model.cards import Card, random_card

INITIAL_CAPACITY = 4


def _allocate_slots(capacity: int) -> list[Optional[Card]]:
    return [None] * capacity


class Hand:
    """Ordered, growable card collection owned by one player.

    Storage is a fixed block of slots. When an append finds the block full
    the capacity doubles; it never shrinks.
    """

    def __init__(self, capacity: int = INITIAL_CAPACITY):
        if capacity < 1:
            raise ValueError(f"Hand capacity must be positive, got {capacity}")
        self._slots = _allocate_slots(capacity)
        self._size = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def cards(self) -> tuple[Card, ...]:
        """Snapshot of the cards in display order."""
        return tuple(self._slots[: self._size])  # type: ignore[arg-type]

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> Card:
        if index < 0:
            raise InvalidChoice("No such card")
        if index >= self._size:
            raise InvalidChoice(f"No card at position {index + 1}")
        return self._slots[index]  # type: ignore[return-value]

    def add(self, card: Card) -> Card:
        """Append ``card``, growing storage first when full."""
        if self._size == len(self._slots):
            self._grow()
        self._slots[self._size] = card
        self._size += 1
        return card

    def draw(self, rng: random.Random) -> Card:
        """Generate a random card into the hand and return it."""
        return self.add(random_card(rng))

    def remove_at(self, index: int) -> Card:
        """Remove and return the card at ``index``, shifting later cards left.

        Raises:
            InvalidChoice: If ``index`` is not a position in the hand.
        """
        card = self[index]
        for i in range(index, self._size - 1):
            self._slots[i] = self._slots[i + 1]
        self._size -= 1
        self._slots[self._size] = None
        return card

    def _grow(self) -> None:
        """Double the capacity, keeping cards in place."""
        new_capacity = len(self._slots) * 2
        try:
            slots = _allocate_slots(new_capacity)
        except MemoryError as e:
            raise AllocationFailure(f"Could not grow hand to {new_capacity} cards") from e
        slots[: self._size] = self._slots[: self._size]
        self._slots = slots

    def __repr__(self) -> str:
        return f"Hand([{', '.join(str(c) for c in self.cards)}], capacity={self.capacity})"
