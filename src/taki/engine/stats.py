"""Card generation frequency statistics."""

from __future__ import annotations

from dataclasses import dataclass

from taki.model.cards import Card, CardIdentity

# 9 normal numbers + 5 special kinds
MAX_IDENTITIES = 14


@dataclass
class StatEntry:
    """How many times one card identity was generated."""

    identity: CardIdentity
    frequency: int = 0

    @property
    def label(self) -> str:
        return self.identity.label


class Statistics:
    """Tracks generation frequency per card identity.

    Normal cards are keyed by number, special cards by kind; colors are
    ignored. Entries keep their first-seen order until ``sort()`` runs.
    """

    def __init__(self) -> None:
        self._entries: list[StatEntry] = []
        self._by_identity: dict[CardIdentity, StatEntry] = {}

    def record(self, card: Card) -> StatEntry:
        """Count one generated card."""
        identity = card.identity
        entry = self._by_identity.get(identity)
        if entry is None:
            assert len(self._entries) < MAX_IDENTITIES, f"More than {MAX_IDENTITIES} card identities"
            entry = StatEntry(identity=identity)
            self._entries.append(entry)
            self._by_identity[identity] = entry
        entry.frequency += 1
        return entry

    def sorted_view(self) -> list[StatEntry]:
        """Entries by frequency, highest first; ties keep insertion order."""
        return sorted(self._entries, key=lambda e: e.frequency, reverse=True)

    def sort(self) -> None:
        """Reorder the stored entries in place, as ``sorted_view()``."""
        self._entries.sort(key=lambda e: e.frequency, reverse=True)

    @property
    def entries(self) -> tuple[StatEntry, ...]:
        return tuple(self._entries)

    @property
    def total(self) -> int:
        return sum(e.frequency for e in self._entries)

    def frequency_of(self, identity: CardIdentity) -> int:
        entry = self._by_identity.get(identity)
        return entry.frequency if entry else 0

    def __len__(self) -> int:
        return len(self._entries)
