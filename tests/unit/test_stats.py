"""Tests for the statistics aggregator."""

import pytest

from taki.engine.stats import Statistics, MAX_IDENTITIES
from taki.model.cards import Card, CardIdentity, CardKind, Color


class TestRecord:
    """Tests for frequency counting."""

    def test_first_record_inserts(self):
        stats = Statistics()

        entry = stats.record(Card.normal(3, Color.RED))

        assert entry.frequency == 1
        assert len(stats) == 1

    def test_normal_cards_keyed_by_number(self):
        stats = Statistics()

        stats.record(Card.normal(3, Color.RED))
        stats.record(Card.normal(3, Color.BLUE))
        stats.record(Card.normal(4, Color.BLUE))

        assert stats.frequency_of(CardIdentity(CardKind.NORMAL, 3)) == 2
        assert stats.frequency_of(CardIdentity(CardKind.NORMAL, 4)) == 1
        assert len(stats) == 2

    def test_special_cards_keyed_by_kind(self):
        stats = Statistics()

        stats.record(Card.stop(Color.RED))
        stats.record(Card.stop(Color.GREEN))
        stats.record(Card.wild())

        assert stats.frequency_of(CardIdentity(CardKind.STOP)) == 2
        assert stats.frequency_of(CardIdentity(CardKind.WILD)) == 1

    def test_total(self):
        stats = Statistics()
        for n in (1, 1, 2, 9):
            stats.record(Card.normal(n, Color.YELLOW))

        assert stats.total == 4

    def test_all_identities_fit(self):
        stats = Statistics()
        for n in range(1, 10):
            stats.record(Card.normal(n, Color.RED))
        for card in (Card.plus(Color.RED), Card.stop(Color.RED), Card.reverse(Color.RED),
                     Card.wild(), Card.chain(Color.RED)):
            stats.record(card)

        assert len(stats) == MAX_IDENTITIES == 14


class TestSorting:
    """Tests for the sorted report."""

    def _make_stats(self) -> Statistics:
        stats = Statistics()
        stats.record(Card.normal(5, Color.RED))
        stats.record(Card.plus(Color.RED))
        stats.record(Card.normal(2, Color.RED))
        stats.record(Card.plus(Color.BLUE))
        stats.record(Card.normal(2, Color.GREEN))
        stats.record(Card.wild())
        return stats

    def test_sorted_view_descending(self):
        view = self._make_stats().sorted_view()

        assert [e.frequency for e in view] == [2, 2, 1, 1]

    def test_ties_keep_insertion_order(self):
        view = self._make_stats().sorted_view()

        assert [e.label for e in view] == ["+", "2", "5", "COLOR"]

    def test_sorted_view_does_not_mutate(self):
        stats = self._make_stats()

        stats.sorted_view()

        assert [e.label for e in stats.entries] == ["5", "+", "2", "COLOR"]

    def test_sort_in_place(self):
        stats = self._make_stats()

        stats.sort()

        assert [e.label for e in stats.entries] == ["+", "2", "5", "COLOR"]
