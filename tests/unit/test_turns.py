"""Tests for the turn order state machine."""

import pytest

from taki.engine.turns import Direction, TurnOrder


class TestTurnOrder:
    """Tests for basic movement."""

    def test_initial_state(self):
        turns = TurnOrder(3)

        assert turns.index == 0
        assert turns.direction is Direction.FORWARD

    def test_rejects_empty_table(self):
        with pytest.raises(ValueError):
            TurnOrder(0)

    def test_advance_forward(self):
        turns = TurnOrder(3)

        turns.advance()

        assert turns.index == 1

    def test_advance_backward(self):
        turns = TurnOrder(3)
        turns.reverse_direction()

        turns.advance()

        assert turns.index == -1

    def test_reverse_does_not_move(self):
        turns = TurnOrder(3)
        turns.advance()

        turns.reverse_direction()

        assert turns.index == 1
        assert turns.direction is Direction.BACKWARD

    def test_reverse_twice(self):
        turns = TurnOrder(3)

        turns.reverse_direction()
        turns.reverse_direction()

        assert turns.direction is Direction.FORWARD

    def test_step_back_then_advance_returns(self):
        """Plus: the next advance lands on the same seat."""
        turns = TurnOrder(3)

        turns.step_back()
        turns.advance()

        assert turns.normalize() == 0


class TestNormalize:
    """Tests for wraparound."""

    def test_forward_overflow(self):
        turns = TurnOrder(3)
        for _ in range(3):
            turns.advance()

        assert turns.normalize() == 0

    def test_backward_underflow(self):
        turns = TurnOrder(3)
        turns.reverse_direction()
        turns.advance()

        assert turns.normalize() == 2

    def test_in_range_unchanged(self):
        turns = TurnOrder(4)
        turns.advance()
        turns.advance()

        assert turns.normalize() == 2

    def test_wrap_is_deferred(self):
        """The raw index stays out of range until normalize runs."""
        turns = TurnOrder(2)
        turns.advance()
        turns.skip_one()

        assert turns.index == 2
        with pytest.raises(AssertionError):
            turns.active_index

    def test_skip_over_table_edge(self):
        """Seat 2 of 3 skips seat 0, play lands on seat 1."""
        turns = TurnOrder(3)
        turns.advance()
        turns.advance()

        turns.skip_one()
        turns.advance()

        assert turns.normalize() == 1

    def test_skip_backward_over_edge(self):
        turns = TurnOrder(3)
        turns.reverse_direction()

        turns.skip_one()
        turns.advance()

        assert turns.normalize() == 1

    def test_two_player_skip_returns_to_same_player(self):
        turns = TurnOrder(2)
        turns.advance()

        turns.skip_one()
        turns.advance()

        assert turns.normalize() == 1
