"""Errors raised by the TAKI engine."""

from __future__ import annotations


class TakiError(Exception):
    """Base class for engine errors."""

    pass


class InvalidChoice(TakiError, IndexError):
    """A player picked an index outside the hand or a card that cannot be played.

    Always recoverable: the same player is asked again for the same decision.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class AllocationFailure(TakiError, MemoryError):
    """Hand storage could not grow. Fatal for the session."""

    pass


class GameAborted(TakiError):
    """Input ended (EOF or Ctrl-C) before the game finished."""

    pass
