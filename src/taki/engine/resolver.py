"""Play resolution: legality checks and special-card effects."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

from taki.engine.errors import InvalidChoice
from taki.model.cards import Card, CardKind, can_follow_normal, can_follow_special

if TYPE_CHECKING:
    from taki.engine.session import GameSession, Player

logger = logging.getLogger(__name__)


class OutcomeKind(Enum):
    """Result of trying to play a card."""

    PLAYED = "played"
    REJECTED = "rejected"
    GAME_WON = "game_won"


@dataclass(frozen=True)
class Outcome:
    """What happened to a play attempt."""

    kind: OutcomeKind
    reason: Optional[str] = None

    @classmethod
    def played(cls) -> "Outcome":
        return cls(OutcomeKind.PLAYED)

    @classmethod
    def rejected(cls, reason: str) -> "Outcome":
        return cls(OutcomeKind.REJECTED, reason)

    @classmethod
    def game_won(cls) -> "Outcome":
        return cls(OutcomeKind.GAME_WON)

    @property
    def is_rejected(self) -> bool:
        return self.kind is OutcomeKind.REJECTED

    @property
    def is_won(self) -> bool:
        return self.kind is OutcomeKind.GAME_WON


def resolve_play(session: GameSession, index: int) -> Outcome:
    """Play the card at ``index`` of the active player's hand.

    Rejected plays leave the session untouched.

    Args:
        session: The running game session
        index: 0-based position in the active player's hand

    Returns:
        Outcome of the attempt
    """
    player = session.current_player
    try:
        card = player.hand[index]
    except InvalidChoice as e:
        return Outcome.rejected(e.reason)

    top = session.discard_top
    if card.kind is CardKind.NORMAL:
        legal = can_follow_normal(card, top)
    else:
        legal = can_follow_special(card, top)
    if not legal:
        return Outcome.rejected(f"{card} cannot be played on {top}")

    if card.kind is CardKind.CHAIN:
        return ChainSequence(session, player).start(index)
    if card.kind is CardKind.PLUS:
        _play_plus(session, player, index)
        return Outcome.played()

    if card.kind is CardKind.STOP:
        _play_stop(session, player, index)
    elif card.kind is CardKind.REVERSE:
        _discard(session, player, index)
        _apply_reverse(session)
    elif card.kind is CardKind.WILD:
        _play_wild(session, player, index)
    else:
        _discard(session, player, index)

    if player.hand.is_empty:
        return Outcome.game_won()
    return Outcome.played()


def _discard(session: GameSession, player: Player, index: int) -> Card:
    """Move a card from the hand onto the discard pile."""
    card = player.hand.remove_at(index)
    session.discard_top = card
    logger.debug(f"{player.name} plays {card}")
    return card


def _play_plus(session: GameSession, player: Player, index: int) -> None:
    _discard(session, player, index)
    if player.hand.is_empty:
        # Drawing replaces the bonus turn
        session.draw_card(player)
    else:
        _apply_extra_turn(session, player)


def _play_stop(session: GameSession, player: Player, index: int) -> None:
    if player.hand.size == 1 and session.player_count == 2:
        # Last card against a single opponent: take one before skipping
        session.draw_card(player)
    _discard(session, player, index)
    _apply_skip(session)


def _play_wild(session: GameSession, player: Player, index: int) -> None:
    color = session.io.request_color_choice()
    card = player.hand.remove_at(index).with_color(color)
    session.discard_top = card
    logger.debug(f"{player.name} plays COLOR as {color.name}")


def _apply_extra_turn(session: GameSession, player: Player) -> None:
    session.turns.step_back()
    logger.debug(f"{player.name} gets another turn")


def _apply_skip(session: GameSession) -> None:
    session.turns.skip_one()
    logger.debug("Next player is skipped")


def _apply_reverse(session: GameSession) -> None:
    session.turns.reverse_direction()
    logger.debug(f"Direction is now {session.turns.direction.name}")


class ChainPhase(Enum):
    """States of a chain (TAKI) sequence."""

    ACTIVE = "active"
    AWAITING_COLOR_OR_END = "awaiting_color_or_end"
    CLOSED = "closed"


class ChainSequence:
    """Sub-turn started by a Chain card.

    The player keeps dropping cards of the discard top's color until they
    end the sequence or run out of cards. Only the last card of the
    sequence triggers its effect, once, when the sequence closes.
    """

    def __init__(self, session: GameSession, player: Player):
        self.session = session
        self.player = player
        self.phase = ChainPhase.ACTIVE
        self.played: list[Card] = []
        self.outcome: Optional[Outcome] = None

    @property
    def last_played(self) -> Optional[Card]:
        return self.played[-1] if self.played else None

    def start(self, chain_index: int) -> Outcome:
        """Consume the Chain card and run the sequence to completion."""
        chain = self.player.hand.remove_at(chain_index)
        logger.debug(f"{self.player.name} starts a {chain.kind.value} sequence")
        while self.phase is not ChainPhase.CLOSED:
            if self.phase is ChainPhase.ACTIVE:
                self._check_hand()
            else:
                self._await_choice()
        assert self.outcome is not None
        return self.outcome

    def _check_hand(self) -> None:
        if self.player.hand.is_empty:
            self._close_on_empty_hand()
            return
        self.session.io.present_state(self.session.discard_top, self.player)
        self.phase = ChainPhase.AWAITING_COLOR_OR_END

    def _await_choice(self) -> None:
        choice = self.session.io.request_card_choice(0, self.player.hand.size, in_sequence=True)
        if choice == 0:
            self.end()
            return
        try:
            self.play(choice - 1)
        except InvalidChoice as e:
            self.session.io.report_invalid_choice(e.reason)
            return
        self.phase = ChainPhase.ACTIVE

    def play(self, index: int) -> Card:
        """Drop one more card into the sequence.

        Raises:
            InvalidChoice: If there is no such card, or it is a Wild/Chain,
                or its color differs from the discard top.
        """
        card = self.player.hand[index]
        if card.kind in (CardKind.WILD, CardKind.CHAIN):
            raise InvalidChoice(f"{card.kind.value} cannot continue a sequence")
        top = self.session.discard_top
        if card.color != top.color:
            raise InvalidChoice(f"{card} does not match the sequence color {top.color.name}")
        _discard(self.session, self.player, index)
        self.played.append(card)
        return card

    def end(self) -> None:
        """Close the sequence by choice, applying the last card's effect."""
        last = self.last_played
        if last is not None:
            if last.kind is CardKind.PLUS:
                _apply_extra_turn(self.session, self.player)
            elif last.kind is CardKind.STOP:
                _apply_skip(self.session)
            elif last.kind is CardKind.REVERSE:
                _apply_reverse(self.session)
        self._close(Outcome.played())

    def _close_on_empty_hand(self) -> None:
        last = self.last_played
        needs_card = last is not None and (
            last.kind is CardKind.PLUS
            or (last.kind is CardKind.STOP and self.session.player_count == 2)
        )
        if needs_card:
            self.session.draw_card(self.player)
            self._close(Outcome.played())
        else:
            self._close(Outcome.game_won())

    def _close(self, outcome: Outcome) -> None:
        self.outcome = outcome
        self.phase = ChainPhase.CLOSED
        logger.debug(f"Sequence closed after {len(self.played)} card(s): {outcome.kind.value}")
