"""Card value type, legality rules and card generation."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import NamedTuple, Optional


class Color(Enum):
    """Card colors, keyed by their display letter."""

    GREEN = "G"
    RED = "R"
    YELLOW = "Y"
    BLUE = "B"


class CardKind(Enum):
    """Card kinds, keyed by the label printed on the card face."""

    NORMAL = "NORMAL"
    PLUS = "+"
    STOP = "STOP"
    REVERSE = "<->"
    WILD = "COLOR"
    CHAIN = "TAKI"

    @property
    def is_special(self) -> bool:
        return self is not CardKind.NORMAL


# Order matters for generation: one uniform pick over these six classes.
GENERATED_KINDS = (
    CardKind.PLUS,
    CardKind.STOP,
    CardKind.REVERSE,
    CardKind.WILD,
    CardKind.CHAIN,
    CardKind.NORMAL,
)

MIN_NUMBER = 1
MAX_NUMBER = 9


class CardIdentity(NamedTuple):
    """Statistics key: kind plus number for normal cards, color ignored."""

    kind: CardKind
    number: Optional[int] = None

    @property
    def label(self) -> str:
        if self.kind is CardKind.NORMAL:
            return str(self.number)
        return self.kind.value


@dataclass(frozen=True)
class Card:
    """Immutable TAKI card.

    ``number`` is set only on NORMAL cards. ``color`` is set on every card
    except a WILD that has not been played yet.
    """

    kind: CardKind
    number: Optional[int] = None
    color: Optional[Color] = None

    def __post_init__(self):
        """Reject field combinations that cannot exist in the game."""
        if self.kind is CardKind.NORMAL:
            if self.number is None or not MIN_NUMBER <= self.number <= MAX_NUMBER:
                raise ValueError(f"Normal card needs a number in {MIN_NUMBER}..{MAX_NUMBER}, got {self.number!r}")
        elif self.number is not None:
            raise ValueError(f"{self.kind.name} card cannot carry a number")

        if self.color is None and self.kind is not CardKind.WILD:
            raise ValueError(f"{self.kind.name} card needs a color")

    @classmethod
    def normal(cls, number: int, color: Color) -> "Card":
        return cls(CardKind.NORMAL, number, color)

    @classmethod
    def plus(cls, color: Color) -> "Card":
        return cls(CardKind.PLUS, color=color)

    @classmethod
    def stop(cls, color: Color) -> "Card":
        return cls(CardKind.STOP, color=color)

    @classmethod
    def reverse(cls, color: Color) -> "Card":
        return cls(CardKind.REVERSE, color=color)

    @classmethod
    def wild(cls) -> "Card":
        return cls(CardKind.WILD)

    @classmethod
    def chain(cls, color: Color) -> "Card":
        return cls(CardKind.CHAIN, color=color)

    @property
    def is_colorless(self) -> bool:
        return self.color is None

    @property
    def identity(self) -> CardIdentity:
        return CardIdentity(self.kind, self.number)

    def with_color(self, color: Color) -> "Card":
        """Return a copy carrying ``color`` (how a played Wild gets its color)."""
        return replace(self, color=color)

    def __str__(self) -> str:
        color = self.color.value if self.color else "-"
        if self.kind is CardKind.NORMAL:
            return f"{self.number}{color}"
        return f"{self.kind.value}{color}"


def can_follow_normal(candidate: Card, top: Card) -> bool:
    """Check whether a normal card may be dropped on ``top``.

    Same color always matches. Otherwise both cards need a number and the
    numbers must be equal.
    """
    if candidate.color is not None and candidate.color == top.color:
        return True
    if candidate.number is None or top.number is None:
        return False
    return candidate.number == top.number


def can_follow_special(candidate: Card, top: Card) -> bool:
    """Check whether a special card may be dropped on ``top``.

    A colorless card (unplayed Wild) fits anything; otherwise the color or
    the kind has to match.
    """
    if candidate.is_colorless:
        return True
    if candidate.color == top.color:
        return True
    return candidate.kind is top.kind


def random_color(rng: random.Random) -> Color:
    return rng.choice(list(Color))


def random_normal_card(rng: random.Random) -> Card:
    """Generate a NORMAL card with a uniform number and color."""
    number = rng.randint(MIN_NUMBER, MAX_NUMBER)
    return Card.normal(number, random_color(rng))


def random_card(rng: random.Random) -> Card:
    """Generate one card: uniform kind, then number/color as the kind needs."""
    kind = rng.choice(GENERATED_KINDS)
    if kind is CardKind.WILD:
        return Card.wild()
    if kind is CardKind.NORMAL:
        return random_normal_card(rng)
    return Card(kind, color=random_color(rng))
