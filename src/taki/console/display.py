"""Terminal rendering of cards, game state and statistics."""

from __future__ import annotations

from typing import Sequence

from taki.engine.session import Player
from taki.engine.stats import StatEntry
from taki.model.cards import Card, CardKind

CARD_HEIGHT = 6
CARD_WIDTH = 9
CARD_BORDER = "*"

# Width of the "Card #" column in the statistics table
STAT_COLUMN_WIDTH = 7


def _mid_index(text: str) -> int:
    """Middle character index; picks the left one for even lengths."""
    if len(text) % 2 == 0:
        return len(text) // 2 - 1
    return len(text) // 2


def card_label(card: Card) -> str:
    """Text printed in the middle of the card face."""
    if card.kind is CardKind.NORMAL:
        return str(card.number)
    return card.kind.value


def render_card(card: Card) -> str:
    """Draw a card as a bordered 6x9 box.

    The label (number or kind) sits on the row above the middle, centered;
    the color letter sits in the middle column of the row below it.
    """
    label = card_label(card)
    color = card.color.value if card.color else " "
    label_start = CARD_WIDTH // 2 - _mid_index(label)
    label_row = CARD_HEIGHT // 2 - 1
    color_row = CARD_HEIGHT // 2

    rows: list[str] = []
    for row in range(CARD_HEIGHT):
        if row in (0, CARD_HEIGHT - 1):
            rows.append(CARD_BORDER * CARD_WIDTH)
            continue

        inner = [" "] * (CARD_WIDTH - 2)
        if row == label_row:
            for i, ch in enumerate(label):
                col = label_start + i
                if 0 < col < CARD_WIDTH - 1:
                    inner[col - 1] = ch
        elif row == color_row:
            inner[CARD_WIDTH // 2 - 1] = color
        rows.append(CARD_BORDER + "".join(inner) + CARD_BORDER)

    return "\n".join(rows)


class StateRenderer:
    """Renders the discard top and the active player's hand."""

    def render(self, top: Card, player: Player) -> str:
        lines: list[str] = []

        lines.append("")
        lines.append("Upper card:")
        lines.append(render_card(top))

        lines.append("")
        lines.append(f"{player.name}'s turn:")

        for i, card in enumerate(player.hand):
            lines.append("")
            lines.append(f"Card #{i + 1}")
            lines.append(render_card(card))

        return "\n".join(lines)


class StatsRenderer:
    """Renders the end-of-game frequency table."""

    def render(self, entries: Sequence[StatEntry]) -> str:
        lines: list[str] = []

        lines.append("")
        lines.append("************ Game Statistics ************")
        lines.append("Card # | Frequency")
        lines.append("__________________")

        for entry in entries:
            lines.append(f"{self._label_cell(entry)}|    {entry.frequency}")

        return "\n".join(lines)

    def _label_cell(self, entry: StatEntry) -> str:
        """Center the card label in the first column."""
        label = entry.label
        if entry.identity.kind is CardKind.NORMAL:
            return f"   {label}   "
        start = STAT_COLUMN_WIDTH // 2 - len(label) // 2
        cell = " " * start + label
        return cell.ljust(STAT_COLUMN_WIDTH)[:STAT_COLUMN_WIDTH]
