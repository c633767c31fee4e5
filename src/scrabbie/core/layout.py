"""Standard 15x15 premium-square layout."""

from __future__ import annotations

from scrabbie.core.enums import BonusKind
from scrabbie.core.types import BOARD_SIZE, Position

TRIPLE_WORD_TILES: frozenset[Position] = frozenset(
    {(0, 0), (0, 7), (0, 14), (7, 0), (7, 14), (14, 0), (14, 7), (14, 14)}
)

DOUBLE_WORD_TILES: frozenset[Position] = frozenset(
    {(i, i) for i in (1, 2, 3, 4, 7, 10, 11, 12, 13)}
    | {(i, BOARD_SIZE - 1 - i) for i in (1, 2, 3, 4, 10, 11, 12, 13)}
)

TRIPLE_LETTER_TILES: frozenset[Position] = frozenset(
    {
        (1, 5), (1, 9),
        (5, 1), (5, 5), (5, 9), (5, 13),
        (9, 1), (9, 5), (9, 9), (9, 13),
        (13, 5), (13, 9),
    }
)  # fmt: skip

DOUBLE_LETTER_TILES: frozenset[Position] = frozenset(
    {
        (0, 3), (0, 11),
        (2, 6), (2, 8),
        (3, 0), (3, 7), (3, 14),
        (6, 2), (6, 6), (6, 8), (6, 12),
        (7, 3), (7, 11),
        (8, 2), (8, 6), (8, 8), (8, 12),
        (11, 0), (11, 7), (11, 14),
        (12, 6), (12, 8),
        (14, 3), (14, 11),
    }
)  # fmt: skip

BonusLayout = list[list[BonusKind]]


def bonus_at(row: int, column: int) -> BonusKind:
    pos = (row, column)
    if pos in TRIPLE_WORD_TILES:
        return BonusKind.TRIPLE_WORD
    if pos in DOUBLE_WORD_TILES:
        return BonusKind.DOUBLE_WORD
    if pos in TRIPLE_LETTER_TILES:
        return BonusKind.TRIPLE_LETTER
    if pos in DOUBLE_LETTER_TILES:
        return BonusKind.DOUBLE_LETTER
    return BonusKind.BASIC


def standard_layout() -> BonusLayout:
    """Fresh grid of bonus kinds, indexed ``[row][column]``."""
    return [[bonus_at(r, c) for c in range(BOARD_SIZE)] for r in range(BOARD_SIZE)]
