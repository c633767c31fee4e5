"""Position type alias and coordinate helpers.

Board layout (row-major, zero-based internally)::

    rows    a..o  -> 0..14
    columns 1..15 -> 0..14

so ``"h8"`` is the central tile ``(7, 7)``.
"""

from __future__ import annotations

from typing import TypeAlias

Position: TypeAlias = tuple[int, int]  # (row, column), 0–14 each

BOARD_SIZE = 15
ROW_NAMES = "abcdefghijklmno"
CENTER: Position = (7, 7)


def is_in_bounds(row: int, column: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= column < BOARD_SIZE


def row_index(name: str) -> int:
    """Row index 0–14 from its letter, e.g. 'h' → 7."""
    if len(name) != 1 or name.lower() not in ROW_NAMES:
        raise ValueError(f"Invalid row name: {name!r}")
    return ROW_NAMES.index(name.lower())


def row_name(row: int) -> str:
    """Row letter from its index, e.g. 7 → 'h'."""
    if not 0 <= row < BOARD_SIZE:
        raise ValueError(f"Invalid row index: {row}")
    return ROW_NAMES[row]


def position_name(pos: Position) -> str:
    """Human-readable name, e.g. (7, 7) → 'h8'."""
    row, column = pos
    return f"{row_name(row)}{column + 1}"


def parse_position(name: str) -> Position:
    """Parse a tile name, e.g. 'h8' → (7, 7)."""
    if len(name) < 2 or not name[1:].isdigit():
        raise ValueError(f"Invalid tile name: {name!r}")
    column = int(name[1:]) - 1
    if not 0 <= column < BOARD_SIZE:
        raise ValueError(f"Invalid tile name: {name!r}")
    return row_index(name[0]), column
