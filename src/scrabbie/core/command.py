"""Command value objects describing one player action.

Commands arrive already syntax-checked; construction still rejects
anything a well-formed command cannot contain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from scrabbie.core.enums import CommandType, Orientation
from scrabbie.core.letter import JOKER_RACK_CHAR, Letter
from scrabbie.core.types import BOARD_SIZE, Position, row_index

MAX_EXCHANGE = 7


def is_joker_character(char: str) -> bool:
    """An uppercase character on an empty tile is a joker standing for it."""
    return char.isupper()


@dataclass(frozen=True, slots=True)
class CommandPlaceWord:
    """Place *word* starting at (*start_row*, *start_column*)."""

    command_type: ClassVar[CommandType] = CommandType.PLACER

    start_row: str
    start_column: int
    orientation: Orientation
    word: str

    def __post_init__(self) -> None:
        row_index(self.start_row)  # raises on an invalid row
        if not 1 <= self.start_column <= BOARD_SIZE:
            raise ValueError(f"Invalid start column: {self.start_column}")
        object.__setattr__(self, "orientation", Orientation(self.orientation))
        if not 1 <= len(self.word) <= BOARD_SIZE:
            raise ValueError(f"Word length must be 1–{BOARD_SIZE}: {self.word!r}")
        if not (self.word.isascii() and self.word.isalpha()):
            raise ValueError(f"Word must contain letters only: {self.word!r}")

    @property
    def row(self) -> int:
        """Zero-based start row."""
        return row_index(self.start_row)

    @property
    def column(self) -> int:
        """Zero-based start column."""
        return self.start_column - 1

    def positions(self) -> list[Position]:
        """Every position in the span, in placement order (may leave the board)."""
        dr, dc = self.orientation.step
        return [(self.row + i * dr, self.column + i * dc) for i in range(len(self.word))]

    def __str__(self) -> str:
        return f"{self.start_row}{self.start_column}{self.orientation} {self.word}"


@dataclass(frozen=True, slots=True)
class CommandChangeLetter:
    """Exchange rack letters (``'*'`` stands for a joker) for stash draws."""

    command_type: ClassVar[CommandType] = CommandType.CHANGER

    letters: str

    def __post_init__(self) -> None:
        if not 1 <= len(self.letters) <= MAX_EXCHANGE:
            raise ValueError(f"Exchange 1–{MAX_EXCHANGE} letters: {self.letters!r}")
        for char in self.letters:
            if char != JOKER_RACK_CHAR and not (char.isascii() and char.isalpha()):
                raise ValueError(f"Invalid exchange letter: {char!r}")

    def rack_letters(self) -> list[Letter]:
        return [Letter.from_rack_char(char) for char in self.letters]


@dataclass(frozen=True, slots=True)
class CommandPass:
    command_type: ClassVar[CommandType] = CommandType.PASSER


@dataclass(frozen=True, slots=True)
class CommandHelp:
    command_type: ClassVar[CommandType] = CommandType.AIDE

    topic: str = ""


Command: TypeAlias = CommandPlaceWord | CommandChangeLetter | CommandPass | CommandHelp
