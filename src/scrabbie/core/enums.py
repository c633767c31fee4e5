"""Core enumerations for the word-game domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum, auto


class Orientation(StrEnum):
    """Direction a placed word extends in."""

    HORIZONTAL = "h"  # along a row, column increases
    VERTICAL = "v"  # along a column, row increases

    @property
    def step(self) -> tuple[int, int]:
        """(row delta, column delta) between consecutive letters."""
        return (0, 1) if self is Orientation.HORIZONTAL else (1, 0)

    @property
    def perpendicular(self) -> Orientation:
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


class BonusKind(StrEnum):
    """Premium kind of a board tile."""

    BASIC = "Basic"
    DOUBLE_LETTER = "DoubleLetter"
    TRIPLE_LETTER = "TripleLetter"
    DOUBLE_WORD = "DoubleWord"
    TRIPLE_WORD = "TripleWord"

    @property
    def letter_multiplier(self) -> int:
        return _LETTER_MULTIPLIERS.get(self, 1)

    @property
    def word_multiplier(self) -> int:
        return _WORD_MULTIPLIERS.get(self, 1)


_LETTER_MULTIPLIERS: dict[BonusKind, int] = {
    BonusKind.DOUBLE_LETTER: 2,
    BonusKind.TRIPLE_LETTER: 3,
}

_WORD_MULTIPLIERS: dict[BonusKind, int] = {
    BonusKind.DOUBLE_WORD: 2,
    BonusKind.TRIPLE_WORD: 3,
}


class LetterKind(IntEnum):
    """Variant tag of a :class:`~scrabbie.core.letter.Letter`."""

    REGULAR = 0
    JOKER = 1


class CommandType(IntEnum):
    """Player action kinds."""

    PLACER = 0  # place a word
    CHANGER = 1  # exchange rack letters
    PASSER = 2  # skip the turn
    AIDE = 3  # help request


class CommandOutcome(IntEnum):
    """Closed set of results returned for a player action."""

    SUCCESS = auto()
    ERROR = auto()
    WAIT = auto()  # not this player's turn
    BLOCK = auto()  # player penalised after an invalid placement
    NOT_STARTED = auto()
    GAME_OVER = auto()

    # Placement
    CAN_PLACE_WORD = auto()
    OUT_OF_BOUNDS = auto()
    INCORRECT_OVERLAPPING = auto()
    PREEXISTING_WORD = auto()
    CENTRAL_TILE = auto()
    ADJACENT_TILE = auto()
    INVALID_WORDS = auto()
    INSUFFICIENT_RACK_LETTERS = auto()

    # Exchange
    STASH_EMPTY = auto()
    STASH_INSUFFICIENT_LETTERS = auto()

    @property
    def is_failure(self) -> bool:
        return self not in (CommandOutcome.SUCCESS, CommandOutcome.CAN_PLACE_WORD)
