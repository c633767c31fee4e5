"""Core domain layer: pure word-game rules with zero external dependencies.

Quick start::

    from scrabbie.core import CommandOutcome, CommandPlaceWord, RulesEngine, WordList

    rules = RulesEngine(WordList(["BAC", "BACS"]).is_valid_word)
    cmd = CommandPlaceWord("h", 8, "h", "bac")
    if rules.can_place_word(cmd, is_first_turn=True) is CommandOutcome.CAN_PLACE_WORD:
        rules.place_word(cmd)
"""

from scrabbie.core.board import Board, BoardTile, Word
from scrabbie.core.command import (
    Command,
    CommandChangeLetter,
    CommandHelp,
    CommandPass,
    CommandPlaceWord,
    is_joker_character,
)
from scrabbie.core.dictionary import WordList, WordLookup
from scrabbie.core.enums import (
    BonusKind,
    CommandOutcome,
    CommandType,
    LetterKind,
    Orientation,
)
from scrabbie.core.letter import (
    JOKER_SYMBOL,
    LETTER_DISTRIBUTION,
    LETTER_VALUES,
    Letter,
)
from scrabbie.core.rules import RulesEngine
from scrabbie.core.types import (
    BOARD_SIZE,
    CENTER,
    Position,
    parse_position,
    position_name,
    row_index,
    row_name,
)

__all__ = [
    # Enums
    "BonusKind",
    "CommandOutcome",
    "CommandType",
    "LetterKind",
    "Orientation",
    # Types / helpers
    "BOARD_SIZE",
    "CENTER",
    "Position",
    "parse_position",
    "position_name",
    "row_index",
    "row_name",
    # Letters
    "JOKER_SYMBOL",
    "LETTER_DISTRIBUTION",
    "LETTER_VALUES",
    "Letter",
    # Commands
    "Command",
    "CommandChangeLetter",
    "CommandHelp",
    "CommandPass",
    "CommandPlaceWord",
    "is_joker_character",
    # Domain objects
    "Board",
    "BoardTile",
    "RulesEngine",
    "Word",
    "WordList",
    "WordLookup",
]
