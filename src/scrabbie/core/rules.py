"""Rules engine: placement validation pipeline and scoring over a Board."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scrabbie.core.board import Board
from scrabbie.core.enums import CommandOutcome

if TYPE_CHECKING:
    from scrabbie.core.board import RackHolder
    from scrabbie.core.command import CommandPlaceWord
    from scrabbie.core.dictionary import WordLookup
    from scrabbie.core.letter import Letter


class RulesEngine:
    """Validates and scores placements on its own :class:`Board`.

    The dictionary is any ``str -> bool`` lookup, e.g.
    ``WordList.is_valid_word``.
    """

    __slots__ = ("_board", "_is_valid_word")

    def __init__(self, is_valid_word: WordLookup, board: Board | None = None) -> None:
        self._board = board if board is not None else Board()
        self._is_valid_word = is_valid_word

    @property
    def board(self) -> Board:
        return self._board

    # ── Validation pipeline ──────────────────────────────────────────────

    def can_place_word(
        self, command: CommandPlaceWord, *, is_first_turn: bool
    ) -> CommandOutcome:
        """Run the ordered placement checks and return the first failure.

        Returns ``CAN_PLACE_WORD`` when the command may be placed. Rack
        contents and dictionary validity are checked by the caller.
        """
        board = self._board
        if not board.is_word_in_bounds(command):
            return CommandOutcome.OUT_OF_BOUNDS
        if not board.is_word_correctly_overlapping(command):
            return CommandOutcome.INCORRECT_OVERLAPPING
        if not board.is_new_word(command):
            return CommandOutcome.PREEXISTING_WORD
        if is_first_turn:
            if not board.is_word_overlapping_central_tile(command):
                return CommandOutcome.CENTRAL_TILE
        elif not board.is_word_adjacent_to_another(command):
            return CommandOutcome.ADJACENT_TILE
        return CommandOutcome.CAN_PLACE_WORD

    def find_letters_to_remove(self, command: CommandPlaceWord) -> list[Letter]:
        return self._board.find_letters_to_remove(command)

    # ── Board mutation ───────────────────────────────────────────────────

    def place_word(self, command: CommandPlaceWord) -> None:
        self._board.place_word(command)

    def remove_word(self, command: CommandPlaceWord, player: RackHolder) -> str:
        return self._board.remove_word(command, player)

    # ── Words & scoring ──────────────────────────────────────────────────

    def is_valid_word(self, word: str) -> bool:
        return self._is_valid_word(word)

    def are_all_words_valid(self) -> bool:
        return self._board.are_all_words_valid(self._is_valid_word)

    def invalid_words(self) -> list[str]:
        return self._board.invalid_words(self._is_valid_word)

    def count_all_new_words_point(self) -> int:
        return self._board.count_all_new_words_point()

    def confirm_placement(self) -> None:
        """Consume the bonuses of the pending placement and lock its letters."""
        self._board.deactivate_used_tiles_bonus()
        self._board.lock_placed_letters()
