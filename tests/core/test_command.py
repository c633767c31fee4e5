"""Tests for command value objects."""

import pytest

from scrabbie.core.command import (
    CommandChangeLetter,
    CommandHelp,
    CommandPass,
    CommandPlaceWord,
    is_joker_character,
)
from scrabbie.core.enums import CommandType, Orientation
from scrabbie.core.letter import Letter


class TestCommandPlaceWord:
    def test_orientation_coerced(self) -> None:
        cmd = CommandPlaceWord("h", 8, "v", "bac")
        assert cmd.orientation is Orientation.VERTICAL

    def test_zero_based_start(self) -> None:
        cmd = CommandPlaceWord("c", 4, "h", "bac")
        assert (cmd.row, cmd.column) == (2, 3)

    def test_positions_horizontal(self) -> None:
        cmd = CommandPlaceWord("a", 1, "h", "bac")
        assert cmd.positions() == [(0, 0), (0, 1), (0, 2)]

    def test_positions_vertical(self) -> None:
        cmd = CommandPlaceWord("a", 1, "v", "bac")
        assert cmd.positions() == [(0, 0), (1, 0), (2, 0)]

    def test_positions_may_leave_board(self) -> None:
        cmd = CommandPlaceWord("a", 13, "h", "TEST")
        assert cmd.positions()[-1] == (0, 15)

    def test_command_type(self) -> None:
        assert CommandPlaceWord("a", 1, "h", "a").command_type == CommandType.PLACER

    @pytest.mark.parametrize(
        "row, column, orientation, word",
        [
            ("p", 1, "h", "bac"),
            ("a", 0, "h", "bac"),
            ("a", 16, "h", "bac"),
            ("a", 1, "x", "bac"),
            ("a", 1, "h", ""),
            ("a", 1, "h", "ba c"),
            ("a", 1, "h", "a" * 16),
        ],
    )
    def test_rejects_malformed(
        self, row: str, column: int, orientation: str, word: str
    ) -> None:
        with pytest.raises(ValueError):
            CommandPlaceWord(row, column, orientation, word)  # type: ignore[arg-type]

    def test_str(self) -> None:
        assert str(CommandPlaceWord("h", 8, "h", "bac")) == "h8h bac"

    def test_uppercase_marks_joker(self) -> None:
        assert is_joker_character("L")
        assert not is_joker_character("l")


class TestCommandChangeLetter:
    def test_rack_letters(self) -> None:
        cmd = CommandChangeLetter("a*e")
        assert cmd.rack_letters() == [
            Letter.regular("A"),
            Letter.joker(),
            Letter.regular("E"),
        ]

    def test_too_many(self) -> None:
        with pytest.raises(ValueError):
            CommandChangeLetter("abcdefgh")

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError):
            CommandChangeLetter("a1")


class TestSimpleCommands:
    def test_types(self) -> None:
        assert CommandPass().command_type == CommandType.PASSER
        assert CommandHelp().command_type == CommandType.AIDE
