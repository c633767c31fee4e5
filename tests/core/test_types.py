"""Tests for coordinate helpers."""

import pytest

from scrabbie.core.types import (
    CENTER,
    is_in_bounds,
    parse_position,
    position_name,
    row_index,
    row_name,
)


class TestNames:
    def test_center(self) -> None:
        assert position_name(CENTER) == "h8"
        assert parse_position("h8") == CENTER

    def test_corners(self) -> None:
        assert parse_position("a1") == (0, 0)
        assert parse_position("o15") == (14, 14)
        assert position_name((14, 14)) == "o15"

    def test_rows(self) -> None:
        assert row_index("H") == 7
        assert row_name(0) == "a"

    @pytest.mark.parametrize("name", ["", "h", "p1", "a0", "a16", "h8x"])
    def test_invalid_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_position(name)


class TestBounds:
    def test_is_in_bounds(self) -> None:
        assert is_in_bounds(0, 14)
        assert not is_in_bounds(-1, 0)
        assert not is_in_bounds(0, 15)
