"""Tests for the Letter value object."""

import pytest

from scrabbie.core.enums import LetterKind
from scrabbie.core.letter import JOKER_SYMBOL, LETTER_DISTRIBUTION, LETTER_VALUES, Letter


class TestRegular:
    def test_value(self) -> None:
        assert Letter.regular("k").value == 10
        assert Letter.regular("E").value == 1

    def test_uppercased(self) -> None:
        assert Letter.regular("a") == Letter.regular("A")
        assert Letter.regular("a").symbol == "A"

    def test_invalid_character(self) -> None:
        with pytest.raises(ValueError):
            Letter.regular("1")

    def test_cannot_bind(self) -> None:
        with pytest.raises(ValueError):
            Letter.regular("A").bind("B")


class TestJoker:
    def test_scores_zero_even_when_bound(self) -> None:
        assert Letter.joker().value == 0
        assert Letter.joker("Z").value == 0

    def test_symbol_ignores_binding(self) -> None:
        assert Letter.joker().symbol == JOKER_SYMBOL
        assert Letter.joker("q").symbol == JOKER_SYMBOL

    def test_bind_returns_new_instance(self) -> None:
        joker = Letter.joker()
        bound = joker.bind("l")
        assert bound is not joker
        assert bound.character == "L"
        assert joker.character is None
        assert bound.kind == LetterKind.JOKER

    def test_unbound(self) -> None:
        assert Letter.joker("L").unbound() == Letter.joker()
        assert Letter.regular("L").unbound() == Letter.regular("L")

    def test_matches_case_insensitive(self) -> None:
        assert Letter.joker("B").matches("b")
        assert not Letter.joker().matches("b")

    def test_display(self) -> None:
        assert str(Letter.joker("L")) == "l"
        assert str(Letter.regular("l")) == "L"


class TestRackNotation:
    def test_star_is_joker(self) -> None:
        assert Letter.from_rack_char("*").is_joker

    def test_from_symbol_roundtrip(self) -> None:
        assert Letter.from_symbol(JOKER_SYMBOL) == Letter.joker()
        assert Letter.from_symbol("W") == Letter.regular("W")


class TestDistribution:
    def test_total_tiles(self) -> None:
        assert sum(LETTER_DISTRIBUTION.values()) == 102
        assert LETTER_DISTRIBUTION[JOKER_SYMBOL] == 2

    def test_every_letter_has_value(self) -> None:
        for symbol in LETTER_DISTRIBUTION:
            if symbol != JOKER_SYMBOL:
                assert symbol in LETTER_VALUES
