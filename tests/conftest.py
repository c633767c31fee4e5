"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import random

import pytest

from scrabbie.core.dictionary import WordList

WORDS = (
    "BAC", "BACS", "BONJOUR", "BONJOURS", "CHAT", "CHATTE", "TENNIS",
    "LAME", "LAMES", "SAPIN", "SAPINS", "CON", "CONS", "SONS", "ON",
    "CABOTE", "CABOTES", "AS", "TA",
)  # fmt: skip


class FakeClock:
    """Manually advanced time source for timers."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def word_list() -> WordList:
    return WordList(WORDS)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
