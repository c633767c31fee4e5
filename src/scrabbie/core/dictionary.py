"""Word list lookup injected into the rules engine."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TypeAlias

from scrabbie.core.types import BOARD_SIZE

_LOGGER = logging.getLogger(__name__)

WordLookup: TypeAlias = Callable[[str], bool]


class WordList:
    """Case-insensitive set of accepted words."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: set[str] = set()
        for word in words:
            self.add(word)

    @classmethod
    def from_file(cls, path: str | Path) -> WordList:
        """Load one word per line; blank lines and oversized entries are skipped."""
        word_list = cls()
        with Path(path).open(encoding="utf-8") as fh:
            for line in fh:
                word = line.strip()
                if word and len(word) <= BOARD_SIZE:
                    word_list.add(word)
        _LOGGER.info("Loaded %d words from %s", len(word_list), path)
        return word_list

    def add(self, word: str) -> None:
        self._words.add(word.upper())

    def is_valid_word(self, word: str) -> bool:
        return word.upper() in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid_word(word)

    def __len__(self) -> int:
        return len(self._words)
