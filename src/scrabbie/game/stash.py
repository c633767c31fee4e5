"""Letter stash: the shared bag of undrawn letters."""

from __future__ import annotations

import random
from collections import Counter

from scrabbie.core.letter import LETTER_DISTRIBUTION, Letter


class InsufficientLettersError(ValueError):
    """More letters requested than the stash holds."""


class LetterStash:
    """Bag of remaining letters for one game.

    Draws are uniform without replacement using the injected *rng*, so a
    seeded ``random.Random`` gives deterministic games.
    """

    __slots__ = ("_letters", "_rng")

    def __init__(
        self,
        rng: random.Random | None = None,
        distribution: dict[str, int] | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        counts = distribution if distribution is not None else LETTER_DISTRIBUTION
        self._letters: list[Letter] = []
        for symbol, count in counts.items():
            self._letters.extend(Letter.from_symbol(symbol) for _ in range(count))

    @property
    def amount_left(self) -> int:
        return len(self._letters)

    @property
    def is_empty(self) -> bool:
        return not self._letters

    def counts(self) -> Counter[str]:
        """Remaining letters per rack symbol."""
        return Counter(letter.symbol for letter in self._letters)

    def pick_letters(self, n: int) -> list[Letter]:
        """Remove and return *n* random letters."""
        if n < 0:
            raise ValueError(f"Cannot pick a negative amount: {n}")
        if n > self.amount_left:
            raise InsufficientLettersError(
                f"Requested {n} letters, only {self.amount_left} left"
            )
        picked: list[Letter] = []
        for _ in range(n):
            index = self._rng.randrange(len(self._letters))
            # swap-remove keeps each draw O(1)
            self._letters[index], self._letters[-1] = (
                self._letters[-1],
                self._letters[index],
            )
            picked.append(self._letters.pop())
        return picked

    def exchange_letters(self, letters: list[Letter]) -> list[Letter]:
        """Draw ``len(letters)`` fresh letters, then put *letters* back."""
        drawn = self.pick_letters(len(letters))
        self.return_letters(letters)
        return drawn

    def return_letters(self, letters: list[Letter]) -> None:
        self._letters.extend(letter.unbound() for letter in letters)

    def __repr__(self) -> str:
        return f"LetterStash(amount_left={self.amount_left})"
