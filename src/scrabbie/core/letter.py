"""Letter value object.

A letter is a tagged variant: a *regular* tile carrying its own character
and point value, or a *joker* that scores nothing and may be bound to the
character it stands for once placed on the board.
"""

from __future__ import annotations

from dataclasses import dataclass

from scrabbie.core.enums import LetterKind

JOKER_SYMBOL = "JOKER"
JOKER_RACK_CHAR = "*"

LETTER_VALUES: dict[str, int] = {
    "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2,
    "H": 4, "I": 1, "J": 8, "K": 10, "L": 1, "M": 2, "N": 1,
    "O": 1, "P": 3, "Q": 8, "R": 1, "S": 1, "T": 1, "U": 1,
    "V": 4, "W": 10, "X": 10, "Y": 10, "Z": 10,
}  # fmt: skip

# Initial stash contents: 100 lettered tiles + 2 jokers.
LETTER_DISTRIBUTION: dict[str, int] = {
    "A": 9, "B": 2, "C": 2, "D": 3, "E": 15, "F": 2, "G": 2,
    "H": 2, "I": 8, "J": 1, "K": 1, "L": 5, "M": 3, "N": 6,
    "O": 6, "P": 2, "Q": 1, "R": 6, "S": 6, "T": 6, "U": 6,
    "V": 2, "W": 1, "X": 1, "Y": 1, "Z": 1, JOKER_SYMBOL: 2,
}  # fmt: skip


@dataclass(frozen=True, slots=True)
class Letter:
    """Immutable tile value.

    ``character`` is the letter of a regular tile, or the character a joker
    is bound to (``None`` while the joker sits unbound on a rack).
    """

    kind: LetterKind
    character: str | None = None

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def regular(cls, char: str) -> Letter:
        upper = char.upper()
        if upper not in LETTER_VALUES:
            raise ValueError(f"Invalid letter character: {char!r}")
        return cls(LetterKind.REGULAR, upper)

    @classmethod
    def joker(cls, bound: str | None = None) -> Letter:
        if bound is None:
            return cls(LetterKind.JOKER)
        upper = bound.upper()
        if upper not in LETTER_VALUES:
            raise ValueError(f"Invalid joker binding: {bound!r}")
        return cls(LetterKind.JOKER, upper)

    @classmethod
    def from_rack_char(cls, char: str) -> Letter:
        """Rack notation: ``'*'`` is a joker, anything else a regular tile."""
        if char == JOKER_RACK_CHAR:
            return cls.joker()
        return cls.regular(char)

    @classmethod
    def from_symbol(cls, symbol: str) -> Letter:
        """Inverse of :attr:`symbol`."""
        if symbol == JOKER_SYMBOL:
            return cls.joker()
        return cls.regular(symbol)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_joker(self) -> bool:
        return self.kind is LetterKind.JOKER

    @property
    def is_bound(self) -> bool:
        return self.character is not None

    @property
    def value(self) -> int:
        """Point value; jokers are always worth zero."""
        if self.kind is LetterKind.JOKER or self.character is None:
            return 0
        return LETTER_VALUES[self.character]

    @property
    def symbol(self) -> str:
        """Rack symbol: the letter itself, or ``"JOKER"`` for any joker."""
        if self.kind is LetterKind.JOKER:
            return JOKER_SYMBOL
        assert self.character is not None
        return self.character

    def matches(self, char: str) -> bool:
        """Case-insensitive comparison with the character shown on the board."""
        return self.character is not None and self.character == char.upper()

    # ── Re-binding ───────────────────────────────────────────────────────

    def bind(self, char: str) -> Letter:
        """A joker standing for *char*."""
        if self.kind is not LetterKind.JOKER:
            raise ValueError("Only jokers can be bound")
        return Letter.joker(char)

    def unbound(self) -> Letter:
        """The rack form of this letter (jokers lose their binding)."""
        if self.kind is LetterKind.JOKER and self.character is not None:
            return Letter.joker()
        return self

    def __str__(self) -> str:
        """Board display: jokers are shown in lowercase."""
        if self.kind is LetterKind.JOKER:
            return self.character.lower() if self.character else JOKER_RACK_CHAR
        return self.symbol
