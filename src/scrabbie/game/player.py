"""Player: per-seat mutable state."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scrabbie.core.letter import Letter

RACK_SIZE = 7


class RackFullError(ValueError):
    """More letters offered than the rack has room for."""


class Player:
    """A seat in a game room: identity, rack, score and status flags."""

    __slots__ = (
        "_name",
        "_socket_id",
        "_room_id",
        "_rack_size",
        "score",
        "rack",
        "blocked",
        "has_quit",
        "has_quit_after_game_end",
    )

    def __init__(
        self,
        name: str,
        socket_id: str = "",
        room_id: int | None = None,
        rack_size: int = RACK_SIZE,
    ) -> None:
        self._name = name
        self._socket_id = socket_id or name
        self._room_id = room_id
        self._rack_size = rack_size
        self.score: int = 0
        self.rack: list[Letter] = []
        self.blocked: bool = False
        self.has_quit: bool = False
        self.has_quit_after_game_end: bool = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def socket_id(self) -> str:
        return self._socket_id

    @property
    def room_id(self) -> int | None:
        return self._room_id

    @room_id.setter
    def room_id(self, room_id: int | None) -> None:
        self._room_id = room_id

    @property
    def rack_size(self) -> int:
        return self._rack_size

    # ── Score ────────────────────────────────────────────────────────────

    def add_points(self, points: int) -> None:
        self.score += points

    def subtract_points(self, points: int) -> None:
        self.score -= points

    # ── Rack ─────────────────────────────────────────────────────────────

    @property
    def is_rack_empty(self) -> bool:
        return not self.rack

    @property
    def rack_points(self) -> int:
        return sum(letter.value for letter in self.rack)

    def rack_symbols(self) -> list[str]:
        return [letter.symbol for letter in self.rack]

    def add_letter(self, letter: Letter) -> None:
        self.add_letters([letter])

    def add_letters(self, letters: list[Letter]) -> None:
        """Put *letters* on the rack, all or nothing.

        Raises:
            RackFullError: the rack cannot hold all of them.
        """
        if len(self.rack) + len(letters) > self._rack_size:
            raise RackFullError(
                f"{self._name}: cannot add {len(letters)} letters to a rack of "
                f"{len(self.rack)}/{self._rack_size}"
            )
        self.rack.extend(letter.unbound() for letter in letters)

    def has_letters(self, letters: list[Letter]) -> bool:
        needed = Counter(letter.symbol for letter in letters)
        available = Counter(self.rack_symbols())
        return all(available[symbol] >= n for symbol, n in needed.items())

    def remove_letters(self, letters: list[Letter]) -> bool:
        """Take *letters* off the rack, all or nothing."""
        if not self.has_letters(letters):
            return False
        for letter in letters:
            symbol = letter.symbol
            index = next(i for i, held in enumerate(self.rack) if held.symbol == symbol)
            del self.rack[index]
        return True

    def reset(self) -> None:
        """Fresh seat state for a new game."""
        self.score = 0
        self.rack = []
        self.blocked = False
        self.has_quit = False
        self.has_quit_after_game_end = False

    def __repr__(self) -> str:
        return f"Player({self._name!r}, score={self.score}, rack={self.rack_symbols()})"
