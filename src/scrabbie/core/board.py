"""Board - tile grid, placement primitives, word extraction and scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from scrabbie.core.command import is_joker_character
from scrabbie.core.enums import BonusKind, Orientation
from scrabbie.core.layout import BonusLayout, standard_layout
from scrabbie.core.letter import Letter
from scrabbie.core.types import (
    BOARD_SIZE,
    CENTER,
    Position,
    is_in_bounds,
    row_name,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from scrabbie.core.command import CommandPlaceWord

REMOVED_PLACEHOLDER = "-"


class RackHolder(Protocol):
    """Anything that can take letters back onto its rack."""

    def add_letters(self, letters: list[Letter]) -> None: ...


@dataclass(slots=True)
class BoardTile:
    """One square of the grid."""

    row: int
    column: int
    bonus: BonusKind = BonusKind.BASIC
    letter: Letter | None = None
    can_remove_letter: bool = False
    bonus_consumed: bool = False

    @property
    def position(self) -> Position:
        return (self.row, self.column)

    @property
    def is_empty(self) -> bool:
        return self.letter is None

    @property
    def letter_multiplier(self) -> int:
        return 1 if self.bonus_consumed else self.bonus.letter_multiplier

    @property
    def word_multiplier(self) -> int:
        return 1 if self.bonus_consumed else self.bonus.word_multiplier

    def clear(self) -> Letter | None:
        letter = self.letter
        self.letter = None
        self.can_remove_letter = False
        return letter


@dataclass(frozen=True, slots=True)
class Word:
    """A maximal run of occupied tiles read along one axis."""

    orientation: Orientation
    positions: tuple[Position, ...]
    text: str

    @property
    def start(self) -> Position:
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)


class Board:
    """Mutable 15x15 grid of :class:`BoardTile`.

    Letters placed by the most recent, not yet confirmed placement keep
    ``can_remove_letter`` set; everything else on the board is permanent.
    """

    __slots__ = ("_tiles", "_last_placement")

    def __init__(self, layout: BonusLayout | None = None) -> None:
        bonuses = layout if layout is not None else standard_layout()
        self._tiles: list[list[BoardTile]] = [
            [BoardTile(r, c, bonuses[r][c]) for c in range(BOARD_SIZE)]
            for r in range(BOARD_SIZE)
        ]
        self._last_placement: CommandPlaceWord | None = None

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> BoardTile:
        row, column = pos
        if not is_in_bounds(row, column):
            raise IndexError(f"Position out of board: {pos}")
        return self._tiles[row][column]

    def tiles(self) -> Iterator[BoardTile]:
        for row in self._tiles:
            yield from row

    def is_empty(self, pos: Position) -> bool:
        return self[pos].is_empty

    def is_occupied(self, pos: Position) -> bool:
        row, column = pos
        return is_in_bounds(row, column) and not self._tiles[row][column].is_empty

    @property
    def is_board_empty(self) -> bool:
        return all(tile.is_empty for tile in self.tiles())

    @property
    def last_placement(self) -> CommandPlaceWord | None:
        return self._last_placement

    def placed_tiles(self) -> list[BoardTile]:
        """Tiles filled by the pending placement (still removable)."""
        return [tile for tile in self.tiles() if tile.can_remove_letter]

    # -- Placement primitives -----------------------------------------------

    def place_word(self, command: CommandPlaceWord) -> None:
        """Write the command's letters onto the empty tiles of its span.

        Occupied tiles are reused as they are. Any still-removable letters
        from an earlier placement are confirmed first.
        """
        if not self.is_word_in_bounds(command):
            raise ValueError(f"Word does not fit on the board: {command}")

        self.lock_placed_letters()
        for pos, char in zip(command.positions(), command.word):
            tile = self[pos]
            if not tile.is_empty:
                continue
            if is_joker_character(char):
                tile.letter = Letter.joker(char)
            else:
                tile.letter = Letter.regular(char)
            tile.can_remove_letter = True
        self._last_placement = command

    def remove_word(self, command: CommandPlaceWord, player: RackHolder) -> str:
        """Undo the not-yet-confirmed letters of *command*.

        Removed letters go back to *player*'s rack (jokers unbound). Returns
        the command word with every cleared position shown as ``-``. A rack
        that cannot take the letters back raises and leaves the board as is.
        """
        spans = [
            (self._tiles[row][column] if is_in_bounds(row, column) else None, char)
            for (row, column), char in zip(command.positions(), command.word)
        ]
        removable = [
            tile for tile, _ in spans if tile is not None and tile.can_remove_letter
        ]
        player.add_letters([tile.letter.unbound() for tile in removable if tile.letter])

        snapshot: list[str] = []
        for tile, char in spans:
            if tile is not None and tile.can_remove_letter:
                tile.clear()
                snapshot.append(REMOVED_PLACEHOLDER)
            else:
                snapshot.append(char)
        if self._last_placement == command:
            self._last_placement = None
        return "".join(snapshot)

    def lock_placed_letters(self) -> None:
        """Make every pending letter permanent."""
        for tile in self.tiles():
            tile.can_remove_letter = False

    def find_letters_to_remove(self, command: CommandPlaceWord) -> list[Letter]:
        """Rack letters the command consumes, in placement order.

        Positions already holding a letter are free and contribute nothing.
        """
        letters: list[Letter] = []
        for pos, char in zip(command.positions(), command.word):
            if self.is_occupied(pos):
                continue
            if is_joker_character(char):
                letters.append(Letter.joker())
            else:
                letters.append(Letter.regular(char))
        return letters

    # -- Placement queries --------------------------------------------------

    def is_word_in_bounds(self, command: CommandPlaceWord) -> bool:
        last_row, last_column = command.positions()[-1]
        return is_in_bounds(command.row, command.column) and is_in_bounds(
            last_row, last_column
        )

    def is_word_correctly_overlapping(self, command: CommandPlaceWord) -> bool:
        for pos, char in zip(command.positions(), command.word):
            letter = self[pos].letter
            if letter is not None and not letter.matches(char):
                return False
        return True

    def is_new_word(self, command: CommandPlaceWord) -> bool:
        """Whether the command fills at least one empty tile."""
        return any(self.is_empty(pos) for pos in command.positions())

    def is_word_overlapping_central_tile(self, command: CommandPlaceWord) -> bool:
        return CENTER in command.positions()

    def is_word_adjacent_to_another(self, command: CommandPlaceWord) -> bool:
        """Whether a letter the command would add touches an existing one."""
        for row, column in command.positions():
            if self.is_occupied((row, column)):
                continue
            neighbours = (
                (row - 1, column),
                (row + 1, column),
                (row, column - 1),
                (row, column + 1),
            )
            if any(self.is_occupied(n) for n in neighbours):
                return True
        return False

    # -- Word extraction ----------------------------------------------------

    def word_at(self, pos: Position, orientation: Orientation) -> Word:
        """The maximal run through the occupied tile at *pos*."""
        dr, dc = orientation.step
        row, column = pos
        while self.is_occupied((row - dr, column - dc)):
            row, column = row - dr, column - dc

        positions: list[Position] = []
        chars: list[str] = []
        while self.is_occupied((row, column)):
            letter = self._tiles[row][column].letter
            assert letter is not None and letter.character is not None
            positions.append((row, column))
            chars.append(letter.character)
            row, column = row + dr, column + dc
        return Word(orientation, tuple(positions), "".join(chars))

    def all_words(self) -> list[Word]:
        """Every run of two or more letters, rows first, then columns."""
        words: list[Word] = []
        for orientation in (Orientation.HORIZONTAL, Orientation.VERTICAL):
            dr, dc = orientation.step
            for tile in self.tiles():
                pos = tile.position
                if tile.is_empty or self.is_occupied((pos[0] - dr, pos[1] - dc)):
                    continue
                word = self.word_at(pos, orientation)
                if len(word) >= 2:
                    words.append(word)
        return words

    def invalid_words(self, is_valid_word: Callable[[str], bool]) -> list[str]:
        return [word.text for word in self.all_words() if not is_valid_word(word.text)]

    def are_all_words_valid(self, is_valid_word: Callable[[str], bool]) -> bool:
        return all(is_valid_word(word.text) for word in self.all_words())

    def new_words(self) -> list[Word]:
        """Words formed by the pending placement.

        A perpendicular run counts when it is at least two letters long.
        The run along the placement's orientation counts too, unless it is a
        single letter already covered by a perpendicular run.
        """
        placed = [tile.position for tile in self.placed_tiles()]
        if not placed:
            return []

        command = self._last_placement
        if command is not None:
            main_axis = command.orientation
        elif len(placed) > 1 and placed[0][0] == placed[1][0]:
            main_axis = Orientation.HORIZONTAL
        else:
            main_axis = Orientation.VERTICAL

        main = self.word_at(placed[0], main_axis)
        crosses = [
            cross
            for cross in (self.word_at(pos, main_axis.perpendicular) for pos in placed)
            if len(cross) >= 2
        ]
        if len(main) >= 2 or not crosses:
            return [main, *crosses]
        return crosses

    # -- Scoring ------------------------------------------------------------

    def word_points(self, word: Word) -> int:
        total = 0
        word_multiplier = 1
        for pos in word.positions:
            tile = self[pos]
            assert tile.letter is not None
            total += tile.letter.value * tile.letter_multiplier
            word_multiplier *= tile.word_multiplier
        return total * word_multiplier

    def count_all_new_words_point(self) -> int:
        """Score of the pending placement across all of its new words.

        Bonuses are read, not consumed: new words sharing a bonus tile each
        get it. Call :meth:`deactivate_used_tiles_bonus` once afterwards.
        """
        return sum(self.word_points(word) for word in self.new_words())

    def deactivate_used_tiles_bonus(self) -> None:
        for word in self.new_words():
            for pos in word.positions:
                self[pos].bonus_consumed = True

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = ["   " + " ".join(f"{c + 1:>2}" for c in range(BOARD_SIZE))]
        for r in range(BOARD_SIZE):
            cells = []
            for tile in self._tiles[r]:
                cells.append(f"{tile.letter!s:>2}" if tile.letter else " .")
            rows.append(f"{row_name(r)}  {' '.join(cells)}")
        return "\n".join(rows)
