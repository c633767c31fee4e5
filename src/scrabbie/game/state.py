"""Turn records, pending placements and the outbound turn-info snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from scrabbie.core.enums import CommandOutcome, CommandType

if TYPE_CHECKING:
    from scrabbie.core.command import CommandPlaceWord
    from scrabbie.core.letter import Letter
    from scrabbie.game.player import Player


@dataclass
class TurnRecord:
    """A single entry in the turn history."""

    player_name: str
    command_type: CommandType
    outcome: CommandOutcome
    word: str = ""
    score: int = 0
    forced: bool = False  # pass imposed by the turn timer


@dataclass(eq=False)
class PendingPlacement:
    """Letters placed on the board, awaiting confirm or revert.

    Compared by identity: a handle is only valid for the placement that
    produced it.
    """

    command: CommandPlaceWord
    player: Player
    letters: list[Letter]
    words_valid: bool
    invalid_words: list[str] = field(default_factory=list)
    placed_at: float = 0.0


@dataclass(frozen=True, slots=True)
class PlacementAttempt:
    """Result of ``GameMaster.try_place``."""

    outcome: CommandOutcome
    pending: PendingPlacement | None = None


@dataclass(frozen=True, slots=True)
class PlayerInfo:
    name: str
    score: int
    rack_letters_count: int
    has_quit_after_game_end: bool

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "score": self.score,
            "rackLettersCount": self.rack_letters_count,
            "hasQuitAfterGameEnd": self.has_quit_after_game_end,
        }


@dataclass(frozen=True, slots=True)
class TurnInfo:
    """Snapshot pushed to clients once per tick."""

    minutes_left: int
    seconds_left: int
    active_player_name: str
    players: tuple[PlayerInfo, ...]
    letters_in_stash_count: int
    game_over: bool

    def as_dict(self) -> dict[str, Any]:
        """Wire form with camelCase keys."""
        return {
            "minutesLeft": self.minutes_left,
            "secondsLeft": self.seconds_left,
            "activePlayerName": self.active_player_name,
            "players": [p.as_dict() for p in self.players],
            "lettersInStashCount": self.letters_in_stash_count,
            "gameOver": self.game_over,
        }
