"""Game management layer: orchestrator, players, stash, timer, rooms.

Quick start::

    from scrabbie.core import CommandPlaceWord, WordList
    from scrabbie.game import GameMaster, Player

    alice, bob = Player("Alice"), Player("Bob")
    gm = GameMaster([alice, bob], dictionary=WordList(["BAC"]).is_valid_word)
    gm.start_game()
    gm.handle_command(CommandPlaceWord("h", 8, "h", "bac"), gm.active_player)
"""

from scrabbie.game.clock import TimerSnapshot, TurnTimer
from scrabbie.game.interfaces import GamePhase, ITurnTimer, TimeControl
from scrabbie.game.settings import GameSettings
from scrabbie.game.stash import InsufficientLettersError, LetterStash
from scrabbie.game.player import RACK_SIZE, Player, RackFullError
from scrabbie.game.state import (
    PendingPlacement,
    PlacementAttempt,
    PlayerInfo,
    TurnInfo,
    TurnRecord,
)
from scrabbie.game.controller import GameEvents, GameMaster
from scrabbie.game.rooms import Room, RoomRegistry, TurnTicker

__all__ = [
    # Interfaces
    "GamePhase",
    "ITurnTimer",
    "TimeControl",
    # Configuration
    "GameSettings",
    # Concrete
    "GameEvents",
    "GameMaster",
    "InsufficientLettersError",
    "LetterStash",
    "PendingPlacement",
    "PlacementAttempt",
    "Player",
    "PlayerInfo",
    "RACK_SIZE",
    "RackFullError",
    "Room",
    "RoomRegistry",
    "TimerSnapshot",
    "TurnInfo",
    "TurnRecord",
    "TurnTicker",
    "TurnTimer",
]
