"""Room registry with one independent GameMaster per room, plus the timer tick."""

from __future__ import annotations

import itertools
import logging
import random
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from scrabbie.game.controller import GameMaster
from scrabbie.game.player import Player
from scrabbie.game.settings import GameSettings

if TYPE_CHECKING:
    from scrabbie.core.dictionary import WordLookup

_LOGGER = logging.getLogger(__name__)


class Room:
    """A game room of fixed capacity owning its own GameMaster."""

    __slots__ = ("_room_id", "_capacity", "_game_master")

    def __init__(self, room_id: int, capacity: int, game_master: GameMaster) -> None:
        self._room_id = room_id
        self._capacity = capacity
        self._game_master = game_master

    @property
    def room_id(self) -> int:
        return self._room_id

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def game_master(self) -> GameMaster:
        return self._game_master

    @property
    def players(self) -> list[Player]:
        return self._game_master.players

    @property
    def is_full(self) -> bool:
        return len(self._game_master.players) >= self._capacity

    @property
    def is_empty(self) -> bool:
        return all(p.has_quit for p in self._game_master.players)

    def __repr__(self) -> str:
        return f"Room({self._room_id}, {len(self.players)}/{self._capacity})"


class RoomRegistry:
    """Creates and tracks rooms. Rooms share no mutable state.

    Args:
        dictionary: Word lookup handed to every room's rules engine.
        settings: Settings shared by all rooms.
        rng_factory: ``() -> random.Random`` called once per room.
    """

    __slots__ = ("_dictionary", "_settings", "_rng_factory", "_rooms", "_ids", "_lock")

    def __init__(
        self,
        dictionary: WordLookup,
        settings: GameSettings | None = None,
        rng_factory: Callable[[], random.Random] = random.Random,
    ) -> None:
        self._dictionary = dictionary
        self._settings = settings if settings is not None else GameSettings()
        self._rng_factory = rng_factory
        self._rooms: dict[int, Room] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    @property
    def settings(self) -> GameSettings:
        return self._settings

    def rooms(self) -> list[Room]:
        with self._lock:
            return list(self._rooms.values())

    def find_room(self, room_id: int) -> Room | None:
        with self._lock:
            return self._rooms.get(room_id)

    def is_name_available(self, name: str) -> bool:
        with self._lock:
            return self._is_name_available(name)

    def join(self, name: str, socket_id: str, capacity: int) -> tuple[Room, Player]:
        """Seat a new player in the first open room of *capacity*.

        Raises:
            ValueError: unsupported capacity, or the name is taken.
        """
        if not self._settings.min_players <= capacity <= self._settings.max_players:
            raise ValueError(f"Unsupported room capacity: {capacity}")

        with self._lock:
            if not self._is_name_available(name):
                raise ValueError(f"Player name already taken: {name!r}")
            room = next(
                (
                    r
                    for r in self._rooms.values()
                    if r.capacity == capacity
                    and not r.is_full
                    and not r.game_master.is_game_started
                ),
                None,
            )
            if room is None:
                room = self._create_room(capacity)
            player = Player(
                name, socket_id, room.room_id, rack_size=self._settings.rack_size
            )
            if not room.game_master.add_player(player):
                if not room.players:
                    del self._rooms[room.room_id]
                raise ValueError(f"Room {room.room_id} refused player {name!r}")

        _LOGGER.info("%s joined room %d (%s)", name, room.room_id, room)
        return room, player

    def start_game(self, room_id: int) -> bool:
        room = self.find_room(room_id)
        if room is None:
            return False
        return room.game_master.start_game()

    def leave(self, name: str, room_id: int) -> bool:
        room = self.find_room(room_id)
        if room is None:
            return False
        left = room.game_master.handle_quit(name)
        if not room.players or room.is_empty:
            with self._lock:
                self._rooms.pop(room_id, None)
            _LOGGER.info("Room %d closed", room_id)
        return left

    def tick_all(self) -> int:
        """Run the timer check of every started room; returns forced turn changes."""
        changed = 0
        for room in self.rooms():
            try:
                if room.game_master.check_turn_over():
                    changed += 1
            except Exception:
                _LOGGER.warning("Timer tick failed in room %d", room.room_id, exc_info=True)
        return changed

    def _is_name_available(self, name: str) -> bool:
        if not name.strip():
            return False
        return all(
            p.name != name or p.has_quit
            for room in self._rooms.values()
            for p in room.players
        )

    def _create_room(self, capacity: int) -> Room:
        room_id = next(self._ids)
        game_master = GameMaster(
            dictionary=self._dictionary,
            settings=self._settings,
            rng=self._rng_factory(),
        )
        room = Room(room_id, capacity, game_master)
        self._rooms[room_id] = room
        _LOGGER.info("Created room %d for %d players", room_id, capacity)
        return room


class TurnTicker:
    """Daemon thread calling :meth:`RoomRegistry.tick_all` at a fixed interval."""

    __slots__ = ("_registry", "_interval", "_stop_event", "_thread")

    def __init__(self, registry: RoomRegistry, interval: float | None = None) -> None:
        self._registry = registry
        self._interval = (
            interval if interval is not None else registry.settings.tick_interval_seconds
        )
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="turn-ticker", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval):
            self._registry.tick_all()
