"""Tests for RoomRegistry and TurnTicker."""

import random
import threading

import pytest

from scrabbie.core.dictionary import WordList
from scrabbie.game.interfaces import GamePhase, TimeControl
from scrabbie.game.rooms import RoomRegistry, TurnTicker
from scrabbie.game.settings import GameSettings


def _registry(word_list: WordList, **kwargs) -> RoomRegistry:
    return RoomRegistry(
        word_list.is_valid_word, rng_factory=lambda: random.Random(3), **kwargs
    )


class TestJoin:
    def test_players_share_room_until_full(self, word_list: WordList) -> None:
        registry = _registry(word_list)
        room_a, _ = registry.join("alice", "s1", 2)
        room_b, _ = registry.join("bob", "s2", 2)
        room_c, player = registry.join("carol", "s3", 2)

        assert room_a is room_b
        assert room_a.is_full
        assert room_c is not room_a
        assert player.room_id == room_c.room_id

    def test_capacity_separates_rooms(self, word_list: WordList) -> None:
        registry = _registry(word_list)
        room_a, _ = registry.join("alice", "s1", 2)
        room_b, _ = registry.join("bob", "s2", 3)
        assert room_a is not room_b

    def test_name_taken(self, word_list: WordList) -> None:
        registry = _registry(word_list)
        registry.join("alice", "s1", 2)
        assert not registry.is_name_available("alice")
        with pytest.raises(ValueError):
            registry.join("alice", "s2", 2)

    def test_refused_seat_raises(self, word_list: WordList) -> None:
        registry = _registry(word_list)
        room, alice = registry.join("alice", "s1", 3)
        alice.has_quit = True

        with pytest.raises(ValueError):
            registry.join("alice", "s2", 3)

        assert [p.socket_id for p in room.players] == ["s1"]

    def test_concurrent_joins_same_name(self, word_list: WordList) -> None:
        registry = _registry(word_list)
        barrier = threading.Barrier(8)
        seated: list[str] = []
        refused: list[str] = []

        def _join(socket_id: str) -> None:
            barrier.wait()
            try:
                registry.join("alice", socket_id, 4)
            except ValueError:
                refused.append(socket_id)
            else:
                seated.append(socket_id)

        threads = [
            threading.Thread(target=_join, args=(f"s{i}",)) for i in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=5.0)

        assert len(seated) == 1
        assert len(refused) == 7
        names = [p.name for room in registry.rooms() for p in room.players]
        assert names == ["alice"]

    def test_blank_name(self, word_list: WordList) -> None:
        assert not _registry(word_list).is_name_available("  ")

    def test_bad_capacity(self, word_list: WordList) -> None:
        with pytest.raises(ValueError):
            _registry(word_list).join("alice", "s1", 5)

    def test_started_room_not_joined(self, word_list: WordList) -> None:
        registry = _registry(word_list)
        room, _ = registry.join("alice", "s1", 3)
        registry.join("bob", "s2", 3)
        assert registry.start_game(room.room_id)

        other, _ = registry.join("carol", "s3", 3)
        assert other is not room


class TestRoomsAreIndependent:
    def test_separate_boards(self, word_list: WordList) -> None:
        registry = _registry(word_list)
        room_a, _ = registry.join("alice", "s1", 2)
        registry.join("bob", "s2", 2)
        room_b, _ = registry.join("carol", "s3", 2)
        registry.join("dave", "s4", 2)

        assert room_a.game_master.board is not room_b.game_master.board
        assert room_a.game_master.stash is not room_b.game_master.stash

        registry.start_game(room_a.room_id)
        assert room_a.game_master.phase == GamePhase.AWAITING_COMMAND
        assert room_b.game_master.phase == GamePhase.NOT_STARTED


class TestLeave:
    def test_empty_room_closed(self, word_list: WordList) -> None:
        registry = _registry(word_list)
        room, _ = registry.join("alice", "s1", 2)
        assert registry.leave("alice", room.room_id)
        assert registry.find_room(room.room_id) is None

    def test_unknown_room(self, word_list: WordList) -> None:
        assert not _registry(word_list).leave("alice", 99)

    def test_start_unknown_room(self, word_list: WordList) -> None:
        assert not _registry(word_list).start_game(99)


class TestTick:
    def test_tick_all_counts_forced_turns(self, word_list: WordList) -> None:
        settings = GameSettings(time_control=TimeControl(0))
        registry = _registry(word_list, settings=settings)
        room, _ = registry.join("alice", "s1", 2)
        registry.join("bob", "s2", 2)
        registry.join("carol", "s3", 2)
        registry.start_game(room.room_id)

        assert registry.tick_all() == 1

    def test_ticker_runs_in_background(self, word_list: WordList) -> None:
        settings = GameSettings(time_control=TimeControl(0))
        registry = _registry(word_list, settings=settings)
        room, _ = registry.join("alice", "s1", 2)
        registry.join("bob", "s2", 2)
        registry.start_game(room.room_id)
        ticked = threading.Event()
        room.game_master.events.on_turn_changed.append(lambda _p: ticked.set())

        ticker = TurnTicker(registry, interval=0.01)
        ticker.start()
        try:
            assert ticked.wait(2.0)
            assert ticker.is_running
        finally:
            ticker.stop(timeout=2.0)
        assert not ticker.is_running
