"""Tests for turn records, placement handles and turn info."""

from scrabbie.core.command import CommandPlaceWord
from scrabbie.core.enums import CommandOutcome
from scrabbie.game.player import Player
from scrabbie.game.state import PendingPlacement, PlayerInfo, TurnInfo


class TestPendingPlacement:
    def test_identity_equality(self) -> None:
        command = CommandPlaceWord("h", 8, "h", "bac")
        player = Player("alice")
        a = PendingPlacement(command, player, [], words_valid=True)
        b = PendingPlacement(command, player, [], words_valid=True)
        assert a == a
        assert a != b


class TestTurnInfo:
    def test_as_dict(self) -> None:
        info = TurnInfo(
            minutes_left=1,
            seconds_left=5,
            active_player_name="alice",
            players=(
                PlayerInfo("alice", 12, 7, False),
                PlayerInfo("bob", 0, 6, True),
            ),
            letters_in_stash_count=40,
            game_over=False,
        )
        assert info.as_dict() == {
            "minutesLeft": 1,
            "secondsLeft": 5,
            "activePlayerName": "alice",
            "players": [
                {
                    "name": "alice",
                    "score": 12,
                    "rackLettersCount": 7,
                    "hasQuitAfterGameEnd": False,
                },
                {
                    "name": "bob",
                    "score": 0,
                    "rackLettersCount": 6,
                    "hasQuitAfterGameEnd": True,
                },
            ],
            "lettersInStashCount": 40,
            "gameOver": False,
        }


class TestOutcomes:
    def test_failures(self) -> None:
        assert CommandOutcome.INVALID_WORDS.is_failure
        assert CommandOutcome.WAIT.is_failure
        assert not CommandOutcome.SUCCESS.is_failure
        assert not CommandOutcome.CAN_PLACE_WORD.is_failure
