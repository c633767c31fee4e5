"""Tests for GameSettings."""

import pytest

from scrabbie.game.interfaces import TimeControl
from scrabbie.game.settings import GameSettings


class TestDefaults:
    def test_defaults(self) -> None:
        settings = GameSettings()
        assert settings.time_control == TimeControl.standard_5m()
        assert settings.block_penalty_seconds == 3.0
        assert settings.bingo_bonus == 50
        assert settings.rack_size == 7
        assert (settings.min_players, settings.max_players) == (2, 4)

    def test_invalid_bounds(self) -> None:
        with pytest.raises(ValueError):
            GameSettings(min_players=3, max_players=2)
        with pytest.raises(ValueError):
            GameSettings(rack_size=0)


class TestFromEnv:
    def test_empty_env(self) -> None:
        assert GameSettings.from_env({}) == GameSettings()

    def test_overrides(self) -> None:
        settings = GameSettings.from_env(
            {
                "SCRABBIE_TURN_SECONDS": "60",
                "SCRABBIE_BLOCK_PENALTY_SECONDS": "1.5",
                "SCRABBIE_BINGO_BONUS": "40",
                "SCRABBIE_MAX_PLAYERS": "3",
                "OTHER_BINGO_BONUS": "1",
            }
        )
        assert settings.time_control == TimeControl(60)
        assert settings.block_penalty_seconds == 1.5
        assert settings.bingo_bonus == 40
        assert settings.max_players == 3

    def test_custom_prefix(self) -> None:
        settings = GameSettings.from_env({"GAME_MIN_PLAYERS": "3"}, prefix="GAME_")
        assert settings.min_players == 3

    def test_bad_value_names_key(self) -> None:
        with pytest.raises(ValueError, match="BINGO_BONUS"):
            GameSettings.from_env({"SCRABBIE_BINGO_BONUS": "lots"})

    def test_bad_bounds_from_env(self) -> None:
        with pytest.raises(ValueError):
            GameSettings.from_env({"SCRABBIE_MIN_PLAYERS": "5"})
