"""Game configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from scrabbie.game.interfaces import TimeControl

ENV_PREFIX = "SCRABBIE_"


@dataclass(frozen=True)
class GameSettings:
    """All tunables of a game room."""

    # Turns
    time_control: TimeControl = field(default_factory=TimeControl.standard_5m)
    tick_interval_seconds: float = 1.0

    # Penalty after an invalid placement, before it is reverted
    block_penalty_seconds: float = 3.0

    # Scoring
    rack_size: int = 7
    bingo_bonus: int = 50  # full rack cleared in one placement

    # Seats
    min_players: int = 2
    max_players: int = 4
    order_swaps: int = 4  # random seat swaps at game start

    def __post_init__(self) -> None:
        if self.min_players < 1 or self.max_players < self.min_players:
            raise ValueError(
                f"Invalid player bounds: {self.min_players}–{self.max_players}"
            )
        if self.rack_size < 1:
            raise ValueError(f"Rack size must be positive: {self.rack_size}")

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        prefix: str = ENV_PREFIX,
    ) -> GameSettings:
        """Defaults overridden by ``SCRABBIE_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()
        overrides: dict[str, object] = {}

        turn_seconds = env.get(f"{prefix}TURN_SECONDS")
        if turn_seconds is not None:
            overrides["time_control"] = TimeControl(_parse_float("TURN_SECONDS", turn_seconds))

        for name, parse in (
            ("tick_interval_seconds", _parse_float),
            ("block_penalty_seconds", _parse_float),
            ("bingo_bonus", _parse_int),
            ("min_players", _parse_int),
            ("max_players", _parse_int),
        ):
            raw = env.get(f"{prefix}{name.upper()}")
            if raw is not None:
                overrides[name] = parse(name.upper(), raw)

        return replace(settings, **overrides) if overrides else settings


def _parse_float(key: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number: {raw!r}") from None


def _parse_int(key: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer: {raw!r}") from None
