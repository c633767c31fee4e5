"""Per-turn countdown timer."""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from dataclasses import dataclass

from scrabbie.game.interfaces import ITurnTimer, TimeControl


@dataclass(frozen=True, slots=True)
class TimerSnapshot:
    """Serializable timer state for turn-info reporting."""

    remaining: float
    minutes_left: int
    seconds_left: int
    is_running: bool


class TurnTimer(ITurnTimer):
    """Countdown of the active player's turn.

    Uses monotonic time by default; tests inject a fake *time_source*.
    """

    __slots__ = (
        "_time_control",
        "_time_source",
        "_elapsed",
        "_last_tick",
        "_running",
    )

    def __init__(
        self,
        time_control: TimeControl,
        time_source: Callable[[], float] = time.monotonic,
    ) -> None:
        self._time_control = time_control
        self._time_source = time_source
        self._elapsed: float = 0.0
        self._last_tick: float = 0.0
        self._running: bool = False

    # ── ITurnTimer implementation ────────────────────────────────────────

    def start(self) -> None:
        if self._running:
            return
        self._last_tick = self._time_source()
        self._running = True

    def stop(self) -> None:
        if self._running:
            self._consume_elapsed()
            self._running = False

    def reset(self) -> None:
        """Zero the elapsed time; a running timer keeps running."""
        self._elapsed = 0.0
        self._last_tick = self._time_source()

    def remaining(self) -> float:
        return max(0.0, self._time_control.turn_seconds - self.elapsed())

    def is_turn_over(self) -> bool:
        return self.remaining() <= 0.0

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def time_control(self) -> TimeControl:
        return self._time_control

    @property
    def is_running(self) -> bool:
        return self._running

    def elapsed(self) -> float:
        if self._running:
            return self._elapsed + (self._time_source() - self._last_tick)
        return self._elapsed

    @property
    def minutes_left(self) -> int:
        return self._split_remaining()[0]

    @property
    def seconds_left(self) -> int:
        return self._split_remaining()[1]

    def snapshot(self) -> TimerSnapshot:
        minutes, seconds = self._split_remaining()
        return TimerSnapshot(
            remaining=self.remaining(),
            minutes_left=minutes,
            seconds_left=seconds,
            is_running=self._running,
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _split_remaining(self) -> tuple[int, int]:
        remaining = self.remaining()
        if math.isinf(remaining):
            return (0, 0)
        total = math.ceil(remaining)
        return divmod(total, 60)

    def _consume_elapsed(self) -> None:
        now = self._time_source()
        self._elapsed += now - self._last_tick
        self._last_tick = now
