"""Abstract interfaces for the game layer.

GameMaster depends on these, not on the concrete timer implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states of one game room."""

    NOT_STARTED = auto()
    AWAITING_COMMAND = auto()
    VALIDATING = auto()  # a placement awaits confirm/revert
    GAME_OVER = auto()


# ── Time control presets ─────────────────────────────────────────────────────


class TimeControl:
    """Immutable per-turn time budget.

    Args:
        turn_seconds: Time each player gets for a single turn.
    """

    __slots__ = ("turn_seconds",)

    def __init__(self, turn_seconds: float) -> None:
        self.turn_seconds = turn_seconds

    @classmethod
    def quick_1m(cls) -> TimeControl:
        return cls(60)

    @classmethod
    def standard_3m(cls) -> TimeControl:
        return cls(180)

    @classmethod
    def standard_5m(cls) -> TimeControl:
        return cls(300)

    @classmethod
    def unlimited(cls) -> TimeControl:
        """No time limit."""
        return cls(float("inf"))

    @property
    def is_unlimited(self) -> bool:
        return self.turn_seconds == float("inf")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeControl):
            return NotImplemented
        return self.turn_seconds == other.turn_seconds

    def __hash__(self) -> int:
        return hash(self.turn_seconds)

    def __repr__(self) -> str:
        if self.is_unlimited:
            return "TimeControl(unlimited)"
        return f"TimeControl({self.turn_seconds:.0f}s)"


# ── Abstract interfaces ─────────────────────────────────────────────────────


class ITurnTimer(ABC):
    """Interface for the active player's turn timer."""

    @abstractmethod
    def start(self) -> None:
        """Start (or resume) counting the current turn."""

    @abstractmethod
    def stop(self) -> None:
        """Pause the running timer."""

    @abstractmethod
    def reset(self) -> None:
        """Restart the budget for a new turn."""

    @abstractmethod
    def remaining(self) -> float:
        """Seconds left in the current turn."""

    @abstractmethod
    def is_turn_over(self) -> bool:
        """Has the current turn exhausted its budget?"""
