"""GameMaster, the turn orchestrator of one game room.

Coordinates: Players, LetterStash, RulesEngine, TurnTimer.
Emits events via simple callbacks so the transport layer / tests can
subscribe.
"""

from __future__ import annotations

import logging
import random
import threading
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from scrabbie.core.command import (
    Command,
    CommandChangeLetter,
    CommandPass,
    CommandPlaceWord,
)
from scrabbie.core.enums import CommandOutcome, CommandType
from scrabbie.core.rules import RulesEngine
from scrabbie.game.clock import TurnTimer
from scrabbie.game.interfaces import GamePhase
from scrabbie.game.settings import GameSettings
from scrabbie.game.stash import LetterStash
from scrabbie.game.state import (
    PendingPlacement,
    PlacementAttempt,
    PlayerInfo,
    TurnInfo,
    TurnRecord,
)

if TYPE_CHECKING:
    from scrabbie.core.board import Board
    from scrabbie.core.dictionary import WordLookup
    from scrabbie.game.player import Player

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

TurnCallback = Callable[["Player"], None]  # new active player
PlacementCallback = Callable[[TurnRecord], None]
GameOverCallback = Callable[[list["Player"]], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_word_placed: list[PlacementCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameMaster:
    """Orchestrates a full game: validates commands, scores placements,
    rotates turns, runs the turn timer and settles the end of the game.

    Thread-safety: every public method runs under a per-room re-entrant
    lock, so transport handlers and the timer tick may call in from
    different threads. Event callbacks run while the lock is held.
    """

    __slots__ = (
        "_settings",
        "_rng",
        "_rules",
        "_stash",
        "_players",
        "_active_index",
        "_time_source",
        "_timer",
        "_phase",
        "_is_first_turn",
        "_pending",
        "_history",
        "_lock",
        "events",
    )

    def __init__(
        self,
        players: Iterable[Player] = (),
        *,
        dictionary: WordLookup,
        settings: GameSettings | None = None,
        rng: random.Random | None = None,
        stash: LetterStash | None = None,
        board: Board | None = None,
        time_source: Callable[[], float] = time.monotonic,
    ) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._rng = rng if rng is not None else random.Random()
        self._rules = RulesEngine(dictionary, board)
        self._stash = stash if stash is not None else LetterStash(self._rng)
        self._players: list[Player] = list(players)
        self._active_index = 0
        self._time_source = time_source
        self._timer = TurnTimer(self._settings.time_control, time_source)
        self._phase = GamePhase.NOT_STARTED
        self._is_first_turn = True
        self._pending: PendingPlacement | None = None
        self._history: list[TurnRecord] = []
        self._lock = threading.RLock()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def rules(self) -> RulesEngine:
        return self._rules

    @property
    def board(self) -> Board:
        return self._rules.board

    @property
    def stash(self) -> LetterStash:
        return self._stash

    @property
    def timer(self) -> TurnTimer:
        return self._timer

    @property
    def players(self) -> list[Player]:
        return list(self._players)

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def is_game_started(self) -> bool:
        return self._phase != GamePhase.NOT_STARTED

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def is_first_turn(self) -> bool:
        return self._is_first_turn

    @property
    def pending_placement(self) -> PendingPlacement | None:
        return self._pending

    @property
    def history(self) -> list[TurnRecord]:
        return list(self._history)

    @property
    def active_player(self) -> Player | None:
        if not self.is_game_started or not self._players:
            return None
        return self._players[self._active_index]

    def find_player(self, name: str) -> Player | None:
        return next((p for p in self._players if p.name == name), None)

    # ── Setup ────────────────────────────────────────────────────────────

    def add_player(self, player: Player) -> bool:
        """Seat *player* before the game starts."""
        with self._lock:
            if self.is_game_started:
                return False
            if len(self._players) >= self._settings.max_players:
                return False
            if self.find_player(player.name) is not None:
                return False
            self._players.append(player)
            return True

    def start_game(self) -> bool:
        """Shuffle the seats, deal the racks and start the first turn."""
        with self._lock:
            if self.is_game_started:
                return False
            if len(self._players) < self._settings.min_players:
                return False

            self._randomize_players_order()
            for player in self._players:
                player.reset()
                count = min(player.rack_size, self._stash.amount_left)
                player.add_letters(self._stash.pick_letters(count))

            self._active_index = 0
            self._is_first_turn = True
            self._timer.reset()
            self._timer.start()
            self._set_phase(GamePhase.AWAITING_COMMAND)
            _LOGGER.info(
                "Game started with players %s",
                ", ".join(p.name for p in self._players),
            )
            self._emit_turn_changed()
            return True

    # ── Commands ─────────────────────────────────────────────────────────

    def handle_command(self, command: Command, player: Player) -> CommandOutcome:
        """Resolve one player action and return its outcome."""
        with self._lock:
            if command.command_type == CommandType.AIDE:
                return CommandOutcome.SUCCESS

            refusal = self._check_turn(player)
            if refusal is not None:
                return refusal

            if isinstance(command, CommandPlaceWord):
                attempt = self._try_place(command, player)
                if (
                    attempt.outcome == CommandOutcome.CAN_PLACE_WORD
                    and attempt.pending is not None
                ):
                    return self._confirm(attempt.pending)
                return attempt.outcome
            if isinstance(command, CommandChangeLetter):
                return self._change_letters(command, player)
            if isinstance(command, CommandPass):
                self._pass_turn(player)
                return CommandOutcome.SUCCESS
            return CommandOutcome.ERROR

    def try_place(self, command: CommandPlaceWord, player: Player) -> PlacementAttempt:
        """First phase of a placement: validate, place and check the words.

        On success the letters stay on the board and the returned handle
        must be passed to :meth:`confirm_placement` or
        :meth:`revert_placement` before the player can act again.
        """
        with self._lock:
            refusal = self._check_turn(player)
            if refusal is not None:
                return PlacementAttempt(refusal)
            return self._try_place(command, player)

    def confirm_placement(self, pending: PendingPlacement) -> CommandOutcome:
        with self._lock:
            if pending is not self._pending:
                return CommandOutcome.ERROR
            if not pending.words_valid:
                return CommandOutcome.INVALID_WORDS
            return self._confirm(pending)

    def revert_placement(self, pending: PendingPlacement | None = None) -> str | None:
        """Take the pending letters back to the rack.

        Returns the board snapshot of the reverted word (cleared letters as
        ``-``), or ``None`` when there is nothing to revert. Reverting an
        invalid placement ends the turn.
        """
        with self._lock:
            current = self._pending
            if current is None or (pending is not None and pending is not current):
                return None
            return self._revert(current)

    def check_turn_over(self) -> bool:
        """Timer tick. Returns True if the turn was forcibly changed."""
        with self._lock:
            if self._phase in (GamePhase.NOT_STARTED, GamePhase.GAME_OVER):
                return False

            pending = self._pending
            if pending is not None and not pending.words_valid:
                waited = self._time_source() - pending.placed_at
                if waited >= self._settings.block_penalty_seconds:
                    self._revert(pending)
                    return True

            if not self._timer.is_turn_over():
                return False

            player = self._players[self._active_index]
            _LOGGER.debug("Turn time over for %s", player.name)
            if pending is not None:
                self._revert(pending)
                if not pending.words_valid:
                    return True
            self._pass_turn(player, forced=True)
            return True

    def handle_quit(self, player_name: str) -> bool:
        """Remove a player from the game.

        The turn moves on first if the quitter is active; their rack goes
        back to the stash. The game ends when fewer than two remain.
        """
        with self._lock:
            player = self.find_player(player_name)
            if player is None:
                _LOGGER.warning("Unknown player %r tried to quit", player_name)
                return False

            if not self.is_game_started:
                self._players.remove(player)
                return True
            if self.is_game_over:
                player.has_quit = True
                player.has_quit_after_game_end = True
                return True
            if player.has_quit:
                return False

            pending = self._pending
            if pending is not None and pending.player is player:
                self._rules.remove_word(pending.command, player)
                player.blocked = False
                self._pending = None
                self._set_phase(GamePhase.AWAITING_COMMAND)

            if self._is_active(player):
                self._advance_turn()

            self._stash.return_letters(player.rack)
            player.rack = []
            player.has_quit = True
            _LOGGER.info("%s quit the game", player.name)

            if sum(1 for p in self._players if not p.has_quit) < 2:
                self._finish_game()
            return True

    def turn_info(self) -> TurnInfo:
        with self._lock:
            active = self.active_player
            return TurnInfo(
                minutes_left=self._timer.minutes_left,
                seconds_left=self._timer.seconds_left,
                active_player_name=active.name if active is not None else "",
                players=tuple(
                    PlayerInfo(
                        name=p.name,
                        score=p.score,
                        rack_letters_count=len(p.rack),
                        has_quit_after_game_end=p.has_quit_after_game_end,
                    )
                    for p in self._players
                ),
                letters_in_stash_count=self._stash.amount_left,
                game_over=self.is_game_over,
            )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _is_active(self, player: Player) -> bool:
        active = self.active_player
        return active is not None and active.socket_id == player.socket_id

    def _check_turn(self, player: Player) -> CommandOutcome | None:
        if self._phase == GamePhase.GAME_OVER:
            return CommandOutcome.GAME_OVER
        if self._phase == GamePhase.NOT_STARTED:
            return CommandOutcome.NOT_STARTED
        if not self._is_active(player):
            return CommandOutcome.WAIT
        if player.blocked or self._pending is not None:
            return CommandOutcome.BLOCK
        return None

    def _try_place(self, command: CommandPlaceWord, player: Player) -> PlacementAttempt:
        outcome = self._rules.can_place_word(command, is_first_turn=self._is_first_turn)
        if outcome != CommandOutcome.CAN_PLACE_WORD:
            _LOGGER.debug("Rejected %s from %s: %s", command, player.name, outcome.name)
            return PlacementAttempt(outcome)

        letters = self._rules.find_letters_to_remove(command)
        if not player.remove_letters(letters):
            return PlacementAttempt(CommandOutcome.INSUFFICIENT_RACK_LETTERS)

        self._rules.place_word(command)
        invalid = self._rules.invalid_words()
        pending = PendingPlacement(
            command=command,
            player=player,
            letters=letters,
            words_valid=not invalid,
            invalid_words=invalid,
            placed_at=self._time_source(),
        )
        self._pending = pending
        self._set_phase(GamePhase.VALIDATING)

        if invalid:
            player.blocked = True
            _LOGGER.debug("Invalid words from %s: %s", player.name, ", ".join(invalid))
            return PlacementAttempt(CommandOutcome.INVALID_WORDS, pending)
        return PlacementAttempt(CommandOutcome.CAN_PLACE_WORD, pending)

    def _confirm(self, pending: PendingPlacement) -> CommandOutcome:
        player = pending.player
        score = self._rules.count_all_new_words_point()
        if player.is_rack_empty:
            score += self._settings.bingo_bonus
        player.add_points(score)
        self._rules.confirm_placement()

        self._pending = None
        self._is_first_turn = False
        record = TurnRecord(
            player.name,
            CommandType.PLACER,
            CommandOutcome.SUCCESS,
            word=pending.command.word,
            score=score,
        )
        self._history.append(record)
        _LOGGER.info("%s placed %s for %d points", player.name, pending.command, score)
        for cb in self.events.on_word_placed:
            cb(record)

        draw = min(len(pending.letters), self._stash.amount_left)
        player.add_letters(self._stash.pick_letters(draw))

        if self._stash.is_empty:
            self._settle_end_game(player)
            return CommandOutcome.SUCCESS

        self._set_phase(GamePhase.AWAITING_COMMAND)
        self._advance_turn()
        return CommandOutcome.SUCCESS

    def _revert(self, pending: PendingPlacement) -> str:
        player = pending.player
        snapshot = self._rules.remove_word(pending.command, player)
        player.blocked = False
        self._pending = None
        self._set_phase(GamePhase.AWAITING_COMMAND)

        if not pending.words_valid:
            self._history.append(
                TurnRecord(
                    player.name,
                    CommandType.PLACER,
                    CommandOutcome.INVALID_WORDS,
                    word=pending.command.word,
                )
            )
            self._advance_turn()
        return snapshot

    def _change_letters(
        self, command: CommandChangeLetter, player: Player
    ) -> CommandOutcome:
        letters = command.rack_letters()
        if self._stash.is_empty:
            return CommandOutcome.STASH_EMPTY
        if self._stash.amount_left < len(letters):
            return CommandOutcome.STASH_INSUFFICIENT_LETTERS
        if not player.remove_letters(letters):
            return CommandOutcome.INSUFFICIENT_RACK_LETTERS

        player.add_letters(self._stash.exchange_letters(letters))
        self._history.append(
            TurnRecord(player.name, CommandType.CHANGER, CommandOutcome.SUCCESS)
        )
        self._advance_turn()
        return CommandOutcome.SUCCESS

    def _pass_turn(self, player: Player, *, forced: bool = False) -> None:
        self._history.append(
            TurnRecord(
                player.name,
                CommandType.PASSER,
                CommandOutcome.SUCCESS,
                forced=forced,
            )
        )
        self._advance_turn()

    def _advance_turn(self) -> None:
        """Hand the turn to the next player who has not quit."""
        count = len(self._players)
        if count == 0:
            return
        index = self._active_index
        for step in range(1, count + 1):
            index = (self._active_index + step) % count
            if not self._players[index].has_quit:
                break
        self._active_index = index
        self._timer.reset()
        self._emit_turn_changed()

    def _settle_end_game(self, last_player: Player) -> None:
        """Other players lose their rack value; the last player gains it all."""
        bonus = 0
        for player in self._players:
            if player is last_player or player.has_quit:
                continue
            penalty = player.rack_points
            player.subtract_points(penalty)
            bonus += penalty
        last_player.add_points(bonus)
        _LOGGER.info("Stash empty: %s collects %d settlement points", last_player.name, bonus)
        self._finish_game()

    def _finish_game(self) -> None:
        self._timer.stop()
        self._pending = None
        self._set_phase(GamePhase.GAME_OVER)
        _LOGGER.info(
            "Game over: %s",
            ", ".join(f"{p.name}={p.score}" for p in self._players),
        )
        for cb in self.events.on_game_over:
            cb(list(self._players))

    def _randomize_players_order(self) -> None:
        count = len(self._players)
        for _ in range(self._settings.order_swaps):
            i = self._rng.randrange(count)
            j = self._rng.randrange(count)
            self._players[i], self._players[j] = self._players[j], self._players[i]

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_turn_changed(self) -> None:
        active = self.active_player
        if active is None:
            return
        for cb in self.events.on_turn_changed:
            cb(active)
