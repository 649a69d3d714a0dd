"""BoardEngine - the sole authority over tic-tac-toe state transitions.

Validates moves, flips turns, detects wins and draws, and notifies
listeners via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tictac.core.board import Board
from tictac.core.enums import Mark
from tictac.core.rules import Rules
from tictac.core.status import MatchStatus
from tictac.core.types import cell_name, is_valid_cell
from tictac.game.interfaces import IBoardEngine, MoveRejection
from tictac.game.state import GameSnapshot, MoveResult

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[int, Mark, GameSnapshot], None]  # index, mark, state
GameOverCallback = Callable[[MatchStatus], None]
NewGameCallback = Callable[[GameSnapshot], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_new_game: list[NewGameCallback] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────────────


class BoardEngine(IBoardEngine):
    """Owns the board, enforces turn order and classifies the match.

    Methods are meant to be called from a single thread (the UI thread).
    A fresh engine is already at the start of a match.
    """

    __slots__ = ("_board", "_turn", "_status", "_move_count", "events")

    def __init__(self) -> None:
        self._board = Board()
        self._turn = Mark.PLAYER_A
        self._status = MatchStatus.in_progress()
        self._move_count = 0
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameSnapshot:
        return self.get_state()

    @property
    def board(self) -> tuple[Mark, ...]:
        return self._board.snapshot()

    @property
    def turn(self) -> Mark:
        return self._turn

    @property
    def status(self) -> MatchStatus:
        return self._status

    @property
    def is_game_over(self) -> bool:
        return self._status.is_terminal

    # ── IBoardEngine impl ────────────────────────────────────────────────

    def start_new_game(self) -> None:
        self._board.clear()
        self._turn = Mark.PLAYER_A
        self._status = MatchStatus.in_progress()
        self._move_count = 0
        _LOGGER.debug("New game started")
        self._emit_new_game()

    def place_mark(self, index: int) -> MoveResult:
        # Range is checked first so a bad index is reported in any phase.
        if not is_valid_cell(index):
            return self._reject(index, MoveRejection.INDEX_OUT_OF_RANGE)
        if self._status.is_terminal:
            return self._reject(index, MoveRejection.GAME_ALREADY_OVER)
        if not self._board.is_empty(index):
            return self._reject(index, MoveRejection.CELL_OCCUPIED)

        mover = self._turn
        self._board.place(index, mover)
        self._move_count += 1
        self._status = Rules.status(self._board, mover)
        if not self._status.is_terminal:
            self._turn = mover.opposite

        _LOGGER.debug("%s played %s", mover.symbol, cell_name(index))
        snapshot = self.get_state()
        self._emit_move(index, mover, snapshot)

        if self._status.is_terminal:
            _LOGGER.info("Game over: %s", self._status)
            self._emit_game_over()

        return MoveResult(
            index=index,
            status=self._status,
            board=snapshot.board,
            mark=mover,
        )

    def get_state(self) -> GameSnapshot:
        return GameSnapshot(
            board=self._board.snapshot(),
            turn=self._turn,
            status=self._status,
            move_count=self._move_count,
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _reject(self, index: object, reason: MoveRejection) -> MoveResult:
        _LOGGER.debug("Move at %r rejected: %s", index, reason.name)
        return MoveResult(index=index, status=self._status, rejection=reason)

    def _emit_move(self, index: int, mark: Mark, snapshot: GameSnapshot) -> None:
        for cb in self.events.on_move:
            cb(index, mark, snapshot)

    def _emit_game_over(self) -> None:
        for cb in self.events.on_game_over:
            cb(self._status)

    def _emit_new_game(self) -> None:
        snapshot = self.get_state()
        for cb in self.events.on_new_game:
            cb(snapshot)
