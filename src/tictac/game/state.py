"""Immutable value types handed out by the engine."""

from __future__ import annotations

from dataclasses import dataclass

from tictac.core.enums import Mark
from tictac.core.status import MatchStatus
from tictac.game.interfaces import MoveRejection


@dataclass(frozen=True)
class GameSnapshot:
    """Board, turn and status at one point in a match."""

    board: tuple[Mark, ...]
    turn: Mark
    status: MatchStatus
    move_count: int = 0

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    def empty_cells(self) -> list[int]:
        return [cell for cell, mark in enumerate(self.board) if mark is Mark.EMPTY]


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single ``place_mark`` call.

    ``board`` is the updated snapshot when the move was accepted and
    ``None`` when it was rejected.
    """

    index: object
    status: MatchStatus
    board: tuple[Mark, ...] | None = None
    mark: Mark = Mark.EMPTY
    rejection: MoveRejection | None = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None
