"""Abstract interfaces for the game layer.

The presentation layer depends on :class:`IBoardEngine`, not on the
concrete engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tictac.game.state import GameSnapshot, MoveResult


class MoveRejection(IntEnum):
    """Why a move was not applied. State is unchanged in every case."""

    INDEX_OUT_OF_RANGE = auto()
    CELL_OCCUPIED = auto()
    GAME_ALREADY_OVER = auto()


class IBoardEngine(ABC):
    """Interface for the board-state engine."""

    @abstractmethod
    def start_new_game(self) -> None:
        """Reset board, turn and status to the start of a match."""

    @abstractmethod
    def place_mark(self, index: int) -> MoveResult:
        """Place the current turn's mark at *index*.

        Rejections are reported in the returned result, never raised.
        """

    @abstractmethod
    def get_state(self) -> GameSnapshot:
        """Read-only snapshot of board, turn and status."""
