"""Core domain layer - pure tic-tac-toe logic with zero external dependencies.

Quick start::

    from tictac.core import Board, Mark, Rules

    board = Board()
    board.place(4, Mark.PLAYER_A)
    print(Rules.winning_line(board, Mark.PLAYER_A))
"""

from tictac.core.board import Board
from tictac.core.enums import Mark
from tictac.core.rules import Rules
from tictac.core.status import MatchOutcome, MatchStatus
from tictac.core.types import (
    BOARD_SIZE,
    CELL_COUNT,
    WIN_LINES,
    WIN_MASKS,
    Cell,
    WinLine,
    cell_name,
    col_of,
    is_valid_cell,
    make_cell,
    parse_cell,
    row_of,
)

__all__ = [
    # Enums
    "MatchOutcome",
    "Mark",
    # Types / helpers
    "BOARD_SIZE",
    "CELL_COUNT",
    "Cell",
    "WIN_LINES",
    "WIN_MASKS",
    "WinLine",
    "cell_name",
    "col_of",
    "is_valid_cell",
    "make_cell",
    "parse_cell",
    "row_of",
    # Domain objects
    "Board",
    "MatchStatus",
    "Rules",
]
