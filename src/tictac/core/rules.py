"""High-level tic-tac-toe rules: win and draw detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tictac.core.enums import Mark
from tictac.core.status import MatchStatus
from tictac.core.types import WIN_LINES, WIN_MASKS, WinLine

if TYPE_CHECKING:
    from tictac.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def winning_line(board: Board, mark: Mark) -> WinLine | None:
        """First win line fully held by *mark*, or ``None``."""
        if mark is Mark.EMPTY:
            return None
        player_mask = board.mask(mark)
        for line, line_mask in zip(WIN_LINES, WIN_MASKS):
            if player_mask & line_mask == line_mask:
                return line
        return None

    @staticmethod
    def has_won(board: Board, mark: Mark) -> bool:
        return Rules.winning_line(board, mark) is not None

    @staticmethod
    def is_draw(board: Board) -> bool:
        """Board full and no line completed by either player."""
        return (
            board.is_full()
            and not Rules.has_won(board, Mark.PLAYER_A)
            and not Rules.has_won(board, Mark.PLAYER_B)
        )

    @staticmethod
    def status(board: Board, last_mover: Mark) -> MatchStatus:
        """Match status after *last_mover* placed a mark.

        The win check runs before the full-board check, so a move that fills
        the last cell and completes a line is a win.
        """
        line = Rules.winning_line(board, last_mover)
        if line is not None:
            return MatchStatus.won(last_mover, line)
        if board.is_full():
            return MatchStatus.draw()
        return MatchStatus.in_progress()
