"""Tests for Rules: win and draw detection."""

import pytest

from tictac.core.board import Board
from tictac.core.enums import Mark
from tictac.core.rules import Rules
from tictac.core.status import MatchOutcome, MatchStatus
from tictac.core.types import WIN_LINES

A, B, E = Mark.PLAYER_A, Mark.PLAYER_B, Mark.EMPTY


def _board(layout: str) -> Board:
    """Build a board from a 9-char string of 'X', 'O' and '.'."""
    marks = {"X": A, "O": B, ".": E}
    return Board.from_cells(marks[ch] for ch in layout)


class TestWinningLine:
    @pytest.mark.parametrize("line", WIN_LINES)
    def test_every_line_wins(self, line: tuple[int, int, int]) -> None:
        board = Board()
        for cell in line:
            board.place(cell, A)
        assert Rules.winning_line(board, A) == line
        assert Rules.winning_line(board, B) is None

    def test_two_in_a_row_is_not_a_win(self) -> None:
        assert Rules.winning_line(_board("XX.OO...."), A) is None

    def test_empty_mark_never_wins(self) -> None:
        assert Rules.winning_line(Board(), E) is None

    def test_diagonal(self) -> None:
        assert Rules.winning_line(_board("O.X.X.XO."), A) == (2, 4, 6)


class TestDraw:
    def test_full_board_without_line_is_draw(self) -> None:
        assert Rules.is_draw(_board("XOXXOOOXX"))

    def test_full_board_with_line_is_not_draw(self) -> None:
        assert not Rules.is_draw(_board("XXXOOXOXO"))

    def test_partial_board_is_not_draw(self) -> None:
        assert not Rules.is_draw(_board("XO......."))


class TestStatus:
    def test_in_progress(self) -> None:
        status = Rules.status(_board("X...O...."), B)
        assert status == MatchStatus.in_progress()
        assert not status.is_terminal

    def test_win(self) -> None:
        status = Rules.status(_board("XXXOO...."), A)
        assert status.outcome == MatchOutcome.WON
        assert status.winner is A
        assert status.line == (0, 1, 2)

    def test_draw(self) -> None:
        status = Rules.status(_board("XOXXOOOXX"), A)
        assert status.outcome == MatchOutcome.DRAW
        assert status.winner is E
        assert status.line is None

    def test_win_on_last_cell_beats_draw(self) -> None:
        # X fills the last cell (8) and completes the 0-4-8 diagonal.
        status = Rules.status(_board("XOOOXXXOX"), A)
        assert status.is_won
        assert status.line == (0, 4, 8)

    def test_only_mover_is_checked(self) -> None:
        # O holds a line but X just moved; the engine never reaches this.
        status = Rules.status(_board("OOOXX.X.."), A)
        assert status.outcome == MatchOutcome.IN_PROGRESS


class TestMatchStatus:
    def test_won_requires_a_player(self) -> None:
        with pytest.raises(ValueError):
            MatchStatus.won(E, (0, 1, 2))

    def test_str(self) -> None:
        assert str(MatchStatus.draw()) == "draw"
        assert str(MatchStatus.in_progress()) == "in progress"
        assert str(MatchStatus.won(B, (2, 5, 8))) == "O wins on [2, 5, 8]"
