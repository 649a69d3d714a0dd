"""Tests for the board widget."""

from __future__ import annotations

from PyQt6.QtTest import QSignalSpy

from tictac.core.enums import Mark
from tictac.ui.board.board_widget import BoardWidget

A, B, E = Mark.PLAYER_A, Mark.PLAYER_B, Mark.EMPTY


class TestBoardWidget:
    def test_click_emits_cell_index(self, qapp: object) -> None:
        del qapp
        widget = BoardWidget()
        spy = QSignalSpy(widget.cell_clicked)

        widget.cell(4).click()
        widget.cell(0).click()

        assert len(spy) == 2
        assert spy[0][0] == 4
        assert spy[1][0] == 0

    def test_set_board_shows_symbols(self, qapp: object) -> None:
        del qapp
        widget = BoardWidget()
        widget.set_board([A, B, E, E, E, E, E, E, E])

        assert widget.cell(0).text() == "X"
        assert widget.cell(1).text() == "O"
        assert widget.cell(2).text() == ""
        assert not widget.cell(0).isEnabled()
        assert widget.cell(2).isEnabled()

    def test_filled_cell_does_not_emit(self, qapp: object) -> None:
        del qapp
        widget = BoardWidget()
        widget.set_board([A] + [E] * 8)
        spy = QSignalSpy(widget.cell_clicked)

        widget.cell(0).click()

        assert len(spy) == 0

    def test_non_interactive_disables_all_cells(self, qapp: object) -> None:
        del qapp
        widget = BoardWidget()
        widget.set_interactive(False)
        assert not any(widget.cell(i).isEnabled() for i in range(9))

        widget.set_interactive(True)
        assert all(widget.cell(i).isEnabled() for i in range(9))

    def test_winning_line_highlight(self, qapp: object) -> None:
        del qapp
        widget = BoardWidget()
        widget.set_board([A, A, A, B, B, E, E, E, E], winning_line=(0, 1, 2))

        winning = widget.cell(0).styleSheet()
        other = widget.cell(3).styleSheet()
        assert "#3a7d44" in winning
        assert "#3a7d44" not in other

    def test_hover_rule_follows_setting(self, qapp: object) -> None:
        del qapp
        widget = BoardWidget()
        assert ":hover" in widget.cell(0).styleSheet()

        widget.set_hover_highlight(False)
        assert ":hover" not in widget.cell(0).styleSheet()

    def test_cell_size(self, qapp: object) -> None:
        del qapp
        widget = BoardWidget()
        widget.set_cell_size(60)
        assert widget.cell(0).minimumWidth() == 60
