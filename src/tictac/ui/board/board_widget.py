"""BoardWidget - 3x3 grid of clickable cells."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from tictac.core.enums import Mark
from tictac.core.types import BOARD_SIZE, CELL_COUNT, cell_name, col_of, row_of
from tictac.ui.styles.theme import BoardTheme


class _CellButton(QPushButton):
    """One board cell showing its mark as text."""

    def __init__(self, index: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.index = index
        self.mark = Mark.EMPTY
        self.winning = False
        self.setObjectName(f"cell_{cell_name(index)}")
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)


class BoardWidget(QWidget):
    """Renders a board snapshot and reports cell clicks.

    Signals:
        cell_clicked(int): Index (0–8) of the clicked cell.
    """

    cell_clicked = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._hover_highlight = True
        self._interactive = True
        self._cells: list[_CellButton] = []
        self._setup_ui()
        self.set_cell_size(96)

    def _setup_ui(self) -> None:
        layout = QGridLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        for index in range(CELL_COUNT):
            btn = _CellButton(index)
            btn.clicked.connect(lambda _checked=False, i=index: self.cell_clicked.emit(i))
            layout.addWidget(btn, row_of(index), col_of(index))
            self._cells.append(btn)

        self._refresh()

    # ── Public API ────────────────────────────────────────────────────────

    def cell(self, index: int) -> QPushButton:
        return self._cells[index]

    def set_board(
        self,
        cells: Sequence[Mark],
        winning_line: Sequence[int] | None = None,
    ) -> None:
        """Show *cells* (row-major) and optionally highlight *winning_line*."""
        winners = set(winning_line or ())
        for btn, mark in zip(self._cells, cells):
            btn.mark = Mark(mark)
            btn.winning = btn.index in winners
        self._refresh()

    def set_interactive(self, interactive: bool) -> None:
        """Enable/disable clicks on empty cells."""
        self._interactive = interactive
        self._refresh()

    def set_hover_highlight(self, enabled: bool) -> None:
        self._hover_highlight = enabled
        self._refresh()

    def set_cell_size(self, size: int) -> None:
        font = QFont()
        font.setPointSize(max(12, size // 2))
        font.setBold(True)
        for btn in self._cells:
            btn.setMinimumSize(size, size)
            btn.setFont(font)
        side = size * BOARD_SIZE + 4 * (BOARD_SIZE + 1)
        self.setMinimumSize(side, side)

    # ── Internal ─────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        for btn in self._cells:
            btn.setText(btn.mark.symbol.strip())
            btn.setEnabled(self._interactive and btn.mark is Mark.EMPTY)
            btn.setStyleSheet(
                self._theme.cell_style(
                    btn.mark,
                    winning=btn.winning,
                    hover=self._hover_highlight,
                )
            )
