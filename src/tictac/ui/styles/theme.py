"""Visual theme constants and QSS styles."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from tictac.core.enums import Mark


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board cells."""

    cell: QColor
    cell_hover: QColor  # pointer over an empty cell
    cell_winning: QColor  # cells of the winning line
    mark_a: QColor
    mark_b: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            cell=QColor(43, 43, 43),
            cell_hover=QColor(62, 62, 62),
            cell_winning=QColor(58, 125, 68),  # green
            mark_a=QColor(230, 120, 80),  # orange
            mark_b=QColor(90, 160, 230),  # blue
        )

    def mark_color(self, mark: Mark) -> QColor:
        if mark is Mark.PLAYER_A:
            return self.mark_a
        if mark is Mark.PLAYER_B:
            return self.mark_b
        return self.cell

    def cell_style(
        self,
        mark: Mark,
        *,
        winning: bool = False,
        hover: bool = True,
    ) -> str:
        """QSS for a single cell button."""
        background = self.cell_winning if winning else self.cell
        style = (
            "QPushButton {"
            f" background-color: {background.name()};"
            f" color: {self.mark_color(mark).name()};"
            " border: 1px solid #555; border-radius: 4px;"
            " }"
        )
        if hover and mark is Mark.EMPTY:
            style += (
                "QPushButton:hover:enabled {"
                f" background-color: {self.cell_hover.name()};"
                " }"
            )
        return style


APP_STYLE = """
QMainWindow, QWidget {
    background-color: #1e1e1e;
    color: #e0e0e0;
}
QLabel#statusLabel {
    font-size: 18px;
    padding: 6px;
}
QPushButton#restartButton {
    background-color: #3a3a3a;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 18px;
}
QPushButton#restartButton:hover {
    background-color: #4a4a4a;
}
"""
