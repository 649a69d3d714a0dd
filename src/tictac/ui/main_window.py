"""MainWindow - top-level window wiring the board widget to the engine."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from tictac.core.enums import Mark
from tictac.core.status import MatchStatus
from tictac.game.engine import BoardEngine
from tictac.game.state import GameSnapshot
from tictac.ui.board.board_widget import BoardWidget
from tictac.ui.i18n import set_language, t
from tictac.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window.

    The engine is passed in explicitly; the window only translates clicks
    into ``place_mark`` calls and renders the snapshots it gets back.
    """

    def __init__(
        self,
        engine: BoardEngine | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self._engine = engine if engine is not None else BoardEngine()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()
        self.apply_settings()

        self._render(self._engine.get_state())

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(8)

        self._status_label = QLabel()
        self._status_label.setObjectName("statusLabel")
        root.addWidget(self._status_label)

        self._board_widget = BoardWidget()
        root.addWidget(self._board_widget, stretch=1)

        row = QHBoxLayout()
        row.addStretch()
        self._btn_restart = QPushButton()
        self._btn_restart.setObjectName("restartButton")
        self._btn_restart.setMinimumHeight(36)
        row.addWidget(self._btn_restart)
        row.addStretch()
        root.addLayout(row)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("")
        assert self._menu_game is not None

        self._act_new_game = QAction(self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_restart)
        self._menu_game.addAction(self._act_new_game)

        self._menu_game.addSeparator()

        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._menu_game.setTitle(s.menu_game)
        self._act_new_game.setText(s.menu_new_game)
        self._act_quit.setText(s.menu_quit)
        self._btn_restart.setText(s.btn_restart)
        self._status_label.setText(self._status_text(self._engine.get_state()))

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_widget.cell_clicked.connect(self._on_cell_clicked)
        self._btn_restart.clicked.connect(self._on_restart)

    def _connect_game_events(self) -> None:
        """Subscribe to BoardEngine callbacks."""
        events = self._engine.events
        events.on_move.append(self._on_game_move)
        events.on_game_over.append(self._on_game_over)
        events.on_new_game.append(self._render)

    # ── Settings ─────────────────────────────────────────────────────────

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def apply_settings(self) -> None:
        s = self._settings

        # Language must come first so all retranslate calls use the new locale
        set_language(s.language)
        self.retranslate_ui()

        self._board_widget.set_hover_highlight(s.hover_highlight)
        self._board_widget.set_cell_size(s.effective_cell_size)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_cell_clicked(self, index: int) -> None:
        result = self._engine.place_mark(index)
        if not result.accepted:
            assert result.rejection is not None
            _LOGGER.debug("Ignored click on cell %d: %s", index, result.rejection.name)

    def _on_restart(self) -> None:
        self._engine.start_new_game()

    # ── Engine callbacks ─────────────────────────────────────────────────

    def _on_game_move(self, index: int, mark: Mark, state: GameSnapshot) -> None:
        del index, mark
        self._render(state)

    def _on_game_over(self, status: MatchStatus) -> None:
        _LOGGER.info("Match finished: %s", status)

    # ── Rendering ────────────────────────────────────────────────────────

    def _render(self, state: GameSnapshot) -> None:
        status = state.status
        self._board_widget.set_board(state.board, status.line)
        self._board_widget.set_interactive(not status.is_terminal)
        self._status_label.setText(self._status_text(state))
        self._btn_restart.setVisible(status.is_terminal)

    @staticmethod
    def _status_text(state: GameSnapshot) -> str:
        s = t()
        status = state.status
        if status.is_won:
            return s.status_wins.format(mark=status.winner.symbol)
        if status.is_draw:
            return s.status_draw
        return s.status_turn.format(mark=state.turn.symbol)
