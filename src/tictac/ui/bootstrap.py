"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from tictac.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    if level_name.upper() != logging.getLevelName(level):
        _LOGGER.warning("Unknown log level %r, using WARNING", level_name)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from tictac.ui.styles.theme import APP_STYLE

    app.setApplicationName("Tic-Tac-Toe")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    settings: AppSettings | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from tictac.game.engine import BoardEngine
    from tictac.ui.main_window import MainWindow

    settings = settings if settings is not None else AppSettings()
    _configure_logging(settings.log_level)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(BoardEngine(), settings)
    window.show()

    _LOGGER.info("Application started")
    return app.exec()
