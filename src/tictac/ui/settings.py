"""User-configurable application settings."""

from __future__ import annotations

from dataclasses import dataclass

MIN_CELL_SIZE = 48


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    log_level: str = "WARNING"

    # Board
    hover_highlight: bool = True
    cell_size: int = 96  # pixels

    @property
    def effective_cell_size(self) -> int:
        return max(MIN_CELL_SIZE, self.cell_size)
