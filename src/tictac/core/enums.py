"""Core enumerations for the tic-tac-toe domain."""

from __future__ import annotations

from enum import IntEnum

_SYMBOLS = {0: " ", 1: "X", 2: "O"}


class Mark(IntEnum):
    """Occupant of a board cell."""

    EMPTY = 0
    PLAYER_A = 1
    PLAYER_B = 2

    @property
    def opposite(self) -> Mark:
        if self is Mark.EMPTY:
            raise ValueError("Mark.EMPTY has no opposite")
        return Mark(3 - self.value)

    @property
    def symbol(self) -> str:
        """Display symbol: 'X', 'O' or a blank."""
        return _SYMBOLS[self.value]

    def __str__(self) -> str:
        return self.symbol
