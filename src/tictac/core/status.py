"""Match status - the tagged outcome of a match."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from tictac.core.enums import Mark
from tictac.core.types import WinLine


class MatchOutcome(IntEnum):
    """Terminal/non-terminal classification of a match."""

    IN_PROGRESS = 0
    WON = 1
    DRAW = 2


@dataclass(frozen=True)
class MatchStatus:
    """Current match status.

    ``winner`` and ``line`` are only set for :attr:`MatchOutcome.WON`.
    """

    outcome: MatchOutcome = MatchOutcome.IN_PROGRESS
    winner: Mark = Mark.EMPTY
    line: WinLine | None = None

    @classmethod
    def in_progress(cls) -> MatchStatus:
        return cls()

    @classmethod
    def won(cls, winner: Mark, line: WinLine) -> MatchStatus:
        if winner is Mark.EMPTY:
            raise ValueError("A match cannot be won by Mark.EMPTY")
        a, b, c = line
        return cls(MatchOutcome.WON, winner, (a, b, c))

    @classmethod
    def draw(cls) -> MatchStatus:
        return cls(MatchOutcome.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.outcome != MatchOutcome.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        return self.outcome == MatchOutcome.WON

    @property
    def is_draw(self) -> bool:
        return self.outcome == MatchOutcome.DRAW

    def __str__(self) -> str:
        if self.outcome == MatchOutcome.WON:
            return f"{self.winner.symbol} wins on {list(self.line or ())}"
        if self.outcome == MatchOutcome.DRAW:
            return "draw"
        return "in progress"
