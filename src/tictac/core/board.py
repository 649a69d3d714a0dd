"""Board - marks on a 3x3 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from tictac.core.enums import Mark
from tictac.core.types import CELL_COUNT, FULL_MASK, Cell, is_valid_cell


class Board:
    """Mutable 9-cell board with per-player occupancy bitmasks."""

    __slots__ = ("_cells", "_masks")

    def __init__(self) -> None:
        self._cells: list[Mark] = [Mark.EMPTY] * CELL_COUNT
        # [mark] -> bitmask of cells holding that mark (index 0 unused).
        self._masks: list[int] = [0, 0, 0]

    @classmethod
    def from_cells(cls, cells: Iterable[Mark]) -> Board:
        """Build a board from 9 marks in row-major order."""
        marks = [Mark(m) for m in cells]
        if len(marks) != CELL_COUNT:
            raise ValueError(f"Expected {CELL_COUNT} cells, got {len(marks)}")
        board = cls()
        for cell, mark in enumerate(marks):
            if mark is not Mark.EMPTY:
                board.place(cell, mark)
        return board

    # -- Element access -----------------------------------------------------

    def __getitem__(self, cell: Cell) -> Mark:
        if not is_valid_cell(cell):
            raise IndexError(f"Cell index out of range: {cell!r}")
        return self._cells[cell]

    def __iter__(self) -> Iterator[Mark]:
        return iter(self._cells)

    def __len__(self) -> int:
        return CELL_COUNT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def is_empty(self, cell: Cell) -> bool:
        return self._cells[cell] is Mark.EMPTY

    # -- Mutation -----------------------------------------------------------

    def place(self, cell: Cell, mark: Mark) -> None:
        """Put *mark* on an empty *cell*."""
        if not is_valid_cell(cell):
            raise ValueError(f"Cell index out of range: {cell!r}")
        if mark is Mark.EMPTY:
            raise ValueError("Cannot place an empty mark")
        if self._cells[cell] is not Mark.EMPTY:
            raise ValueError(f"Cell {cell} is already occupied")
        self._cells[cell] = mark
        self._masks[mark] |= 1 << cell

    def clear(self) -> None:
        self._cells = [Mark.EMPTY] * CELL_COUNT
        self._masks = [0, 0, 0]

    def copy(self) -> Board:
        board = Board()
        board._cells = self._cells.copy()
        board._masks = self._masks.copy()
        return board

    # -- Query helpers ------------------------------------------------------

    def mask(self, mark: Mark) -> int:
        """Bitmask of cells holding *mark* (bit i = cell i)."""
        if mark is Mark.EMPTY:
            return FULL_MASK & ~self.occupied_mask
        return self._masks[mark]

    @property
    def occupied_mask(self) -> int:
        return self._masks[Mark.PLAYER_A] | self._masks[Mark.PLAYER_B]

    def count(self, mark: Mark) -> int:
        return self.mask(mark).bit_count()

    def empty_cells(self) -> list[Cell]:
        return [cell for cell, mark in enumerate(self._cells) if mark is Mark.EMPTY]

    def is_full(self) -> bool:
        return self.occupied_mask == FULL_MASK

    def snapshot(self) -> tuple[Mark, ...]:
        """Immutable copy of the cells in row-major order."""
        return tuple(self._cells)

    def __str__(self) -> str:
        rows = []
        for row in range(3):
            rows.append("|".join(m.symbol for m in self._cells[row * 3 : row * 3 + 3]))
        return "\n-+-+-\n".join(rows)

    def __repr__(self) -> str:
        return f"Board({''.join(m.symbol if m else '.' for m in self._cells)})"
