"""Cell type alias, coordinate helpers and the fixed win lines.

Board layout (row-major)::

    a1=0  b1=1  c1=2
    a2=3  b2=4  c2=5
    a3=6  b3=7  c3=8
"""

from __future__ import annotations

from typing import TypeAlias

Cell: TypeAlias = int  # 0–8
WinLine: TypeAlias = tuple[int, int, int]

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
FULL_MASK = (1 << CELL_COUNT) - 1


def row_of(cell: Cell) -> int:
    """Row index 0–2."""
    return cell // BOARD_SIZE


def col_of(cell: Cell) -> int:
    """Column index 0–2."""
    return cell % BOARD_SIZE


def make_cell(col: int, row: int) -> Cell:
    """Create cell index from column (0–2) and row (0–2)."""
    return row * BOARD_SIZE + col


def is_valid_cell(cell: object) -> bool:
    """Check whether *cell* is an integer cell index in range."""
    if isinstance(cell, bool) or not isinstance(cell, int):
        return False
    return 0 <= cell < CELL_COUNT


def cell_name(cell: Cell) -> str:
    """Human-readable name, e.g. 0 → 'a1', 8 → 'c3'."""
    return chr(ord("a") + col_of(cell)) + str(row_of(cell) + 1)


def parse_cell(name: str) -> Cell:
    """Parse cell name, e.g. 'b2' → 4."""
    if len(name) != 2 or name[0] not in "abc" or name[1] not in "123":
        raise ValueError(f"Invalid cell name: {name!r}")
    return make_cell(ord(name[0]) - ord("a"), int(name[1]) - 1)


def line_mask(line: WinLine) -> int:
    mask = 0
    for cell in line:
        mask |= 1 << cell
    return mask


# ── Win lines ────────────────────────────────────────────────────────────────

WIN_LINES: tuple[WinLine, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

WIN_MASKS: tuple[int, ...] = tuple(line_mask(line) for line in WIN_LINES)
