# -*- coding: utf-8 -*-
"""Board state: cells, regions and candidate propagation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence, Set, Tuple

from sudoku.common.constants import (
    BOX_ROW_SEPARATOR,
    BOX_SIZE,
    CELL_COUNT,
    DEBUG_BOX_SEPARATOR,
    DEBUG_ROW_SEPARATOR,
    DIGITS,
    GRID_SIZE,
    UNSET,
    Region,
)

Grid = List[List[int]]


class InvalidValue(ValueError):
    """A value outside 1-9 was assigned, or a strict assignment was refused."""


def check_value(value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value not in DIGITS:
        raise InvalidValue(f"Invalid value set: {value}.")


def box_index(row: int, col: int) -> int:
    return (row // BOX_SIZE) * BOX_SIZE + col // BOX_SIZE


def _box_ids(box: int) -> Tuple[int, ...]:
    row_start = (box // BOX_SIZE) * BOX_SIZE
    col_start = (box % BOX_SIZE) * BOX_SIZE
    return tuple(
        row * GRID_SIZE + col
        for row in range(row_start, row_start + BOX_SIZE)
        for col in range(col_start, col_start + BOX_SIZE)
    )


# cell ids of every region, in row-major order
REGION_IDS: Dict[Region, Tuple[Tuple[int, ...], ...]] = {
    Region.ROW: tuple(
        tuple(row * GRID_SIZE + col for col in range(GRID_SIZE)) for row in range(GRID_SIZE)
    ),
    Region.COL: tuple(
        tuple(row * GRID_SIZE + col for row in range(GRID_SIZE)) for col in range(GRID_SIZE)
    ),
    Region.BOX: tuple(_box_ids(box) for box in range(GRID_SIZE)),
}


def _peer_ids(cell_id: int) -> Tuple[int, ...]:
    row, col = divmod(cell_id, GRID_SIZE)
    related = (
        set(REGION_IDS[Region.ROW][row])
        | set(REGION_IDS[Region.COL][col])
        | set(REGION_IDS[Region.BOX][box_index(row, col)])
    )
    related.discard(cell_id)
    return tuple(sorted(related))


PEER_IDS: Tuple[Tuple[int, ...], ...] = tuple(_peer_ids(cell_id) for cell_id in range(CELL_COUNT))


@dataclass
class Cell:
    """
    A single board position.

    An assigned cell carries no candidates; an unset cell carries every
    digit not yet excluded by its peers.
    """

    row: int
    col: int
    value: int = UNSET
    candidates: Set[int] = field(default_factory=lambda: set(DIGITS))

    @property
    def box(self) -> int:
        return box_index(self.row, self.col)

    @property
    def id(self) -> int:
        return self.row * GRID_SIZE + self.col

    def is_set(self) -> bool:
        return self.value != UNSET

    def try_set(self, value: int) -> bool:
        """Assign `value` if it is still a candidate. Returns whether it was assigned."""
        check_value(value)
        if value not in self.candidates:
            return False
        self.value = value
        self.candidates = set()
        return True

    def remove_candidate(self, value: int) -> bool:
        if value in self.candidates:
            self.candidates.discard(value)
            return True
        return False

    def clear(self) -> None:
        self.value = UNSET
        self.candidates = set(DIGITS)

    def copy(self) -> Cell:
        return Cell(self.row, self.col, self.value, set(self.candidates))


class Board:
    """A 9x9 grid of cells that keeps peer candidates consistent with assignments."""

    def __init__(self):
        self._cells: List[List[Cell]] = [
            [Cell(row, col) for col in range(GRID_SIZE)] for row in range(GRID_SIZE)
        ]

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> Board:
        """Build a board from rows of ints, 0 meaning unset. Conflicts raise `InvalidValue`."""
        if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
            raise ValueError(f"Grid must be {GRID_SIZE}x{GRID_SIZE}")
        board = cls()
        for row_no, row in enumerate(grid):
            for col_no, value in enumerate(row):
                if value != UNSET:
                    board.set_value(row_no, col_no, value)
        return board

    def copy(self) -> Board:
        """An independent deep copy; no cell state is shared with the original."""
        board = Board.__new__(Board)
        board._cells = [[cell.copy() for cell in row] for row in self._cells]
        return board

    def clear(self) -> None:
        for cell in self.cells():
            cell.clear()

    # ---- access and iteration ----

    def cell(self, row_no: int, col_no: int) -> Cell:
        if not (0 <= row_no < GRID_SIZE and 0 <= col_no < GRID_SIZE):
            raise IndexError(f"Cell ({row_no}, {col_no}) is outside the board")
        return self._cells[row_no][col_no]

    def cell_by_id(self, cell_id: int) -> Cell:
        row_no, col_no = divmod(cell_id, GRID_SIZE)
        return self.cell(row_no, col_no)

    def cells(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def region_cells(self, region: Region, index: int) -> List[Cell]:
        return [self.cell_by_id(cell_id) for cell_id in REGION_IDS[region][index]]

    def row_cells(self, row_no: int) -> List[Cell]:
        return self.region_cells(Region.ROW, row_no)

    def col_cells(self, col_no: int) -> List[Cell]:
        return self.region_cells(Region.COL, col_no)

    def box_cells(self, box_no: int) -> List[Cell]:
        return self.region_cells(Region.BOX, box_no)

    def regions(self) -> Iterator[Tuple[Region, int, List[Cell]]]:
        """All 27 regions: rows, then columns, then boxes."""
        for region in (Region.ROW, Region.COL, Region.BOX):
            for index in range(GRID_SIZE):
                yield region, index, self.region_cells(region, index)

    def peer_cells(self, row_no: int, col_no: int) -> List[Cell]:
        return [self.cell_by_id(peer_id) for peer_id in PEER_IDS[row_no * GRID_SIZE + col_no]]

    # ---- assignment ----

    def try_set_value(self, row_no: int, col_no: int, value: int) -> bool:
        """
        Assign `value` to a cell and remove it from the candidates of every unset peer.

        Raises `InvalidValue` for a value outside 1-9. Returns False, leaving the
        board untouched, when `value` is not a candidate of the cell.
        """
        if not self.cell(row_no, col_no).try_set(value):
            return False
        for peer in self.peer_cells(row_no, col_no):
            if not peer.is_set():
                peer.remove_candidate(value)
        return True

    def set_value(self, row_no: int, col_no: int, value: int) -> None:
        if not self.try_set_value(row_no, col_no, value):
            raise InvalidValue(f"Could not set value {value} for cell ({row_no}, {col_no}).")

    def unset(self, row_no: int, col_no: int) -> None:
        """Clear an assigned cell and recompute candidates for it and all its unset peers."""
        cell = self.cell(row_no, col_no)
        if not cell.is_set():
            return
        cell.clear()
        self._recompute_candidates(cell)
        for peer in self.peer_cells(row_no, col_no):
            if not peer.is_set():
                self._recompute_candidates(peer)

    def _recompute_candidates(self, cell: Cell) -> None:
        cell.candidates = set(DIGITS) - {
            peer.value for peer in self.peer_cells(cell.row, cell.col) if peer.is_set()
        }

    def remove_candidate(self, row_no: int, col_no: int, value: int) -> bool:
        return self.cell(row_no, col_no).remove_candidate(value)

    # ---- queries ----

    def cells_with_single_candidate(self) -> List[Cell]:
        return [cell for cell in self.cells() if not cell.is_set() and len(cell.candidates) == 1]

    def cell_set_count(self) -> int:
        return sum(1 for cell in self.cells() if cell.is_set())

    def is_solved(self) -> bool:
        return self.cell_set_count() == CELL_COUNT

    def to_grid(self) -> Grid:
        return [[cell.value for cell in row] for row in self._cells]

    # ---- rendering ----

    def display(self) -> str:
        lines = []
        for row_no, row in enumerate(self._cells):
            if row_no in (3, 6):
                lines.append(BOX_ROW_SEPARATOR)
            line = ""
            for col_no, cell in enumerate(row):
                if col_no in (3, 6):
                    line += "|"
                line += str(cell.value) if cell.is_set() else " "
            lines.append(line)
        return "\n".join(lines) + "\n"

    def debug_display(self) -> str:
        """Like `display`, but every cell is a 3x3 block listing its remaining candidates."""
        content = []
        for row_no, row in enumerate(self._cells):
            if row_no in (3, 6):
                content.append(DEBUG_BOX_SEPARATOR)
            elif row_no > 0:
                content.append(DEBUG_ROW_SEPARATOR)

            lines = ["", "", ""]
            for col_no, cell in enumerate(row):
                if col_no > 0:
                    sep = "#" if col_no in (3, 6) else "|"
                    lines = [line + sep for line in lines]
                if cell.is_set():
                    lines[0] += " v "
                    lines[1] += f">{cell.value}<"
                    lines[2] += " ^ "
                else:
                    for digit in sorted(DIGITS):
                        lines[(digit - 1) // 3] += str(digit) if digit in cell.candidates else " "
            content.extend(lines)
        return "\n".join(content) + "\n"

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"Board(set={self.cell_set_count()})"
