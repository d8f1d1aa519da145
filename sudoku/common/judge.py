# -*- coding: utf-8 -*-
"""Validity checks for boards and grids."""
from typing import Sequence, Union

from sudoku.common.board import PEER_IDS, REGION_IDS, Board
from sudoku.common.constants import CELL_COUNT, DIGITS, GRID_SIZE, UNSET


class SudokuJudge:
    """
    Judge Sudoku board state.

    - Accepts a `Board` or a 9x9 grid of ints
    - Allows incomplete boards (zeros are treated as empty cells)
    - Checks every row, column and 3x3 box for repeated digits
    """

    @staticmethod
    def _values(board) -> list:
        if isinstance(board, Board):
            return [cell.value for cell in board.cells()]
        if len(board) != GRID_SIZE or any(len(row) != GRID_SIZE for row in board):
            raise ValueError(f"Grid must be {GRID_SIZE}x{GRID_SIZE}")
        return [value for row in board for value in row]

    @staticmethod
    def is_valid(board: Union[Board, Sequence[Sequence[int]]]) -> bool:
        values = SudokuJudge._values(board)
        if any(value != UNSET and value not in DIGITS for value in values):
            return False
        for regions in REGION_IDS.values():
            for ids in regions:
                nums = [values[cell_id] for cell_id in ids if values[cell_id] != UNSET]
                if len(nums) != len(set(nums)):
                    return False
        return True

    @staticmethod
    def is_solved(board: Union[Board, Sequence[Sequence[int]]]) -> bool:
        """True iff every region holds each digit exactly once."""
        values = SudokuJudge._values(board)
        return UNSET not in values and SudokuJudge.is_valid(board)

    @staticmethod
    def candidates_consistent(board: Board, exact: bool = True) -> bool:
        """
        Check the candidate invariant of every unset cell.

        With `exact`, candidates must equal the digits not used by any peer.
        Otherwise they only need to be a subset of them, which is what holds
        once deduction rules have eliminated candidates.
        """
        values = [cell.value for cell in board.cells()]
        for cell_id in range(CELL_COUNT):
            cell = board.cell_by_id(cell_id)
            if cell.is_set():
                if cell.candidates:
                    return False
                continue
            allowed = set(DIGITS) - {values[peer_id] for peer_id in PEER_IDS[cell_id]}
            if exact and cell.candidates != allowed:
                return False
            if not exact and not cell.candidates <= allowed:
                return False
        return True

    @staticmethod
    def is_solution_of(solution: Board, puzzle: Board) -> bool:
        """True iff `solution` is solved and keeps every clue of `puzzle`."""
        if not SudokuJudge.is_solved(solution):
            return False
        return all(
            clue.value == solution.cell(clue.row, clue.col).value
            for clue in puzzle.cells()
            if clue.is_set()
        )
