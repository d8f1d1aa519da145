# -*- coding: utf-8 -*-
"""Deduction rules applied by the solver between branching steps.

Every rule is a plain function `(Board) -> RuleOutcome` that mutates the board
in place. `RuleOutcome.INVALID` means the board can no longer be completed.
"""
from collections import defaultdict
from typing import Callable, Dict, FrozenSet, List, Sequence

from sudoku.common.board import Board, Cell
from sudoku.common.constants import DIGITS, GRID_SIZE, RuleOutcome
from sudoku.utils.registry import Registry

Rule = Callable[[Board], RuleOutcome]

SIMPLIFICATION_RULES: Registry = Registry("simplification_rules")


@SIMPLIFICATION_RULES.register_module("naked_single")
def naked_single(board: Board) -> RuleOutcome:
    """Assign every unset cell that has exactly one candidate left."""
    if any(not cell.is_set() and not cell.candidates for cell in board.cells()):
        return RuleOutcome.INVALID
    # values are read up front, an earlier assignment may empty a later single
    singles = [(cell, min(cell.candidates)) for cell in board.cells_with_single_candidate()]
    for cell, value in singles:
        if not board.try_set_value(cell.row, cell.col, value):
            return RuleOutcome.INVALID
    return RuleOutcome.UPDATED if singles else RuleOutcome.NO_ACTION


@SIMPLIFICATION_RULES.register_module("hidden_single")
def hidden_single(board: Board) -> RuleOutcome:
    """Assign a digit to the only cell of a region that can still hold it."""
    updated = False
    for _, _, cells in board.regions():
        placed = {cell.value for cell in cells if cell.is_set()}
        for digit in sorted(DIGITS - placed):
            holders = [cell for cell in cells if not cell.is_set() and digit in cell.candidates]
            if not holders:
                # the region can no longer receive this digit
                return RuleOutcome.INVALID
            if len(holders) == 1:
                cell = holders[0]
                if not board.try_set_value(cell.row, cell.col, digit):
                    return RuleOutcome.INVALID
                updated = True
    return RuleOutcome.UPDATED if updated else RuleOutcome.NO_ACTION


def _eliminate(cells: Sequence[Cell], digits, keep) -> int:
    removed = 0
    for cell in cells:
        if cell.is_set() or keep(cell):
            continue
        for digit in digits:
            if cell.remove_candidate(digit):
                removed += 1
    return removed


@SIMPLIFICATION_RULES.register_module("box_line_reduction")
def box_line_reduction(board: Board) -> RuleOutcome:
    """
    When a digit's candidates inside a box all lie on one row (or column),
    no other cell of that row (or column) outside the box can hold it.
    """
    removed = 0
    for box_no in range(GRID_SIZE):
        rows: Dict[int, set] = defaultdict(set)
        cols: Dict[int, set] = defaultdict(set)
        for cell in board.box_cells(box_no):
            if cell.is_set():
                continue
            for digit in cell.candidates:
                rows[digit].add(cell.row)
                cols[digit].add(cell.col)

        for digit in sorted(rows):
            if len(rows[digit]) == 1:
                (row_no,) = rows[digit]
                removed += _eliminate(
                    board.row_cells(row_no), (digit,), lambda cell: cell.box == box_no
                )
            if len(cols[digit]) == 1:
                (col_no,) = cols[digit]
                removed += _eliminate(
                    board.col_cells(col_no), (digit,), lambda cell: cell.box == box_no
                )
    return RuleOutcome.UPDATED if removed else RuleOutcome.NO_ACTION


@SIMPLIFICATION_RULES.register_module("naked_subset")
def naked_subset(board: Board) -> RuleOutcome:
    """
    When k cells of a region share the same k candidates, those digits
    cannot go anywhere else in the region.
    """
    removed = 0
    for _, _, cells in board.regions():
        groups: Dict[FrozenSet[int], List[int]] = defaultdict(list)
        for cell in cells:
            if not cell.is_set():
                groups[frozenset(cell.candidates)].append(cell.id)
        for digits, members in groups.items():
            if len(members) > len(digits):
                # more cells than digits to share between them
                return RuleOutcome.INVALID
            if len(digits) == len(members):
                removed += _eliminate(cells, sorted(digits), lambda cell: cell.id in members)
    return RuleOutcome.UPDATED if removed else RuleOutcome.NO_ACTION


def simplify(board: Board, rules: Sequence[Rule]) -> RuleOutcome:
    """
    Apply `rules` in priority order until none of them changes the board.

    After any rule updates the board, evaluation restarts from the first rule.

    Returns:
        `RuleOutcome`: NO_ACTION once a fixpoint is reached, or INVALID as
            soon as a rule finds a contradiction.
    """
    while True:
        for rule in rules:
            outcome = rule(board)
            if outcome is RuleOutcome.INVALID:
                return RuleOutcome.INVALID
            if outcome is RuleOutcome.UPDATED:
                break
        else:
            return RuleOutcome.NO_ACTION


__all__ = [
    "Rule",
    "SIMPLIFICATION_RULES",
    "naked_single",
    "hidden_single",
    "box_line_reduction",
    "naked_subset",
    "simplify",
]
