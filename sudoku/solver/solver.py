# -*- coding: utf-8 -*-
"""Backtracking search interleaved with constraint propagation."""
import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Union

from sudoku.common.board import Board, Cell
from sudoku.common.constants import DEFAULT_RULES, RuleOutcome
from sudoku.solver.rules import SIMPLIFICATION_RULES, Rule, simplify
from sudoku.utils.log import get_logger


def resolve_rules(rules: Optional[Sequence[Union[str, Rule]]] = None) -> List[Rule]:
    """Look up rules given by name, keeping their order. Defaults to all rules."""
    if rules is None:
        rules = DEFAULT_RULES
    return [SIMPLIFICATION_RULES.get(rule) if isinstance(rule, str) else rule for rule in rules]


@dataclass(frozen=True)
class SearchItem:
    """
    A deferred board on the search stack: `parent` with `value` tried at
    (`row`, `col`). An item without a value stands for `parent` itself.

    `parent` is shared by sibling items and never mutated; every
    materialization works on its own copy.
    """

    parent: Board
    row: Optional[int] = None
    col: Optional[int] = None
    value: Optional[int] = None

    def materialize(self) -> Optional[Board]:
        """The board this item stands for, or None if the tried value is illegal."""
        board = self.parent.copy()
        if self.value is None:
            return board
        if board.try_set_value(self.row, self.col, self.value):
            return board
        return None


class Solver:
    """
    Enumerates the solutions of a board one `next()` call at a time.

    The search frontier is an explicit LIFO stack of `SearchItem`s. Each call
    pops items until one simplifies to a complete board, pushing one item per
    candidate of the most constrained cell for every incomplete board met on
    the way. Solutions are never repeated within one solver, and abandoning a
    solver part way through needs no cleanup.
    """

    def __init__(
        self,
        board: Board,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        rules: Optional[Sequence[Union[str, Rule]]] = None,
    ):
        """
        Args:
            board (`Board`): The starting board. It is copied, never mutated.
            rng (`Optional[random.Random]`): Source of the branch order shuffles.
            seed (`Optional[int]`): Seed for a new random source when `rng` is None.
            rules (`Optional[Sequence[Union[str, Rule]]]`): Simplification rules,
                by registry name or as functions, in priority order.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.rules = resolve_rules(rules)
        self.logger = get_logger(__name__)
        self._stack: List[SearchItem] = [SearchItem(board.copy())]
        self.nodes_expanded = 0
        self.dead_branches = 0
        self.solutions_found = 0

    @property
    def pending(self) -> int:
        """Number of deferred boards left on the search stack."""
        return len(self._stack)

    def next(self) -> Optional[Board]:
        """Return the next solution, or None once the search space is exhausted."""
        while self._stack:
            board = self._stack.pop().materialize()
            if board is None:
                self.dead_branches += 1
                continue
            if simplify(board, self.rules) is RuleOutcome.INVALID:
                self.dead_branches += 1
                continue
            if board.is_solved():
                self.solutions_found += 1
                return board
            self._push_attempts(board, self.most_constrained_cell(board))
        return None

    def __iter__(self) -> Iterator[Board]:
        while True:
            solution = self.next()
            if solution is None:
                return
            yield solution

    @staticmethod
    def most_constrained_cell(board: Board) -> Optional[Cell]:
        """The unset cell with the fewest candidates, first in row-major order on ties."""
        best = None
        for cell in board.cells():
            if cell.is_set():
                continue
            if best is None or len(cell.candidates) < len(best.candidates):
                best = cell
        return best

    def _push_attempts(self, board: Board, cell: Cell) -> None:
        values = sorted(cell.candidates)
        if not values:
            self.dead_branches += 1
            return
        self.rng.shuffle(values)
        for value in values:
            self._stack.append(SearchItem(board, cell.row, cell.col, value))
        self.nodes_expanded += 1
        self.logger.debug(
            f"Branching on ({cell.row}, {cell.col}) over {values}, "
            f"{board.cell_set_count()} cells set, {len(self._stack)} pending."
        )
