# -*- coding: utf-8 -*-
"""Puzzle generation by clue removal under a uniqueness check."""
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from sudoku.common.board import Board
from sudoku.common.constants import CELL_COUNT, GRID_SIZE
from sudoku.common.judge import SudokuJudge
from sudoku.solver import Rule, Solver, resolve_rules
from sudoku.utils.log import get_logger


class GenerationFailure(RuntimeError):
    """The solver could not complete an empty board."""


@dataclass(frozen=True)
class RemovalItem:
    """
    A deferred puzzle on the generation stack: `parent` with `cell_id` cleared.

    Args:
        parent (`Board`): The board to derive from. Shared, never mutated.
        cell_id (`Optional[int]`): The cell to clear; None stands for `parent` itself.
        generation (`int`): Number of clues removed from the full solution.
        start (`int`): First position of the removal order still open to the
            puzzle's own reductions.
    """

    parent: Board
    cell_id: Optional[int]
    generation: int
    start: int

    def materialize(self) -> Board:
        board = self.parent.copy()
        if self.cell_id is not None:
            row_no, col_no = divmod(self.cell_id, GRID_SIZE)
            board.unset(row_no, col_no)
        return board


class Generator:
    """
    Sudoku puzzle generator working from one random full solution.

    Features:
    - Solves an empty board once to get a random solved grid
    - Removes clues one at a time along a shuffled removal order
    - Only ever returns puzzles with exactly one solution
    - Reaches every subset of removed clues at most once
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        rules: Optional[Sequence[Union[str, Rule]]] = None,
    ):
        """
        Initialize the generator.

        Args:
            rng (`Optional[random.Random]`): Source of all shuffles, shared with
                the solvers this generator runs.
            seed (`Optional[int]`): Seed for a new random source when `rng` is None.
            rules (`Optional[Sequence[Union[str, Rule]]]`): Simplification rules
                handed to every solver.

        Raises:
            `GenerationFailure`: if no full solution can be produced.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.rules = resolve_rules(rules)
        self.logger = get_logger(__name__)

        solution = Solver(Board(), rng=self.rng, rules=self.rules).next()
        if solution is None or not SudokuJudge.is_solved(solution):
            raise GenerationFailure("Could not generate a new Sudoku board.")
        self.solution = solution

        self.removal_order: List[int] = list(range(CELL_COUNT))
        self.rng.shuffle(self.removal_order)
        self._stack: List[RemovalItem] = [RemovalItem(solution, None, 0, 0)]
        self.pulls = 0
        self.logger.debug(f"Generator seeded with solution:\n{solution.display()}")

    @property
    def pending(self) -> int:
        return len(self._stack)

    def has_single_solution(self, board: Board) -> bool:
        solver = Solver(board, rng=self.rng, rules=self.rules)
        if solver.next() is None:
            return False
        return solver.next() is None

    def next(
        self, target_clues: Optional[int] = None, max_pulls: Optional[int] = None
    ) -> Optional[Board]:
        """
        Return the next uniquely solvable puzzle, or None once exhausted.

        Args:
            target_clues (`Optional[int]`): If given, keep pulling until a puzzle
                with exactly this many clues comes up.
            max_pulls (`Optional[int]`): Give up and return None after this many
                pulls without reaching `target_clues`.
        """
        if target_clues is None:
            return self._next_unique()

        pulls = 0
        while max_pulls is None or pulls < max_pulls:
            board = self._next_unique()
            if board is None:
                return None
            pulls += 1
            if board.cell_set_count() == target_clues:
                self.logger.debug(f"Reached {target_clues} clues after {pulls} pulls.")
                return board
        self.logger.debug(f"No puzzle with {target_clues} clues within {max_pulls} pulls.")
        return None

    def _next_unique(self) -> Optional[Board]:
        while self._stack:
            item = self._stack.pop()
            board = item.materialize()
            if not self.has_single_solution(board):
                continue
            self._push_reductions(board, item)
            self.pulls += 1
            # the stacked reductions keep `board` as their parent
            return board.copy()
        return None

    def _push_reductions(self, board: Board, item: RemovalItem) -> None:
        # pushed last-to-first so the removal order is also the pop order
        for position in reversed(range(item.start, CELL_COUNT)):
            self._stack.append(
                RemovalItem(board, self.removal_order[position], item.generation + 1, position + 1)
            )
