# -*- coding: utf-8 -*-
"""Test cases for the backtracking solver."""
import random
import unittest

from parameterized import parameterized

from sudoku.common.board import Board
from sudoku.common.judge import SudokuJudge
from sudoku.common.puzzle_io import parse_board
from sudoku.solver import SearchItem, Solver
from tests.tools import AMBIGUOUS_GRID, EASY_PUZZLE, EASY_SOLUTION


def _dead_board() -> Board:
    # (0, 8) can only be 9, which column 8 already holds
    board = Board()
    for col, value in enumerate(range(1, 9)):
        board.set_value(0, col, value)
    board.set_value(4, 8, 9)
    return board


class TestSolver(unittest.TestCase):
    def test_easy_puzzle_has_one_solution(self):
        solver = Solver(parse_board(EASY_PUZZLE), seed=0)
        solution = solver.next()
        self.assertIsNotNone(solution)
        self.assertEqual(solution.to_grid(), EASY_SOLUTION)
        self.assertIsNone(solver.next())
        self.assertIsNone(solver.next())
        self.assertEqual(solver.solutions_found, 1)
        self.assertEqual(solver.pending, 0)

    def test_full_board_is_its_own_solution(self):
        solver = Solver(Board.from_grid(EASY_SOLUTION))
        solution = solver.next()
        self.assertEqual(solution.to_grid(), EASY_SOLUTION)
        self.assertIsNone(solver.next())
        self.assertEqual(solver.nodes_expanded, 0)

    def test_ambiguous_board_has_two_solutions(self):
        puzzle = Board.from_grid(AMBIGUOUS_GRID)
        solutions = list(Solver(puzzle, seed=1))
        self.assertEqual(len(solutions), 2)
        grids = [solution.to_grid() for solution in solutions]
        self.assertNotEqual(grids[0], grids[1])
        self.assertIn(EASY_SOLUTION, grids)
        for solution in solutions:
            self.assertTrue(SudokuJudge.is_solution_of(solution, puzzle))

    def test_empty_board_has_many_solutions(self):
        solver = Solver(Board(), seed=3)
        grids = []
        for _ in range(3):
            solution = solver.next()
            self.assertIsNotNone(solution)
            self.assertTrue(SudokuJudge.is_solved(solution))
            grids.append(solution.to_grid())
        self.assertEqual(len({str(grid) for grid in grids}), 3)
        self.assertGreater(solver.pending, 0)

    def test_dead_board_has_no_solution(self):
        solver = Solver(_dead_board())
        self.assertIsNone(solver.next())
        self.assertEqual(solver.dead_branches, 1)
        self.assertEqual(solver.solutions_found, 0)

    def test_input_board_is_not_mutated(self):
        board = parse_board(EASY_PUZZLE)
        grid = board.to_grid()
        Solver(board).next()
        self.assertEqual(board.to_grid(), grid)
        self.assertEqual(board.cell_set_count(), 30)

    def test_returned_solution_is_independent(self):
        solver = Solver(Board.from_grid(AMBIGUOUS_GRID), seed=2)
        first = solver.next()
        first.clear()
        second = solver.next()
        self.assertTrue(SudokuJudge.is_solved(second))

    @parameterized.expand([(0,), (11,), (2024,)])
    def test_same_seed_same_solutions(self, seed):
        first = Solver(Board(), seed=seed)
        second = Solver(Board(), rng=random.Random(seed))
        for _ in range(2):
            self.assertEqual(first.next().to_grid(), second.next().to_grid())

    @parameterized.expand(
        [
            ("singles_only", ["naked_single"]),
            ("hidden_first", ["hidden_single", "naked_single"]),
            ("without_subsets", ["naked_single", "hidden_single", "box_line_reduction"]),
        ]
    )
    def test_rule_subsets_reach_the_same_solution(self, name, rules):
        solver = Solver(parse_board(EASY_PUZZLE), seed=5, rules=rules)
        self.assertEqual(solver.next().to_grid(), EASY_SOLUTION)
        self.assertIsNone(solver.next())

    def test_unknown_rule_raises(self):
        with self.assertRaises(ValueError):
            Solver(Board(), rules=["no_such_rule"])

    def test_most_constrained_cell(self):
        board = Board()
        self.assertEqual(Solver.most_constrained_cell(board).id, 0)
        for col, value in enumerate(range(1, 8)):
            board.set_value(0, col, value)
        cell = Solver.most_constrained_cell(board)
        self.assertEqual((cell.row, cell.col), (0, 7))
        self.assertEqual(cell.candidates, {8, 9})
        self.assertIsNone(Solver.most_constrained_cell(Board.from_grid(EASY_SOLUTION)))


class TestSearchItem(unittest.TestCase):
    def test_item_without_value_copies_parent(self):
        parent = parse_board(EASY_PUZZLE)
        board = SearchItem(parent).materialize()
        self.assertIsNot(board, parent)
        self.assertEqual(board.to_grid(), parent.to_grid())

    def test_legal_value_is_assigned_on_a_copy(self):
        parent = Board()
        board = SearchItem(parent, 2, 3, 4).materialize()
        self.assertEqual(board.cell(2, 3).value, 4)
        self.assertNotIn(4, board.cell(2, 0).candidates)
        self.assertFalse(parent.cell(2, 3).is_set())
        self.assertIn(4, parent.cell(2, 0).candidates)

    def test_illegal_value_gives_none(self):
        parent = Board()
        parent.set_value(0, 0, 5)
        self.assertIsNone(SearchItem(parent, 0, 1, 5).materialize())
        self.assertFalse(parent.cell(0, 1).is_set())
