from sudoku.common.board import Board
from sudoku.common.judge import SudokuJudge
from tests.tools import EASY_SOLUTION

# ---------- Grid checks ----------


def test_judge_allows_incomplete_board():
    board = [
        [5, 3, 0, 0, 7, 0, 0, 0, 0],
        [6, 0, 0, 1, 9, 5, 0, 0, 0],
        [0, 9, 8, 0, 0, 0, 0, 6, 0],
        [8, 0, 0, 0, 6, 0, 0, 0, 3],
        [4, 0, 0, 8, 0, 3, 0, 0, 1],
        [7, 0, 0, 0, 2, 0, 0, 0, 6],
        [0, 6, 0, 0, 0, 0, 2, 8, 0],
        [0, 0, 0, 4, 1, 9, 0, 0, 5],
        [0, 0, 0, 0, 8, 0, 0, 7, 9],
    ]

    assert SudokuJudge.is_valid(board)
    assert not SudokuJudge.is_solved(board)


def test_judge_detects_row_violation():
    board = [
        [1, 1, 0, 0, 0, 0, 0, 0, 0],
    ] + [[0] * 9 for _ in range(8)]

    assert not SudokuJudge.is_valid(board)


def test_judge_detects_column_violation():
    board = [
        [5, 0, 0, 0, 0, 0, 0, 0, 0],
        [5, 0, 0, 0, 0, 0, 0, 0, 0],
    ] + [[0] * 9 for _ in range(7)]

    assert not SudokuJudge.is_valid(board)


def test_judge_detects_block_violation():
    board = [
        [1, 2, 3, 0, 0, 0, 0, 0, 0],
        [4, 1, 0, 0, 0, 0, 0, 0, 0],
    ] + [[0] * 9 for _ in range(7)]

    assert not SudokuJudge.is_valid(board)


def test_judge_rejects_out_of_range_values():
    board = [[10] + [0] * 8] + [[0] * 9 for _ in range(8)]

    assert not SudokuJudge.is_valid(board)


def test_judge_accepts_solution():
    assert SudokuJudge.is_solved(EASY_SOLUTION)
    assert SudokuJudge.is_solved(Board.from_grid(EASY_SOLUTION))


# ---------- Board checks ----------


def test_candidates_consistent_exact_and_subset():
    board = Board()
    board.set_value(0, 0, 1)
    assert SudokuJudge.candidates_consistent(board)

    board.remove_candidate(8, 8, 9)
    assert not SudokuJudge.candidates_consistent(board)
    assert SudokuJudge.candidates_consistent(board, exact=False)


def test_is_solution_of():
    puzzle = Board.from_grid(EASY_SOLUTION)
    puzzle.unset(0, 0)
    solution = Board.from_grid(EASY_SOLUTION)

    assert SudokuJudge.is_solution_of(solution, puzzle)
    assert not SudokuJudge.is_solution_of(puzzle, puzzle)
