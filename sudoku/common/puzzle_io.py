# -*- coding: utf-8 -*-
"""Reading and writing puzzles in the plain text format.

Each non-blank line is a row. Characters other than digits 1-9 and spaces are
dropped; the first nine remaining characters are columns 0-8, a space leaves
the cell unset. Lines after the ninth row are ignored. The output of
`Board.display` is itself valid input.
"""
import os
from typing import Iterable, Union

from sudoku.common.board import Board
from sudoku.common.constants import DIGITS, GRID_SIZE
from sudoku.utils.log import get_logger

logger = get_logger(__name__)

_KEEP = {" "} | {str(digit) for digit in DIGITS}


def _clean_line(line: str) -> str:
    return "".join(c for c in line.rstrip("\r\n") if c in _KEEP)


def parse_board(source: Union[str, Iterable[str]]) -> Board:
    """
    Build a board from puzzle text.

    Args:
        source (`Union[str, Iterable[str]]`): the whole text, or its lines.

    Returns:
        `Board`: the loaded board. Conflicting clues raise `InvalidValue`.
    """
    lines = source.splitlines() if isinstance(source, str) else source
    board = Board()
    row_no = 0
    for line in lines:
        if row_no >= GRID_SIZE:
            break
        cleaned = _clean_line(line)
        if not cleaned:
            continue
        for col_no, char in enumerate(cleaned[:GRID_SIZE]):
            if char != " ":
                board.set_value(row_no, col_no, int(char))
        row_no += 1
    return board


def load_board(file_path: str) -> Board:
    """Load a puzzle file. A missing file raises `FileNotFoundError`."""
    with open(file_path, "r", encoding="utf-8") as f:
        board = parse_board(f)
    logger.debug(f"Loaded {file_path} with {board.cell_set_count()} clues.")
    return board


def save_board(board: Board, file_path: str) -> None:
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(board.display())
