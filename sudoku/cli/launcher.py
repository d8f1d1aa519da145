# -*- coding: utf-8 -*-
"""Launch the solver or the generator from the command line."""
import argparse
import os
import sys
import time
from typing import List, Optional

from sudoku.common.board import Board
from sudoku.common.config import Config, load_config
from sudoku.common.puzzle_io import load_board, save_board
from sudoku.generator import Generator
from sudoku.solver import Solver
from sudoku.utils.log import get_logger


def solve(config: Config, puzzle_file: str) -> int:
    """Print every solution of `puzzle_file`. Returns the number of solutions."""
    logger = get_logger(__name__)
    board = load_board(puzzle_file)
    solver = Solver(board, seed=config.solver.seed, rules=config.solver.rules)

    print("Original board:")
    print(board.display())

    found = 0
    while config.solver.max_solutions is None or found < config.solver.max_solutions:
        start = time.perf_counter()
        solution = solver.next()
        elapsed_ms = (time.perf_counter() - start) * 1000
        if solution is None:
            print(f"No further solutions: {elapsed_ms:.3f} ms.")
            break
        found += 1
        print(f"Solved in {elapsed_ms:.3f} ms.")
        print(solution.display())
    logger.info(
        f"{found} solution(s) for {puzzle_file}: {solver.nodes_expanded} branches, "
        f"{solver.dead_branches} dead ends."
    )
    return found


def generate(config: Config) -> List[Board]:
    """Print `count` unique puzzles with `cell_set` clues each. Returns them."""
    logger = get_logger(__name__)
    gen_config = config.generator
    puzzles = []
    seed = gen_config.seed
    while len(puzzles) < gen_config.count:
        start = time.perf_counter()
        generator = Generator(seed=seed, rules=config.solver.rules)
        if seed is not None:
            # the next generator must not replay the same solution
            seed += 1
        board = generator.next(gen_config.cell_set, max_pulls=gen_config.max_pulls)
        elapsed_ms = (time.perf_counter() - start) * 1000
        if board is None:
            logger.info(
                f"No {gen_config.cell_set}-clue puzzle within {gen_config.max_pulls} pulls "
                f"({elapsed_ms:.1f} ms), retrying with a new solution."
            )
            continue
        puzzles.append(board)
        logger.info(f"Puzzle {len(puzzles)}/{gen_config.count} generated in {elapsed_ms:.1f} ms.")
        print(board.display())
        if gen_config.output_dir:
            save_board(
                board, os.path.join(gen_config.output_dir, f"puzzle_{len(puzzles) - 1:03d}.txt")
            )
    return puzzles


def _build_config(args: argparse.Namespace) -> Config:
    config = load_config(args.config) if args.config else Config()
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.command == "solve":
        if args.seed is not None:
            config.solver.seed = args.seed
        if args.max_solutions is not None:
            config.solver.max_solutions = args.max_solutions
    elif args.command == "generate":
        if args.seed is not None:
            config.generator.seed = args.seed
        for key in ("count", "cell_set", "max_pulls", "output_dir"):
            value = getattr(args, key)
            if value is not None:
                setattr(config.generator, key, value)
    return config.check_and_update()


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve and generate 9x9 Sudoku puzzles.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=str, default=None, help="Path to a YAML config file.")
    common.add_argument("--seed", type=int, default=None, help="Random seed.")
    common.add_argument(
        "--log-level", type=str, default=None, help="Log level, overrides the config."
    )

    solve_parser = subparsers.add_parser(
        "solve", parents=[common], help="Print every solution of a puzzle file."
    )
    solve_parser.add_argument("file", type=str, help="Puzzle text file.")
    solve_parser.add_argument(
        "--max-solutions", type=int, default=None, help="Stop after this many solutions."
    )

    generate_parser = subparsers.add_parser(
        "generate", parents=[common], help="Generate uniquely solvable puzzles."
    )
    generate_parser.add_argument("--count", type=int, default=None, help="Number of puzzles.")
    generate_parser.add_argument(
        "--cell-set", dest="cell_set", type=int, default=None, help="Clues per puzzle."
    )
    generate_parser.add_argument(
        "--max-pulls", dest="max_pulls", type=int, default=None, help="Pulls per generator."
    )
    generate_parser.add_argument(
        "--output-dir", dest="output_dir", type=str, default=None, help="Save puzzles here."
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)
    logger = get_logger()
    try:
        config = _build_config(args)
        get_logger(level=config.log_level)
        if args.command == "solve":
            solve(config, args.file)
        else:
            generate(config)
    except Exception as e:
        logger.error(f"ERROR: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
