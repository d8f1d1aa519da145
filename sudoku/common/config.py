# -*- coding: utf-8 -*-
"""Configs for solving and generation."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from omegaconf import OmegaConf

from sudoku.common.constants import CELL_COUNT, DEFAULT_RULES, MIN_CLUES
from sudoku.solver import SIMPLIFICATION_RULES
from sudoku.utils.log import get_logger

logger = get_logger(__name__)


@dataclass
class SolverConfig:
    """Configuration for the solver"""

    seed: Optional[int] = None  # None draws a fresh seed each run
    rules: List[str] = field(default_factory=lambda: list(DEFAULT_RULES))
    max_solutions: Optional[int] = None  # None enumerates every solution


@dataclass
class GeneratorConfig:
    """Configuration for puzzle generation"""

    seed: Optional[int] = None
    count: int = 1  # number of puzzles to emit
    cell_set: int = 25  # clue count of every emitted puzzle
    max_pulls: int = 1000  # pulls per generator before starting over with a new solution
    output_dir: Optional[str] = None  # if set, puzzles are also saved here


@dataclass
class Config:
    """Global Configuration"""

    log_level: str = "INFO"
    solver: SolverConfig = field(default_factory=SolverConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    def check_and_update(self) -> Config:
        """Validate the config; raises `ValueError` on the first problem found."""
        if logging.getLevelName(self.log_level.upper()) not in (
            logging.DEBUG,
            logging.INFO,
            logging.WARNING,
            logging.ERROR,
            logging.CRITICAL,
        ):
            raise ValueError(f"Invalid log_level: {self.log_level}")
        self.log_level = self.log_level.upper()

        if not self.solver.rules:
            raise ValueError("solver.rules must name at least one rule")
        for rule in self.solver.rules:
            if rule not in SIMPLIFICATION_RULES and "." not in rule:
                raise ValueError(f"Unknown simplification rule: {rule}")
        if self.solver.max_solutions is not None and self.solver.max_solutions < 1:
            raise ValueError("solver.max_solutions must be positive")

        if not MIN_CLUES <= self.generator.cell_set <= CELL_COUNT:
            raise ValueError(
                f"generator.cell_set must be within [{MIN_CLUES}, {CELL_COUNT}], "
                f"got {self.generator.cell_set}"
            )
        if self.generator.count < 1:
            raise ValueError("generator.count must be positive")
        if self.generator.max_pulls < 1:
            raise ValueError("generator.max_pulls must be positive")
        if "naked_single" not in self.solver.rules:
            logger.warning("solver.rules has no naked_single, search will be slow.")
        return self


def load_config(config_path: str) -> Config:
    """Load the configuration from the given path."""
    schema = OmegaConf.structured(Config)
    yaml_config = OmegaConf.load(config_path)
    try:
        config = OmegaConf.merge(schema, yaml_config)
        return OmegaConf.to_object(config)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}") from e
