# -*- coding: utf-8 -*-
"""Constants."""
from enum import Enum

# grid geometry

GRID_SIZE = 9
BOX_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE
DIGITS = frozenset(range(1, GRID_SIZE + 1))
UNSET = 0

# smallest clue count a uniquely solvable 9x9 puzzle can have
MIN_CLUES = 17

# env var names
LOG_LEVEL_ENV_VAR = "SUDOKU_LOG_LEVEL"

# display

BOX_ROW_SEPARATOR = "---+---+---"
DEBUG_ROW_SEPARATOR = "---+---+---#---+---+---#---+---+---"
DEBUG_BOX_SEPARATOR = "#" * 35

DEFAULT_RULES = [
    "naked_single",
    "hidden_single",
    "box_line_reduction",
    "naked_subset",
]


class Region(Enum):
    """A kind of constraint region."""

    ROW = "row"
    COL = "col"
    BOX = "box"


class RuleOutcome(Enum):
    """Result of applying one simplification rule to a board."""

    NO_ACTION = "no_action"  # nothing deducible
    UPDATED = "updated"  # the board changed, restart from the first rule
    INVALID = "invalid"  # contradiction, the board cannot be completed
