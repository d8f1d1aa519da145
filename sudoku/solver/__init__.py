# -*- coding: utf-8 -*-
"""Solver module"""
from sudoku.solver.rules import SIMPLIFICATION_RULES, Rule, simplify
from sudoku.solver.solver import SearchItem, Solver, resolve_rules

__all__ = [
    "Rule",
    "SIMPLIFICATION_RULES",
    "SearchItem",
    "Solver",
    "resolve_rules",
    "simplify",
]
