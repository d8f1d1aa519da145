# -*- coding: utf-8 -*-
"""Generator module"""
from sudoku.generator.generator import GenerationFailure, Generator, RemovalItem

__all__ = [
    "GenerationFailure",
    "Generator",
    "RemovalItem",
]
