# -*- coding: utf-8 -*-
"""Sudoku solving and puzzle generation."""

__version__ = "0.1.0"
