"""Puzzle input loading."""

from .io import PuzzleInputLoader, parse_digit_grid, split_lines, DATASETS

__all__ = [
    'PuzzleInputLoader',
    'parse_digit_grid',
    'split_lines',
    'DATASETS',
]
