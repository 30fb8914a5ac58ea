"""Puzzle input loading and parsing."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import numpy as np

from aoc_solver.core.errors import ParseError, PuzzleInputError

logger = logging.getLogger(__name__)

DATASETS = ('test', 'real')


def split_lines(text: str) -> List[str]:
    """Split raw text into lines, dropping trailing blank lines."""
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def parse_digit_grid(lines: Iterable[str]) -> np.ndarray:
    """Parse rows of single digits into a 2D integer array.

    Args:
        lines: One string of digits per row

    Returns:
        Array of shape (rows, columns)

    Raises:
        ParseError: If the input is empty, ragged, or contains non-digits
    """
    rows = [line.rstrip("\r\n") for line in lines]
    while rows and not rows[-1]:
        rows.pop()
    if not rows:
        raise ParseError("Grid input is empty")

    width = len(rows[0])
    for row_index, row in enumerate(rows):
        if len(row) != width:
            raise ParseError(
                f"Row {row_index} has length {len(row)}, expected {width} (grid must be rectangular)"
            )
        for column_index, char in enumerate(row):
            if char not in '0123456789':
                raise ParseError(f"Invalid character {char!r} at row {row_index}, column {column_index}")
    if width == 0:
        raise ParseError("Grid rows are empty")

    return np.array([[int(char) for char in row] for row in rows], dtype=np.int64)


class PuzzleInputLoader:
    """Loader for per-day puzzle input files.

    Files are looked up as ``day_<n>.txt`` for real data and
    ``day_<n>_test.txt`` for sample data.
    """

    def __init__(self, data_dir: Union[str, Path] = "data"):
        """Initialize the loader.

        Args:
            data_dir: Directory containing puzzle input files
        """
        self.data_dir = Path(data_dir)

    def path_for(self, day: int, dataset: str = 'real') -> Path:
        if dataset not in DATASETS:
            raise ValueError(f"Unknown dataset {dataset!r} (expected one of {DATASETS})")
        suffix = "_test" if dataset == 'test' else ""
        return self.data_dir / f"day_{day}{suffix}.txt"

    def load_lines(self, day: int, dataset: str = 'real',
                   fallback: Optional[str] = None) -> List[str]:
        """Load the input lines for a day.

        Args:
            day: Puzzle day number
            dataset: 'test' or 'real'
            fallback: Text to use when the file does not exist

        Returns:
            Input lines without trailing blank lines

        Raises:
            PuzzleInputError: If the file is missing and no fallback is given
        """
        path = self.path_for(day, dataset)
        if path.exists():
            logger.debug(f"Loading day {day} {dataset} input from {path}")
            return split_lines(path.read_text())

        if fallback is not None:
            logger.info(f"No {dataset} input file at {path}; using embedded sample")
            return split_lines(fallback)

        raise PuzzleInputError(f"Puzzle input not found: {path}")

    def available_days(self) -> List[int]:
        """Days that have a real input file in the data directory."""
        days = set()
        if not self.data_dir.exists():
            return []
        for path in self.data_dir.glob("day_*.txt"):
            stem = path.stem[len("day_"):]
            if stem.isdigit():
                days.add(int(stem))
        return sorted(days)
