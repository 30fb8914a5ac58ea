"""Base class for daily puzzle adapters."""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from aoc_solver.core.data_models import PuzzleAnswer
from aoc_solver.search.engine import SearchConfig

logger = logging.getLogger(__name__)

PARTS = (1, 2)


class Puzzle(ABC):
    """A daily puzzle: parses its input and answers each part."""

    day: int = 0
    title: str = ""
    sample_input: str = ""

    def __init__(self, search_config: Optional[SearchConfig] = None,
                 options: Optional[Mapping[str, Any]] = None):
        """Initialize the puzzle.

        Args:
            search_config: Configuration for the shared search engine
            options: Puzzle-specific options (the ``puzzles.<name>`` config section)
        """
        self.search_config = search_config or SearchConfig()
        self.options = dict(options or {})

    def solve(self, lines: List[str], part: int) -> PuzzleAnswer:
        """Answer one part of the puzzle.

        Args:
            lines: Raw input lines
            part: 1 or 2

        Returns:
            PuzzleAnswer for the part
        """
        if part not in PARTS:
            raise ValueError(f"Part must be one of {PARTS}, got {part}")
        logger.info(f"Solving day {self.day} ({self.title}) part {part}")
        return self._solve(lines, part)

    @abstractmethod
    def _solve(self, lines: List[str], part: int) -> PuzzleAnswer:
        pass
