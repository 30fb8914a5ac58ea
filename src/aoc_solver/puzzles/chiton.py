"""Day 15: lowest total risk path through a cave of chitons."""

import logging
from typing import List

from aoc_solver.core.data_models import PuzzleAnswer, SearchResult
from aoc_solver.integration.io import parse_digit_grid
from aoc_solver.model.grid import CostGrid
from aoc_solver.search.engine import BestFirstSearcher
from aoc_solver.search.heuristics import create_grid_heuristic
from aoc_solver.search.problems import GridSearchProblem
from .base import Puzzle

logger = logging.getLogger(__name__)

SAMPLE_INPUT = """\
1163751742
1381373672
2136511328
3694931569
7463417111
1319128137
1359912421
3125421639
1293138521
2311944581
"""


def build_cave(lines: List[str], part: int, tile_factor: int = 5) -> CostGrid:
    """Parse the risk map and tile it for part 2."""
    grid = CostGrid(parse_digit_grid(lines))
    if part == 2:
        grid = grid.tile(tile_factor)
    return grid


def lowest_risk_path(grid: CostGrid, searcher: BestFirstSearcher,
                     heuristic: str = 'manhattan') -> SearchResult:
    """Search from the top-left cell to the bottom-right cell."""
    goal = grid.far_corner
    problem = GridSearchProblem(
        grid, start=grid.origin, goal=goal,
        heuristic=create_grid_heuristic(heuristic, grid, goal),
    )
    return searcher.search(problem)


class ChitonPuzzle(Puzzle):
    day = 15
    title = "Chiton"
    sample_input = SAMPLE_INPUT

    def _solve(self, lines: List[str], part: int) -> PuzzleAnswer:
        tile_factor = int(self.options.get('tile_factor', 5))
        heuristic = str(self.options.get('heuristic', 'manhattan'))

        grid = build_cave(lines, part, tile_factor)
        logger.debug(f"Cave is {grid.width}x{grid.height}")
        result = lowest_risk_path(grid, BestFirstSearcher(self.search_config), heuristic)

        details = result.to_dict()
        details['grid_size'] = [grid.width, grid.height]
        return PuzzleAnswer(self.day, part, result.cost, details)
