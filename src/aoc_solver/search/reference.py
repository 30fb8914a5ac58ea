"""Uninformed grid search with a sorted frontier list and an explored overlay.

This is the cost-ordered variant of the grid search: no heuristic, no keyed
queue, just a list kept sorted by accumulated cost and a boolean grid marking
cells already settled. It is slower than :mod:`aoc_solver.search.engine` and
exists to cross-check the engine's answers.
"""

import bisect
import logging
from typing import Optional, Tuple

import numpy as np

from aoc_solver.core.data_models import Position
from aoc_solver.model.grid import CostGrid

logger = logging.getLogger(__name__)


def lowest_total_cost(grid: CostGrid,
                      start: Optional[Position] = None,
                      goal: Optional[Position] = None) -> Tuple[Optional[int], int]:
    """Cheapest entering cost from ``start`` to ``goal``.

    Returns:
        (cost, nodes_explored); cost is None when the goal cannot be reached
    """
    start = Position(*start) if start is not None else grid.origin
    goal = Position(*goal) if goal is not None else grid.far_corner

    explored = np.zeros((grid.height, grid.width), dtype=bool)
    best = np.full((grid.height, grid.width), np.iinfo(np.int64).max, dtype=np.int64)
    best[start.y, start.x] = 0
    to_explore = [(0, start)]
    nodes_explored = 0

    while to_explore:
        cost, position = to_explore.pop(0)
        if explored[position.y, position.x]:
            continue
        nodes_explored += 1
        if position == goal:
            logger.debug(f"Reference search settled goal after {nodes_explored} nodes")
            return cost, nodes_explored
        explored[position.y, position.x] = True

        for neighbor in grid.neighbors(position):
            if explored[neighbor.y, neighbor.x]:
                continue
            candidate = cost + grid.cost_to_enter(neighbor)
            if candidate < best[neighbor.y, neighbor.x]:
                best[neighbor.y, neighbor.x] = candidate
                bisect.insort(to_explore, (candidate, neighbor))

    return None, nodes_explored
