"""Heuristic functions for best-first search.

A heuristic maps a state to a non-negative estimate of the remaining cost.
It must never overestimate for the search to return optimal costs; the zero
heuristic turns A* into plain Dijkstra.
"""

import logging
from typing import Callable, Dict, Hashable, Iterable

from aoc_solver.core.data_models import Position
from aoc_solver.model.grid import CostGrid

logger = logging.getLogger(__name__)

Heuristic = Callable[[Hashable], float]


def zero_heuristic(state: Hashable) -> int:
    """Uninformed estimate; degrades A* to Dijkstra."""
    return 0


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def manhattan_to_goal(goal: Position, step_weight: int = 1) -> Heuristic:
    """Manhattan distance to ``goal`` scaled by the cheapest step weight.

    Admissible on 4-connected grids whose every cell costs at least
    ``step_weight`` to enter.
    """
    if step_weight < 0:
        raise ValueError(f"step_weight must be non-negative, got {step_weight}")

    def heuristic(position: Position) -> int:
        return step_weight * manhattan_distance(position, goal)

    return heuristic


def scaled_heuristic(base: Heuristic, factor: float) -> Heuristic:
    """Multiply another heuristic; factors above 1 make it inadmissible (weighted A*)."""

    def heuristic(state: Hashable) -> float:
        return factor * base(state)

    return heuristic


HEURISTIC_NAMES = ('zero', 'manhattan')


def create_grid_heuristic(name: str, grid: CostGrid, goal: Position) -> Heuristic:
    """Build a named heuristic for a cost grid.

    ``manhattan`` is scaled by the grid's minimum weight so that it stays a
    lower bound; on a grid containing zero-cost cells it collapses to zero.
    """
    if name == 'zero':
        return zero_heuristic
    if name == 'manhattan':
        min_cost = grid.min_cost()
        if min_cost < 1:
            logger.warning(f"Grid has cells costing {min_cost}; "
                           "manhattan heuristic reduced to zero")
        return manhattan_to_goal(goal, step_weight=min_cost)
    raise ValueError(f"Unknown heuristic: {name!r} (expected one of {HEURISTIC_NAMES})")


def find_overestimates(heuristic: Heuristic, true_costs: Dict[Hashable, float],
                       states: Iterable[Hashable] = None) -> Dict[Hashable, float]:
    """Return the states where ``heuristic`` exceeds the true remaining cost.

    Args:
        heuristic: Heuristic to check
        true_costs: Exact remaining cost per state
        states: Subset of states to check (defaults to all of ``true_costs``)

    Returns:
        Mapping state -> overestimate amount; empty when admissible
    """
    overestimates = {}
    for state in (states if states is not None else true_costs):
        estimate = heuristic(state)
        actual = true_costs[state]
        if estimate > actual:
            overestimates[state] = estimate - actual
    return overestimates


def is_admissible(heuristic: Heuristic, true_costs: Dict[Hashable, float]) -> bool:
    return not find_overestimates(heuristic, true_costs)
