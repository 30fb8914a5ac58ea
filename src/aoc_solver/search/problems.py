"""Search problem definitions consumed by the best-first engine."""

from abc import ABC, abstractmethod
from typing import Callable, Hashable, Iterable, Optional, Tuple

from aoc_solver.core.data_models import Position
from aoc_solver.model.graph import WeightedGraph
from aoc_solver.model.grid import CostGrid
from .heuristics import Heuristic, zero_heuristic


class SearchProblem(ABC):
    """A weighted search space with a start state and a goal test."""

    @abstractmethod
    def initial_state(self) -> Hashable:
        pass

    @abstractmethod
    def is_goal(self, state: Hashable) -> bool:
        pass

    @abstractmethod
    def successors(self, state: Hashable) -> Iterable[Tuple[Hashable, int]]:
        """Yield ``(next_state, step_cost)`` pairs; costs must be non-negative."""
        pass

    def heuristic(self, state: Hashable) -> float:
        """Lower bound on the remaining cost from ``state``."""
        return 0


class GridSearchProblem(SearchProblem):
    """Path between two cells of a cost grid, charging the cost of each entered cell."""

    def __init__(self, grid: CostGrid,
                 start: Optional[Position] = None,
                 goal: Optional[Position] = None,
                 heuristic: Optional[Heuristic] = None):
        self.grid = grid
        self.start = Position(*start) if start is not None else grid.origin
        self.goal = Position(*goal) if goal is not None else grid.far_corner
        for name, position in (('start', self.start), ('goal', self.goal)):
            if not grid.in_bounds(position):
                raise ValueError(f"{name.capitalize()} position {position} is out of bounds")
        self._heuristic = heuristic or zero_heuristic

    def initial_state(self) -> Position:
        return self.start

    def is_goal(self, state: Position) -> bool:
        return state == self.goal

    def successors(self, state: Position) -> Iterable[Tuple[Position, int]]:
        for neighbor in self.grid.neighbors(state):
            yield neighbor, self.grid.cost_to_enter(neighbor)

    def heuristic(self, state: Position) -> float:
        return self._heuristic(state)


class GraphSearchProblem(SearchProblem):
    """Path between two nodes of an explicit weighted graph."""

    def __init__(self, graph: WeightedGraph, start: Hashable, goal: Hashable,
                 heuristic: Optional[Heuristic] = None):
        if start not in graph:
            raise ValueError(f"Start node {start!r} is not in the graph")
        self.graph = graph
        self.start = start
        self.goal = goal
        self._heuristic = heuristic or zero_heuristic

    def initial_state(self) -> Hashable:
        return self.start

    def is_goal(self, state: Hashable) -> bool:
        return state == self.goal

    def successors(self, state: Hashable) -> Iterable[Tuple[Hashable, int]]:
        return self.graph.successors(state)

    def heuristic(self, state: Hashable) -> float:
        return self._heuristic(state)


class FunctionalSearchProblem(SearchProblem):
    """Search problem assembled from plain callables."""

    def __init__(self, start: Hashable,
                 is_goal: Callable[[Hashable], bool],
                 successors: Callable[[Hashable], Iterable[Tuple[Hashable, int]]],
                 heuristic: Optional[Heuristic] = None):
        self.start = start
        self._is_goal = is_goal
        self._successors = successors
        self._heuristic = heuristic or zero_heuristic

    def initial_state(self) -> Hashable:
        return self.start

    def is_goal(self, state: Hashable) -> bool:
        return self._is_goal(state)

    def successors(self, state: Hashable) -> Iterable[Tuple[Hashable, int]]:
        return self._successors(state)

    def heuristic(self, state: Hashable) -> float:
        return self._heuristic(state)
