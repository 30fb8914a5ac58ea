"""Tests for search heuristics."""

import numpy as np
import pytest

from aoc_solver.core.data_models import Position
from aoc_solver.model.grid import CostGrid
from aoc_solver.search.heuristics import (
    HEURISTIC_NAMES, create_grid_heuristic, find_overestimates, is_admissible,
    manhattan_distance, manhattan_to_goal, scaled_heuristic, zero_heuristic
)


class TestBasicHeuristics:
    """Test the building-block heuristics."""

    def test_zero(self):
        """Test the zero heuristic ignores its state."""
        assert zero_heuristic(Position(3, 4)) == 0
        assert zero_heuristic('anything') == 0

    def test_manhattan_distance(self):
        """Test taxicab distance."""
        assert manhattan_distance(Position(0, 0), Position(3, 4)) == 7
        assert manhattan_distance(Position(3, 4), Position(0, 0)) == 7
        assert manhattan_distance((2, 2), (2, 2)) == 0

    def test_manhattan_to_goal(self):
        """Test the goal-bound heuristic scales by step weight."""
        heuristic = manhattan_to_goal(Position(9, 9), step_weight=2)
        assert heuristic(Position(0, 0)) == 36
        assert heuristic(Position(9, 9)) == 0

    def test_negative_step_weight(self):
        """Test negative weights are rejected."""
        with pytest.raises(ValueError):
            manhattan_to_goal(Position(0, 0), step_weight=-1)

    def test_scaled(self):
        """Test scaled heuristics multiply the base estimate."""
        heuristic = scaled_heuristic(manhattan_to_goal(Position(4, 0)), 1.5)
        assert heuristic(Position(0, 0)) == 6.0


class TestGridHeuristicFactory:
    """Test create_grid_heuristic."""

    def test_names(self):
        """Test the advertised names are all buildable."""
        grid = CostGrid(np.ones((3, 3)))
        for name in HEURISTIC_NAMES:
            assert create_grid_heuristic(name, grid, grid.far_corner)(grid.origin) >= 0

    def test_manhattan_uses_min_cost(self):
        """Test manhattan is scaled by the cheapest cell."""
        grid = CostGrid(np.full((3, 3), 3))
        heuristic = create_grid_heuristic('manhattan', grid, grid.far_corner)
        assert heuristic(grid.origin) == 12

    def test_manhattan_collapses_on_zero_cells(self, caplog):
        """Test zero-cost cells reduce manhattan to zero with a warning."""
        grid = CostGrid(np.array([[0, 5], [5, 5]]))
        with caplog.at_level('WARNING'):
            heuristic = create_grid_heuristic('manhattan', grid, grid.far_corner)
        assert heuristic(grid.origin) == 0
        assert "reduced to zero" in caplog.text

    def test_unknown_name(self):
        """Test unknown heuristic names raise."""
        grid = CostGrid(np.ones((2, 2)))
        with pytest.raises(ValueError, match="Unknown heuristic"):
            create_grid_heuristic('euclidean', grid, grid.far_corner)


class TestAdmissibility:
    """Test the overestimate checks."""

    def test_admissible(self):
        """Test a lower bound reports no overestimates."""
        true_costs = {Position(0, 0): 4, Position(1, 0): 3, Position(2, 0): 0}
        heuristic = manhattan_to_goal(Position(2, 0))
        assert find_overestimates(heuristic, true_costs) == {}
        assert is_admissible(heuristic, true_costs)

    def test_overestimates_reported(self):
        """Test overestimating states are returned with the excess."""
        true_costs = {'a': 5, 'b': 2, 'goal': 0}
        estimates = {'a': 4, 'b': 6, 'goal': 1}
        overestimates = find_overestimates(estimates.get, true_costs)
        assert overestimates == {'b': 4, 'goal': 1}
        assert not is_admissible(estimates.get, true_costs)

    def test_state_subset(self):
        """Test checking only a subset of states."""
        true_costs = {'a': 5, 'b': 2}
        estimates = {'a': 4, 'b': 6}
        assert find_overestimates(estimates.get, true_costs, states=['a']) == {}
