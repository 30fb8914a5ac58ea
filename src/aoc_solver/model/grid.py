"""Numpy-backed cost grid used as an implicit 4-connected graph."""

import logging
from typing import List

import numpy as np

from aoc_solver.core.data_models import Position

logger = logging.getLogger(__name__)

# 4-directional moves only; no diagonals
DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class CostGrid:
    """Rectangular grid of non-negative cost-to-enter weights.

    Cells are indexed ``[y, x]`` internally and addressed by ``Position(x, y)``
    externally. The backing array is read-only once the grid is built.
    """

    def __init__(self, costs: np.ndarray):
        """Initialize the grid.

        Args:
            costs: 2D integer array of cell weights, rows first
        """
        costs = np.array(costs, dtype=np.int64)
        if costs.ndim != 2 or costs.size == 0:
            raise ValueError(f"Cost grid must be a non-empty 2D array, got shape {costs.shape}")
        if (costs < 0).any():
            raise ValueError("Cost grid weights must be non-negative")
        costs.setflags(write=False)
        self._costs = costs

    @property
    def costs(self) -> np.ndarray:
        return self._costs

    @property
    def height(self) -> int:
        return self._costs.shape[0]

    @property
    def width(self) -> int:
        return self._costs.shape[1]

    @property
    def max_x(self) -> int:
        return self.width - 1

    @property
    def max_y(self) -> int:
        return self.height - 1

    @property
    def origin(self) -> Position:
        return Position(0, 0)

    @property
    def far_corner(self) -> Position:
        return Position(self.max_x, self.max_y)

    def in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x <= self.max_x and 0 <= y <= self.max_y

    def neighbors(self, position: Position) -> List[Position]:
        """In-bounds orthogonal neighbours of a cell (at most 4)."""
        x, y = position
        result = []
        for dx, dy in DIRECTIONS:
            candidate = Position(x + dx, y + dy)
            if self.in_bounds(candidate):
                result.append(candidate)
        return result

    def cost_to_enter(self, position: Position) -> int:
        """Weight charged for moving into ``position``."""
        if not self.in_bounds(position):
            raise IndexError(f"Position {position} is outside the grid")
        return int(self._costs[position.y, position.x])

    def min_cost(self) -> int:
        return int(self._costs.min())

    def tile(self, repeat: int = 5) -> 'CostGrid':
        """Build a ``repeat`` x ``repeat`` tiled copy of this grid.

        The tile at offset (tx, ty) holds ``((cost - 1 + tx + ty) % 9) + 1``.
        """
        if repeat < 1:
            raise ValueError(f"Tile repeat factor must be positive, got {repeat}")

        offsets = np.add.outer(np.arange(repeat), np.arange(repeat))
        # Kronecker product places offset[ty, tx] over every cell of tile (tx, ty)
        offset_grid = np.kron(offsets, np.ones_like(self._costs))
        base = np.tile(self._costs, (repeat, repeat))
        tiled = (base - 1 + offset_grid) % 9 + 1

        logger.debug(f"Tiled {self.width}x{self.height} grid {repeat}x{repeat} "
                     f"-> {tiled.shape[1]}x{tiled.shape[0]}")
        return CostGrid(tiled)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CostGrid):
            return NotImplemented
        return np.array_equal(self._costs, other._costs)

    def __repr__(self) -> str:
        return f"CostGrid(width={self.width}, height={self.height})"
