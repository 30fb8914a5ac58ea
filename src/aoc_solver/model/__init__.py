"""Search-space models: cost grids and explicit graphs."""

from .grid import CostGrid, DIRECTIONS
from .graph import WeightedGraph

__all__ = [
    'CostGrid',
    'DIRECTIONS',
    'WeightedGraph',
]
