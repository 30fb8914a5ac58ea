"""Core data models shared by the search engine and the puzzle adapters."""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, NamedTuple, Optional

from .errors import UnreachableError


class Position(NamedTuple):
    """Immutable (x, y) grid coordinate."""
    x: int
    y: int


# Any hashable value can identify a search state (Position for grids,
# composite tuples for state-space puzzles).
StateKey = Hashable


@dataclass(frozen=True)
class FrontierNode:
    """Candidate state in the search frontier."""
    state: StateKey
    cost_from_origin: int
    estimated_total_cost: int
    predecessor: Optional[StateKey] = None


@dataclass
class SearchStatistics:
    """Counters collected during one search run."""
    nodes_explored: int = 0  # pop_minimum calls
    nodes_generated: int = 0
    nodes_finalized: int = 0
    duplicates_skipped: int = 0
    max_frontier_size: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'nodes_explored': self.nodes_explored,
            'nodes_generated': self.nodes_generated,
            'nodes_finalized': self.nodes_finalized,
            'duplicates_skipped': self.duplicates_skipped,
            'max_frontier_size': self.max_frontier_size,
        }


@dataclass
class SearchResult:
    """Result of a best-first search."""
    success: bool
    cost: Optional[int] = None
    path: List[StateKey] = field(default_factory=list)
    nodes_explored: int = 0
    nodes_generated: int = 0
    nodes_finalized: int = 0
    duplicates_skipped: int = 0
    max_frontier_size: int = 0
    computation_time: float = 0.0
    termination_reason: str = "unknown"

    @property
    def unreachable(self) -> bool:
        """Whether the frontier was exhausted without reaching the goal."""
        return self.termination_reason == "unreachable"

    def require(self) -> int:
        """Return the total cost, raising if no path was found."""
        if not self.success or self.cost is None:
            raise UnreachableError(
                f"No path to goal ({self.termination_reason}) after "
                f"{self.nodes_explored} nodes explored"
            )
        return self.cost

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'cost': self.cost,
            'path_length': len(self.path),
            'nodes_explored': self.nodes_explored,
            'nodes_generated': self.nodes_generated,
            'nodes_finalized': self.nodes_finalized,
            'duplicates_skipped': self.duplicates_skipped,
            'max_frontier_size': self.max_frontier_size,
            'computation_time': self.computation_time,
            'termination_reason': self.termination_reason,
        }


@dataclass
class PuzzleAnswer:
    """Answer produced by a puzzle adapter for one part."""
    day: int
    part: int
    value: Optional[int]
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.value is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'day': self.day,
            'part': self.part,
            'value': self.value,
            'success': self.success,
            'details': self.details,
        }
