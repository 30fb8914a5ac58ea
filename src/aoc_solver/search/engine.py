"""Best-first (A* / Dijkstra) search engine.

The engine pops the frontier node with the lowest estimated total cost,
finalizes it, and relaxes its successors through a keyed priority queue.
With a zero heuristic this is Dijkstra's algorithm; with an admissible and
consistent heuristic it is A*.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Mapping, Optional

from aoc_solver.core.data_models import FrontierNode, SearchResult, SearchStatistics
from .priority_queue import QUEUE_TYPES, create_priority_queue
from .problems import SearchProblem

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """Configuration for best-first search."""
    queue: str = 'heap'  # 'heap' or 'sorted'
    max_nodes_expanded: Optional[int] = None  # None = run until goal or exhaustion
    log_interval: int = 50000  # Debug progress every N pops (0 disables)

    def __post_init__(self):
        if self.queue not in QUEUE_TYPES:
            raise ValueError(f"Unknown queue kind: {self.queue!r}")
        if self.max_nodes_expanded is not None and self.max_nodes_expanded < 0:
            raise ValueError(f"max_nodes_expanded must be non-negative, got {self.max_nodes_expanded}")

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> 'SearchConfig':
        """Build from a config section (dict or DictConfig), ignoring unknown keys."""
        if not values:
            return cls()
        return cls(
            queue=str(values.get('queue', 'heap')),
            max_nodes_expanded=values.get('max_nodes_expanded'),
            log_interval=int(values.get('log_interval', 50000)),
        )


def reconstruct_path(goal_node: FrontierNode,
                     finalized: Dict[Hashable, FrontierNode]) -> List[Hashable]:
    """Walk predecessor keys from the goal back to the origin.

    Returns the states ordered origin -> goal.
    """
    path = [goal_node.state]
    predecessor = goal_node.predecessor
    while predecessor is not None:
        path.append(predecessor)
        predecessor = finalized[predecessor].predecessor
    path.reverse()
    return path


class BestFirstSearcher:
    """Best-first search over any :class:`SearchProblem`.

    Each call to :meth:`search` builds its own frontier and finalized set, so
    one searcher can run several independent searches.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()
        self.statistics = SearchStatistics()

    def search(self, problem: SearchProblem) -> SearchResult:
        """Find the cheapest path from the problem's start to a goal state.

        Args:
            problem: Search problem to solve

        Returns:
            SearchResult; ``success`` is False when the goal is unreachable or
            the node limit was hit
        """
        start_time = time.perf_counter()
        self.statistics = statistics = SearchStatistics()
        frontier = create_priority_queue(self.config.queue)
        finalized: Dict[Hashable, FrontierNode] = {}
        max_nodes = self.config.max_nodes_expanded
        log_interval = self.config.log_interval

        start = problem.initial_state()
        start_estimate = problem.heuristic(start)
        frontier.insert_or_update(start, FrontierNode(start, 0, start_estimate), start_estimate)
        statistics.max_frontier_size = len(frontier)
        logger.info(f"Starting best-first search from {start!r} "
                    f"(queue={self.config.queue}, initial estimate={start_estimate})")

        while True:
            if max_nodes is not None and statistics.nodes_explored >= max_nodes:
                return self._finish(statistics, start_time, "max_nodes_reached")

            entry = frontier.pop_minimum()
            statistics.nodes_explored = frontier.explored_count()
            if entry is None:
                return self._finish(statistics, start_time, "unreachable")

            current: FrontierNode = entry.item
            if current.state in finalized:
                statistics.duplicates_skipped += 1
                continue

            if log_interval and statistics.nodes_explored % log_interval == 0:
                logger.debug(f"Explored {statistics.nodes_explored} nodes, "
                             f"frontier={len(frontier)}, current f={entry.priority}")

            if problem.is_goal(current.state):
                finalized[current.state] = current
                statistics.nodes_finalized += 1
                path = reconstruct_path(current, finalized)
                return self._finish(statistics, start_time, "goal_reached",
                                    cost=current.cost_from_origin, path=path)

            for successor, step_cost in problem.successors(current.state):
                if step_cost < 0:
                    raise ValueError(f"Negative step cost {step_cost} from "
                                     f"{current.state!r} to {successor!r}")
                if successor in finalized:
                    continue
                cost = current.cost_from_origin + step_cost
                estimate = cost + problem.heuristic(successor)
                statistics.nodes_generated += 1
                frontier.insert_or_update(
                    successor, FrontierNode(successor, cost, estimate, current.state), estimate
                )

            finalized[current.state] = current
            statistics.nodes_finalized += 1
            if len(frontier) > statistics.max_frontier_size:
                statistics.max_frontier_size = len(frontier)

    def _finish(self, statistics: SearchStatistics, start_time: float,
                termination_reason: str, cost: Optional[int] = None,
                path: Optional[List[Hashable]] = None) -> SearchResult:
        computation_time = time.perf_counter() - start_time
        success = termination_reason == "goal_reached"
        if success:
            logger.info(f"Search reached goal with cost {cost} after exploring "
                        f"{statistics.nodes_explored} nodes in {computation_time:.3f}s")
        else:
            logger.info(f"Search ended without a path ({termination_reason}) after "
                        f"exploring {statistics.nodes_explored} nodes")
        return SearchResult(
            success=success,
            cost=cost,
            path=path or [],
            nodes_explored=statistics.nodes_explored,
            nodes_generated=statistics.nodes_generated,
            nodes_finalized=statistics.nodes_finalized,
            duplicates_skipped=statistics.duplicates_skipped,
            max_frontier_size=statistics.max_frontier_size,
            computation_time=computation_time,
            termination_reason=termination_reason,
        )

    def get_search_stats(self) -> Dict[str, Any]:
        """Statistics of the most recent search plus the active configuration."""
        stats = self.statistics.to_dict()
        stats['config'] = {
            'queue': self.config.queue,
            'max_nodes_expanded': self.config.max_nodes_expanded,
        }
        return stats


def create_searcher(queue: str = 'heap',
                    max_nodes_expanded: Optional[int] = None,
                    log_interval: int = 50000) -> BestFirstSearcher:
    """Factory function to create a searcher with custom configuration.

    Args:
        queue: Priority queue implementation ('heap' or 'sorted')
        max_nodes_expanded: Optional cap on frontier pops
        log_interval: Debug progress interval in pops

    Returns:
        Configured BestFirstSearcher instance
    """
    return BestFirstSearcher(SearchConfig(
        queue=queue,
        max_nodes_expanded=max_nodes_expanded,
        log_interval=log_interval,
    ))


def find_shortest_path(problem: SearchProblem,
                       config: Optional[SearchConfig] = None) -> SearchResult:
    """Convenience function running one search with a fresh searcher."""
    return BestFirstSearcher(config).search(problem)
