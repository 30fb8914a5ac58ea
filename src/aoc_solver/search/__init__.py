"""Search algorithms for the puzzle solvers.

This package provides keyed priority queues, heuristics, search problem
adapters and the best-first engine shared by every search-shaped puzzle.
"""

from .priority_queue import (
    QueueEntry, HeapPriorityQueue, SortedListPriorityQueue, create_priority_queue
)
from .heuristics import zero_heuristic, manhattan_to_goal, create_grid_heuristic
from .problems import SearchProblem, GridSearchProblem, GraphSearchProblem, FunctionalSearchProblem
from .engine import BestFirstSearcher, SearchConfig, create_searcher, find_shortest_path

__all__ = [
    'QueueEntry',
    'HeapPriorityQueue',
    'SortedListPriorityQueue',
    'create_priority_queue',
    'zero_heuristic',
    'manhattan_to_goal',
    'create_grid_heuristic',
    'SearchProblem',
    'GridSearchProblem',
    'GraphSearchProblem',
    'FunctionalSearchProblem',
    'BestFirstSearcher',
    'SearchConfig',
    'create_searcher',
    'find_shortest_path',
]
