"""Explicit weighted adjacency graph."""

from collections import defaultdict
from typing import Dict, Hashable, Iterable, List, Tuple


class WeightedGraph:
    """Directed graph with non-negative edge weights.

    Nodes are any hashable value. Edges added twice keep the cheaper weight.
    """

    def __init__(self):
        self._edges: Dict[Hashable, Dict[Hashable, int]] = defaultdict(dict)

    def add_node(self, node: Hashable) -> None:
        self._edges[node]  # defaultdict creates the entry

    def add_edge(self, source: Hashable, target: Hashable, cost: int = 1) -> None:
        if cost < 0:
            raise ValueError(f"Edge {source!r} -> {target!r} has negative cost {cost}")
        self.add_node(target)
        current = self._edges[source].get(target)
        if current is None or cost < current:
            self._edges[source][target] = cost

    def add_undirected_edge(self, a: Hashable, b: Hashable, cost: int = 1) -> None:
        self.add_edge(a, b, cost)
        self.add_edge(b, a, cost)

    def neighbors(self, node: Hashable) -> List[Hashable]:
        return list(self._edges.get(node, {}))

    def edge_cost(self, source: Hashable, target: Hashable) -> int:
        cost = self._edges.get(source, {}).get(target)
        if cost is None:
            raise KeyError(f"No edge {source!r} -> {target!r}")
        return cost

    def successors(self, node: Hashable) -> Iterable[Tuple[Hashable, int]]:
        return self._edges.get(node, {}).items()

    def nodes(self) -> List[Hashable]:
        return list(self._edges)

    def __contains__(self, node: Hashable) -> bool:
        return node in self._edges

    def __len__(self) -> int:
        return len(self._edges)

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[Hashable, Hashable, int]],
                   undirected: bool = True) -> 'WeightedGraph':
        """Build a graph from ``(a, b, cost)`` triples."""
        graph = cls()
        for a, b, cost in edges:
            if undirected:
                graph.add_undirected_edge(a, b, cost)
            else:
                graph.add_edge(a, b, cost)
        return graph
