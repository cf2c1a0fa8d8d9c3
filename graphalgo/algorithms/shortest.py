"""
Single-source shortest paths: Dijkstra's algorithm.

Relaxation is driven by a MinPQ of (distance, vertex) entries. Improving a
vertex pushes a fresh entry instead of updating the old one in place; the
superseded entries are skipped when they surface (lazy deletion), checked
against the authoritative distance table.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Set, Tuple

from ..diagnostics.core import assert_shortest_paths
from ..logging import get_logger
from ..structures.graph import Graph
from ..structures.min_pq import MinPQ
from ..utils import reconstruct_path
from .base import GraphAlgorithm

logger = get_logger(__name__)

# Distance reported for vertices the search never reached. Infinity absorbs
# any finite addition, so it can never be mistaken for a real distance.
UNREACHABLE = math.inf


class Dijkstra(GraphAlgorithm):
    """
    Dijkstra's algorithm for graphs with non-negative edge weights.

    Works on directed and undirected graphs.

    Complexity: O(E log E) with a binary heap and lazy deletion.

    Example:
        >>> G = Graph(directed=True)
        >>> G.add_edge(0, 1, 1)
        >>> G.add_edge(1, 2, 2)
        >>> G.add_edge(0, 2, 5)
        >>> sp = Dijkstra(G, 0).compute()
        >>> sp.dist_to(2)
        3
        >>> sp.path_to(2)
        [0, 1, 2]
    """

    def __init__(self, graph: Graph, start: int) -> None:
        """
        Args:
            graph: Graph with non-negative weights.
            start: Source vertex.

        Raises:
            ValueError: If start is not a vertex of graph.
        """
        super().__init__(graph)
        if not graph.has_vertex(start):
            raise ValueError(f"Start vertex {start} not in graph")
        self._start = start
        self._dist_to: Dict[int, float] = {}
        self._edge_to: Dict[int, int] = {}
        self.stale_entries = 0

    @property
    def start(self) -> int:
        return self._start

    def _run(self) -> None:
        dist = self._dist_to
        edge_to = self._edge_to
        finalized: Set[int] = set()

        dist[self._start] = 0
        pq: MinPQ[Tuple[float, int]] = MinPQ()
        pq.add((0, self._start))

        while pq:
            d, vertex = pq.poll()
            if vertex in finalized or d > dist[vertex]:
                self.stale_entries += 1
                continue
            finalized.add(vertex)

            for edge in self.graph.neighbors(vertex):
                candidate = d + edge.weight
                if candidate < dist.get(edge.to_vertex, UNREACHABLE):
                    dist[edge.to_vertex] = candidate
                    edge_to[edge.to_vertex] = vertex
                    pq.add((candidate, edge.to_vertex))

        logger.debug(
            "Dijkstra from %s: %d vertices reached, %d stale entries skipped",
            self._start,
            len(finalized),
            self.stale_entries,
        )

    def _verify(self) -> None:
        assert_shortest_paths(self, self.graph)

    def dist_to(self, vertex: int) -> float:
        """
        Return the shortest distance from start to vertex.

        Returns:
            The distance, or UNREACHABLE (infinity) if vertex was not reached
            or is unknown to the graph.
        """
        self._require_computed()
        return self._dist_to.get(vertex, UNREACHABLE)

    def has_path_to(self, vertex: int) -> bool:
        self._require_computed()
        return vertex in self._dist_to

    def edge_to(self, vertex: int) -> Optional[int]:
        """Return the predecessor of vertex on its shortest path, or None."""
        self._require_computed()
        return self._edge_to.get(vertex)

    def path_to(self, vertex: int) -> Optional[List[int]]:
        """
        Return the shortest path from start to vertex.

        Returns:
            List of vertices from start to vertex inclusive, ``[start]`` for
            the start itself, or None when vertex is unreachable.
        """
        self._require_computed()
        if vertex not in self._dist_to:
            return None
        return reconstruct_path(self._edge_to, self._start, vertex)

    def reachable(self) -> Set[int]:
        """Return every vertex reached from start, start included."""
        self._require_computed()
        return set(self._dist_to)

    def distances(self) -> Dict[int, float]:
        """Return a copy of the distance table for every reached vertex."""
        self._require_computed()
        return dict(self._dist_to)


def dijkstra(graph: Graph, start: int) -> Dijkstra:
    """
    Build and compute a Dijkstra search in one call.

    Args:
        graph: Graph with non-negative weights.
        start: Source vertex.

    Returns:
        A computed Dijkstra instance.
    """
    return Dijkstra(graph, start).compute()
