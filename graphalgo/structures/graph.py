"""
Weighted graph storage.

Provides the Edge value type and the Graph adjacency-list container shared by
every algorithm in the package. Vertices are integer ids that may be sparse;
they are registered implicitly by add_edge. Neighbour listings are sorted by
destination id for deterministic iteration.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Dict, List, Set


@dataclass(frozen=True)
class Edge:
    """Weighted edge between two integer vertices.

    Parameters
    ----------
    from_vertex:
        Source vertex (for undirected graphs, the endpoint whose adjacency
        list holds this entry).
    to_vertex:
        Destination vertex.
    weight:
        Non-negative edge weight.
    """

    from_vertex: int
    to_vertex: int
    weight: float

    def reversed(self) -> "Edge":
        """Return the same edge pointing the other way."""
        return Edge(self.to_vertex, self.from_vertex, self.weight)


def _check_vertex(vertex: int) -> int:
    if isinstance(vertex, bool) or not isinstance(vertex, Integral):
        raise TypeError(f"Vertex ids must be integers, got {vertex!r}")
    return int(vertex)


def _check_weight(weight: float) -> float:
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise TypeError(f"Edge weight must be a real number, got {weight!r}")
    if not math.isfinite(weight) or weight < 0:
        raise ValueError(
            f"Edge weights must be finite and non-negative. Found weight {weight}"
        )
    return weight


class Graph:
    """
    Weighted graph with adjacency-list representation.

    Supports directed and undirected graphs. Undirected edges are stored
    once per endpoint so both endpoints see each other as neighbours.
    Directed graphs additionally keep a reverse index keyed by destination
    so incoming edges can be walked without rescanning the whole graph.

    Self-loops and parallel edges are accepted. Parallel edges stay
    distinct. An undirected self-loop occupies a single adjacency entry.

    Attributes:
        directed: If True, graph is directed; otherwise undirected.

    Complexity:
        - add_vertex: O(1) amortized
        - add_edge: O(1) amortized
        - neighbors: O(deg(v) log deg(v))
        - get_edges: O(V log V + E log E)
    """

    def __init__(self, directed: bool = False) -> None:
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
        """
        self.directed = bool(directed)
        self._adj: Dict[int, List[Edge]] = {}
        self._reverse_adj: Dict[int, List[Edge]] = {}
        self._num_edges = 0

    def __repr__(self) -> str:
        return (
            f"Graph(directed={self.directed}, vertices={self.num_vertices()}, "
            f"edges={self._num_edges})"
        )

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def add_vertex(self, vertex: int) -> None:
        """
        Register a vertex with no edges. Existing vertices are left untouched.

        Args:
            vertex: Integer vertex id.

        Raises:
            TypeError: If vertex is not an integer.
        """
        vertex = _check_vertex(vertex)
        self._adj.setdefault(vertex, [])
        if self.directed:
            self._reverse_adj.setdefault(vertex, [])

    def add_edge(self, from_vertex: int, to_vertex: int, weight: float) -> None:
        """
        Add a weighted edge, creating both endpoints if needed.

        For undirected graphs the mirrored edge is appended to to_vertex's
        list. For directed graphs the edge is also indexed under to_vertex
        in the reverse adjacency.

        Args:
            from_vertex: Source vertex.
            to_vertex: Destination vertex.
            weight: Non-negative edge weight.

        Raises:
            TypeError: If a vertex is not an integer or weight is not a number.
            ValueError: If weight is negative, infinite or NaN.
        """
        from_vertex = _check_vertex(from_vertex)
        to_vertex = _check_vertex(to_vertex)
        weight = _check_weight(weight)

        self.add_vertex(from_vertex)
        self.add_vertex(to_vertex)

        edge = Edge(from_vertex, to_vertex, weight)
        self._adj[from_vertex].append(edge)
        if self.directed:
            self._reverse_adj[to_vertex].append(edge.reversed())
        elif from_vertex != to_vertex:
            self._adj[to_vertex].append(edge.reversed())
        self._num_edges += 1

    def has_vertex(self, vertex: int) -> bool:
        """Return True if vertex has been registered."""
        return vertex in self._adj

    def neighbors(self, vertex: int) -> List[Edge]:
        """
        Return outgoing edges of a vertex sorted by destination id.

        The sort is stable so parallel edges keep insertion order.
        Unknown vertices yield an empty list.

        Args:
            vertex: Vertex to get neighbours for.

        Returns:
            New list of Edge objects with from_vertex == vertex.
        """
        return sorted(self._adj.get(vertex, ()), key=lambda e: e.to_vertex)

    def reverse_neighbors(self, vertex: int) -> List[Edge]:
        """
        Return incoming edges of a vertex, seen from that vertex.

        Each entry is ``Edge(vertex, source, weight)`` for a stored edge
        ``source -> vertex``, sorted by source id.

        Raises:
            NotImplementedError: On undirected graphs, where incoming and
                outgoing edges coincide and no reverse index exists.
        """
        if not self.directed:
            raise NotImplementedError(
                "reverse_neighbors is only available on directed graphs; "
                "use neighbors() for undirected graphs"
            )
        return sorted(self._reverse_adj.get(vertex, ()), key=lambda e: e.to_vertex)

    def get_vertices(self) -> Set[int]:
        """Return the set of every vertex seen so far. Order is unspecified."""
        return set(self._adj)

    def num_vertices(self) -> int:
        return len(self._adj)

    def num_edges(self) -> int:
        """Number of logical edges (an undirected edge counts once)."""
        return self._num_edges

    def get_edges(self) -> List[Edge]:
        """
        Return each logical edge exactly once.

        Directed graphs return every stored edge. Undirected graphs return
        only the canonical entry with from_vertex < to_vertex, plus
        self-loops, which are stored once. Edges are enumerated vertex by
        vertex in ascending order, each in neighbors() order.

        Returns:
            List of Edge objects.
        """
        edges: List[Edge] = []
        for vertex in sorted(self._adj):
            for edge in self.neighbors(vertex):
                if self.directed or edge.from_vertex <= edge.to_vertex:
                    edges.append(edge)
        return edges
