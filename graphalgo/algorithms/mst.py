"""
Minimum spanning tree algorithms: Prim and Kruskal.

Prim grows one tree from a start vertex with a MinPQ frontier (cut
property). Kruskal scans all edges by weight and uses UnionFind to reject
edges that would close a cycle (cycle property), yielding a spanning forest
on disconnected graphs.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal and Prim).
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Set, Tuple

from ..diagnostics.core import assert_spanning_forest
from ..logging import get_logger
from ..structures.graph import Edge, Graph
from ..structures.min_pq import MinPQ
from ..structures.union_find import UnionFind
from ..utils import node_index_map
from .base import GraphAlgorithm

logger = get_logger(__name__)


def _require_undirected(graph: Graph, name: str) -> None:
    if graph.directed:
        raise ValueError(f"{name} requires an undirected graph")


class PrimMST(GraphAlgorithm):
    """
    Prim's algorithm (lazy variant) for the minimum spanning tree.

    Frontier entries are re-inserted rather than updated in place, so a
    vertex can surface more than once; every surfacing after the first is a
    stale duplicate and is discarded.

    Only the component containing start is spanned. On a disconnected graph
    get_total_weight() silently covers that component alone.

    Complexity: O(E log E) using a binary heap.

    Example:
        >>> G = Graph()
        >>> G.add_edge(0, 1, 1)
        >>> G.add_edge(1, 2, 2)
        >>> G.add_edge(0, 2, 3)
        >>> PrimMST(G, 0).compute().get_total_weight()
        3
    """

    def __init__(self, graph: Graph, start: int) -> None:
        """
        Args:
            graph: Undirected graph.
            start: Vertex the tree grows from.

        Raises:
            ValueError: If graph is directed or start is not in graph.
        """
        super().__init__(graph)
        _require_undirected(graph, "PrimMST")
        if not graph.has_vertex(start):
            raise ValueError(f"Start vertex {start} not in graph")
        self._start = start
        self._weight_to: Dict[int, float] = {}
        self._edge_to: Dict[int, int] = {}
        self._marked: Set[int] = set()
        self._order: List[int] = []
        self.stale_entries = 0

    @property
    def start(self) -> int:
        return self._start

    def _run(self) -> None:
        weight_to = self._weight_to
        marked = self._marked

        weight_to[self._start] = 0
        pq: MinPQ[Tuple[float, int]] = MinPQ()
        pq.add((0, self._start))

        while pq:
            _, vertex = pq.poll()
            if vertex in marked:
                self.stale_entries += 1
                continue
            marked.add(vertex)
            self._order.append(vertex)

            for edge in self.graph.neighbors(vertex):
                to = edge.to_vertex
                if to in marked:
                    continue
                if edge.weight < weight_to.get(to, math.inf):
                    weight_to[to] = edge.weight
                    self._edge_to[to] = vertex
                    pq.add((edge.weight, to))

        logger.debug(
            "PrimMST from %s: %d vertices spanned, %d stale entries skipped",
            self._start,
            len(marked),
            self.stale_entries,
        )

    def _verify(self) -> None:
        assert_spanning_forest(self.get_mst_edges(), self._marked)

    def get_mst_edges(self) -> List[Edge]:
        """
        Return the tree edges as Edge(predecessor, vertex, weight).

        Edges are listed in the order their vertex joined the tree.
        """
        self._require_computed()
        return [
            Edge(self._edge_to[v], v, self._weight_to[v]) for v in self._order[1:]
        ]

    def get_total_weight(self) -> float:
        """Return the summed weight of the selected edges."""
        self._require_computed()
        return sum(self._weight_to[v] for v in self._order)

    def edge_to(self, vertex: int) -> Optional[int]:
        """Return the tree neighbour vertex was attached through, or None."""
        self._require_computed()
        if vertex not in self._marked:
            return None
        return self._edge_to.get(vertex)

    def marked(self) -> Set[int]:
        """Return the vertices absorbed into the tree."""
        self._require_computed()
        return set(self._marked)


class KruskalMST(GraphAlgorithm):
    """
    Kruskal's algorithm for the minimum spanning forest.

    Edges come from Graph.get_edges() (each undirected edge once) and are
    stable-sorted by weight, so equal weights keep enumeration order and the
    result is deterministic. Sparse vertex labels are mapped to dense
    indices for the UnionFind.

    Complexity: O(E log E) for sorting plus near-constant union-find work.

    Example:
        >>> G = Graph()
        >>> G.add_edge(0, 1, 1)
        >>> G.add_edge(2, 3, 2)
        >>> mst = KruskalMST(G).compute()
        >>> mst.get_total_weight(), mst.num_components()
        (3, 2)
    """

    def __init__(self, graph: Graph) -> None:
        """
        Args:
            graph: Undirected graph.

        Raises:
            ValueError: If graph is directed.
        """
        super().__init__(graph)
        _require_undirected(graph, "KruskalMST")
        self._mst_edges: List[Edge] = []
        self._total_weight: float = 0
        self._num_components = 0
        self.rejected_edges = 0

    def _run(self) -> None:
        edges = sorted(self.graph.get_edges(), key=lambda e: e.weight)
        index, _ = node_index_map(self.graph.get_vertices())
        uf = UnionFind(len(index))

        for edge in edges:
            u = index[edge.from_vertex]
            v = index[edge.to_vertex]
            if uf.connected(u, v):
                self.rejected_edges += 1
                continue
            uf.union(u, v)
            self._mst_edges.append(edge)
            self._total_weight += edge.weight

        self._num_components = uf.count()
        logger.debug(
            "KruskalMST: %d edges accepted, %d rejected, %d components",
            len(self._mst_edges),
            self.rejected_edges,
            self._num_components,
        )

    def _verify(self) -> None:
        assert_spanning_forest(self._mst_edges, self.graph.get_vertices())

    def get_mst_edges(self) -> List[Edge]:
        """Return the accepted edges in the order they were accepted."""
        self._require_computed()
        return list(self._mst_edges)

    def get_total_weight(self) -> float:
        """Return the total weight of the spanning forest."""
        self._require_computed()
        return self._total_weight

    def num_components(self) -> int:
        """Return the number of trees in the spanning forest."""
        self._require_computed()
        return self._num_components


def prim_mst(graph: Graph, start: int) -> PrimMST:
    """Build and compute a PrimMST in one call."""
    return PrimMST(graph, start).compute()


def kruskal_mst(graph: Graph) -> KruskalMST:
    """Build and compute a KruskalMST in one call."""
    return KruskalMST(graph).compute()
