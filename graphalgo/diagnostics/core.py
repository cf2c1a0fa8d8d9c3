"""Invariant checkers for queues, shortest-path trees and spanning forests."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Dict, Iterable, List, Set

if TYPE_CHECKING:
    from ..algorithms.shortest import Dijkstra
    from ..structures.graph import Edge, Graph
    from ..structures.min_pq import MinPQ


def assert_heap_ordered(pq: "MinPQ") -> None:
    """
    Assert that a priority queue satisfies the min-heap property.

    Raises
    ------
    ValueError
        If some item is smaller than its parent.
    """
    if not pq.is_heap_ordered():
        raise ValueError(f"Heap order violated in {pq!r}.")


def assert_shortest_paths(result: "Dijkstra", graph: "Graph") -> None:
    """
    Assert that a computed Dijkstra result is a valid shortest-path tree.

    Checks that the start vertex has distance 0, that no edge leaving a
    reached vertex can still be relaxed, and that every predecessor link is
    tight (dist[u] + w == dist[v] for some u -> v edge).

    Parameters
    ----------
    result:
        A Dijkstra instance on which compute() has run.
    graph:
        The graph it was computed on.

    Raises
    ------
    ValueError
        If any of the conditions fails.
    """
    start = result.start
    if result.dist_to(start) != 0:
        raise ValueError(
            f"Start vertex {start} has distance {result.dist_to(start)}, expected 0."
        )

    for u in result.reachable():
        du = result.dist_to(u)
        for edge in graph.neighbors(u):
            if du + edge.weight < result.dist_to(edge.to_vertex):
                raise ValueError(
                    f"Edge {edge.from_vertex} -> {edge.to_vertex} "
                    f"(weight {edge.weight}) can still be relaxed."
                )

        pred = result.edge_to(u)
        if pred is None:
            if u != start:
                raise ValueError(f"Reached vertex {u} has no predecessor.")
            continue
        tight = any(
            e.to_vertex == u and result.dist_to(pred) + e.weight == du
            for e in graph.neighbors(pred)
        )
        if not tight:
            raise ValueError(f"Predecessor link {pred} -> {u} is not a tight edge.")


def assert_spanning_forest(edges: Iterable["Edge"], vertices: Iterable[int]) -> None:
    """
    Assert that a set of undirected edges forms a forest over vertices.

    A forest has exactly ``|V| - c`` edges where c is the number of
    connected components it induces, and never touches unknown vertices.

    Raises
    ------
    ValueError
        If an edge references an unknown vertex or the edges contain a cycle.
    """
    vertex_set: Set[int] = set(vertices)
    adj: Dict[int, List[int]] = {v: [] for v in vertex_set}
    edge_count = 0
    for edge in edges:
        u, v = edge.from_vertex, edge.to_vertex
        if u not in vertex_set or v not in vertex_set:
            raise ValueError(f"Edge {u} - {v} references a vertex outside the graph.")
        adj[u].append(v)
        adj[v].append(u)
        edge_count += 1

    components = 0
    seen: Set[int] = set()
    for root in vertex_set:
        if root in seen:
            continue
        components += 1
        seen.add(root)
        queue = deque([root])
        while queue:
            u = queue.popleft()
            for v in adj[u]:
                if v not in seen:
                    seen.add(v)
                    queue.append(v)

    if edge_count != len(vertex_set) - components:
        raise ValueError(
            f"{edge_count} edges over {len(vertex_set)} vertices in "
            f"{components} components: edge set contains a cycle."
        )
