"""
Utility functions for graph algorithms.

Provides helpers for vertex indexing, path reconstruction and path weights.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .structures.graph import Graph


def node_index_map(vertices: Iterable[int]) -> Tuple[Dict[int, int], List[int]]:
    """
    Create a deterministic mapping from vertices to indices 0..n-1.

    Vertices are sorted ascending; duplicates collapse to one index. Used to
    run index-based structures such as UnionFind over sparse vertex labels.

    Args:
        vertices: Iterable of vertex ids.

    Returns:
        Tuple of (vertex_to_index dict, index_to_vertex list).

    Example:
        >>> vertex_to_idx, idx_to_vertex = node_index_map([30, 10, 20])
        >>> vertex_to_idx
        {10: 0, 20: 1, 30: 2}
        >>> idx_to_vertex
        [10, 20, 30]
    """
    ordered = sorted(set(vertices))
    return {v: i for i, v in enumerate(ordered)}, ordered


def reconstruct_path(
    edge_to: Mapping[int, int], start: int, target: int
) -> Optional[List[int]]:
    """
    Rebuild the vertex sequence from start to target from a predecessor map.

    ``edge_to[v]`` is the vertex v was reached from; the start vertex has
    no entry.

    Args:
        edge_to: Predecessor map produced by a search.
        start: Vertex the search started from.
        target: Vertex to reconstruct the path to.

    Returns:
        List of vertices from start to target (inclusive), ``[start]`` when
        target == start, or None when target was never reached or the map
        loops without returning to start.

    Example:
        >>> reconstruct_path({1: 0, 2: 1}, 0, 2)
        [0, 1, 2]
        >>> reconstruct_path({1: 0, 2: 1}, 0, 5) is None
        True
    """
    if target == start:
        return [start]
    if target not in edge_to:
        return None

    path = [target]
    seen = {target}
    current = target
    while current != start:
        current = edge_to.get(current)
        if current is None or current in seen:
            return None
        seen.add(current)
        path.append(current)

    path.reverse()
    return path


def path_weight(graph: Graph, path: Sequence[int]) -> float:
    """
    Return the total weight of a vertex path.

    Each hop uses the lightest edge between the two vertices, so parallel
    edges do not inflate the total.

    Args:
        graph: Graph the path lives in.
        path: Sequence of vertices; fewer than two vertices weigh 0.

    Returns:
        Sum of the hop weights.

    Raises:
        ValueError: If two consecutive vertices are not joined by an edge.
    """
    total = 0
    for u, v in zip(path, path[1:]):
        weights = [e.weight for e in graph.neighbors(u) if e.to_vertex == v]
        if not weights:
            raise ValueError(f"No edge {u} -> {v} in graph.")
        total += min(weights)
    return total
