"""
Seeded random graph generators.

Used by the property tests and benchmarks to produce reproducible graphs.
Randomness comes from a numpy Generator so callers control seeding.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .structures.graph import Graph


def random_weighted_graph(
    num_vertices: int,
    edge_probability: float,
    max_weight: int = 10,
    directed: bool = False,
    rng: Optional[np.random.Generator] = None,
) -> Graph:
    """
    Build an Erdos-Renyi style graph with integer weights.

    Every vertex 0..num_vertices-1 is registered, even when isolated. Each
    ordered pair (directed) or unordered pair (undirected) of distinct
    vertices gets an edge with probability edge_probability and a weight
    drawn uniformly from [1, max_weight].

    Args:
        num_vertices: Number of vertices (>= 0).
        edge_probability: Probability of each edge, in [0, 1].
        max_weight: Largest edge weight (>= 1).
        directed: Whether to build a directed graph.
        rng: numpy Generator; defaults to ``np.random.default_rng(0)``.

    Returns:
        The generated Graph.

    Raises:
        ValueError: If an argument is out of range.

    Example:
        >>> G = random_weighted_graph(5, 0.5, rng=np.random.default_rng(1))
        >>> G.num_vertices()
        5
    """
    if num_vertices < 0:
        raise ValueError(f"num_vertices must be non-negative, got {num_vertices}.")
    if not 0.0 <= edge_probability <= 1.0:
        raise ValueError(
            f"edge_probability must be in [0, 1], got {edge_probability}."
        )
    if max_weight < 1:
        raise ValueError(f"max_weight must be >= 1, got {max_weight}.")

    if rng is None:
        rng = np.random.default_rng(0)

    graph = Graph(directed=directed)
    for v in range(num_vertices):
        graph.add_vertex(v)

    # Draw the whole adjacency at once; the upper triangle alone is used for
    # undirected graphs.
    mask = rng.random((num_vertices, num_vertices)) < edge_probability
    weights = rng.integers(1, max_weight, size=(num_vertices, num_vertices), endpoint=True)

    for u in range(num_vertices):
        for v in range(num_vertices):
            if u == v or (not directed and v < u):
                continue
            if mask[u, v]:
                graph.add_edge(u, v, int(weights[u, v]))

    return graph


def random_connected_graph(
    num_vertices: int,
    edge_probability: float,
    max_weight: int = 10,
    rng: Optional[np.random.Generator] = None,
) -> Graph:
    """
    Build a connected undirected graph with integer weights.

    A random spanning path over a permutation of the vertices guarantees
    connectivity; extra edges are added as in random_weighted_graph.

    Args:
        num_vertices: Number of vertices (>= 1).
        edge_probability: Probability of each extra edge, in [0, 1].
        max_weight: Largest edge weight (>= 1).
        rng: numpy Generator; defaults to ``np.random.default_rng(0)``.

    Returns:
        The generated connected Graph.
    """
    if num_vertices < 1:
        raise ValueError(f"num_vertices must be >= 1, got {num_vertices}.")
    if rng is None:
        rng = np.random.default_rng(0)

    graph = random_weighted_graph(
        num_vertices, edge_probability, max_weight=max_weight, rng=rng
    )
    order = rng.permutation(num_vertices)
    for u, v in zip(order[:-1], order[1:]):
        graph.add_edge(int(u), int(v), int(rng.integers(1, max_weight, endpoint=True)))
    return graph
