"""Pytest configuration and shared fixtures for graphalgo tests.

This module provides:
- Deterministic numpy RNG fixtures
- The 7-vertex sample graph used across algorithm tests
- Brute-force reference implementations for small graphs
- Isolation of the global debug-mode switch
"""

import itertools
import math
import os
from typing import Callable, Dict, List

import numpy as np
import pytest

from graphalgo import Graph, set_debug_enabled

SAMPLE_EDGES = [
    (0, 1, 2),
    (0, 2, 1),
    (1, 2, 5),
    (1, 3, 11),
    (1, 4, 3),
    (2, 5, 15),
    (3, 4, 2),
    (4, 2, 1),
    (4, 5, 4),
    (4, 6, 5),
    (6, 3, 1),
    (6, 5, 1),
]


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function", autouse=True)
def reset_debug_mode():
    """Auto-use fixture restoring debug mode to off after every test."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


def _build_sample(directed: bool) -> Graph:
    graph = Graph(directed=directed)
    for u, v, w in SAMPLE_EDGES:
        graph.add_edge(u, v, w)
    return graph


@pytest.fixture
def sample_graph() -> Graph:
    """The undirected 7-vertex sample graph."""
    return _build_sample(directed=False)


@pytest.fixture
def directed_sample_graph() -> Graph:
    """The same edge list read as a directed graph."""
    return _build_sample(directed=True)


def _brute_force_distances(graph: Graph, start: int) -> Dict[int, float]:
    """Minimum weight over all simple paths from start, by exhaustive DFS."""
    best: Dict[int, float] = {v: math.inf for v in graph.get_vertices()}
    best[start] = 0

    def walk(vertex: int, cost: float, visited: set) -> None:
        for edge in graph.neighbors(vertex):
            nxt = edge.to_vertex
            if nxt in visited:
                continue
            total = cost + edge.weight
            if total < best[nxt]:
                best[nxt] = total
            visited.add(nxt)
            walk(nxt, total, visited)
            visited.remove(nxt)

    walk(start, 0, {start})
    return best


def _components(vertices: List[int], edges) -> int:
    parent = {v: v for v in vertices}

    def root(v):
        while parent[v] != v:
            v = parent[v]
        return v

    count = len(vertices)
    for edge in edges:
        a, b = root(edge.from_vertex), root(edge.to_vertex)
        if a != b:
            parent[a] = b
            count -= 1
    return count


def _brute_force_mst_weight(graph: Graph) -> float:
    """Lightest spanning tree weight over every (V-1)-edge subset."""
    vertices = sorted(graph.get_vertices())
    edges = graph.get_edges()
    if len(vertices) <= 1:
        return 0
    best = math.inf
    for subset in itertools.combinations(edges, len(vertices) - 1):
        if _components(vertices, subset) == 1:
            best = min(best, sum(e.weight for e in subset))
    return best


@pytest.fixture
def brute_force_distances() -> Callable[[Graph, int], Dict[int, float]]:
    return _brute_force_distances


@pytest.fixture
def brute_force_mst_weight() -> Callable[[Graph], float]:
    return _brute_force_mst_weight


@pytest.fixture
def count_components() -> Callable[[Graph], int]:
    """Number of connected components of an undirected graph."""

    def count(graph: Graph) -> int:
        return _components(sorted(graph.get_vertices()), graph.get_edges())

    return count
