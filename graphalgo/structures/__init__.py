"""
Data structures shared by the graph algorithms.

- Graph / Edge: weighted adjacency-list graph, directed or undirected
- MinPQ: 1-indexed binary min-heap
- UnionFind: disjoint sets with path compression and union by size
"""

from .graph import Edge, Graph
from .min_pq import MinPQ
from .union_find import UnionFind

__all__ = [
    "Edge",
    "Graph",
    "MinPQ",
    "UnionFind",
]
