"""
Graph algorithms.

- Dijkstra: single-source shortest paths (non-negative weights)
- PrimMST: minimum spanning tree grown from a start vertex
- KruskalMST: minimum spanning forest by global edge selection

Each algorithm object is built from a finished Graph and runs once via
compute(); the lowercase helpers build and compute in a single call.
"""

from .base import GraphAlgorithm
from .mst import KruskalMST, PrimMST, kruskal_mst, prim_mst
from .shortest import UNREACHABLE, Dijkstra, dijkstra

__all__ = [
    "GraphAlgorithm",
    "Dijkstra",
    "dijkstra",
    "UNREACHABLE",
    "PrimMST",
    "prim_mst",
    "KruskalMST",
    "kruskal_mst",
]
