"""graphalgo - classic weighted-graph algorithms and their data structures."""

__version__ = "0.1.0"

# Algorithms
from .algorithms import (
    UNREACHABLE,
    Dijkstra,
    GraphAlgorithm,
    KruskalMST,
    PrimMST,
    dijkstra,
    kruskal_mst,
    prim_mst,
)

# Diagnostics
from .diagnostics import (
    assert_heap_ordered,
    assert_shortest_paths,
    assert_spanning_forest,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

# Generators
from .generators import random_connected_graph, random_weighted_graph

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Data structures
from .structures import Edge, Graph, MinPQ, UnionFind

# Utilities
from .utils import node_index_map, path_weight, reconstruct_path

__all__ = [
    "__version__",
    # Data structures
    "Edge",
    "Graph",
    "MinPQ",
    "UnionFind",
    # Algorithms
    "GraphAlgorithm",
    "Dijkstra",
    "dijkstra",
    "UNREACHABLE",
    "PrimMST",
    "prim_mst",
    "KruskalMST",
    "kruskal_mst",
    # Utilities
    "node_index_map",
    "reconstruct_path",
    "path_weight",
    # Generators
    "random_weighted_graph",
    "random_connected_graph",
    # Diagnostics
    "assert_heap_ordered",
    "assert_shortest_paths",
    "assert_spanning_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
