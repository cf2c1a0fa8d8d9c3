"""Benchmark Dijkstra and the MST algorithms on random graphs."""

import time
from typing import Dict

import numpy as np

from graphalgo import dijkstra, kruskal_mst, prim_mst, random_connected_graph


def benchmark_graph_algorithms(
    num_vertices: int,
    edge_probability: float = 0.05,
    seed: int = 0,
) -> Dict[str, float]:
    """Time one run of each algorithm on a connected random graph.

    Args:
        num_vertices: Number of vertices.
        edge_probability: Probability of each extra edge.
        seed: Seed for the numpy Generator.

    Returns:
        Dictionary with timing results in seconds.
    """
    rng = np.random.default_rng(seed)
    graph = random_connected_graph(num_vertices, edge_probability, rng=rng)

    results: Dict[str, float] = {
        "num_vertices": num_vertices,
        "num_edges": graph.num_edges(),
    }
    for name, run in (
        ("dijkstra_sec", lambda: dijkstra(graph, 0)),
        ("prim_sec", lambda: prim_mst(graph, 0)),
        ("kruskal_sec", lambda: kruskal_mst(graph)),
    ):
        start = time.perf_counter()
        run()
        results[name] = time.perf_counter() - start

    return results


if __name__ == "__main__":
    print("Graph Algorithm Benchmarks")
    print("=" * 60)
    for n in [100, 500, 1000]:
        r = benchmark_graph_algorithms(n)
        print(
            f"V={r['num_vertices']:5d} E={r['num_edges']:6d}  "
            f"dijkstra={r['dijkstra_sec']:.4f}s  prim={r['prim_sec']:.4f}s  "
            f"kruskal={r['kruskal_sec']:.4f}s"
        )
