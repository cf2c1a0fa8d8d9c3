"""
Example: shortest path and minimum spanning tree on a small sample graph.

Builds the 7-vertex undirected sample graph, runs Dijkstra from vertex 0 and
computes the minimum spanning tree with both Prim and Kruskal.
"""

from graphalgo import Graph, dijkstra, kruskal_mst, prim_mst

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


def build_sample_graph(directed: bool = False) -> Graph:
    graph = Graph(directed=directed)
    for u, v, w in SAMPLE_EDGES:
        graph.add_edge(u, v, w)
    return graph


def main() -> None:
    graph = build_sample_graph()

    print("=" * 60)
    print("Shortest path (Dijkstra)")
    print("=" * 60)
    sp = dijkstra(graph, 0)
    print(f"Path from 0 to 3: {sp.path_to(3)}")
    print(f"Distance from 0 to 3: {sp.dist_to(3)}")

    for name, mst in (("Prim", prim_mst(graph, 0)), ("Kruskal", kruskal_mst(graph))):
        print()
        print("=" * 60)
        print(f"Minimum spanning tree ({name})")
        print("=" * 60)
        for edge in mst.get_mst_edges():
            print(f"{edge.from_vertex} - {edge.to_vertex} (weight: {edge.weight})")
        print(f"Total weight: {mst.get_total_weight()}")


if __name__ == "__main__":
    main()
