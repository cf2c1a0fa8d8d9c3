"""Performance benchmarks for graphalgo.

Times Dijkstra, Prim and Kruskal on seeded random graphs of growing size.
"""
