"""Performance benchmarks for Graph Conduit.

This package contains microbenchmarks for the quadratic and cubic hot paths:
Dijkstra's linear-scan selection, Floyd-Warshall and Reverse-Delete.
"""
