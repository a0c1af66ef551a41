"""
Graph algorithms package for gconduit.

This package provides canonical textbook graph algorithms including:
- Graph data structure over vertices 0..n-1 (directed/undirected, weighted/unweighted)
- Union-Find (DisjointSet)
- Traversal algorithms (BFS, DFS, reachability)
- Shortest path algorithms (Dijkstra)
- All-pairs shortest paths (Floyd-Warshall)
- Minimum spanning trees (Kruskal, Prim, Reverse-Delete)

Unreachable distances are reported as None. Neighbors are visited in
ascending id order for reproducibility.
"""

from .allpairs import floyd_warshall, floyd_warshall_paths
from .core import AdjacencyEntry, Edge, Graph, GraphArgumentError
from .mst import SpanningTree, kruskal_mst, prim_mst, reverse_delete_mst
from .shortest import dijkstra, dijkstra_path
from .traversal import bfs, bfs_path, connected_components, dfs_order, is_connected, is_reachable
from .union_find import DisjointSet
from .utils import (
    adjacency_matrix,
    distances_to_array,
    graph_from_labeled_edges,
    node_index_map,
    reconstruct_path,
    sorted_edges,
    total_weight,
)

UNREACHABLE = None

__all__ = [
    "UNREACHABLE",
    "Graph",
    "Edge",
    "AdjacencyEntry",
    "GraphArgumentError",
    "DisjointSet",
    "bfs",
    "bfs_path",
    "dfs_order",
    "is_reachable",
    "is_connected",
    "connected_components",
    "dijkstra",
    "dijkstra_path",
    "floyd_warshall",
    "floyd_warshall_paths",
    "SpanningTree",
    "kruskal_mst",
    "prim_mst",
    "reverse_delete_mst",
    "sorted_edges",
    "total_weight",
    "node_index_map",
    "graph_from_labeled_edges",
    "reconstruct_path",
    "distances_to_array",
    "adjacency_matrix",
]

# Example usage:
# from gconduit.graphs import Graph, dijkstra_path, kruskal_mst
#
# G = Graph(4)
# G.add_edge(1, 2, 3)
# G.add_edge(1, 3, 1)
# G.add_edge(3, 2, 5)
# dijkstra_path(G, 3, 2)        # (4, [3, 1, 2])
# kruskal_mst(G).total_weight   # 4
