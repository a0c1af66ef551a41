"""Graph Conduit - a compact engine of canonical graph algorithms."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_disjoint_set_consistent,
    assert_sorted_adjacency,
    assert_symmetric,
    debug_context,
    is_debug_enabled,
    is_symmetric,
    set_debug_enabled,
)

# Graph algorithms
from .graphs import (
    UNREACHABLE,
    AdjacencyEntry,
    DisjointSet,
    Edge,
    Graph,
    GraphArgumentError,
    SpanningTree,
    adjacency_matrix,
    bfs,
    bfs_path,
    connected_components,
    dfs_order,
    dijkstra,
    dijkstra_path,
    distances_to_array,
    floyd_warshall,
    floyd_warshall_paths,
    graph_from_labeled_edges,
    is_connected,
    is_reachable,
    kruskal_mst,
    node_index_map,
    prim_mst,
    reconstruct_path,
    reverse_delete_mst,
    sorted_edges,
    total_weight,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graph algorithms
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
    # Diagnostics
    "is_symmetric",
    "assert_symmetric",
    "assert_sorted_adjacency",
    "assert_disjoint_set_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
