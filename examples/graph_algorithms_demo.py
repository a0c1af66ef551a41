"""
Example: Graph Algorithms in Graph Conduit

This example builds the classic three-vertex triangle (1-2 weight 3, 1-3
weight 1, 3-2 weight 5) in its directed and undirected forms and runs the
shortest path and spanning tree algorithms over it.
"""

from gconduit import (
    Graph,
    bfs_path,
    dijkstra_path,
    distances_to_array,
    floyd_warshall,
    kruskal_mst,
    prim_mst,
    reverse_delete_mst,
    sorted_edges,
)

TRIANGLE = [(1, 2, 3), (1, 3, 1), (3, 2, 5)]


def build_triangle(directed: bool) -> Graph:
    graph = Graph(4, directed=directed, weighted=True)
    for u, v, w in TRIANGLE:
        graph.add_edge(u, v, w)
    return graph


def example_adjacency():
    """Example: Adjacency lists of both variants."""
    print("=" * 60)
    print("Example 1: Adjacency Lists")
    print("=" * 60)

    for directed in (False, True):
        graph = build_triangle(directed)
        kind = "directed" if directed else "undirected"
        print(f"{kind}: {graph.adjacency_list()}")
    print()


def example_shortest_paths():
    """Example: Hop-count and weighted shortest paths."""
    print("=" * 60)
    print("Example 2: Shortest Paths")
    print("=" * 60)

    directed = build_triangle(directed=True)
    print(f"Fewest edges 1 -> 2: {bfs_path(directed, 1, 2)}")
    print(f"Fewest edges 3 -> 1: {bfs_path(directed, 3, 1)}")

    distance, path = dijkstra_path(directed, 1, 2)
    print(f"Lightest path 1 -> 2: {path} (weight {distance})")

    undirected = build_triangle(directed=False)
    print("All-pairs distances (undirected):")
    print(distances_to_array(floyd_warshall(undirected)))
    print()


def example_spanning_trees():
    """Example: Kruskal, Prim and Reverse-Delete agree."""
    print("=" * 60)
    print("Example 3: Minimum Spanning Trees")
    print("=" * 60)

    graph = build_triangle(directed=False)
    print("Edges by weight:", [e.as_tuple() for e in sorted_edges(graph)])

    for name, tree in (
        ("Kruskal", kruskal_mst(graph)),
        ("Prim (from 1)", prim_mst(graph, 1)),
        ("Reverse-Delete", reverse_delete_mst(graph)),
    ):
        edges = [e.as_tuple() for e in tree.edges]
        print(f"{name}: {edges} total weight {tree.total_weight}")
    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("Graph Conduit - Graph Algorithm Examples")
    print("=" * 60 + "\n")

    example_adjacency()
    example_shortest_paths()
    example_spanning_trees()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
