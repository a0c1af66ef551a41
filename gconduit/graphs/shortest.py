"""
Single-source shortest path algorithms: Dijkstra.

The selection step is a linear scan over the unvisited vertices rather than a
priority queue, which is O(V^2 + E) overall and favours dense graphs.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from typing import List, Optional, Tuple

from ..logging import get_logger
from .core import Graph, Weight
from .utils import reconstruct_path

logger = get_logger(__name__)


def dijkstra(
    graph: Graph, source: int
) -> Tuple[List[Optional[Weight]], List[Optional[int]]]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Computes shortest path weights from source to every vertex. Results are
    not defined for graphs with negative edge weights; a warning is logged
    when one is present.

    Args:
        graph: Graph with non-negative edge weights.
        source: Source vertex.

    Returns:
        Tuple of:
        - distance: List indexed by vertex with the shortest distance from
          source, or None if unreachable
        - parent: List indexed by vertex with the previous vertex on the
          shortest path (None for source/unreached)

    Raises:
        GraphArgumentError: If source is not a vertex of the graph.

    Complexity: O(V^2 + E).

    Example:
        >>> G = Graph(3, directed=True)
        >>> G.add_edge(0, 1, 1.0)
        True
        >>> G.add_edge(1, 2, 2.0)
        True
        >>> dijkstra(G, 0)[0]
        [0, 1.0, 3.0]
    """
    source = graph.check_vertex(source, "source")

    n = graph.vertex_count
    if any(e.weight < 0 for e in graph.edges()):
        logger.warning("dijkstra called on a graph with negative edge weights; results are undefined")

    distance: List[Optional[Weight]] = [None] * n
    parent: List[Optional[int]] = [None] * n
    visited = [False] * n
    distance[source] = 0

    for _ in range(n - 1):
        # Select the closest reachable unvisited vertex (ties -> smallest id)
        u = -1
        for candidate in range(n):
            if visited[candidate] or distance[candidate] is None:
                continue
            if u < 0 or distance[candidate] < distance[u]:
                u = candidate

        if u < 0:
            break
        visited[u] = True

        # Relax edges from u
        for v, weight in graph.neighbors(u):
            if visited[v]:
                continue
            new_dist = distance[u] + weight
            if distance[v] is None or new_dist < distance[v]:
                distance[v] = new_dist
                parent[v] = u

    return distance, parent


def dijkstra_path(
    graph: Graph, source: int, target: int
) -> Tuple[Optional[Weight], Optional[List[int]]]:
    """
    Shortest weighted path from source to target.

    Returns:
        Tuple of (total weight, list of vertices from source to target), or
        (None, None) if target is unreachable.

    Raises:
        GraphArgumentError: If source or target is not a vertex of the graph.

    Example:
        >>> G = Graph(4)
        >>> for u, v, w in [(1, 2, 3), (1, 3, 1), (3, 2, 5)]:
        ...     _ = G.add_edge(u, v, w)
        >>> dijkstra_path(G, 1, 2)
        (3, [1, 2])
    """
    target = graph.check_vertex(target, "target")
    distance, parent = dijkstra(graph, source)
    if distance[target] is None:
        return None, None
    return distance[target], reconstruct_path(parent, source, target)
