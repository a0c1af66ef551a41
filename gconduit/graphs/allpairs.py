"""
All-pairs shortest path algorithms: Floyd-Warshall.

Computes shortest paths between all pairs of vertices in a graph.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from typing import Dict, List, Optional, Tuple

from .core import Graph, Weight


def _floyd_warshall_tables(
    graph: Graph,
) -> Tuple[List[List[Optional[Weight]]], List[List[Optional[int]]]]:
    n = graph.vertex_count

    dist: List[List[Optional[Weight]]] = [[None] * n for _ in range(n)]
    next_hop: List[List[Optional[int]]] = [[None] * n for _ in range(n)]

    for i in range(n):
        dist[i][i] = 0
        next_hop[i][i] = i

    for u in range(n):
        for v, weight in graph.neighbors(u):
            dist[u][v] = weight
            next_hop[u][v] = v

    for k in range(n):
        dist_k = dist[k]
        for i in range(n):
            d_ik = dist[i][k]
            if d_ik is None:
                continue
            dist_i = dist[i]
            for j in range(n):
                d_kj = dist_k[j]
                if d_kj is None:
                    continue
                candidate = d_ik + d_kj
                if dist_i[j] is None or candidate < dist_i[j]:
                    dist_i[j] = candidate
                    next_hop[i][j] = next_hop[i][k]

    return dist, next_hop


def floyd_warshall(graph: Graph) -> List[List[Optional[Weight]]]:
    """
    Floyd-Warshall algorithm for all-pairs shortest paths.

    Handles negative edge weights but not negative cycles (distances are
    meaningless if a negative cycle exists).

    Args:
        graph: Graph to analyse.

    Returns:
        V x V matrix where ``dist[i][j]`` is the shortest distance from i to j,
        or None if j is unreachable from i. The diagonal is 0.

    Complexity: O(V^3) time, O(V^2) memory.

    Example:
        >>> G = Graph(3, directed=True)
        >>> G.add_edge(0, 1, 1.0)
        True
        >>> G.add_edge(1, 2, 2.0)
        True
        >>> floyd_warshall(G)[0]
        [0, 1.0, 3.0]
    """
    dist, _ = _floyd_warshall_tables(graph)
    return dist


def floyd_warshall_paths(
    graph: Graph,
) -> Tuple[List[List[Optional[Weight]]], Dict[Tuple[int, int], Optional[List[int]]]]:
    """
    Floyd-Warshall distances together with one shortest path per pair.

    Returns:
        Tuple of:
        - dist: Distance matrix as returned by ``floyd_warshall``
        - path: Dictionary mapping (i, j) -> list of vertices on a shortest
          path, or None if there is no path
    """
    dist, next_hop = _floyd_warshall_tables(graph)
    n = graph.vertex_count

    def reconstruct_path_internal(i: int, j: int) -> Optional[List[int]]:
        """Reconstruct path from i to j using next_hop."""
        if dist[i][j] is None:
            return None

        path_list = [i]
        current = i
        while current != j:
            current = next_hop[current][j]
            # Only happens with negative cycles
            if current is None or len(path_list) > n:
                return None
            path_list.append(current)
        return path_list

    path: Dict[Tuple[int, int], Optional[List[int]]] = {}
    for i in range(n):
        for j in range(n):
            path[(i, j)] = reconstruct_path_internal(i, j)

    return dist, path
