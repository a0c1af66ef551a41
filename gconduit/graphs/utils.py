"""
Utility functions for graph algorithms.

Provides helpers for edge listing, label indexing, path reconstruction and
dense numpy exports.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .core import Edge, Graph, Weight

Distances = Sequence[Optional[Weight]]
DistanceMatrix = Sequence[Sequence[Optional[Weight]]]


def sorted_edges(graph: Graph, ascending: bool = True) -> List[Edge]:
    """
    List every edge of the graph sorted by weight.

    Undirected edges appear once, as ``source < destination``. Ties are broken
    by ``(source, destination)`` for reproducibility.

    Args:
        graph: Graph to list.
        ascending: Sort lightest first if True, heaviest first otherwise.

    Returns:
        List of Edge values.

    Example:
        >>> G = Graph(3)
        >>> G.add_edge(0, 1, 5)
        True
        >>> G.add_edge(1, 2, 2)
        True
        >>> [e.as_tuple() for e in sorted_edges(G)]
        [(1, 2, 2), (0, 1, 5)]
    """
    return graph.sorted_edges(ascending=ascending)


def total_weight(edges: Iterable[Edge]) -> Weight:
    """Sum of the weights of ``edges`` (0 for an empty iterable)."""
    return sum(edge.weight for edge in edges)


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from nodes to indices 0..n-1.

    Nodes are sorted by string representation for deterministic ordering.

    Args:
        nodes: Iterable of hashable nodes.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'b'])
        >>> node_to_idx
        {'a': 0, 'b': 1, 'c': 2}
        >>> idx_to_node
        ['a', 'b', 'c']
    """
    sorted_nodes = sorted(set(nodes), key=lambda x: str(x))
    node_to_index = {node: idx for idx, node in enumerate(sorted_nodes)}
    return node_to_index, sorted_nodes


def graph_from_labeled_edges(
    edges: Iterable[Tuple[Hashable, Hashable, Weight]],
    directed: bool = False,
    weighted: bool = True,
    nodes: Iterable[Hashable] = (),
) -> Tuple[Graph, Dict[Hashable, int], List[Hashable]]:
    """
    Build an index-keyed Graph from edges between arbitrary labels.

    Labels are numbered with ``node_index_map`` so the same edge set always
    produces the same graph.

    Args:
        edges: Iterable of ``(label_u, label_v, weight)`` triples.
        directed: Whether the graph is directed.
        weighted: Whether weights are kept (otherwise stored as 1).
        nodes: Extra labels to include even if no edge touches them.

    Returns:
        Tuple of (graph, label_to_index, index_to_label).

    Raises:
        GraphArgumentError: If an edge is a self-loop.

    Example:
        >>> G, idx, labels = graph_from_labeled_edges([('1', '2', 3), ('1', '3', 1)])
        >>> labels
        ['1', '2', '3']
        >>> G.edge_weight(idx['1'], idx['3'])
        1
    """
    edge_list = list(edges)
    labels = list(nodes)
    for u, v, _ in edge_list:
        labels.append(u)
        labels.append(v)

    label_to_index, index_to_label = node_index_map(labels)
    graph = Graph(len(index_to_label), directed=directed, weighted=weighted)
    for u, v, weight in edge_list:
        graph.add_edge(label_to_index[u], label_to_index[v], weight)

    return graph, label_to_index, index_to_label


def reconstruct_path(
    parent: Sequence[Optional[int]], source: int, target: int
) -> Optional[List[int]]:
    """
    Reconstruct the path from ``source`` to ``target`` using a parent vector.

    The parent vector should come from ``bfs`` or ``dijkstra``, where
    ``parent[v]`` is the previous vertex on the shortest path and None for
    the source and for unreachable vertices.

    Args:
        parent: Parent vector indexed by vertex.
        source: Vertex the search started from.
        target: Vertex to reconstruct the path to.

    Returns:
        List of vertices from source to target (inclusive), or None if
        target is unreachable.

    Example:
        >>> reconstruct_path([None, 0, 1], 0, 2)
        [0, 1, 2]
        >>> reconstruct_path([None, 0, None], 0, 2) is None
        True
    """
    if target == source:
        return [source]
    if parent[target] is None:
        return None

    path = [target]
    current = target
    visited = {target}
    while current != source:
        current = parent[current]
        # Broken or cyclic parent vectors cannot reach the source
        if current is None or current in visited:
            return None
        visited.add(current)
        path.append(current)

    path.reverse()
    return path


def distances_to_array(distances: Union[Distances, DistanceMatrix]) -> np.ndarray:
    """
    Convert a distance vector or matrix to a float array.

    Unreachable entries (None) become ``np.inf``.

    Args:
        distances: Output of ``bfs``/``dijkstra`` (vector) or
            ``floyd_warshall`` (matrix).

    Returns:
        numpy array of shape (n,) or (n, n). Empty input gives shape (0, 0).

    Example:
        >>> distances_to_array([0, 2, None])
        array([ 0.,  2., inf])
    """
    def convert(value: Optional[Weight]) -> float:
        return np.inf if value is None else float(value)

    if not len(distances):
        # Only floyd_warshall can produce an empty result, for a graph with no vertices
        return np.empty((0, 0), dtype=float)
    if isinstance(distances[0], (list, tuple)):
        return np.array([[convert(x) for x in row] for row in distances], dtype=float)
    return np.array([convert(x) for x in distances], dtype=float)


def adjacency_matrix(graph: Graph, missing: float = 0.0) -> np.ndarray:
    """
    Dense weight matrix ``W`` with ``W[u, v]`` the weight stored for ``u -> v``.

    Args:
        graph: Graph to export.
        missing: Value used where no edge is stored (default 0.0; pass
            ``np.inf`` for a distance-style matrix).

    Returns:
        (n, n) numpy array in vertex order.
    """
    n = graph.vertex_count
    W = np.full((n, n), missing, dtype=float)
    for u in graph.vertices():
        for v, weight in graph.neighbors(u):
            W[u, v] = weight
    return W
