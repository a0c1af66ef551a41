"""
Minimum spanning tree algorithms: Kruskal, Prim and Reverse-Delete.

Kruskal uses the DisjointSet structure. Prim keeps a key/parent array and
selects the next vertex by linear scan. Reverse-Delete drops the heaviest
edges whose removal keeps their endpoints connected.

All three expect an undirected graph. On a disconnected graph Kruskal and
Reverse-Delete return a minimum spanning forest; Prim returns the tree of the
component containing its start vertex.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal and Prim).
    - Kruskal, J. B. "On the shortest spanning subtree of a graph and the
      traveling salesman problem" (1956), for the reverse-delete variant.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..diagnostics import assert_disjoint_set_consistent, is_debug_enabled
from ..logging import get_logger
from .core import Edge, Graph, Weight
from .traversal import is_reachable
from .union_find import DisjointSet
from .utils import total_weight

logger = get_logger(__name__)


@dataclass
class SpanningTree:
    """
    Result container shared by the spanning tree algorithms.

    Attributes:
        edges: Accepted edges, in the order the algorithm accepted them
            (ascending weight for Reverse-Delete).
        discarded: Edges Reverse-Delete removed, in removal order. Empty for
            Kruskal and Prim.
    """

    edges: List[Edge]
    discarded: List[Edge] = field(default_factory=list)

    @property
    def total_weight(self) -> Weight:
        return total_weight(self.edges)

    def __len__(self) -> int:
        return len(self.edges)

    def edge_set(self) -> set:
        """Accepted edges as a set of ``(source, destination, weight)`` tuples."""
        return {edge.as_tuple() for edge in self.edges}


def _warn_if_directed(graph: Graph, algorithm: str) -> None:
    if graph.directed:
        logger.warning("%s expects an undirected graph; result on a directed graph is undefined", algorithm)


def kruskal_mst(graph: Graph) -> SpanningTree:
    """
    Kruskal's algorithm for minimum spanning tree.

    Scans every edge in ascending weight order and keeps an edge when its
    endpoints are still in different sets. All edges are scanned, so a
    disconnected graph yields a forest.

    Args:
        graph: Undirected weighted graph.

    Returns:
        SpanningTree with edges in acceptance order.

    Complexity: O(E log E) for sorting plus near-constant union-find operations.

    Example:
        >>> G = Graph(4)
        >>> for u, v, w in [(1, 2, 3), (1, 3, 1), (2, 3, 5)]:
        ...     _ = G.add_edge(u, v, w)
        >>> kruskal_mst(G).edge_set() == {(1, 3, 1), (1, 2, 3)}
        True
    """
    _warn_if_directed(graph, "kruskal_mst")

    candidates = graph.sorted_edges(ascending=True)
    sets = DisjointSet(graph.vertices())
    accepted: List[Edge] = []

    for edge in candidates:
        if sets.union(edge.source, edge.destination):
            accepted.append(edge)

    if is_debug_enabled():
        assert_disjoint_set_consistent(sets)

    logger.debug(
        "kruskal_mst accepted %d of %d edges (%d components)",
        len(accepted), len(candidates), sets.set_count,
    )
    return SpanningTree(accepted)


def prim_mst(graph: Graph, start: int) -> SpanningTree:
    """
    Prim's algorithm for minimum spanning tree.

    Grows a single tree from ``start``, each round adding the excluded vertex
    with the cheapest connecting edge. Stops early when no excluded vertex can
    be connected, so only the start vertex's component is spanned.

    Args:
        graph: Undirected weighted graph.
        start: Vertex to grow the tree from.

    Returns:
        SpanningTree with edges ``(parent, vertex, weight)`` in the order the
        vertices joined the tree.

    Raises:
        GraphArgumentError: If start is not a vertex of the graph.

    Complexity: O(V^2 + E).
    """
    start = graph.check_vertex(start, "start")
    _warn_if_directed(graph, "prim_mst")

    n = graph.vertex_count
    key: List[Optional[Weight]] = [None] * n
    parent: List[Optional[int]] = [None] * n
    in_tree = [False] * n
    joined: List[int] = []

    def absorb(u: int) -> None:
        in_tree[u] = True
        for v, weight in graph.neighbors(u):
            if not in_tree[v] and (key[v] is None or weight < key[v]):
                key[v] = weight
                parent[v] = u

    absorb(start)

    for _ in range(n - 1):
        u = -1
        for candidate in range(n):
            if in_tree[candidate] or key[candidate] is None:
                continue
            if u < 0 or key[candidate] < key[u]:
                u = candidate

        if u < 0:
            break
        joined.append(u)
        absorb(u)

    edges: List[Edge] = []
    for v in joined:
        p = parent[v]
        # Look the weight up in the graph; storage may hold only one direction
        weight = graph.edge_weight(p, v)
        if weight is None:
            weight = graph.edge_weight(v, p)
        edges.append(Edge(p, v, weight))

    logger.debug("prim_mst from %d spanned %d of %d vertices", start, len(joined) + 1, n)
    return SpanningTree(edges)


def reverse_delete_mst(graph: Graph, in_place: bool = False) -> SpanningTree:
    """
    Reverse-Delete algorithm for minimum spanning tree.

    Visits edges in descending weight order and removes each one unless its
    endpoints become disconnected, in which case it is put back. On a
    disconnected graph the result is a minimum spanning forest.

    Args:
        graph: Undirected weighted graph.
        in_place: If True, the graph itself is pruned down to the returned
            edges. Otherwise the algorithm works on a copy and leaves the
            graph unchanged.

    Returns:
        SpanningTree with the remaining edges in ascending weight order and
        the removed edges, in removal order, as ``discarded``.

    Complexity: O(E * (V + E)), one reachability search per edge.

    Example:
        >>> G = Graph(4)
        >>> for u, v, w in [(1, 2, 3), (1, 3, 1), (2, 3, 5)]:
        ...     _ = G.add_edge(u, v, w)
        >>> tree = reverse_delete_mst(G)
        >>> tree.total_weight, [e.as_tuple() for e in tree.discarded]
        (4, [(2, 3, 5)])
    """
    _warn_if_directed(graph, "reverse_delete_mst")

    work = graph if in_place else graph.copy()
    discarded: List[Edge] = []

    for edge in work.sorted_edges(ascending=False):
        u, v = edge.source, edge.destination
        one_way = work.directed or not work.edge_exists(v, u)
        work.remove_edge(u, v)
        if is_reachable(work, u, v):
            discarded.append(edge)
        elif one_way:
            work.add_directed_edge(u, v, edge.weight)
        else:
            work.add_edge(u, v, edge.weight)

    remaining = work.sorted_edges(ascending=True)
    logger.debug(
        "reverse_delete_mst kept %d edges, discarded %d", len(remaining), len(discarded)
    )
    return SpanningTree(remaining, discarded)
