"""
Graph traversal algorithms: BFS and DFS.

Provides breadth-first shortest hop counts, depth-first visitation order and
the reachability checks used by Reverse-Delete. Neighbors are visited in
ascending id order for reproducible results.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import List, Optional, Tuple

from ..logging import get_logger
from .core import Graph
from .utils import reconstruct_path

logger = get_logger(__name__)


def bfs(graph: Graph, source: int) -> Tuple[List[Optional[int]], List[Optional[int]]]:
    """
    Breadth-first search from a source vertex.

    Every edge counts as one hop regardless of its stored weight; run it on
    logically unweighted graphs.

    Args:
        graph: Graph to traverse.
        source: Source vertex.

    Returns:
        Tuple of:
        - distance: List indexed by vertex with the hop count from source,
          or None if unreachable
        - parent: List indexed by vertex with the previous vertex on a
          shortest path (None for source/unreached)

    Raises:
        GraphArgumentError: If source is not a vertex of the graph.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = Graph(3, weighted=False)
        >>> G.add_edge(0, 1)
        True
        >>> G.add_edge(1, 2)
        True
        >>> bfs(G, 0)[0]
        [0, 1, 2]
    """
    source = graph.check_vertex(source, "source")

    if graph.weighted and any(e.weight != 1 for e in graph.edges()):
        logger.warning("bfs counts hops and ignores the non-unit weights of this graph")

    distance: List[Optional[int]] = [None] * graph.vertex_count
    parent: List[Optional[int]] = [None] * graph.vertex_count

    distance[source] = 0
    queue = deque([source])

    while queue:
        u = queue.popleft()
        for v, _ in graph.neighbors(u):
            # A vertex is enqueued only the first time it is discovered
            if distance[v] is None:
                distance[v] = distance[u] + 1
                parent[v] = u
                queue.append(v)

    return distance, parent


def bfs_path(graph: Graph, source: int, target: int) -> Optional[List[int]]:
    """
    Return a path with the fewest edges from source to target.

    Returns:
        List of vertices from source to target (inclusive), or None if no
        path exists.

    Raises:
        GraphArgumentError: If source or target is not a vertex of the graph.
    """
    target = graph.check_vertex(target, "target")
    _, parent = bfs(graph, source)
    return reconstruct_path(parent, source, target)


def dfs_order(graph: Graph, source: int) -> List[int]:
    """
    Depth-first pre-order from a source vertex (iterative, using a stack).

    Matches the visitation order of a recursive DFS that explores neighbors
    in ascending id order.

    Raises:
        GraphArgumentError: If source is not a vertex of the graph.

    Complexity: O(V + E).
    """
    source = graph.check_vertex(source, "source")

    preorder: List[int] = []
    visited = [False] * graph.vertex_count
    stack = [source]

    while stack:
        u = stack.pop()
        if visited[u]:
            continue
        visited[u] = True
        preorder.append(u)

        # Push in reverse so the smallest neighbor is explored first
        for v, _ in reversed(graph.neighbors(u)):
            if not visited[v]:
                stack.append(v)

    return preorder


def is_reachable(graph: Graph, source: int, target: int) -> bool:
    """
    Return True if target can be reached from source along stored entries.

    Stops as soon as target is found.

    Raises:
        GraphArgumentError: If source or target is not a vertex of the graph.
    """
    source = graph.check_vertex(source, "source")
    target = graph.check_vertex(target, "target")
    if source == target:
        return True

    visited = [False] * graph.vertex_count
    visited[source] = True
    stack = [source]
    while stack:
        u = stack.pop()
        for v, _ in graph.neighbors(u):
            if v == target:
                return True
            if not visited[v]:
                visited[v] = True
                stack.append(v)
    return False


def is_connected(graph: Graph) -> bool:
    """
    Return True if every vertex is reachable from vertex 0.

    For undirected graphs this is ordinary connectivity. A graph with zero or
    one vertex is connected.

    Complexity: O(V + E).
    """
    if graph.vertex_count <= 1:
        return True
    return len(dfs_order(graph, 0)) == graph.vertex_count


def connected_components(graph: Graph) -> List[List[int]]:
    """
    Split the vertices of an undirected graph into connected components.

    Components are listed by their smallest vertex, each sorted ascending.
    """
    seen = [False] * graph.vertex_count
    components: List[List[int]] = []
    for start in graph.vertices():
        if seen[start]:
            continue
        component = dfs_order(graph, start)
        for u in component:
            seen[u] = True
        components.append(sorted(component))
    return components
