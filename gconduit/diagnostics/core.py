"""Structural invariant checks for graphs and disjoint sets."""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, Optional, Tuple

if TYPE_CHECKING:
    from gconduit.graphs.core import Graph
    from gconduit.graphs.union_find import DisjointSet


def find_asymmetry(graph: Graph) -> Optional[Tuple[int, int, float]]:
    """
    Return the first stored entry ``(u, v, w)`` with no matching ``(v, u, w)``.

    Only meaningful for undirected graphs; directed graphs always yield None.
    Entries inserted with ``add_directed_edge`` on an undirected graph are
    reported as asymmetric.
    """
    if graph.directed:
        return None
    for u in range(graph.vertex_count):
        for entry in graph.neighbors(u):
            reverse = graph.edge_weight(entry.vertex, u)
            if reverse is None or reverse != entry.weight:
                return (u, entry.vertex, entry.weight)
    return None


def is_symmetric(graph: Graph) -> bool:
    """Check the undirected symmetry invariant."""
    return find_asymmetry(graph) is None


def assert_symmetric(graph: Graph) -> None:
    """
    Assert that every undirected edge is stored in both directions.

    Raises
    ------
    ValueError
        If some entry ``u -> v`` has no reverse entry of the same weight.
    """
    broken = find_asymmetry(graph)
    if broken is not None:
        u, v, w = broken
        raise ValueError(
            f"Adjacency is not symmetric: entry {u} -> {v} (weight {w}) "
            f"has no matching reverse entry."
        )


def assert_sorted_adjacency(graph: Graph) -> None:
    """
    Assert that every neighbor sequence is strictly increasing by vertex id.

    Strictly increasing also rules out duplicate entries and self-loops are
    checked separately.

    Raises
    ------
    ValueError
        If a sequence is out of order, holds a duplicate, or holds a self-loop.
    """
    for u in range(graph.vertex_count):
        previous = -1
        for entry in graph.neighbors(u):
            if entry.vertex == u:
                raise ValueError(f"Vertex {u} has a self-loop entry.")
            if entry.vertex <= previous:
                raise ValueError(
                    f"Neighbors of vertex {u} are not strictly sorted "
                    f"({previous} before {entry.vertex})."
                )
            previous = entry.vertex


def assert_disjoint_set_consistent(sets: DisjointSet) -> None:
    """
    Assert that parent links from every element terminate at a root.

    Walks the links without compressing them, so the structure is not
    modified by the check.

    Raises
    ------
    ValueError
        If a parent link points outside the structure, a walk revisits an
        element (cycle), or a rank is negative.
    """
    parent = sets.parent
    for element in parent:
        seen: set[Hashable] = set()
        current = element
        while parent[current] != current:
            if current in seen:
                raise ValueError(f"Parent links from {element!r} form a cycle.")
            seen.add(current)
            current = parent[current]
            if current not in parent:
                raise ValueError(f"Parent link of {element!r} leaves the structure.")
        if sets.rank[element] < 0:
            raise ValueError(f"Element {element!r} has negative rank.")
