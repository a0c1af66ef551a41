"""
Core graph data structures.

Provides the index-keyed Graph with per-vertex neighbor sequences kept sorted
by neighbor id, together with the Edge and AdjacencyEntry value types.
Vertices are the integers ``0 .. vertex_count - 1`` and the vertex set is
fixed at construction; only edges are ever added or removed.
"""

from __future__ import annotations

import bisect
import functools
import operator
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Tuple, Union

from ..diagnostics import assert_sorted_adjacency, assert_symmetric, is_debug_enabled

Weight = Union[int, float]


class GraphArgumentError(ValueError):
    """Raised when a graph operation receives an invalid vertex or edge argument."""


@functools.total_ordering
@dataclass(frozen=True)
class Edge:
    """
    Immutable edge triple ``(source, destination, weight)``.

    Edges order by weight first and then by endpoints, so ``sorted`` on a list
    of edges is deterministic even when weights tie.
    """

    source: int
    destination: int
    weight: Weight = 1

    def sort_key(self) -> Tuple[Weight, int, int]:
        return (self.weight, self.source, self.destination)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def reversed(self) -> "Edge":
        """Return the same edge with its endpoints swapped."""
        return Edge(self.destination, self.source, self.weight)

    def as_tuple(self) -> Tuple[int, int, Weight]:
        return (self.source, self.destination, self.weight)


class AdjacencyEntry(NamedTuple):
    """One neighbor record stored in a vertex's neighbor sequence."""

    vertex: int
    weight: Weight


def _entry_vertex(entry: AdjacencyEntry) -> int:
    return entry.vertex


def _as_index(value: object) -> Optional[int]:
    """Return ``value`` as a plain int if it is integral (numpy ints included), else None."""
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


class Graph:
    """
    Finite graph over the vertices ``0 .. vertex_count - 1``.

    Each vertex owns a list of AdjacencyEntry records sorted by neighbor id
    with no duplicate neighbor. Undirected edges are stored as two entries,
    one per endpoint, and counted once in ``edge_count``.

    Attributes:
        vertex_count: Number of vertices, fixed at construction.
        directed: If True, ``add_edge`` stores a single entry.
        weighted: If False, every stored weight is forced to 1.

    Complexity:
        - add_edge / remove_edge: O(deg(u) + deg(v)) for the sorted insert
        - edge_exists / edge_weight: O(log deg(u))
        - neighbors: O(deg(u))
        - edges: O(V + E)
    """

    def __init__(self, vertex_count: int, directed: bool = False, weighted: bool = True):
        """
        Initialize a graph with no edges.

        Args:
            vertex_count: Number of vertices (>= 0).
            directed: If True, graph is directed; otherwise undirected.
            weighted: If False, edge weights are ignored and stored as 1.

        Raises:
            GraphArgumentError: If vertex_count is not a non-negative integer.
        """
        count = _as_index(vertex_count)
        if count is None or count < 0:
            raise GraphArgumentError(
                f"vertex_count must be a non-negative integer, got {vertex_count!r}"
            )
        self._vertex_count = count
        self._directed = bool(directed)
        self._weighted = bool(weighted)
        self._adj: List[List[AdjacencyEntry]] = [[] for _ in range(count)]
        self._edge_count = 0
        # Set once add_directed_edge stores a one-way entry in an undirected graph.
        self._one_way_entries = False

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    @property
    def edge_count(self) -> int:
        """Number of logically distinct edges."""
        return self._edge_count

    def __repr__(self) -> str:
        return (
            f"Graph(vertex_count={self._vertex_count}, directed={self._directed}, "
            f"weighted={self._weighted}, edge_count={self._edge_count})"
        )

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------

    def has_vertex(self, u: int) -> bool:
        index = _as_index(u)
        return index is not None and 0 <= index < self._vertex_count

    def check_vertex(self, u: int, role: str = "vertex") -> int:
        """
        Raise GraphArgumentError unless ``u`` is a vertex of this graph.

        Args:
            u: Vertex id to validate. Any integral type is accepted.
            role: Name used in the error message (e.g. "source").

        Returns:
            The vertex id as a plain int.
        """
        if not self.has_vertex(u):
            raise GraphArgumentError(
                f"{role} {u!r} is out of range [0, {self._vertex_count})"
            )
        return operator.index(u)

    def _check_pair(self, u: int, v: int) -> Tuple[int, int]:
        u = self.check_vertex(u, "source")
        v = self.check_vertex(v, "destination")
        if u == v:
            raise GraphArgumentError(f"self-loop {u} -> {v} is not allowed")
        return u, v

    def _resolve_weight(self, weight: Weight) -> Weight:
        return weight if self._weighted else 1

    # ------------------------------------------------------------------
    # Raw adjacency operations
    # ------------------------------------------------------------------

    def _find(self, u: int, v: int) -> int:
        """Return the index of ``v`` in u's sequence, or -1."""
        entries = self._adj[u]
        i = bisect.bisect_left(entries, v, key=_entry_vertex)
        if i < len(entries) and entries[i].vertex == v:
            return i
        return -1

    def _insert(self, u: int, v: int, weight: Weight, replace: bool = False) -> bool:
        entries = self._adj[u]
        i = bisect.bisect_left(entries, v, key=_entry_vertex)
        if i < len(entries) and entries[i].vertex == v:
            if replace:
                entries[i] = AdjacencyEntry(v, weight)
            return False
        entries.insert(i, AdjacencyEntry(v, weight))
        return True

    def _delete(self, u: int, v: int) -> bool:
        i = self._find(u, v)
        if i < 0:
            return False
        del self._adj[u][i]
        return True

    def _verify(self) -> None:
        assert_sorted_adjacency(self)
        if not self._directed and not self._one_way_entries:
            assert_symmetric(self)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_edge(self, u: int, v: int, weight: Weight = 1) -> bool:
        """
        Add an edge ``u -> v`` (and ``v -> u`` when undirected).

        Args:
            u: Source vertex.
            v: Destination vertex.
            weight: Edge weight; ignored (stored as 1) for unweighted graphs.

        Returns:
            True if the edge was inserted, False if ``u -> v`` already existed.

        Raises:
            GraphArgumentError: If a vertex is out of range or ``u == v``.
        """
        u, v = self._check_pair(u, v)
        weight = self._resolve_weight(weight)

        if not self._insert(u, v, weight):
            return False
        # Completing a one-way entry v -> u does not add a new logical edge
        if self._directed or self._insert(v, u, weight, replace=True):
            self._edge_count += 1

        if is_debug_enabled():
            self._verify()
        return True

    def add_directed_edge(self, u: int, v: int, weight: Weight = 1) -> bool:
        """
        Add a single entry ``u -> v`` regardless of the ``directed`` flag.

        Returns:
            True if the entry was inserted, False if it already existed.

        Raises:
            GraphArgumentError: If a vertex is out of range or ``u == v``.
        """
        u, v = self._check_pair(u, v)
        weight = self._resolve_weight(weight)

        if not self._insert(u, v, weight):
            return False
        if self._directed:
            self._edge_count += 1
        elif self._find(v, u) < 0:
            self._one_way_entries = True
            self._edge_count += 1

        if is_debug_enabled():
            self._verify()
        return True

    def remove_edge(self, u: int, v: int) -> bool:
        """
        Remove the edge ``u -> v`` (and ``v -> u`` when undirected).

        Returns:
            True if the edge existed and was removed, False otherwise.

        Raises:
            GraphArgumentError: If a vertex is out of range or ``u == v``.
        """
        u, v = self._check_pair(u, v)

        if not self._delete(u, v):
            return False
        if not self._directed:
            self._delete(v, u)
        self._edge_count -= 1

        if is_debug_enabled():
            self._verify()
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def edge_exists(self, u: int, v: int) -> bool:
        """
        Return True if an entry ``u -> v`` is stored.

        Raises:
            GraphArgumentError: If a vertex is out of range.
        """
        u = self.check_vertex(u, "source")
        v = self.check_vertex(v, "destination")
        return self._find(u, v) >= 0

    def edge_weight(self, u: int, v: int) -> Optional[Weight]:
        """Return the weight stored for ``u -> v``, or None if absent."""
        u = self.check_vertex(u, "source")
        v = self.check_vertex(v, "destination")
        i = self._find(u, v)
        return self._adj[u][i].weight if i >= 0 else None

    def neighbors(self, u: int) -> Tuple[AdjacencyEntry, ...]:
        """
        Return the neighbor entries of ``u`` sorted by neighbor id.

        The returned tuple is a snapshot; mutating the graph afterwards does
        not change it.
        """
        u = self.check_vertex(u)
        return tuple(self._adj[u])

    def degree(self, u: int) -> int:
        """Number of entries stored for ``u`` (out-degree when directed)."""
        u = self.check_vertex(u)
        return len(self._adj[u])

    def vertices(self) -> range:
        return range(self._vertex_count)

    def edges(self) -> List[Edge]:
        """
        Return all edges ordered by ``(source, destination)``.

        For undirected graphs each edge appears once with ``source < destination``.
        A one-way entry stored by ``add_directed_edge`` is reported as is.
        """
        result: List[Edge] = []
        for u, entries in enumerate(self._adj):
            for v, weight in entries:
                if self._directed or u < v or self._find(v, u) < 0:
                    result.append(Edge(u, v, weight))
        return result

    def sorted_edges(self, ascending: bool = True) -> List[Edge]:
        """
        Return ``edges()`` sorted by weight.

        Ties are broken by ``(source, destination)`` ascending in both
        directions, so the order is reproducible.
        """
        if ascending:
            return sorted(self.edges())
        return sorted(self.edges(), key=lambda e: (-e.weight, e.source, e.destination))

    def adjacency_list(self) -> Dict[int, List[int]]:
        """Map every vertex to the ids of its neighbors, in ascending order."""
        return {u: [entry.vertex for entry in entries] for u, entries in enumerate(self._adj)}

    def copy(self) -> "Graph":
        """Return an independent copy with the same flags and edges."""
        clone = Graph(self._vertex_count, directed=self._directed, weighted=self._weighted)
        clone._adj = [list(entries) for entries in self._adj]
        clone._edge_count = self._edge_count
        clone._one_way_entries = self._one_way_entries
        return clone
