"""Tests for core graph data structures."""

import numpy as np
import pytest

from gconduit.graphs import AdjacencyEntry, Edge, Graph, GraphArgumentError


class TestEdge:
    """Tests for the Edge value type."""

    def test_edge_orders_by_weight(self):
        """Edges sort by weight before endpoints."""
        edges = [Edge(0, 1, 5), Edge(2, 3, 1), Edge(1, 2, 3)]
        assert [e.weight for e in sorted(edges)] == [1, 3, 5]

    def test_edge_tie_breaks_on_endpoints(self):
        """Equal weights sort by (source, destination)."""
        edges = [Edge(2, 3, 1), Edge(0, 4, 1), Edge(0, 2, 1)]
        assert [e.as_tuple() for e in sorted(edges)] == [(0, 2, 1), (0, 4, 1), (2, 3, 1)]

    def test_edge_is_immutable(self):
        """Edge fields cannot be reassigned."""
        edge = Edge(0, 1, 2)
        with pytest.raises(AttributeError):
            edge.weight = 3

    def test_edge_reversed(self):
        assert Edge(0, 1, 2).reversed() == Edge(1, 0, 2)

    def test_edge_full_ordering(self):
        """All rich comparisons follow the same weight-first order."""
        light, heavy = Edge(3, 4, 1), Edge(0, 1, 2)
        assert light < heavy and light <= heavy
        assert heavy > light and heavy >= light
        assert Edge(0, 1, 2) <= Edge(0, 1, 2)
        assert not Edge(0, 1, 2) > Edge(0, 1, 2)
        assert max([light, heavy]) == heavy


class TestGraphConstruction:
    """Tests for Graph construction."""

    def test_empty_graph(self):
        """A new graph has its vertices and no edges."""
        G = Graph(3)
        assert G.vertex_count == 3
        assert G.directed is False
        assert G.weighted is True
        assert G.edge_count == 0
        assert G.edges() == []
        assert list(G.vertices()) == [0, 1, 2]

    def test_zero_vertices(self):
        G = Graph(0)
        assert G.vertex_count == 0
        assert G.adjacency_list() == {}

    def test_numpy_integer_vertex_count(self):
        """numpy integers are accepted as the vertex count."""
        G = Graph(np.int64(3))
        assert G.vertex_count == 3
        assert type(G.vertex_count) is int

    @pytest.mark.parametrize("count", [-1, 2.5, "3", True])
    def test_invalid_vertex_count(self, count):
        """Negative or non-integer vertex counts are rejected."""
        with pytest.raises(GraphArgumentError):
            Graph(count)


class TestAddEdge:
    """Tests for add_edge / add_directed_edge."""

    def test_add_edge_undirected_is_symmetric(self):
        """An undirected edge is stored on both endpoints with the same weight."""
        G = Graph(3)
        assert G.add_edge(0, 2, 7) is True
        assert G.edge_exists(0, 2)
        assert G.edge_exists(2, 0)
        assert G.edge_weight(2, 0) == 7
        assert G.edge_count == 1

    def test_add_edge_directed_is_one_way(self):
        """A directed edge is stored only on its source."""
        G = Graph(3, directed=True)
        G.add_edge(0, 1, 4)
        assert G.edge_exists(0, 1)
        assert not G.edge_exists(1, 0)
        assert G.edge_count == 1

    def test_add_edge_duplicate_is_noop(self):
        """Adding an existing edge returns False and changes nothing."""
        G = Graph(3)
        assert G.add_edge(0, 1, 2) is True
        before = G.adjacency_list()
        assert G.add_edge(0, 1, 2) is False
        assert G.add_edge(1, 0, 9) is False
        assert G.edge_count == 1
        assert G.adjacency_list() == before
        assert G.edge_weight(0, 1) == 2

    def test_unweighted_graph_forces_unit_weight(self):
        """Weights passed to an unweighted graph are stored as 1."""
        G = Graph(2, weighted=False)
        G.add_edge(0, 1, 42)
        assert G.edge_weight(0, 1) == 1
        assert G.edge_weight(1, 0) == 1

    def test_self_loop_rejected(self):
        """add_edge(0, 0, 5) fails and leaves edge_count unchanged."""
        G = Graph(3)
        G.add_edge(1, 2, 1)
        with pytest.raises(GraphArgumentError, match="self-loop"):
            G.add_edge(0, 0, 5)
        assert G.edge_count == 1
        assert G.neighbors(0) == ()

    @pytest.mark.parametrize("u, v", [(-1, 0), (0, 3), (3, 0), (0, -2)])
    def test_out_of_range_rejected(self, u, v):
        """Vertices outside [0, n) are rejected without side effects."""
        G = Graph(3)
        with pytest.raises(GraphArgumentError, match="out of range"):
            G.add_edge(u, v, 1)
        assert G.edge_count == 0
        assert all(not G.neighbors(x) for x in G.vertices())

    def test_neighbors_sorted_by_id(self):
        """Neighbor sequences stay sorted regardless of insertion order."""
        G = Graph(5)
        for v in [4, 1, 3, 2]:
            G.add_edge(0, v, v * 10)
        assert [e.vertex for e in G.neighbors(0)] == [1, 2, 3, 4]
        assert G.neighbors(0)[0] == AdjacencyEntry(1, 10)

    def test_add_directed_edge_ignores_directed_flag(self):
        """add_directed_edge never stores the reverse entry."""
        G = Graph(3, directed=False)
        assert G.add_directed_edge(0, 1, 3) is True
        assert G.edge_exists(0, 1)
        assert not G.edge_exists(1, 0)
        assert G.edge_count == 1
        assert G.add_directed_edge(0, 1, 3) is False

    def test_add_edge_completes_one_way_entry(self):
        """Mirroring a one-way entry keeps the logical edge count at one."""
        G = Graph(3)
        G.add_directed_edge(0, 1, 3)
        assert G.add_edge(1, 0, 4) is True
        assert G.edge_weight(0, 1) == 4
        assert G.edge_weight(1, 0) == 4
        assert G.edge_count == 1
        assert len(G.edges()) == 1

    def test_numpy_integer_vertex_ids(self):
        """numpy integer ids are valid vertices and are stored as plain ints."""
        G = Graph(np.int64(4))
        ids = np.arange(4)
        assert G.add_edge(ids[0], ids[1], 2) is True
        assert G.add_edge(np.int32(1), np.int64(3), 5) is True
        assert G.edge_exists(np.int64(1), np.int64(0))
        assert G.edge_weight(ids[3], ids[1]) == 5
        assert [e.vertex for e in G.neighbors(np.int64(1))] == [0, 3]
        assert all(type(e.vertex) is int for e in G.neighbors(1))
        assert G.edges()[0].as_tuple() == (0, 1, 2)
        assert G.remove_edge(ids[1], ids[0]) is True
        with pytest.raises(GraphArgumentError, match="out of range"):
            G.add_edge(np.int64(0), np.int64(4))

    def test_add_directed_edge_validates(self):
        G = Graph(2)
        with pytest.raises(GraphArgumentError):
            G.add_directed_edge(1, 1)
        with pytest.raises(GraphArgumentError):
            G.add_directed_edge(0, 5)


class TestRemoveEdge:
    """Tests for remove_edge."""

    def test_remove_undirected_edge_both_sides(self):
        """Removing an undirected edge clears both endpoints."""
        G = Graph(3)
        G.add_edge(0, 1, 1)
        G.add_edge(1, 2, 1)
        assert G.remove_edge(1, 0) is True
        assert not G.edge_exists(0, 1)
        assert not G.edge_exists(1, 0)
        assert G.edge_count == 1

    def test_remove_missing_edge(self):
        """Removing an absent edge returns False."""
        G = Graph(3)
        assert G.remove_edge(0, 1) is False
        assert G.edge_count == 0

    def test_remove_directed_edge_keeps_reverse(self):
        G = Graph(2, directed=True)
        G.add_edge(0, 1, 1)
        G.add_edge(1, 0, 2)
        assert G.remove_edge(0, 1) is True
        assert G.edge_exists(1, 0)
        assert G.edge_count == 1

    def test_remove_invalid_arguments(self):
        G = Graph(2)
        with pytest.raises(GraphArgumentError):
            G.remove_edge(0, 0)
        with pytest.raises(GraphArgumentError):
            G.remove_edge(0, 2)

    def test_bridge_removal_clears_both_endpoints(self):
        """Removing a disconnecting edge leaves no trace on either endpoint."""
        G = Graph(4)
        G.add_edge(0, 1, 1)
        G.add_edge(1, 2, 1)
        G.add_edge(2, 3, 1)
        G.remove_edge(1, 2)
        assert not G.edge_exists(1, 2)
        assert not G.edge_exists(2, 1)


class TestQueries:
    """Tests for edge listing and copies."""

    def test_edge_exists_allows_same_vertex(self):
        """edge_exists is a plain query and accepts u == v."""
        G = Graph(2)
        assert G.edge_exists(1, 1) is False

    def test_edge_exists_bounds_checked(self):
        G = Graph(2)
        with pytest.raises(GraphArgumentError):
            G.edge_exists(0, 2)

    def test_edges_undirected_listed_once(self):
        """Undirected edges appear once with source < destination."""
        G = Graph(4)
        G.add_edge(3, 1, 2)
        G.add_edge(0, 2, 5)
        assert [e.as_tuple() for e in G.edges()] == [(0, 2, 5), (1, 3, 2)]

    def test_edges_directed_listed_as_stored(self):
        G = Graph(3, directed=True)
        G.add_edge(2, 0, 1)
        G.add_edge(0, 2, 4)
        assert [e.as_tuple() for e in G.edges()] == [(0, 2, 4), (2, 0, 1)]

    def test_edges_reports_one_way_entry_in_undirected_graph(self):
        G = Graph(3)
        G.add_directed_edge(2, 0, 6)
        assert [e.as_tuple() for e in G.edges()] == [(2, 0, 6)]

    def test_sorted_edges_both_directions(self):
        G = Graph(4)
        G.add_edge(0, 1, 4)
        G.add_edge(1, 2, 1)
        G.add_edge(2, 3, 4)
        G.add_edge(0, 3, 2)
        assert [e.as_tuple() for e in G.sorted_edges()] == [
            (1, 2, 1), (0, 3, 2), (0, 1, 4), (2, 3, 4)
        ]
        assert [e.as_tuple() for e in G.sorted_edges(ascending=False)] == [
            (0, 1, 4), (2, 3, 4), (0, 3, 2), (1, 2, 1)
        ]

    def test_adjacency_list(self):
        """Adjacency listing matches the undirected triangle example."""
        G = Graph(4)
        G.add_edge(1, 2, 3)
        G.add_edge(1, 3, 1)
        G.add_edge(3, 2, 5)
        assert G.adjacency_list() == {0: [], 1: [2, 3], 2: [1, 3], 3: [1, 2]}

    def test_adjacency_list_directed(self):
        G = Graph(4, directed=True)
        G.add_edge(1, 2, 3)
        G.add_edge(1, 3, 1)
        G.add_edge(3, 2, 5)
        assert G.adjacency_list() == {0: [], 1: [2, 3], 2: [], 3: [2]}

    def test_neighbors_is_snapshot(self):
        G = Graph(3)
        G.add_edge(0, 1, 1)
        snapshot = G.neighbors(0)
        G.add_edge(0, 2, 1)
        assert len(snapshot) == 1
        assert G.degree(0) == 2

    def test_copy_is_independent(self):
        """Mutating a copy leaves the original untouched."""
        G = Graph(3)
        G.add_edge(0, 1, 1)
        H = G.copy()
        H.add_edge(1, 2, 1)
        H.remove_edge(0, 1)
        assert G.edge_exists(0, 1)
        assert not G.edge_exists(1, 2)
        assert G.edge_count == 1
        assert H.edge_count == 1

    def test_repr(self):
        assert repr(Graph(2, directed=True)) == (
            "Graph(vertex_count=2, directed=True, weighted=True, edge_count=0)"
        )
