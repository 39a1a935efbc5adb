"""Unit tests for the navigation graph."""

import itertools

import pytest

from polynav.core.graph import Graph, GraphNode
from polynav.domain import Point, VisibilityPair


@pytest.fixture
def points():
    """Four corners of a unit square."""
    return [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]


@pytest.fixture
def star(points):
    """Graph with points[0] connected to the three other points."""
    graph = Graph()
    hub = graph.add_node_for(points[0])
    for point in points[1:]:
        graph.add_edge(hub, graph.add_node_for(point))
    return graph


class TestGraphNode:
    """Tests for GraphNode."""

    def test_defaults(self):
        node = GraphNode(Point(2, 3))
        assert node.g == 0.0
        assert node.h == 0.0
        assert node.f == 0.0
        assert node.parent is None
        assert node.handle is None

    def test_reads_coordinates_through(self):
        node = GraphNode(Point(2, 3))
        assert node.x == 2
        assert node.y == 3

    def test_reset(self):
        node = GraphNode(Point(0, 0), g=1.0, h=2.0, f=3.0, parent=7)
        node.reset()
        assert (node.g, node.h, node.f, node.parent) == (0.0, 0.0, 0.0, None)

    def test_identity_equality(self):
        p = Point(0, 0)
        assert GraphNode(p) != GraphNode(p)

    def test_non_geometric_payload(self):
        node = GraphNode("not a point")
        with pytest.raises(AttributeError):
            _ = node.x


class TestAddNode:
    """Tests for node creation and lookup."""

    def test_add_node_for_is_identity_stable(self, points):
        graph = Graph()
        first = graph.add_node_for(points[0])
        second = graph.add_node_for(points[0])
        assert first is second
        assert len(graph) == 1

    def test_equal_payloads_are_distinct_nodes(self):
        graph = Graph()
        a = graph.add_node_for(Point(1, 1))
        b = graph.add_node_for(Point(1, 1))
        assert a is not b
        assert len(graph) == 2

    def test_get_node_for(self, points):
        graph = Graph()
        node = graph.add_node_for(points[0])
        assert graph.get_node_for(points[0]) is node
        assert graph.get_node_for(points[1]) is None
        assert graph.get_node_for(Point(0, 0)) is None

    def test_add_node_returns_registered_node(self, points):
        graph = Graph()
        existing = graph.add_node_for(points[0])
        assert graph.add_node(GraphNode(points[0])) is existing

    def test_node_from_other_graph_left_untouched(self, points):
        first = Graph()
        a = first.add_node_for(points[0])
        b = first.add_node_for(points[1])
        first.add_edge(a, b)

        second = Graph(handles=iter(range(50, 100)))
        copy = second.add_node(a)

        assert copy is not a
        assert copy.data is a.data
        assert copy.handle == 50
        assert a.handle == 0
        assert a in first
        assert first.get_neighbours(a) == [b]
        assert first.remove_node(a) is True
        assert first.get_neighbours(b) == []

    def test_removed_node_re_added_as_fresh_node(self, points):
        graph = Graph()
        a = graph.add_node_for(points[0])
        graph.remove_node(a)

        fresh = graph.add_node(a)

        assert fresh is not a
        assert a.handle == 0
        assert fresh.handle == 1
        assert graph.get_node_for(points[0]) is fresh

    def test_handles_are_sequential_per_graph(self, points):
        g1 = Graph()
        g2 = Graph()
        assert [g1.add_node_for(p).handle for p in points] == [0, 1, 2, 3]
        assert g2.add_node_for(points[0]).handle == 0

    def test_injected_handle_sequence(self, points):
        graph = Graph(handles=itertools.count(100, 10))
        assert [graph.add_node_for(p).handle for p in points] == [100, 110, 120, 130]

    def test_node_lookup_by_handle(self, points):
        graph = Graph()
        node = graph.add_node_for(points[0])
        assert graph.node(node.handle) is node
        assert graph.node(None) is None
        assert graph.node(999) is None

    def test_nodes_in_handle_order(self, points):
        graph = Graph()
        created = [graph.add_node_for(p) for p in points]
        assert graph.nodes == created
        assert all(node in graph for node in created)


class TestEdges:
    """Tests for edge operations."""

    def test_add_edge_is_symmetric(self, points):
        graph = Graph()
        a, b = graph.add_node_for(points[0]), graph.add_node_for(points[1])
        graph.add_edge(a, b)
        assert graph.get_neighbours(a) == [b]
        assert graph.get_neighbours(b) == [a]
        assert graph.has_edge(a, b) and graph.has_edge(b, a)

    def test_add_edge_is_idempotent(self, points):
        graph = Graph()
        a, b = graph.add_node_for(points[0]), graph.add_node_for(points[1])
        graph.add_edge(a, b)
        graph.add_edge(a, b)
        graph.add_edge(b, a)
        assert graph.get_neighbours(a) == [b]
        assert graph.edge_count == 1

    def test_self_loop_ignored(self, points):
        graph = Graph()
        a = graph.add_node_for(points[0])
        graph.add_edge(a, a)
        assert graph.get_neighbours(a) == []
        assert graph.edge_count == 0

    def test_edge_to_foreign_node_ignored(self, points):
        graph = Graph()
        a = graph.add_node_for(points[0])
        stranger = GraphNode(points[1])
        graph.add_edge(a, stranger)
        assert graph.get_neighbours(a) == []
        assert stranger not in graph

    def test_remove_edge_keeps_symmetry(self, star, points):
        hub = star.get_node_for(points[0])
        leaf = star.get_node_for(points[1])

        assert star.remove_edge(leaf, hub) is True
        assert leaf not in star.get_neighbours(hub)
        assert hub not in star.get_neighbours(leaf)
        assert star.edge_count == 2

    def test_remove_missing_edge(self, star, points):
        a = star.get_node_for(points[1])
        b = star.get_node_for(points[2])
        assert star.remove_edge(a, b) is False

    def test_get_edges(self, star, points):
        edges = star.get_edges()
        assert len(edges) == 3
        assert all(a.handle < b.handle for a, b in edges)

    def test_neighbours_of_unknown_node(self):
        assert Graph().get_neighbours(GraphNode(Point(0, 0))) == []


class TestRemoveNode:
    """Tests for node removal."""

    def test_remove_hub(self, star, points):
        hub = star.get_node_for(points[0])
        leaves = [star.get_node_for(p) for p in points[1:]]

        assert star.remove_node(hub) is True

        for leaf in leaves:
            assert star.get_neighbours(leaf) == []
        assert star.get_neighbours(hub) == []
        assert star.get_node_for(points[0]) is None
        assert hub not in star
        assert len(star) == 3
        assert star.edge_count == 0

    def test_remove_twice(self, star, points):
        hub = star.get_node_for(points[0])
        assert star.remove_node(hub) is True
        assert star.remove_node(hub) is False

    def test_payload_can_be_re_added(self, star, points):
        hub = star.get_node_for(points[0])
        star.remove_node(hub)
        fresh = star.add_node_for(points[0])
        assert fresh is not hub
        assert fresh.handle != hub.handle

    def test_stale_node_cannot_gain_edges(self, star, points):
        hub = star.get_node_for(points[0])
        leaf = star.get_node_for(points[1])
        star.remove_node(hub)
        star.add_edge(hub, leaf)
        assert star.get_neighbours(leaf) == []


class TestSearchState:
    """Tests for scratch field handling."""

    def test_reset_search_state(self, star):
        for node in star:
            node.g, node.h, node.f, node.parent = 1.0, 1.0, 2.0, 0
        star.reset_search_state()
        assert all(node.f == 0.0 and node.parent is None for node in star)


class TestFromObjectEdgeList:
    """Tests for Graph.from_object_edge_list."""

    def test_builds_nodes_and_edges(self, points):
        edges = [(points[0], points[1]), (points[1], points[2]), (points[2], points[0])]
        graph = Graph.from_object_edge_list(edges)

        assert len(graph) == 3
        assert graph.edge_count == 3
        hub = graph.get_node_for(points[1])
        assert {id(n.data) for n in graph.get_neighbours(hub)} == {id(points[0]), id(points[2])}

    def test_accepts_visibility_pairs(self, points):
        pairs = [VisibilityPair(points[0], points[1]), VisibilityPair(points[0], points[3])]
        graph = Graph.from_object_edge_list(pairs)
        assert len(graph.get_neighbours(graph.get_node_for(points[0]))) == 2

    def test_injected_handles(self, points):
        graph = Graph.from_object_edge_list([(points[0], points[1])], handles=itertools.count(5))
        assert [node.handle for node in graph.nodes] == [5, 6]

    def test_duplicate_and_self_edges(self, points):
        edges = [(points[0], points[1]), (points[1], points[0]), (points[2], points[2])]
        graph = Graph.from_object_edge_list(edges)
        assert len(graph) == 3
        assert graph.edge_count == 1
