"""Unit tests for ear-reduction triangulation."""

import math

import pytest

from polynav.config import TriangulationConfig
from polynav.core.geometry import signed_area, triangle_area
from polynav.core.triangulation import Triangulator, triangulate, triangulation_edges
from polynav.domain import Point, Polygon


@pytest.fixture
def notched():
    """Counter-clockwise 10x10 square with a V notch cut into the top edge."""
    return [Point(0, 0), Point(10, 0), Point(10, 10), Point(5, 5), Point(0, 10)]


@pytest.fixture
def comb():
    """Counter-clockwise 3x3 square with unit notches in the bottom and top edges."""
    return [
        Point(0, 0), Point(1, 0), Point(1, 1), Point(2, 1),
        Point(2, 0), Point(3, 0), Point(3, 3), Point(2, 3),
        Point(2, 2), Point(1, 2), Point(1, 3), Point(0, 3),
    ]


def regular_polygon(n: int, radius: float = 10.0) -> list[Point]:
    """Counter-clockwise regular polygon centred on the origin."""
    return [
        Point(radius * math.cos(2 * math.pi * k / n), radius * math.sin(2 * math.pi * k / n))
        for k in range(n)
    ]


def assert_valid_triangulation(points: list[Point], triangles) -> None:
    """Check count, coverage, non-degeneracy and total area."""
    assert len(triangles) == len(points) - 2

    used = {id(p) for triangle in triangles for p in triangle}
    assert used == {id(p) for p in points}

    for triangle in triangles:
        assert triangle_area(*triangle) > 1e-9

    total = sum(triangle_area(*triangle) for triangle in triangles)
    assert total == pytest.approx(abs(signed_area(points)))


class TestTriangulate:
    """Tests for triangulate()."""

    def test_notched_polygon(self, notched):
        triangles = triangulate(notched)
        assert_valid_triangulation(notched, triangles)
        assert [triangle_area(*t) for t in triangles] == pytest.approx([25.0, 25.0, 25.0])

    def test_notched_polygon_clockwise(self, notched):
        clockwise = notched[::-1]
        assert_valid_triangulation(clockwise, triangulate(clockwise))

    def test_first_ear_is_smallest_angle(self, notched):
        first = triangulate(notched)[0]
        assert first == (notched[1], notched[2], notched[3])

    def test_square(self):
        square = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]
        assert_valid_triangulation(square, triangulate(square))

    def test_triangle_is_returned_unchanged(self):
        points = [Point(0, 0), Point(4, 0), Point(0, 4)]
        triangles = triangulate(points)
        assert len(triangles) == 1
        assert set(map(id, triangles[0])) == set(map(id, points))

    def test_comb_polygon(self, comb):
        assert_valid_triangulation(comb, triangulate(comb))

    def test_comb_polygon_clockwise(self, comb):
        clockwise = comb[::-1]
        assert_valid_triangulation(clockwise, triangulate(clockwise))

    @pytest.mark.parametrize("n", [5, 8, 13])
    def test_regular_polygons(self, n):
        points = regular_polygon(n)
        assert_valid_triangulation(points, triangulate(points))

    def test_fewer_than_three_vertices(self):
        assert triangulate([]) == []
        assert triangulate([Point(0, 0), Point(1, 1)]) == []

    def test_closing_vertex_is_dropped(self):
        points = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(0, 0)]
        assert len(triangulate(points)) == 2

    def test_accepts_polygon_instance(self, notched):
        assert len(triangulate(Polygon(points=notched))) == 3

    def test_without_ear_check_still_terminates(self, comb):
        triangles = triangulate(comb, check_ears=False)
        assert len(triangles) == len(comb) - 2


class TestTriangulator:
    """Tests for the Triangulator class."""

    def test_default_config(self):
        assert Triangulator().config.check_ears is True

    def test_custom_config(self):
        triangulator = Triangulator(TriangulationConfig(check_ears=False))
        assert triangulator.config.check_ears is False

    def test_winding_from_rightmost_vertex(self, notched):
        triangulator = Triangulator()
        assert triangulator._is_clockwise(list(notched)) is False
        assert triangulator._is_clockwise(notched[::-1]) is True

    def test_reflex_vertex_reads_above_180(self, notched):
        angle = Triangulator._ear_angle(notched[2], notched[3], notched[4], clockwise=False)
        assert angle == pytest.approx(270.0)

    def test_convex_vertex_angle(self, notched):
        angle = Triangulator._ear_angle(notched[1], notched[2], notched[3], clockwise=False)
        assert angle == pytest.approx(45.0)


class TestTriangulationEdges:
    """Tests for triangulation_edges()."""

    @pytest.mark.parametrize("n", [4, 6, 9])
    def test_convex_polygon_diagonals(self, n):
        points = regular_polygon(n)
        triangles = triangulate(points)

        assert len(triangulation_edges(triangles, shared_only=True)) == n - 3
        assert len(triangulation_edges(triangles)) == 2 * n - 3

    def test_edges_use_original_points(self, notched):
        edges = triangulation_edges(triangulate(notched))
        ids = {id(p) for p in notched}
        assert all(id(a) in ids and id(b) in ids for a, b in edges)

    def test_single_triangle_has_no_diagonals(self):
        points = [Point(0, 0), Point(4, 0), Point(0, 4)]
        triangles = triangulate(points)
        assert triangulation_edges(triangles, shared_only=True) == []
        assert len(triangulation_edges(triangles)) == 3
