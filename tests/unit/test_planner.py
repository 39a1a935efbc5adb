"""Unit tests for NavigationPlanner and settings."""

import math
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from polynav.config import (
    CandidateMode,
    GeometryConfig,
    PlanningConfig,
    PolynavSettings,
    TriangulationConfig,
    VisibilityConfig,
    get_default_settings,
)
from polynav.core.planner import NavigationPlan, NavigationPlanner
from polynav.core.visibility import VisibilityGraphBuilder
from polynav.domain import Point, Polygon
from polynav.exceptions import InvalidPolygonError, PointOutsidePolygonError

COMB_ROUTE_LENGTH = 1.0 + 2 * math.sqrt(0.625)


@pytest.fixture
def comb():
    """Counter-clockwise 3x3 square with unit notches in the bottom and top edges."""
    return Polygon(
        points=[
            Point(0, 0), Point(1, 0), Point(1, 1), Point(2, 1),
            Point(2, 0), Point(3, 0), Point(3, 3), Point(2, 3),
            Point(2, 2), Point(1, 2), Point(1, 3), Point(0, 3),
        ]
    )


@pytest.fixture
def square():
    """Counter-clockwise 4x4 square."""
    return Polygon(points=[Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)])


@pytest.fixture
def mock_logger():
    """Structlog stand-in recording every call."""
    return MagicMock()


class TestSettings:
    """Tests for configuration models."""

    def test_defaults(self):
        settings = get_default_settings()
        assert settings.geometry.point_tolerance == 1e-6
        assert settings.visibility.candidate_mode is CandidateMode.CONCAVE
        assert settings.visibility.interior_only is True
        assert settings.triangulation.check_ears is True
        assert settings.planning.require_inside_endpoints is True
        assert settings.logging.log_file is None

    def test_candidate_mode_from_string(self):
        config = VisibilityConfig(candidate_mode="all_vertices")
        assert config.candidate_mode is CandidateMode.ALL_VERTICES

    def test_tolerance_must_be_positive(self):
        with pytest.raises(ValidationError):
            GeometryConfig(point_tolerance=0.0)

    def test_invalid_candidate_mode(self):
        with pytest.raises(ValidationError):
            VisibilityConfig(candidate_mode="some")


class TestPlan:
    """Tests for NavigationPlanner.plan."""

    def test_comb_route(self, comb, mock_logger):
        start, goal = Point(0.75, 2.75), Point(2.25, 2.75)
        plan = NavigationPlanner(logger=mock_logger).plan(comb, start, goal)

        assert isinstance(plan, NavigationPlan)
        assert plan.found is True
        assert plan.path == [start, Point(1, 2), Point(2, 2), goal]
        assert plan.path[0] is start
        assert plan.path[-1] is goal
        assert plan.distance == pytest.approx(COMB_ROUTE_LENGTH)

    def test_comb_candidates(self, comb, mock_logger):
        start, goal = Point(0.75, 2.75), Point(2.25, 2.75)
        plan = NavigationPlanner(logger=mock_logger).plan(comb, start, goal)

        assert plan.candidates == [start, Point(1, 1), Point(2, 1), Point(2, 2), Point(1, 2), goal]
        assert len(plan.graph) == 6

    def test_all_vertices_gives_same_length(self, comb, mock_logger):
        settings = PolynavSettings(
            visibility=VisibilityConfig(candidate_mode=CandidateMode.ALL_VERTICES)
        )
        plan = NavigationPlanner(settings, logger=mock_logger).plan(
            comb, Point(0.75, 2.75), Point(2.25, 2.75)
        )
        assert len(plan.candidates) == 14
        assert plan.distance == pytest.approx(COMB_ROUTE_LENGTH)

    def test_direct_line_of_sight(self, square, mock_logger):
        start, goal = Point(1, 1), Point(3, 3)
        plan = NavigationPlanner(logger=mock_logger).plan(square, start, goal)

        assert plan.path == [start, goal]
        assert plan.distance == pytest.approx(math.sqrt(8))

    def test_stats(self, comb, mock_logger):
        plan = NavigationPlanner(logger=mock_logger).plan(
            comb, Point(0.75, 2.75), Point(2.25, 2.75)
        )

        assert plan.stats.vertex_count == 12
        assert plan.stats.candidate_count == 6
        assert plan.stats.visible_pairs == len(plan.visibility_pairs)
        assert plan.stats.graph_nodes == 6
        assert plan.stats.path_nodes == 4
        assert plan.stats.path_found is True
        assert plan.stats.duration_seconds >= 0.0

    def test_logs_path(self, comb, mock_logger):
        NavigationPlanner(logger=mock_logger).plan(comb, Point(0.75, 2.75), Point(2.25, 2.75))

        messages = [c.args[0] for c in mock_logger.info.call_args_list]
        assert "Visibility computed" in messages
        assert "Path found" in messages
        mock_logger.warning.assert_not_called()

    def test_matches_visibility_builder(self, comb, mock_logger):
        start, goal = Point(0.75, 2.75), Point(2.25, 2.75)
        plan = NavigationPlanner(logger=mock_logger).plan(comb, start, goal)
        builder = VisibilityGraphBuilder(comb)

        assert plan.visibility_pairs == builder.build_visibility_list(start, goal)
        assert len(plan.graph) == len(builder.build_visibility_graph(start, goal))
        assert plan.graph.edge_count == len(plan.visibility_pairs)

    def test_start_is_goal(self, comb, mock_logger):
        spot = Point(0.75, 2.75)
        plan = NavigationPlanner(logger=mock_logger).plan(comb, spot, spot)

        assert plan.path == [spot]
        assert plan.distance == 0.0
        assert len(plan.candidates) == 5
        assert all(pair.p1 is not pair.p2 for pair in plan.visibility_pairs)

    def test_start_outside(self, comb, mock_logger):
        planner = NavigationPlanner(logger=mock_logger)
        with pytest.raises(PointOutsidePolygonError) as exc_info:
            planner.plan(comb, Point(1.5, 0.5), Point(2.25, 2.75))

        assert exc_info.value.label == "start"
        assert exc_info.value.x == 1.5

    def test_goal_outside(self, comb, mock_logger):
        planner = NavigationPlanner(logger=mock_logger)
        with pytest.raises(PointOutsidePolygonError) as exc_info:
            planner.plan(comb, Point(0.75, 2.75), Point(1.5, 2.5))
        assert exc_info.value.label == "goal"

    def test_unreachable_when_outside_allowed(self, comb, mock_logger):
        settings = PolynavSettings(planning=PlanningConfig(require_inside_endpoints=False))
        plan = NavigationPlanner(settings, logger=mock_logger).plan(
            comb, Point(1.5, 0.5), Point(2.25, 2.75)
        )

        assert plan.found is False
        assert plan.path == []
        assert plan.distance == 0.0
        assert plan.stats.path_found is False
        mock_logger.warning.assert_called_once()

    def test_invalid_polygon(self, mock_logger):
        polygon = Polygon(points=[Point(0, 0), Point(1, 0)])
        with pytest.raises(InvalidPolygonError):
            NavigationPlanner(logger=mock_logger).plan(polygon, Point(0, 0), Point(1, 0))


class TestPlannerTriangulate:
    """Tests for NavigationPlanner.triangulate."""

    def test_triangulate(self, comb, mock_logger):
        triangles = NavigationPlanner(logger=mock_logger).triangulate(comb)
        assert len(triangles) == 10
        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args.args[0] == "Polygon triangulated"

    def test_triangulate_without_ear_check(self, square, mock_logger):
        settings = PolynavSettings(triangulation=TriangulationConfig(check_ears=False))
        triangles = NavigationPlanner(settings, logger=mock_logger).triangulate(square)
        assert len(triangles) == 2

    def test_triangulate_invalid_polygon(self, mock_logger):
        with pytest.raises(InvalidPolygonError):
            NavigationPlanner(logger=mock_logger).triangulate(Polygon(points=[Point(0, 0)]))
