"""Route planning pipeline.

This module chains the geometry, visibility, graph and search layers into
the typical workflow:

1. Validate the polygon and the route endpoints
2. Select candidate points (endpoints plus concave or all vertices)
3. Compute all mutually visible candidate pairs
4. Project the pairs onto a navigation graph
5. Run A* from start to goal

Key classes:
- NavigationPlan: Everything one planning run produced
- NavigationPlanner: Runs the pipeline with the configured settings
"""

import time
from dataclasses import dataclass, field

import structlog

from polynav.config import PolynavSettings, get_default_settings
from polynav.core.geometry import get_concave_vertices, point_in_polygon
from polynav.core.graph import Graph
from polynav.core.search import astar_path, path_length
from polynav.core.triangulation import Triangulator
from polynav.core.visibility import VisibilityGraphBuilder
from polynav.domain import Point, Polygon, Triangle, VisibilityPair
from polynav.exceptions import PointOutsidePolygonError
from polynav.utils import PlanningLogger, PlanningStats


@dataclass
class NavigationPlan:
    """Result of planning a route through a polygon.

    Attributes:
        start: Route start point
        goal: Route goal point
        path: Points from start to goal (empty when unreachable)
        candidates: Points considered for the visibility graph
        visibility_pairs: Mutually visible candidate pairs
        graph: Navigation graph the search ran over
        stats: Planning statistics
    """

    start: Point
    goal: Point
    path: list[Point]
    candidates: list[Point]
    visibility_pairs: list[VisibilityPair]
    graph: Graph
    stats: PlanningStats = field(default_factory=PlanningStats)

    @property
    def found(self) -> bool:
        """Whether a path from start to goal exists."""
        return len(self.path) > 0

    @property
    def distance(self) -> float:
        """Length of the path (0.0 when not found)."""
        return path_length(self.path)


class NavigationPlanner:
    """Plans shortest routes inside a polygon.

    Example:
        planner = NavigationPlanner()
        plan = planner.plan(polygon, start=Point(0.5, 2.85), goal=Point(2.05, 2.75))
        for point in plan.path:
            print(point.x, point.y)
    """

    def __init__(
        self,
        settings: PolynavSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the planner.

        Args:
            settings: polynav settings (defaults if None)
            logger: structlog logger (module default if None)
        """
        self.settings = settings if settings is not None else get_default_settings()
        self.logger = logger

    def _check_endpoint(self, label: str, point: Point, polygon: Polygon) -> None:
        if not point_in_polygon(point, polygon):
            raise PointOutsidePolygonError(label, point.x, point.y)

    def plan(self, polygon: Polygon, start: Point, goal: Point) -> NavigationPlan:
        """Plan a route from start to goal.

        Args:
            polygon: The bounding polygon
            start: Route start
            goal: Route goal

        Returns:
            NavigationPlan (with an empty path if the goal is unreachable)

        Raises:
            InvalidPolygonError: If the polygon has fewer than 3 vertices
            PointOutsidePolygonError: If an endpoint is outside the polygon
                and endpoint checking is enabled
        """
        polygon.validate()
        if self.settings.planning.require_inside_endpoints:
            self._check_endpoint("start", start, polygon)
            self._check_endpoint("goal", goal, polygon)

        planning_logger = PlanningLogger(self.logger)
        stats = planning_logger.stats
        stats.start_time = time.time()

        planning_logger.log_polygon(len(polygon), polygon.winding.name.lower(), polygon.area)

        builder = VisibilityGraphBuilder(
            polygon,
            config=self.settings.visibility,
            tolerance=self.settings.geometry.point_tolerance,
        )
        candidates = builder.candidates(start, goal)
        planning_logger.log_candidates(len(candidates), len(get_concave_vertices(polygon)))

        visibility_start = time.time()
        pairs = builder.build_visibility_list(start, goal)
        planning_logger.log_visibility(len(pairs), (time.time() - visibility_start) * 1000)

        graph = builder.graph_from_pairs(candidates, pairs)
        planning_logger.log_graph(len(graph), graph.edge_count)

        start_node = graph.get_node_for(start)
        goal_node = graph.get_node_for(goal)
        path = [node.data for node in astar_path(graph, start_node, goal_node)]

        if path:
            planning_logger.log_path(len(path), path_length(path))
        else:
            planning_logger.log_no_path("goal not reachable through visible pairs")

        stats.end_time = time.time()
        return NavigationPlan(
            start=start,
            goal=goal,
            path=path,
            candidates=candidates,
            visibility_pairs=pairs,
            graph=graph,
            stats=stats,
        )

    def triangulate(self, polygon: Polygon) -> list[Triangle]:
        """Triangulate a polygon with the configured settings.

        Args:
            polygon: The polygon to triangulate

        Returns:
            len(polygon) - 2 triangles

        Raises:
            InvalidPolygonError: If the polygon has fewer than 3 vertices
        """
        polygon.validate()
        planning_logger = PlanningLogger(self.logger)

        start_time = time.time()
        triangulator = Triangulator(
            config=self.settings.triangulation,
            tolerance=self.settings.geometry.point_tolerance,
        )
        triangles = triangulator.triangulate(polygon)
        planning_logger.log_triangulation(
            len(polygon), len(triangles), (time.time() - start_time) * 1000
        )
        return triangles
