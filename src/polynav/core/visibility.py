"""Visibility engine for points inside a polygon.

Two points see each other when the segment joining them crosses no edge of
the polygon. This module provides:
- can_see_each_other: the pairwise test
- find_visible_points: all mutually visible pairs from a candidate list
- VisibilityGraphBuilder: candidate selection plus graph construction

find_visible_points is O(k^2 * n) for k candidates and n polygon edges.
Callers with many candidates should pre-filter them, typically down to the
concave vertices, which are the only polygon vertices a shortest path can
bend around.
"""

import logging
from collections.abc import Iterable, Sequence

from polynav.config import CandidateMode, VisibilityConfig
from polynav.core.geometry import (
    POINT_TOLERANCE,
    PointSequence,
    do_lines_intersect,
    find_concave_vertices,
    orientation,
    point_in_polygon,
    points_coincide,
)
from polynav.core.graph import Graph
from polynav.domain import Point, Polygon, VisibilityPair

logger = logging.getLogger(__name__)


def _runs_along(shared: Point, a: Point, b: Point) -> bool:
    """Check whether shared->a and shared->b leave along the same ray."""
    if orientation(shared, a, b) is not None:
        return False
    return (a.x - shared.x) * (b.x - shared.x) + (a.y - shared.y) * (b.y - shared.y) > 0


def _is_same_segment(v1: Point, v2: Point, a: Point, b: Point, tolerance: float) -> bool:
    """Check whether segments v1-v2 and a-b have the same endpoints."""
    return (points_coincide(v1, a, tolerance) and points_coincide(v2, b, tolerance)) or (
        points_coincide(v1, b, tolerance) and points_coincide(v2, a, tolerance)
    )


def _edge_blocks(
    v1: Point, v2: Point, edge_start: Point, edge_end: Point, tolerance: float
) -> bool:
    """Decide whether one polygon edge blocks the sight line v1-v2.

    A sight line that starts at a polygon vertex always touches the two edges
    meeting there. That contact alone does not block; only a collinear
    overlap running past the shared vertex does.
    """
    if _is_same_segment(v1, v2, edge_start, edge_end, tolerance):
        return False

    v1_at_start = points_coincide(v1, edge_start, tolerance)
    v1_at_end = points_coincide(v1, edge_end, tolerance)
    v2_at_start = points_coincide(v2, edge_start, tolerance)
    v2_at_end = points_coincide(v2, edge_end, tolerance)

    if v1_at_start or v1_at_end:
        return _runs_along(v1, v2, edge_end if v1_at_start else edge_start)
    if v2_at_start or v2_at_end:
        return _runs_along(v2, v1, edge_end if v2_at_start else edge_start)

    return do_lines_intersect(v1, v2, edge_start, edge_end)


def can_see_each_other(
    v1: Point,
    v2: Point,
    polygon: PointSequence,
    *,
    interior_only: bool = False,
    tolerance: float = POINT_TOLERANCE,
) -> bool:
    """Check whether two points have an unobstructed line of sight.

    The segment v1-v2 is tested against every polygon edge, stopping at the
    first one that blocks it. When v1 or v2 is itself a polygon vertex, the
    contact with its own two edges at that vertex is ignored. A segment that
    passes exactly through some other vertex touches two edges there and
    counts as blocked.

    Segments crossing no edge lie either wholly inside or wholly outside the
    polygon. With interior_only the segment midpoint must also be inside, so
    chords that cut across a notch from the outside are rejected. A sight
    line that is itself a polygon edge always passes that check.

    Args:
        v1: First point
        v2: Second point
        polygon: Polygon or sequence of boundary points
        interior_only: Also require the segment to run through the interior
        tolerance: Coordinate tolerance for matching v1/v2 to polygon vertices

    Returns:
        True if v1 and v2 can see each other
    """
    n = len(polygon)
    along_edge = False
    for i in range(n):
        edge_start, edge_end = polygon[i], polygon[(i + 1) % n]
        if _is_same_segment(v1, v2, edge_start, edge_end, tolerance):
            along_edge = True
        elif _edge_blocks(v1, v2, edge_start, edge_end, tolerance):
            return False

    if interior_only and not along_edge:
        midpoint = Point((v1.x + v2.x) / 2.0, (v1.y + v2.y) / 2.0)
        return point_in_polygon(midpoint, polygon)

    return True


def _unique_by_identity(points: Iterable[Point]) -> list[Point]:
    """Drop repeated occurrences of the same Point object, keeping the first."""
    return list({id(p): p for p in points}.values())


def find_visible_points(
    points: Sequence[Point],
    polygon: PointSequence,
    *,
    interior_only: bool = False,
    tolerance: float = POINT_TOLERANCE,
) -> list[VisibilityPair]:
    """Find every pair of points that can see each other.

    Each unordered pair (i < j) is tested once. A Point object listed more
    than once is only considered at its first position, so no point is
    paired with itself and no pair is repeated.

    Args:
        points: Candidate points
        polygon: Polygon or sequence of boundary points
        interior_only: Passed through to can_see_each_other
        tolerance: Passed through to can_see_each_other

    Returns:
        Visible pairs, ordered by the first then second point's position in
        the candidate list
    """
    points = _unique_by_identity(points)
    visible_pairs: list[VisibilityPair] = []
    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            p1 = points[i]
            p2 = points[j]
            if can_see_each_other(
                p1, p2, polygon, interior_only=interior_only, tolerance=tolerance
            ):
                visible_pairs.append(VisibilityPair(p1, p2))

    logger.debug(
        "Visibility computed: %d candidates, %d visible pairs", len(points), len(visible_pairs)
    )
    return visible_pairs


class VisibilityGraphBuilder:
    """Builds visibility lists and graphs for one polygon.

    Candidates are the route endpoints plus either the concave vertices or
    every vertex of the polygon, depending on configuration.

    Example:
        builder = VisibilityGraphBuilder(polygon)
        graph = builder.build_visibility_graph(start, goal)
    """

    def __init__(
        self,
        polygon: Polygon,
        config: VisibilityConfig | None = None,
        tolerance: float = POINT_TOLERANCE,
    ) -> None:
        """Initialize the builder.

        Args:
            polygon: The bounding polygon
            config: Visibility settings (defaults if None)
            tolerance: Coordinate tolerance for vertex matching
        """
        self.polygon = polygon
        self.config = config if config is not None else VisibilityConfig()
        self.tolerance = tolerance

    def candidates(self, start: Point | None = None, goal: Point | None = None) -> list[Point]:
        """Select the candidate points for visibility testing.

        Args:
            start: Optional route start, placed first
            goal: Optional route goal, placed last

        Returns:
            Candidate points, each Point object listed once
        """
        if self.config.candidate_mode is CandidateMode.ALL_VERTICES:
            vertices = list(self.polygon)
        else:
            vertices = find_concave_vertices(self.polygon)

        result: list[Point] = []
        if start is not None:
            result.append(start)
        result.extend(vertices)
        if goal is not None:
            result.append(goal)
        return _unique_by_identity(result)

    def build_visibility_list(
        self, start: Point | None = None, goal: Point | None = None
    ) -> list[VisibilityPair]:
        """Find all visible pairs among the candidates.

        Args:
            start: Optional route start
            goal: Optional route goal

        Returns:
            Visible pairs
        """
        return find_visible_points(
            self.candidates(start, goal),
            self.polygon,
            interior_only=self.config.interior_only,
            tolerance=self.tolerance,
        )

    def build_visibility_graph(
        self, start: Point | None = None, goal: Point | None = None
    ) -> Graph:
        """Build a navigation graph from the visibility list.

        Every candidate becomes a node, including candidates that see no
        other candidate.

        Args:
            start: Optional route start
            goal: Optional route goal

        Returns:
            Graph whose nodes wrap the candidate points
        """
        return self.graph_from_pairs(
            self.candidates(start, goal), self.build_visibility_list(start, goal)
        )

    @staticmethod
    def graph_from_pairs(candidates: Sequence[Point], pairs: Iterable[VisibilityPair]) -> Graph:
        """Build a graph with a node per candidate and an edge per visible pair.

        Args:
            candidates: Candidate points, including isolated ones
            pairs: Visible pairs among the candidates

        Returns:
            Graph whose nodes wrap the candidate points
        """
        graph = Graph.from_object_edge_list(pairs)
        for point in candidates:
            graph.add_node_for(point)
        return graph
