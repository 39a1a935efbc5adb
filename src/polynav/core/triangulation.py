"""Polygon triangulation by angle-guided ear reduction.

The triangulator repeatedly clips the vertex with the smallest ear angle,
emitting the triangle formed with its two neighbours and removing it from
the working polygon. A polygon with n vertices yields exactly n - 2
triangles made of the caller's original Point objects.

Ear angles are measured in one consistent sense: the unsigned angle between
a vertex's two edges, replaced by 360 - angle whenever the local turn runs
against the polygon's overall winding. Reflex vertices therefore always read
above 180 degrees and are clipped last.
"""

import logging
from collections import Counter

from polynav.config import TriangulationConfig
from polynav.core.geometry import (
    POINT_TOLERANCE,
    PointSequence,
    orientation,
    point_in_triangle,
    points_coincide,
    signed_area,
    vertex_angle,
)
from polynav.domain import Point, Triangle, WindingDirection

logger = logging.getLogger(__name__)


class Triangulator:
    """Decomposes a simple polygon into triangles.

    With ear checking enabled (the default) the smallest-angle vertex is only
    clipped if it is convex and its triangle contains no other remaining
    vertex; if no vertex qualifies the plain smallest angle is used. With
    ear checking disabled the smallest angle always wins.

    Self-intersecting or degenerate input produces unspecified triangles,
    but the loop always stops after n - 2 iterations.
    """

    def __init__(
        self,
        config: TriangulationConfig | None = None,
        tolerance: float = POINT_TOLERANCE,
    ) -> None:
        """Initialize the triangulator.

        Args:
            config: Triangulation settings (defaults if None)
            tolerance: Coordinate tolerance for duplicate-vertex checks
        """
        self.config = config if config is not None else TriangulationConfig()
        self.tolerance = tolerance

    def triangulate(self, points: PointSequence) -> list[Triangle]:
        """Triangulate a polygon.

        Args:
            points: Polygon or sequence of boundary points. A trailing vertex
                equal to the first is dropped.

        Returns:
            n - 2 triangles, each (prev, tip, next); empty for fewer than
            3 vertices
        """
        vertices = list(points)
        if len(vertices) > 1 and points_coincide(vertices[0], vertices[-1], self.tolerance):
            vertices.pop()

        n = len(vertices)
        if n < 3:
            logger.debug("Nothing to triangulate: %d vertices", n)
            return []

        clockwise = self._is_clockwise(vertices)
        angles = [
            self._ear_angle(vertices[(k - 1) % n], vertices[k], vertices[(k + 1) % n], clockwise)
            for k in range(n)
        ]

        triangles: list[Triangle] = []
        for _ in range(n - 2):
            m = len(vertices)
            tip = self._select_ear(vertices, angles)
            prev = (tip - 1) % m
            nxt = (tip + 1) % m

            triangles.append((vertices[prev], vertices[tip], vertices[nxt]))

            del vertices[tip]
            del angles[tip]
            m -= 1

            # Former neighbours have new neighbours; shift indices past the tip
            for idx in {prev - 1 if prev > tip else prev, nxt - 1 if nxt > tip else nxt}:
                angles[idx] = self._ear_angle(
                    vertices[(idx - 1) % m], vertices[idx], vertices[(idx + 1) % m], clockwise
                )

        logger.debug("Triangulated %d vertices into %d triangles", n, len(triangles))
        return triangles

    def _is_clockwise(self, vertices: list[Point]) -> bool:
        """Find the polygon winding from its rightmost vertex.

        The rightmost vertex (lowest on ties) is always convex, so the turn
        through it matches the overall winding.
        """
        n = len(vertices)
        i = max(range(n), key=lambda k: (vertices[k].x, -vertices[k].y))
        turn = orientation(vertices[(i - 1) % n], vertices[i], vertices[(i + 1) % n])
        if turn is None:
            return signed_area(vertices) < 0
        return turn is WindingDirection.CLOCKWISE

    @staticmethod
    def _ear_angle(a: Point, b: Point, c: Point, clockwise: bool) -> float:
        """Ear angle at b in degrees, measured in the polygon's sense."""
        theta = vertex_angle(a, b, c)
        if theta > 180.0:
            theta = 360.0 - theta
        ear_clockwise = orientation(a, b, c) is WindingDirection.CLOCKWISE
        if ear_clockwise != clockwise:
            theta = 360.0 - theta
        return theta

    def _select_ear(self, vertices: list[Point], angles: list[float]) -> int:
        """Pick the index of the next ear tip."""
        order = sorted(range(len(angles)), key=lambda k: angles[k])
        if self.config.check_ears:
            for k in order:
                if angles[k] < 180.0 and self._is_empty_ear(vertices, k):
                    return k
        return order[0]

    def _is_empty_ear(self, vertices: list[Point], tip: int) -> bool:
        """Check that no other vertex lies in the ear triangle at tip."""
        m = len(vertices)
        corners = {(tip - 1) % m, tip, (tip + 1) % m}
        a, b, c = vertices[(tip - 1) % m], vertices[tip], vertices[(tip + 1) % m]

        for j, p in enumerate(vertices):
            if j in corners:
                continue
            if any(points_coincide(p, q, self.tolerance) for q in (a, b, c)):
                continue
            if point_in_triangle(p, a, b, c):
                return False
        return True


def triangulate(points: PointSequence, *, check_ears: bool = True) -> list[Triangle]:
    """Triangulate a polygon with default settings.

    Args:
        points: Polygon or sequence of boundary points
        check_ears: Only clip convex, empty ears when possible

    Returns:
        n - 2 triangles of the original Point objects
    """
    return Triangulator(TriangulationConfig(check_ears=check_ears)).triangulate(points)


def triangulation_edges(
    triangles: list[Triangle], shared_only: bool = False
) -> list[tuple[Point, Point]]:
    """Collect the unique undirected edges of a triangulation.

    Edges are matched by point identity, so the result can be passed to
    Graph.from_object_edge_list to build a graph over the triangulation.

    Args:
        triangles: Triangles from triangulate()
        shared_only: Keep only edges used by two triangles (the diagonals)

    Returns:
        (point, point) pairs in first-seen order
    """
    counts: Counter[tuple[int, int]] = Counter()
    edges: dict[tuple[int, int], tuple[Point, Point]] = {}

    for triangle in triangles:
        for k in range(3):
            a, b = triangle[k], triangle[(k + 1) % 3]
            key = (min(id(a), id(b)), max(id(a), id(b)))
            counts[key] += 1
            edges.setdefault(key, (a, b))

    return [edge for key, edge in edges.items() if not shared_only or counts[key] > 1]
