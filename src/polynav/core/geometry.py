"""Geometric predicates for polygons and line segments.

This module provides the core mathematical utilities for:
- Signed area and winding (shoelace formula)
- Point-in-polygon testing (ray casting algorithm)
- Vertex angles and concave (reflex) vertex detection
- Orientation tests and segment intersection

All functions are pure and stateless. Predicates accept either a Polygon or
any indexable sequence of Points. Inputs are not validated: a polygon with
fewer than 3 vertices gives meaningless results, and a payload without x/y
attributes fails with AttributeError at the first access.

Conventions: coordinates are y-up, counter-clockwise polygons have positive
signed area, and angles are in degrees.
"""

import math
from collections.abc import Sequence

from polynav.domain import Point, Polygon, WindingDirection

PointSequence = Sequence[Point] | Polygon

# Coordinates closer than this in both x and y are the same location
POINT_TOLERANCE = 1e-6


def cross_product(p1: Point, p2: Point, p3: Point) -> float:
    """Calculate the 2D cross product of vectors (p1->p2) and (p2->p3).

    Positive for a left (counter-clockwise) turn at p2, negative for a right
    turn, zero when the three points are collinear.

    Args:
        p1: Previous point
        p2: Current vertex
        p3: Next point

    Returns:
        Cross product value
    """
    return (p2.x - p1.x) * (p3.y - p2.y) - (p2.y - p1.y) * (p3.x - p2.x)


def signed_area(points: PointSequence) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: Points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> square = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]
        >>> signed_area(square)  # CCW square
        1.0
        >>> signed_area(square[::-1])  # CW square
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def polygon_winding(points: PointSequence) -> WindingDirection:
    """Determine the winding direction of a polygon.

    A Polygon reports its own cached winding; plain sequences are measured
    with the shoelace formula.

    Args:
        points: Polygon or sequence of boundary points

    Returns:
        WindingDirection (COUNTER_CLOCKWISE for zero area)
    """
    if isinstance(points, Polygon):
        return points.winding
    if signed_area(points) < 0:
        return WindingDirection.CLOCKWISE
    return WindingDirection.COUNTER_CLOCKWISE


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def points_coincide(a: Point, b: Point, tolerance: float = POINT_TOLERANCE) -> bool:
    """Check whether two points occupy the same location.

    Args:
        a: First point
        b: Second point
        tolerance: Maximum per-axis difference

    Returns:
        True if both |dx| and |dy| are below the tolerance
    """
    return abs(a.x - b.x) < tolerance and abs(a.y - b.y) < tolerance


def point_in_polygon(point: Point, polygon: PointSequence) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts crossings
    with polygon edges (i, j), where j is the previous vertex. Odd number of
    crossings = inside, even = outside.

    Points exactly on the boundary have no guaranteed classification: the
    half-open comparison on y and the strict comparison on x mean that, for
    example, points on a bottom or left edge of an axis-aligned square report
    inside while points on its top or right edge report outside. Callers that
    care about the boundary must test it separately.

    Args:
        point: The point to test
        polygon: Points forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> point_in_polygon(Point(1.0, 1.0), square)  # Center
        True
        >>> point_in_polygon(Point(3.0, 3.0), square)  # Outside
        False
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        # Edge (j, i) straddles the ray and crosses it right of the point
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def vertex_angle(p1: Point, p2: Point, p3: Point) -> float:
    """Calculate the angle at vertex p2 between edges p1->p2 and p2->p3.

    Computed as 180 - atan2(cross, dot) in degrees, where cross and dot are
    taken between the incoming and outgoing edge vectors. The result lies in
    [0, 360):

    - On a counter-clockwise polygon it is the interior angle: a convex
      corner reads below 180, a straight vertex reads 180 and a reflex
      vertex reads above 180.
    - On a clockwise polygon it is the exterior angle (360 - interior).

    Use interior_angle() for a winding-independent reading.

    Args:
        p1: Previous vertex
        p2: Vertex the angle is measured at
        p3: Next vertex

    Returns:
        Angle in degrees

    Examples:
        >>> vertex_angle(Point(0.0, 0.0), Point(4.0, 0.0), Point(4.0, 4.0))
        90.0
    """
    in_x = p2.x - p1.x
    in_y = p2.y - p1.y
    out_x = p3.x - p2.x
    out_y = p3.y - p2.y

    cross = in_x * out_y - out_x * in_y
    dot = in_x * out_x + in_y * out_y
    theta = math.degrees(math.atan2(cross, dot))

    return 180.0 - theta


def interior_angle(polygon: PointSequence, index: int) -> float:
    """Calculate the interior angle at a polygon vertex.

    Normalizes vertex_angle() by the polygon's winding, so the result is the
    interior angle whichever way the polygon winds.

    Args:
        polygon: Polygon or sequence of boundary points
        index: Index of the vertex

    Returns:
        Interior angle in degrees
    """
    n = len(polygon)
    angle = vertex_angle(polygon[(index + n - 1) % n], polygon[index], polygon[(index + 1) % n])
    if polygon_winding(polygon) is WindingDirection.CLOCKWISE:
        return 360.0 - angle
    return angle


def get_concave_vertices(polygon: PointSequence) -> list[Point]:
    """Find concave vertices by interior angle.

    A vertex is concave (reflex) when its interior angle exceeds 180 degrees.
    The polygon's winding is determined once and used to normalize every
    angle, so the result is the same for either vertex order.

    Args:
        polygon: Polygon or sequence of boundary points

    Returns:
        Concave vertices in boundary order
    """
    n = len(polygon)
    clockwise = polygon_winding(polygon) is WindingDirection.CLOCKWISE
    concave: list[Point] = []

    for curr in range(n):
        angle = vertex_angle(polygon[(curr + n - 1) % n], polygon[curr], polygon[(curr + 1) % n])
        if clockwise:
            angle = 360.0 - angle
        if angle > 180.0:
            concave.append(polygon[curr])

    return concave


def is_vertex_concave(polygon: PointSequence, index: int) -> bool:
    """Check a single vertex with the cross-product sign test.

    Args:
        polygon: Polygon or sequence of boundary points
        index: Index of the vertex

    Returns:
        True if the vertex turns against the polygon's winding
    """
    n = len(polygon)
    cross = cross_product(polygon[(index + n - 1) % n], polygon[index], polygon[(index + 1) % n])
    return cross * polygon_winding(polygon).sign < 0


def find_concave_vertices(polygon: PointSequence) -> list[Point]:
    """Find concave vertices by cross-product sign.

    For each vertex the cross product of (prev->current) and (current->next)
    is taken. On a counter-clockwise polygon a negative value is a right turn
    and therefore a reflex vertex; on a clockwise polygon the sign flips.
    Agrees with get_concave_vertices() for every simple polygon.

    Args:
        polygon: Polygon or sequence of boundary points

    Returns:
        Concave vertices in boundary order
    """
    n = len(polygon)
    sign = polygon_winding(polygon).sign
    concave: list[Point] = []

    for i in range(n):
        prev = polygon[(i - 1 + n) % n]
        current = polygon[i]
        nxt = polygon[(i + 1) % n]
        if cross_product(prev, current, nxt) * sign < 0:
            concave.append(current)

    return concave


def orientation(p: Point, q: Point, r: Point) -> WindingDirection | None:
    """Find the turn direction of the ordered triple (p, q, r).

    Args:
        p: First point
        q: Second point
        r: Third point

    Returns:
        CLOCKWISE or COUNTER_CLOCKWISE, or None when the points are collinear
    """
    val = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    if val == 0:
        return None
    return WindingDirection.CLOCKWISE if val > 0 else WindingDirection.COUNTER_CLOCKWISE


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """Check whether q lies within the bounding box of segment p-r.

    Only meaningful when p, q and r are already known to be collinear.
    """
    return (
        min(p.x, r.x) <= q.x <= max(p.x, r.x)
        and min(p.y, r.y) <= q.y <= max(p.y, r.y)
    )


def do_lines_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """Determine if segments p1-p2 and p3-p4 intersect.

    Uses the four orientation tests for the general crossing case, then the
    four collinear on-segment checks. Touching endpoints and overlapping
    collinear segments count as intersecting.

    Args:
        p1: First endpoint of segment 1
        p2: Second endpoint of segment 1
        p3: First endpoint of segment 2
        p4: Second endpoint of segment 2

    Returns:
        True if the segments share at least one point

    Examples:
        >>> do_lines_intersect(Point(0, 0), Point(4, 4), Point(0, 4), Point(4, 0))
        True
        >>> do_lines_intersect(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1))
        False
    """
    o1 = orientation(p1, p2, p3)
    o2 = orientation(p1, p2, p4)
    o3 = orientation(p3, p4, p1)
    o4 = orientation(p3, p4, p2)

    # General case
    if o1 != o2 and o3 != o4:
        return True

    # Collinear special cases
    if o1 is None and on_segment(p1, p3, p2):
        return True
    if o2 is None and on_segment(p1, p4, p2):
        return True
    if o3 is None and on_segment(p3, p1, p4):
        return True
    if o4 is None and on_segment(p3, p2, p4):
        return True

    return False


def point_in_triangle(point: Point, a: Point, b: Point, c: Point) -> bool:
    """Check whether a point lies inside or on the boundary of triangle abc.

    Works for either vertex order. A degenerate (zero-area) triangle contains
    nothing.

    Args:
        point: The point to test
        a: First triangle vertex
        b: Second triangle vertex
        c: Third triangle vertex

    Returns:
        True if the point is inside or on an edge
    """
    area = cross_product(a, b, c)
    if area == 0:
        return False

    d1 = cross_product(a, b, point)
    d2 = cross_product(b, c, point)
    d3 = cross_product(c, a, point)

    if area > 0:
        return d1 >= 0 and d2 >= 0 and d3 >= 0
    return d1 <= 0 and d2 <= 0 and d3 <= 0


def triangle_area(a: Point, b: Point, c: Point) -> float:
    """Unsigned area of triangle abc."""
    return abs((b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)) / 2.0
