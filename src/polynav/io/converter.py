"""Conversion between JSON-compatible values and domain models.

Polygon files store vertices either as coordinate lists ([x, y] or
[x, y, z]) or as objects ({"x": .., "y": .., "z": ..}). Results are always
written as coordinate lists.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from polynav.domain import Point, Triangle, VisibilityPair

if TYPE_CHECKING:
    from polynav.core.planner import NavigationPlan


def point_from_raw(raw: Any) -> Point:
    """Convert a JSON value to a Point.

    Args:
        raw: [x, y], [x, y, z] or {"x": .., "y": .., "z": ..}

    Returns:
        Point instance

    Raises:
        ValueError: If the value is not a recognised point shape
    """
    if isinstance(raw, dict):
        try:
            return Point.from_dict(raw)
        except (KeyError, TypeError) as e:
            raise ValueError(f"point object needs numeric 'x' and 'y': {raw!r}") from e

    if isinstance(raw, (list, tuple)) and len(raw) in (2, 3):
        try:
            coords = [float(v) for v in raw]
        except (TypeError, ValueError) as e:
            raise ValueError(f"point coordinates must be numbers: {raw!r}") from e
        return Point(coords[0], coords[1], coords[2] if len(coords) == 3 else None)

    raise ValueError(f"expected [x, y] or {{'x': .., 'y': ..}}, got {raw!r}")


def point_from_string(text: str) -> Point:
    """Parse an "x,y" string (as given on the command line) into a Point.

    Raises:
        ValueError: If the text is not two comma-separated numbers
    """
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        raise ValueError(f"expected 'x,y', got {text!r}")
    return Point(float(parts[0]), float(parts[1]))


def point_to_raw(point: Point) -> list[float]:
    """Convert a Point to a coordinate list."""
    if point.z is not None:
        return [point.x, point.y, point.z]
    return [point.x, point.y]


def points_to_list(points: Sequence[Point]) -> list[list[float]]:
    """Convert points to a list of coordinate lists."""
    return [point_to_raw(p) for p in points]


def triangles_to_list(triangles: Sequence[Triangle]) -> list[list[list[float]]]:
    """Convert triangles to nested coordinate lists."""
    return [points_to_list(triangle) for triangle in triangles]


def pairs_to_list(pairs: Sequence[VisibilityPair]) -> list[list[list[float]]]:
    """Convert visibility pairs to nested coordinate lists."""
    return [[point_to_raw(pair.p1), point_to_raw(pair.p2)] for pair in pairs]


def plan_to_dict(plan: "NavigationPlan") -> dict[str, Any]:
    """Serialize a navigation plan.

    Args:
        plan: Result of NavigationPlanner.plan()

    Returns:
        Dictionary with start, goal, path, distance and visibility pairs
    """
    return {
        "start": point_to_raw(plan.start),
        "goal": point_to_raw(plan.goal),
        "found": plan.found,
        "distance": plan.distance,
        "path": points_to_list(plan.path),
        "candidates": points_to_list(plan.candidates),
        "visibility_pairs": pairs_to_list(plan.visibility_pairs),
    }
