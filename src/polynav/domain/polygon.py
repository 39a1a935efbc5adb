"""Core geometric types for polygon representation.

This module defines the fundamental geometric types used throughout polynav:
- Point: An immutable 2D point with an optional z payload
- Polygon: A closed, simple boundary stored without a repeated closing vertex
- WindingDirection: Enum for polygon winding direction

Coordinates use a y-up frame: a polygon with positive shoelace area winds
counter-clockwise.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from polynav.exceptions import InvalidPolygonError


class WindingDirection(Enum):
    """Polygon winding direction.

    Determined from the sign of the shoelace area:
    - Positive area: counter-clockwise
    - Negative area: clockwise

    Zero-area (degenerate) polygons are reported as counter-clockwise.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()

    @property
    def sign(self) -> int:
        """Return +1 for counter-clockwise and -1 for clockwise."""
        return 1 if self is WindingDirection.COUNTER_CLOCKWISE else -1

    def reversed(self) -> "WindingDirection":
        """Return the opposite winding direction."""
        if self is WindingDirection.CLOCKWISE:
            return WindingDirection.COUNTER_CLOCKWISE
        return WindingDirection.CLOCKWISE


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable. Equality compares coordinates, which is what the
    geometric predicates need. Graphs key their payloads by object identity
    instead, so two equal points can still be two distinct graph nodes.

    Attributes:
        x: X coordinate
        y: Y coordinate
        z: Optional z coordinate carried as payload; ignored by all 2D predicates
    """

    x: float
    y: float
    z: float | None = None

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y and, when set, z fields
        """
        data: dict[str, Any] = {"x": self.x, "y": self.y}
        if self.z is not None:
            data["z"] = self.z
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y and optional z fields

        Returns:
            Point instance
        """
        z = data.get("z")
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            z=float(z) if z is not None else None,
        )


@dataclass
class Polygon:
    """A simple closed polygon.

    The vertex list never repeats the first vertex at the end; the closing
    edge runs from the last vertex back to the first. Polygons behave as
    read-only sequences of points, so every predicate that accepts a plain
    list of points also accepts a Polygon.

    The vertices are stored as a tuple so the cached area always matches
    them. Build a new Polygon to change the boundary.

    Attributes:
        points: Ordered boundary vertices
    """

    points: tuple[Point, ...]
    _cached_area: float | None = field(default=None, repr=False, init=False, compare=False)

    def __post_init__(self) -> None:
        self.points = tuple(self.points)

    @classmethod
    def from_points(cls, points: Iterable[Point], tolerance: float = 1e-9) -> "Polygon":
        """Build a polygon, dropping a duplicated closing vertex.

        Args:
            points: Boundary vertices, optionally closed (last == first)
            tolerance: Coordinate tolerance for the closing-vertex check

        Returns:
            Polygon instance
        """
        vertices = list(points)
        if len(vertices) > 1:
            first, last = vertices[0], vertices[-1]
            if abs(first.x - last.x) <= tolerance and abs(first.y - last.y) <= tolerance:
                vertices.pop()
        return cls(points=vertices)

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    @property
    def vertex_count(self) -> int:
        """Number of boundary vertices."""
        return len(self.points)

    def validate(self) -> None:
        """Check that the polygon has enough vertices to bound an area.

        Raises:
            InvalidPolygonError: If there are fewer than 3 vertices
        """
        if len(self.points) < 3:
            raise InvalidPolygonError(len(self.points))

    def signed_area(self) -> float:
        """Calculate signed area using the shoelace formula.

        Result is cached; the vertex tuple cannot change after construction.

        Returns:
            Signed area (positive for counter-clockwise winding)
        """
        if self._cached_area is not None:
            return self._cached_area

        n = len(self.points)
        if n < 3:
            self._cached_area = 0.0
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        self._cached_area = area / 2.0
        return self._cached_area

    @property
    def area(self) -> float:
        """Unsigned polygon area."""
        return abs(self.signed_area())

    @property
    def winding(self) -> WindingDirection:
        """Winding direction derived once from the signed area."""
        if self.signed_area() < 0:
            return WindingDirection.CLOCKWISE
        return WindingDirection.COUNTER_CLOCKWISE

    def with_winding(self, direction: WindingDirection) -> "Polygon":
        """Return a polygon with the requested winding.

        The same Point objects are reused; only their order changes.

        Args:
            direction: Desired winding direction

        Returns:
            This polygon if it already winds that way, otherwise a reversed copy
        """
        if self.winding is direction:
            return self
        return Polygon(points=tuple(reversed(self.points)))

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate the polygon extents.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def next_index(self, index: int) -> int:
        """Index of the vertex after `index`, wrapping around."""
        return (index + 1) % len(self.points)

    def prev_index(self, index: int) -> int:
        """Index of the vertex before `index`, wrapping around."""
        return (index + len(self.points) - 1) % len(self.points)

    def edges(self) -> list[tuple[Point, Point]]:
        """List the boundary edges, including the closing edge.

        Returns:
            List of (start, end) point pairs
        """
        n = len(self.points)
        return [(self.points[i], self.points[(i + 1) % n]) for i in range(n)]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the polygon
        """
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a polygon

        Returns:
            Polygon instance
        """
        return cls.from_points(Point.from_dict(p) for p in data["points"])
