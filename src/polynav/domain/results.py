"""Result types produced by the visibility and triangulation engines."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from polynav.domain.polygon import Point

Triangle = tuple[Point, Point, Point]
"""Three of the original polygon Point objects, in (prev, tip, next) order."""


@dataclass(frozen=True, slots=True)
class VisibilityPair:
    """An unordered pair of points that can see each other.

    Unpacks like a 2-tuple, so a list of pairs can be fed straight into
    Graph.from_object_edge_list.

    Attributes:
        p1: First point (earlier in the candidate list)
        p2: Second point
    """

    p1: Point
    p2: Point

    def __iter__(self) -> Iterator[Point]:
        yield self.p1
        yield self.p2

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with p1 and p2 point dictionaries
        """
        return {"p1": self.p1.to_dict(), "p2": self.p2.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VisibilityPair":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with p1 and p2 point dictionaries

        Returns:
            VisibilityPair instance
        """
        return cls(p1=Point.from_dict(data["p1"]), p2=Point.from_dict(data["p2"]))
