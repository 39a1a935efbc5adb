"""Domain models for polynav.

This module contains the value types shared by the geometry, visibility,
triangulation and graph layers. Models are:

- Immutable where possible (frozen dataclasses)
- Serializable to plain dictionaries for file I/O
- Free of any algorithmic logic beyond their own bookkeeping

Key classes:
- Point: A 2D point with optional z payload
- Polygon: A closed boundary with an explicit winding attribute
- VisibilityPair: Two points with an unobstructed line of sight
- Triangle: Type alias for a triangulation output triple
"""

from polynav.domain.polygon import Point, Polygon, WindingDirection
from polynav.domain.results import Triangle, VisibilityPair

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Core types
    "Point",
    "Polygon",
    "Triangle",
    "VisibilityPair",
]
