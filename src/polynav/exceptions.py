"""Exception hierarchy for polynav."""


class PolynavError(Exception):
    """Base exception for all polynav errors."""

    pass


class GeometryError(PolynavError):
    """Errors in geometric inputs or calculations."""

    pass


class InvalidPolygonError(GeometryError):
    """Polygon has too few vertices to describe an area."""

    def __init__(self, vertex_count: int) -> None:
        self.vertex_count = vertex_count
        super().__init__(
            f"Polygon needs at least 3 vertices, got {vertex_count}"
        )


class PointOutsidePolygonError(GeometryError):
    """A route endpoint lies outside the polygon."""

    def __init__(self, label: str, x: float, y: float) -> None:
        self.label = label
        self.x = x
        self.y = y
        super().__init__(f"The {label} point ({x:g}, {y:g}) is outside the polygon")


class PolygonFileError(PolynavError):
    """Errors related to polygon file loading or saving."""

    pass


class PolygonLoadError(PolygonFileError):
    """Error loading a polygon file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load polygon '{path}': {reason}")


class PolygonSaveError(PolygonFileError):
    """Error saving a result file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save results '{path}': {reason}")


class PolygonFormatError(PolygonFileError):
    """Polygon file content does not have the expected shape."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid polygon file '{path}': {details}")
