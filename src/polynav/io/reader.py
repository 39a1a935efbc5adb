"""Polygon reader for loading JSON polygon files.

This module provides the PolygonReader class for loading polygon files and
converting them into domain models.

Accepted layouts:

    {"polygon": [[0, 0], [4, 0], [4, 4]], "start": [1, 1], "goal": [3, 1]}
    [[0, 0], [4, 0], [4, 4]]

start and goal are optional. A closing vertex equal to the first is dropped.
"""

import json
from pathlib import Path
from typing import Any

from polynav.domain import Point, Polygon
from polynav.exceptions import PolygonFormatError, PolygonLoadError
from polynav.io.converter import point_from_raw


class PolygonReader:
    """Loads polygon files into domain models.

    Example:
        with PolygonReader(Path("floorplan.json")) as reader:
            polygon = reader.polygon
            start, goal = reader.start, reader.goal
    """

    def __init__(self, polygon_path: Path) -> None:
        """Initialize the polygon reader.

        Args:
            polygon_path: Path to the JSON polygon file
        """
        self._polygon_path = polygon_path
        self._polygon: Polygon | None = None
        self._start: Point | None = None
        self._goal: Point | None = None

    def load(self) -> None:
        """Load and parse the polygon file.

        Raises:
            FileNotFoundError: If the file does not exist
            PolygonLoadError: If the file cannot be read
            PolygonFormatError: If the content is not a valid polygon file
        """
        if not self._polygon_path.exists():
            raise FileNotFoundError(f"Polygon file not found: {self._polygon_path}")

        try:
            text = self._polygon_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PolygonLoadError(str(self._polygon_path), str(e)) from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise PolygonFormatError(str(self._polygon_path), f"not valid JSON ({e})") from e

        self._parse(data)

    def _parse(self, data: Any) -> None:
        path = str(self._polygon_path)

        if isinstance(data, list):
            data = {"polygon": data}
        if not isinstance(data, dict) or not isinstance(data.get("polygon"), list):
            raise PolygonFormatError(path, "expected a 'polygon' list of vertices")

        try:
            vertices = [point_from_raw(raw) for raw in data["polygon"]]
            start = point_from_raw(data["start"]) if data.get("start") is not None else None
            goal = point_from_raw(data["goal"]) if data.get("goal") is not None else None
        except ValueError as e:
            raise PolygonFormatError(path, str(e)) from e

        self._polygon = Polygon.from_points(vertices)
        self._start = start
        self._goal = goal

    def _require_loaded(self) -> Polygon:
        if self._polygon is None:
            raise RuntimeError("Polygon not loaded. Call load() first.")
        return self._polygon

    @property
    def polygon(self) -> Polygon:
        """Return the loaded polygon.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        return self._require_loaded()

    @property
    def start(self) -> Point | None:
        """Return the route start stored in the file, if any.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        self._require_loaded()
        return self._start

    @property
    def goal(self) -> Point | None:
        """Return the route goal stored in the file, if any.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        self._require_loaded()
        return self._goal

    def close(self) -> None:
        """Drop the loaded data."""
        self._polygon = None
        self._start = None
        self._goal = None

    def __enter__(self) -> "PolygonReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
