"""Result writer for triangulations and navigation plans.

This module provides the PolygonWriter class for saving results as JSON
next to the input polygon file.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from polynav import __version__
from polynav.domain import Polygon, Triangle
from polynav.exceptions import PolygonSaveError
from polynav.io.converter import plan_to_dict, points_to_list, triangles_to_list

if TYPE_CHECKING:
    from polynav.core.planner import NavigationPlan


class PolygonWriter:
    """Writes polygon processing results to JSON files.

    Example:
        writer = PolygonWriter(PolygonWriter.get_output_path(Path("room.json"), "triangles"))
        writer.write_triangulation(polygon, triangles)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Destination JSON file
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        """Destination file path."""
        return self._output_path

    @staticmethod
    def get_output_path(input_path: Path, suffix: str) -> Path:
        """Derive a result path from the input polygon path.

        "rooms/floor.json" with suffix "route" becomes "rooms/floor-route.json".

        Args:
            input_path: Path of the polygon file
            suffix: Result kind appended to the stem

        Returns:
            Output path in the same directory
        """
        return input_path.with_name(f"{input_path.stem}-{suffix}.json")

    def write(self, data: dict[str, Any]) -> None:
        """Write a result document with a metadata header.

        Args:
            data: JSON-compatible result fields

        Raises:
            PolygonSaveError: If the file cannot be written
        """
        document = {
            "generator": f"polynav {__version__}",
            "created": datetime.now().isoformat(timespec="seconds"),
            **data,
        }
        try:
            self._output_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        except OSError as e:
            raise PolygonSaveError(str(self._output_path), str(e)) from e

    def write_triangulation(self, polygon: Polygon, triangles: list[Triangle]) -> None:
        """Write a polygon and its triangulation.

        Args:
            polygon: The triangulated polygon
            triangles: Triangles from the triangulator
        """
        self.write(
            {
                "polygon": points_to_list(polygon.points),
                "area": polygon.area,
                "triangles": triangles_to_list(triangles),
            }
        )

    def write_plan(self, polygon: Polygon, plan: "NavigationPlan") -> None:
        """Write a polygon and a navigation plan over it.

        Args:
            polygon: The bounding polygon
            plan: Result of NavigationPlanner.plan()
        """
        self.write({"polygon": points_to_list(polygon.points), **plan_to_dict(plan)})
