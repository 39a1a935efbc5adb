"""Polygon file I/O layer for polynav.

This module handles reading polygon files and writing results as JSON.
It keeps file formats out of the core algorithms.

Key responsibilities:
- Load polygons and optional route endpoints
- Convert JSON values to domain models and back
- Write triangulations and plans next to the input file

Key classes:
- PolygonReader: Load polygon files
- PolygonWriter: Save results
"""

from polynav.io.reader import PolygonReader
from polynav.io.writer import PolygonWriter

__all__ = [
    "PolygonReader",
    "PolygonWriter",
]
