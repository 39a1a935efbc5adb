"""Command-line interface for polynav.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- analyze: winding, area and per-vertex angles
- triangulate: ear-reduction triangulation with optional JSON output
- route: shortest path between two interior points
- Quiet mode and detailed error reporting
"""

from polynav.cli.app import cli, main

__all__ = ["cli", "main"]
