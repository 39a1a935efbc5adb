"""polynav - Polygon geometry and navigation graphs.

polynav provides the geometric building blocks for planning paths inside a
simple polygon: point-in-polygon and concavity predicates, segment
intersection, a visibility-graph builder, an ear-reduction triangulation and
a node-attributed graph that an A* search runs over.

Example:
    $ polynav route floorplan.json --start 0.5,2.85 --goal 2.05,2.75

This prints the shortest path from start to goal that stays inside the
polygon stored in floorplan.json.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
