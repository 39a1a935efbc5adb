"""Core algorithms for polynav.

This module contains the core algorithms for:

- Geometric predicates (point-in-polygon, vertex angles, concavity,
  segment intersection)
- Visibility (pairwise line of sight, all-pairs visibility lists)
- Triangulation (angle-guided ear reduction)
- Navigation graphs and A* search over them

Predicates and engines are pure functions or stateless services; Graph is
the only mutable structure and each instance is owned by its caller.

Key functions:
- point_in_polygon: Ray-casting containment test
- vertex_angle: Angle at a vertex in degrees
- get_concave_vertices / find_concave_vertices: Reflex vertex detection
- do_lines_intersect: Segment intersection with collinear handling
- can_see_each_other / find_visible_points: Visibility tests
- triangulate: Polygon triangulation
- astar_path: Shortest path over a Graph

Key classes:
- Graph / GraphNode: Navigation graph substrate
- VisibilityGraphBuilder: Candidate selection and graph construction
- Triangulator: Configurable triangulation engine
- NavigationPlanner: End-to-end route planning
"""

from polynav.core.geometry import (
    cross_product,
    distance,
    do_lines_intersect,
    find_concave_vertices,
    get_concave_vertices,
    interior_angle,
    is_vertex_concave,
    on_segment,
    orientation,
    point_in_polygon,
    point_in_triangle,
    points_coincide,
    polygon_winding,
    signed_area,
    triangle_area,
    vertex_angle,
)
from polynav.core.graph import Graph, GraphNode
from polynav.core.planner import NavigationPlan, NavigationPlanner
from polynav.core.search import astar_path, node_distance, path_length
from polynav.core.triangulation import Triangulator, triangulate, triangulation_edges
from polynav.core.visibility import (
    VisibilityGraphBuilder,
    can_see_each_other,
    find_visible_points,
)

__all__ = [
    # Graph classes
    "Graph",
    "GraphNode",
    # Planner classes
    "NavigationPlan",
    "NavigationPlanner",
    # Triangulation
    "Triangulator",
    # Visibility
    "VisibilityGraphBuilder",
    # Search
    "astar_path",
    # Geometry functions
    "can_see_each_other",
    "cross_product",
    "distance",
    "do_lines_intersect",
    "find_concave_vertices",
    "find_visible_points",
    "get_concave_vertices",
    "interior_angle",
    "is_vertex_concave",
    "node_distance",
    "on_segment",
    "orientation",
    "path_length",
    "point_in_polygon",
    "point_in_triangle",
    "points_coincide",
    "polygon_winding",
    "signed_area",
    "triangle_area",
    "triangulate",
    "triangulation_edges",
    "vertex_angle",
]
