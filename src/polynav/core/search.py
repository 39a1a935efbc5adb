"""A* shortest-path search over a navigation graph.

The search reads and writes the scratch fields every GraphNode carries:
g (cost so far), h (heuristic to goal), f (g + h) and parent (handle of the
previous node). Paths are reconstructed by following parent handles back
from the goal.
"""

import heapq
import itertools
import logging
import math
from collections.abc import Callable, Sequence
from typing import Any

from polynav.core.graph import Graph, GraphNode

logger = logging.getLogger(__name__)

CostFunction = Callable[[GraphNode, GraphNode], float]


def node_distance(a: GraphNode, b: GraphNode) -> float:
    """Euclidean distance between the payloads of two nodes.

    Admissible and consistent as an A* heuristic when edge costs are
    Euclidean too.
    """
    return math.hypot(b.x - a.x, b.y - a.y)


def _reconstruct_path(graph: Graph, goal: GraphNode) -> list[GraphNode]:
    """Follow parent handles from the goal back to the start."""
    path = [goal]
    current = goal
    # A parent chain can never be longer than the graph
    for _ in range(len(graph)):
        parent = graph.node(current.parent)
        if parent is None:
            break
        path.append(parent)
        current = parent
    return path[::-1]


def astar_path(
    graph: Graph,
    start: GraphNode,
    goal: GraphNode,
    heuristic: CostFunction = node_distance,
    cost: CostFunction = node_distance,
) -> list[GraphNode]:
    """Find the cheapest path between two nodes with A*.

    All scratch fields in the graph are reset before the search starts.

    Args:
        graph: Graph to search
        start: Start node (must belong to graph)
        goal: Goal node (must belong to graph)
        heuristic: Estimated cost from a node to the goal
        cost: Cost of the edge between two neighbouring nodes

    Returns:
        Nodes from start to goal inclusive; empty if either node is not in
        the graph or the goal is unreachable
    """
    if start not in graph or goal not in graph:
        return []

    graph.reset_search_state()
    start.h = heuristic(start, goal)
    start.f = start.h

    # Priority queue: (f, insertion order, handle)
    tie_breaker = itertools.count()
    open_set: list[tuple[float, int, int]] = [(start.f, next(tie_breaker), start.handle)]
    discovered = {start.handle}
    closed: set[int] = set()
    nodes_explored = 0

    while open_set:
        _, _, handle = heapq.heappop(open_set)
        if handle in closed:
            continue

        current = graph.node(handle)
        nodes_explored += 1

        if current is goal:
            path = _reconstruct_path(graph, goal)
            logger.debug(
                "Path found: %d nodes, cost %.3f, %d explored", len(path), goal.g, nodes_explored
            )
            return path

        closed.add(handle)

        for neighbour in graph.get_neighbours(current):
            if neighbour.handle in closed:
                continue

            tentative_g = current.g + cost(current, neighbour)
            if neighbour.handle not in discovered or tentative_g < neighbour.g:
                neighbour.g = tentative_g
                neighbour.h = heuristic(neighbour, goal)
                neighbour.f = neighbour.g + neighbour.h
                neighbour.parent = current.handle
                discovered.add(neighbour.handle)
                heapq.heappush(open_set, (neighbour.f, next(tie_breaker), neighbour.handle))

    logger.debug("No path found after exploring %d nodes", nodes_explored)
    return []


def path_length(points: Sequence[Any]) -> float:
    """Total length of a polyline through points (or graph nodes)."""
    return sum(
        math.hypot(b.x - a.x, b.y - a.y) for a, b in zip(points, points[1:])
    )
