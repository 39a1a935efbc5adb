"""Undirected, node-attributed graph used as a path-search substrate.

Nodes wrap an arbitrary payload (usually a Point) together with the scratch
fields an A* search reads and writes. The graph stores nodes in an arena
keyed by integer handles and keeps adjacency as sets of handles:

    payload identity -> handle -> GraphNode
    handle -> {neighbour handles}

Adjacency is always symmetric. Operations that refer to a node the graph
does not hold (adding an edge to it, removing it, asking for its
neighbours) do nothing instead of raising, so that bulk construction from
partially built input never aborts halfway.

Key classes:
- GraphNode: Payload wrapper with g, h, f and parent scratch fields
- Graph: The adjacency structure and payload registry
"""

import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class GraphNode:
    """A graph node wrapping a payload.

    Nodes compare and hash by identity, never by payload, so two nodes may
    wrap points with equal coordinates.

    Attributes:
        data: The wrapped payload, typically a Point
        handle: Integer id assigned by the owning graph (None until added)
        g: Cost from the search start to this node
        h: Heuristic estimate from this node to the goal
        f: Total estimated cost; the search keeps f = g + h
        parent: Handle of the previous node on the best known path
    """

    data: Any
    handle: int | None = None
    g: float = 0.0
    h: float = 0.0
    f: float = 0.0
    parent: int | None = None

    @property
    def x(self) -> float:
        """X coordinate of the payload."""
        return self.data.x

    @property
    def y(self) -> float:
        """Y coordinate of the payload."""
        return self.data.y

    def reset(self) -> None:
        """Clear the search scratch fields."""
        self.g = 0.0
        self.h = 0.0
        self.f = 0.0
        self.parent = None


class Graph:
    """Undirected graph with payload lookup.

    Handles are drawn from a sequence owned by this graph. Pass `handles` to
    control numbering, e.g. `Graph(handles=itertools.count(1000))`; handles
    already in use are skipped.

    A node belongs to a single graph. Adding a node that another graph holds
    registers a fresh node for its payload and leaves the original alone.

    Example:
        graph = Graph()
        a = graph.add_node_for(Point(0, 0))
        b = graph.add_node_for(Point(1, 0))
        graph.add_edge(a, b)
        assert graph.get_neighbours(a) == [b]
    """

    def __init__(self, handles: Iterator[int] | None = None) -> None:
        """Initialize an empty graph.

        Args:
            handles: Optional handle sequence (defaults to 0, 1, 2, ...)
        """
        self._handles = handles if handles is not None else itertools.count()
        self._nodes: dict[int, GraphNode] = {}
        self._adjacency: dict[int, set[int]] = {}
        self._registry: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, GraphNode) and self._owns(node)

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(list(self._nodes.values()))

    @property
    def nodes(self) -> list[GraphNode]:
        """All nodes in handle order."""
        return [self._nodes[h] for h in sorted(self._nodes)]

    @property
    def edge_count(self) -> int:
        """Number of undirected edges."""
        return sum(len(neighbours) for neighbours in self._adjacency.values()) // 2

    def _owns(self, node: GraphNode) -> bool:
        return node.handle is not None and self._nodes.get(node.handle) is node

    def _next_handle(self) -> int:
        handle = next(self._handles)
        while handle in self._nodes:
            handle = next(self._handles)
        return handle

    def node(self, handle: int | None) -> GraphNode | None:
        """Resolve a handle (e.g. a node's parent) to its node.

        Args:
            handle: Node handle, or None

        Returns:
            The node, or None if the handle is unknown
        """
        if handle is None:
            return None
        return self._nodes.get(handle)

    def get_node_for(self, data: Any) -> GraphNode | None:
        """Find the node wrapping a payload.

        Lookup is by payload identity, not equality.

        Args:
            data: The payload object

        Returns:
            The wrapping node, or None if the payload is not in the graph
        """
        handle = self._registry.get(id(data))
        if handle is None:
            return None
        return self._nodes[handle]

    def add_node(self, node: GraphNode) -> GraphNode:
        """Add a node to the graph.

        Does nothing if a node for the same payload is already registered.
        A node that already carries a handle (held by another graph, or
        removed from this one) is not modified; a fresh node wrapping its
        payload is registered instead.

        Args:
            node: Node to add

        Returns:
            The node now registered for the payload (the existing one when
            the payload was already present)
        """
        existing = self.get_node_for(node.data)
        if existing is not None:
            return existing
        if node.handle is not None:
            node = GraphNode(node.data)

        handle = self._next_handle()
        node.handle = handle
        self._nodes[handle] = node
        self._adjacency[handle] = set()
        self._registry[id(node.data)] = handle
        return node

    def add_node_for(self, data: Any) -> GraphNode:
        """Get or create the node wrapping a payload.

        Scratch fields start at g = h = f = 0 and parent = None; they are
        only initialized when the node is first created.

        Args:
            data: The payload object

        Returns:
            The node for the payload
        """
        existing = self.get_node_for(data)
        if existing is not None:
            return existing
        return self.add_node(GraphNode(data))

    def add_edge(self, node1: GraphNode, node2: GraphNode) -> None:
        """Connect two nodes.

        Does nothing if either node is not in this graph, or if both are the
        same node. Adding an existing edge again changes nothing.

        Args:
            node1: First node
            node2: Second node
        """
        if node1 is node2 or not (self._owns(node1) and self._owns(node2)):
            return
        self._adjacency[node1.handle].add(node2.handle)
        self._adjacency[node2.handle].add(node1.handle)

    def remove_edge(self, node1: GraphNode, node2: GraphNode) -> bool:
        """Disconnect two nodes.

        Args:
            node1: First node
            node2: Second node

        Returns:
            True if the edge existed and was removed
        """
        if not self.has_edge(node1, node2):
            return False
        self._adjacency[node1.handle].discard(node2.handle)
        self._adjacency[node2.handle].discard(node1.handle)
        return True

    def has_edge(self, node1: GraphNode, node2: GraphNode) -> bool:
        """Check whether node2 is a neighbour of node1."""
        if not (self._owns(node1) and self._owns(node2)):
            return False
        return node2.handle in self._adjacency[node1.handle]

    def get_neighbours(self, node: GraphNode) -> list[GraphNode]:
        """Get the neighbours of a node.

        Args:
            node: Node to query

        Returns:
            Neighbours in handle order; empty if the node is isolated, absent
            or has been removed
        """
        if not self._owns(node):
            return []
        return [self._nodes[h] for h in sorted(self._adjacency[node.handle])]

    def get_edges(self) -> list[tuple[GraphNode, GraphNode]]:
        """List every undirected edge once.

        Returns:
            (node, neighbour) pairs with the lower handle first
        """
        edges: list[tuple[GraphNode, GraphNode]] = []
        for handle in sorted(self._adjacency):
            for other in sorted(self._adjacency[handle]):
                if handle < other:
                    edges.append((self._nodes[handle], self._nodes[other]))
        return edges

    def remove_node(self, node: GraphNode) -> bool:
        """Remove a node and every edge touching it.

        The node is first detached from each neighbour's adjacency set, then
        its own adjacency entry and payload registration are dropped.

        Args:
            node: Node to remove

        Returns:
            True if the node was found and removed
        """
        if not self._owns(node):
            return False

        handle = node.handle
        for neighbour in self._adjacency[handle]:
            self._adjacency[neighbour].discard(handle)

        del self._adjacency[handle]
        del self._nodes[handle]
        del self._registry[id(node.data)]
        return True

    def reset_search_state(self) -> None:
        """Clear g, h, f and parent on every node."""
        for node in self._nodes.values():
            node.reset()

    @classmethod
    def from_object_edge_list(
        cls,
        edges: Iterable[Iterable[Any]],
        handles: Iterator[int] | None = None,
    ) -> "Graph":
        """Build a graph from payload pairs.

        Each edge is a 2-item iterable of payloads (a tuple, a list or a
        VisibilityPair). Nodes are created on first reference.

        Args:
            edges: Payload pairs to connect
            handles: Optional handle sequence for the new graph

        Returns:
            The new graph
        """
        graph = cls(handles=handles)
        for edge in edges:
            data1, data2 = edge
            node1 = graph.add_node_for(data1)
            node2 = graph.add_node_for(data2)
            graph.add_edge(node1, node2)
        return graph
