"""
Typed Edge Graph

Directed multigraph keyed by node identity. Edges are tagged with an
EdgeKind; at most one edge of a given kind links an ordered pair of nodes.

The graph is stored as a pair of adjacency mappings (out-edges, in-edges)
so that both directions can be enumerated without scanning every edge.
Enumerations keep insertion order and tolerate unregistered nodes.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from .edges import EdgeKind, NetworkEdge
from .errors import DuplicateEdgeError, EndpointMissingError

logger = logging.getLogger(__name__)

# (other endpoint, kind) -> edge
Adjacency = Dict[Tuple[Any, EdgeKind], NetworkEdge]


class TypedEdgeGraph:
    """
    Directed graph with kind-tagged edges.

    Attributes:
        _out: node -> adjacency of edges leaving the node
        _in: node -> adjacency of edges entering the node
    """

    def __init__(self):
        self._out: Dict[Any, Adjacency] = {}
        self._in: Dict[Any, Adjacency] = {}

    # -------------------------------------------------------------------------
    # Nodes
    # -------------------------------------------------------------------------

    def add_node(self, node: Any) -> bool:
        """
        Register a node. Registering an existing node is a no-op.

        Returns:
            True if the node was newly registered
        """
        if node in self._out:
            return False
        self._out[node] = {}
        self._in[node] = {}
        return True

    def remove_node(self, node: Any) -> List[NetworkEdge]:
        """
        Remove a node and every edge incident to it.

        Returns:
            The edges that were removed along with the node
        """
        if node not in self._out:
            return []

        removed = list(self._out[node].values()) + list(self._in[node].values())
        for edge in self._out.pop(node).values():
            self._in[edge.destination].pop((node, edge.kind), None)
        for edge in self._in.pop(node).values():
            # Self loops were already dropped with the out mapping
            if edge.source in self._out:
                self._out[edge.source].pop((node, edge.kind), None)

        logger.debug("Removed node %r with %d incident edges", node, len(removed))
        return removed

    def has_node(self, node: Any) -> bool:
        return node in self._out

    def get_nodes(self) -> List[Any]:
        """Get all registered nodes in registration order."""
        return list(self._out)

    def __contains__(self, node: Any) -> bool:
        return node in self._out

    def __len__(self) -> int:
        return len(self._out)

    # -------------------------------------------------------------------------
    # Edges
    # -------------------------------------------------------------------------

    def add_edge(self, source: Any, destination: Any, kind: EdgeKind) -> NetworkEdge:
        """
        Add an edge of the given kind from source to destination.

        Raises:
            EndpointMissingError: if either endpoint is not registered
            DuplicateEdgeError: if an edge of the same kind already exists
        """
        for endpoint in (source, destination):
            if endpoint not in self._out:
                raise EndpointMissingError(source, destination, endpoint)

        existing = self._out[source].get((destination, kind))
        if existing is not None:
            raise DuplicateEdgeError(existing)

        edge = NetworkEdge(source, destination, kind)
        self._out[source][(destination, kind)] = edge
        self._in[destination][(source, kind)] = edge
        logger.debug("Added edge %s", edge)
        return edge

    def remove_edge(self, source: Any, destination: Any, kind: EdgeKind) -> Optional[NetworkEdge]:
        """
        Remove the edge of the given kind from source to destination.

        Returns:
            The removed edge, or None if there was no such edge
        """
        edge = self._out.get(source, {}).pop((destination, kind), None)
        if edge is None:
            return None
        self._in[destination].pop((source, kind), None)
        logger.debug("Removed edge %s", edge)
        return edge

    def has_edge(self, source: Any, destination: Any, kind: EdgeKind) -> bool:
        return (destination, kind) in self._out.get(source, {})

    def get_edge(self, source: Any, destination: Any, kind: EdgeKind) -> Optional[NetworkEdge]:
        return self._out.get(source, {}).get((destination, kind))

    def get_out_edges(self, node: Any, kind: Optional[EdgeKind] = None) -> List[NetworkEdge]:
        """Get edges leaving a node, optionally restricted to one kind."""
        edges = self._out.get(node, {}).values()
        if kind is None:
            return list(edges)
        return [e for e in edges if e.kind == kind]

    def get_in_edges(self, node: Any, kind: Optional[EdgeKind] = None) -> List[NetworkEdge]:
        """Get edges entering a node, optionally restricted to one kind."""
        edges = self._in.get(node, {}).values()
        if kind is None:
            return list(edges)
        return [e for e in edges if e.kind == kind]

    def get_edges(self, kind: Optional[EdgeKind] = None) -> List[NetworkEdge]:
        """Get every edge in the graph, grouped by source."""
        return [
            edge
            for adjacency in self._out.values()
            for edge in adjacency.values()
            if kind is None or edge.kind == kind
        ]

    def num_edges(self) -> int:
        return sum(len(adjacency) for adjacency in self._out.values())
