"""
Network Errors

Exceptions raised by the generalisation network and its typed edge graph.
Every error is raised to the immediate caller before any state changes.
"""

from typing import Any


class NetworkError(Exception):
    """Base class for all norm network errors."""


class UnknownNodeError(NetworkError, LookupError):
    """A mutating operation named a node that is not registered."""

    def __init__(self, node: Any):
        self.node = node
        super().__init__(f"Node {node!r} is not registered in the network")


class EndpointMissingError(NetworkError, LookupError):
    """An edge endpoint is not registered in the graph."""

    def __init__(self, source: Any, destination: Any, missing: Any):
        self.source = source
        self.destination = destination
        self.missing = missing
        super().__init__(
            f"Cannot link {source!r} -> {destination!r}: "
            f"endpoint {missing!r} is not registered"
        )


class DuplicateEdgeError(NetworkError, ValueError):
    """An edge of the same kind already links the ordered pair."""

    def __init__(self, edge: Any):
        self.edge = edge
        super().__init__(f"Edge {edge} already exists")


class GeneralisationCycleError(NetworkError, ValueError):
    """Adding the generalisation would close a cycle."""

    def __init__(self, child: Any, parent: Any):
        self.child = child
        self.parent = parent
        super().__init__(
            f"Generalisation {child!r} -> {parent!r} would create a cycle"
        )
