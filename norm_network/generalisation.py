"""
Generalisation Network Module

A generalisation network is a norm network whose edges stand for
generalisation relationships: a child node points to a strictly more
general parent node. On top of the typed edge graph, the network keeps:

1. the state (active / inactive) of each node;
2. the generalisation level of each node, i.e. its height in the graph;
3. four control lists derived from node state: active, inactive,
   represented and not represented nodes.

A node is represented if it is active or some ancestor is active.
Control lists keep the order in which nodes first joined them.
"""

import logging
from collections import deque
from typing import Any, Dict, List, Optional

from .config import NetworkConfig
from .constants import DEFAULT_GENERALISATION_LEVEL, LEVEL_STEP
from .edges import EdgeKind
from .errors import GeneralisationCycleError, UnknownNodeError
from .graph import TypedEdgeGraph
from .states import NodeState, NodeStateStore

logger = logging.getLogger(__name__)

GENERALISATION = EdgeKind.GENERALISATION


class GeneralisationNetwork:
    """
    Directed acyclic graph of nodes linked by generalisation edges.

    Mutators (add, remove, add_generalisation, remove_generalisation,
    set_state) are not reentrant and must be serialised by the caller.
    Observers are safe to call whenever no mutator is running.

    Control list coherence:
        With ``config.eager_refresh`` (the default) every mutation
        recomputes the touched node and all of its descendants, so the
        represented / not represented lists are exact after each call.
        With lazy refresh only the touched node is recomputed; a node
        whose ancestor changed state keeps its previous list membership
        until ``refresh(node)`` or ``refresh_all()`` is called.
        ``is_represented`` is always computed on demand and never stale.

    Attributes:
        config: Network configuration
        graph: Underlying typed edge graph (generalisation edges only)
        states: Node state store
    """

    def __init__(self, config: Optional[NetworkConfig] = None):
        self.config = config or NetworkConfig()
        self.graph = TypedEdgeGraph()
        self.states = NodeStateStore()

        self._levels: Dict[Any, int] = {}

        # Ordered sets (dict keys keep first-insertion order)
        self._active: Dict[Any, None] = {}
        self._inactive: Dict[Any, None] = {}
        self._represented: Dict[Any, None] = {}
        self._not_represented: Dict[Any, None] = {}

    # =========================================================================
    # Mutators
    # =========================================================================

    def add(self, node: Any) -> bool:
        """
        Register a node with level 1 and INACTIVE state.

        Adding a node that is already registered leaves it untouched.

        Returns:
            True if the node was newly registered
        """
        if not self.graph.add_node(node):
            return False

        self._levels[node] = DEFAULT_GENERALISATION_LEVEL
        self._recompute_control_lists(node)
        logger.debug("Added node %r", node)
        return True

    def remove(self, node: Any) -> None:
        """
        Unregister a node, dropping its edges, level, state and list membership.

        Former descendants are refreshed afterwards when eager refresh is on,
        since they may have been represented through the removed node.
        """
        self._require(node)
        descendants = self.get_descendants(node) if self.config.eager_refresh else []

        self.graph.remove_node(node)
        self.states.discard(node)
        del self._levels[node]
        for control_list in (self._active, self._inactive,
                             self._represented, self._not_represented):
            control_list.pop(node, None)

        for descendant in descendants:
            self._recompute_control_lists(descendant)
        logger.debug("Removed node %r", node)

    def add_generalisation(self, child: Any, parent: Any) -> None:
        """
        Add a generalisation edge from child to (more general) parent.

        The parent's level becomes max(level(parent), level(child) + 1).
        With ``config.propagate_levels`` the raise is carried up to every
        ancestor of the parent as well.

        Raises:
            UnknownNodeError: if either node is not registered
            GeneralisationCycleError: if parent is child or already below it
            DuplicateEdgeError: if the generalisation already exists
        """
        self._require(child)
        self._require(parent)
        if child == parent or self.is_ancestor(child, parent):
            raise GeneralisationCycleError(child, parent)

        self.graph.add_edge(child, parent, GENERALISATION)

        required = self._levels[child] + LEVEL_STEP
        if self._levels[parent] < required:
            self._levels[parent] = required
            if self.config.propagate_levels:
                self._lift_ancestors(parent)

        logger.debug("Added generalisation %r -> %r", child, parent)
        self._refresh_from(child)

    def remove_generalisation(self, child: Any, parent: Any) -> bool:
        """
        Remove the generalisation edge from child to parent.

        Levels are never lowered. Removing a missing edge is a no-op.

        Returns:
            True if an edge was removed
        """
        self._require(child)
        self._require(parent)
        if self.graph.remove_edge(child, parent, GENERALISATION) is None:
            return False

        logger.debug("Removed generalisation %r -> %r", child, parent)
        self._refresh_from(child)
        return True

    def set_state(self, node: Any, state: NodeState) -> bool:
        """
        Set the state of a node and recompute its control lists.

        Setting the state a node already has does nothing.

        Returns:
            True if the state changed
        """
        self._require(node)
        if not self.states.set_state(node, state):
            return False

        self._refresh_from(node)
        return True

    def refresh(self, node: Any) -> None:
        """Recompute the control list membership of a single node."""
        self._require(node)
        self._recompute_control_lists(node)

    def refresh_all(self) -> None:
        """Recompute the control list membership of every node."""
        for node in self.graph.get_nodes():
            self._recompute_control_lists(node)

    # =========================================================================
    # Structure observers
    # =========================================================================

    def get_state(self, node: Any) -> NodeState:
        return self.states.get_state(node)

    def get_parents(self, node: Any) -> List[Any]:
        """Get the destinations of the node's generalisation edges."""
        return [edge.destination
                for edge in self.graph.get_out_edges(node, GENERALISATION)]

    def get_children(self, node: Any) -> List[Any]:
        """Get the sources of generalisation edges ending at the node."""
        return [edge.source
                for edge in self.graph.get_in_edges(node, GENERALISATION)]

    def get_brothers(self, node: Any, parent: Any = None) -> List[Any]:
        """
        Get the brothers of a node.

        Brothers are children of the node's parents (or of the given parent
        only) that sit at the same generalisation level as the node. The node
        itself is excluded and each brother appears once.

        Args:
            node: The node
            parent: Restrict the search to this parent's children

        Returns:
            Brothers in parent order, then child order
        """
        if node not in self._levels:
            return []

        parents = [parent] if parent is not None else self.get_parents(node)
        level = self._levels[node]
        brothers: Dict[Any, None] = {}

        for p in parents:
            for child in self.get_children(p):
                if child != node and self._levels[child] == level:
                    brothers[child] = None
        return list(brothers)

    def get_top_boundary(self) -> List[Any]:
        """Get the nodes that have no parents."""
        return [node for node in self.graph.get_nodes()
                if not self.get_parents(node)]

    def get_generalisation_level(self, node: Any) -> int:
        """
        Get the generalisation level (height) of a node.

        Leaves have level 1; a parent sits at least one level above each
        child it was linked to.
        """
        self._require(node)
        return self._levels[node]

    def get_ancestors(self, node: Any) -> List[Any]:
        """Get every node reachable through generalisation edges, nearest first."""
        return self._traverse(node, self.get_parents)

    def get_descendants(self, node: Any) -> List[Any]:
        """Get every node that reaches this node through generalisation edges."""
        return self._traverse(node, self.get_children)

    def is_represented(self, node: Any) -> bool:
        """
        Check whether a node is represented.

        A node is represented if it is active, or if some ancestor is active.
        Parents are visited in enumeration order, each node at most once.
        """
        stack = [node]
        visited = set()

        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)

            if self.states.get_state(current) == NodeState.ACTIVE:
                return True
            stack.extend(reversed(self.get_parents(current)))
        return False

    def is_ancestor(self, ancestor: Any, node: Any) -> bool:
        """Check whether ``ancestor`` is reachable from ``node`` upwards."""
        stack = list(reversed(self.get_parents(node)))
        visited = set()

        while stack:
            current = stack.pop()
            if current == ancestor:
                return True
            if current in visited:
                continue
            visited.add(current)
            stack.extend(reversed(self.get_parents(current)))
        return False

    def is_leaf(self, node: Any) -> bool:
        """A node is a leaf if nothing generalises into it."""
        return not self.get_children(node)

    def get_nodes(self) -> List[Any]:
        return self.graph.get_nodes()

    def __contains__(self, node: Any) -> bool:
        return node in self.graph

    def __len__(self) -> int:
        return len(self.graph)

    # =========================================================================
    # Control lists
    # =========================================================================

    def get_active_nodes(self) -> List[Any]:
        return list(self._active)

    def get_inactive_nodes(self) -> List[Any]:
        return list(self._inactive)

    def get_represented_nodes(self) -> List[Any]:
        """Get the nodes that are active or covered by an active ancestor."""
        return list(self._represented)

    def get_not_represented_nodes(self) -> List[Any]:
        """Get the inactive nodes whose ancestors are all inactive as well."""
        return list(self._not_represented)

    def get_summary(self) -> Dict[str, int]:
        """Get counts describing the current network."""
        return {
            "nodes": len(self.graph),
            "generalisations": self.graph.num_edges(),
            "active": len(self._active),
            "inactive": len(self._inactive),
            "represented": len(self._represented),
            "not_represented": len(self._not_represented),
            "top_boundary": len(self.get_top_boundary()),
            "max_level": max(self._levels.values(), default=0),
        }

    # =========================================================================
    # Internals
    # =========================================================================

    def _require(self, node: Any) -> None:
        if node not in self.graph:
            raise UnknownNodeError(node)

    def _traverse(self, node: Any, step) -> List[Any]:
        """Breadth-first walk from node (excluded) following ``step``."""
        seen = {node}
        order = []
        queue = deque(step(node))

        while queue:
            current = queue.popleft()
            if current in seen:
                continue
            seen.add(current)
            order.append(current)
            queue.extend(step(current))
        return order

    def _lift_ancestors(self, node: Any) -> None:
        """Raise ancestor levels so each parent sits above every child."""
        stack = [node]
        while stack:
            current = stack.pop()
            required = self._levels[current] + LEVEL_STEP
            for parent in self.get_parents(current):
                if self._levels[parent] < required:
                    self._levels[parent] = required
                    stack.append(parent)

    def _refresh_from(self, node: Any) -> None:
        self._recompute_control_lists(node)
        if self.config.eager_refresh:
            for descendant in self.get_descendants(node):
                self._recompute_control_lists(descendant)

    def _recompute_control_lists(self, node: Any) -> None:
        if self.states.get_state(node) == NodeState.ACTIVE:
            self._move(node, self._active, self._inactive)
        else:
            self._move(node, self._inactive, self._active)

        if self.is_represented(node):
            self._move(node, self._represented, self._not_represented)
        else:
            self._move(node, self._not_represented, self._represented)

    @staticmethod
    def _move(node: Any, target: Dict[Any, None], source: Dict[Any, None]) -> None:
        if node not in target:
            target[node] = None
        source.pop(node, None)
