"""
Node State Store

Binary per-node state (active / inactive) of a norm network.
"""

import logging
from enum import Enum
from typing import Any, Dict

logger = logging.getLogger(__name__)


class NodeState(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


DEFAULT_NODE_STATE = NodeState.INACTIVE


class NodeStateStore:
    """
    Stores the state of each node.

    Nodes without an explicit state are INACTIVE. Only ACTIVE nodes are
    kept in the underlying mapping.
    """

    def __init__(self):
        self._states: Dict[Any, NodeState] = {}

    def get_state(self, node: Any) -> NodeState:
        return self._states.get(node, DEFAULT_NODE_STATE)

    def set_state(self, node: Any, state: NodeState) -> bool:
        """
        Set the state of a node.

        Returns:
            True if the state changed, False if it was already set
        """
        if not isinstance(state, NodeState):
            raise ValueError(f"Unknown node state: {state!r}")
        if self.get_state(node) == state:
            return False
        if state == DEFAULT_NODE_STATE:
            del self._states[node]
        else:
            self._states[node] = state
        logger.debug("State of %r set to %s", node, state.value)
        return True

    def discard(self, node: Any) -> None:
        """Forget the state of a node (it reads as INACTIVE afterwards)."""
        self._states.pop(node, None)
