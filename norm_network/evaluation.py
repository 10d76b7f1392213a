"""
Fitness Tracking

Keeps one sliding value window per node so an outer synthesis loop can feed
fitness observations and a plotter can poll for new values.
"""

import logging
from typing import Any, Dict, List, Optional

from .config import WindowConfig
from .window import SlidingValueWindow

logger = logging.getLogger(__name__)


class FitnessTracker:
    """
    Registry of per-node sliding windows.

    Windows are created on the first observation of a node, all with the
    same configuration.
    """

    def __init__(self, config: Optional[WindowConfig] = None):
        self.config = config or WindowConfig()
        self.windows: Dict[Any, SlidingValueWindow] = {}

    def observe(self, node: Any, value: float) -> SlidingValueWindow:
        """
        Add an observation to the window of a node.

        Returns:
            The node's window
        """
        window = self.windows.get(node)
        if window is None:
            window = SlidingValueWindow(config=self.config)
            self.windows[node] = window
            logger.debug("Created fitness window for %r", node)
        window.add_value(value)
        return window

    def get_window(self, node: Any) -> Optional[SlidingValueWindow]:
        return self.windows.get(node)

    def get_nodes(self) -> List[Any]:
        return list(self.windows)

    def get_nodes_with_new_values(self) -> List[Any]:
        """Get the nodes whose window has a value not yet consumed."""
        return [node for node, window in self.windows.items()
                if window.has_new_value]

    def clear_new_values(self) -> None:
        for window in self.windows.values():
            window.set_new_value(False)

    def discard(self, node: Any) -> None:
        """Drop the window of a node, if any."""
        self.windows.pop(node, None)

    def reset(self) -> None:
        """Reset every window, keeping the registry."""
        for window in self.windows.values():
            window.reset()

    def __contains__(self, node: Any) -> bool:
        return node in self.windows

    def __len__(self) -> int:
        return len(self.windows)
