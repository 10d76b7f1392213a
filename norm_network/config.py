"""
Configuration for the generalisation network and sliding windows.
"""

from dataclasses import dataclass

from .constants import DEFAULT_WINDOW_SIZE


@dataclass(frozen=True)
class NetworkConfig:
    """
    Configuration for a GeneralisationNetwork.

    - eager_refresh: recompute control-list membership of a touched node's
      descendants as well as the node itself. When False, only the touched
      node is recomputed and descendants may be stale until refreshed.
    - propagate_levels: lift every ancestor when a parent's generalisation
      level is raised. When False, only the direct parent is updated.
    """
    eager_refresh: bool = True
    propagate_levels: bool = False

    def __post_init__(self):
        """Validate configuration."""
        for name in ("eager_refresh", "propagate_levels"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a bool")


@dataclass(frozen=True)
class WindowConfig:
    """Configuration for a SlidingValueWindow (size = windowed tail capacity)."""
    size: int = DEFAULT_WINDOW_SIZE

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ValueError(f"Window size must be an int, got {self.size!r}")
        if self.size <= 0:
            raise ValueError(f"Window size must be > 0, got {self.size}")
