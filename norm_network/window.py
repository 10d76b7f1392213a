"""
Sliding Value Window Module

Rolling window over a stream of scalar observations (typically the fitness
of a norm). Four series are kept for the full history and, in lockstep,
for the last N observations:

1. the punctual values;
2. the moving average of the windowed punctual values;
3. the top boundary: moving average + standard deviation;
4. the bottom boundary: moving average - standard deviation.

The standard deviation is the RMS deviation of the windowed punctual values
from the moving average just appended.
"""

import logging
from collections import deque
from typing import Deque, List, Optional, Tuple

import numpy as np

from .config import WindowConfig
from .constants import EMPTY_WINDOW_VALUE

logger = logging.getLogger(__name__)


class SlidingValueWindow:
    """
    Sliding window of a fitness range.

    Accessors of the current values return 0.0 until the first observation
    has been added.
    """

    def __init__(self, size: Optional[int] = None, config: Optional[WindowConfig] = None):
        if config is None:
            config = WindowConfig() if size is None else WindowConfig(size=size)
        elif size is not None and size != config.size:
            raise ValueError(f"Conflicting window sizes: {size} vs {config.size}")

        self.config = config
        self._has_new_value = False

        self._punctual_values: List[float] = []
        self._moving_average: List[float] = []
        self._top_boundary: List[float] = []
        self._bottom_boundary: List[float] = []

        # Bounded deques evict their oldest element on append
        self._sliding_punctual_values: Deque[float] = deque(maxlen=config.size)
        self._sliding_moving_average: Deque[float] = deque(maxlen=config.size)
        self._sliding_top_boundary: Deque[float] = deque(maxlen=config.size)
        self._sliding_bottom_boundary: Deque[float] = deque(maxlen=config.size)

    @property
    def size(self) -> int:
        return self.config.size

    def add_value(self, value: float) -> None:
        """
        Add an observation to the window.

        Appends the value, then the moving average and the two boundaries
        computed over the last N punctual values (the new one included).
        """
        value = float(value)
        self._has_new_value = True

        self._append(self._punctual_values, self._sliding_punctual_values, value)

        avg = self.get_avg()
        self._append(self._moving_average, self._sliding_moving_average, avg)

        std_dev = self._get_std_dev()
        self._append(self._top_boundary, self._sliding_top_boundary, avg + std_dev)
        self._append(self._bottom_boundary, self._sliding_bottom_boundary, avg - std_dev)

    # -------------------------------------------------------------------------
    # Full history series
    # -------------------------------------------------------------------------

    def get_punctual_values(self) -> Tuple[float, ...]:
        return tuple(self._punctual_values)

    def get_average(self) -> Tuple[float, ...]:
        return tuple(self._moving_average)

    def get_top_boundary(self) -> Tuple[float, ...]:
        return tuple(self._top_boundary)

    def get_bottom_boundary(self) -> Tuple[float, ...]:
        return tuple(self._bottom_boundary)

    # -------------------------------------------------------------------------
    # Windowed series (last N values)
    # -------------------------------------------------------------------------

    def get_sliding_punctual_values(self) -> Tuple[float, ...]:
        return tuple(self._sliding_punctual_values)

    def get_sliding_average(self) -> Tuple[float, ...]:
        return tuple(self._sliding_moving_average)

    def get_sliding_top_boundary(self) -> Tuple[float, ...]:
        return tuple(self._sliding_top_boundary)

    def get_sliding_bottom_boundary(self) -> Tuple[float, ...]:
        return tuple(self._sliding_bottom_boundary)

    # -------------------------------------------------------------------------
    # Current values
    # -------------------------------------------------------------------------

    def get_current_punctual_value(self) -> float:
        return self._last(self._sliding_punctual_values)

    def get_current_average(self) -> float:
        return self._last(self._sliding_moving_average)

    def get_current_top_boundary(self) -> float:
        return self._last(self._sliding_top_boundary)

    def get_current_bottom_boundary(self) -> float:
        return self._last(self._sliding_bottom_boundary)

    def get_num_sliding_punctual_values(self) -> int:
        return len(self._sliding_punctual_values)

    def get_num_punctual_values(self) -> int:
        return len(self._punctual_values)

    def get_avg(self) -> float:
        """Mean of the windowed punctual values (0.0 for an empty window)."""
        if not self._sliding_punctual_values:
            return EMPTY_WINDOW_VALUE
        return float(np.mean(self._sliding_punctual_values))

    # -------------------------------------------------------------------------
    # Plotting flag
    # -------------------------------------------------------------------------

    @property
    def has_new_value(self) -> bool:
        """True if a value was added since the flag was last cleared."""
        return self._has_new_value

    def set_new_value(self, new_value: bool) -> None:
        self._has_new_value = bool(new_value)

    def reset(self) -> None:
        """Clear every series and the new value flag."""
        for series in (self._punctual_values, self._moving_average,
                       self._top_boundary, self._bottom_boundary,
                       self._sliding_punctual_values, self._sliding_moving_average,
                       self._sliding_top_boundary, self._sliding_bottom_boundary):
            series.clear()
        self._has_new_value = False
        logger.debug("Window of size %d reset", self.size)

    def __len__(self) -> int:
        return len(self._punctual_values)

    def __repr__(self) -> str:
        return (f"SlidingValueWindow(size={self.size}, "
                f"values={len(self._punctual_values)}, "
                f"average={self.get_current_average():.4f})")

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    @staticmethod
    def _append(series: List[float], sliding: Deque[float], value: float) -> None:
        series.append(value)
        sliding.append(value)

    @staticmethod
    def _last(sliding: Deque[float]) -> float:
        if sliding:
            return sliding[-1]
        return EMPTY_WINDOW_VALUE

    def _get_std_dev(self) -> float:
        """
        Standard deviation of the windowed punctual values.

        Deviations are taken from the last windowed moving average, i.e. the
        average appended for the current observation.
        """
        values = np.asarray(self._sliding_punctual_values, dtype=float)
        if values.size == 0:
            return EMPTY_WINDOW_VALUE
        deviations = values - self._sliding_moving_average[-1]
        return float(np.sqrt(np.mean(deviations ** 2)))
