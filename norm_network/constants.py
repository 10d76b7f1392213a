# norm_network/constants.py
"""
Norm Network Constants

This module defines constants used throughout the norm network:

GENERALISATION NETWORK
- DEFAULT_GENERALISATION_LEVEL: Level assigned to a freshly added node
- LEVEL_STEP: Minimum level gap between a parent and its child

SLIDING WINDOW
- DEFAULT_WINDOW_SIZE: Number of observations kept in the windowed tails
- EMPTY_WINDOW_VALUE: Value returned by accessors of an empty window
"""


# =============================================================================
# GENERALISATION NETWORK
# =============================================================================

DEFAULT_GENERALISATION_LEVEL = 1   # Leaves start at level 1
LEVEL_STEP = 1                     # level(parent) >= level(child) + LEVEL_STEP

assert DEFAULT_GENERALISATION_LEVEL >= 0, "Generalisation levels are non-negative"


# =============================================================================
# SLIDING WINDOW
# =============================================================================

DEFAULT_WINDOW_SIZE = 50
EMPTY_WINDOW_VALUE = 0.0
