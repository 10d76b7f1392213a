"""
Norm Network - Generalisation Network Core for Norm Synthesis

A directed acyclic graph of norms linked by generalisation relationships,
with the derived active / represented views a synthesis loop reads each
tick, and the sliding statistical windows used to score norm fitness.
"""

__version__ = "0.1.0"

import logging

from .config import NetworkConfig, WindowConfig
from .edges import EdgeKind, NetworkEdge
from .errors import (
    NetworkError,
    UnknownNodeError,
    EndpointMissingError,
    DuplicateEdgeError,
    GeneralisationCycleError,
)
from .states import NodeState, NodeStateStore
from .graph import TypedEdgeGraph
from .generalisation import GeneralisationNetwork
from .window import SlidingValueWindow
from .evaluation import FitnessTracker
from .norms import NormModality, AgentAction, Norm
from .logging_setup import LoggerConfig, setup_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NetworkConfig",
    "WindowConfig",
    "EdgeKind",
    "NetworkEdge",
    "NetworkError",
    "UnknownNodeError",
    "EndpointMissingError",
    "DuplicateEdgeError",
    "GeneralisationCycleError",
    "NodeState",
    "NodeStateStore",
    "TypedEdgeGraph",
    "GeneralisationNetwork",
    "SlidingValueWindow",
    "FitnessTracker",
    "NormModality",
    "AgentAction",
    "Norm",
    "LoggerConfig",
    "setup_logging",
]
