"""
Network Edges

Edge kinds and the edge value type carried by the typed edge graph.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class EdgeKind(Enum):
    """
    Relationship kinds between two nodes of a norm network.

    - GENERALISATION: source is more specific, destination more general
    - SUBSTITUTABILITY: only one of the two norms is needed to avoid conflicts
    - COMPLEMENTARITY: both norms are needed to avoid conflicts
    - CONCURRENCY, REGULATION, INCLUSION: carried uninterpreted

    Only GENERALISATION is interpreted by the generalisation network.
    """
    GENERALISATION = "generalisation"
    SUBSTITUTABILITY = "substitutability"
    COMPLEMENTARITY = "complementarity"
    CONCURRENCY = "concurrency"
    REGULATION = "regulation"
    INCLUSION = "inclusion"


@dataclass(frozen=True)
class NetworkEdge:
    """A directed, kind-tagged edge from source to destination."""
    source: Any
    destination: Any
    kind: EdgeKind

    def __str__(self) -> str:
        return f"{self.source} -[{self.kind.value}]-> {self.destination}"
