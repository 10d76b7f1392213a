"""
Norms Module

Deontic norms that can be used as nodes of a generalisation network.
A norm has the form IF <precondition> THEN modality(action), where the
modality is an obligation or a prohibition and the action is opaque.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class NormModality(Enum):
    """Obligation / prohibition used to build operators like prh(action)."""
    PROHIBITION = "prh"
    OBLIGATION = "obl"

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AgentAction:
    """
    An action available to the agents of a scenario.

    In a road traffic scenario, "Go", "Stop" or "Turn left" are actions.
    Only its name is meaningful, and only for display.
    """
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Norm:
    """
    A deontic norm with an optional precondition.

    Norms compare and hash by value so equal norms collapse to a single
    network node.
    """
    modality: NormModality
    action: AgentAction
    precondition: Optional[str] = None

    @property
    def operator(self) -> str:
        return f"{self.modality}({self.action})"

    def __str__(self) -> str:
        if self.precondition:
            return f"IF {self.precondition} THEN {self.operator}"
        return self.operator
