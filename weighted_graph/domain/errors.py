"""Typed errors for the weighted graph library.

The core graph never raises for missing nodes or unreachable targets:
mutations silently no-op and searches return an empty result. The errors
below cover what cannot be expressed that way (bad edge costs, unreadable
input files, bad configuration) plus the not-found conditions for callers
that ask the solver adapters to raise instead.

All errors inherit from WeightedGraphError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class WeightedGraphError(Exception):
    """Base error for the library.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(WeightedGraphError):
    """Graph data integrity error."""


@dataclass
class InvalidCostError(GraphError):
    """Edge cost is not a real number.

    Attributes:
        cost: The rejected value
    """

    cost: Any = None


@dataclass
class NegativeCostError(GraphError):
    """Edge cost is negative, which Dijkstra cannot handle.

    Attributes:
        cost: The rejected value
    """

    cost: Any = None


@dataclass
class GraphLoadError(WeightedGraphError):
    """Graph description could not be read or parsed.

    Attributes:
        file_path: Path to the graph file if relevant
        position: Index of the offending token or record, if known
    """

    file_path: Optional[str] = None
    position: Optional[int] = None


@dataclass
class NodeNotFoundError(WeightedGraphError):
    """Node name not present in the graph.

    Attributes:
        node_name: The name that was not found
    """

    node_name: str = ""


@dataclass
class NoPathError(WeightedGraphError):
    """No path exists between the requested nodes.

    Attributes:
        start: Name of the start node
        target: Name of the target node
    """

    start: str = ""
    target: str = ""


@dataclass
class ConfigurationError(WeightedGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
