"""Domain layer - Core graph models and errors.

This module contains the node, edge and search result models and the
typed errors used throughout the library. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    GraphLoadError,
    InvalidCostError,
    NegativeCostError,
    NodeNotFoundError,
    NoPathError,
    WeightedGraphError,
)
from .models import DEFAULT_COST, NO_PATH_COST, Cost, Edge, Node, SearchResult

__all__ = [
    # Models
    "Node",
    "Edge",
    "SearchResult",
    "Cost",
    "DEFAULT_COST",
    "NO_PATH_COST",
    # Errors
    "WeightedGraphError",
    "GraphError",
    "InvalidCostError",
    "NegativeCostError",
    "GraphLoadError",
    "NodeNotFoundError",
    "NoPathError",
    "ConfigurationError",
]
