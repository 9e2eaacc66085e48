"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph core and the adapters that
load graphs and solve paths, so either side can be swapped in tests.
"""

from .graph import GraphRepositoryPort, PathSolverPort

__all__ = [
    "GraphRepositoryPort",
    "PathSolverPort",
]
