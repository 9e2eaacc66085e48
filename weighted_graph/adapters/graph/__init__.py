"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- FileGraphRepository: Loads a graph from a text or JSON file
- DepthFirstPathSolver: First path found by depth-first search
- DijkstraPathSolver: Cheapest path using Dijkstra's algorithm
"""

from .file_repository import FileGraphRepository
from .solvers import DepthFirstPathSolver, DijkstraPathSolver

__all__ = ["FileGraphRepository", "DepthFirstPathSolver", "DijkstraPathSolver"]
