"""Domain models for the weighted graph.

Nodes are mutable: they own their adjacency list and carry the transient
search marks used by the embedded search-state strategy. Nodes compare by
identity so two distinct nodes are never confused even while a graph is
being edited. Edges and search results are frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Tuple, Union

Cost = Union[int, float]

# Cost reported alongside an empty path when no path exists.
NO_PATH_COST: Cost = -1

DEFAULT_COST: Cost = 1


@dataclass(eq=False)
class Node:
    """A named vertex holding its outgoing edges.

    Attributes:
        name: Unique identifier of the node within its graph
        value: Free payload slot, unused by the algorithms
        edges: Outgoing edges in insertion order (= traversal order)
        visited: Transient search mark
        prev: Transient predecessor set by Dijkstra
    """

    name: str
    value: Any = None
    edges: List[Edge] = field(default_factory=list, repr=False)
    visited: bool = field(default=False, repr=False)
    prev: Optional[Node] = field(default=None, repr=False)

    def visit(self) -> None:
        self.visited = True

    def unvisit(self) -> None:
        self.visited = False

    def is_visited(self) -> bool:
        return self.visited

    def get_all_edges(self) -> List[Edge]:
        """Return a copy of the outgoing edges."""
        return list(self.edges)

    def get_all_neighbours(self) -> List[Node]:
        """Return the destination of every outgoing edge, in edge order."""
        return [edge.to for edge in self.edges]

    def add_neighbour(self, node: Node, cost: Cost = DEFAULT_COST) -> Edge:
        edge = Edge(source=self, to=node, cost=cost)
        self.edges.append(edge)
        return edge

    def get_edge(self, name: str) -> Optional[Edge]:
        """Return the first outgoing edge leading to ``name``."""
        for edge in self.edges:
            if edge.to.name == name:
                return edge
        return None

    def get_neighbour(self, name: str) -> Optional[Node]:
        edge = self.get_edge(name)
        return edge.to if edge is not None else None

    def is_neighbour(self, name: str) -> bool:
        return self.get_edge(name) is not None

    def del_neighbour(self, name: str) -> int:
        """Remove every outgoing edge leading to ``name``.

        Returns:
            The number of edges removed.
        """
        kept = [edge for edge in self.edges if edge.to.name != name]
        removed = len(self.edges) - len(kept)
        self.edges[:] = kept
        return removed


@dataclass(frozen=True, eq=False)
class Edge:
    """A directed, weighted connection between two nodes.

    Attributes:
        source: Node the edge starts from
        to: Destination node
        cost: Numeric weight
    """

    source: Node
    to: Node
    cost: Cost = DEFAULT_COST

    def __repr__(self) -> str:
        return f"Edge({self.source.name!r} -> {self.to.name!r}, cost={self.cost!r})"


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a path search.

    Unpacks into the ``(cost, path)`` pair callers work with:

        cost, path = graph.dijkstra("A", "D")

    Attributes:
        cost: Total cost of the path, or NO_PATH_COST when none was found
        path: Nodes from start to target inclusive, empty when none was found
    """

    cost: Cost = NO_PATH_COST
    path: Tuple[Node, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> SearchResult:
        return cls(cost=NO_PATH_COST, path=())

    @property
    def found(self) -> bool:
        """Check if a path was found."""
        return len(self.path) > 0

    @property
    def is_empty(self) -> bool:
        """Check if no path was found."""
        return not self.found

    @property
    def names(self) -> List[str]:
        """Return the names of the nodes along the path."""
        return [node.name for node in self.path]

    @property
    def num_hops(self) -> int:
        """Return the number of edges along the path."""
        return max(len(self.path) - 1, 0)

    def __iter__(self) -> Iterator[Any]:
        yield self.cost
        yield self.path
