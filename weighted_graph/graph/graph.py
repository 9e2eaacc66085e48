"""Directed, weighted graph with in-place mutation and path searches.

The graph owns its nodes and indexes them by name, keeping insertion
order. Endpoints may be given either as node names or as Node handles;
unknown endpoints make mutations silent no-ops and searches return an
empty SearchResult.
"""

from __future__ import annotations

import logging
import numbers
import sys
from typing import IO, TYPE_CHECKING, Dict, Iterator, List, Literal, Optional, Union

from ..domain.errors import InvalidCostError, NegativeCostError
from ..domain.models import DEFAULT_COST, Cost, Edge, Node, SearchResult
from . import search
from .render import format_graph, format_visited

if TYPE_CHECKING:
    from ..config import GraphConfig

logger = logging.getLogger(__name__)

NodeRef = Union[Node, str]
SearchStateName = Literal["context", "embedded"]


class Graph:
    """A directed, weighted graph.

    Args:
        default_cost: Cost used by ``add_edge`` when none is given.
        allow_negative_costs: Accept negative edge costs. Dijkstra results
            are meaningless on such graphs.
        search_state: ``"context"`` keeps search marks out of the nodes so
            searches are independent; ``"embedded"`` stores them on the
            nodes and requires ``unvisit`` between searches.
    """

    def __init__(
        self,
        default_cost: Cost = DEFAULT_COST,
        allow_negative_costs: bool = False,
        search_state: SearchStateName = "context",
    ) -> None:
        self._nodes: Dict[str, Node] = {}
        self.allow_negative_costs = allow_negative_costs
        self.search_state = search_state
        self.default_cost = self._check_cost(default_cost)

    @classmethod
    def from_config(cls, config: Optional[GraphConfig] = None) -> Graph:
        """Create an empty graph from a GraphConfig."""
        from ..config import get_config

        config = config or get_config().graph
        return cls(
            default_cost=config.default_cost,
            allow_negative_costs=config.allow_negative_costs,
            search_state=config.search_state,
        )

    # ------------------------------------------------------------------ #
    # Nodes
    # ------------------------------------------------------------------ #

    @property
    def nodes(self) -> List[Node]:
        """All nodes in insertion order."""
        return list(self._nodes.values())

    def get_all_nodes(self) -> List[Node]:
        return self.nodes

    def add_node(self, node: NodeRef) -> Node:
        """Add a node, given as a Node or a name.

        If a node with the same name is already present it is returned
        unchanged and nothing is added.
        """
        if isinstance(node, str):
            node = Node(node)
        existing = self._nodes.get(node.name)
        if existing is not None:
            logger.debug("Node already present", extra={"node": node.name})
            return existing
        self._nodes[node.name] = node
        logger.debug("Node added", extra={"node": node.name})
        return node

    def get_node(self, name: str) -> Optional[Node]:
        return self._nodes.get(name)

    def is_node(self, name: str) -> bool:
        return name in self._nodes

    def del_node(self, name: str) -> None:
        """Delete a node and every edge leading to or from it."""
        node = self._nodes.pop(name, None)
        if node is None:
            return
        removed = 0
        for other in self._nodes.values():
            removed += other.del_neighbour(name)
        logger.debug(
            "Node deleted",
            extra={"node": name, "outgoing": len(node.edges), "incoming": removed},
        )

    def get_all_neighbours(self, name: str) -> List[Node]:
        node = self._nodes.get(name)
        if node is None:
            return []
        return node.get_all_neighbours()

    # ------------------------------------------------------------------ #
    # Edges
    # ------------------------------------------------------------------ #

    def get_edge(self, source: str, to: str) -> Optional[Edge]:
        node = self._nodes.get(source)
        if node is None or to not in self._nodes:
            return None
        return node.get_edge(to)

    def is_edge(self, source: str, to: str) -> bool:
        return self.get_edge(source, to) is not None

    def add_edge(
        self, source: str, to: str, cost: Optional[Cost] = None
    ) -> Optional[Edge]:
        """Add a directed edge ``source -> to``.

        Returns:
            The new edge, or None if either endpoint is not in the graph.
            The cost is not checked in that case.

        Raises:
            InvalidCostError: If ``cost`` is not a real number.
            NegativeCostError: If ``cost`` is negative and the graph does
                not allow negative costs.
        """
        origin = self._nodes.get(source)
        dest = self._nodes.get(to)
        if origin is None or dest is None:
            logger.debug(
                "Edge ignored, unknown endpoint",
                extra={"source": source, "to": to},
            )
            return None
        cost = self.default_cost if cost is None else self._check_cost(cost)
        edge = origin.add_neighbour(dest, cost)
        logger.debug("Edge added", extra={"source": source, "to": to, "cost": cost})
        return edge

    def add_undirected_edge(
        self, first: str, second: str, cost: Optional[Cost] = None
    ) -> None:
        """Add ``first -> second`` and ``second -> first`` where missing."""
        if not self.is_edge(first, second):
            self.add_edge(first, second, cost)
        if not self.is_edge(second, first):
            self.add_edge(second, first, cost)

    def del_edge(self, source: str, to: str) -> None:
        """Delete the edge between two nodes, in both directions."""
        if not (self.is_edge(source, to) or self.is_edge(to, source)):
            return
        self._nodes[source].del_neighbour(to)
        self._nodes[to].del_neighbour(source)
        logger.debug("Edge deleted", extra={"source": source, "to": to})

    def _check_cost(self, cost: Cost) -> Cost:
        if isinstance(cost, bool) or not isinstance(cost, numbers.Real):
            raise InvalidCostError(f"Edge cost must be a number, got {cost!r}", cost=cost)
        if cost < 0 and not self.allow_negative_costs:
            raise NegativeCostError(f"Edge cost must not be negative, got {cost!r}", cost=cost)
        return cost

    # ------------------------------------------------------------------ #
    # Searches
    # ------------------------------------------------------------------ #

    def _resolve(self, ref: NodeRef) -> Optional[Node]:
        if isinstance(ref, Node):
            return ref if self._nodes.get(ref.name) is ref else None
        return self._nodes.get(ref)

    def _state(
        self, context: Optional[search.SearchState]
    ) -> search.SearchState:
        if context is not None:
            return context
        if self.search_state == "embedded":
            return search.NodeMarks()
        return search.SearchContext()

    def defise(
        self,
        start: NodeRef,
        target: NodeRef,
        trace: Optional[List[str]] = None,
        context: Optional[search.SearchState] = None,
    ) -> SearchResult:
        """Depth-first search from ``start`` to ``target``.

        Returns the first path found in edge insertion order, which is not
        necessarily the cheapest. See ``search.depth_first_search``.
        """
        origin, dest = self._resolve(start), self._resolve(target)
        if origin is None or dest is None:
            logger.debug(
                "Search endpoint not in graph",
                extra={"start": _name(start), "target": _name(target)},
            )
            return SearchResult.empty()
        return search.depth_first_search(origin, dest, self._state(context), trace)

    def dfs(self, *args, **kwargs) -> SearchResult:
        return self.defise(*args, **kwargs)

    def dijkstra(
        self,
        start: NodeRef,
        target: NodeRef,
        context: Optional[search.SearchState] = None,
    ) -> SearchResult:
        """Cheapest path from ``start`` to ``target``. See ``search.dijkstra``."""
        origin, dest = self._resolve(start), self._resolve(target)
        if origin is None or dest is None:
            logger.debug(
                "Search endpoint not in graph",
                extra={"start": _name(start), "target": _name(target)},
            )
            return SearchResult.empty()
        return search.dijkstra(origin, dest, self._state(context))

    def unvisit(self, start: NodeRef) -> None:
        """Reset the embedded search marks left by a search around ``start``."""
        node = self._resolve(start)
        if node is None:
            return
        reset = search.unvisit(node)
        logger.debug("Search marks cleared", extra={"start": node.name, "reset": reset})

    # ------------------------------------------------------------------ #
    # Output
    # ------------------------------------------------------------------ #

    def render(self) -> str:
        return format_graph(self)

    def print(self, file: Optional[IO[str]] = None) -> None:
        """Print every node and its outgoing edges."""
        (file or sys.stdout).write(format_graph(self))

    def print_visited(self, file: Optional[IO[str]] = None) -> None:
        """Print every node with its embedded visited flag."""
        (file or sys.stdout).write(format_visited(self) + "\n")

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __repr__(self) -> str:
        edges = sum(len(node.edges) for node in self._nodes.values())
        return f"Graph(nodes={len(self._nodes)}, edges={edges})"


def _name(ref: NodeRef) -> str:
    return ref.name if isinstance(ref, Node) else ref
