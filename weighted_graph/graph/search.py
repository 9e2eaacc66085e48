"""Path searches over the node/edge model.

Two searches are provided:

- ``depth_first_search``: walks edges in insertion order, never re-enters a
  visited node and returns the first path it discovers together with the
  sum of its edge costs. The path is not necessarily the cheapest one.
- ``dijkstra``: classic shortest-path search over non-negative costs
  using a binary heap keyed on the accumulated cost.

Both record their progress (visited marks, predecessor links) through a
``SearchState``. ``SearchContext`` keeps that state private to one search;
``NodeMarks`` writes it onto the nodes themselves, in which case
``unvisit`` must be called before the next search over the same region.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Protocol, Set, Tuple

from ..domain.models import Cost, Edge, Node, SearchResult

logger = logging.getLogger(__name__)


class SearchState(Protocol):
    """Visited / predecessor bookkeeping for one search."""

    def is_visited(self, node: Node) -> bool:
        ...

    def visit(self, node: Node) -> None:
        ...

    def get_prev(self, node: Node) -> Optional[Node]:
        ...

    def set_prev(self, node: Node, prev: Optional[Node]) -> None:
        ...


@dataclass
class SearchContext:
    """Search state held outside the nodes.

    A fresh context per search leaves the graph untouched, so searches
    need no ``unvisit`` and several contexts may walk the same graph.
    """

    _visited: Set[int] = field(default_factory=set, repr=False)
    _prev: Dict[int, Optional[Node]] = field(default_factory=dict, repr=False)

    def is_visited(self, node: Node) -> bool:
        return id(node) in self._visited

    def visit(self, node: Node) -> None:
        self._visited.add(id(node))

    def get_prev(self, node: Node) -> Optional[Node]:
        return self._prev.get(id(node))

    def set_prev(self, node: Node, prev: Optional[Node]) -> None:
        self._prev[id(node)] = prev

    @property
    def visited_count(self) -> int:
        return len(self._visited)


class NodeMarks:
    """Search state embedded in the nodes' ``visited`` and ``prev`` fields."""

    def is_visited(self, node: Node) -> bool:
        return node.is_visited()

    def visit(self, node: Node) -> None:
        node.visit()

    def get_prev(self, node: Node) -> Optional[Node]:
        return node.prev

    def set_prev(self, node: Node, prev: Optional[Node]) -> None:
        node.prev = prev


def depth_first_search(
    start: Node,
    target: Node,
    state: Optional[SearchState] = None,
    trace: Optional[List[str]] = None,
) -> SearchResult:
    """Find the first path from ``start`` to ``target`` in edge order.

    Every node entered is marked visited and is never entered again, even
    through another route. On a dead end the walk backtracks and tries the
    next edge of the previous node.

    Args:
        start: Node the walk begins at.
        target: Node to reach.
        state: Search state, a fresh SearchContext when omitted.
        trace: Optional list receiving the walk order: each entered node's
            name, plus the current node's name again after every edge that
            did not lead to the target.

    Returns:
        SearchResult with the discovered path and the sum of its edge
        costs, or an empty result if ``target`` cannot be reached.
    """
    state = state if state is not None else SearchContext()

    if state.is_visited(start):
        return SearchResult.empty()
    state.visit(start)
    if trace is not None:
        trace.append(start.name)
    if start is target:
        return SearchResult(cost=0, path=(start,))

    path: List[Node] = [start]
    costs: List[Cost] = [0]
    pending: List[Iterator[Edge]] = [iter(start.edges)]

    while pending:
        edge = next(pending[-1], None)
        if edge is None:
            pending.pop()
            path.pop()
            costs.pop()
            if trace is not None and path:
                trace.append(path[-1].name)
            continue

        child = edge.to
        if state.is_visited(child):
            if trace is not None:
                trace.append(path[-1].name)
            continue

        state.visit(child)
        if trace is not None:
            trace.append(child.name)
        path.append(child)
        costs.append(costs[-1] + edge.cost)
        if child is target:
            break
        pending.append(iter(child.edges))

    if trace is not None:
        logger.debug("Depth-first walk", extra={"trace": list(trace)})

    if not path:
        return SearchResult.empty()
    return SearchResult(cost=costs[-1], path=tuple(path))


def dijkstra(
    start: Node,
    target: Node,
    state: Optional[SearchState] = None,
) -> SearchResult:
    """Compute the cheapest path from ``start`` to ``target``.

    Edge costs must be non-negative. A node's predecessor is fixed the
    first time the node is popped from the frontier; later entries for the
    same node are skipped.

    Args:
        start: Node the search begins at.
        target: Node to reach.
        state: Search state, a fresh SearchContext when omitted.

    Returns:
        SearchResult with the cheapest path and its total cost, or an
        empty result if ``target`` cannot be reached.
    """
    state = state if state is not None else SearchContext()

    counter = itertools.count()
    frontier: List[Tuple[Cost, int, Optional[Node], Node]] = [
        (0, next(counter), None, start)
    ]
    reached: Optional[Cost] = None

    while frontier:
        cost, _, prev, node = heapq.heappop(frontier)
        if state.is_visited(node):
            continue

        state.visit(node)
        state.set_prev(node, prev)

        if node is target:
            reached = cost
            break

        for edge in node.edges:
            if not state.is_visited(edge.to):
                heapq.heappush(
                    frontier, (cost + edge.cost, next(counter), node, edge.to)
                )

    if reached is None:
        return SearchResult.empty()

    path: List[Node] = [target]
    current = target
    while current is not start:
        current = state.get_prev(current)  # type: ignore[assignment]
        path.append(current)
    path.reverse()

    return SearchResult(cost=reached, path=tuple(path))


def unvisit(start: Node) -> int:
    """Clear the embedded search marks reachable from ``start``.

    The walk stops at nodes that are not visited, so it only touches the
    region marked by the previous search. Calling it again right away
    changes nothing.

    Returns:
        The number of nodes that were reset.
    """
    reset = 0
    stack = [start]
    while stack:
        node = stack.pop()
        if not node.is_visited():
            continue
        node.unvisit()
        node.prev = None
        reset += 1
        stack.extend(reversed(node.get_all_neighbours()))
    return reset
