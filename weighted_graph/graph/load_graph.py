"""Graph loading from text and JSON descriptions.

Text format: whitespace separated tokens. The first token is the number
of records ``N``; each record is ``<name> <edgeCount>`` followed by
``edgeCount`` pairs of ``<neighbour> <cost>``:

    3
    A 2 B 1 C 4
    B 1 C 1
    C 0

Nodes are created the first time they are mentioned. Each declared edge
is added in both directions unless that direction already exists.

JSON format: a list of ``{"node": name, "neighbours": [[name, cost], ...]}``
objects. Edges are added as declared unless ``symmetric`` is set.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator, List, Optional, Union

from ..domain.errors import ConfigurationError, GraphError, GraphLoadError
from ..domain.models import Cost
from .graph import Graph

logger = logging.getLogger(__name__)

INPUT_FORMATS = ("text", "json")


def parse_cost(token: str) -> Cost:
    """Parse an edge cost, keeping integral values as ``int``."""
    try:
        return int(token)
    except ValueError:
        return float(token)


class _Tokens:
    """Cursor over the whitespace separated tokens of a text description."""

    def __init__(self, text: str, source: Optional[str]) -> None:
        self._tokens = text.split()
        self._index = 0
        self._source = source

    def next(self, what: str) -> str:
        if self._index >= len(self._tokens):
            raise GraphLoadError(
                f"Unexpected end of input, expected {what}",
                file_path=self._source,
                position=self._index,
            )
        token = self._tokens[self._index]
        self._index += 1
        return token

    def next_count(self, what: str) -> int:
        token = self.next(what)
        try:
            count = int(token)
        except ValueError as e:
            raise GraphLoadError(
                f"Invalid {what} {token!r}",
                file_path=self._source,
                position=self._index - 1,
                cause=e,
            )
        if count < 0:
            raise GraphLoadError(
                f"Invalid {what} {token!r}",
                file_path=self._source,
                position=self._index - 1,
            )
        return count

    def next_cost(self) -> Cost:
        token = self.next("edge cost")
        try:
            return parse_cost(token)
        except ValueError as e:
            raise GraphLoadError(
                f"Invalid edge cost {token!r}",
                file_path=self._source,
                position=self._index - 1,
                cause=e,
            )

    @property
    def position(self) -> int:
        return self._index

    def remaining(self) -> int:
        return len(self._tokens) - self._index


def parse_text(
    text: str,
    graph: Optional[Graph] = None,
    symmetric: bool = True,
    source: Optional[str] = None,
) -> Graph:
    """Build a graph from the text format.

    Args:
        text: The graph description.
        graph: Graph to populate, a new one when omitted.
        symmetric: Add every declared edge in both directions.
        source: File name used in error messages.

    Raises:
        GraphLoadError: If the description is malformed or carries an
            invalid cost.
    """
    graph = graph if graph is not None else Graph()
    tokens = _Tokens(text, source)

    for _ in range(tokens.next_count("node count")):
        name = tokens.next("node name")
        graph.add_node(name)
        for _ in range(tokens.next_count(f"edge count of {name!r}")):
            neighbour = tokens.next(f"neighbour of {name!r}")
            cost = tokens.next_cost()
            graph.add_node(neighbour)
            _add_edge(graph, name, neighbour, cost, symmetric, source, tokens.position)

    if tokens.remaining():
        logger.warning(
            "Trailing tokens ignored",
            extra={"source": source, "count": tokens.remaining()},
        )
    return graph


def parse_json(
    data: Union[str, List[Any]],
    graph: Optional[Graph] = None,
    symmetric: bool = False,
    source: Optional[str] = None,
) -> Graph:
    """Build a graph from the JSON adjacency format.

    Args:
        data: JSON text or the already decoded list.
        graph: Graph to populate, a new one when omitted.
        symmetric: Add every declared edge in both directions.
        source: File name used in error messages.

    Raises:
        GraphLoadError: If the document is not valid JSON or does not have
            the expected structure.
    """
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise GraphLoadError("Invalid JSON", file_path=source, cause=e)
    if not isinstance(data, list):
        raise GraphLoadError("Expected a list of node records", file_path=source)

    graph = graph if graph is not None else Graph()
    for index, (name, neighbours) in enumerate(_json_records(data, source)):
        graph.add_node(name)
        for neighbour, cost in neighbours:
            graph.add_node(neighbour)
            _add_edge(graph, name, neighbour, cost, symmetric, source, index)
    return graph


def _json_records(data: List[Any], source: Optional[str]) -> Iterator[Any]:
    for index, record in enumerate(data):
        try:
            name = record["node"]
            neighbours = [(str(n), c) for n, c in record.get("neighbours", [])]
        except (TypeError, KeyError, ValueError, AttributeError) as e:
            raise GraphLoadError(
                f"Malformed node record #{index}",
                file_path=source,
                position=index,
                cause=e,
            )
        if not isinstance(name, str):
            raise GraphLoadError(
                f"Node name must be a string in record #{index}",
                file_path=source,
                position=index,
            )
        if any(cost is None for _, cost in neighbours):
            raise GraphLoadError(
                f"Missing edge cost in record #{index}",
                file_path=source,
                position=index,
            )
        yield name, neighbours


def _add_edge(
    graph: Graph,
    name: str,
    neighbour: str,
    cost: Cost,
    symmetric: bool,
    source: Optional[str],
    position: int,
) -> None:
    try:
        if symmetric:
            graph.add_undirected_edge(name, neighbour, cost)
        elif not graph.is_edge(name, neighbour):
            graph.add_edge(name, neighbour, cost)
    except GraphError as e:
        raise GraphLoadError(
            f"Invalid edge {name!r} -> {neighbour!r}",
            file_path=source,
            position=position,
            cause=e,
        )


def load_graph(
    path: Union[str, Path],
    input_format: str = "text",
    graph: Optional[Graph] = None,
    symmetric: Optional[bool] = None,
) -> Graph:
    """Load a graph description file.

    Args:
        path: File to read.
        input_format: ``"text"`` or ``"json"``.
        graph: Graph to populate, a new one when omitted.
        symmetric: Override the format's default edge symmetry.

    Raises:
        GraphLoadError: If the file cannot be read or parsed.
        ConfigurationError: If ``input_format`` is unknown.
    """
    if input_format not in INPUT_FORMATS:
        raise ConfigurationError(
            f"Unknown graph format {input_format!r}",
            setting_name="input_format",
            expected_type=" | ".join(INPUT_FORMATS),
        )

    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise GraphLoadError(f"Cannot read {path}", file_path=str(path), cause=e)

    if input_format == "json":
        return parse_json(
            content,
            graph=graph,
            symmetric=False if symmetric is None else symmetric,
            source=str(path),
        )
    return parse_text(
        content,
        graph=graph,
        symmetric=True if symmetric is None else symmetric,
        source=str(path),
    )
