from pathlib import Path

import pytest

from weighted_graph.domain.errors import (
    ConfigurationError,
    GraphLoadError,
    NegativeCostError,
)
from weighted_graph.graph.graph import Graph
from weighted_graph.graph.load_graph import load_graph, parse_cost, parse_json, parse_text


def test_symmetric_round_trip():
    graph = parse_text("1\nA 1 B 5\n")

    assert graph.is_edge("A", "B")
    assert graph.is_edge("B", "A")
    assert graph.get_edge("A", "B").cost == 5
    assert graph.get_edge("B", "A").cost == 5


def test_nodes_created_on_first_mention(data_dir: Path):
    graph = load_graph(data_dir / "01.txt")

    assert [n.name for n in graph.nodes] == ["A", "B", "C", "D"]
    assert [n.name for n in graph.get_all_neighbours("B")] == ["A", "C", "D"]
    assert [n.name for n in graph.get_all_neighbours("D")] == ["B"]


def test_declared_twice_adds_each_direction_once():
    graph = parse_text("2\nA 1 B 3\nB 1 A 3\n")

    assert len(graph.get_node("A").edges) == 1
    assert len(graph.get_node("B").edges) == 1


def test_directed_text_load():
    graph = parse_text("1\nA 1 B 5\n", symmetric=False)

    assert graph.is_edge("A", "B")
    assert not graph.is_edge("B", "A")


def test_float_and_int_costs():
    graph = parse_text("1\nA 2 B 2.5 C 3\n")

    assert graph.get_edge("A", "B").cost == 2.5
    assert isinstance(graph.get_edge("A", "C").cost, int)


def test_parse_cost():
    assert parse_cost("7") == 7
    assert parse_cost("1e3") == 1000.0
    with pytest.raises(ValueError):
        parse_cost("abc")


def test_populates_existing_graph():
    graph = Graph()
    graph.add_node("Z")

    parse_text("1\nA 1 Z 2\n", graph=graph)

    assert graph.is_edge("Z", "A")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "x",
        "2\nA 1 B 1\n",
        "1\nA 1 B\n",
        "1\nA two B 1\n",
        "1\nA 1 B cheap\n",
        "1\nA -1\n",
    ],
)
def test_malformed_text(text):
    with pytest.raises(GraphLoadError):
        parse_text(text, source="bad.txt")


def test_malformed_text_reports_position():
    with pytest.raises(GraphLoadError) as excinfo:
        parse_text("1\nA 1 B cheap\n", source="bad.txt")

    assert excinfo.value.file_path == "bad.txt"
    assert excinfo.value.position == 4


def test_negative_cost_in_file():
    with pytest.raises(GraphLoadError) as excinfo:
        parse_text("1\nA 1 B -4\n")

    assert isinstance(excinfo.value.cause, NegativeCostError)


def test_negative_cost_allowed_by_graph():
    graph = parse_text("1\nA 1 B -4\n", graph=Graph(allow_negative_costs=True))

    assert graph.get_edge("B", "A").cost == -4


def test_trailing_tokens_are_ignored():
    graph = parse_text("1\nA 0\nB 0\n")

    assert [n.name for n in graph.nodes] == ["A"]


def test_parse_json_directed(data_dir: Path):
    graph = load_graph(data_dir / "01.json", input_format="json")

    assert graph.is_edge("A", "B")
    assert not graph.is_edge("B", "A")
    assert graph.dijkstra("A", "D").cost == 3


def test_parse_json_symmetric():
    graph = parse_json('[{"node": "A", "neighbours": [["B", 2]]}]', symmetric=True)

    assert graph.get_edge("B", "A").cost == 2


def test_parse_json_decoded_list():
    graph = parse_json([{"node": "A"}, {"node": "B", "neighbours": [["A", 1]]}])

    assert graph.is_edge("B", "A")
    assert graph.get_all_neighbours("A") == []


@pytest.mark.parametrize(
    "data",
    [
        "not json",
        '{"node": "A"}',
        '[{"name": "A"}]',
        '[{"node": 3}]',
        '[{"node": "A", "neighbours": [["B"]]}]',
        '[{"node": "A", "neighbours": [["B", "far"]]}]',
        '["A"]',
    ],
)
def test_malformed_json(data):
    with pytest.raises(GraphLoadError):
        parse_json(data)


def test_json_null_cost_is_rejected():
    with pytest.raises(GraphLoadError) as excinfo:
        parse_json('[{"node": "A", "neighbours": [["B", null]]}]')

    assert excinfo.value.position == 0
    assert "Missing edge cost" in str(excinfo.value)


def test_load_missing_file(tmp_path: Path):
    with pytest.raises(GraphLoadError) as excinfo:
        load_graph(tmp_path / "missing.txt")

    assert isinstance(excinfo.value.cause, OSError)
    assert excinfo.value.file_path.endswith("missing.txt")


def test_load_unknown_format(data_dir: Path):
    with pytest.raises(ConfigurationError):
        load_graph(data_dir / "01.txt", input_format="yaml")
