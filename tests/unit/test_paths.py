"""Tests for the canonical path index."""

from hypergraph_nav.core.tree.paths import build_path_index, canonical_path
from hypergraph_nav.models.node import Hypergraph, NodeId, PathIndex, RelationNode
from tests.unit.graphs import make_graph


def _all_paths(graph: Hypergraph, node_id: NodeId, path: tuple[NodeId, ...]) -> list[tuple]:
    found = [path]
    for child_id in graph[node_id].children:
        found.extend(_all_paths(graph, child_id, (*path, child_id)))
    return found


def test_root_path_is_just_the_root(index: PathIndex) -> None:
    assert index["0"] == ("0",)


def test_every_node_gets_a_shortest_path(graph: Hypergraph, index: PathIndex) -> None:
    shortest: dict[NodeId, int] = {}
    for path in _all_paths(graph, "0", ("0",)):
        shortest[path[-1]] = min(shortest.get(path[-1], len(path)), len(path))

    assert set(index) == set(graph)
    for node_id, path in index.items():
        assert path[0] == "0"
        assert path[-1] == node_id
        assert len(path) == shortest[node_id]
        for parent_id, child_id in zip(path, path[1:]):
            assert child_id in graph[parent_id].children


def test_first_discovered_parent_wins(index: PathIndex) -> None:
    # 3 is reachable through 1 and 2 at the same depth; 1 comes first in the root's children.
    assert index["3"] == ("0", "1", "3")
    # 4 hangs below 1 and below 5/7; the shorter route through 1 wins.
    assert index["4"] == ("0", "1", "4")
    # 10 is reachable through 6 at depth 3, shallower than through 9 or 12.
    assert index["10"] == ("0", "2", "6", "10")


def test_diamond_paths(diamond: Hypergraph) -> None:
    index = build_path_index(diamond, "0")
    assert index == {
        "0": ("0",),
        "1": ("0", "1"),
        "2": ("0", "2"),
        "3": ("0", "1", "3"),
    }


def test_unreachable_nodes_are_left_out() -> None:
    graph = make_graph({"0": ["1"], "9": ["8"]})
    index = build_path_index(graph, "0")
    assert set(index) == {"0", "1"}


def test_unknown_children_are_skipped() -> None:
    graph = {
        "0": RelationNode(id="0", display_name="Root", parents=(), children=("1", "ghost")),
        "1": RelationNode(id="1", display_name="One", parents=("0",), children=()),
    }
    assert build_path_index(graph) == {"0": ("0",), "1": ("0", "1")}


def test_missing_root_gives_empty_index(diamond: Hypergraph) -> None:
    assert build_path_index(diamond, "nope") == {}


def test_canonical_path_falls_back_to_root(index: PathIndex) -> None:
    assert canonical_path(index, "7") == ("0", "5", "7")
    assert canonical_path(index, "missing") == ("0",)
    assert canonical_path({}, "x", root_id="r") == ("r",)
