"""Parse hypergraph JSON into domain models."""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from hypergraph_nav.config import PINNED_LEAF_MARKERS
from hypergraph_nav.models.node import Hypergraph, NodeId, RelationNode


def _ids(raw: list[Any], *, field: str, node_id: NodeId) -> tuple[NodeId, ...]:
    if not isinstance(raw, list):
        msg = f"Node {node_id!r}: {field!r} must be a list, got {type(raw).__name__}"
        raise ValueError(msg)
    return tuple(str(i) for i in raw)


def _text(raw: dict[str, Any], key: str, *, node_id: NodeId) -> str:
    value = raw.get(key) or ""
    if not isinstance(value, str):
        msg = f"Node {node_id!r}: {key!r} must be a string, got {type(value).__name__}"
        raise ValueError(msg)
    return value


def _parse_node(
    raw: Any,
    *,
    pinned_markers: tuple[str, ...],
    key: str | None = None,
) -> RelationNode:
    if not isinstance(raw, dict):
        msg = f"Node must be an object, got {type(raw).__name__}: {raw!r}"
        raise ValueError(msg)
    if "id" in raw:
        node_id = str(raw["id"])
        if key is not None and key != node_id:
            msg = f"Node keyed {key!r} has id {node_id!r}"
            raise ValueError(msg)
    elif key is not None:
        node_id = key
    else:
        msg = f"Node without 'id': {raw!r}"
        raise ValueError(msg)
    display_name = _text(raw, "displayName", node_id=node_id)
    description = _text(raw, "description", node_id=node_id)

    pinned = raw.get("isPinnedLeaf")
    if pinned is None:
        pinned = any(marker in display_name for marker in pinned_markers)

    return RelationNode(
        id=node_id,
        display_name=display_name,
        description=description,
        parents=_ids(raw.get("parents", []), field="parents", node_id=node_id),
        children=_ids(raw.get("children", []), field="children", node_id=node_id),
        priority=raw.get("priority", 0),
        is_pinned_leaf=bool(pinned),
    )


def parse_hypergraph_data(
    data: list[dict[str, Any]] | dict[str, dict[str, Any]],
    *,
    pinned_markers: tuple[str, ...] = PINNED_LEAF_MARKERS,
) -> Hypergraph:
    """Parse raw hypergraph data into a mapping of id to node.

    Args:
        data: Either a list of node dicts or a dict keyed by node id, where
            a node may leave out its ``id`` but must not contradict its key. Node
            dicts use the keys ``id``, ``displayName``, ``description``,
            ``parents``, ``children``, ``priority`` and ``isPinnedLeaf``.
        pinned_markers: Label substrings that mark a pinned leaf when
            ``isPinnedLeaf`` is not given. Pass ``()`` to disable.

    Returns:
        The hypergraph, in input order.
    """
    raw_nodes: list[tuple[str | None, Any]]
    if isinstance(data, dict):
        raw_nodes = [(str(key), raw) for key, raw in data.items()]
    elif isinstance(data, list):
        raw_nodes = [(None, raw) for raw in data]
    else:
        msg = f"Expected a list or mapping of nodes, got {type(data).__name__}"
        raise ValueError(msg)

    graph: Hypergraph = {}
    for key, raw in raw_nodes:
        node = _parse_node(raw, pinned_markers=pinned_markers, key=key)
        if node.id in graph:
            msg = f"Duplicate node id: {node.id!r}"
            raise ValueError(msg)
        graph[node.id] = node

    pinned = sum(1 for n in graph.values() if n.is_pinned_leaf)
    logger.debug("Parsed hypergraph: {} nodes ({} pinned leaves)", len(graph), pinned)
    return graph


def load_hypergraph(path: Path, **kwargs: Any) -> Hypergraph:
    """Read a hypergraph JSON file."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return parse_hypergraph_data(data, **kwargs)


def find_root_id(graph: Hypergraph) -> NodeId:
    """Return the id of the only node without parents."""
    roots = [node_id for node_id, node in graph.items() if node.is_root]
    if len(roots) != 1:
        msg = f"Expected exactly one root node, found {len(roots)}: {roots[:5]!r}"
        raise ValueError(msg)
    return roots[0]
