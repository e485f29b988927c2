"""Canonical root-to-node paths, computed by breadth-first search."""

from collections import deque

from loguru import logger

from hypergraph_nav.config import DEFAULT_ROOT_ID
from hypergraph_nav.models.node import Hypergraph, NodeId, PathIndex


def build_path_index(graph: Hypergraph, root_id: NodeId = DEFAULT_ROOT_ID) -> PathIndex:
    """Compute the shortest path from the root to every reachable node.

    A node with several parents gets the path through whichever parent BFS
    discovers first, so the tie is decided by ``children`` order. Nodes that
    cannot be reached from the root are left out.

    Args:
        graph: The hypergraph, keyed by node id.
        root_id: Where the traversal starts.

    Returns:
        Mapping of node id to its path, root and node inclusive.
    """
    paths: PathIndex = {}
    if root_id not in graph:
        logger.warning("Root {!r} is not in the hypergraph, path index is empty", root_id)
        return paths

    todo: deque[tuple[NodeId, tuple[NodeId, ...]]] = deque([(root_id, (root_id,))])
    while todo:
        node_id, path = todo.popleft()
        if node_id in paths:
            continue
        paths[node_id] = path

        for child_id in graph[node_id].children:
            if child_id not in graph:
                logger.warning("Node {!r} lists unknown child {!r}, skipping", node_id, child_id)
                continue
            if child_id not in paths:
                todo.append((child_id, (*path, child_id)))

    unreachable = len(graph) - len(paths)
    if unreachable:
        logger.debug("{} nodes are not reachable from {!r}", unreachable, root_id)
    return paths


def canonical_path(
    index: PathIndex,
    node_id: NodeId,
    *,
    root_id: NodeId = DEFAULT_ROOT_ID,
) -> tuple[NodeId, ...]:
    """Look up the canonical path to a node, degrading to ``(root_id,)``."""
    path = index.get(node_id)
    if path is None:
        logger.warning("No path from {!r} to {!r}, falling back to the root", root_id, node_id)
        return (root_id,)
    return path
