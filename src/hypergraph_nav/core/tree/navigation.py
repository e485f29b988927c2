"""Hypergraph navigation: sessions, intent transitions, siblings and parents.

The focused parent of a node is not a property of the node: a node with
several parents can be reached through any of them. It is recovered from the
session history instead, whose second to last entry is the parent the user
came through. Every transition keeps that history a valid root-to-node path,
falling back to the canonical path when the path taken no longer fits.
"""

from loguru import logger

from hypergraph_nav.config import DEFAULT_ROOT_ID, NO_PARENT_ID
from hypergraph_nav.core.tree.paths import canonical_path
from hypergraph_nav.models.intent import (
    AscendIntent,
    DescendIntent,
    Intent,
    SiblingIntent,
    StepSiblingIntent,
    SwitchParentIntent,
    UpIntent,
)
from hypergraph_nav.models.node import (
    Hypergraph,
    NavigationState,
    NodeId,
    NodeView,
    PathIndex,
)


def create_session(graph: Hypergraph, root_id: NodeId = DEFAULT_ROOT_ID) -> NavigationState:
    """Start a session focused on the root."""
    if root_id not in graph:
        msg = f"Root node {root_id!r} is not in the hypergraph"
        raise KeyError(msg)
    return NavigationState(current_node_id=root_id, history=(root_id,))


def focused_parent(state: NavigationState) -> NodeId | None:
    return state.focused_parent


def siblings_of(state: NavigationState, graph: Hypergraph) -> tuple[NodeId, ...]:
    """Children of the focused parent, or just the current node at the root."""
    parent_id = state.focused_parent
    if parent_id is None:
        return (state.current_node_id,)
    return graph[parent_id].children


def other_parents_of(state: NavigationState, graph: Hypergraph) -> tuple[NodeId, ...]:
    """Parents of the current node other than the focused one."""
    parent_id = state.focused_parent
    node = graph[state.current_node_id]
    return tuple(p for p in node.parents if p != parent_id)


def visible_siblings(state: NavigationState, graph: Hypergraph) -> tuple[NodeId, ...]:
    """Siblings a driver should list: pinned leaves are only listed on their own."""
    if graph[state.current_node_id].is_pinned_leaf:
        return (state.current_node_id,)
    return tuple(
        s for s in siblings_of(state, graph) if s in graph and not graph[s].is_pinned_leaf
    )


def get_node_view(state: NavigationState, graph: Hypergraph) -> NodeView:
    """Snapshot of the focused node and its surroundings."""
    node = graph[state.current_node_id]
    if node.is_pinned_leaf:
        parent_id = None
        other_parents: tuple[NodeId, ...] = ()
    else:
        parent_id = state.focused_parent
        other_parents = other_parents_of(state, graph)

    return NodeView(
        node=node,
        history=state.history,
        focused_parent_id=parent_id,
        siblings=tuple(graph[s] for s in visible_siblings(state, graph)),
        other_parents=tuple(graph[p] for p in other_parents if p in graph),
        children=tuple(graph[c] for c in node.children if c in graph),
    )


def _is_known(graph: Hypergraph, node_id: NodeId | None) -> bool:
    return bool(node_id) and node_id != NO_PARENT_ID and node_id in graph


def _reject(state: NavigationState, intent: Intent, reason: str) -> NavigationState:
    logger.debug("Ignoring {!r} at {!r}: {}", intent, state.current_node_id, reason)
    return state


def _path_to(path_index: PathIndex, root_id: NodeId, node_id: NodeId) -> tuple[NodeId, ...]:
    path = canonical_path(path_index, node_id, root_id=root_id)
    # Degraded lookup for an unreachable node: keep the node at the end
    if path[-1] != node_id:
        path = (*path, node_id)
    return path


def _moved(history: tuple[NodeId, ...]) -> NavigationState:
    return NavigationState(current_node_id=history[-1], history=history)


def apply_intent(
    state: NavigationState,
    graph: Hypergraph,
    path_index: PathIndex,
    intent: Intent,
) -> NavigationState:
    """Compute the state that follows ``intent``.

    Never raises for intents: an intent that refers to an unknown id, uses
    the no-parent sentinel, or does not apply to the current focus is
    ignored and the same ``state`` object is returned.

    Args:
        state: The current session state.
        graph: The hypergraph being navigated.
        path_index: Canonical paths from ``build_path_index``.
        intent: What the user asked for.

    Returns:
        The next state, or ``state`` itself when the intent was rejected.
    """
    current_id = state.current_node_id
    if current_id not in graph:
        return _reject(state, intent, "current node is not in the hypergraph")

    node = graph[current_id]
    history = state.history
    root_id = history[0]

    if isinstance(intent, DescendIntent):
        if not node.children:
            return _reject(state, intent, "no children")
        first_child = node.children[0]
        if not _is_known(graph, first_child):
            return _reject(state, intent, f"unknown child {first_child!r}")
        return _moved((*history, first_child))

    if isinstance(intent, SiblingIntent):
        target_id = intent.target_id
        if not _is_known(graph, target_id):
            return _reject(state, intent, "unknown target")
        parent_id = state.focused_parent
        if parent_id is None:
            return _reject(state, intent, "the root has no siblings")
        if target_id not in graph[parent_id].children:
            return _reject(state, intent, f"not a child of focused parent {parent_id!r}")
        if target_id == current_id:
            return _reject(state, intent, "already focused")
        return _moved((*history[:-1], target_id))

    if isinstance(intent, AscendIntent):
        parent_id = intent.parent_id
        if not _is_known(graph, parent_id):
            return _reject(state, intent, "unknown parent")
        if parent_id not in node.parents:
            return _reject(state, intent, "not a parent of the current node")
        # Normalise even when the parent was already focused: the history may
        # have been assembled through earlier parent switches.
        return _moved(_path_to(path_index, root_id, parent_id))

    if isinstance(intent, SwitchParentIntent):
        parent_id, child_id = intent.parent_id, intent.child_id
        if not _is_known(graph, parent_id) or not _is_known(graph, child_id):
            return _reject(state, intent, "unknown parent or child")
        if child_id != current_id:
            return _reject(state, intent, "child is not the focused node")
        if parent_id not in node.parents:
            return _reject(state, intent, "not a parent of the current node")

        prefix = history[:-2]
        if prefix and parent_id in graph[prefix[-1]].children:
            return _moved((*prefix, parent_id, child_id))
        return _moved((*_path_to(path_index, root_id, parent_id), child_id))

    if isinstance(intent, UpIntent):
        if len(history) < 2:
            return _reject(state, intent, "already at the root")
        if node.is_pinned_leaf:
            return _reject(state, intent, "pinned leaf")
        if len(history) == 2:
            return _moved(history[:1])

        parent_id, grandparent_id = history[-2], history[-3]
        if parent_id in graph[grandparent_id].children:
            return _moved(history[:-1])
        return _moved(_path_to(path_index, root_id, parent_id))

    if isinstance(intent, StepSiblingIntent):
        siblings = visible_siblings(state, graph)
        if current_id not in siblings:
            return _reject(state, intent, "current node is not listed among its siblings")
        index = siblings.index(current_id)
        new_index = max(0, min(index + intent.offset, len(siblings) - 1))
        if new_index == index:
            return _reject(state, intent, "no sibling in that direction")
        return _moved((*history[:-1], siblings[new_index]))

    return _reject(state, intent, "unsupported intent")
