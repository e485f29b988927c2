"""Domain models for hypergraph navigation."""

from dataclasses import dataclass

NodeId = str


@dataclass(frozen=True)
class RelationNode:
    """A single node in a hypergraph. A node may have several parents."""

    id: NodeId
    display_name: str
    parents: tuple[NodeId, ...]
    children: tuple[NodeId, ...]
    description: str = ""
    priority: float = 0
    is_pinned_leaf: bool = False

    @property
    def is_root(self) -> bool:
        return not self.parents


Hypergraph = dict[NodeId, RelationNode]

# Canonical root-to-node path for every node reachable from the root.
PathIndex = dict[NodeId, tuple[NodeId, ...]]


@dataclass(frozen=True)
class NavigationState:
    """The focused node and the path taken to reach it.

    ``history`` always starts at the root and ends at ``current_node_id``;
    each entry is a child of the one before it.
    """

    current_node_id: NodeId
    history: tuple[NodeId, ...]

    @property
    def focused_parent(self) -> NodeId | None:
        """Parent through which the current node was reached (None at the root)."""
        if len(self.history) < 2:
            return None
        return self.history[-2]

    @property
    def depth(self) -> int:
        return len(self.history) - 1


@dataclass(frozen=True)
class NodeView:
    """The focused node with the context a driver needs to present it."""

    node: RelationNode
    history: tuple[NodeId, ...]
    focused_parent_id: NodeId | None
    siblings: tuple[RelationNode, ...]
    other_parents: tuple[RelationNode, ...]
    children: tuple[RelationNode, ...]
