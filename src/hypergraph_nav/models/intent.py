"""Navigation intents: abstract requests decoupled from any input device."""

from dataclasses import dataclass

from hypergraph_nav.models.node import NodeId


@dataclass(frozen=True)
class DescendIntent:
    """Enter the focused node: move to its first child."""


@dataclass(frozen=True)
class SiblingIntent:
    """Move laterally to another child of the focused parent."""

    target_id: NodeId


@dataclass(frozen=True)
class AscendIntent:
    """Move up to the parent that is already in focus."""

    parent_id: NodeId


@dataclass(frozen=True)
class SwitchParentIntent:
    """Make a different parent of ``child_id`` the focused parent."""

    parent_id: NodeId
    child_id: NodeId


@dataclass(frozen=True)
class UpIntent:
    """Move up one level along the path taken, repairing it if needed."""


@dataclass(frozen=True)
class StepSiblingIntent:
    """Move ``offset`` positions through the visible siblings, clamped at the ends."""

    offset: int


Intent = (
    DescendIntent
    | SiblingIntent
    | AscendIntent
    | SwitchParentIntent
    | UpIntent
    | StepSiblingIntent
)
