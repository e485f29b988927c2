"""Stateful navigation session around the pure transition function."""

from loguru import logger

from hypergraph_nav.config import DEFAULT_ROOT_ID
from hypergraph_nav.core.tree.navigation import (
    apply_intent,
    create_session,
    get_node_view,
    other_parents_of,
    siblings_of,
)
from hypergraph_nav.core.tree.paths import build_path_index
from hypergraph_nav.models.intent import (
    AscendIntent,
    DescendIntent,
    Intent,
    SiblingIntent,
    StepSiblingIntent,
    SwitchParentIntent,
    UpIntent,
)
from hypergraph_nav.models.node import Hypergraph, NavigationState, NodeId, NodeView, PathIndex
from hypergraph_nav.protocols import TransitionListener


class NavigationSession:
    """One user's walk through a hypergraph.

    Owns the only copy of the session state. Intents are applied one at a
    time; each operation returns True if the focus or history changed and
    False if the intent was ignored.
    """

    def __init__(
        self,
        graph: Hypergraph,
        *,
        root_id: NodeId = DEFAULT_ROOT_ID,
        listener: TransitionListener | None = None,
    ) -> None:
        self.graph = graph
        self.root_id = root_id
        self.listener = listener
        self.path_index: PathIndex = build_path_index(graph, root_id)
        self._state = create_session(graph, root_id)
        logger.debug(
            "Session ready: {} nodes, {} reachable from {!r}",
            len(graph), len(self.path_index), root_id,
        )

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def current_node_id(self) -> NodeId:
        return self._state.current_node_id

    @property
    def history(self) -> tuple[NodeId, ...]:
        return self._state.history

    def apply(self, intent: Intent) -> bool:
        """Apply an intent and notify the listener if anything changed."""
        old = self._state
        new = apply_intent(old, self.graph, self.path_index, intent)
        if new is old or new == old:
            return False
        self._state = new
        logger.debug("{!r}: {} -> {}", intent, "/".join(old.history), "/".join(new.history))
        if self.listener is not None:
            self.listener.on_transition(old, new)
        return True

    def focus_child(self) -> bool:
        return self.apply(DescendIntent())

    def descend_self(self) -> bool:
        """Activate the focused node, same as moving to its first child."""
        return self.apply(DescendIntent())

    def focus_sibling(self, target_id: NodeId) -> bool:
        return self.apply(SiblingIntent(target_id))

    def ascend_to_focused_parent(self, parent_id: NodeId) -> bool:
        return self.apply(AscendIntent(parent_id))

    def switch_parent_context(self, parent_id: NodeId, child_id: NodeId) -> bool:
        return self.apply(SwitchParentIntent(parent_id, child_id))

    def go_up(self) -> bool:
        return self.apply(UpIntent())

    def step_sibling(self, offset: int) -> bool:
        return self.apply(StepSiblingIntent(offset))

    def siblings(self) -> tuple[NodeId, ...]:
        return siblings_of(self._state, self.graph)

    def other_parents(self) -> tuple[NodeId, ...]:
        return other_parents_of(self._state, self.graph)

    def view(self) -> NodeView:
        return get_node_view(self._state, self.graph)
