"""Screen-reader style navigation of multi-parent hierarchies."""

from hypergraph_nav.core.session import NavigationSession
from hypergraph_nav.core.tree.navigation import (
    apply_intent,
    create_session,
    focused_parent,
    other_parents_of,
    siblings_of,
)
from hypergraph_nav.core.tree.paths import build_path_index
from hypergraph_nav.protocols import TransitionListener

__all__ = [
    "NavigationSession",
    "TransitionListener",
    "apply_intent",
    "build_path_index",
    "create_session",
    "focused_parent",
    "other_parents_of",
    "siblings_of",
]
