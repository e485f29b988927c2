"""Protocols for collaborators of a navigation session."""

from typing import Protocol, runtime_checkable

from hypergraph_nav.models.node import NavigationState


@runtime_checkable
class TransitionListener(Protocol):
    """Protocol for drivers that react to state changes.

    Called after the new state is in place. A driver renders the new state
    and only then moves assistive focus to ``new.current_node_id``.
    """

    def on_transition(self, old: NavigationState, new: NavigationState) -> None:
        """Handle a completed transition."""
        ...
