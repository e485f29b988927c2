"""Tests for domain models."""

import pytest

from hypergraph_nav.models.intent import SiblingIntent
from hypergraph_nav.models.node import NavigationState, RelationNode


def test_navigation_state_is_frozen() -> None:
    state = NavigationState(current_node_id="0", history=("0",))
    with pytest.raises(AttributeError):
        state.current_node_id = "1"  # type: ignore[misc]


def test_focused_parent_is_second_to_last_history_entry() -> None:
    assert NavigationState(current_node_id="0", history=("0",)).focused_parent is None
    state = NavigationState(current_node_id="3", history=("0", "2", "3"))
    assert state.focused_parent == "2"
    assert state.depth == 2


def test_root_node_has_no_parents() -> None:
    root = RelationNode(id="0", display_name="Root", parents=(), children=("1",))
    child = RelationNode(id="1", display_name="Child", parents=("0",), children=())
    assert root.is_root
    assert not child.is_root
    assert child.priority == 0
    assert not child.is_pinned_leaf


def test_intents_compare_by_value() -> None:
    assert SiblingIntent("4") == SiblingIntent("4")
    assert SiblingIntent("4") != SiblingIntent("5")
