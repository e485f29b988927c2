"""Shared test fixtures."""

import pytest

from hypergraph_nav.core.tree.paths import build_path_index
from hypergraph_nav.models.node import Hypergraph, PathIndex
from tests.unit.graphs import CLASSIFICATION, CLASSIFICATION_NAMES, DIAMOND, make_graph


@pytest.fixture
def diamond() -> Hypergraph:
    return make_graph(DIAMOND)


@pytest.fixture
def graph() -> Hypergraph:
    """The classification hierarchy with node 8 pinned."""
    return make_graph(CLASSIFICATION, names=CLASSIFICATION_NAMES, pinned=frozenset({"8"}))


@pytest.fixture
def index(graph: Hypergraph) -> PathIndex:
    return build_path_index(graph)
