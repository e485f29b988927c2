"""Small hypergraphs shared by the tests."""

from hypergraph_nav.models.node import Hypergraph, RelationNode


def make_graph(
    children: dict[str, list[str]],
    *,
    names: dict[str, str] | None = None,
    pinned: frozenset[str] = frozenset(),
) -> Hypergraph:
    """Build a hypergraph from an adjacency list; parents follow key order."""
    names = names or {}
    ids: list[str] = []
    for parent_id, kids in children.items():
        for node_id in (parent_id, *kids):
            if node_id not in ids:
                ids.append(node_id)

    parents: dict[str, list[str]] = {node_id: [] for node_id in ids}
    for parent_id, kids in children.items():
        for child_id in kids:
            parents[child_id].append(parent_id)

    return {
        node_id: RelationNode(
            id=node_id,
            display_name=names.get(node_id, f"Node {node_id}"),
            parents=tuple(parents[node_id]),
            children=tuple(children.get(node_id, [])),
            is_pinned_leaf=node_id in pinned,
        )
        for node_id in ids
    }


# Node 3 has parents 1 and 2.
DIAMOND = {"0": ["1", "2"], "1": ["3"], "2": ["3"]}

# A small classification hierarchy:
#   3 Coral has parents 1 Rocks and 2 Animals
#   4 Sponge has parents 1 Rocks and 7 Reef, and 7 hangs below 5 Habitats
#   10 Symbiont has parents 6 Fish, 9 Polyp and 12 Larva
#   8 is a pinned leaf
CLASSIFICATION = {
    "0": ["1", "2", "5"],
    "1": ["3", "4"],
    "2": ["3", "6"],
    "5": ["7"],
    "6": ["10"],
    "7": ["4"],
    "3": ["8", "9", "12"],
    "9": ["10"],
    "12": ["10"],
}

CLASSIFICATION_NAMES = {
    "0": "Benthic",
    "1": "Rocks",
    "2": "Animals",
    "3": "Coral",
    "4": "Sponge",
    "5": "Habitats",
    "6": "Fish",
    "7": "Reef",
    "8": "Coral hangs on rock",
    "9": "Polyp",
    "10": "Symbiont",
    "12": "Larva",
}
