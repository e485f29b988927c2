"""Configuration constants for hypergraph-nav."""

import os
from pathlib import Path

# Id of the root node when the caller does not name one.
DEFAULT_ROOT_ID: str = "0"

# Sentinel a driver passes when there is no focused parent (focus on the root).
NO_PARENT_ID: str = "-1"

# Label substrings that mark a pinned leaf when the input does not say so explicitly.
PINNED_LEAF_MARKERS: tuple[str, ...] = ("hangs", "anchored")

# Environment variable naming a hypergraph JSON file.
GRAPH_FILE_ENV: str = "HYPERNAV_GRAPH"

# Hypergraph file locations. First file found is used.
GRAPH_FILES: list[Path] = [
    Path("~/.config/hypernav/graph.json").expanduser(),
    Path("~/.local/share/hypernav/graph.json").expanduser(),
]


def resolve_graph_file() -> Path | None:
    """Return the hypergraph file to load by default, or None if none exists."""
    from_env = os.environ.get(GRAPH_FILE_ENV)
    if from_env:
        return Path(from_env).expanduser()
    for candidate in GRAPH_FILES:
        if candidate.is_file():
            return candidate
    return None
