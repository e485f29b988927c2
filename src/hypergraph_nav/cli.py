"""CLI for hypergraph-nav (inspect path indexes, replay navigation)."""

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from loguru import logger

from hypergraph_nav.config import resolve_graph_file
from hypergraph_nav.core.importer.json_reader import find_root_id, load_hypergraph
from hypergraph_nav.core.session import NavigationSession
from hypergraph_nav.core.tree.paths import build_path_index
from hypergraph_nav.logging_config import configure_logging
from hypergraph_nav.models.intent import (
    AscendIntent,
    DescendIntent,
    Intent,
    SiblingIntent,
    StepSiblingIntent,
    SwitchParentIntent,
    UpIntent,
)
from hypergraph_nav.models.node import Hypergraph, NavigationState, NodeView

app = typer.Typer(help="Hypergraph navigation: inspect canonical paths and replay intents.")

_INTENT_HELP = (
    "Intents: down, up, next, prev, sibling:ID, ascend:PARENT, switch:PARENT:CHILD"
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every transition"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def parse_intent(token: str) -> Intent:
    """Turn a textual intent such as ``switch:2:3`` into an Intent."""
    name, *args = token.split(":")
    simple: dict[str, Intent] = {
        "down": DescendIntent(),
        "up": UpIntent(),
        "next": StepSiblingIntent(1),
        "prev": StepSiblingIntent(-1),
    }
    if name in simple and not args:
        return simple[name]
    if name == "sibling" and len(args) == 1:
        return SiblingIntent(args[0])
    if name == "ascend" and len(args) == 1:
        return AscendIntent(args[0])
    if name == "switch" and len(args) == 2:
        return SwitchParentIntent(args[0], args[1])
    msg = f"Cannot parse intent {token!r}. {_INTENT_HELP}"
    raise ValueError(msg)


class _LogListener:
    """Logs every transition of the replayed session."""

    def on_transition(self, old: NavigationState, new: NavigationState) -> None:
        logger.debug("{} -> {}", "/".join(old.history), "/".join(new.history))


def _load(graph_file: Path | None) -> Hypergraph:
    path = graph_file or resolve_graph_file()
    if path is None:
        logger.error("No hypergraph file given and none found. Pass one or set HYPERNAV_GRAPH.")
        raise typer.Exit(1)
    if not path.exists():
        logger.error("Hypergraph file not found: {}", path)
        raise typer.Exit(1)
    try:
        return load_hypergraph(path)
    except (ValueError, OSError) as e:
        logger.error("Cannot load {}: {}", path, e)
        raise typer.Exit(1) from e


def _resolve_root(graph: Hypergraph, root: str | None) -> str:
    if root is not None:
        if root not in graph:
            logger.error("Root node {!r} is not in the hypergraph", root)
            raise typer.Exit(1)
        return root
    try:
        return find_root_id(graph)
    except ValueError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e


def _view_to_dict(view: NodeView, *, depth: int) -> dict[str, Any]:
    return {
        "depth": depth,
        "node": {
            "id": view.node.id,
            "display_name": view.node.display_name,
            "description": view.node.description,
        },
        "history": list(view.history),
        "focused_parent": view.focused_parent_id,
        "siblings": [s.id for s in view.siblings],
        "other_parents": [p.id for p in view.other_parents],
        "children": [c.id for c in view.children],
    }


GraphOpt = Annotated[
    Path | None,
    typer.Option("--graph", "-g", help="Hypergraph JSON file (defaults to $HYPERNAV_GRAPH)"),
]
RootOpt = Annotated[
    str | None,
    typer.Option("--root", "-r", help="Root node id (defaults to the parentless node)"),
]


@app.command()
def paths(
    graph_file: GraphOpt = None,
    root: RootOpt = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Print the canonical shortest path from the root to every node."""
    graph = _load(graph_file)
    root_id = _resolve_root(graph, root)
    index = build_path_index(graph, root_id)

    if output_json:
        typer.echo(json.dumps({k: list(v) for k, v in index.items()}, indent=2))
        return

    typer.echo(f"{len(index)} of {len(graph)} nodes reachable from {root_id}:\n")
    for node_id, path in index.items():
        names = " > ".join(graph[p].display_name or p for p in path)
        typer.echo(f"  {node_id}: {'/'.join(path)}  ({names})")


@app.command()
def replay(
    intents: Annotated[list[str] | None, typer.Argument(help=_INTENT_HELP)] = None,
    graph_file: GraphOpt = None,
    root: RootOpt = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Apply intents to a fresh session and show where focus ends up."""
    graph = _load(graph_file)
    root_id = _resolve_root(graph, root)

    try:
        parsed = [parse_intent(token) for token in intents or []]
    except ValueError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    session = NavigationSession(graph, root_id=root_id, listener=_LogListener())
    for token, intent in zip(intents or [], parsed, strict=True):
        if not session.apply(intent):
            logger.warning("Ignored {!r} at {}", token, session.current_node_id)

    view = session.view()
    if output_json:
        typer.echo(json.dumps(_view_to_dict(view, depth=session.state.depth), indent=2))
        return

    typer.echo(f"Focus: {view.node.id} {view.node.display_name}")
    typer.echo(f"  history: {'/'.join(view.history)}")
    typer.echo(f"  depth: {session.state.depth}")
    typer.echo(f"  focused parent: {view.focused_parent_id or '-'}")
    typer.echo(f"  siblings: {', '.join(s.id for s in view.siblings) or '-'}")
    typer.echo(f"  other parents: {', '.join(p.id for p in view.other_parents) or '-'}")
    typer.echo(f"  children: {', '.join(c.id for c in view.children) or '-'}")
