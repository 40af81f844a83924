from __future__ import annotations

import logging
from typing import Literal, Optional

import click

from .config import get_settings
from .exceptions import GraphError
from .graph import Graph
from .log import configure_logging
from .sample import build_sample_graph

logger = logging.getLogger(__name__)


def _print_order(title: str, graph_order: list[str]) -> None:
    click.echo(f"{title}: {' '.join(graph_order)}")


def run_demo(graph: Graph[str], origin: str, kind: Literal["bfs", "dfs", "both"]) -> None:
    """Print traversal order and tree edges for the requested traversal kind(s)."""
    if kind in ("bfs", "both"):
        order = graph.breadth_first(origin)
        _print_order("Breadth-First Traversal Result", [str(label) for label in order.drain()])
        graph.print_bfs_tree_edges()
    if kind in ("dfs", "both"):
        order = graph.depth_first(origin)
        _print_order("Depth-First Traversal Result", [str(label) for label in order.drain()])
        graph.print_dfs_tree_edges()


@click.command()
@click.option("--origin", "-o", default=None, help="Label of the start vertex (default from config).")
@click.option(
    "--kind",
    "-k",
    type=click.Choice(["bfs", "dfs", "both"]),
    default=None,
    help="Traversal(s) to run (default from config).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(origin: Optional[str], kind: Optional[str], verbose: bool) -> None:
    """Traverse the nine-vertex sample graph and print visitation order and tree edges."""
    settings = get_settings()
    configure_logging(settings.logging, verbose=verbose)

    origin = origin if origin is not None else settings.demo.origin
    kind = kind if kind is not None else settings.demo.kind

    graph = build_sample_graph()
    logger.debug("Running %s traversal(s) from %r on %r", kind, origin, graph)
    try:
        run_demo(graph, origin, kind)  # type: ignore[arg-type]
    except GraphError as exc:
        raise click.ClickException(str(exc)) from exc


def main() -> None:
    cli()


__all__ = ["cli", "main", "run_demo"]
