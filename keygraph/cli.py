"""CLI entry point for keygraph."""

import json
import logging
from typing import Annotated

import typer
from rich.console import Console

from keygraph.core.exceptions import KeyGraphError
from keygraph.core.graph import (
    UNREACHED,
    Graph,
    build_demo_graph,
    distance_to,
    load_from_edges,
    parse_edge,
)

app = typer.Typer(
    name="keygraph",
    help="Directed graph shortest paths over integer keys.",
    no_args_is_help=True,
)
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

EdgeOption = Annotated[
    list[str] | None,
    typer.Option("--edge", "-e", help="Directed edge as SRC:DST (repeatable)"),
]
NodeOption = Annotated[
    list[int] | None,
    typer.Option("--node", "-n", help="Extra node key with no edges (repeatable)"),
]
JsonOption = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Directed graph shortest paths over integer keys."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def build_graph(edges: list[str] | None, nodes: list[int] | None) -> Graph:
    """Build a graph from CLI edge specs, exiting with code 2 on bad input."""
    try:
        pairs = [parse_edge(spec) for spec in edges or []]
        return load_from_edges(pairs, nodes=nodes or [])
    except KeyGraphError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=2) from e


def format_path(path: list[int]) -> str:
    return " ".join(str(key) for key in path)


@app.command()
def demo(output_json: JsonOption = False) -> None:
    """Run BFS from 0 on the six-node reference graph and show the path to 5."""
    graph = build_demo_graph()
    result = graph.bfs(0)
    distance = distance_to(graph, 5, result)
    path = graph.build_path(0, 5, result)

    if output_json:
        print(json.dumps({"distance": distance, "path": path}))
    else:
        console.print(f"dist(0->5) = {distance}")
        console.print(f"path: {format_path(path)}")


@app.command()
def path(
    source: Annotated[int, typer.Argument(help="Start node key")],
    target: Annotated[int, typer.Argument(help="Destination node key")],
    edges: EdgeOption = None,
    nodes: NodeOption = None,
    output_json: JsonOption = False,
) -> None:
    """Show the shortest path between two keys."""
    graph = build_graph(edges, nodes)

    try:
        result = graph.bfs(source)
    except KeyGraphError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=2) from e

    found = graph.build_path(source, target, result)
    distance = distance_to(graph, target, result)

    if output_json:
        print(json.dumps({"distance": distance, "path": found}))
    elif found:
        console.print(f"dist({source}->{target}) = {distance}")
        console.print(f"path: {format_path(found)}")
    else:
        console.print(f"No path from [cyan]{source}[/cyan] to [cyan]{target}[/cyan]")

    if not found:
        raise typer.Exit(code=1)


@app.command()
def bfs(
    source: Annotated[int, typer.Argument(help="Start node key")],
    edges: EdgeOption = None,
    nodes: NodeOption = None,
    output_json: JsonOption = False,
) -> None:
    """Show the BFS distance and parent of every node."""
    graph = build_graph(edges, nodes)

    try:
        result = graph.bfs(source)
    except KeyGraphError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=2) from e

    rows = []
    for ix, key in enumerate(graph):
        parent = result.parents[ix]
        rows.append(
            {
                "key": key,
                "distance": result.distances[ix],
                "parent": graph.key_at(parent) if parent is not None else None,
            }
        )

    if output_json:
        print(json.dumps({"source": source, "nodes": rows}))
        return

    console.print(f"[bold]BFS from [cyan]{source}[/cyan][/]")
    for row in rows:
        if row["distance"] == UNREACHED:
            console.print(f"  {row['key']}: [dim]unreached[/]")
        else:
            console.print(f"  {row['key']}: {row['distance']} [dim](parent {row['parent']})[/]")


if __name__ == "__main__":
    app()
