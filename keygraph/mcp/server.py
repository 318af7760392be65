"""MCP server implementation for keygraph."""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from keygraph.core.exceptions import KeyGraphError
from keygraph.core.graph import Graph, distance_to, load_from_edges

logger = logging.getLogger(__name__)

server = Server("keygraph")

_EDGES_SCHEMA = {
    "type": "array",
    "description": "Directed edges as [src, dst] pairs of non-negative integer keys",
    "items": {
        "type": "array",
        "items": {"type": "integer", "minimum": 0},
        "minItems": 2,
        "maxItems": 2,
    },
}
_NODES_SCHEMA = {
    "type": "array",
    "description": "Extra node keys with no edges (optional)",
    "items": {"type": "integer", "minimum": 0},
}


def _load_graph(arguments: dict[str, Any]) -> Graph:
    """Build a graph from tool arguments."""
    edges = [(int(src), int(dst)) for src, dst in arguments.get("edges", [])]
    nodes = [int(key) for key in arguments.get("nodes", [])]
    return load_from_edges(edges, nodes=nodes)


@server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="keygraph_bfs",
            description=(
                "Run breadth-first search over a directed graph. "
                "Returns the edge-count distance and parent of every node "
                "(-1 and null for nodes the source cannot reach)."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "edges": _EDGES_SCHEMA,
                    "nodes": _NODES_SCHEMA,
                    "source": {"type": "integer", "description": "Start node key"},
                },
                "required": ["edges", "source"],
            },
        ),
        Tool(
            name="keygraph_path",
            description=(
                "Find the shortest path between two nodes of a directed graph. "
                "Ties are broken by edge order. Returns an empty path when unreachable."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "edges": _EDGES_SCHEMA,
                    "nodes": _NODES_SCHEMA,
                    "source": {"type": "integer", "description": "Start node key"},
                    "target": {"type": "integer", "description": "Destination node key"},
                },
                "required": ["edges", "source", "target"],
            },
        ),
    ]


@server.call_tool()  # type: ignore[untyped-decorator]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "keygraph_bfs":
            result = _handle_bfs(arguments)
        elif name == "keygraph_path":
            result = _handle_path(arguments)
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except KeyGraphError as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]
    except (KeyError, TypeError, ValueError) as e:
        logger.debug("Bad arguments for %s: %r", name, e)
        return [TextContent(type="text", text=json.dumps({"error": f"Invalid arguments: {e}"}))]


def _handle_bfs(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handle keygraph_bfs tool."""
    graph = _load_graph(arguments)
    source = int(arguments["source"])
    result = graph.bfs(source)

    parents: dict[str, int | None] = {}
    for ix, key in enumerate(graph):
        parent = result.parents[ix]
        parents[str(key)] = graph.key_at(parent) if parent is not None else None

    return {
        "source": source,
        "distances": {str(key): result.distances[ix] for ix, key in enumerate(graph)},
        "parents": parents,
    }


def _handle_path(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handle keygraph_path tool."""
    graph = _load_graph(arguments)
    source = int(arguments["source"])
    target = int(arguments["target"])
    result = graph.bfs(source)

    return {
        "distance": distance_to(graph, target, result),
        "path": graph.build_path(source, target, result),
    }


async def serve() -> None:
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
