"""
MCP server for keygraph.

Exposes BFS shortest-path queries to LLMs via the Model Context Protocol.
Every call carries its own edge list; no graph is kept between calls.

Tools:
    - keygraph_bfs: Distances and parents from a source node
    - keygraph_path: Shortest path between two nodes

Usage:
    Install: pip install keygraph
    Run: mcp-server-keygraph
"""

import asyncio
import logging
import sys

from keygraph.mcp.server import serve as _serve


def serve(log_level: int = logging.WARNING) -> None:
    """Run the stdio MCP server until the client disconnects."""
    # stdout carries the protocol stream
    logging.basicConfig(
        stream=sys.stderr, level=log_level, format="%(levelname)s %(name)s: %(message)s"
    )
    asyncio.run(_serve())


__all__ = ["serve"]
