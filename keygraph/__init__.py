"""
Keygraph: a key-indexed directed graph with BFS shortest paths.

Keygraph stores nodes under unsigned 64-bit keys, links them with directed
edges, and answers unweighted shortest-path queries:
- Insert or update nodes with an opaque value and an owner tag
- Add directed edges between existing nodes
- Run BFS from a source and rebuild the path to any reached node

Usage:
    from keygraph import Graph, Owner

    graph = Graph()
    graph.add_node(0, "start", Owner.LOCAL)
    graph.add_node(1, "end", Owner.REMOTE)
    graph.add_edge(0, 1)

    result = graph.bfs(0)
    graph.build_path(0, 1, result)  # [0, 1]
"""

from keygraph.core import (
    UNREACHED,
    BfsResult,
    Graph,
    KeyGraphError,
    Node,
    NodeNotFoundError,
    NodeStatus,
    Owner,
)

__version__ = "0.1.0"

__all__ = [
    "UNREACHED",
    "BfsResult",
    "Graph",
    "KeyGraphError",
    "Node",
    "NodeNotFoundError",
    "NodeStatus",
    "Owner",
]
