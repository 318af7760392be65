"""
Graph data structures and algorithms.

This module provides the in-memory directed graph and its path queries:

Data Structures:
    - Graph: Insertion-ordered adjacency lists with O(1) key lookups
    - BfsResult: Per-position distances and parent pointers from one source

Algorithms:
    - pathfinding: BFS distances, path reconstruction, distance lookup

Loading:
    - load_from_edges(): Build a graph from (src, dst) pairs
    - build_demo_graph(): The six-node reference graph
"""

from keygraph.core.graph.base import DEFAULT_CAPACITY, Graph
from keygraph.core.graph.loader import build_demo_graph, load_from_edges, parse_edge
from keygraph.core.graph.models import UNREACHED, BfsResult
from keygraph.core.graph.pathfinding import bfs, build_path, distance_to

__all__ = [
    "DEFAULT_CAPACITY",
    "UNREACHED",
    "BfsResult",
    "Graph",
    "bfs",
    "build_demo_graph",
    "build_path",
    "distance_to",
    "load_from_edges",
    "parse_edge",
]
