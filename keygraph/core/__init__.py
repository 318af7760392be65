"""
Core module: data models, exceptions, and the graph container.

Models (models.py):
    - Node: A keyed node with an opaque value, owner tag and outgoing edges
    - Owner/NodeStatus: Enums for owner tags and add_node outcomes

Exceptions (exceptions.py):
    - KeyGraphError: Base exception for all keygraph errors
    - NodeNotFoundError: A required node key doesn't exist
    - InvalidKeyError: Key is not an unsigned 64-bit integer
    - EdgeSpecError: An "SRC:DST" edge spec could not be parsed

Graph (graph/):
    - Graph: Insertion-ordered adjacency list container
    - BfsResult: Distances and parent pointers from one BFS run
"""

from keygraph.core.exceptions import (
    EdgeSpecError,
    InvalidKeyError,
    KeyGraphError,
    NodeNotFoundError,
)
from keygraph.core.graph import UNREACHED, BfsResult, Graph
from keygraph.core.models import MAX_KEY, Node, NodeStatus, Owner

__all__ = [
    # Models
    "MAX_KEY",
    "Node",
    "NodeStatus",
    "Owner",
    # Exceptions
    "KeyGraphError",
    "NodeNotFoundError",
    "InvalidKeyError",
    "EdgeSpecError",
    # Graph
    "UNREACHED",
    "BfsResult",
    "Graph",
]
