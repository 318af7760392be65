"""Core Graph class with adjacency list representation."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from keygraph.core.exceptions import InvalidKeyError, NodeNotFoundError
from keygraph.core.graph import pathfinding
from keygraph.core.graph.models import BfsResult
from keygraph.core.models import MAX_KEY, Node, NodeStatus, Owner

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 8


def _check_key(key: Any) -> int:
    if isinstance(key, bool) or not isinstance(key, int) or not 0 <= key <= MAX_KEY:
        raise InvalidKeyError(f"Key must be an unsigned 64-bit integer, got {key!r}")
    return key


class Graph:
    """Directed graph keyed by unsigned 64-bit integers.

    Nodes are kept in insertion order and addressed by a stable position;
    a key -> position index gives O(1) lookups. Outgoing edges are stored
    as target keys in insertion order.

    Missing keys are a programming error for add_edge, owner_of, value_of,
    node and bfs (NodeNotFoundError). children_of, index_of and build_path
    tolerate them.
    """

    __slots__ = ("_nodes", "_index", "_num_edges", "_capacity_hint")

    def __init__(self, capacity_hint: int = DEFAULT_CAPACITY) -> None:
        # Python lists grow on their own; the hint is kept for repr only.
        self._capacity_hint = capacity_hint if capacity_hint > 0 else DEFAULT_CAPACITY
        self._nodes: list[Node] = []
        self._index: dict[int, int] = {}
        self._num_edges = 0

    def add_node(self, key: int, value: Any = None, owner: Owner = Owner.LOCAL) -> NodeStatus:
        """Insert a node, or update value and owner of an existing one. O(1).

        Edges of an existing node are left untouched.
        """
        _check_key(key)
        ix = self._index.get(key)
        if ix is not None:
            node = self._nodes[ix]
            node.value = value
            node.owner = owner
            logger.debug("Updated node %d (owner=%s)", key, owner.value)
            return NodeStatus.UPDATED

        self._index[key] = len(self._nodes)
        self._nodes.append(Node(key=key, value=value, owner=owner))
        logger.debug("Inserted node %d at position %d", key, self._index[key])
        return NodeStatus.INSERTED

    def add_edge(self, src_key: int, dst_key: int) -> None:
        """Add a directed edge src -> dst. O(1).

        Both nodes must already exist. Duplicate edges are kept.
        """
        src = self._require(src_key)
        self._require(dst_key)
        self._nodes[src].children.append(dst_key)
        self._num_edges += 1
        logger.debug("Added edge %d -> %d", src_key, dst_key)

    def node(self, key: int) -> Node:
        """Get node by key. O(1)."""
        return self._nodes[self._require(key)]

    def owner_of(self, key: int) -> Owner:
        return self.node(key).owner

    def value_of(self, key: int) -> Any:
        return self.node(key).value

    def children_of(self, key: int) -> list[int] | None:
        """Outgoing target keys in insertion order, or None if key is absent."""
        ix = self._index.get(key)
        if ix is None:
            return None
        return list(self._nodes[ix].children)

    def index_of(self, key: int) -> int | None:
        """Position of key, or None if absent. O(1)."""
        return self._index.get(key)

    def key_at(self, index: int) -> int:
        """Key of the node at a position."""
        return self._nodes[index].key

    def bfs(self, source_key: int) -> BfsResult:
        """Shortest distances and parents from source_key. O(V + E)."""
        return pathfinding.bfs(self, source_key)

    def build_path(self, src_key: int, dst_key: int, result: BfsResult | None) -> list[int]:
        """Keys on the shortest path src -> dst, or [] if there is none."""
        return pathfinding.build_path(self, src_key, dst_key, result)

    def _require(self, key: int) -> int:
        ix = self._index.get(key)
        if ix is None:
            raise NodeNotFoundError(f"Node {key!r} not found")
        return ix

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[int]:
        """Keys in insertion order."""
        return (node.key for node in self._nodes)

    @property
    def nodes(self) -> list[Node]:
        return self._nodes

    @property
    def num_nodes(self) -> int:
        return len(self._nodes)

    @property
    def num_edges(self) -> int:
        return self._num_edges

    def __repr__(self) -> str:
        return (
            f"Graph(nodes={self.num_nodes}, edges={self.num_edges}, "
            f"capacity_hint={self._capacity_hint})"
        )
