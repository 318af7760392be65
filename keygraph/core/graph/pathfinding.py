"""Path finding: BFS distances and parent-pointer path reconstruction."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from keygraph.core.exceptions import NodeNotFoundError
from keygraph.core.graph.models import UNREACHED, BfsResult

if TYPE_CHECKING:
    from keygraph.core.graph.base import Graph

logger = logging.getLogger(__name__)


def bfs(graph: Graph, source_key: int) -> BfsResult:
    """Unweighted shortest distances from source_key using BFS. O(V + E).

    Children are visited in edge insertion order and a node's parent is
    fixed the first time it is reached, so the result is deterministic.
    Edge targets that are not in the graph are skipped.
    """
    source = graph.index_of(source_key)
    if source is None:
        raise NodeNotFoundError(f"BFS source {source_key!r} not found")

    n = len(graph)
    result = BfsResult(source=source, distances=[UNREACHED] * n, parents=[None] * n)
    result.distances[source] = 0
    result.parents[source] = source

    queue: deque[int] = deque([source])
    nodes = graph.nodes

    while queue:
        current = queue.popleft()
        for child_key in nodes[current].children:
            child = graph.index_of(child_key)
            if child is None or result.distances[child] != UNREACHED:
                continue
            result.distances[child] = result.distances[current] + 1
            result.parents[child] = current
            queue.append(child)

    logger.debug("BFS from %d reached %d of %d nodes", source_key, len(result.reached), n)
    return result


def build_path(
    graph: Graph, src_key: int, dst_key: int, result: BfsResult | None
) -> list[int]:
    """Reconstruct the key path src -> dst from a BFS result.

    Returns [] when either key is absent, result is None, dst was not
    reached, or result was computed from a source other than src_key.
    """
    if result is None:
        return []
    src = graph.index_of(src_key)
    dst = graph.index_of(dst_key)
    if src is None or dst is None or not result.is_reached(dst):
        return []

    path: list[int] = []
    current = dst
    while True:
        path.append(graph.key_at(current))
        parent = result.parents[current]
        if parent is None or parent == current:
            break
        current = parent
    path.reverse()

    if path[0] != src_key:
        return []
    return path


def distance_to(graph: Graph, key: int, result: BfsResult) -> int:
    """Distance of key in result, or UNREACHED if key is absent."""
    ix = graph.index_of(key)
    if ix is None or not result.covers(ix):
        return UNREACHED
    return result.distances[ix]
