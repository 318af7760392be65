"""Build a Graph from edge lists and edge specs."""

from __future__ import annotations

from collections.abc import Iterable

from keygraph.core.exceptions import EdgeSpecError
from keygraph.core.graph.base import Graph
from keygraph.core.models import Owner

# (key, value, owner) for the reference graph
_DEMO_NODES = [
    (0, 111, Owner.LOCAL),
    (1, 222, Owner.REMOTE),
    (2, 333, Owner.LOCAL),
    (3, 444, Owner.REMOTE),
    (4, 555, Owner.LOCAL),
    (5, 666, Owner.REMOTE),
]
_DEMO_EDGES = [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (4, 5)]


def parse_edge(spec: str) -> tuple[int, int]:
    """Parse an edge spec of the form 'SRC:DST'."""
    parts = spec.split(":")
    if len(parts) != 2:
        raise EdgeSpecError(f"Edge spec must look like SRC:DST, got {spec!r}")
    try:
        return int(parts[0].strip()), int(parts[1].strip())
    except ValueError as e:
        raise EdgeSpecError(f"Edge endpoints must be integers: {spec!r}") from e


def load_from_edges(
    edges: Iterable[tuple[int, int]],
    nodes: Iterable[int] = (),
    owner: Owner = Owner.LOCAL,
) -> Graph:
    """Load a graph from (src, dst) pairs. O(V + E).

    Explicit nodes are inserted first, then edge endpoints in order of
    first appearance, so positions follow the input order.
    """
    edge_list = list(edges)
    graph = Graph(capacity_hint=max(len(edge_list), 1))

    for key in nodes:
        if key not in graph:
            graph.add_node(key, None, owner)
    for src, dst in edge_list:
        for key in (src, dst):
            if key not in graph:
                graph.add_node(key, None, owner)
    for src, dst in edge_list:
        graph.add_edge(src, dst)

    return graph


def build_demo_graph() -> Graph:
    """Six nodes, six edges, two equally short paths from 0 to 5."""
    graph = Graph(capacity_hint=len(_DEMO_NODES))
    for key, value, owner in _DEMO_NODES:
        graph.add_node(key, value, owner)
    for src, dst in _DEMO_EDGES:
        graph.add_edge(src, dst)
    return graph
