"""Unit tests for the graph container and BFS path finding."""

import pytest

from keygraph.core.graph import (
    UNREACHED,
    Graph,
    build_demo_graph,
    distance_to,
    load_from_edges,
    parse_edge,
)
from keygraph.core.graph.pathfinding import bfs, build_path
from keygraph.core.models import MAX_KEY, NodeStatus, Owner


def make_graph(keys: list[int], edges: list[tuple[int, int]]) -> Graph:
    """Create a test graph with the given keys and edges."""
    graph = Graph()
    for key in keys:
        graph.add_node(key, f"v{key}", Owner.LOCAL)
    for src, dst in edges:
        graph.add_edge(src, dst)
    return graph


@pytest.fixture
def linear_graph() -> Graph:
    """Create a linear graph: 1 -> 2 -> 3 -> 4."""
    return make_graph([1, 2, 3, 4], [(1, 2), (2, 3), (3, 4)])


@pytest.fixture
def diamond_graph() -> Graph:
    """Create a diamond: 1 -> 2 -> 4, 1 -> 3 -> 4."""
    return make_graph([1, 2, 3, 4], [(1, 2), (1, 3), (2, 4), (3, 4)])


@pytest.fixture
def cyclic_graph() -> Graph:
    """Create a graph with a cycle: 1 -> 2 -> 3 -> 1."""
    return make_graph([1, 2, 3], [(1, 2), (2, 3), (3, 1)])


@pytest.fixture
def disconnected_graph() -> Graph:
    """Create a disconnected graph: 1 -> 2, 3 -> 4."""
    return make_graph([1, 2, 3, 4], [(1, 2), (3, 4)])


class TestGraph:
    """Tests for the Graph container."""

    def test_add_node_inserted(self) -> None:
        graph = Graph()
        assert graph.add_node(7, "seven", Owner.REMOTE) is NodeStatus.INSERTED
        assert 7 in graph
        assert len(graph) == 1
        assert graph.value_of(7) == "seven"
        assert graph.owner_of(7) is Owner.REMOTE

    def test_add_node_existing_updates_value_and_owner(self) -> None:
        graph = make_graph([1, 2], [(1, 2)])
        status = graph.add_node(1, "new", Owner.REMOTE)

        assert status is NodeStatus.UPDATED
        assert len(graph) == 2
        assert graph.value_of(1) == "new"
        assert graph.owner_of(1) is Owner.REMOTE
        assert graph.children_of(1) == [2]

    def test_update_keeps_position(self) -> None:
        graph = make_graph([5, 6, 7], [])
        graph.add_node(5, None)
        assert list(graph) == [5, 6, 7]
        assert graph.index_of(5) == 0

    def test_value_is_stored_by_reference(self) -> None:
        payload = {"count": 1}
        graph = Graph()
        graph.add_node(1, payload)
        payload["count"] = 2
        assert graph.value_of(1) is payload
        assert graph.value_of(1)["count"] == 2

    def test_default_owner_is_local(self) -> None:
        graph = Graph()
        graph.add_node(1, None)
        assert graph.owner_of(1) is Owner.LOCAL

    def test_accepts_full_key_range(self) -> None:
        graph = Graph()
        graph.add_node(0)
        graph.add_node(MAX_KEY)
        graph.add_edge(MAX_KEY, 0)
        assert graph.children_of(MAX_KEY) == [0]

    def test_add_edge_preserves_order_and_duplicates(self) -> None:
        graph = make_graph([1, 2, 3], [(1, 3), (1, 2), (1, 3)])
        assert graph.children_of(1) == [3, 2, 3]
        assert graph.num_edges == 3

    def test_self_loop(self) -> None:
        graph = make_graph([1], [(1, 1)])
        assert graph.children_of(1) == [1]

    def test_children_of_missing_returns_none(self, linear_graph: Graph) -> None:
        assert linear_graph.children_of(999) is None

    def test_children_of_leaf_is_empty(self, linear_graph: Graph) -> None:
        assert linear_graph.children_of(4) == []

    def test_children_of_returns_copy(self, linear_graph: Graph) -> None:
        children = linear_graph.children_of(1)
        assert children is not None
        children.append(4)
        assert linear_graph.children_of(1) == [2]

    def test_iteration_follows_insertion_order(self) -> None:
        graph = make_graph([30, 10, 20], [])
        assert list(graph) == [30, 10, 20]
        assert [graph.key_at(i) for i in range(3)] == [30, 10, 20]

    def test_capacity_hint_is_not_a_limit(self) -> None:
        graph = Graph(capacity_hint=1)
        for key in range(50):
            graph.add_node(key)
        assert graph.num_nodes == 50

    def test_non_positive_capacity_hint(self) -> None:
        graph = Graph(capacity_hint=0)
        graph.add_node(1)
        assert "capacity_hint=8" in repr(graph)

    def test_repr(self, linear_graph: Graph) -> None:
        assert repr(linear_graph) == "Graph(nodes=4, edges=3, capacity_hint=8)"


class TestBfs:
    """Tests for BFS distances and parents."""

    def test_source_is_its_own_parent(self, diamond_graph: Graph) -> None:
        result = diamond_graph.bfs(1)
        src = diamond_graph.index_of(1)
        assert result.source == src
        assert result.distances[src] == 0
        assert result.parents[src] == src

    def test_linear_distances(self, linear_graph: Graph) -> None:
        result = linear_graph.bfs(1)
        assert result.distances == [0, 1, 2, 3]
        assert result.parents == [0, 0, 1, 2]

    def test_unreached_nodes(self, disconnected_graph: Graph) -> None:
        result = disconnected_graph.bfs(1)
        for key in (3, 4):
            ix = disconnected_graph.index_of(key)
            assert ix is not None
            assert result.distances[ix] == UNREACHED
            assert result.parents[ix] is None
            assert not result.is_reached(ix)

    def test_reached_distance_is_parent_plus_one(self, diamond_graph: Graph) -> None:
        result = diamond_graph.bfs(1)
        for ix in result.reached:
            parent = result.parents[ix]
            assert parent is not None
            if ix != result.source:
                assert result.distances[ix] == result.distances[parent] + 1

    def test_first_settled_parent_wins(self, diamond_graph: Graph) -> None:
        result = diamond_graph.bfs(1)
        ix4 = diamond_graph.index_of(4)
        assert ix4 is not None
        assert result.parents[ix4] == diamond_graph.index_of(2)

    def test_edge_order_decides_tie(self) -> None:
        graph = make_graph([1, 2, 3, 4], [(1, 3), (1, 2), (2, 4), (3, 4)])
        result = graph.bfs(1)
        assert graph.build_path(1, 4, result) == [1, 3, 4]

    def test_cycle_terminates(self, cyclic_graph: Graph) -> None:
        result = cyclic_graph.bfs(1)
        assert result.distances == [0, 1, 2]
        assert result.parents == [0, 0, 1]

    def test_source_mid_graph(self, linear_graph: Graph) -> None:
        result = linear_graph.bfs(3)
        assert result.distances == [UNREACHED, UNREACHED, 0, 1]

    def test_module_function_matches_method(self, diamond_graph: Graph) -> None:
        assert bfs(diamond_graph, 1) == diamond_graph.bfs(1)

    def test_deterministic(self, diamond_graph: Graph) -> None:
        assert diamond_graph.bfs(1) == diamond_graph.bfs(1)

    def test_result_repr(self, disconnected_graph: Graph) -> None:
        assert repr(disconnected_graph.bfs(1)) == "BfsResult(source=0, reached=2/4)"


class TestBuildPath:
    """Tests for path reconstruction."""

    def test_linear(self, linear_graph: Graph) -> None:
        result = linear_graph.bfs(1)
        assert linear_graph.build_path(1, 4, result) == [1, 2, 3, 4]

    def test_path_is_made_of_edges(self, diamond_graph: Graph) -> None:
        result = diamond_graph.bfs(1)
        path = diamond_graph.build_path(1, 4, result)
        assert len(path) == distance_to(diamond_graph, 4, result) + 1
        for src, dst in zip(path, path[1:]):
            children = diamond_graph.children_of(src)
            assert children is not None
            assert dst in children

    def test_same_node(self, linear_graph: Graph) -> None:
        result = linear_graph.bfs(2)
        assert linear_graph.build_path(2, 2, result) == [2]

    def test_unreachable_is_empty(self, disconnected_graph: Graph) -> None:
        result = disconnected_graph.bfs(1)
        assert disconnected_graph.build_path(1, 4, result) == []

    def test_missing_keys_are_empty(self, linear_graph: Graph) -> None:
        result = linear_graph.bfs(1)
        assert linear_graph.build_path(1, 999, result) == []
        assert linear_graph.build_path(999, 4, result) == []

    def test_missing_result_is_empty(self, linear_graph: Graph) -> None:
        assert linear_graph.build_path(1, 4, None) == []

    def test_result_from_other_source_is_empty(self, linear_graph: Graph) -> None:
        result = linear_graph.bfs(2)
        assert linear_graph.build_path(1, 4, result) == []

    def test_stale_result_for_new_node_is_empty(self, linear_graph: Graph) -> None:
        result = linear_graph.bfs(1)
        linear_graph.add_node(5)
        linear_graph.add_edge(4, 5)
        assert linear_graph.build_path(1, 5, result) == []
        assert distance_to(linear_graph, 5, result) == UNREACHED

    def test_module_function_matches_method(self, linear_graph: Graph) -> None:
        result = linear_graph.bfs(1)
        assert build_path(linear_graph, 1, 3, result) == linear_graph.build_path(1, 3, result)

    def test_distance_to_missing_key(self, linear_graph: Graph) -> None:
        result = linear_graph.bfs(1)
        assert distance_to(linear_graph, 999, result) == UNREACHED


class TestEdgesToMissingNodes:
    """BFS skips edge targets that are not graph nodes."""

    def test_dangling_target_is_skipped(self) -> None:
        graph = make_graph([1, 2], [(1, 2)])
        # Only reachable by poking the node directly; add_edge refuses it.
        graph.node(1).children.insert(0, 42)
        result = graph.bfs(1)
        assert result.distances == [0, 1]
        assert graph.build_path(1, 2, result) == [1, 2]


class TestDemoGraph:
    """End-to-end check on the reference graph."""

    def test_distance_and_path(self) -> None:
        graph = build_demo_graph()
        result = graph.bfs(0)
        assert distance_to(graph, 5, result) == 4
        assert graph.build_path(0, 5, result) == [0, 1, 3, 4, 5]

    def test_values_and_owners(self) -> None:
        graph = build_demo_graph()
        assert [graph.value_of(k) for k in graph] == [111, 222, 333, 444, 555, 666]
        assert graph.owner_of(0) is Owner.LOCAL
        assert graph.owner_of(1) is Owner.REMOTE
        assert graph.owner_of(5) is Owner.REMOTE


class TestLoader:
    """Tests for building graphs from edge lists."""

    def test_parse_edge(self) -> None:
        assert parse_edge("0:1") == (0, 1)
        assert parse_edge(" 3 : 12 ") == (3, 12)

    def test_load_from_edges_order(self) -> None:
        graph = load_from_edges([(5, 1), (1, 9), (5, 9)], nodes=[7])
        assert list(graph) == [7, 5, 1, 9]
        assert graph.children_of(5) == [1, 9]
        assert graph.num_edges == 3

    def test_load_from_edges_owner(self) -> None:
        graph = load_from_edges([(1, 2)], owner=Owner.REMOTE)
        assert graph.owner_of(2) is Owner.REMOTE
        assert graph.value_of(2) is None

    def test_load_empty(self) -> None:
        graph = load_from_edges([])
        assert len(graph) == 0
