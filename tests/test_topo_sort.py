import pytest
from hypothesis import given
from hypothesis import strategies as st

from algorithms.front_star import FrontStarGraph
from algorithms.topo_sort import CycleError, kahn, main, topo

EXAMPLE_EDGES = [(0, 1), (0, 2), (1, 3), (1, 4), (2, 3), (2, 5), (3, 5), (4, 5)]


def build(n, edges):
    graph = FrontStarGraph(n)
    for u, v in edges:
        graph.add(u, v, 1)
    return graph


def out_of_order(order, edges):
    position = {v: i for i, v in enumerate(order)}
    return [(u, v) for u, v in edges if position[u] >= position[v]]


def test_kahn_example_is_topological():
    order = kahn(build(6, EXAMPLE_EDGES))
    assert sorted(order) == list(range(6))
    assert order[0] == 0
    assert order[-1] == 5
    assert out_of_order(order, EXAMPLE_EDGES) == []


def test_topo_example_is_topological():
    order = topo(build(6, EXAMPLE_EDGES))
    assert sorted(order) == list(range(6))
    assert order[0] == 0
    assert order[-1] == 5
    assert out_of_order(order, EXAMPLE_EDGES) == []


def test_kahn_given_degrees_matches_computed():
    graph = build(6, EXAMPLE_EDGES)
    assert kahn(graph, [0, 1, 1, 2, 1, 3]) == kahn(graph)


def test_kahn_wrong_degree_count():
    with pytest.raises(ValueError):
        kahn(build(3, []), [0, 0])


def test_kahn_cycle_raises_with_partial_order():
    graph = build(4, [(0, 1), (1, 2), (2, 1), (2, 3)])
    with pytest.raises(CycleError) as info:
        kahn(graph)
    assert info.value.order == [0]


def test_topo_cycle_raises():
    with pytest.raises(CycleError):
        topo(build(3, [(0, 1), (1, 2), (2, 0)]))


def test_self_loop_is_a_cycle():
    graph = build(2, [(0, 1), (1, 1)])
    with pytest.raises(CycleError):
        topo(graph)
    with pytest.raises(CycleError):
        kahn(graph)


def test_cycle_error_is_value_error():
    with pytest.raises(ValueError):
        topo(build(2, [(0, 1), (1, 0)]))


def test_topo_can_run_twice():
    graph = build(6, EXAMPLE_EDGES)
    first = topo(graph)
    second = topo(graph)
    assert sorted(first) == list(range(6))
    assert first[0] == 0
    assert first[-1] == 5
    assert second == first


@st.composite
def dags(draw):
    n = draw(st.integers(min_value=1, max_value=10))
    pairs = draw(
        st.lists(
            st.tuples(
                st.integers(min_value=0, max_value=n - 1),
                st.integers(min_value=0, max_value=n - 1),
            ),
            max_size=25,
        )
    )
    perm = draw(st.permutations(range(n)))
    edges = [(perm[min(a, b)], perm[max(a, b)]) for a, b in pairs if a != b]
    return n, edges


@given(dags())
def test_both_orders_respect_edges(data):
    n, edges = data
    graph = build(n, edges)
    kahn_order = kahn(graph)
    dfs_order = topo(graph)
    assert sorted(kahn_order) == list(range(n))
    assert sorted(dfs_order) == list(range(n))
    assert out_of_order(kahn_order, edges) == []
    assert out_of_order(dfs_order, edges) == []


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Kahn result:"
    assert lines[2] == "DFS result:"
    kahn_order = [int(x) for x in lines[1].split()]
    dfs_order = [int(x) for x in lines[3].split()]
    assert sorted(kahn_order) == list(range(6))
    assert sorted(dfs_order) == list(range(6))
    assert out_of_order(kahn_order, EXAMPLE_EDGES) == []
    assert out_of_order(dfs_order, EXAMPLE_EDGES) == []