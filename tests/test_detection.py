import pytest

from graphedit import GraphStore
from graphedit.analysis.detection import NetworkAnalyzer


def test_directed_triangle_has_cycle(directed_triangle) -> None:
    assert NetworkAnalyzer(directed_triangle).has_cycles()

    directed_triangle.remove_edge(3, 1)
    assert not NetworkAnalyzer(directed_triangle).has_cycles()


def test_directed_diamond_is_acyclic() -> None:
    graph = GraphStore(directed=True)
    for lID in (1, 2, 3, 4):
        graph.add_vertex(lID, str(lID))
    graph.add_edge(1, 2)
    graph.add_edge(1, 3)
    graph.add_edge(2, 4)
    graph.add_edge(3, 4)

    assert not NetworkAnalyzer(graph).has_cycles()


def test_directed_self_loop_is_cycle() -> None:
    graph = GraphStore(directed=True)
    graph.add_vertex(1, "A")
    graph.add_edge(1, 1)

    assert NetworkAnalyzer(graph).has_cycles()


def test_directed_cycle_in_later_component() -> None:
    graph = GraphStore(directed=True)
    for lID in (1, 2, 3, 4, 5):
        graph.add_vertex(lID, str(lID))
    graph.add_edge(1, 2)
    graph.add_edge(3, 4)
    graph.add_edge(4, 5)
    graph.add_edge(5, 3)

    assert NetworkAnalyzer(graph).has_cycles()


@pytest.mark.parametrize("removed", [(1, 2), (2, 3), (3, 1)])
def test_undirected_triangle_has_cycle(undirected_triangle, removed) -> None:
    assert NetworkAnalyzer(undirected_triangle).has_cycles()

    undirected_triangle.remove_edge(*removed)
    assert not NetworkAnalyzer(undirected_triangle).has_cycles()


def test_undirected_tree_then_extra_edge() -> None:
    graph = GraphStore(directed=False)
    for lID in range(1, 8):
        graph.add_vertex(lID, str(lID))
    for lSrc, lDst in ((1, 2), (1, 3), (2, 4), (2, 5), (3, 6), (3, 7)):
        graph.add_edge(lSrc, lDst)

    assert not NetworkAnalyzer(graph).has_cycles()

    graph.add_edge(5, 7)
    assert NetworkAnalyzer(graph).has_cycles()


def test_undirected_forest_with_cycle_in_second_component(sparse_undirected) -> None:
    assert not NetworkAnalyzer(sparse_undirected).has_cycles()

    sparse_undirected.add_vertex(70, "G")
    sparse_undirected.add_edge(50, 70, 1)
    sparse_undirected.add_edge(70, 40, 1)
    assert NetworkAnalyzer(sparse_undirected).has_cycles()


def test_long_directed_chain_does_not_hit_recursion_limit() -> None:
    graph = GraphStore(directed=True)
    nVertex = 5000
    for lID in range(nVertex):
        graph.add_vertex(lID, "")
    for lID in range(nVertex - 1):
        graph.add_edge(lID, lID + 1)

    assert not NetworkAnalyzer(graph).has_cycles()

    graph.add_edge(nVertex - 1, 0)
    assert NetworkAnalyzer(graph).has_cycles()


def test_empty_graph_has_no_cycles() -> None:
    assert not NetworkAnalyzer(GraphStore()).has_cycles()
