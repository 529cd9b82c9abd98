import pytest

from graphedit import GraphStore


@pytest.fixture
def weighted_digraph() -> GraphStore:
    """1="A", 2="B", 3="C" with 1->2 (10), 2->3 (5), 1->3 (20)."""
    graph = GraphStore(directed=True, weighted=True)
    graph.add_vertex(1, "A", 0, 0)
    graph.add_vertex(2, "B", 10, 0)
    graph.add_vertex(3, "C", 20, 0)
    graph.add_edge(1, 2, 10)
    graph.add_edge(2, 3, 5)
    graph.add_edge(1, 3, 20)
    return graph


@pytest.fixture
def directed_triangle() -> GraphStore:
    graph = GraphStore(directed=True)
    for lID in (1, 2, 3):
        graph.add_vertex(lID, str(lID))
    graph.add_edge(1, 2, 0)
    graph.add_edge(2, 3, 0)
    graph.add_edge(3, 1, 0)
    return graph


@pytest.fixture
def undirected_triangle() -> GraphStore:
    graph = GraphStore(directed=False)
    for lID in (1, 2, 3):
        graph.add_vertex(lID, str(lID))
    graph.add_edge(1, 2, 1)
    graph.add_edge(2, 3, 1)
    graph.add_edge(3, 1, 1)
    return graph


@pytest.fixture
def sparse_undirected() -> GraphStore:
    """Sparse ids, two components: 10-20-30 path plus 40-50 edge, and isolated 60."""
    graph = GraphStore(directed=False, weighted=True)
    for lID, sLabel in ((30, "C"), (10, "A"), (20, "B"), (40, "D"), (50, "E"), (60, "F")):
        graph.add_vertex(lID, sLabel, lID, -lID)
    graph.add_edge(10, 20, 4)
    graph.add_edge(20, 30, 3)
    graph.add_edge(40, 50, 7)
    return graph
