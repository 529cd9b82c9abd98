from graphedit import GraphStore
from graphedit.analysis.spanning import SpanningTree


def _undirected(aEdge, aVertex=None) -> GraphStore:
    graph = GraphStore(directed=False, weighted=True)
    if aVertex is None:
        aVertex = sorted({lID for lSrc, lDst, _ in aEdge for lID in (lSrc, lDst)})
    for lID in aVertex:
        graph.add_vertex(lID, str(lID))
    for lSrc, lDst, iWeight in aEdge:
        graph.add_edge(lSrc, lDst, iWeight)
    return graph


def test_mst_on_connected_graph() -> None:
    graph = _undirected([(1, 2, 4), (1, 3, 1), (2, 3, 2), (3, 4, 5), (2, 4, 3)])
    spanning = SpanningTree(graph)
    aEdge = spanning.get_mst_prim()

    assert len(aEdge) == 3
    assert [pEdge.as_tuple() for pEdge in aEdge] == [(1, 3, 1), (3, 2, 2), (2, 4, 3)]
    assert spanning.get_total_weight(aEdge) == 6


def test_mst_starts_from_first_enumerated_vertex() -> None:
    graph = _undirected([(1, 2, 1), (2, 3, 1)], aVertex=[3, 1, 2])
    aEdge = SpanningTree(graph).get_mst_prim()

    assert aEdge[0].lVertexID_start == 3


def test_mst_partial_on_disconnected_graph(sparse_undirected) -> None:
    aEdge = SpanningTree(sparse_undirected).get_mst_prim()

    # first vertex is 30, whose component is {10, 20, 30}
    assert len(aEdge) == 2
    assert len(aEdge) < sparse_undirected.get_vertex_count() - 1


def test_mst_edge_count_iff_connected() -> None:
    connected = _undirected([(1, 2, 1), (2, 3, 1), (3, 4, 1)])
    assert len(SpanningTree(connected).get_mst_prim()) == 3

    connected.remove_edge(2, 3)
    assert len(SpanningTree(connected).get_mst_prim()) < 3


def test_mst_on_directed_graph_follows_outgoing_edges() -> None:
    graph = GraphStore(directed=True, weighted=True)
    for lID in (1, 2, 3):
        graph.add_vertex(lID, str(lID))
    graph.add_edge(1, 2, 5)
    graph.add_edge(3, 2, 1)

    aEdge = SpanningTree(graph).get_mst_prim()
    assert [pEdge.as_tuple() for pEdge in aEdge] == [(1, 2, 5)]


def test_mst_empty_and_single_vertex() -> None:
    graph = GraphStore()
    assert SpanningTree(graph).get_mst_prim() == []

    graph.add_vertex(1, "A")
    assert SpanningTree(graph).get_mst_prim() == []
