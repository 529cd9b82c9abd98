from graphedit import PathStatus, pygraph


def test_facade_scenario() -> None:
    graph = pygraph(directed=True, weighted=True)
    graph.add_vertex(1, "A", 0, 0)
    graph.add_vertex(2, "B", 0, 0)
    graph.add_vertex(3, "C", 0, 0)
    assert graph.add_edge(1, 2, 10)
    assert graph.add_edge(2, 3, 5)
    assert graph.add_edge(1, 3, 20)

    path = graph.get_shortest_path_dijkstra(1, 3)
    assert path.status is PathStatus.FOUND
    assert path.vertex_ids() == [1, 2, 3]
    assert path.total_weight == 15

    assert graph.is_directed() and graph.is_weighted()
    assert not graph.has_cycles()
    assert graph.get_path_matrix().is_reachable(1, 3)
    assert graph.get_all_pairs_shortest_paths().distance(1, 3) == 15
    assert len(graph.get_mst_prim()) == 2
    assert graph.get_closeness_centrality().score_of(2) == 0.2


def test_facade_recomputes_after_mutation() -> None:
    graph = pygraph(directed=False)
    for lID in (1, 2, 3):
        graph.add_vertex(lID, str(lID))
    graph.add_edge(1, 2)
    graph.add_edge(2, 3)
    assert not graph.has_cycles()

    graph.add_edge(3, 1)
    assert graph.has_cycles()

    assert graph.remove_vertex(2)
    assert not graph.has_cycles()
    assert graph.get_all_pairs_shortest_paths().id_map == [1, 3]
    assert [v.lVertexID for v in graph.get_vertices()] == [1, 3]

    graph.clear()
    assert graph.get_vertex(1) is None
    assert graph.store.get_vertex_count() == 0
