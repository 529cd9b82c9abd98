"""
Minimum spanning tree construction.
"""

import logging
from typing import List, Optional

from ..classes.edge import pyedge
from ..core.graph import GraphStore
from ..core.index_map import INF, IndexMap

logger = logging.getLogger(__name__)


class SpanningTree:
    """
    Prim's algorithm over the stored edge objects.

    Growth starts at the first vertex in enumeration order and follows
    outgoing edges only. On an undirected graph this is the usual MST. On a
    directed graph it is a greedy spanning arborescence rooted at that
    vertex, which can miss vertices reachable only against edge direction.
    """

    def __init__(self, graph: GraphStore):
        self.graph = graph

    def get_mst_prim(self) -> List[pyedge]:
        """
        Build the spanning tree edge list.

        Returns:
            Chosen edges in selection order. Fewer than V-1 edges means the
            graph is not connected from the first vertex.
        """
        index_map = IndexMap(self.graph)
        size = index_map.size
        aEdge_tree: List[pyedge] = []
        if size == 0:
            return aEdge_tree

        aVertex = list(self.graph.get_vertices())
        visited = [False] * size
        visited[0] = True

        while len(aEdge_tree) < size - 1:
            pEdge_min: Optional[pyedge] = None
            min_weight = INF

            for u, pVertex in enumerate(aVertex):
                if not visited[u]:
                    continue
                for pEdge in pVertex.aEdge:
                    v = index_map.index_of(pEdge.lVertexID_end)
                    if v != -1 and not visited[v] and pEdge.iWeight < min_weight:
                        min_weight = pEdge.iWeight
                        pEdge_min = pEdge

            if pEdge_min is None:
                logger.debug(f"Prim stopped early with {len(aEdge_tree)} of {size - 1} edges")
                break

            aEdge_tree.append(pEdge_min)
            visited[index_map.index_of(pEdge_min.lVertexID_end)] = True

        return aEdge_tree

    def get_total_weight(self, aEdge_tree: Optional[List[pyedge]] = None) -> int:
        if aEdge_tree is None:
            aEdge_tree = self.get_mst_prim()
        return sum(pEdge.iWeight for pEdge in aEdge_tree)
