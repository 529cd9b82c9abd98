"""
Path finding and reachability analysis for editable graphs.

This module provides the matrix-based closure, single-source and all-pairs
shortest path algorithms.
"""

import logging
from typing import List

import numpy as np

from ..classes.edge import pyedge
from ..classes.results import (
    DistanceResult,
    PathStatus,
    ReachabilityResult,
    ShortestPathResult,
)
from ..core.graph import GraphStore
from ..core.index_map import INF, IndexMap

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Path finding algorithms over a GraphStore.

    This class provides methods for:
    - Reachability closure (Warshall)
    - Single-source shortest path (Dijkstra)
    - All-pairs shortest paths (Floyd-Warshall)

    Each call rebuilds the index map from the current vertex set.
    """

    def __init__(self, graph: GraphStore):
        """
        Initialize the path finder.

        Args:
            graph: GraphStore instance to analyze
        """
        self.graph = graph

    def get_path_matrix(self) -> ReachabilityResult:
        """
        Compute the transitive closure of the edge relation.

        Returns:
            ReachabilityResult with a boolean N x N matrix and its id_map.
            The diagonal is only True where a cycle or self-loop reaches back.
        """
        index_map = IndexMap(self.graph)
        size = index_map.size
        matrix = np.zeros((size, size), dtype=bool)

        for i, pVertex in enumerate(self.graph.get_vertices()):
            for pEdge in pVertex.aEdge:
                j = index_map.index_of(pEdge.lVertexID_end)
                if j != -1:
                    matrix[i, j] = True

        # Row k and column k do not change during pass k
        for k in range(size):
            matrix |= np.outer(matrix[:, k], matrix[k, :])

        logger.debug(f"Reachability closure over {size} vertices, {int(matrix.sum())} reachable pairs")
        return ReachabilityResult(matrix=matrix, id_map=list(index_map.id_map))

    def get_shortest_path_dijkstra(self, start_id: int, end_id: int) -> ShortestPathResult:
        """
        Find the minimum-weight path between two vertices.

        Ties in the selection step go to the lowest index; a relaxation only
        overwrites on a strictly smaller distance.

        Args:
            start_id: Starting vertex ID
            end_id: Target vertex ID

        Returns:
            ShortestPathResult; its edges are empty unless status is FOUND
        """
        index_map = IndexMap(self.graph)
        size = index_map.size
        start_idx = index_map.index_of(start_id)
        end_idx = index_map.index_of(end_id)

        if start_idx == -1 or end_idx == -1:
            logger.debug(f"Dijkstra: invalid endpoint {start_id} -> {end_id}")
            return ShortestPathResult(status=PathStatus.INVALID_ENDPOINT)

        aVertex = list(self.graph.get_vertices())
        dist = [INF] * size
        pred = [-1] * size
        visited = [False] * size
        dist[start_idx] = 0

        for _ in range(size):
            u = -1
            min_val = INF
            for j in range(size):
                if not visited[j] and dist[j] < min_val:
                    min_val = dist[j]
                    u = j

            if u == -1 or dist[u] == INF:
                break
            visited[u] = True

            if u == end_idx:
                break

            for pEdge in aVertex[u].aEdge:
                v = index_map.index_of(pEdge.lVertexID_end)
                if v != -1 and not visited[v]:
                    candidate = dist[u] + pEdge.iWeight
                    if candidate < dist[v]:
                        dist[v] = candidate
                        pred[v] = u

        if dist[end_idx] == INF:
            logger.debug(f"Dijkstra: {end_id} unreachable from {start_id}")
            return ShortestPathResult(status=PathStatus.UNREACHABLE)

        aEdge_path = self._reconstruct_path(aVertex, dist, pred, start_idx, end_idx)
        return ShortestPathResult(status=PathStatus.FOUND, edges=aEdge_path, total_weight=dist[end_idx])

    @staticmethod
    def _reconstruct_path(aVertex, dist: List[int], pred: List[int], start_idx: int, end_idx: int) -> List[pyedge]:
        """
        Walk predecessors back from end to start.

        At each step the first edge (adjacency order) whose weight closes the
        distance gap is taken.
        """
        aEdge_reversed: List[pyedge] = []
        current = end_idx
        while current != -1 and current != start_idx:
            previous = pred[current]
            if previous != -1:
                pVertex_current = aVertex[current]
                for pEdge in aVertex[previous].aEdge:
                    if pEdge.pVertex_end is pVertex_current and dist[previous] + pEdge.iWeight == dist[current]:
                        aEdge_reversed.append(pEdge)
                        break
            current = previous

        aEdge_reversed.reverse()
        return aEdge_reversed

    def get_all_pairs_shortest_paths(self) -> DistanceResult:
        """
        Compute all-pairs distances with Floyd-Warshall.

        Returns:
            DistanceResult with an int64 N x N matrix (diagonal 0, INF for
            unreachable pairs) and the id_map used to build it
        """
        index_map = IndexMap(self.graph)
        size = index_map.size
        dist = np.full((size, size), INF, dtype=np.int64)
        np.fill_diagonal(dist, 0)

        for i, pVertex in enumerate(self.graph.get_vertices()):
            for pEdge in pVertex.aEdge:
                j = index_map.index_of(pEdge.lVertexID_end)
                if j != -1 and pEdge.iWeight < dist[i, j]:
                    dist[i, j] = pEdge.iWeight

        for k in range(size):
            via_k_from = dist[:, k].copy()[:, np.newaxis]
            via_k_to = dist[k, :].copy()[np.newaxis, :]
            finite = (via_k_from != INF) & (via_k_to != INF)
            candidate = via_k_from + via_k_to
            improve = finite & (candidate < dist)
            dist[improve] = candidate[improve]

        logger.debug(f"Floyd-Warshall over {size} vertices")
        return DistanceResult(matrix=dist, id_map=list(index_map.id_map))
