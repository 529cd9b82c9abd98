"""
Cycle detection for editable graphs.
"""

import logging
from typing import List

from ..core.graph import GraphStore
from ..core.index_map import IndexMap

logger = logging.getLogger(__name__)


class NetworkAnalyzer:
    """
    Detects structural features of a graph.

    Both DFS variants run on an explicit stack, so depth is bounded by memory
    rather than by the interpreter recursion limit.
    """

    def __init__(self, graph: GraphStore):
        """
        Initialize the network analyzer.

        Args:
            graph: GraphStore instance to analyze
        """
        self.graph = graph

    def _build_index_adjacency(self, index_map: IndexMap) -> List[List[int]]:
        adjacency: List[List[int]] = []
        for pVertex in self.graph.get_vertices():
            neighbors = []
            for pEdge in pVertex.aEdge:
                j = index_map.index_of(pEdge.lVertexID_end)
                if j != -1:
                    neighbors.append(j)
            adjacency.append(neighbors)
        return adjacency

    def has_cycles(self) -> bool:
        """
        Report whether the graph contains any cycle.

        Every component is scanned, starting points in enumeration order.
        """
        index_map = IndexMap(self.graph)
        if index_map.size == 0:
            return False

        adjacency = self._build_index_adjacency(index_map)
        if self.graph.is_directed():
            result = self._has_cycles_directed(adjacency)
        else:
            result = self._has_cycles_undirected(adjacency)

        logger.debug(f"Cycle detection over {index_map.size} vertices: {result}")
        return result

    @staticmethod
    def _has_cycles_directed(adjacency: List[List[int]]) -> bool:
        size = len(adjacency)
        visited = [False] * size
        on_stack = [False] * size

        for root in range(size):
            if visited[root]:
                continue

            visited[root] = True
            on_stack[root] = True
            stack = [(root, iter(adjacency[root]))]

            while stack:
                node, neighbors = stack[-1]
                for neighbor in neighbors:
                    if on_stack[neighbor]:
                        return True
                    if not visited[neighbor]:
                        visited[neighbor] = True
                        on_stack[neighbor] = True
                        stack.append((neighbor, iter(adjacency[neighbor])))
                        break
                else:
                    on_stack[node] = False
                    stack.pop()

        return False

    @staticmethod
    def _has_cycles_undirected(adjacency: List[List[int]]) -> bool:
        size = len(adjacency)
        visited = [False] * size

        for root in range(size):
            if visited[root]:
                continue

            visited[root] = True
            stack = [(root, -1, iter(adjacency[root]))]

            while stack:
                node, parent, neighbors = stack[-1]
                for neighbor in neighbors:
                    if not visited[neighbor]:
                        visited[neighbor] = True
                        stack.append((neighbor, node, iter(adjacency[neighbor])))
                        break
                    if neighbor != parent:
                        return True
                else:
                    stack.pop()

        return False
