"""
Main facade class for graph editing and analysis.

This module provides the pygraph class that owns a GraphStore and
delegates to the analysis modules.
"""

import logging
from typing import Iterator, List, Optional

from ..classes.edge import pyedge, DEFAULT_WEIGHT
from ..classes.results import (
    CentralityResult,
    DistanceResult,
    ReachabilityResult,
    ShortestPathResult,
)
from ..classes.vertex import pyvertex
from .graph import GraphStore
from ..analysis.centrality import CentralityAnalyzer
from ..analysis.detection import NetworkAnalyzer
from ..analysis.pathfinding import PathFinder
from ..analysis.spanning import SpanningTree

logger = logging.getLogger(__name__)


class pygraph:
    """
    Main facade class for graph editing and analysis.

    Mutations go straight to the store; every analysis call recomputes from
    the current state.
    """

    def __init__(self, directed: bool = False, weighted: bool = False, graph: Optional[GraphStore] = None):
        """
        Args:
            directed: Directed mode, fixed for the lifetime of the graph
            weighted: Descriptive weighted flag
            graph: Existing store to wrap instead of creating a new one
        """
        self._graph = graph if graph is not None else GraphStore(directed, weighted)

        self._pathfinder = PathFinder(self._graph)
        self._analyzer = NetworkAnalyzer(self._graph)
        self._spanning = SpanningTree(self._graph)
        self._centrality = CentralityAnalyzer(self._graph, self._pathfinder)

    @property
    def store(self) -> GraphStore:
        return self._graph

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def add_vertex(self, vertex_id: int, label: str = "", x: int = 0, y: int = 0) -> Optional[pyvertex]:
        """Create a vertex; None if the id exists."""
        return self._graph.add_vertex(vertex_id, label, x, y)

    def add_edge(self, src_id: int, dest_id: int, weight: int = DEFAULT_WEIGHT) -> bool:
        """Create an edge (and its mirror when undirected)."""
        return self._graph.add_edge(src_id, dest_id, weight)

    def remove_vertex(self, vertex_id: int) -> bool:
        """Remove a vertex and all edges touching it."""
        return self._graph.remove_vertex(vertex_id)

    def remove_edge(self, src_id: int, dest_id: int) -> bool:
        """Remove an edge (and its mirror when undirected)."""
        return self._graph.remove_edge(src_id, dest_id)

    def get_vertex(self, vertex_id: int) -> Optional[pyvertex]:
        return self._graph.get_vertex(vertex_id)

    def get_vertices(self) -> Iterator[pyvertex]:
        """Iterate vertices in insertion order."""
        return self._graph.get_vertices()

    def is_directed(self) -> bool:
        return self._graph.is_directed()

    def is_weighted(self) -> bool:
        return self._graph.is_weighted()

    def clear(self) -> None:
        self._graph.clear()

    # ========================================================================
    # PATH FINDING & ANALYSIS
    # ========================================================================

    def get_path_matrix(self) -> ReachabilityResult:
        """Transitive closure (Warshall)."""
        return self._pathfinder.get_path_matrix()

    def get_shortest_path_dijkstra(self, start_id: int, end_id: int) -> ShortestPathResult:
        """Single-source shortest path between two ids."""
        return self._pathfinder.get_shortest_path_dijkstra(start_id, end_id)

    def get_all_pairs_shortest_paths(self) -> DistanceResult:
        """All-pairs distances (Floyd-Warshall)."""
        return self._pathfinder.get_all_pairs_shortest_paths()

    def get_mst_prim(self) -> List[pyedge]:
        """Possibly partial spanning tree rooted at the first vertex."""
        return self._spanning.get_mst_prim()

    def has_cycles(self) -> bool:
        return self._analyzer.has_cycles()

    def get_closeness_centrality(self) -> CentralityResult:
        return self._centrality.get_closeness_centrality()
