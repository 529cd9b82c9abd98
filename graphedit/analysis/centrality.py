"""
Closeness centrality derived from all-pairs distances.
"""

import logging
from typing import Optional

import numpy as np

from ..classes.results import CentralityResult
from ..core.graph import GraphStore
from ..core.index_map import INF
from .pathfinding import PathFinder

logger = logging.getLogger(__name__)


class CentralityAnalyzer:
    """
    Closeness centrality: reachable count divided by the sum of distances.

    Vertices that reach nothing, or whose distance sum is not positive,
    score 0.
    """

    def __init__(self, graph: GraphStore, pathfinder: Optional[PathFinder] = None):
        self.graph = graph
        self.pathfinder = pathfinder if pathfinder is not None else PathFinder(graph)

    def get_closeness_centrality(self) -> CentralityResult:
        distances = self.pathfinder.get_all_pairs_shortest_paths()
        dist = distances.matrix
        size = distances.size

        reachable_mask = (dist < INF) & ~np.eye(size, dtype=bool)
        reachable = reachable_mask.sum(axis=1).astype(np.float64)
        total = np.where(reachable_mask, dist, 0).sum(axis=1).astype(np.float64)

        scores = np.zeros(size, dtype=np.float64)
        np.divide(reachable, total, out=scores, where=total > 0)

        logger.debug(f"Closeness centrality computed for {size} vertices")
        return CentralityResult(scores=scores, id_map=distances.id_map)
