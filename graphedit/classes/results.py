"""
Result objects returned by the analysis classes.

Every whole-graph result carries the id_map it was computed with, so
matrix positions can always be translated back to vertex ids.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

import numpy as np

from .edge import pyedge
from ..core.index_map import INF


class PathStatus(Enum):
    FOUND = "found"
    UNREACHABLE = "unreachable"
    INVALID_ENDPOINT = "invalid_endpoint"


@dataclass
class ReachabilityResult:
    """Boolean N x N transitive closure; matrix[i, j] is True if id_map[j] is reachable from id_map[i]."""

    matrix: np.ndarray
    id_map: List[int]

    @property
    def size(self) -> int:
        return len(self.id_map)

    def is_reachable(self, src_id: int, dest_id: int) -> bool:
        if src_id not in self.id_map or dest_id not in self.id_map:
            return False
        return bool(self.matrix[self.id_map.index(src_id), self.id_map.index(dest_id)])


@dataclass
class DistanceResult:
    """
    Integer N x N all-pairs distances.

    Unreachable pairs hold the INF sentinel, not a float infinity.
    """

    matrix: np.ndarray
    id_map: List[int]

    @property
    def size(self) -> int:
        return len(self.id_map)

    def distance(self, src_id: int, dest_id: int) -> int:
        """Distance between two ids, INF if unreachable or unknown."""
        if src_id not in self.id_map or dest_id not in self.id_map:
            return INF
        return int(self.matrix[self.id_map.index(src_id), self.id_map.index(dest_id)])

    def is_finite(self, src_id: int, dest_id: int) -> bool:
        return self.distance(src_id, dest_id) < INF


@dataclass
class ShortestPathResult:
    """
    Edges of a shortest path in start -> end order.

    edges is empty whenever status is not FOUND.
    """

    status: PathStatus
    edges: List[pyedge] = field(default_factory=list)
    total_weight: int = INF

    @property
    def found(self) -> bool:
        return self.status is PathStatus.FOUND

    def vertex_ids(self) -> List[int]:
        if not self.edges:
            return []
        return [self.edges[0].lVertexID_start] + [pEdge.lVertexID_end for pEdge in self.edges]

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self):
        return iter(self.edges)


@dataclass
class CentralityResult:
    """Closeness score per index, aligned with id_map."""

    scores: np.ndarray
    id_map: List[int]

    def score_of(self, vertex_id: int) -> float:
        """Score of a vertex; 0.0 for ids not in id_map, like an isolated vertex."""
        if vertex_id not in self.id_map:
            return 0.0
        return float(self.scores[self.id_map.index(vertex_id)])

    def as_dict(self) -> Dict[int, float]:
        return {lID: float(score) for lID, score in zip(self.id_map, self.scores)}
