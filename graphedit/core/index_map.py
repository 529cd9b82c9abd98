"""
Dense index mapping between sparse vertex ids and matrix positions.
"""

from typing import Dict, List

# Finite stand-in for "no path"; matrices keep integer dtype with it.
INF = 1_000_000_000


class IndexMap:
    """
    Maps the current vertex enumeration onto 0..N-1.

    Built fresh at the start of every whole-graph algorithm and never kept
    across mutations.
    """

    def __init__(self, graph):
        """
        Args:
            graph: GraphStore whose vertices are enumerated in insertion order
        """
        self.id_map: List[int] = [pVertex.lVertexID for pVertex in graph.get_vertices()]
        self._index_of: Dict[int, int] = {lID: i for i, lID in enumerate(self.id_map)}

    @property
    def size(self) -> int:
        return len(self.id_map)

    def index_of(self, vertex_id: int) -> int:
        """Position of vertex_id in the enumeration, or -1 if absent."""
        return self._index_of.get(vertex_id, -1)

    def __len__(self) -> int:
        return len(self.id_map)
