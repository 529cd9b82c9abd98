"""
Edge representation.
"""

DEFAULT_WEIGHT = 1


class pyedge:
    """
    A directed connection stored on its start vertex.

    Undirected graphs hold two pyedge objects per connection, one on each
    endpoint. The endpoints are references only; the graph owns the vertices.
    Equality is identity, so removing an edge from an adjacency list removes
    exactly this object.
    """

    def __init__(self, pVertex_start, pVertex_end, iWeight: int = DEFAULT_WEIGHT, iFlag_directed: bool = True):
        self.pVertex_start = pVertex_start
        self.pVertex_end = pVertex_end
        self.iWeight = int(iWeight)
        self.iFlag_directed = iFlag_directed

    @property
    def lVertexID_start(self) -> int:
        return self.pVertex_start.lVertexID

    @property
    def lVertexID_end(self) -> int:
        return self.pVertex_end.lVertexID

    def as_tuple(self):
        """(start id, end id, weight)"""
        return (self.lVertexID_start, self.lVertexID_end, self.iWeight)

    def __repr__(self) -> str:
        return f"pyedge({self.lVertexID_start} -> {self.lVertexID_end}, w={self.iWeight})"
