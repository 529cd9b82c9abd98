"""
Vertex representation.
"""

from .linkedlist import pylinkedlist


class pyvertex:
    """
    A uniquely identified node of the graph.

    Attributes:
        lVertexID: Caller-chosen integer id, unique within a graph
        sLabel: Display label
        dX, dY: Position, carried along but ignored by the algorithms
        aEdge: Outgoing edges in insertion order (owned by the vertex)
    """

    def __init__(self, lVertexID: int, sLabel: str = "", dX: int = 0, dY: int = 0):
        self.lVertexID = int(lVertexID)
        self.sLabel = sLabel
        self.dX = dX
        self.dY = dY
        self.aEdge = pylinkedlist()

    def get_edge_to(self, pVertex_dest: 'pyvertex'):
        """Return the first outgoing edge whose destination is pVertex_dest, or None."""
        for pEdge in self.aEdge:
            if pEdge.pVertex_end is pVertex_dest:
                return pEdge
        return None

    def __repr__(self) -> str:
        return f"pyvertex(id={self.lVertexID}, label={self.sLabel!r}, x={self.dX}, y={self.dY})"
