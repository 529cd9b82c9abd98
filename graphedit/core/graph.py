"""
Core graph data structure for the graph editor.

This module provides the vertex/edge store and its mutation primitives
without any analysis.
"""

import logging
from typing import Dict, Iterator, Optional

from ..classes.linkedlist import pylinkedlist
from ..classes.vertex import pyvertex
from ..classes.edge import pyedge, DEFAULT_WEIGHT

logger = logging.getLogger(__name__)


class GraphStore:
    """
    Owns vertices and, through them, edges.

    This class provides:
    - Vertex creation and cascading removal
    - Edge creation and removal, with mirror edges in undirected mode
    - Vertex lookup by id and enumeration in insertion order

    Mutations report failure through their return value and never raise.
    """

    def __init__(self, directed: bool = False, weighted: bool = False):
        """
        Args:
            directed: If False, every connection is stored as two mirror edges
            weighted: Descriptive only; weights are always stored
        """
        self._directed = bool(directed)
        self._weighted = bool(weighted)

        # Insertion order lives in the list, lookup in the dict
        self._aVertex: pylinkedlist = pylinkedlist()
        self._id_to_vertex: Dict[int, pyvertex] = {}

    def is_directed(self) -> bool:
        return self._directed

    def is_weighted(self) -> bool:
        return self._weighted

    def add_vertex(self, vertex_id: int, label: str = "", x: int = 0, y: int = 0) -> Optional[pyvertex]:
        """
        Create a vertex.

        Args:
            vertex_id: Caller-chosen unique id
            label: Display label
            x, y: Position

        Returns:
            The new vertex, or None if the id is invalid or already taken
        """
        lVertexID = self._normalize_id(vertex_id)
        if lVertexID is None:
            logger.debug(f"add_vertex: invalid id {vertex_id!r}")
            return None
        if lVertexID in self._id_to_vertex:
            logger.debug(f"add_vertex: id {lVertexID} already exists")
            return None

        pVertex = pyvertex(lVertexID, label, x, y)
        self._aVertex.push_back(pVertex)
        self._id_to_vertex[lVertexID] = pVertex
        return pVertex

    @staticmethod
    def _normalize_id(vertex_id) -> Optional[int]:
        try:
            return int(vertex_id)
        except (TypeError, ValueError):
            return None

    def get_vertex(self, vertex_id: int) -> Optional[pyvertex]:
        lVertexID = self._normalize_id(vertex_id)
        if lVertexID is None:
            return None
        return self._id_to_vertex.get(lVertexID)

    def get_vertices(self) -> Iterator[pyvertex]:
        """
        Iterate vertices in insertion order.

        The store itself is not exposed; do not mutate the graph while iterating.
        """
        return iter(self._aVertex)

    def get_vertex_count(self) -> int:
        return len(self._aVertex)

    def get_edge_count(self) -> int:
        """Number of stored edge objects (mirror edges count separately)."""
        return sum(len(pVertex.aEdge) for pVertex in self._aVertex)

    def get_edge(self, src_id: int, dest_id: int) -> Optional[pyedge]:
        pVertex_start = self.get_vertex(src_id)
        pVertex_end = self.get_vertex(dest_id)
        if pVertex_start is None or pVertex_end is None:
            return None
        return pVertex_start.get_edge_to(pVertex_end)

    def has_edge(self, src_id: int, dest_id: int) -> bool:
        return self.get_edge(src_id, dest_id) is not None

    def add_edge(self, src_id: int, dest_id: int, weight: int = DEFAULT_WEIGHT) -> bool:
        """
        Create the edge src -> dest, plus dest -> src for undirected graphs.

        The mirror is added without checking whether it already exists.

        Returns:
            False if an endpoint is missing or src -> dest already exists
        """
        pVertex_start = self.get_vertex(src_id)
        pVertex_end = self.get_vertex(dest_id)
        if pVertex_start is None or pVertex_end is None:
            logger.debug(f"add_edge: missing endpoint for {src_id} -> {dest_id}")
            return False

        if pVertex_start.get_edge_to(pVertex_end) is not None:
            logger.debug(f"add_edge: edge {src_id} -> {dest_id} already exists")
            return False

        pVertex_start.aEdge.push_back(pyedge(pVertex_start, pVertex_end, weight, self._directed))
        if not self._directed:
            pVertex_end.aEdge.push_back(pyedge(pVertex_end, pVertex_start, weight, self._directed))

        return True

    def remove_vertex(self, vertex_id: int) -> bool:
        """
        Remove a vertex and every edge that touches it.

        Returns:
            False if the vertex does not exist
        """
        pVertex_target = self.get_vertex(vertex_id)
        if pVertex_target is None:
            return False

        nRemoved = 0
        for pVertex in self._aVertex:
            aEdge_delete = [pEdge for pEdge in pVertex.aEdge if pEdge.pVertex_end is pVertex_target]
            for pEdge in aEdge_delete:
                pVertex.aEdge.remove(pEdge)
            nRemoved += len(aEdge_delete)

        nRemoved += len(pVertex_target.aEdge)
        pVertex_target.aEdge.clear()

        self._aVertex.remove(pVertex_target)
        del self._id_to_vertex[pVertex_target.lVertexID]

        logger.debug(f"Removed vertex {vertex_id} and {nRemoved} edges")
        return True

    def remove_edge(self, src_id: int, dest_id: int) -> bool:
        """
        Remove src -> dest, and dest -> src for undirected graphs.

        Returns:
            Whether the forward edge was removed; a missing mirror is ignored
        """
        pVertex_start = self.get_vertex(src_id)
        pVertex_end = self.get_vertex(dest_id)
        if pVertex_start is None or pVertex_end is None:
            return False

        removed = self._remove_single_edge(pVertex_start, pVertex_end)
        if not self._directed:
            self._remove_single_edge(pVertex_end, pVertex_start)

        return removed

    @staticmethod
    def _remove_single_edge(pVertex_from: pyvertex, pVertex_to: pyvertex) -> bool:
        pEdge = pVertex_from.get_edge_to(pVertex_to)
        if pEdge is None:
            return False
        return pVertex_from.aEdge.remove(pEdge)

    def clear(self) -> None:
        """Release every vertex and edge."""
        for pVertex in self._aVertex:
            pVertex.aEdge.clear()
        self._aVertex.clear()
        self._id_to_vertex.clear()

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"GraphStore({kind}, vertices={len(self._aVertex)}, edges={self.get_edge_count()})"
