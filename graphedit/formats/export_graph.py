"""
Write a graph in the line-oriented text format.
"""

import logging
from typing import List

from ..core.graph import GraphStore

logger = logging.getLogger(__name__)


def _clean_label(sLabel: str) -> str:
    # One record per line; line breaks in a label would split it
    return " ".join(str(sLabel).splitlines())


def graph_to_lines(graph: GraphStore) -> List[str]:
    """
    Vertices in store order, then every stored edge.

    Undirected graphs write both mirror edges; the loader drops the
    duplicate.
    """
    aLine = [
        "TYPE:" + ("DIRECTED" if graph.is_directed() else "UNDIRECTED"),
        "WEIGHTED:" + ("TRUE" if graph.is_weighted() else "FALSE"),
        "NODES",
    ]
    for pVertex in graph.get_vertices():
        aLine.append(f"{pVertex.lVertexID},{_clean_label(pVertex.sLabel)},{pVertex.dX},{pVertex.dY}")

    aLine.append("EDGES")
    for pVertex in graph.get_vertices():
        for pEdge in pVertex.aEdge:
            aLine.append(f"{pEdge.lVertexID_start},{pEdge.lVertexID_end},{pEdge.iWeight}")
    return aLine


def graph_to_text(graph: GraphStore) -> str:
    return "\n".join(graph_to_lines(graph)) + "\n"


def export_graph_to_text(graph: GraphStore, sFilename_out: str) -> bool:
    """
    Save a graph file.

    Returns:
        False if the file cannot be written
    """
    try:
        with open(sFilename_out, "w", encoding="utf-8") as pFile:
            pFile.write(graph_to_text(graph))
    except OSError as e:
        logger.error(f"Cannot write graph file {sFilename_out}: {e}")
        return False

    logger.debug(f"Saved graph to {sFilename_out}")
    return True
