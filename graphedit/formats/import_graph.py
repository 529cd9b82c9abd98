"""
Read a graph from the line-oriented text format.

    TYPE:DIRECTED|UNDIRECTED
    WEIGHTED:TRUE|FALSE
    NODES
    <id>,<label>,<x>,<y>
    EDGES
    <srcId>,<destId>,<weight>
"""

import logging
from typing import Iterable, Optional

from ..core.graph import GraphStore

logger = logging.getLogger(__name__)


def _parse_header(sLine: str, sKey: str, sTrue: str) -> bool:
    sPrefix = sKey + ":"
    if not sLine.startswith(sPrefix):
        logger.warning(f"Expected '{sPrefix}' header, got {sLine!r}")
        return False
    return sLine[len(sPrefix):].strip().upper() == sTrue


def graph_from_lines(aLine: Iterable[str]) -> GraphStore:
    """
    Build a graph by replaying add_vertex then add_edge in file order.

    Malformed lines are skipped. Duplicate edges, including the mirror
    edges written for undirected graphs, are rejected by add_edge.
    """
    iterator = iter(aLine)
    sType = next(iterator, "").strip()
    sWeighted = next(iterator, "").strip()
    directed = _parse_header(sType, "TYPE", "DIRECTED")
    weighted = _parse_header(sWeighted, "WEIGHTED", "TRUE")

    graph = GraphStore(directed, weighted)
    sSection = ""
    nVertex = nEdge = 0

    for lLine, sLine in enumerate(iterator, start=3):
        sLine = sLine.rstrip("\r\n")
        if not sLine.strip():
            continue
        if sLine in ("NODES", "EDGES"):
            sSection = sLine
            continue

        aField = sLine.split(",")
        try:
            if sSection == "NODES":
                if len(aField) < 4:
                    logger.warning(f"Line {lLine}: vertex needs 4 fields, got {len(aField)}")
                    continue
                # Labels may contain commas; id is first, coordinates are last
                lID = int(aField[0])
                sLabel = ",".join(aField[1:-2])
                iX = int(aField[-2])
                iY = int(aField[-1])
                if graph.add_vertex(lID, sLabel, iX, iY) is not None:
                    nVertex += 1
            elif sSection == "EDGES":
                if len(aField) < 3:
                    logger.warning(f"Line {lLine}: edge needs 3 fields, got {len(aField)}")
                    continue
                if graph.add_edge(int(aField[0]), int(aField[1]), int(aField[2])):
                    nEdge += 1
            else:
                logger.warning(f"Line {lLine}: data outside NODES/EDGES section")
        except ValueError as e:
            logger.warning(f"Line {lLine}: cannot parse {sLine!r}: {e}")

    logger.debug(f"Loaded graph with {nVertex} vertices and {nEdge} edge insertions")
    return graph


def graph_from_text(sText: str) -> GraphStore:
    return graph_from_lines(sText.splitlines())


def import_graph_from_text(sFilename_in: str) -> Optional[GraphStore]:
    """
    Load a graph file.

    Args:
        sFilename_in: Path of the file to read

    Returns:
        The graph, or None if the file cannot be read
    """
    try:
        with open(sFilename_in, "r", encoding="utf-8") as pFile:
            return graph_from_lines(pFile)
    except OSError as e:
        logger.error(f"Cannot read graph file {sFilename_in}: {e}")
        return None
