"""
Plain-text renderings of analysis results.
"""

from typing import List, Optional

from ..classes.edge import pyedge
from ..classes.results import (
    CentralityResult,
    DistanceResult,
    ReachabilityResult,
    ShortestPathResult,
)
from ..core.graph import GraphStore
from ..core.index_map import INF


def format_path_matrix(result: ReachabilityResult) -> str:
    aLine = ["Path matrix (reachability):"]
    for i in range(result.size):
        aLine.append(" ".join("1" if result.matrix[i, j] else "0" for j in range(result.size)))
    return "\n".join(aLine) + "\n"


def format_distance_matrix(result: DistanceResult) -> str:
    """Distance table headed by vertex ids, INF for unreachable pairs."""
    aLine = ["Floyd-Warshall (distances):", "    " + " ".join(str(lID) for lID in result.id_map)]
    for i, lID in enumerate(result.id_map):
        aCell = []
        for j in range(result.size):
            value = int(result.matrix[i, j])
            aCell.append("INF" if value >= INF else str(value))
        aLine.append(f"{lID}: " + " ".join(aCell))
    return "\n".join(aLine) + "\n"


def format_edges(aEdge: List[pyedge]) -> str:
    return "".join(f"{pEdge.lVertexID_start} -> {pEdge.lVertexID_end} ({pEdge.iWeight})\n" for pEdge in aEdge)


def format_shortest_path(result: ShortestPathResult) -> str:
    if not result.found or not result.edges:
        return f"No path found ({result.status.value}).\n"
    return "Shortest path:\n" + format_edges(result.edges) + f"Total weight: {result.total_weight}\n"


def format_mst(aEdge: List[pyedge]) -> str:
    return f"MST edges: {len(aEdge)}\n" + format_edges(aEdge)


def format_centrality(result: CentralityResult, graph: Optional[GraphStore] = None) -> str:
    """One line per vertex, labelled when a graph is given."""
    aLine = ["Closeness centrality:"]
    for lID, dScore in zip(result.id_map, result.scores):
        sName = str(lID)
        if graph is not None:
            pVertex = graph.get_vertex(lID)
            if pVertex is None:
                continue
            sName = pVertex.sLabel
        aLine.append(f"{sName}: {dScore:.4f}")
    return "\n".join(aLine) + "\n"
