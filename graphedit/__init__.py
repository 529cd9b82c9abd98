"""
PyGraphEdit - Graph Editing and Analysis Core

A Python library holding the data store and analysis algorithms behind an
interactive graph editor. Vertices carry caller-chosen sparse ids; matrix
algorithms translate them to dense indices on every call.

Main Classes:
    pygraph: Facade combining the store and every analysis (facade)
    GraphStore: Vertex/edge store with mutation primitives
    pyvertex: Vertex representation
    pyedge: Edge representation
    pylinkedlist: Ordered container used for vertices and adjacency lists

Example:
    >>> from graphedit import pygraph
    >>> graph = pygraph(directed=True, weighted=True)
    >>> a = graph.add_vertex(1, "A")
    >>> b = graph.add_vertex(2, "B")
    >>> graph.add_edge(1, 2, 10)
    True
    >>> graph.get_shortest_path_dijkstra(1, 2).total_weight
    10
"""

__version__ = "0.1.0"

from graphedit.classes.linkedlist import pylinkedlist
from graphedit.classes.vertex import pyvertex
from graphedit.classes.edge import pyedge
from graphedit.classes.results import (
    PathStatus,
    ReachabilityResult,
    DistanceResult,
    ShortestPathResult,
    CentralityResult,
)
from graphedit.core.index_map import INF, IndexMap
from graphedit.core.graph import GraphStore
from graphedit.core.pygraph import pygraph

__all__ = [
    'pygraph',
    'GraphStore',
    'IndexMap',
    'INF',
    'pyvertex',
    'pyedge',
    'pylinkedlist',
    'PathStatus',
    'ReachabilityResult',
    'DistanceResult',
    'ShortestPathResult',
    'CentralityResult',
]
