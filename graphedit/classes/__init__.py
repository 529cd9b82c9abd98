"""
Core data classes for graph representation.

This module contains the fundamental data structures used throughout
the graphedit library.
"""

from .linkedlist import pylinkedlist
from .vertex import pyvertex
from .edge import pyedge

__all__ = [
    'pylinkedlist',
    'pyvertex',
    'pyedge',
]
