"""
Core graph data structures and management.

This module contains the vertex/edge store, the dense index mapping and the
pygraph facade.
"""

__all__ = []
