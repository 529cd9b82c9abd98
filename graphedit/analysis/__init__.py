"""
Graph analysis modules.

This module contains classes for reachability, shortest paths, spanning
trees, cycle detection and centrality.
"""

__all__ = []
