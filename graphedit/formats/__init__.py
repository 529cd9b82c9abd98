"""
Text persistence and report formatting.
"""

from .import_graph import graph_from_text, import_graph_from_text
from .export_graph import graph_to_text, export_graph_to_text

__all__ = [
    'graph_from_text',
    'import_graph_from_text',
    'graph_to_text',
    'export_graph_to_text',
]
