# src/constree/layout/__init__.py

from .tree_layout import LayoutConfig, layout_tree, layout_edges, LAYOUT_COLUMNS, EDGE_COLUMNS

__all__ = [
    'LayoutConfig',
    'layout_tree',
    'layout_edges',
    'LAYOUT_COLUMNS',
    'EDGE_COLUMNS',
]
