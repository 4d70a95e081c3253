# src/constree/ast/__init__.py

from .tree_nodes import (
    NodeTag,
    ConsTreeNode,
    ConsNode,
    Terminal,
    Atom,
    Pair,
    build_list,
    walk_spine,
    is_proper_list,
    count_nodes,
)
from .visitor import TreeVisitor

__all__ = [
    'NodeTag',
    'ConsTreeNode',
    'ConsNode',
    'Terminal',
    'Atom',
    'Pair',
    'build_list',
    'walk_spine',
    'is_proper_list',
    'count_nodes',
    'TreeVisitor',
]
