# src/constree/layout/tree_layout.py

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from constree.ast.tree_nodes import Atom, ConsNode, Pair, Terminal
from constree.parser.config import DEFAULT_TERMINAL_MARKER
from constree.utils.logging_config import get_logger

logger = get_logger(__name__)

LAYOUT_COLUMNS = [
    'node_id', 'tag', 'label', 'depth', 'parent_id', 'side',
    'x', 'y', 'canvas_x', 'canvas_y',
]
EDGE_COLUMNS = ['parent_id', 'child_id', 'x1', 'y1', 'x2', 'y2']


@dataclass
class LayoutConfig:
    """Geometry used to place nodes on a canvas"""
    node_radius: float = 20.0
    level_height: float = 80.0
    top_margin: float = 20.0
    canvas_width: float = 800.0

    def __post_init__(self):
        if self.node_radius <= 0:
            raise ValueError(f"node_radius must be positive, got {self.node_radius}")
        if self.canvas_width <= 2 * self.node_radius:
            raise ValueError(
                f"canvas_width ({self.canvas_width}) must exceed the node diameter "
                f"({2 * self.node_radius})"
            )


# (key, node, depth, parent key, side)
_Frame = Tuple[int, ConsNode, int, Optional[int], str]


def _in_order(root: ConsNode) -> List[_Frame]:
    """In-order traversal with an explicit stack; keys identify nodes uniquely."""
    rows: List[_Frame] = []
    stack: List[_Frame] = []
    current: Optional[_Frame] = (0, root, 0, None, 'root')
    next_key = 1

    while stack or current is not None:
        while current is not None:
            stack.append(current)
            key, node, depth, _, _ = current
            if isinstance(node, Pair):
                current = (next_key, node.left, depth + 1, key, 'left')
                next_key += 1
            else:
                current = None

        frame = stack.pop()
        rows.append(frame)
        key, node, depth, _, _ = frame
        if isinstance(node, Pair):
            current = (next_key, node.right, depth + 1, key, 'right')
            next_key += 1

    return rows


def _label(node: ConsNode, terminal_marker: str) -> str:
    if isinstance(node, Atom):
        return node.name
    if isinstance(node, Terminal):
        return terminal_marker
    return ''


def layout_tree(
    tree: ConsNode,
    config: Optional[LayoutConfig] = None,
    terminal_marker: str = DEFAULT_TERMINAL_MARKER
) -> pd.DataFrame:
    """
    Compute canvas positions for every node of a tree.

    Nodes are placed left to right in in-order sequence, one level per
    depth, then scaled horizontally so the whole tree fits the canvas width.

    Args:
        tree: Parsed tree, read only
        config: Canvas geometry (defaults to ``LayoutConfig()``)
        terminal_marker: Label used for Terminal nodes

    Returns:
        DataFrame with one row per node, ordered by ``node_id``
    """
    config = config or LayoutConfig()
    frames = _in_order(tree)
    order_of: Dict[int, int] = {frame[0]: position for position, frame in enumerate(frames)}

    radius = config.node_radius
    order = np.arange(len(frames), dtype=float)
    depth = np.array([frame[2] for frame in frames], dtype=int)

    x = order * radius * 3
    y = depth * config.level_height + radius + config.top_margin

    min_x, max_x = x.min(), x.max()
    total_width = max_x - min_x + radius * 2
    scale = (config.canvas_width - radius * 2) / total_width
    offset_x = -min_x * scale + radius

    layout = pd.DataFrame({
        'node_id': np.arange(len(frames)),
        'tag': [frame[1].tag.value for frame in frames],
        'label': [_label(frame[1], terminal_marker) for frame in frames],
        'depth': depth,
        'parent_id': [order_of[frame[3]] if frame[3] is not None else -1 for frame in frames],
        'side': [frame[4] for frame in frames],
        'x': x,
        'y': y,
        'canvas_x': x * scale + offset_x,
        'canvas_y': y,
    }, columns=LAYOUT_COLUMNS)

    logger.debug("Laid out %d nodes (scale %.4f)", len(layout), scale)
    return layout


def layout_edges(frame: pd.DataFrame, config: Optional[LayoutConfig] = None) -> pd.DataFrame:
    """
    Line segments joining each node to its parent.

    Segments run from the bottom of the parent circle to the top of the
    child circle, in canvas coordinates.
    """
    config = config or LayoutConfig()
    children = frame[frame['parent_id'] >= 0]
    if children.empty:
        return pd.DataFrame(columns=EDGE_COLUMNS)

    parents = frame[['node_id', 'canvas_x', 'canvas_y']].rename(
        columns={'node_id': 'parent_id', 'canvas_x': 'px', 'canvas_y': 'py'}
    )
    joined = children.merge(parents, on='parent_id', how='inner')

    edges = pd.DataFrame({
        'parent_id': joined['parent_id'],
        'child_id': joined['node_id'],
        'x1': joined['px'],
        'y1': joined['py'] + config.node_radius,
        'x2': joined['canvas_x'],
        'y2': joined['canvas_y'] - config.node_radius,
    }, columns=EDGE_COLUMNS)
    return edges.sort_values('child_id').reset_index(drop=True)
