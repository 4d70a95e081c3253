# src/constree/ast/tree_nodes.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union


class NodeTag(Enum):
    TERMINAL = "TERMINAL"
    ATOM = "ATOM"
    PAIR = "PAIR"


class ConsTreeNode:
    """Base class for all cons-tree nodes."""
    tag: NodeTag


@dataclass(frozen=True)
class Terminal(ConsTreeNode):
    """The empty leaf that closes a proper list."""
    tag: NodeTag = field(default=NodeTag.TERMINAL, init=False, repr=False)


@dataclass(frozen=True)
class Atom(ConsTreeNode):
    name: str
    tag: NodeTag = field(default=NodeTag.ATOM, init=False, repr=False)


@dataclass(frozen=True)
class Pair(ConsTreeNode):
    left: "ConsNode"
    right: "ConsNode"
    tag: NodeTag = field(default=NodeTag.PAIR, init=False, repr=False)


ConsNode = Union[Terminal, Atom, Pair]


def build_list(elements: Iterable[ConsNode], tail: Optional[ConsNode] = None) -> ConsNode:
    """
    Right-fold a sequence of nodes into nested pairs.

    ``[e1, e2, ..., eN]`` becomes ``Pair(e1, Pair(e2, ... Pair(eN, tail)))``;
    the tail defaults to a fresh Terminal, and an empty sequence yields the
    tail itself.
    """
    node = Terminal() if tail is None else tail
    for element in reversed(list(elements)):
        node = Pair(element, node)
    return node


def walk_spine(node: ConsNode) -> Tuple[List[ConsNode], ConsNode]:
    """
    Collect the left children along the right spine of ``node``.

    Returns the collected elements and the first non-pair node reached.
    Inverse of :func:`build_list`.
    """
    elements: List[ConsNode] = []
    while isinstance(node, Pair):
        elements.append(node.left)
        node = node.right
    return elements, node


def is_proper_list(node: ConsNode) -> bool:
    """True for a Terminal or a pair chain that ends in a Terminal."""
    _, tail = walk_spine(node)
    return isinstance(tail, Terminal)


def count_nodes(node: ConsNode) -> int:
    """Number of nodes in the tree, counted without recursion."""
    total = 0
    pending = [node]
    while pending:
        current = pending.pop()
        total += 1
        if isinstance(current, Pair):
            pending.append(current.right)
            pending.append(current.left)
    return total
