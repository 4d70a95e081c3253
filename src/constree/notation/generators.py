# src/constree/notation/generators.py

from typing import List, Union

from constree.ast.tree_nodes import Atom, ConsNode, Pair, Terminal, walk_spine
from constree.ast.visitor import TreeVisitor
from constree.parser.config import DEFAULT_TERMINAL_MARKER


def to_dotted_notation(node: ConsNode, terminal_marker: str = DEFAULT_TERMINAL_MARKER) -> str:
    """
    Render a tree in fully parenthesized dotted-pair form, e.g. ``(a . (b . nil))``.

    Uses an explicit work stack, so long lists do not recurse.
    """
    parts: List[str] = []
    # str entries are literal output, everything else is a node still to render
    pending: List[Union[str, ConsNode]] = [node]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Pair):
            pending.extend((")", item.right, " . ", item.left, "("))
        elif isinstance(item, Atom):
            parts.append(item.name)
        else:
            parts.append(terminal_marker)
    return "".join(parts)


class ListNotationGenerator(TreeVisitor):
    """Renders a tree with list sugar, falling back to ``(a b . c)`` for improper lists."""

    def __init__(self, terminal_marker: str = DEFAULT_TERMINAL_MARKER):
        self.terminal_marker = terminal_marker

    def visit_terminal(self, node: Terminal) -> str:
        return self.terminal_marker

    def visit_atom(self, node: Atom) -> str:
        return node.name

    def visit_pair(self, node: Pair) -> str:
        elements, tail = walk_spine(node)
        rendered = []
        for element in elements:
            rendered.append(self.visit(element))
        body = " ".join(rendered)
        if isinstance(tail, Terminal):
            return f"({body})"
        return f"({body} . {self.visit(tail)})"


def to_list_notation(node: ConsNode, terminal_marker: str = DEFAULT_TERMINAL_MARKER) -> str:
    """Render a tree in list notation, e.g. ``(a b)`` for ``(a . (b . nil))``."""
    return ListNotationGenerator(terminal_marker).visit(node)
