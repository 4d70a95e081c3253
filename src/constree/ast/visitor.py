# src/constree/ast/visitor.py

from abc import ABC, abstractmethod

from .tree_nodes import Atom, ConsNode, Pair, Terminal


class TreeVisitor(ABC):
    """Base visitor for cons-tree nodes, dispatching on the node tag"""

    def visit(self, node: ConsNode):
        method_name = f"visit_{node.tag.value.lower()}"
        method = getattr(self, method_name, self.visit_default)
        return method(node)

    def visit_default(self, node: ConsNode):
        raise TypeError(f"{type(self).__name__} cannot visit {node!r}")

    @abstractmethod
    def visit_terminal(self, node: Terminal):
        pass

    @abstractmethod
    def visit_atom(self, node: Atom):
        pass

    @abstractmethod
    def visit_pair(self, node: Pair):
        pass
