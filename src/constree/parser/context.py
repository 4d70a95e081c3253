# src/constree/parser/context.py

from dataclasses import dataclass
from typing import Optional

from .config import DEFAULT_MAX_DEPTH
from .exceptions import DepthExceeded


@dataclass
class ParserContext:
    """Nesting bookkeeping for a single parse run"""

    max_depth: int = DEFAULT_MAX_DEPTH
    depth: int = 0
    deepest: int = 0

    def enter_scope(self, index: Optional[int] = None):
        """Enter a new nesting level; raise once the maximum depth is exceeded."""
        self.depth += 1
        if self.depth > self.max_depth:
            raise DepthExceeded(self.depth, self.max_depth, index)
        self.deepest = max(self.deepest, self.depth)

    def exit_scope(self):
        """Exit the current nesting level"""
        self.depth -= 1
