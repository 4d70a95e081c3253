# src/constree/parser/exceptions.py

from typing import Optional


class ConsTreeError(Exception):
    """Base class for every error raised while reading cons-tree notation."""

    def __init__(self, message: str, *args):
        self.message = message
        # args mirror the constructor so copy and pickle rebuild the same error
        super().__init__(message, *args)

    def __str__(self):
        return self.message


class LexError(ConsTreeError):
    """Raised when the input contains text that is not a valid token."""

    def __init__(self, message: str, text: str = "", offset: Optional[int] = None):
        self.text = text
        self.offset = offset
        super().__init__(message, text, offset)


class ParseError(ConsTreeError):
    """Raised on any grammar violation in the token sequence."""

    def __init__(self, message: str, index: Optional[int] = None):
        self.index = index
        super().__init__(message, index)

    def __str__(self):
        if self.index is None:
            return self.message
        return f"{self.message} (at token {self.index})"


class DepthExceeded(ConsTreeError):
    """Raised when parenthesis nesting goes beyond the configured limit."""

    def __init__(self, depth: int, limit: int, index: Optional[int] = None):
        self.depth = depth
        self.limit = limit
        self.index = index
        Exception.__init__(self, depth, limit, index)
        self.message = f"Maximum nesting depth ({limit}) exceeded"
