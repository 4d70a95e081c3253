# src/constree/__init__.py
"""
Parse cons-tree notation such as ``(a b . c)`` or ``(a . (b . nil))`` into
binary trees and render them back as dotted-pair or list notation.
"""

from .utils.logging_config import init_default_logging

from .parser import (
    ConsTreeError,
    LexError,
    ParseError,
    DepthExceeded,
    ParserConfig,
    DEFAULT_TERMINAL_MARKER,
    IDENTIFIER_PATTERN,
    Token,
    TokenType,
    tokenize,
    is_complete,
    parse,
)
from .ast import NodeTag, ConsNode, Terminal, Atom, Pair, build_list, walk_spine
from .notation import to_dotted_notation, to_list_notation
from .validator import InputStatus, ClassificationResult, classify_input
from .layout import LayoutConfig, layout_tree, layout_edges
from .api import ConversionResult, convert_text

__version__ = "0.1.0"

init_default_logging()

__all__ = [
    'ConsTreeError',
    'LexError',
    'ParseError',
    'DepthExceeded',
    'ParserConfig',
    'DEFAULT_TERMINAL_MARKER',
    'IDENTIFIER_PATTERN',
    'Token',
    'TokenType',
    'tokenize',
    'is_complete',
    'parse',
    'NodeTag',
    'ConsNode',
    'Terminal',
    'Atom',
    'Pair',
    'build_list',
    'walk_spine',
    'to_dotted_notation',
    'to_list_notation',
    'InputStatus',
    'ClassificationResult',
    'classify_input',
    'LayoutConfig',
    'layout_tree',
    'layout_edges',
    'ConversionResult',
    'convert_text',
]
