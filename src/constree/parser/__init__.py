
# src/constree/parser/__init__.py

from .exceptions import ConsTreeError, LexError, ParseError, DepthExceeded
from .config import ParserConfig, DEFAULT_TERMINAL_MARKER, IDENTIFIER_PATTERN
from .context import ParserContext
from .tokenizer import Token, TokenType, Tokenizer, tokenize
from .token_stream import TokenStream
from .completeness import is_complete

# Import the parser after the basic components it depends on
from .cons_parser import ConsParser, parse

__all__ = [
    'ConsTreeError',
    'LexError',
    'ParseError',
    'DepthExceeded',
    'ParserConfig',
    'DEFAULT_TERMINAL_MARKER',
    'IDENTIFIER_PATTERN',
    'ParserContext',
    'Token',
    'TokenType',
    'Tokenizer',
    'tokenize',
    'TokenStream',
    'is_complete',
    'ConsParser',
    'parse',
]
