# src/constree/parser/token_stream.py

from typing import Optional, Sequence

from .tokenizer import Token, TokenType


class TokenStream:
    """Token stream with single-token lookahead"""

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = list(tokens)
        self.position = 0

    def peek(self, lookahead: int = 1) -> Optional[Token]:
        """Look ahead n tokens without consuming"""
        if self.position + lookahead - 1 < len(self.tokens):
            return self.tokens[self.position + lookahead - 1]
        return None

    def consume(self) -> Optional[Token]:
        """Consume and return next token"""
        if self.position < len(self.tokens):
            token = self.tokens[self.position]
            self.position += 1
            return token
        return None

    def at(self, token_type: TokenType) -> bool:
        """Check whether the next token has the given type"""
        token = self.peek()
        return token is not None and token.type is token_type

    @property
    def has_more(self) -> bool:
        """Check if more tokens are available"""
        return self.position < len(self.tokens)
