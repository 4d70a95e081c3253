# src/constree/parser/tokenizer.py

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from constree.utils.logging_config import get_logger
from .config import IDENTIFIER_PATTERN
from .exceptions import LexError

logger = get_logger(__name__)


class TokenType(Enum):
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    DOT = "DOT"
    ATOM = "ATOM"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    index: int


# Alternation order matters: punctuation first, identifiers last.
_TOKEN_REGEX = re.compile(
    r"(?P<LPAREN>\()|(?P<RPAREN>\))|(?P<DOT>\.)|(?P<ATOM>" + IDENTIFIER_PATTERN + r")"
)

# Strict per-type shapes used by the second validation pass.
_TOKEN_SHAPES: Dict[TokenType, "re.Pattern[str]"] = {
    TokenType.LPAREN: re.compile(r"\("),
    TokenType.RPAREN: re.compile(r"\)"),
    TokenType.DOT: re.compile(r"\."),
    TokenType.ATOM: re.compile(IDENTIFIER_PATTERN),
}


class Tokenizer:
    """Tokenizer for cons-tree notation."""

    def __init__(self, text: str):
        self.text = text or ""

    def tokenize(self) -> List[Token]:
        tokens = self._extract()
        self._validate(tokens)
        logger.debug("Tokenized %d characters into %d tokens", len(self.text), len(tokens))
        return tokens

    def _extract(self) -> List[Token]:
        """
        First pass: pull out every match of the token grammar.

        Whatever lies between two matches must be whitespace; anything else
        is reported with its character offset.
        """
        tokens: List[Token] = []
        pos = 0
        for match in _TOKEN_REGEX.finditer(self.text):
            self._check_gap(pos, match.start())
            tokens.append(Token(
                type=TokenType[match.lastgroup],
                value=match.group(),
                index=len(tokens)
            ))
            pos = match.end()
        self._check_gap(pos, len(self.text))
        return tokens

    def _check_gap(self, start: int, end: int) -> None:
        gap = self.text[start:end]
        if not gap or gap.isspace():
            return
        stripped = gap.strip()
        offset = start + gap.index(stripped)
        # report the first run of non-whitespace, e.g. "$" in "a$b"
        offending = stripped.split()[0]
        logger.debug("Invalid text %r at offset %d", offending, offset)
        raise LexError(f"Invalid character detected: '{offending}'", offending, offset)

    @staticmethod
    def _validate(tokens: List[Token]) -> None:
        """Second pass: every extracted token must fully match its shape."""
        for token in tokens:
            shape = _TOKEN_SHAPES.get(token.type)
            if shape is None or not shape.fullmatch(token.value):
                logger.debug("Malformed token %r at index %d", token.value, token.index)
                raise LexError(f"Invalid token detected: '{token.value}'", token.value)


def tokenize(text: str) -> List[Token]:
    """
    Split raw cons-tree notation into tokens.

    Raises:
        LexError: if the text contains anything besides parentheses, dots,
            identifiers and whitespace.
    """
    return Tokenizer(text).tokenize()
