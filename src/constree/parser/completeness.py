# src/constree/parser/completeness.py

from typing import Sequence

from .tokenizer import Token, TokenType


def is_complete(tokens: Sequence[Token]) -> bool:
    """
    Check whether a token sequence has balanced parentheses.

    Returns False as soon as a ')' has no matching '(' and for an empty
    sequence. Dots and identifiers are not inspected, so a True result only
    means the input is worth handing to the parser.
    """
    depth = 0
    for token in tokens:
        if token.type is TokenType.LPAREN:
            depth += 1
        elif token.type is TokenType.RPAREN:
            depth -= 1
            if depth < 0:
                return False
    return depth == 0 and len(tokens) > 0
