# src/constree/parser/cons_parser.py

from typing import List, Optional, Sequence

from constree.ast.tree_nodes import Atom, ConsNode, Pair, Terminal, build_list
from constree.utils.logging_config import get_logger
from .config import ParserConfig
from .context import ParserContext
from .exceptions import DepthExceeded, ParseError
from .token_stream import TokenStream
from .tokenizer import Token, TokenType

logger = get_logger(__name__)


class ConsParser:
    """
    A recursive descent parser for cons-tree notation.

    Grammar (one token of lookahead)::

        Expression := ATOM | '(' ListBody
        ListBody   := ')' | Sequence ')'
        Sequence   := Expression '.' Expression
                    | Expression Expression*

    A dot right after the first expression of a sequence commits to a
    two-element dotted pair; otherwise the remaining expressions up to the
    closing paren are folded into a list ending in a Terminal.
    """

    def __init__(self, tokens: Sequence[Token], config: Optional[ParserConfig] = None):
        self.config = config if config else ParserConfig()
        self.tokens = TokenStream(tokens)
        self.context = ParserContext(max_depth=self.config.max_depth)

    def parse(self) -> ConsNode:
        """
        Parses the whole token sequence and returns the tree.

        Raises:
            ParseError: on any grammar violation, including trailing tokens.
            DepthExceeded: when nesting goes beyond ``config.max_depth`` or
                beyond what the interpreter stack allows.
        """
        try:
            node = self._parse_expression()
        except RecursionError:
            logger.debug("Interpreter stack exhausted at nesting depth %d", self.context.depth)
            raise DepthExceeded(self.context.depth, self.config.max_depth, None) from None
        trailing = self.tokens.peek()
        if trailing is not None:
            raise ParseError(
                f"Unexpected tokens after parsing completed: '{trailing.value}'",
                trailing.index
            )
        logger.debug(
            "Parsed %d tokens (max nesting %d) into %s",
            len(self.tokens.tokens), self.context.deepest, node.tag.value
        )
        return node

    def _parse_expression(self) -> ConsNode:
        token = self.tokens.peek()
        if token is None:
            raise ParseError("Incomplete expression: expected more tokens")

        if token.type is TokenType.ATOM:
            self.tokens.consume()
            if token.value == self.config.terminal_marker:
                return Terminal()
            return Atom(token.value)

        if token.type is TokenType.LPAREN:
            return self._parse_parenthesized()

        raise ParseError(f"Unexpected token: '{token.value}'", token.index)

    def _parse_parenthesized(self) -> ConsNode:
        lparen = self.tokens.consume()
        self.context.enter_scope(lparen.index)

        if not self.tokens.has_more:
            raise ParseError("Incomplete expression: expected expression after '('", lparen.index)

        if self.tokens.at(TokenType.RPAREN):
            # () is the empty list
            self.tokens.consume()
            self.context.exit_scope()
            return Terminal()

        node = self._parse_sequence()
        self._eat_close(lparen)
        self.context.exit_scope()
        return node

    def _parse_sequence(self) -> ConsNode:
        first = self._parse_expression()

        if self.tokens.at(TokenType.DOT):
            dot = self.tokens.consume()
            if not self.tokens.has_more:
                raise ParseError("Incomplete expression: expected expression after '.'", dot.index)
            second = self._parse_expression()
            return Pair(first, second)

        elements: List[ConsNode] = [first]
        while self.tokens.has_more and not self.tokens.at(TokenType.RPAREN):
            elements.append(self._parse_expression())
        return build_list(elements)

    def _eat_close(self, lparen: Token) -> None:
        token = self.tokens.peek()
        if token is not None and token.type is TokenType.RPAREN:
            self.tokens.consume()
            return
        found = f"'{token.value}'" if token is not None else "end of input"
        raise ParseError(
            f"Expected ')' to close '(' at token {lparen.index}, but got {found}",
            token.index if token is not None else None
        )


def parse(tokens: Sequence[Token], config: Optional[ParserConfig] = None) -> ConsNode:
    """
    Parses a token sequence into a cons tree.
    """
    return ConsParser(tokens, config).parse()
