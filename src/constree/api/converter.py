# src/constree/api/converter.py

from dataclasses import dataclass
from typing import List, Optional

from constree.ast.tree_nodes import ConsNode, count_nodes
from constree.notation.generators import to_dotted_notation, to_list_notation
from constree.parser.config import ParserConfig
from constree.parser.cons_parser import parse
from constree.parser.tokenizer import Token, tokenize
from constree.utils.logging_config import get_logger, PerformanceTimer

logger = get_logger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Everything produced by one text -> tree -> text run."""
    tokens: List[Token]
    tree: ConsNode
    dotted: str
    listed: str


def convert_text(text: str, config: Optional[ParserConfig] = None) -> ConversionResult:
    """
    Tokenize and parse ``text``, then render the tree in both notations.

    The caller owns the returned result; nothing is cached between calls.

    Raises:
        LexError, ParseError, DepthExceeded: unchanged from the stage that failed.
    """
    config = config or ParserConfig()
    with PerformanceTimer("convert_text"):
        tokens = tokenize(text)
        tree = parse(tokens, config)
        result = ConversionResult(
            tokens=tokens,
            tree=tree,
            dotted=to_dotted_notation(tree, config.terminal_marker),
            listed=to_list_notation(tree, config.terminal_marker),
        )
    logger.debug("Converted %d tokens into a tree of %d nodes", len(tokens), count_nodes(tree))
    return result
