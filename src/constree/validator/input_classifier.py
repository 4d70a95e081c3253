# src/constree/validator/input_classifier.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from constree.ast.tree_nodes import ConsNode
from constree.parser.completeness import is_complete
from constree.parser.config import ParserConfig
from constree.parser.cons_parser import parse
from constree.parser.exceptions import ConsTreeError
from constree.parser.tokenizer import tokenize
from constree.utils.logging_config import get_logger

logger = get_logger(__name__)


class InputStatus(Enum):
    VALID = "valid"
    PARTIAL = "partial"
    INVALID = "invalid"


@dataclass(frozen=True)
class ClassificationResult:
    status: InputStatus
    message: Optional[str] = None
    tree: Optional[ConsNode] = None

    @property
    def is_valid(self) -> bool:
        return self.status is InputStatus.VALID


def classify_input(text: str, config: Optional[ParserConfig] = None) -> ClassificationResult:
    """
    Classify text typed so far as valid, partial or invalid.

    1. Text that does not tokenize is invalid.
    2. Token sequences with unbalanced parentheses (or none at all) are
       partial: the user may still be typing.
    3. Balanced input is parsed; success is valid, any error is invalid.
    """
    try:
        tokens = tokenize(text)
        if not is_complete(tokens):
            return ClassificationResult(InputStatus.PARTIAL)
        tree = parse(tokens, config)
    except ConsTreeError as e:
        logger.debug("Input classified as invalid: %s", e)
        return ClassificationResult(InputStatus.INVALID, message=str(e))
    return ClassificationResult(InputStatus.VALID, tree=tree)
