import re
from dataclasses import dataclass

DEFAULT_TERMINAL_MARKER = "nil"
IDENTIFIER_PATTERN = r"[a-zA-Z_][a-zA-Z0-9_]*"
DEFAULT_MAX_DEPTH = 200


@dataclass
class ParserConfig:
    """Configuration for parser behavior"""
    terminal_marker: str = DEFAULT_TERMINAL_MARKER
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        if not re.fullmatch(IDENTIFIER_PATTERN, self.terminal_marker or ""):
            raise ValueError(
                f"Terminal marker must be an identifier, got {self.terminal_marker!r}"
            )
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
