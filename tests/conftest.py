"""
Pytest fixtures for the constree tests.
"""

import pytest

from constree.ast.tree_nodes import Atom, Pair, Terminal, build_list
from constree.parser import ParserConfig, parse, tokenize


@pytest.fixture
def read():
    """Tokenize and parse text in one step."""
    def _read(text, config=None):
        return parse(tokenize(text), config)
    return _read


@pytest.fixture
def abc_list():
    """The tree for (a b c)."""
    return build_list([Atom("a"), Atom("b"), Atom("c")])


@pytest.fixture
def improper_list():
    """The tree for (a b . c)."""
    return Pair(Atom("a"), Pair(Atom("b"), Atom("c")))


@pytest.fixture
def nested_tree():
    """The tree for ((a b) (c . d) ())."""
    return build_list([
        build_list([Atom("a"), Atom("b")]),
        Pair(Atom("c"), Atom("d")),
        Terminal(),
    ])


@pytest.fixture
def empty_marker_config():
    """Parser configuration with 'empty' as the terminal spelling."""
    return ParserConfig(terminal_marker="empty")
