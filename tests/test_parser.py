import copy
import pickle

import pytest

from constree.ast.tree_nodes import Atom, Pair, Terminal, build_list
from constree.parser import ConsParser, ParserConfig, tokenize
from constree.parser.exceptions import ConsTreeError, DepthExceeded, LexError, ParseError


def test_terminal_marker(read):
    assert read("nil") == Terminal()


def test_bare_atom(read):
    assert read("a") == Atom("a")


def test_empty_list_is_terminal(read):
    assert read("()") == Terminal()
    assert read("( )") != Pair(Terminal(), Terminal())


def test_single_element_list(read):
    assert read("(a)") == Pair(Atom("a"), Terminal())


def test_list_folds_to_nested_pairs(read, abc_list):
    assert read("(a b c)") == abc_list
    assert read("(a b c)") == read("(a . (b . (c . nil)))")


def test_dotted_pair(read):
    assert read("(a . b)") == Pair(Atom("a"), Atom("b"))


def test_improper_list_in_dotted_form(read, improper_list):
    assert read("(a . (b . c))") == improper_list


def test_nested_structures(read, nested_tree):
    assert read("((a b) (c . d) ())") == nested_tree


def test_terminal_inside_list(read):
    assert read("(nil)") == Pair(Terminal(), Terminal())
    assert read("(nil nil)") == build_list([Terminal(), Terminal()])
    assert read("(() . ())") == Pair(Terminal(), Terminal())


def test_dot_after_list_element_pairs_with_nested_list(read):
    assert read("(a . (b c))") == Pair(Atom("a"), build_list([Atom("b"), Atom("c")]))


def test_parser_accepts_token_list_directly():
    tree = ConsParser(tokenize("(x y)")).parse()
    assert tree == build_list([Atom("x"), Atom("y")])


def test_custom_terminal_marker(read, empty_marker_config):
    assert read("empty", empty_marker_config) == Terminal()
    assert read("nil", empty_marker_config) == Atom("nil")
    assert read("(a b)", empty_marker_config) == read("(a . (b . empty))", empty_marker_config)


def test_missing_close_paren(read):
    with pytest.raises(ParseError) as excinfo:
        read("(a")
    assert "Expected ')'" in excinfo.value.message
    assert "end of input" in excinfo.value.message
    assert excinfo.value.index is None


def test_unexpected_close_paren(read):
    with pytest.raises(ParseError) as excinfo:
        read(")")
    assert "Unexpected token: ')'" in excinfo.value.message
    assert excinfo.value.index == 0


def test_empty_input(read):
    with pytest.raises(ParseError, match="Incomplete expression"):
        read("")


def test_open_paren_at_end(read):
    with pytest.raises(ParseError) as excinfo:
        read("(")
    assert "after '('" in excinfo.value.message
    assert excinfo.value.index == 0


def test_dot_at_end(read):
    with pytest.raises(ParseError) as excinfo:
        read("(a .")
    assert "after '.'" in excinfo.value.message
    assert excinfo.value.index == 2


def test_dot_without_right_side(read):
    with pytest.raises(ParseError) as excinfo:
        read("(a .)")
    assert "Unexpected token: ')'" in excinfo.value.message
    assert excinfo.value.index == 3


def test_dotted_pair_allows_exactly_two_elements(read):
    with pytest.raises(ParseError) as excinfo:
        read("(a . b c)")
    assert "Expected ')'" in excinfo.value.message
    assert "'c'" in excinfo.value.message
    assert excinfo.value.index == 4


def test_dot_inside_longer_list_is_rejected(read):
    with pytest.raises(ParseError) as excinfo:
        read("(a b . c)")
    assert "Unexpected token: '.'" in excinfo.value.message
    assert excinfo.value.index == 3


def test_leading_dot(read):
    with pytest.raises(ParseError, match="Unexpected token"):
        read("(. a)")


@pytest.mark.parametrize("text,index", [("a b", 1), ("(a))", 3), ("() ()", 2)])
def test_trailing_tokens(read, text, index):
    with pytest.raises(ParseError) as excinfo:
        read(text)
    assert "after parsing completed" in excinfo.value.message
    assert excinfo.value.index == index


def test_parse_error_str_includes_index():
    assert str(ParseError("Unexpected token: ')'", 3)) == "Unexpected token: ')' (at token 3)"
    assert str(ParseError("Incomplete expression")) == "Incomplete expression"


@pytest.mark.parametrize("error", [
    ParseError("Unexpected token: ')'", 3),
    ParseError("Incomplete expression"),
    DepthExceeded(4, 3, 3),
    LexError("Invalid character detected: '$'", "$", 1),
])
def test_errors_survive_copy_and_pickle(error):
    for clone in (copy.copy(error), pickle.loads(pickle.dumps(error))):
        assert type(clone) is type(error)
        assert clone.message == error.message
        assert str(clone) == str(error)
        assert vars(clone) == vars(error)


def test_depth_limit(read):
    config = ParserConfig(max_depth=3)
    assert read("(((a)))", config) == Pair(Pair(Pair(Atom("a"), Terminal()), Terminal()), Terminal())

    with pytest.raises(DepthExceeded) as excinfo:
        read("((((a))))", config)
    assert excinfo.value.depth == 4
    assert excinfo.value.limit == 3
    assert excinfo.value.index == 3


def test_default_depth_limit_fails_gracefully(read):
    text = "(" * 300 + "a" + ")" * 300
    with pytest.raises(DepthExceeded) as excinfo:
        read(text)
    assert isinstance(excinfo.value, ConsTreeError)
    assert not isinstance(excinfo.value, ParseError)


def test_long_flat_list_is_not_limited_by_depth(read):
    tree = read("(" + " ".join(["x"] * 2000) + ")")
    count = 0
    while isinstance(tree, Pair):
        count += 1
        tree = tree.right
    assert count == 2000
    assert tree == Terminal()


@pytest.mark.parametrize("kwargs", [
    {"terminal_marker": "1x"},
    {"terminal_marker": ""},
    {"terminal_marker": "a b"},
    {"max_depth": 0},
])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        ParserConfig(**kwargs)


def test_raised_depth_limit_still_fails_gracefully(read):
    text = "(" * 2000 + "a" + ")" * 2000
    config = ParserConfig(max_depth=100000)
    with pytest.raises(DepthExceeded) as excinfo:
        read(text, config)
    assert excinfo.value.limit == 100000
    assert excinfo.value.depth > 0
    assert excinfo.value.index is None
