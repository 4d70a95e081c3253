import pytest

from constree.parser.exceptions import LexError
from constree.parser.tokenizer import Token, TokenType, Tokenizer, tokenize


def test_dotted_pair_tokens():
    tokens = tokenize("(a . b)")
    assert [t.type for t in tokens] == [
        TokenType.LPAREN, TokenType.ATOM, TokenType.DOT, TokenType.ATOM, TokenType.RPAREN
    ]
    assert [t.value for t in tokens] == ["(", "a", ".", "b", ")"]
    assert [t.index for t in tokens] == [0, 1, 2, 3, 4]


def test_whitespace_is_not_required_or_significant():
    assert [t.value for t in tokenize("(a.b)")] == ["(", "a", ".", "b", ")"]
    assert [t.value for t in tokenize("  (\n foo\tbar_1 )  ")] == ["(", "foo", "bar_1", ")"]


def test_terminal_marker_is_an_atom():
    (token,) = tokenize("nil")
    assert token == Token(TokenType.ATOM, "nil", 0)


def test_identifiers_follow_identifier_pattern():
    values = [t.value for t in tokenize("_x A1 snake_case CamelCase")]
    assert values == ["_x", "A1", "snake_case", "CamelCase"]


@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
def test_empty_input_yields_no_tokens(text):
    assert tokenize(text) == []


def test_invalid_character_is_named():
    with pytest.raises(LexError) as excinfo:
        tokenize("a$b")
    assert excinfo.value.text == "$"
    assert excinfo.value.offset == 1
    assert "'$'" in str(excinfo.value)


@pytest.mark.parametrize("text,offending", [
    ("1a", "1"),
    ("(a 42)", "42"),
    ("(a-b)", "-"),
    ("(a #comment)", "#"),
    ("'a", "'"),
    ("(a \"b\")", "\""),
    ("(a b) ;", ";"),
])
def test_unsupported_syntax_is_rejected(text, offending):
    with pytest.raises(LexError) as excinfo:
        tokenize(text)
    assert excinfo.value.text == offending


def test_second_pass_rejects_malformed_tokens():
    forged = [Token(TokenType.LPAREN, "(", 0), Token(TokenType.ATOM, "9lives", 1)]
    with pytest.raises(LexError) as excinfo:
        Tokenizer._validate(forged)
    assert excinfo.value.text == "9lives"


def test_second_pass_rejects_mistyped_punctuation():
    with pytest.raises(LexError):
        Tokenizer._validate([Token(TokenType.DOT, ")", 0)])
