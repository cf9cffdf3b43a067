import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from minijs.minijs_errors import MiniJSError, MiniJSSyntaxError
from minijs.minijs_lexer import CharacterStream, Lexer, Token, tokenize


def types_of(source: str) -> list[str]:
    return [tok.type for tok in tokenize(source)]


def test_punctuation_tokens() -> None:
    assert types_of("; { } ( ) [ ] , .") == [
        "SEMICOLON",
        "LBRACE",
        "RBRACE",
        "LPAREN",
        "RPAREN",
        "LBRACK",
        "RBRACK",
        "COMMA",
        "DOT",
    ]


def test_operator_tokens() -> None:
    code = "+ - * / < > <= >= == != && || ! = += -= *= /="
    expected = [
        "ADDITIVE_OPERATOR",
        "ADDITIVE_OPERATOR",
        "MULTIPLICATIVE_OPERATOR",
        "MULTIPLICATIVE_OPERATOR",
        "RELATIONAL_OPERATOR",
        "RELATIONAL_OPERATOR",
        "RELATIONAL_OPERATOR",
        "RELATIONAL_OPERATOR",
        "EQUALITY_OPERATOR",
        "EQUALITY_OPERATOR",
        "LOGICAL_AND",
        "LOGICAL_OR",
        "LOGICAL_NOT",
        "SIMPLE_ASSIGN",
        "COMPLEX_ASSIGN",
        "COMPLEX_ASSIGN",
        "COMPLEX_ASSIGN",
        "COMPLEX_ASSIGN",
    ]
    tokens = tokenize(code)
    assert [t.type for t in tokens] == expected
    assert [t.value for t in tokens] == code.split()


@pytest.mark.parametrize("text", ["42", "3.14", "1e3", "2.5E-4", "0"])  # type: ignore[misc]
def test_number_token(text: str) -> None:
    tok = Lexer(CharacterStream(text)).next_token()
    assert tok == Token("NUMBER", text, 1, 1)


def test_string_tokens_keep_quotes() -> None:
    tokens = tokenize("\"hello world\" 'single'")
    assert [(t.type, t.value) for t in tokens] == [
        ("STRING", '"hello world"'),
        ("STRING", "'single'"),
    ]


def test_adjacent_strings_are_not_merged() -> None:
    assert types_of('"a" + "b"') == ["STRING", "ADDITIVE_OPERATOR", "STRING"]


def test_escape_sequences_kept_verbatim() -> None:
    tok = tokenize(r'"say \"hi\""')[0]
    assert tok.type == "STRING"
    assert tok.value == r'"say \"hi\""'


@pytest.mark.parametrize("name", ["x", "foo_bar1", "_private", "$el", "CamelCase"])  # type: ignore[misc]
def test_identifier_token(name: str) -> None:
    assert tokenize(name) == [Token("IDENT", name, 1, 1)]


def test_number_then_identifier() -> None:
    assert types_of("42abc") == ["NUMBER", "IDENT"]


def test_compound_operators_win_over_prefixes() -> None:
    assert types_of("a/=b") == ["IDENT", "COMPLEX_ASSIGN", "IDENT"]
    assert types_of("a==b") == ["IDENT", "EQUALITY_OPERATOR", "IDENT"]
    assert types_of("a<=b") == ["IDENT", "RELATIONAL_OPERATOR", "IDENT"]
    assert types_of("!=") == ["EQUALITY_OPERATOR"]


def test_line_comment_is_skipped() -> None:
    assert types_of("a // b c d\n;") == ["IDENT", "SEMICOLON"]
    assert types_of("a//b") == ["IDENT"]


def test_block_comment_is_skipped() -> None:
    assert types_of("1 /* 2 \n 3 */ + /**/ 4") == [
        "NUMBER",
        "ADDITIVE_OPERATOR",
        "NUMBER",
    ]


def test_line_and_column_tracking() -> None:
    tokens = tokenize("x = 1;\n  y")
    assert (tokens[0].line, tokens[0].col) == (1, 1)
    assert (tokens[2].line, tokens[2].col) == (1, 5)
    assert (tokens[4].line, tokens[4].col) == (2, 3)


def test_positions_after_multiline_comment() -> None:
    tokens = tokenize("// c\n42 /* block\n comment */ ;")
    assert tokens[0] == Token("NUMBER", "42", 2, 1)
    assert tokens[1] == Token("SEMICOLON", ";", 3, 13)


@pytest.mark.parametrize("source", ["", "   ", "\n\t", "// only a comment", "/* x */"])  # type: ignore[misc]
def test_end_of_input_returns_none(source: str) -> None:
    lexer = Lexer(CharacterStream(source))
    assert lexer.next_token() is None
    assert lexer.next_token() is None


def test_unrecognized_character_raises() -> None:
    with pytest.raises(MiniJSSyntaxError) as excinfo:
        tokenize("x @")
    err = excinfo.value
    assert err.message == "Unexpected token: @"
    assert str(err) == "SyntaxError: Unexpected token: @"
    assert (err.line, err.col) == (1, 3)
    assert err.kind == "Syntax"


def test_unterminated_string_raises() -> None:
    with pytest.raises(MiniJSSyntaxError, match='Unexpected token: "'):
        tokenize('"abc')


def test_lexer_is_lazy() -> None:
    lexer = Lexer(CharacterStream("1 #"))
    assert lexer.next_token() == Token("NUMBER", "1", 1, 1)
    with pytest.raises(MiniJSSyntaxError):
        lexer.next_token()


def test_lexer_iterates_tokens() -> None:
    lexer = Lexer(CharacterStream("a b"))
    assert [t.value for t in lexer] == ["a", "b"]
    assert list(lexer) == []


def test_character_stream_methods() -> None:
    stream = CharacterStream("ab\ncd")
    assert stream.peek() == "a"
    assert stream.match(re.compile(r"ab")) == "ab"
    assert stream.position == 0
    assert stream.advance(3) == "ab\n"
    assert (stream.line, stream.column) == (2, 1)
    assert stream.advance() == "c"
    assert (stream.line, stream.column) == (2, 2)
    assert stream.match(re.compile(r"x*")) is None
    stream.advance()
    assert stream.end_of_file()
    assert stream.peek() == ""
    assert stream.peek(5) == ""


def test_character_stream_advance_past_eof_raises() -> None:
    stream = CharacterStream("")
    with pytest.raises(
        Exception, match="CharacterStreamError: Attempted to read past end of source"
    ):
        stream.advance()


def test_token_repr_and_eq() -> None:
    t1 = Token("NUMBER", "42", 1, 2)
    t2 = Token("NUMBER", "42", 1, 2)
    t3 = Token("IDENT", "x")

    assert repr(t1) == "Token(NUMBER, 42)"
    assert t1 == t2
    assert t1 != t3
    assert len({t1, t2, t3}) == 2


TOKEN_TEXTS = [
    "x",
    "foo",
    "_a1",
    "42",
    "3.5",
    '"hi there"',
    "'q'",
    ";",
    "{",
    "}",
    "(",
    ")",
    "[",
    "]",
    ",",
    ".",
    "+",
    "-",
    "*",
    "/",
    "<",
    "<=",
    ">",
    ">=",
    "==",
    "!=",
    "&&",
    "||",
    "!",
    "=",
    "+=",
    "-=",
    "*=",
    "/=",
]


@given(st.lists(st.sampled_from(TOKEN_TEXTS), max_size=30))  # type: ignore[misc]
def test_tokens_are_never_split(texts: list[str]) -> None:
    source = " ".join(texts)
    assert [tok.value for tok in tokenize(source)] == texts


@given(st.lists(st.sampled_from(TOKEN_TEXTS), max_size=30))  # type: ignore[misc]
def test_relexing_matched_text_is_stable(texts: list[str]) -> None:
    first = tokenize(" ".join(texts))
    again = tokenize(" ".join(tok.value for tok in first))
    assert [(t.type, t.value) for t in again] == [(t.type, t.value) for t in first]


@given(st.text(max_size=60))  # type: ignore[misc]
def test_lexer_only_raises_syntax_errors(text: str) -> None:
    try:
        first = tokenize(text)
    except MiniJSError as e:
        assert isinstance(e, MiniJSSyntaxError)
        return
    assert tokenize(text) == first
