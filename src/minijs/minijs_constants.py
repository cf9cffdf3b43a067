"""
Token vocabulary for the minijs lexer and parser.

Exports:
    - Token type names (``NUMBER``, ``IDENT``, ``EOF``, ...)
    - token_spec: ordered (token type or None, pattern) rules used by the lexer
    - literal_tokens, assignment_tokens, unary_tokens: groups used by the parser
"""

import re

NUMBER = "NUMBER"
STRING = "STRING"
IDENT = "IDENT"

LBRACE = "LBRACE"
RBRACE = "RBRACE"
LPAREN = "LPAREN"
RPAREN = "RPAREN"
LBRACK = "LBRACK"
RBRACK = "RBRACK"
SEMICOLON = "SEMICOLON"
COMMA = "COMMA"
DOT = "DOT"

ADDITIVE_OPERATOR = "ADDITIVE_OPERATOR"
MULTIPLICATIVE_OPERATOR = "MULTIPLICATIVE_OPERATOR"
RELATIONAL_OPERATOR = "RELATIONAL_OPERATOR"
EQUALITY_OPERATOR = "EQUALITY_OPERATOR"
LOGICAL_AND = "LOGICAL_AND"
LOGICAL_OR = "LOGICAL_OR"
LOGICAL_NOT = "LOGICAL_NOT"
SIMPLE_ASSIGN = "SIMPLE_ASSIGN"
COMPLEX_ASSIGN = "COMPLEX_ASSIGN"

EOF = "EOF"

# Order matters: the first rule that matches at the cursor wins.
# A rule with type None is skipped (whitespace and comments).
token_spec: list[tuple[str | None, str]] = [
    # whitespace
    (None, r"\s+"),
    # comments
    (None, r"//[^\n]*"),
    (None, r"/\*[\s\S]*?\*/"),
    # punctuation
    (SEMICOLON, r";"),
    (LBRACE, r"\{"),
    (RBRACE, r"\}"),
    (LPAREN, r"\("),
    (RPAREN, r"\)"),
    (LBRACK, r"\["),
    (RBRACK, r"\]"),
    (COMMA, r","),
    (DOT, r"\."),
    # literals
    (NUMBER, r"\d+(?:\.\d+)?(?:[eE][+-]?\d+)?"),
    (STRING, r'"(?:[^"\\\n]|\\.)*"'),
    (STRING, r"'(?:[^'\\\n]|\\.)*'"),
    # identifiers
    (IDENT, r"[A-Za-z_$][A-Za-z0-9_$]*"),
    # operators, compound forms before their prefixes
    (EQUALITY_OPERATOR, r"[=!]="),
    (COMPLEX_ASSIGN, r"[*/+\-]="),
    (SIMPLE_ASSIGN, r"="),
    (LOGICAL_AND, r"&&"),
    (LOGICAL_OR, r"\|\|"),
    (LOGICAL_NOT, r"!"),
    (RELATIONAL_OPERATOR, r"[<>]=?"),
    (ADDITIVE_OPERATOR, r"[+\-]"),
    (MULTIPLICATIVE_OPERATOR, r"[*/]"),
]

compiled_token_spec: list[tuple[str | None, re.Pattern[str]]] = [
    (token_type, re.compile(pattern)) for token_type, pattern in token_spec
]

literal_tokens: set[str] = {NUMBER, STRING}
assignment_tokens: set[str] = {SIMPLE_ASSIGN, COMPLEX_ASSIGN}
unary_tokens: set[str] = {ADDITIVE_OPERATOR, LOGICAL_NOT}

__all__ = [
    "ADDITIVE_OPERATOR",
    "COMMA",
    "COMPLEX_ASSIGN",
    "DOT",
    "EOF",
    "EQUALITY_OPERATOR",
    "IDENT",
    "LBRACE",
    "LBRACK",
    "LOGICAL_AND",
    "LOGICAL_NOT",
    "LOGICAL_OR",
    "LPAREN",
    "MULTIPLICATIVE_OPERATOR",
    "NUMBER",
    "RBRACE",
    "RBRACK",
    "RELATIONAL_OPERATOR",
    "RPAREN",
    "SEMICOLON",
    "SIMPLE_ASSIGN",
    "STRING",
    "assignment_tokens",
    "compiled_token_spec",
    "literal_tokens",
    "token_spec",
    "unary_tokens",
]
