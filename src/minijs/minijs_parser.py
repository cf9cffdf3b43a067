"""
minijs Parser

Parses a lazily lexed minijs token stream into an abstract syntax tree (AST).

The parser is a one-token-lookahead recursive-descent engine. It holds exactly
one pre-fetched token (``lookahead``) and consumes terminals only through
``eat``. Each grammar rule is a ``parse_*`` method that inspects the lookahead
type to pick a production.

Supported Constructs
--------------------
- Statements:
    * Expression statements: `x = 1;`
    * Blocks: `{ ... }`, nested to any depth
    * Empty statements: `;`

- Expressions, loosest binding first:
    * Assignment (right-associative): `=`, `+=`, `-=`, `*=`, `/=`
    * Logical: `||`, then `&&`
    * Equality `==` `!=`, relational `<` `>` `<=` `>=`
    * Additive `+` `-`, multiplicative `*` `/`
    * Unary prefix `-` `+` `!`
    * Member access `a.b`, `a[b]` and calls `f(x, y)`
    * Numbers, strings, identifiers, parenthesized expressions

Parser Behavior
---------------
- Binary levels are left-associative and folded iteratively.
- The left side of an assignment must be an Identifier. It is checked after
  the operator is consumed and before the right side is parsed.
- Fail-fast: the first error aborts the whole parse. No partial AST is returned.

Entry Points
------------
- `Parser(lexer).parse()`: Parse a full program.
- `Parser.from_source(text)`: Build a parser over a source string.
- `parse(text)`: Shorthand for `Parser.from_source(text).parse()`.

Raises
------
MiniJSSyntaxError
    Raised on unexpected tokens, invalid assignment targets, or lexer failures.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from minijs.minijs_ast import (
    AssignmentExpression,
    ASTNode,
    BinaryExpression,
    BlockStatement,
    CallExpression,
    EmptyStatement,
    ExpressionStatement,
    Identifier,
    LogicalExpression,
    MemberExpression,
    NumericLiteral,
    Program,
    StringLiteral,
    UnaryExpression,
)
from minijs.minijs_constants import (
    ADDITIVE_OPERATOR,
    COMMA,
    COMPLEX_ASSIGN,
    DOT,
    EOF,
    EQUALITY_OPERATOR,
    IDENT,
    LBRACE,
    LBRACK,
    LOGICAL_AND,
    LOGICAL_OR,
    LPAREN,
    MULTIPLICATIVE_OPERATOR,
    NUMBER,
    RBRACE,
    RBRACK,
    RELATIONAL_OPERATOR,
    RPAREN,
    SEMICOLON,
    SIMPLE_ASSIGN,
    STRING,
    assignment_tokens,
    literal_tokens,
    unary_tokens,
)
from minijs.minijs_errors import MiniJSSyntaxError
from minijs.minijs_lexer import CharacterStream, Lexer, Token

logger = logging.getLogger(__name__)

INVALID_ASSIGNMENT_TARGET = (
    "Invalid left-hand side in assignment expression, expected Identifier!"
)
MAX_NESTING_DEPTH = "Maximum nesting depth exceeded"


class Parser:
    """
    minijs Parser Class

    Pulls tokens from a Lexer through a single lookahead slot and builds a
    ``Program`` node. A Parser is single-use: the underlying lexer cannot be
    rewound, so a second ``parse()`` sees only what is left of the input.

    Attributes
    ----------
    lexer : Lexer
        The token source.
    lookahead : Token
        The next unconsumed token; an ``EOF`` token once input is exhausted.

    Methods
    -------
    parse() -> Program
        Parse a complete program.
    eat(token_type: str) -> Token
        Consume the lookahead if it has the expected type.
    parse_statement() -> ASTNode
        Parse a block, empty, or expression statement.
    parse_expression() -> ASTNode
        Parse an expression, starting at the assignment level.

    Raises
    ------
    MiniJSSyntaxError
        When an invalid construct or malformed syntax is encountered during parsing.
    """

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.lookahead: Token = Token(EOF, "", 1, 1)

    @classmethod
    def from_source(cls, source: str) -> Parser:
        """Builds a parser over a fresh lexer for ``source``."""
        return cls(Lexer(CharacterStream(source)))

    def next_token(self) -> Token:
        """Pulls the next token; an EOF token at the cursor once input ends."""
        tok = self.lexer.next_token()
        if tok is None:
            stream = self.lexer.stream
            return Token(EOF, "", stream.line, stream.column)
        return tok

    def eat(self, token_type: str) -> Token:
        """Consume and return the lookahead, which must be of ``token_type``."""
        tok = self.lookahead
        if tok.type != token_type:
            raise MiniJSSyntaxError(
                f"Unexpected token {tok.type}, expected {token_type}!",
                tok.line,
                tok.col,
            )
        self.lookahead = self.next_token()
        return tok

    def parse(self) -> Program:
        """Parse a full program and return its Program node.

        Raises:
            MiniJSSyntaxError: On malformed input, or when parentheses, blocks
                or brackets nest deeper than the interpreter stack allows.
        """
        logger.debug("parsing program")
        self.lookahead = self.next_token()
        line, col = self.lookahead.line, self.lookahead.col
        try:
            body = self.parse_statement_list(EOF)
        except RecursionError as exc:
            raise MiniJSSyntaxError(
                MAX_NESTING_DEPTH, self.lookahead.line, self.lookahead.col
            ) from exc
        logger.debug("parsed program with %d top-level statements", len(body))
        return Program(body, line=line, col=col)

    # Statements

    def parse_statement_list(self, stop_type: str) -> list[ASTNode]:
        """Parse statements until the lookahead is ``stop_type`` (not consumed)."""
        statements: list[ASTNode] = []
        while self.lookahead.type != stop_type:
            statements.append(self.parse_statement())
        return statements

    def parse_statement(self) -> ASTNode:
        """Parse a block, an empty statement, or an expression statement."""
        if self.lookahead.type == LBRACE:
            return self.parse_block_statement()
        if self.lookahead.type == SEMICOLON:
            return self.parse_empty_statement()
        return self.parse_expression_statement()

    def parse_block_statement(self) -> BlockStatement:
        """Parse a `{}`-enclosed block of statements."""
        open_tok = self.eat(LBRACE)
        body: list[ASTNode] = []
        if self.lookahead.type != RBRACE:
            body = self.parse_statement_list(RBRACE)
        self.eat(RBRACE)
        return BlockStatement(body, line=open_tok.line, col=open_tok.col)

    def parse_empty_statement(self) -> EmptyStatement:
        tok = self.eat(SEMICOLON)
        return EmptyStatement(line=tok.line, col=tok.col)

    def parse_expression_statement(self) -> ExpressionStatement:
        expression = self.parse_expression()
        self.eat(SEMICOLON)
        return ExpressionStatement(
            expression, line=expression.line, col=expression.col
        )

    # Expressions

    def parse_expression(self) -> ASTNode:
        return self.parse_assignment_expression()

    def parse_assignment_expression(self) -> ASTNode:
        """Parse `target op value`, recursing on the right for `x = y = 1`."""
        left = self.parse_logical_or_expression()
        if self.lookahead.type not in assignment_tokens:
            return left

        operator = self.parse_assignment_operator().value
        target = self.check_valid_assignment_target(left)
        right = self.parse_assignment_expression()
        return AssignmentExpression(
            operator, target, right, line=target.line, col=target.col
        )

    def parse_assignment_operator(self) -> Token:
        if self.lookahead.type == SIMPLE_ASSIGN:
            return self.eat(SIMPLE_ASSIGN)
        return self.eat(COMPLEX_ASSIGN)

    def check_valid_assignment_target(self, node: ASTNode) -> ASTNode:
        """Return ``node`` if it is an Identifier, otherwise raise MiniJSSyntaxError."""
        if isinstance(node, Identifier):
            return node
        raise MiniJSSyntaxError(INVALID_ASSIGNMENT_TARGET, node.line, node.col)

    def parse_binary(
        self,
        operator_type: str,
        operand: Callable[[], ASTNode],
        node_class: type[BinaryExpression] | type[LogicalExpression] = BinaryExpression,
    ) -> ASTNode:
        """Fold `operand (op operand)*` into a left-leaning chain of nodes."""
        left = operand()
        while self.lookahead.type == operator_type:
            operator = self.eat(operator_type).value
            right = operand()
            left = node_class(operator, left, right, line=left.line, col=left.col)
        return left

    def parse_logical_or_expression(self) -> ASTNode:
        return self.parse_binary(
            LOGICAL_OR, self.parse_logical_and_expression, LogicalExpression
        )

    def parse_logical_and_expression(self) -> ASTNode:
        return self.parse_binary(
            LOGICAL_AND, self.parse_equality_expression, LogicalExpression
        )

    def parse_equality_expression(self) -> ASTNode:
        return self.parse_binary(EQUALITY_OPERATOR, self.parse_relational_expression)

    def parse_relational_expression(self) -> ASTNode:
        return self.parse_binary(RELATIONAL_OPERATOR, self.parse_additive_expression)

    def parse_additive_expression(self) -> ASTNode:
        return self.parse_binary(
            ADDITIVE_OPERATOR, self.parse_multiplicative_expression
        )

    def parse_multiplicative_expression(self) -> ASTNode:
        return self.parse_binary(MULTIPLICATIVE_OPERATOR, self.parse_unary_expression)

    def parse_unary_expression(self) -> ASTNode:
        """Parse prefix `-`, `+` and `!`, which may be stacked (`!!x`).

        The operators are collected first and then folded innermost-first, so
        a long chain costs no extra stack depth.
        """
        operators: list[Token] = []
        while self.lookahead.type in unary_tokens:
            operators.append(self.eat(self.lookahead.type))
        node = self.parse_left_hand_side_expression()
        for op_tok in reversed(operators):
            node = UnaryExpression(op_tok.value, node, line=op_tok.line, col=op_tok.col)
        return node

    def parse_left_hand_side_expression(self) -> ASTNode:
        return self.parse_call_or_member_expression()

    def parse_call_or_member_expression(self) -> ASTNode:
        """Parse a primary followed by any mix of `.name`, `[expr]` and `(args)`."""
        node = self.parse_primary_expression()
        while self.lookahead.type in (DOT, LBRACK, LPAREN):
            if self.lookahead.type == DOT:
                self.eat(DOT)
                prop = self.parse_identifier()
                node = MemberExpression(
                    node, prop, computed=False, line=node.line, col=node.col
                )
            elif self.lookahead.type == LBRACK:
                self.eat(LBRACK)
                prop = self.parse_expression()
                self.eat(RBRACK)
                node = MemberExpression(
                    node, prop, computed=True, line=node.line, col=node.col
                )
            else:
                args = self.parse_arguments()
                node = CallExpression(node, args, line=node.line, col=node.col)
        return node

    def parse_arguments(self) -> list[ASTNode]:
        """Parse a parenthesized, comma-separated argument list."""
        self.eat(LPAREN)
        args: list[ASTNode] = []
        if self.lookahead.type != RPAREN:
            args.append(self.parse_assignment_expression())
            while self.lookahead.type == COMMA:
                self.eat(COMMA)
                args.append(self.parse_assignment_expression())
        self.eat(RPAREN)
        return args

    def parse_primary_expression(self) -> ASTNode:
        """Parse a literal, a parenthesized expression, or an identifier."""
        if self.lookahead.type in literal_tokens:
            return self.parse_literal()
        if self.lookahead.type == LPAREN:
            return self.parse_parenthesized_expression()
        return self.parse_identifier()

    def parse_parenthesized_expression(self) -> ASTNode:
        self.eat(LPAREN)
        expression = self.parse_expression()
        self.eat(RPAREN)
        return expression

    def parse_identifier(self) -> Identifier:
        tok = self.eat(IDENT)
        return Identifier(tok.value, line=tok.line, col=tok.col)

    def parse_literal(self) -> ASTNode:
        if self.lookahead.type == NUMBER:
            return self.parse_numeric_literal()
        return self.parse_string_literal()

    def parse_numeric_literal(self) -> NumericLiteral:
        tok = self.eat(NUMBER)
        return NumericLiteral(float(tok.value), line=tok.line, col=tok.col)

    def parse_string_literal(self) -> StringLiteral:
        tok = self.eat(STRING)
        return StringLiteral(tok.value[1:-1], line=tok.line, col=tok.col)


def parse(source: str) -> Program:
    """Parse ``source`` into a Program node."""
    return Parser.from_source(source).parse()


__all__ = ["INVALID_ASSIGNMENT_TARGET", "MAX_NESTING_DEPTH", "Parser", "parse"]
