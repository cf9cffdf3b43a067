"""
Lexical analyzer for minijs.

This module provides core components for converting raw source code into token streams:

Classes:
    CharacterStream: Forward-only cursor over the source with line/column tracking.
    Token: Represents a single token with type, matched text, and source location.
    Lexer: Pulls tokens from a CharacterStream one at a time, on demand.

Features:
    - Skips whitespace, `//` line comments and `/* */` block comments
    - Tries the rules of ``token_spec`` in order; the first match wins
    - Recognizes:
        * Numbers and strings
        * Identifiers
        * Punctuation and operators

Raises:
    MiniJSSyntaxError: If no rule matches at the cursor.

Example:
    >>> lexer = Lexer(CharacterStream("x = 42;"))
    >>> lexer.next_token()
    Token(IDENT, x)

Exports:
    - CharacterStream
    - Token
    - Lexer
    - tokenize
"""

import logging
import re
from collections.abc import Iterator
from typing import Any

from minijs.minijs_constants import compiled_token_spec
from minijs.minijs_errors import MiniJSSyntaxError

logger = logging.getLogger(__name__)


class CharacterStream:
    """
    Read-only source text plus a single forward cursor.

    The lexer never rewinds: once text is consumed with ``advance`` it is gone,
    so the stream (and any lexer built on it) cannot be restarted.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        """Initializes the stream at ``position`` with the given line and column.

        Args:
            source (str): The full source text.
            position (int, optional): Starting index (default is 0).
            line (int, optional): Starting line number (default is 1).
            column (int, optional): Starting column number (default is 1).
        """
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def advance(self, count: int = 1) -> str:
        """
        Consumes ``count`` characters and returns them.

        Raises:
            Exception: If reading past the end of the source.
        """
        end = self.position + count
        if end > len(self.source):
            raise Exception(
                f"CharacterStreamError: Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        text = self.source[self.position : end]
        newlines = text.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(text) - text.rfind("\n")
        else:
            self.column += len(text)
        self.position = end
        return text

    def match(self, pattern: re.Pattern[str]) -> str | None:
        """Returns the text ``pattern`` matches at the cursor, without consuming it.

        Empty matches count as no match.
        """
        found = pattern.match(self.source, self.position)
        if found is None or found.end() == self.position:
            return None
        return found.group(0)

    def peek(self, offset: int = 0) -> str:
        """Returns the character at ``offset`` from the cursor, or "" if out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        """Returns True once every character has been consumed."""
        return self.position >= len(self.source)


class Token:
    """Represents a single lexical token.

    Attributes:
        type (str): The token type (e.g. 'IDENT', 'NUMBER', 'EOF').
        value (str): The exact source text the token was matched from.
        line (int): The 1-based line number where the token starts.
        col (int): The 1-based column number where the token starts.
    """

    def __init__(self, type_: str, value: str, line: int = 0, col: int = 0):
        """Initializes a new Token instance.

        Args:
            type_ (str): The token's type.
            value (str): The matched source text.
            line (int, optional): The line number (default is 0).
            col (int, optional): The column number (default is 0).
        """
        self.type = type_
        self.value = value
        self.line = line
        self.col = col

    def __repr__(self) -> str:
        """Returns ``Token(TYPE, text)``; the position is left out."""
        return f"Token({self.type}, {self.value})"

    def __eq__(self, other: Any) -> bool:
        """Compares type, text and position.

        Args:
            other (Any): The object to compare against.

        Returns:
            bool: True if both are Tokens with identical fields.
        """
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.value == other.value
            and self.line == other.line
            and self.col == other.col
        )

    def __hash__(self) -> int:
        """Hashes the same fields ``__eq__`` compares."""
        return hash((self.type, self.value, self.line, self.col))


class Lexer:
    """Lazy tokenizer for minijs.

    Each ``next_token`` call scans from the cursor against the ordered rule
    table. Skip rules consume their text and scanning continues; emit rules
    produce a token. End of input yields ``None``.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        """Initializes the lexer over ``stream``, which it consumes as it goes."""
        self.stream = stream

    def __iter__(self) -> Iterator[Token]:
        """Yields tokens until the input is exhausted."""
        while True:
            tok = self.next_token()
            if tok is None:
                return
            yield tok

    def has_tokens(self) -> bool:
        """Returns True while unconsumed input remains, even if only whitespace."""
        return not self.stream.end_of_file()

    def next_token(self) -> Token | None:
        """Consumes and returns the next Token, or None once the input is exhausted.

        Raises:
            MiniJSSyntaxError: If no rule matches the remaining input.
        """
        while self.has_tokens():
            line, col = self.stream.line, self.stream.column
            for token_type, pattern in compiled_token_spec:
                text = self.stream.match(pattern)
                if text is None:
                    continue
                self.stream.advance(len(text))
                if token_type is None:
                    break
                logger.debug("token %s %r at %d:%d", token_type, text, line, col)
                return Token(token_type, text, line, col)
            else:
                raise MiniJSSyntaxError(
                    f"Unexpected token: {self.stream.peek()}", line, col
                )
        return None


def tokenize(source: str) -> list[Token]:
    """Lexes ``source`` to completion and returns every token."""
    return list(Lexer(CharacterStream(source)))


__all__ = ["CharacterStream", "Lexer", "Token", "tokenize"]
