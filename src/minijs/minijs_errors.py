"""
Error taxonomy for minijs.

Classes:
    MiniJSError: Base class carrying a message and an optional source position.
    MiniJSSyntaxError: Malformed input (unexpected token, invalid assignment
        target, unrecognized character). Raised by the lexer and parser.
    MiniJSRuntimeError: Evaluation-time failure. Not raised by the front end;
        reserved for an evaluator built on top of the AST and value model.

Callers tell the two apart by class (or the ``kind`` tag), never by message text.
"""


class MiniJSError(Exception):
    """Base class for every error minijs reports.

    Attributes:
        kind (str): Error family tag ("Syntax" or "Runtime").
        message (str): Human-readable description, without the family prefix.
        line (int): 1-based line of the offending input, 0 when unknown.
        col (int): 1-based column of the offending input, 0 when unknown.
    """

    kind = "Generic"

    def __init__(self, message: str, line: int = 0, col: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.col = col

    def __str__(self) -> str:
        return f"{self.kind}Error: {self.message}"

    def location(self) -> str:
        """Returns ``line X, col Y`` or an empty string when unknown."""
        if self.line <= 0:
            return ""
        return f"line {self.line}, col {self.col}"


class MiniJSSyntaxError(MiniJSError):
    kind = "Syntax"


class MiniJSRuntimeError(MiniJSError):
    kind = "Runtime"


__all__ = ["MiniJSError", "MiniJSRuntimeError", "MiniJSSyntaxError"]
