"""
Defines the abstract syntax tree (AST) node structure for minijs.

Classes:
    ASTNode:
        Base class for every node. Subclasses list their semantic fields in
        ``fields``; equality, repr and serialization are driven by that list.

    ASTDict:
        TypedDict representation for serializing ASTNode instances to plain Python dictionaries,
        suitable for JSON output or debugging.

    Program, ExpressionStatement, BlockStatement, EmptyStatement,
    AssignmentExpression, BinaryExpression, LogicalExpression, UnaryExpression,
    MemberExpression, CallExpression, Identifier, NumericLiteral, StringLiteral:
        The closed set of node variants the parser produces.

The tree is strict: every child node belongs to exactly one parent. Nodes are
built bottom-up by the parser and not mutated afterwards.

Each node tracks:
    kind (str): The node variant name (e.g., "Program", "Identifier").
    line (int): Source line of the node's first token.
    col (int): Source column of the node's first token.

Equality compares kind and fields only; positions are metadata.

Example:
    node = AssignmentExpression("=", Identifier("x"), NumericLiteral(42.0))
"""

from typing import Any, TypedDict


class ASTDict(TypedDict, total=False):
    """
    TypedDict representation of an ASTNode used for serialization.

    Only the keys relevant to a given node kind are present.
    """

    kind: str
    line: int
    col: int
    body: list["ASTDict"]
    expression: "ASTDict"
    operator: str
    left: "ASTDict"
    right: "ASTDict"
    argument: "ASTDict"
    object: "ASTDict"
    property: "ASTDict"
    computed: bool
    callee: "ASTDict"
    arguments: list["ASTDict"]
    name: str
    value: Any


def _serialize(value: Any) -> Any:
    if isinstance(value, ASTNode):
        return value.to_dict()
    if isinstance(value, list):
        return [_serialize(v) for v in value]
    return value


class ASTNode:
    """
    Base class for minijs syntax tree nodes.

    Attributes:
        kind (str): Node variant name; equals the class name.
        fields (tuple[str, ...]): Names of the semantic attributes, in order.
        line (int): Line number in the source file.
        col (int): Column number in the source file.
    """

    kind = "ASTNode"
    fields: tuple[str, ...] = ()

    def __init__(self, line: int = 0, col: int = 0) -> None:
        """Initializes the node's source position.

        Args:
            line (int, optional): Line of the node's first token (default is 0).
            col (int, optional): Column of the node's first token (default is 0).
        """
        self.line = line
        self.col = col

    def __repr__(self) -> str:
        """Returns ``Kind(field=value, ...)`` over the semantic fields."""
        parts = [f"{name}={getattr(self, name)!r}" for name in self.fields]
        return f"{self.kind}({', '.join(parts)})"

    def __eq__(self, other: Any) -> bool:
        """Compares kind and semantic fields; positions are ignored.

        Args:
            other (Any): The object to compare against.

        Returns:
            bool: True if both nodes have the same kind and equal fields.
        """
        if not isinstance(other, ASTNode) or self.kind != other.kind:
            return False
        return all(getattr(self, name) == getattr(other, name) for name in self.fields)

    def children(self) -> list["ASTNode"]:
        """Returns the direct child nodes in field order."""
        found: list[ASTNode] = []
        for name in self.fields:
            value = getattr(self, name)
            if isinstance(value, ASTNode):
                found.append(value)
            elif isinstance(value, list):
                found.extend(v for v in value if isinstance(v, ASTNode))
        return found

    def to_dict(self) -> ASTDict:
        """Serializes the node and its subtree to plain dictionaries.

        Returns:
            ASTDict: ``kind``, each field, then ``line`` and ``col``.
        """
        data: dict[str, Any] = {"kind": self.kind}
        for name in self.fields:
            data[name] = _serialize(getattr(self, name))
        data["line"] = self.line
        data["col"] = self.col
        return data  # type: ignore[return-value]


# Statements


class Program(ASTNode):
    """Root node: the top-level statements in source order."""

    kind = "Program"
    fields = ("body",)

    def __init__(
        self, body: list[ASTNode] | None = None, line: int = 0, col: int = 0
    ) -> None:
        super().__init__(line, col)
        self.body: list[ASTNode] = body or []


class ExpressionStatement(ASTNode):
    kind = "ExpressionStatement"
    fields = ("expression",)

    def __init__(self, expression: ASTNode, line: int = 0, col: int = 0) -> None:
        super().__init__(line, col)
        self.expression = expression


class BlockStatement(ASTNode):
    """A `{ ... }` block; ``body`` may be empty."""

    kind = "BlockStatement"
    fields = ("body",)

    def __init__(
        self, body: list[ASTNode] | None = None, line: int = 0, col: int = 0
    ) -> None:
        super().__init__(line, col)
        self.body: list[ASTNode] = body or []


class EmptyStatement(ASTNode):
    """A lone `;`."""

    kind = "EmptyStatement"


# Expressions


class AssignmentExpression(ASTNode):
    """``left operator right`` where ``left`` is always an Identifier."""

    kind = "AssignmentExpression"
    fields = ("operator", "left", "right")

    def __init__(
        self,
        operator: str,
        left: ASTNode,
        right: ASTNode,
        line: int = 0,
        col: int = 0,
    ) -> None:
        super().__init__(line, col)
        self.operator = operator
        self.left = left
        self.right = right


class BinaryExpression(ASTNode):
    kind = "BinaryExpression"
    fields = ("operator", "left", "right")

    def __init__(
        self,
        operator: str,
        left: ASTNode,
        right: ASTNode,
        line: int = 0,
        col: int = 0,
    ) -> None:
        super().__init__(line, col)
        self.operator = operator
        self.left = left
        self.right = right


class LogicalExpression(ASTNode):
    """``&&`` and ``||``, kept apart from BinaryExpression for short-circuiting."""

    kind = "LogicalExpression"
    fields = ("operator", "left", "right")

    def __init__(
        self,
        operator: str,
        left: ASTNode,
        right: ASTNode,
        line: int = 0,
        col: int = 0,
    ) -> None:
        super().__init__(line, col)
        self.operator = operator
        self.left = left
        self.right = right


class UnaryExpression(ASTNode):
    kind = "UnaryExpression"
    fields = ("operator", "argument")

    def __init__(
        self, operator: str, argument: ASTNode, line: int = 0, col: int = 0
    ) -> None:
        super().__init__(line, col)
        self.operator = operator
        self.argument = argument


class MemberExpression(ASTNode):
    """``object.property`` (computed=False) or ``object[property]`` (computed=True)."""

    kind = "MemberExpression"
    fields = ("object", "property", "computed")

    def __init__(
        self,
        object_: ASTNode,
        property_: ASTNode,
        computed: bool = False,
        line: int = 0,
        col: int = 0,
    ) -> None:
        super().__init__(line, col)
        self.object = object_
        self.property = property_
        self.computed = computed


class CallExpression(ASTNode):
    kind = "CallExpression"
    fields = ("callee", "arguments")

    def __init__(
        self,
        callee: ASTNode,
        arguments: list[ASTNode] | None = None,
        line: int = 0,
        col: int = 0,
    ) -> None:
        super().__init__(line, col)
        self.callee = callee
        self.arguments: list[ASTNode] = arguments or []


class Identifier(ASTNode):
    kind = "Identifier"
    fields = ("name",)

    def __init__(self, name: str, line: int = 0, col: int = 0) -> None:
        super().__init__(line, col)
        self.name = name


class NumericLiteral(ASTNode):
    kind = "NumericLiteral"
    fields = ("value",)

    def __init__(self, value: float, line: int = 0, col: int = 0) -> None:
        super().__init__(line, col)
        self.value = value


class StringLiteral(ASTNode):
    """A string literal; ``value`` excludes the quotes, escapes are kept verbatim."""

    kind = "StringLiteral"
    fields = ("value",)

    def __init__(self, value: str, line: int = 0, col: int = 0) -> None:
        super().__init__(line, col)
        self.value = value


__all__ = [
    "ASTDict",
    "ASTNode",
    "AssignmentExpression",
    "BinaryExpression",
    "BlockStatement",
    "CallExpression",
    "EmptyStatement",
    "ExpressionStatement",
    "Identifier",
    "LogicalExpression",
    "MemberExpression",
    "NumericLiteral",
    "Program",
    "StringLiteral",
    "UnaryExpression",
]
