import json

import hypothesis.strategies as st
from hypothesis import given

from minijs.minijs_ast import (
    AssignmentExpression,
    BinaryExpression,
    BlockStatement,
    CallExpression,
    EmptyStatement,
    ExpressionStatement,
    Identifier,
    MemberExpression,
    NumericLiteral,
    Program,
    StringLiteral,
)
from minijs.minijs_parser import parse


def test_astnode_repr() -> None:
    node = AssignmentExpression("=", Identifier("x"), NumericLiteral(1.0))
    assert repr(node) == (
        "AssignmentExpression(operator='=', left=Identifier(name='x'), "
        "right=NumericLiteral(value=1.0))"
    )
    assert repr(EmptyStatement()) == "EmptyStatement()"


def test_astnode_eq_ignores_positions() -> None:
    assert Identifier("x", line=1, col=1) == Identifier("x", line=4, col=9)


def test_astnode_eq_not_equal_kind() -> None:
    assert BlockStatement([]) != Program([])
    assert StringLiteral("1") != NumericLiteral(1.0)


def test_astnode_eq_not_equal_children() -> None:
    n1 = BinaryExpression("+", Identifier("x"), Identifier("y"))
    n2 = BinaryExpression("+", Identifier("x"), Identifier("z"))
    assert n1 != n2


def test_astnode_not_equal_to_other_types() -> None:
    assert Identifier("x") != "x"


def test_member_expression_computed_flag() -> None:
    a = MemberExpression(Identifier("a"), Identifier("b"), computed=False)
    b = MemberExpression(Identifier("a"), Identifier("b"), computed=True)
    assert a != b


def test_children_in_field_order() -> None:
    call = CallExpression(Identifier("f"), [NumericLiteral(1.0), StringLiteral("s")])
    assert call.children() == [
        Identifier("f"),
        NumericLiteral(1.0),
        StringLiteral("s"),
    ]
    assert Identifier("x").children() == []


def test_astnode_to_dict_basic() -> None:
    node = ExpressionStatement(
        AssignmentExpression("=", Identifier("x", 1, 1), NumericLiteral(42.0, 1, 5), 1, 1),
        line=1,
        col=1,
    )
    d = node.to_dict()
    assert d["kind"] == "ExpressionStatement"
    assert d["line"] == 1
    assert d["col"] == 1
    assignment = d["expression"]
    assert assignment["operator"] == "="
    assert assignment["left"] == {"kind": "Identifier", "name": "x", "line": 1, "col": 1}
    assert assignment["right"]["value"] == 42.0


def test_program_to_dict_is_json_serializable() -> None:
    tree = parse("a.b(1, 'two'); { ; }").to_dict()
    round_tripped = json.loads(json.dumps(tree))
    assert round_tripped == tree
    assert [s["kind"] for s in tree["body"]] == ["ExpressionStatement", "BlockStatement"]
    call = tree["body"][0]["expression"]
    assert call["callee"]["computed"] is False
    assert [a["kind"] for a in call["arguments"]] == ["NumericLiteral", "StringLiteral"]


def count_nodes(node: object) -> int:
    assert hasattr(node, "children")
    return 1 + sum(count_nodes(c) for c in node.children())  # type: ignore[attr-defined]


@given(st.integers(min_value=1, max_value=15))  # type: ignore[misc]
def test_tree_has_no_shared_children(width: int) -> None:
    source = " + ".join(["x"] * width) + ";"
    tree = parse(source)
    seen: set[int] = set()

    def walk(node: object) -> None:
        assert id(node) not in seen
        seen.add(id(node))
        for child in node.children():  # type: ignore[attr-defined]
            walk(child)

    walk(tree)
    # Program, ExpressionStatement, width identifiers, width - 1 binary nodes
    assert count_nodes(tree) == 2 + width + (width - 1)
