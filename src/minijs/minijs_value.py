"""
Dynamic values and JavaScript-style arithmetic coercion for minijs.

A Value is one of four variants, tagged by ``kind``:

    number     a float (never NaN; NaN results fold into the ``nan`` variant)
    string     a str
    undefined  no payload
    nan        no payload

``add``, ``sub``, ``mul`` and ``div`` are total over every pairing of the four
variants. None of them raises: a failed coercion yields ``nan``.

Coercion rules:
    add  If either operand is a string, both render as text and concatenate
         in operand order ("undefined" and "NaN" render literally). Two
         numbers add. Any other pairing is nan.
    sub, mul, div
         Strings are parsed strictly as floats (an empty string is 0,
         unparsable text is nan). undefined and nan poison the result.

Example:
    >>> add(Value.number(1), Value.string("a"))
    Value(string, '1a')
    >>> sub(Value.string(""), Value.number(2))
    Value(number, -2.0)
"""

import decimal
import math
import re
from typing import Any

NUMBER = "number"
STRING = "string"
UNDEFINED = "undefined"
NAN = "nan"

VALUE_KINDS: tuple[str, ...] = (NUMBER, STRING, UNDEFINED, NAN)

_FLOAT_TEXT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)


class Value:
    """A minijs runtime value.

    Attributes:
        kind (str): One of "number", "string", "undefined", "nan".
        value (float | str | None): The payload; None for undefined and nan.
    """

    def __init__(self, kind: str, value: float | str | None = None) -> None:
        """Initializes a Value.

        Args:
            kind (str): One of ``VALUE_KINDS``.
            value (float | str | None): The payload, or None for undefined and nan.

        Raises:
            ValueError: If ``kind`` is not a known variant.
        """
        if kind not in VALUE_KINDS:
            raise ValueError(f"Unknown value kind: {kind}")
        self.kind = kind
        self.value = value

    @classmethod
    def number(cls, value: float) -> "Value":
        """Builds a number; a NaN input becomes the ``nan`` variant."""
        value = float(value)
        if math.isnan(value):
            return cls(NAN)
        return cls(NUMBER, value)

    @classmethod
    def string(cls, value: str) -> "Value":
        return cls(STRING, value)

    @classmethod
    def undefined(cls) -> "Value":
        return cls(UNDEFINED)

    @classmethod
    def nan(cls) -> "Value":
        return cls(NAN)

    def __repr__(self) -> str:
        """Returns ``Value(kind, payload)``, or ``Value(kind)`` without a payload."""
        if self.value is None:
            return f"Value({self.kind})"
        return f"Value({self.kind}, {self.value!r})"

    def __eq__(self, other: Any) -> bool:
        """Compares kind and payload.

        Args:
            other (Any): The object to compare against.

        Returns:
            bool: True if both are Values of the same kind and payload.
        """
        return (
            isinstance(other, Value)
            and self.kind == other.kind
            and self.value == other.value
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __add__(self, other: "Value") -> "Value":
        return add(self, other)

    def __sub__(self, other: "Value") -> "Value":
        return sub(self, other)

    def __mul__(self, other: "Value") -> "Value":
        return mul(self, other)

    def __truediv__(self, other: "Value") -> "Value":
        return div(self, other)

    def to_display(self) -> str:
        """Text used when this value takes part in string concatenation."""
        if self.kind == STRING:
            return str(self.value)
        if self.kind == NUMBER:
            return number_to_text(float(self.value))  # type: ignore[arg-type]
        if self.kind == UNDEFINED:
            return "undefined"
        return "NaN"


def number_to_text(number: float) -> str:
    """Render a float the way concatenation shows it.

    Finite values are written positionally from their shortest round-tripping
    digits, never in exponent form: ``1``, ``1.5``, ``0.0000001``,
    ``100000000000000000000000``. Negative zero renders as ``0``.

    Args:
        number (float): A non-NaN float.

    Returns:
        str: The display text.
    """
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    text = format(decimal.Decimal(repr(number)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        return "0"
    return text


def parse_number(text: str) -> float | None:
    """Strictly parse ``text`` as a float, or return None.

    No surrounding whitespace and no digit separators are accepted. The empty
    string is not a number here; callers decide what it means.
    """
    if not _FLOAT_TEXT.fullmatch(text):
        return None
    return float(text)


def string_to_number(text: str) -> Value:
    """Coerce string text for numeric operators: "" is 0, junk is nan."""
    if text == "":
        return Value.number(0.0)
    parsed = parse_number(text)
    if parsed is None:
        return Value.nan()
    return Value.number(parsed)


def _numeric_operands(left: Value, right: Value) -> tuple[float, float] | None:
    """Coerce both operands of sub/mul/div; None means the result is nan."""
    operands: list[float] = []
    for operand in (left, right):
        if operand.kind == STRING:
            operand = string_to_number(str(operand.value))
        if operand.kind != NUMBER:
            return None
        operands.append(float(operand.value))  # type: ignore[arg-type]
    return operands[0], operands[1]


def add(left: Value, right: Value) -> Value:
    """JavaScript-style ``+``: concatenates when either side is a string."""
    if left.kind == NUMBER and right.kind == NUMBER:
        return Value.number(left.value + right.value)  # type: ignore[operator]
    if left.kind == STRING or right.kind == STRING:
        return Value.string(left.to_display() + right.to_display())
    # number, undefined and nan in any remaining pairing
    return Value.nan()


def sub(left: Value, right: Value) -> Value:
    """Numeric ``-`` after string coercion."""
    operands = _numeric_operands(left, right)
    if operands is None:
        return Value.nan()
    a, b = operands
    return Value.number(a - b)


def mul(left: Value, right: Value) -> Value:
    """Numeric ``*`` after string coercion; an empty-string operand gives exactly 0."""
    operands = _numeric_operands(left, right)
    if operands is None:
        return Value.nan()
    if Value.string("") in (left, right):
        return Value.number(0.0)
    a, b = operands
    return Value.number(a * b)


def div(left: Value, right: Value) -> Value:
    """Numeric ``/``. Division by zero is a signed Infinity, and 0/0 is nan."""
    operands = _numeric_operands(left, right)
    if operands is None:
        return Value.nan()
    a, b = operands
    if b == 0:
        if a == 0 or math.isnan(a):
            return Value.nan()
        sign = math.copysign(1.0, a) * math.copysign(1.0, b)
        return Value.number(math.copysign(math.inf, sign))
    return Value.number(a / b)


BINARY_OPERATORS = {"+": add, "-": sub, "*": mul, "/": div}


__all__ = [
    "BINARY_OPERATORS",
    "VALUE_KINDS",
    "Value",
    "add",
    "div",
    "mul",
    "number_to_text",
    "parse_number",
    "string_to_number",
    "sub",
]
