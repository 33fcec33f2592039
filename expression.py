"""
Expression Model for ChainCalc
Token types, the four binary operations and the expression buffer
"""
from dataclasses import dataclass
from enum import Enum

from errors import DivisionByZero


class OperatorKind(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "x"
    DIVIDE = "/"

    @property
    def symbol(self):
        return self.value

    @classmethod
    def from_symbol(cls, symbol):
        """Look up an operator by its button symbol, None if unknown"""
        aliases = {"*": cls.MULTIPLY, "×": cls.MULTIPLY, "÷": cls.DIVIDE, "−": cls.SUBTRACT}
        if symbol in aliases:
            return aliases[symbol]
        for kind in cls:
            if kind.value == symbol:
                return kind
        return None


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Operator:
    kind: OperatorKind


def match_token(token, on_number, on_operator):
    """Dispatch on the two token variants and return the handler's result"""
    if isinstance(token, Number):
        return on_number(token.value)
    if isinstance(token, Operator):
        return on_operator(token.kind)
    raise TypeError(f"Not a token: {token!r}")


def apply(kind, a, b):
    """Apply a binary operation to the running result `a` and the operand `b`"""
    if kind is OperatorKind.ADD:
        return a + b
    if kind is OperatorKind.SUBTRACT:
        return a - b
    if kind is OperatorKind.MULTIPLY:
        return a * b
    if kind is OperatorKind.DIVIDE:
        if b == 0:
            raise DivisionByZero()
        return a / b
    raise ValueError(f"Unknown operator: {kind!r}")


def append_token(expression, token):
    """Return a new expression with `token` appended"""
    return tuple(expression) + (token,)


def token_to_dict(token):
    """Serialize a token to its JSON form"""
    return match_token(
        token,
        lambda value: {"type": "number", "value": value},
        lambda kind: {"type": "operator", "symbol": kind.symbol},
    )


def token_from_dict(data):
    """
    Build a token from its JSON form.

    Accepts the tagged objects produced by token_to_dict, a bare number, or
    a bare operator symbol. Raises ValueError for anything else.
    """
    if isinstance(data, bool):
        raise ValueError(f"Unreadable token: {data!r}")
    if isinstance(data, (int, float)):
        return Number(float(data))
    if isinstance(data, str):
        kind = OperatorKind.from_symbol(data)
        if kind is None:
            raise ValueError(f"Unknown operator symbol: {data!r}")
        return Operator(kind)
    if not isinstance(data, dict):
        raise ValueError(f"Unreadable token: {data!r}")

    token_type = data.get("type")
    if token_type == "number":
        value = data.get("value")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Number token without a numeric value: {data!r}")
        return Number(float(value))
    if token_type == "operator":
        kind = OperatorKind.from_symbol(data.get("symbol"))
        if kind is None:
            raise ValueError(f"Unknown operator symbol: {data.get('symbol')!r}")
        return Operator(kind)
    raise ValueError(f"Unknown token type: {token_type!r}")
