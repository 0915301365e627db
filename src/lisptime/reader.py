"""Reading and printing time values in Lisp list syntax.

``read_time`` turns text such as ``"(24000 1234 5 6)"``, ``"(24000 . 1234)"``,
``"1.5"`` or ``"nil"`` into the Python values the decoder accepts;
``print_time`` does the reverse.
"""

from __future__ import annotations

import math
from typing import Any

from lark import Lark, Token, Tree
from lark.exceptions import LarkError
from lark.visitors import Interpreter

from lisptime._errors import ERR_MSG_INVALID_TIME, InvalidTimeError
from lisptime.forms import DottedList, TimeSpec

TIME_GRAMMAR = r"""
start: form

?form: list
     | atom

list: "(" form* tail? ")"
tail: "." form

atom: NIL | SPECIAL_FLOAT | FLOAT | INT

NIL.3: "nil"
SPECIAL_FLOAT.3: /[+-]?\d+\.\d+e\+(INF|NaN)/
FLOAT.2: /[+-]?(\d*\.\d+([eE][+-]?\d+)?|\d+[eE][+-]?\d+)/
INT: /[+-]?\d+\.?/

%import common.WS
%ignore WS
"""

_parser = Lark(TIME_GRAMMAR, parser="lalr")


class _Tail:
    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value


class TimeReader(Interpreter):
    """Builds Python boundary values from a parsed time expression."""

    def visit(self, tree: Tree) -> Any:
        if isinstance(tree, Token):
            return _read_token(tree)
        return super().visit(tree)

    def start(self, tree: Tree) -> Any:
        return self.visit(tree.children[0])

    def atom(self, tree: Tree) -> Any:
        return self.visit(tree.children[0])

    def tail(self, tree: Tree) -> _Tail:
        return _Tail(self.visit(tree.children[0]))

    def list(self, tree: Tree) -> Any:
        values = [self.visit(child) for child in tree.children]
        if not values:
            # () reads as nil
            return None
        if isinstance(values[-1], _Tail):
            tail = values.pop().value
            if not values:
                raise InvalidTimeError(
                    ERR_MSG_INVALID_TIME, "dotted list has no items before '.'"
                )
            if isinstance(tail, tuple):
                # (1 . (2 3)) reads as (1 2 3)
                values.extend(tail)
            elif isinstance(tail, DottedList):
                values.extend(tail.items)
                return DottedList(tuple(values), tail.tail)
            elif tail is not None:
                return DottedList(tuple(values), tail)
        return tuple(values)


def _read_token(token: Token) -> Any:
    text = str(token)
    if token.type == "NIL":
        return None
    if token.type == "INT":
        return int(text.rstrip("."))
    if token.type == "SPECIAL_FLOAT":
        sign = -1.0 if text.startswith("-") else 1.0
        if text.endswith("INF"):
            return math.copysign(math.inf, sign)
        return math.copysign(math.nan, sign)
    return float(text)


def read_time(text: str) -> TimeSpec:
    """Parse Lisp time syntax into a value accepted by the decoder.

    Raises:
        InvalidTimeError: If ``text`` is not well-formed.
    """
    try:
        tree = _parser.parse(text)
    except LarkError as exc:
        raise InvalidTimeError(
            ERR_MSG_INVALID_TIME,
            f"cannot read time from {text!r}: {exc}",
            wrapped=exc,
        ) from exc
    return TimeReader().visit(tree)


def _print_float(value: float) -> str:
    if math.isnan(value):
        return "-0.0e+NaN" if math.copysign(1.0, value) < 0 else "0.0e+NaN"
    if math.isinf(value):
        return "1.0e+INF" if value > 0 else "-1.0e+INF"
    return repr(value)


def print_time(value: Any) -> str:
    """Render a time value in Lisp syntax, e.g. ``(1 2 3 4)`` or ``nil``."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        raise TypeError(f"cannot print {value!r} as a time")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _print_float(value)
    if isinstance(value, DottedList):
        items = " ".join(print_time(item) for item in value.items)
        return f"({items} . {print_time(value.tail)})"
    if isinstance(value, (tuple, list)):
        if not value:
            return "nil"
        return "(" + " ".join(print_time(item) for item in value) + ")"
    raise TypeError(f"cannot print {value!r} as a time")
