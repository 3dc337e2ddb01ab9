"""Calculator for prefix expressions of ``+`` and ``*`` over unsigned integers.

Grammar::

    <EXPR> := <NUM> | + <EXPR> <EXPR> | * <EXPR> <EXPR>
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence, Union

U64_MAX = 2**64 - 1
_DIGITS = frozenset("0123456789")


class ParseError(ValueError):
    """Raised when the input is not a valid expression."""

    def __init__(self, message: str, pos: int):
        self.pos = pos
        super().__init__(f"{message} at position {pos}")


@dataclass(frozen=True)
class Num:
    value: int


@dataclass(frozen=True)
class Add:
    left: "Expr"
    right: "Expr"


@dataclass(frozen=True)
class Mul:
    left: "Expr"
    right: "Expr"


Expr = Union[Num, Add, Mul]


def parse_expr(text: str) -> tuple[Expr, str]:
    """Parse one expression from the start of ``text``; return it and the unread rest."""
    expr, pos = _parse(text, 0)
    return expr, text[pos:]


def parse(text: str) -> Expr:
    """Parse an expression from ``text``, ignoring anything after it."""
    return parse_expr(text)[0]


def _parse(text: str, pos: int) -> tuple[Expr, int]:
    while pos < len(text) and text[pos] == " ":
        pos += 1

    if pos < len(text) and text[pos] in _DIGITS:
        end = pos
        while end < len(text) and text[end] in _DIGITS:
            end += 1
        value = int(text[pos:end])
        if value > U64_MAX:
            raise ParseError("number too large", pos)
        return Num(value), end

    if pos < len(text) and text[pos] in "+*":
        node = Add if text[pos] == "+" else Mul
        left, pos = _parse(text, pos + 1)
        right, pos = _parse(text, pos)
        return node(left, right), pos

    raise ParseError("expected a number, '+' or '*'", pos)


def _checked(value: int) -> int:
    if value > U64_MAX:
        raise OverflowError("result does not fit in an unsigned 64-bit integer")
    return value


def evaluate(expr: Expr) -> int:
    """Compute the value of ``expr``; raise OverflowError beyond 64 unsigned bits."""
    match expr:
        case Num(value):
            return value
        case Add(left, right):
            return _checked(evaluate(left) + evaluate(right))
        case Mul(left, right):
            return _checked(evaluate(left) * evaluate(right))
        case _:
            raise TypeError(f"unknown expression: {expr!r}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read expressions line by line and print their values until end of input."""
    while True:
        try:
            line = input(">> ")
        except (EOFError, KeyboardInterrupt):
            break
        try:
            expr = parse(line)
        except ParseError as exc:
            print(exc)
            continue
        print(f"AST: {expr!r}")
        try:
            print(f"result: {evaluate(expr)}")
        except OverflowError as exc:
            print(exc)
    return 0


if __name__ == "__main__":
    sys.exit(main())