"""Parse a regular expression into an abstract syntax tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ParseErrorKind(Enum):
    INVALID_ESCAPE = "invalid escape"
    INVALID_RIGHT_PAREN = "invalid right parenthesis"
    NO_PREV = "no previous expression"
    NO_RIGHT_PAREN = "no right parenthesis"
    EMPTY = "empty expression"


class ParseError(ValueError):
    """Raised when a regular expression is malformed."""

    def __init__(self, kind: ParseErrorKind, pos: Optional[int] = None, char: Optional[str] = None):
        self.kind = kind
        self.pos = pos
        self.char = char
        super().__init__(self._message())

    def _message(self) -> str:
        if self.kind is ParseErrorKind.INVALID_ESCAPE:
            return f"ParseError: invalid escape: pos = {self.pos}, char = '{self.char}'"
        if self.kind in (ParseErrorKind.INVALID_RIGHT_PAREN, ParseErrorKind.NO_PREV):
            return f"ParseError: {self.kind.value}: pos = {self.pos}"
        return f"ParseError: {self.kind.value}"


@dataclass(frozen=True)
class Char:
    c: str


@dataclass(frozen=True)
class Plus:
    expr: "Node"


@dataclass(frozen=True)
class Star:
    expr: "Node"


@dataclass(frozen=True)
class Question:
    expr: "Node"


@dataclass(frozen=True)
class Or:
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Seq:
    items: tuple


Node = Union[Char, Plus, Star, Question, Or, Seq]

_POSTFIX = {"+": Plus, "*": Star, "?": Question}
_ESCAPABLE = frozenset("\\()|+*?")


def parse(expr: str) -> Node:
    """Convert ``expr`` into an AST, raising :class:`ParseError` on bad input."""
    seq: list = []
    seq_or: list = []
    stack: list = []
    escaped = False

    for i, c in enumerate(expr):
        if escaped:
            seq.append(_parse_escape(i, c))
            escaped = False
        elif c in _POSTFIX:
            if not seq:
                raise ParseError(ParseErrorKind.NO_PREV, i)
            seq.append(_POSTFIX[c](seq.pop()))
        elif c == "(":
            stack.append((seq, seq_or))
            seq, seq_or = [], []
        elif c == ")":
            if not stack:
                raise ParseError(ParseErrorKind.INVALID_RIGHT_PAREN, i)
            prev, prev_or = stack.pop()
            if seq:
                seq_or.append(Seq(tuple(seq)))
            ast = _fold_or(seq_or)
            if ast is not None:
                prev.append(ast)
            seq, seq_or = prev, prev_or
        elif c == "|":
            if not seq:
                raise ParseError(ParseErrorKind.NO_PREV, i)
            seq_or.append(Seq(tuple(seq)))
            seq = []
        elif c == "\\":
            escaped = True
        else:
            seq.append(Char(c))

    if stack:
        raise ParseError(ParseErrorKind.NO_RIGHT_PAREN)

    if seq:
        seq_or.append(Seq(tuple(seq)))

    ast = _fold_or(seq_or)
    if ast is None:
        raise ParseError(ParseErrorKind.EMPTY)
    return ast


def _parse_escape(pos: int, c: str) -> Char:
    if c in _ESCAPABLE:
        return Char(c)
    raise ParseError(ParseErrorKind.INVALID_ESCAPE, pos, c)


def _fold_or(seq_or: list) -> Optional[Node]:
    """Join alternatives right-associatively: a|b|c becomes Or(a, Or(b, c))."""
    if not seq_or:
        return None
    ast = seq_or[-1]
    for alternative in reversed(seq_or[:-1]):
        ast = Or(alternative, ast)
    return ast