"""Parser for a small linearly typed lambda language.

Grammar::

    <VAR>   := one or more ASCII letters
    <E>     := <LET> | <IF> | <SPLIT> | <FREE> | <APP> | <VAR> | <QVAL>
    <LET>   := let <VAR> : <T> = <E>; <E>
    <IF>    := if <E> { <E> } else { <E> }
    <SPLIT> := split <E> as <VAR>, <VAR> { <E> }
    <FREE>  := free <VAR>; <E>
    <APP>   := ( <E> <E> )
    <Q>     := lin | un
    <QVAL>  := <Q> <VAL>
    <VAL>   := true | false | < <E> , <E> > | fn <VAR> : <T> { <E> }
    <T>     := <Q> <P>
    <P>     := bool | ( <T> * <T> ) | ( <T> -> <T> )
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ParseError(ValueError):
    """Raised when the source text does not follow the grammar."""

    def __init__(self, message: str, pos: int):
        self.pos = pos
        super().__init__(f"{message} at position {pos}")


class Qual(Enum):
    LIN = "lin"
    UN = "un"


@dataclass(frozen=True)
class BoolType:
    def __str__(self) -> str:
        return "bool"


@dataclass(frozen=True)
class PairType:
    first: "TypeExpr"
    second: "TypeExpr"

    def __str__(self) -> str:
        return f"({self.first} * {self.second})"


@dataclass(frozen=True)
class ArrowType:
    arg: "TypeExpr"
    ret: "TypeExpr"

    def __str__(self) -> str:
        return f"({self.arg} -> {self.ret})"


PrimType = Union[BoolType, PairType, ArrowType]


@dataclass(frozen=True)
class TypeExpr:
    qual: Qual
    prim: PrimType

    def __str__(self) -> str:
        return f"{self.qual.value} {self.prim}"


@dataclass(frozen=True)
class Var:
    name: str


@dataclass(frozen=True)
class AppExpr:
    expr1: "Expr"
    expr2: "Expr"


@dataclass(frozen=True)
class IfExpr:
    cond_expr: "Expr"
    then_expr: "Expr"
    else_expr: "Expr"


@dataclass(frozen=True)
class SplitExpr:
    expr: "Expr"
    left: str
    right: str
    body: "Expr"


@dataclass(frozen=True)
class LetExpr:
    var: str
    ty: TypeExpr
    expr1: "Expr"
    expr2: "Expr"


@dataclass(frozen=True)
class FreeExpr:
    var: str
    expr: "Expr"


@dataclass(frozen=True)
class BoolVal:
    value: bool


@dataclass(frozen=True)
class PairVal:
    first: "Expr"
    second: "Expr"


@dataclass(frozen=True)
class FnExpr:
    var: str
    ty: TypeExpr
    expr: "Expr"


ValExpr = Union[BoolVal, PairVal, FnExpr]


@dataclass(frozen=True)
class QValExpr:
    qual: Qual
    val: ValExpr


Expr = Union[LetExpr, IfExpr, SplitExpr, FreeExpr, AppExpr, Var, QValExpr]

_WHITESPACE = frozenset(" \t\r\n")


def parse_expr(text: str) -> Expr:
    """Parse one expression from the start of ``text``; trailing text is ignored."""
    return _Parser(text).expr()


def _is_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _fail(self, what: str) -> ParseError:
        return ParseError(f"expected {what}", self.pos)

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def ws0(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def ws1(self) -> None:
        start = self.pos
        self.ws0()
        if self.pos == start:
            raise self._fail("whitespace")

    def alpha1(self) -> str:
        start = self.pos
        while self.pos < len(self.text) and _is_alpha(self.text[self.pos]):
            self.pos += 1
        if self.pos == start:
            raise self._fail("an alphabetic name")
        return self.text[start:self.pos]

    def tag(self, *options: str) -> str:
        for option in options:
            if self.text.startswith(option, self.pos):
                self.pos += len(option)
                return option
        raise self._fail(" or ".join(repr(o) for o in options))

    def braced(self) -> Expr:
        self.tag("{")
        self.ws0()
        inner = self.expr()
        self.ws0()
        self.tag("}")
        return inner

    def expr(self) -> Expr:
        self.ws0()
        if _is_alpha(self._peek()):
            word = self.alpha1()
        elif self._peek() == "(":
            word = self.tag("(")
        else:
            raise self._fail("an alphabetic name or '('")

        match word:
            case "let":
                return self._let()
            case "if":
                return self._if()
            case "split":
                return self._split()
            case "free":
                return self._free()
            case "lin":
                return self._qval(Qual.LIN)
            case "un":
                return self._qval(Qual.UN)
            case "(":
                return self._app()
            case _:
                return Var(word)

    def _app(self) -> AppExpr:
        self.ws0()
        func = self.expr()
        self.ws1()
        arg = self.expr()
        self.ws0()
        self.tag(")")
        return AppExpr(func, arg)

    def _free(self) -> FreeExpr:
        self.ws1()
        var = self.alpha1()
        self.ws0()
        self.tag(";")
        return FreeExpr(var, self.expr())

    def _split(self) -> SplitExpr:
        self.ws1()
        pair = self.expr()
        self.ws1()
        self.tag("as")
        self.ws1()
        left = self.alpha1()
        self.ws0()
        self.tag(",")
        self.ws0()
        right = self.alpha1()
        self.ws0()
        return SplitExpr(pair, left, right, self.braced())

    def _if(self) -> IfExpr:
        self.ws1()
        cond = self.expr()
        self.ws0()
        then = self.braced()
        self.ws0()
        self.tag("else")
        self.ws0()
        return IfExpr(cond, then, self.braced())

    def _let(self) -> LetExpr:
        self.ws1()
        var = self.alpha1()
        self.ws0()
        self.tag(":")
        self.ws0()
        ty = self.type_expr()
        self.ws0()
        self.tag("=")
        self.ws0()
        bound = self.expr()
        self.ws0()
        self.tag(";")
        return LetExpr(var, ty, bound, self.expr())

    def _qval(self, qual: Qual) -> QValExpr:
        self.ws1()
        match self.tag("fn", "true", "false", "<"):
            case "fn":
                val = self._fn()
            case "true":
                val = BoolVal(True)
            case "false":
                val = BoolVal(False)
            case _:
                val = self._pair()
        return QValExpr(qual, val)

    def _pair(self) -> PairVal:
        self.ws0()
        first = self.expr()
        self.ws0()
        self.tag(",")
        self.ws0()
        second = self.expr()
        self.ws0()
        self.tag(">")
        return PairVal(first, second)

    def _fn(self) -> FnExpr:
        self.ws1()
        var = self.alpha1()
        self.ws0()
        self.tag(":")
        self.ws0()
        ty = self.type_expr()
        self.ws0()
        return FnExpr(var, ty, self.braced())

    def type_expr(self) -> TypeExpr:
        qual = Qual.LIN if self.tag("lin", "un") == "lin" else Qual.UN
        self.ws1()
        if self.tag("bool", "(") == "bool":
            return TypeExpr(qual, BoolType())
        self.ws0()
        first = self.type_expr()
        self.ws0()
        op = self.tag("*", "->")
        self.ws0()
        second = self.type_expr()
        self.ws0()
        self.tag(")")
        prim = PairType(first, second) if op == "*" else ArrowType(first, second)
        return TypeExpr(qual, prim)