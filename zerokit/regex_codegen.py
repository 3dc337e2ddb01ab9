"""Compile a regular-expression AST into instructions for the matching machine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from zerokit.helper import safe_add
from zerokit.regex_parser import Char, Node, Or, Plus, Question, Seq, Star


class CodeGenErrorKind(Enum):
    PC_OVERFLOW = "PCOverFlow"
    FAIL_STAR = "FailStar"
    FAIL_OR = "FailOr"
    FAIL_QUESTION = "FailQuestion"


class CodeGenError(Exception):
    """Raised when code generation fails."""

    def __init__(self, kind: CodeGenErrorKind):
        self.kind = kind
        super().__init__(f"CodeGenError: {kind.value}")


@dataclass(frozen=True)
class InstChar:
    c: str

    def __str__(self) -> str:
        return f"char {self.c}"


@dataclass(frozen=True)
class InstMatch:
    def __str__(self) -> str:
        return "match"


@dataclass(frozen=True)
class InstJump:
    addr: int

    def __str__(self) -> str:
        return f"jump {self.addr:04d}"


@dataclass(frozen=True)
class InstSplit:
    addr1: int
    addr2: int

    def __str__(self) -> str:
        return f"split {self.addr1:04d}, {self.addr2:04d}"


Instruction = Union[InstChar, InstMatch, InstJump, InstSplit]


def get_code(ast: Node) -> list:
    """Return the instruction list for ``ast``, ending with a match."""
    generator = _Generator()
    generator.gen_expr(ast)
    generator.inc_pc()
    generator.insts.append(InstMatch())
    return generator.insts


class _Generator:
    def __init__(self) -> None:
        self.pc = 0
        self.insts: list = []

    def inc_pc(self) -> None:
        self.pc = safe_add(self.pc, 1, lambda: CodeGenError(CodeGenErrorKind.PC_OVERFLOW))

    def _at(self, addr: int) -> Optional[Instruction]:
        return self.insts[addr] if 0 <= addr < len(self.insts) else None

    def gen_expr(self, ast: Node) -> None:
        match ast:
            case Char(c):
                self.insts.append(InstChar(c))
                self.inc_pc()
            case Or(left, right):
                self._gen_or(left, right)
            case Plus(inner):
                self._gen_plus(inner)
            case Star(inner):
                # Collapse nested stars such as (((r*)*)*) into a single r*.
                if isinstance(inner, Star):
                    self.gen_expr(inner)
                elif (
                    isinstance(inner, Seq)
                    and len(inner.items) == 1
                    and isinstance(inner.items[0], Star)
                ):
                    self.gen_expr(inner.items[0])
                else:
                    self._gen_star(inner)
            case Question(inner):
                self._gen_question(inner)
            case Seq(items):
                for item in items:
                    self.gen_expr(item)
            case _:
                raise TypeError(f"unknown AST node: {ast!r}")

    def _gen_or(self, left: Node, right: Node) -> None:
        split_addr = self.pc
        self.inc_pc()
        self.insts.append(InstSplit(self.pc, 0))

        self.gen_expr(left)

        jmp_addr = self.pc
        self.insts.append(InstJump(0))

        self.inc_pc()
        split = self._at(split_addr)
        if not isinstance(split, InstSplit):
            raise CodeGenError(CodeGenErrorKind.FAIL_OR)
        self.insts[split_addr] = replace(split, addr2=self.pc)

        self.gen_expr(right)

        if not isinstance(self._at(jmp_addr), InstJump):
            raise CodeGenError(CodeGenErrorKind.FAIL_OR)
        self.insts[jmp_addr] = InstJump(self.pc)

    def _gen_question(self, inner: Node) -> None:
        split_addr = self.pc
        self.inc_pc()
        self.insts.append(InstSplit(self.pc, 0))

        self.gen_expr(inner)

        split = self._at(split_addr)
        if not isinstance(split, InstSplit):
            raise CodeGenError(CodeGenErrorKind.FAIL_QUESTION)
        self.insts[split_addr] = replace(split, addr2=self.pc)

    def _gen_plus(self, inner: Node) -> None:
        start = self.pc
        self.gen_expr(inner)
        self.inc_pc()
        self.insts.append(InstSplit(start, self.pc))

    def _gen_star(self, inner: Node) -> None:
        start = self.pc
        self.inc_pc()
        self.insts.append(InstSplit(self.pc, 0))

        self.gen_expr(inner)

        self.inc_pc()
        self.insts.append(InstJump(start))

        split = self._at(start)
        if not isinstance(split, InstSplit):
            raise CodeGenError(CodeGenErrorKind.FAIL_STAR)
        self.insts[start] = replace(split, addr2=self.pc)