"""Run compiled regular-expression instructions against an input string."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Sequence

from zerokit.helper import safe_add
from zerokit.regex_codegen import InstChar, InstJump, InstMatch, InstSplit


class EvalErrorKind(Enum):
    PC_OVERFLOW = "PCOverFlow"
    SP_OVERFLOW = "SPOverFlow"
    INVALID_PC = "InvalidPC"
    INVALID_CONTEXT = "InvalidContext"


class EvalError(Exception):
    """Raised when the instruction list cannot be executed."""

    def __init__(self, kind: EvalErrorKind):
        self.kind = kind
        super().__init__(f"EvalError: {kind.value}")


def evaluate(insts: Sequence, line: str, is_depth: bool) -> bool:
    """Return whether ``line`` matches from its start.

    ``is_depth`` selects the recursive depth-first evaluator; otherwise the
    evaluator driven by an explicit context queue is used.
    """
    if is_depth:
        return _eval_depth(insts, line, 0, 0)
    return _eval_width(insts, line)


def _fetch(insts: Sequence, pc: int):
    if 0 <= pc < len(insts):
        return insts[pc]
    raise EvalError(EvalErrorKind.INVALID_PC)


def _advance(pc: int, sp: int) -> tuple[int, int]:
    pc = safe_add(pc, 1, lambda: EvalError(EvalErrorKind.PC_OVERFLOW))
    sp = safe_add(sp, 1, lambda: EvalError(EvalErrorKind.SP_OVERFLOW))
    return pc, sp


def _eval_depth(insts: Sequence, line: str, pc: int, sp: int) -> bool:
    while True:
        match _fetch(insts, pc):
            case InstChar(c):
                if sp < len(line) and line[sp] == c:
                    pc, sp = _advance(pc, sp)
                else:
                    return False
            case InstMatch():
                return True
            case InstJump(addr):
                pc = addr
            case InstSplit(addr1, addr2):
                return _eval_depth(insts, line, addr1, sp) or _eval_depth(
                    insts, line, addr2, sp
                )
            case other:
                raise TypeError(f"unknown instruction: {other!r}")


def _pop_ctx(ctx: deque) -> tuple[int, int]:
    if not ctx:
        raise EvalError(EvalErrorKind.INVALID_CONTEXT)
    return ctx.pop()


def _eval_width(insts: Sequence, line: str) -> bool:
    ctx: deque = deque()
    pc = 0
    sp = 0

    while True:
        match _fetch(insts, pc):
            case InstChar(c):
                if sp < len(line) and line[sp] == c:
                    pc, sp = _advance(pc, sp)
                elif not ctx:
                    return False
                else:
                    pc, sp = _pop_ctx(ctx)
            case InstMatch():
                return True
            case InstJump(addr):
                pc = addr
            case InstSplit(addr1, addr2):
                pc = addr1
                ctx.append((addr2, sp))
                continue
            case other:
                raise TypeError(f"unknown instruction: {other!r}")

        if ctx:
            ctx.append((pc, sp))
            pc, sp = _pop_ctx(ctx)