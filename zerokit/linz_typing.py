"""Type checker for the linearly typed lambda language.

Variables of ``lin`` type must be used exactly once. Variables of ``un``
type may be used any number of times.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from zerokit.helper import safe_add
from zerokit.linz_parser import (
    AppExpr,
    ArrowType,
    BoolType,
    BoolVal,
    Expr,
    FnExpr,
    FreeExpr,
    IfExpr,
    LetExpr,
    PairType,
    PairVal,
    QValExpr,
    Qual,
    SplitExpr,
    TypeExpr,
    Var,
)


class TypingError(Exception):
    """Raised when an expression is not well typed."""


@dataclass
class _ScopeStack:
    """Scopes keyed by nesting depth; a consumed variable maps to ``None``."""

    scopes: dict = field(default_factory=dict)

    def push(self, depth: int) -> None:
        self.scopes[depth] = {}

    def pop(self, depth: int) -> dict:
        return self.scopes.pop(depth, {})

    def insert(self, name: str, ty: TypeExpr) -> None:
        if self.scopes:
            self.scopes[max(self.scopes)][name] = ty

    def find(self, name: str) -> Optional[tuple[int, dict]]:
        for depth in sorted(self.scopes, reverse=True):
            scope = self.scopes[depth]
            if name in scope:
                return depth, scope
        return None

    def copy(self) -> "_ScopeStack":
        return _ScopeStack({depth: dict(scope) for depth, scope in self.scopes.items()})


@dataclass
class TypeEnv:
    """Typing environment with separate scope stacks for lin and un variables."""

    _lin: _ScopeStack = field(default_factory=_ScopeStack, init=False)
    _un: _ScopeStack = field(default_factory=_ScopeStack, init=False)

    def _push(self, depth: int) -> None:
        self._lin.push(depth)
        self._un.push(depth)

    def _pop(self, depth: int) -> dict:
        """Drop the scopes at ``depth`` and return the lin one."""
        lin = self._lin.pop(depth)
        self._un.pop(depth)
        return lin

    def _insert(self, name: str, ty: TypeExpr) -> None:
        if ty.qual is Qual.LIN:
            self._lin.insert(name, ty)
        else:
            self._un.insert(name, ty)

    def _lookup(self, name: str) -> Optional[dict]:
        """Return the innermost scope that binds ``name``, or ``None``."""
        lin = self._lin.find(name)
        un = self._un.find(name)
        if lin is not None and un is not None:
            if lin[0] == un[0]:
                raise RuntimeError("invalid type environment")
            return lin[1] if lin[0] > un[0] else un[1]
        if lin is not None:
            return lin[1]
        if un is not None:
            return un[1]
        return None

    def _copy(self) -> "TypeEnv":
        env = TypeEnv()
        env._lin = self._lin.copy()
        env._un = self._un.copy()
        return env


def typing(expr: Expr, env: TypeEnv, depth: int) -> TypeExpr:
    """Return the type of ``expr`` in ``env``; raise :class:`TypingError` if ill typed."""
    match expr:
        case AppExpr():
            return _typing_app(expr, env, depth)
        case QValExpr():
            return _typing_qval(expr, env, depth)
        case FreeExpr():
            return _typing_free(expr, env, depth)
        case IfExpr():
            return _typing_if(expr, env, depth)
        case SplitExpr():
            return _typing_split(expr, env, depth)
        case Var(name):
            return _typing_var(name, env)
        case LetExpr():
            return _typing_let(expr, env, depth)
        case _:
            raise TypeError(f"unknown expression: {expr!r}")


def _deeper(depth: int) -> int:
    return safe_add(depth, 1, lambda: TypingError("variable scopes are nested too deeply"))


def _check_consumed(scope: dict, where: str) -> None:
    for name in sorted(scope):
        if scope[name] is not None:
            raise TypingError(f'lin variable "{name}" is not consumed in {where}')


def _typing_app(expr: AppExpr, env: TypeEnv, depth: int) -> TypeExpr:
    func = typing(expr.expr1, env, depth)
    if not isinstance(func.prim, ArrowType):
        raise TypingError("not a function type")
    arg = typing(expr.expr2, env, depth)
    if func.prim.arg != arg:
        raise TypingError("argument type differs in function application")
    return func.prim.ret


def _typing_qval(expr: QValExpr, env: TypeEnv, depth: int) -> TypeExpr:
    match expr.val:
        case BoolVal():
            prim = BoolType()
        case PairVal(first, second):
            t1 = typing(first, env, depth)
            t2 = typing(second, env, depth)
            if expr.qual is Qual.UN and Qual.LIN in (t1.qual, t2.qual):
                raise TypingError("lin type used inside an un pair")
            prim = PairType(t1, t2)
        case FnExpr() as fn:
            prim = _typing_fn(expr.qual, fn, env, depth)
        case other:
            raise TypeError(f"unknown value: {other!r}")
    return TypeExpr(expr.qual, prim)


def _typing_fn(qual: Qual, fn: FnExpr, env: TypeEnv, depth: int) -> ArrowType:
    # An un function cannot capture free lin variables, so hide them.
    saved_lin = None
    if qual is Qual.UN:
        saved_lin = env._lin
        env._lin = _ScopeStack()

    depth = _deeper(depth)
    env._push(depth)
    env._insert(fn.var, fn.ty)

    body = typing(fn.expr, env, depth)

    _check_consumed(env._pop(depth), "function definition")

    if saved_lin is not None:
        env._lin = saved_lin

    return ArrowType(fn.ty, body)


def _typing_free(expr: FreeExpr, env: TypeEnv, depth: int) -> TypeExpr:
    found = env._lin.find(expr.var)
    if found is not None:
        scope = found[1]
        if scope[expr.var] is not None:
            scope[expr.var] = None
            return typing(expr.expr, env, depth)
    raise TypingError(f'freeing variable "{expr.var}" that is already freed or not lin')


def _typing_if(expr: IfExpr, env: TypeEnv, depth: int) -> TypeExpr:
    cond = typing(expr.cond_expr, env, depth)
    if cond.prim != BoolType():
        raise TypingError("condition of if is not bool")

    then_env = env._copy()
    then_ty = typing(expr.then_expr, then_env, depth)
    else_ty = typing(expr.else_expr, env, depth)

    if then_ty != else_ty or then_env != env:
        raise TypingError("then and else branches of if differ")
    return then_ty


def _typing_split(expr: SplitExpr, env: TypeEnv, depth: int) -> TypeExpr:
    if expr.left == expr.right:
        raise TypingError("split binds the same variable name twice")

    pair = typing(expr.expr, env, depth)
    depth = _deeper(depth)

    if not isinstance(pair.prim, PairType):
        raise TypingError("argument of split is not a pair type")
    env._push(depth)
    env._insert(expr.left, pair.prim.first)
    env._insert(expr.right, pair.prim.second)

    failure: Optional[TypingError] = None
    result: Optional[TypeExpr] = None
    try:
        result = typing(expr.body, env, depth)
    except TypingError as exc:
        failure = exc

    _check_consumed(env._pop(depth), "split expression")

    if failure is not None:
        raise failure
    return result


def _typing_var(name: str, env: TypeEnv) -> TypeExpr:
    scope = env._lookup(name)
    if scope is not None:
        ty = scope[name]
        if ty is not None:
            if ty.qual is Qual.LIN:
                scope[name] = None
            return ty
    raise TypingError(f'variable "{name}" is undefined, already used, or cannot be captured')


def _typing_let(expr: LetExpr, env: TypeEnv, depth: int) -> TypeExpr:
    bound = typing(expr.expr1, env, depth)
    if bound != expr.ty:
        raise TypingError(f'type of variable "{expr.var}" differs')

    depth = _deeper(depth)
    env._push(depth)
    env._insert(expr.var, bound)
    body = typing(expr.expr2, env, depth)

    _check_consumed(env._pop(depth), "let expression")
    return body