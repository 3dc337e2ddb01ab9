"""The Ackermann function, in plain recursive and in tail-call form."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence, Union

DEFAULT_M = 4
DEFAULT_N = 4


def _check(m: int, n: int) -> None:
    if m < 0 or n < 0:
        raise ValueError("arguments must be non-negative")


def ackermann(m: int, n: int) -> int:
    """Return A(m, n) by direct recursion."""
    _check(m, n)
    return _ackermann(m, n)


def _ackermann(m: int, n: int) -> int:
    if m == 0:
        return n + 1
    if n == 0:
        return _ackermann(m - 1, 1)
    return _ackermann(m - 1, _ackermann(m, n - 1))


@dataclass
class _Deferred:
    """A pending A(m, n) whose value is computed when first needed."""

    m: int
    n: int


_Arg = Union[int, _Deferred]


def _force(arg: _Arg) -> int:
    if isinstance(arg, _Deferred):
        return _tail(arg.m, arg.n)
    return arg


def ackermann_tail(m: int, n: int) -> int:
    """Return A(m, n), passing the inner call on as a deferred argument."""
    _check(m, n)
    return _tail(m, n)


def _tail(m: int, n: _Arg) -> int:
    while True:
        value = _force(n)
        if m == 0:
            return value + 1
        if value == 0:
            m, n = m - 1, 1
        else:
            m, n = m - 1, _Deferred(m, value - 1)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print A(m, n); ``m`` and ``n`` may be given as two arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        try:
            m, n = (int(a) for a in args)
            _check(m, n)
        except ValueError:
            print("usage: zerokit-ackermann [M N]", file=sys.stderr)
            return 1
    else:
        m, n = DEFAULT_M, DEFAULT_N
    print(f"ackermann({m}, {n}) = {ackermann(m, n)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())