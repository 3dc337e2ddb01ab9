"""Small building blocks: checked multiplication, imaginary numbers and option helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
U32_MAX = 2**32 - 1


def _check_i32(value: int) -> None:
    if not I32_MIN <= value <= I32_MAX:
        raise OverflowError(f"{value} does not fit in a signed 32-bit integer")


def mul(x: int, y: int) -> int:
    """Return ``x * y`` for signed 32-bit integers; raise OverflowError when it does not fit."""
    _check_i32(x)
    _check_i32(y)
    result = x * y
    if not I32_MIN <= result <= I32_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


def _format_float(value: float) -> str:
    if value == value and value not in (float("inf"), float("-inf")) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class ImaginaryNumber:
    """A complex number written as ``real + img i``."""

    real: float
    img: float

    def __str__(self) -> str:
        return f"{_format_float(self.real)} + {_format_float(self.img)}i"


def my_func() -> Optional[int]:
    """Return the fixed value 100."""
    return 100


def pred(n: int) -> Optional[int]:
    """Return the number before ``n``, or ``None`` when ``n`` is zero."""
    if not 0 <= n <= U32_MAX:
        raise ValueError(f"{n} is not an unsigned 32-bit integer")
    if n == 0:
        return None
    return n - 1