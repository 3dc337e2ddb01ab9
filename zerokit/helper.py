"""Overflow-checked arithmetic on machine-sized unsigned integers."""

from __future__ import annotations

from typing import Callable, Optional

USIZE_MAX = 2**64 - 1


def checked_add(a: int, b: int) -> Optional[int]:
    """Return ``a + b``, or ``None`` if the sum does not fit in an unsigned 64-bit word."""
    result = a + b
    if result > USIZE_MAX:
        return None
    return result


def safe_add(dst: int, src: int, error: Callable[[], BaseException]) -> int:
    """Return ``dst + src``; raise the exception built by ``error`` on overflow."""
    result = checked_add(dst, src)
    if result is None:
        raise error()
    return result