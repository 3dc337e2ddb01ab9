import pytest

from zerokit.helper import USIZE_MAX, checked_add, safe_add


def test_checked_add_in_range():
    assert checked_add(10, 20) == 30


def test_checked_add_overflow():
    assert checked_add(USIZE_MAX, 1) is None


def test_checked_add_at_limit():
    assert checked_add(USIZE_MAX, 0) == USIZE_MAX


def test_safe_add_ok():
    assert safe_add(10, 20, lambda: ValueError("overflow")) == 30


def test_safe_add_overflow_raises_built_error():
    with pytest.raises(ValueError, match="overflow"):
        safe_add(USIZE_MAX, 1, lambda: ValueError("overflow"))


def test_safe_add_accepts_exception_class():
    with pytest.raises(OverflowError):
        safe_add(USIZE_MAX, 1, OverflowError)