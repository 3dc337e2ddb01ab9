import pytest

from zerokit.basics import ImaginaryNumber, mul, my_func, pred


def test_mul_example():
    assert mul(10, 20) == 200


def test_mul_negative():
    assert mul(-3, 7) == -21


def test_mul_overflow():
    with pytest.raises(OverflowError):
        mul(2**30, 4)


def test_mul_argument_out_of_range():
    with pytest.raises(OverflowError):
        mul(2**31, 1)


def test_imaginary_number_display():
    assert str(ImaginaryNumber(3.0, 4.0)) == "3 + 4i"


def test_imaginary_number_fraction():
    assert str(ImaginaryNumber(1.5, 0.25)) == "1.5 + 0.25i"


def test_my_func():
    assert my_func() == 100


def test_pred_zero_is_none():
    assert pred(0) is None


def test_pred_positive():
    assert pred(5) == 4


def test_pred_rejects_negative():
    with pytest.raises(ValueError):
        pred(-1)