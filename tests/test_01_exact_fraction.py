"""ExactFraction: normalization, arithmetic, comparison and rendering."""
import copy
import pickle
from fractions import Fraction

import pytest
import sympy
from ratlinalg import DivisionByZero, ExactFraction


def test_constructs():
    r = ExactFraction(1, 2)
    assert r.numerator == 1
    assert r.denominator == 2


def test_zero_denominator_raises():
    with pytest.raises(DivisionByZero):
        ExactFraction(1, 0)
    with pytest.raises(ZeroDivisionError):
        ExactFraction(0, 0)


@pytest.mark.parametrize("num, den", [
    (1.5, 2),
    (1, 2.0),
    (Fraction(1, 2), 1),
    (ExactFraction(1, 2), 1),
    (sympy.Rational(1, 2), 1),
    ("1", 2),
])
def test_non_integer_arguments_are_rejected(num, den):
    """Construction never truncates, conversions go through value_of"""
    with pytest.raises(TypeError):
        ExactFraction(num, den)


def test_integral_arguments_are_accepted():
    assert ExactFraction(True) == ExactFraction(1)


def test_from_integer():
    r = ExactFraction.from_integer(10)
    assert (r.numerator, r.denominator) == (10, 1)
    assert ExactFraction(10) == r


@pytest.mark.parametrize("num, den, exp_num, exp_den", [
    (10, 2, 5, 1),
    (4, 6, 2, 3),
    (-4, -6, 2, 3),
    (3, -6, -1, 2),
    (0, 7, 0, 1),
    (0, -3, 0, 1),
    (-12, 8, -3, 2),
])
def test_reduces_to_lowest_terms(num, den, exp_num, exp_den):
    r = ExactFraction(num, den)
    assert (r.numerator, r.denominator) == (exp_num, exp_den)


@pytest.mark.parametrize("a, b, c, d", [(1, 5, 1, 2), (5, 2, 3, 7), (-3, 4, 8, -9), (0, 3, 2, 5), (6, 4, 10, 15)])
def test_multiplication_matches_reduced_product(a, b, c, d):
    expected = Fraction(a * c, b * d)
    prod = ExactFraction(a, b) * ExactFraction(c, d)
    assert (prod.numerator, prod.denominator) == (expected.numerator, expected.denominator)


def test_multiplication():
    assert ExactFraction(1, 5) * 2 == ExactFraction(2, 5)
    assert 2 * ExactFraction(1, 5) == ExactFraction(2, 5)
    r = ExactFraction(5, 2)
    r *= ExactFraction(3, 7)
    assert (r.numerator, r.denominator) == (15, 14)
    r = ExactFraction(7, 3)
    r *= 2
    assert (r.numerator, r.denominator) == (14, 3)


def test_division():
    quot = ExactFraction(3, 2) / ExactFraction(2, 7)
    assert (quot.numerator, quot.denominator) == (21, 4)
    assert ExactFraction(3, 2) / 4 == ExactFraction(3, 8)
    assert 1 / ExactFraction(3, 4) == ExactFraction(4, 3)
    r = ExactFraction(3, 2)
    r /= ExactFraction(2, 7)
    r /= 2
    assert (r.numerator, r.denominator) == (21, 8)


def test_division_by_zero_raises():
    with pytest.raises(DivisionByZero):
        ExactFraction(1, 2) / ExactFraction(0, 5)
    with pytest.raises(DivisionByZero):
        ExactFraction(1, 2) / 0
    with pytest.raises(DivisionByZero):
        ExactFraction(0).invert()


def test_addition_and_subtraction():
    assert ExactFraction(5, 7) + ExactFraction(2, 3) == ExactFraction(29, 21)
    assert ExactFraction(5, 7) + 2 == ExactFraction(19, 7)
    r = ExactFraction(2, 3)
    r += 2
    assert (r.numerator, r.denominator) == (8, 3)
    assert ExactFraction(1, 2) - ExactFraction(1, 3) == ExactFraction(1, 6)
    assert 1 - ExactFraction(1, 3) == ExactFraction(2, 3)
    assert ExactFraction(1, 2) + ExactFraction(-1, 2) == 0


def test_arithmetic_does_not_mutate_operands():
    a = ExactFraction(1, 2)
    b = a
    b += ExactFraction(1, 2)
    assert a == ExactFraction(1, 2)
    assert b == ExactFraction(1)


def test_negation_is_additive_inverse():
    r = ExactFraction(3, 4)
    neg = -r
    assert (neg.numerator, neg.denominator) == (-3, 4)
    assert r + neg == ExactFraction(0)
    assert -(-r) == r
    assert -ExactFraction(0) == ExactFraction(0)


def test_equality():
    assert ExactFraction(1, 2) == ExactFraction(1, 2)
    assert ExactFraction(1, 2) != ExactFraction(5, 8)
    assert ExactFraction(2, 4) == ExactFraction(1, 2)
    assert ExactFraction(4, 2) == 2
    assert ExactFraction(1, 2) != "1/2"
    assert hash(ExactFraction(6, 3)) == hash(2)
    assert len({ExactFraction(1, 2), ExactFraction(2, 4)}) == 1


def test_ordering():
    assert ExactFraction(1, 3) < ExactFraction(1, 2)
    assert ExactFraction(-1, 2) < 0
    assert ExactFraction(3, 2) >= 1
    assert sorted([ExactFraction(2), ExactFraction(-1, 3), ExactFraction(1, 3)]) == \
        [ExactFraction(-1, 3), ExactFraction(1, 3), ExactFraction(2)]


def test_rendering():
    assert str(ExactFraction(5)) == "5"
    assert str(ExactFraction(10, 2)) == "5"
    assert str(ExactFraction(-3, 6)) == "-1/2"
    assert repr(ExactFraction(2, 4)) == "ExactFraction(1, 2)"


@pytest.mark.parametrize("value, expected", [
    (3, ExactFraction(3)),
    ("3/9", ExactFraction(1, 3)),
    (" -7 ", ExactFraction(-7)),
    ("0.25", ExactFraction(1, 4)),
    (0.5, ExactFraction(1, 2)),
    (Fraction(6, 4), ExactFraction(3, 2)),
    (sympy.Rational(-2, 6), ExactFraction(-1, 3)),
    (sympy.Integer(4), ExactFraction(4)),
])
def test_value_of(value, expected):
    assert ExactFraction.value_of(value) == expected


def test_value_of_rejects_unknown_types():
    with pytest.raises(TypeError):
        ExactFraction.value_of(object())
    with pytest.raises(ValueError):
        ExactFraction.value_of("1/2/3")


def test_conversions():
    r = ExactFraction(-7, 2)
    assert float(r) == -3.5
    assert int(r) == -3
    assert r.to_fraction() == Fraction(-7, 2)
    assert r.to_sympy() == sympy.Rational(-7, 2)
    assert abs(r) == ExactFraction(7, 2)
    assert r.signum() == -1
    assert ExactFraction(4, 2).is_integer()


def test_copy_and_pickle():
    r = ExactFraction(2, 3)
    assert copy.deepcopy(r) == r
    assert pickle.loads(pickle.dumps(r)) == r
