from fractions import Fraction

import pytest

from sharecrack.exceptions import (
    InterpolationError,
    InterpolationFailure,
    NonIntegralSecretError,
)
from sharecrack.interpolation import constant_term, interpolate


def test_interpolate_quadratic() -> None:
    # y = x^2 + 3
    assert interpolate([(1, 4), (2, 7), (3, 12)]) == 3
    assert interpolate([(2, 7), (3, 12), (6, 39)]) == 3


def test_interpolate_is_order_independent() -> None:
    points = [(6, 39), (1, 4), (3, 12)]
    assert interpolate(points) == interpolate(list(reversed(points))) == 3


def test_interpolate_large_coefficients() -> None:
    coefficients = [2**200 + 7, -(3**90), 5**40, 11]
    xs = [4, 9, 15, 40]
    points = [(x, sum(c * x**power for power, c in enumerate(coefficients))) for x in xs]
    assert interpolate(points) == coefficients[0]


def test_constant_term_keeps_fractions() -> None:
    assert constant_term([(1, 0), (3, 1)]) == Fraction(-1, 2)


def test_non_integral_result_is_reported() -> None:
    with pytest.raises(NonIntegralSecretError) as excinfo:
        interpolate([(1, 0), (3, 1)])
    assert excinfo.value.reason is InterpolationFailure.NON_INTEGRAL
    assert isinstance(excinfo.value, InterpolationError)


def test_insufficient_points() -> None:
    with pytest.raises(InterpolationError) as excinfo:
        interpolate([(1, 5)])
    assert excinfo.value.reason is InterpolationFailure.INSUFFICIENT_POINTS


def test_duplicate_abscissa() -> None:
    with pytest.raises(InterpolationError) as excinfo:
        interpolate([(2, 5), (2, 9)])
    assert excinfo.value.reason is InterpolationFailure.DUPLICATE_ABSCISSA
