"""Exact Lagrange interpolation at x = 0 over the rationals."""
from __future__ import annotations

from fractions import Fraction
from typing import Sequence, Tuple

from ..exceptions import InterpolationError, InterpolationFailure, NonIntegralSecretError

Point = Tuple[int, int]


def _validate(points: Sequence[Point]) -> None:
    if len(points) < 2:
        raise InterpolationError(
            InterpolationFailure.INSUFFICIENT_POINTS,
            f"Need at least 2 points, got {len(points)}",
        )
    seen: set[int] = set()
    for x, _y in points:
        if x in seen:
            raise InterpolationError(
                InterpolationFailure.DUPLICATE_ABSCISSA,
                f"Duplicate x-coordinate detected: {x}",
            )
        seen.add(x)


def constant_term(points: Sequence[Point]) -> Fraction:
    """Return P(0) for the unique polynomial of degree < len(points) through ``points``."""

    _validate(points)
    total = Fraction(0)
    for i, (x_i, y_i) in enumerate(points):
        numerator = 1
        denominator = 1
        for j, (x_j, _y_j) in enumerate(points):
            if i == j:
                continue
            numerator *= -x_j
            denominator *= x_i - x_j
        total += Fraction(y_i * numerator, denominator)
    return total


def interpolate(points: Sequence[Point]) -> int:
    """Recover the integer secret encoded by ``points``.

    Raises :class:`NonIntegralSecretError` when the points do not lie on a
    polynomial with an integer constant term, which is how inconsistent
    (corrupted) subsets show up.
    """

    value = constant_term(points)
    if value.denominator != 1:
        raise NonIntegralSecretError(value)
    return value.numerator


__all__ = ["Point", "constant_term", "interpolate"]
