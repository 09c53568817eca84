"""Positional decoding of share values written in bases 2 through 36."""
from __future__ import annotations

import string

from ..exceptions import DecodeError, DecodeFailure

MIN_BASE = 2
MAX_BASE = 36

_DIGITS = string.digits + string.ascii_lowercase


def _check_base(base: int) -> None:
    if not MIN_BASE <= base <= MAX_BASE:
        raise DecodeError(
            DecodeFailure.INVALID_BASE,
            f"Base must be within [{MIN_BASE}, {MAX_BASE}], got {base}",
        )


def digit_value(symbol: str, base: int, *, position: int | None = None) -> int:
    """Map one character to its digit value, case-insensitively."""

    value = _DIGITS.find(symbol.lower()) if len(symbol) == 1 and symbol.isascii() else -1
    if value < 0:
        raise DecodeError(
            DecodeFailure.INVALID_CHARACTER,
            f"Invalid character {symbol!r}",
            symbol=symbol,
            position=position,
        )
    if value >= base:
        raise DecodeError(
            DecodeFailure.DIGIT_OUT_OF_RANGE,
            f"Digit {symbol!r} is out of range for base {base}",
            symbol=symbol,
            position=position,
        )
    return value


def decode(text: str, base: int) -> int:
    """Decode ``text`` written in ``base`` into an exact integer.

    Parameters
    ----------
    text:
        Encoded value. Surrounding whitespace is ignored and letters may be
        in either case.
    base:
        Radix in ``[2, 36]``.

    Raises
    ------
    DecodeError
        If the input is blank, the base is unsupported, or a character is
        not a valid digit of ``base``.
    """

    _check_base(base)
    stripped = (text or "").strip()
    if not stripped:
        raise DecodeError(DecodeFailure.EMPTY_INPUT, "Cannot decode empty value")
    result = 0
    for position, symbol in enumerate(stripped):
        result = result * base + digit_value(symbol, base, position=position)
    return result


def encode(value: int, base: int) -> str:
    """Render a non-negative integer in ``base`` using lowercase digits."""

    _check_base(base)
    if value < 0:
        raise ValueError("Only non-negative values can be encoded")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


__all__ = ["MAX_BASE", "MIN_BASE", "decode", "digit_value", "encode"]
