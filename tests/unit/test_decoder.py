import pytest

from sharecrack.decoding import decode, encode
from sharecrack.exceptions import DecodeError, DecodeFailure


@pytest.mark.parametrize(
    ("text", "base", "expected"),
    [
        ("4", 10, 4),
        ("111", 2, 7),
        ("213", 4, 39),
        ("z", 36, 35),
        ("Z", 36, 35),
        ("ff", 16, 255),
        ("  1010  ", 2, 10),
    ],
)
def test_decode_known_values(text: str, base: int, expected: int) -> None:
    assert decode(text, base) == expected


def test_decode_exceeds_machine_word() -> None:
    value = decode("2122212201122002221120200210011020220200", 3)
    assert value > 2**63
    assert encode(value, 3) == "2122212201122002221120200210011020220200"


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_decode_rejects_empty(text: str) -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode(text, 10)
    assert excinfo.value.reason is DecodeFailure.EMPTY_INPUT


def test_decode_rejects_digit_out_of_range() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode("g", 10)
    assert excinfo.value.reason is DecodeFailure.DIGIT_OUT_OF_RANGE
    assert excinfo.value.symbol == "g"


def test_decode_rejects_invalid_character() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode("12-4", 10)
    assert excinfo.value.reason is DecodeFailure.INVALID_CHARACTER
    assert excinfo.value.position == 2


@pytest.mark.parametrize("base", [0, 1, 37])
def test_decode_rejects_unsupported_base(base: int) -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode("1", base)
    assert excinfo.value.reason is DecodeFailure.INVALID_BASE


def test_decode_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        decode("2", 2)


def test_encode_zero_and_negative() -> None:
    assert encode(0, 7) == "0"
    with pytest.raises(ValueError):
        encode(-1, 10)


@pytest.mark.parametrize("text", ["1\u0130", "\u212a", "\uff11"])
def test_decode_rejects_non_ascii_symbols(text: str) -> None:
    # U+0130 lowercases to two characters, U+212A lowercases to "k"
    with pytest.raises(DecodeError) as excinfo:
        decode(text, 36)
    assert excinfo.value.reason is DecodeFailure.INVALID_CHARACTER
