import uuid

import pytest

from strcrypt import base
from strcrypt.config import DEFAULT_CHARSETS as CS
from strcrypt.errors import InvalidAlphabet, InvalidDigit


def test_known_values():
    assert base.convert(CS.decimal, CS.base36, "12345678") == "7clzi"
    assert base.convert(CS.base36, CS.decimal, "7clzi") == "12345678"
    assert base.int_to_base36(12345678) == "7clzi"
    assert base.int_to_base36("12345678") == "7clzi"
    assert base.base36_to_int("7clzi") == 12345678
    assert base.numeral_to_int(CS.base36, "7clzi") == 12345678
    assert base.numeral_to_int("01", "1010") == 10


@pytest.mark.parametrize("numeral", ["0", "000", "00000000"])
def test_zero(numeral):
    assert base.convert(CS.decimal, CS.base62, numeral) == "0"
    assert base.convert(CS.decimal, "xy", numeral) == "x"


def test_leading_zeros_collapse():
    assert base.convert(CS.decimal, CS.hexadecimal, "000255") == "ff"
    assert base.convert(CS.hexadecimal, CS.decimal, "00ff") == "255"


def test_beyond_64_bits():
    """A full UUID in hex exceeds native integer widths"""
    h = uuid.UUID("ffffffff-ffff-4fff-bfff-ffffffffffff").hex
    assert base.convert(CS.hexadecimal, CS.decimal, h) == str(int(h, 16))
    assert base.hex_to_base36(h) == base.convert(CS.decimal, CS.base36, str(int(h, 16)))
    assert int(base.hex_to_base36(h), 36) == int(h, 16)


@pytest.mark.parametrize(
    "source, target, numeral",
    [
        (CS.decimal, CS.base36, "1593878946"),
        (CS.hexadecimal, CS.base62, "deadbeefcafebabe0123456789abcdef"),
        (CS.base62, "01", "Zz09aA"),
        ("01", CS.base62, "1" * 200),
        ("abc", "xyzw", "cab"),
    ],
)
def test_roundtrip(source, target, numeral):
    back = base.convert(target, source, base.convert(source, target, numeral))
    assert back == numeral.lstrip(source[0]) or back == source[0]


def test_invalid_digit():
    with pytest.raises(InvalidDigit) as exc:
        base.convert(CS.decimal, CS.base36, "12a4")
    assert exc.value.digit == "a"
    with pytest.raises(InvalidDigit):
        base.convert(CS.hexadecimal, CS.decimal, "ABC")  # case matters
    with pytest.raises(InvalidDigit):
        base.convert(CS.decimal, CS.base36, "")
    with pytest.raises(InvalidDigit):
        base.int_to_base36("-5")


@pytest.mark.parametrize("alphabet", ["", "0", "0120"])
def test_invalid_alphabet(alphabet):
    with pytest.raises(InvalidAlphabet):
        base.convert(alphabet, CS.decimal, "0")
    with pytest.raises(InvalidAlphabet):
        base.convert(CS.decimal, alphabet, "0")


def test_negative_int():
    with pytest.raises(ValueError):
        base.int_to_base36(-1)
