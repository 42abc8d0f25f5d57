"""Conversion of numerals between arbitrary alphabets."""

from strcrypt.config import DEFAULT_CHARSETS, Charsets, validate_alphabet
from strcrypt.errors import InvalidDigit

__all__ = [
    "base36_to_int",
    "convert",
    "hex_to_base36",
    "int_to_base36",
    "numeral_to_int",
]


def _to_int(alphabet: str, numeral: str) -> int:
    if not numeral:
        raise InvalidDigit("", alphabet)
    digits = {c: i for i, c in enumerate(alphabet)}
    base = len(alphabet)
    value = 0
    for c in numeral:
        try:
            value = value * base + digits[c]
        except KeyError:
            raise InvalidDigit(c, alphabet) from None
    return value


def _from_int(alphabet: str, value: int) -> str:
    if value == 0:
        return alphabet[0]
    base = len(alphabet)
    out = []
    while value:
        value, remainder = divmod(value, base)
        out.append(alphabet[remainder])
    return "".join(reversed(out))


def convert(source_alphabet: str, target_alphabet: str, numeral: str) -> str:
    """Re-express a numeral written in one alphabet using another.

    The numeral is read as a non-negative integer of any size, most
    significant digit first. The result has no leading zero digits except
    for the value zero itself, which is the target's zero character.

    Raises:
        InvalidAlphabet: Either alphabet is too short or repeats characters.
        InvalidDigit: The numeral is empty or uses a character not in
            ``source_alphabet``.
    """
    validate_alphabet(source_alphabet)
    validate_alphabet(target_alphabet)
    return _from_int(target_alphabet, _to_int(source_alphabet, numeral))


def numeral_to_int(alphabet: str, numeral: str) -> int:
    """Integer value of a numeral written in alphabet."""
    return _to_int(validate_alphabet(alphabet), numeral)


def int_to_base36(number: int | str, charsets: Charsets = DEFAULT_CHARSETS) -> str:
    """Base-36 numeral of a non-negative integer or decimal string."""
    if isinstance(number, int):
        if number < 0:
            raise ValueError(f"Number must be >= 0, got {number}")
        return _from_int(validate_alphabet(charsets.base36), number)
    return convert(charsets.decimal, charsets.base36, number)


def base36_to_int(numeral: str, charsets: Charsets = DEFAULT_CHARSETS) -> int:
    """Integer value of a base-36 numeral."""
    return numeral_to_int(charsets.base36, numeral)


def hex_to_base36(numeral: str, charsets: Charsets = DEFAULT_CHARSETS) -> str:
    return convert(charsets.hexadecimal, charsets.base36, numeral)
