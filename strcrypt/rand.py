"""Secure random strings and time-ordered identifiers."""

import logging
import secrets
import uuid

import numpy as np

from strcrypt.base import hex_to_base36, int_to_base36, numeral_to_int
from strcrypt.config import DEFAULT_CHARSETS, Charsets, validate_alphabet
from strcrypt.errors import EntropyUnavailable, InvalidTime

__all__ = [
    "SHORT_UUID_LENGTH",
    "generate_random_string",
    "generate_short_uuid",
    "generate_time_random_string",
    "generate_uuid",
    "secure_bytes",
]

logger = logging.getLogger(__name__)

SHORT_UUID_LENGTH = 25  # 128 bits need at most 25 base-36 digits


def secure_bytes(n: int) -> bytes:
    """Read n bytes from the operating system's secure random source."""
    try:
        return secrets.token_bytes(n)
    except (OSError, NotImplementedError) as e:
        logger.error("Secure random source unavailable: %s", e)
        raise EntropyUnavailable(f"Cannot read {n} random bytes: {e}") from e


def generate_random_string(charset: str, length: int) -> str:
    """Generate a random string using only characters of charset.

    Each random byte is added to a running cursor that is carried across
    positions, and the cursor modulo the charset size picks the character.
    The output is reproducible for a given byte sequence.

    Args:
        charset: Alphabet of at least two distinct characters
        length: Number of characters to produce

    Raises:
        InvalidAlphabet: charset is too short or repeats characters
        EntropyUnavailable: the secure random source failed
    """
    validate_alphabet(charset)
    if length < 0:
        raise ValueError(f"Length must be >= 0, got {length}")
    if length == 0:
        return ""
    raw = np.frombuffer(secure_bytes(length), dtype=np.uint8)
    cursor = np.cumsum(raw, dtype=np.int64)
    return "".join(charset[i] for i in (cursor % len(charset)).tolist())


def generate_time_random_string(
    time: int | str,
    min_length: int | None = None,
    epoch_offset: int | None = None,
    charsets: Charsets = DEFAULT_CHARSETS,
) -> str:
    """Base-36 time prefix followed by random base-36 padding.

    The time part is not left-padded, so identifiers only sort
    lexicographically among equal-length prefixes.

    Args:
        time: Unix time in seconds, as int or decimal string
        min_length: Pad with random characters up to this length
        epoch_offset: Subtracted from time to shorten the encoded value

    Raises:
        InvalidDigit: time is a string that is not a decimal numeral
        InvalidTime: time minus epoch_offset is negative
    """
    if isinstance(time, str):
        effective_time = numeral_to_int(charsets.decimal, time)
    else:
        effective_time = int(time)
    if epoch_offset is not None:
        effective_time -= int(epoch_offset)
    if effective_time < 0:
        raise InvalidTime(effective_time)

    result = int_to_base36(effective_time, charsets)
    if min_length is not None and len(result) < min_length:
        result += generate_random_string(charsets.base36, min_length - len(result))
    return result


def generate_uuid() -> str:
    """Random UUIDv4 in its canonical 36 character form."""
    return str(uuid.uuid4())


def generate_short_uuid(charsets: Charsets = DEFAULT_CHARSETS) -> str:
    """Random UUIDv4 as a 25 character base-36 string."""
    short = hex_to_base36(uuid.uuid4().hex, charsets)
    return short.ljust(SHORT_UUID_LENGTH, charsets.base36[0])
