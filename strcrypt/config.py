"""Charset configuration shared by the converters and generators."""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

from strcrypt.errors import InvalidAlphabet

__all__ = [
    "DEFAULT_CHARSETS",
    "Charsets",
    "validate_alphabet",
]

# Historical upper-case configuration keys
_LEGACY_KEYS = {
    "INT_CHARSET": "decimal",
    "HEX_CHARSET": "hexadecimal",
    "BASE36_CHARSET": "base36",
    "BASE62_CHARSET": "base62",
}


def validate_alphabet(alphabet: str) -> str:
    """Check that an alphabet has at least two distinct characters."""
    if not isinstance(alphabet, str):
        raise InvalidAlphabet(f"Alphabet must be a string, not {type(alphabet).__name__}")
    if len(alphabet) < 2:
        raise InvalidAlphabet(f"Alphabet needs at least 2 characters: {alphabet!r}")
    if len(set(alphabet)) != len(alphabet):
        raise InvalidAlphabet(f"Alphabet has duplicate characters: {alphabet!r}")
    return alphabet


@dataclass(frozen=True)
class Charsets:
    """The four named alphabets. Position in the string is digit value."""

    decimal: str = "0123456789"
    hexadecimal: str = "0123456789abcdef"
    base36: str = "0123456789abcdefghijklmnopqrstuvwxyz"
    base62: str = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

    def __post_init__(self):
        for f in fields(self):
            validate_alphabet(getattr(self, f.name))

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, str] | None = None) -> "Charsets":
        """Merge overrides over the defaults.

        Keys are field names (``base36``) or the upper-case names used by
        older configuration files (``BASE36_CHARSET``).
        """
        charsets = cls()
        if not overrides:
            return charsets
        names = {f.name for f in fields(cls)}
        changes = {}
        for key, value in overrides.items():
            name = _LEGACY_KEYS.get(key, key)
            if name not in names:
                raise InvalidAlphabet(f"Unknown charset: {key}")
            changes[name] = value
        return replace(charsets, **changes)


DEFAULT_CHARSETS = Charsets()
