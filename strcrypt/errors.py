"""Exception types raised by strcrypt."""

__all__ = [
    "DecryptionFailed",
    "EntropyUnavailable",
    "GeneratorUnavailable",
    "InvalidAlphabet",
    "InvalidDigit",
    "InvalidTime",
    "StrCryptError",
]


class StrCryptError(Exception):
    """Base class for all strcrypt errors."""


class InvalidAlphabet(StrCryptError, ValueError):
    """Alphabet is shorter than two characters or repeats a character."""


class InvalidDigit(StrCryptError, ValueError):
    """Numeral contains a character outside its source alphabet."""

    def __init__(self, digit: str, alphabet: str):
        self.digit = digit
        self.alphabet = alphabet
        if digit:
            super().__init__(f"Digit {digit!r} is not in alphabet {alphabet!r}")
        else:
            super().__init__("Empty numeral")


class InvalidTime(StrCryptError, ValueError):
    """Effective time is negative after applying the epoch offset."""

    def __init__(self, effective_time: int):
        self.effective_time = effective_time
        super().__init__(f"Effective time must be >= 0, got {effective_time}")


class EntropyUnavailable(StrCryptError, OSError):
    """The operating system's secure random source could not be read."""


# Name used for the same failure at the random-string level
GeneratorUnavailable = EntropyUnavailable


class DecryptionFailed(StrCryptError, ValueError):
    """Ciphertext is malformed, has a bad length or bad padding."""
