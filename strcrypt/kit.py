"""Facade binding all operations to one charset configuration."""

from collections.abc import Mapping

from strcrypt import b64, base, crypto, rand
from strcrypt.config import DEFAULT_CHARSETS, Charsets
from strcrypt.crypto import CipherScheme

__all__ = ["CryptoKit"]


class CryptoKit:
    """Operations bound to a fixed set of charsets.

    The charsets are captured once at construction and never change, so an
    instance can be shared freely between threads.
    """

    def __init__(self, charsets: Charsets = DEFAULT_CHARSETS):
        self.charsets = charsets

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, str] | None = None) -> "CryptoKit":
        """Construct with overrides merged over the default charsets."""
        return cls(Charsets.from_mapping(overrides))

    # Identifiers and random strings

    def generate_random_string(self, charset: str, length: int) -> str:
        return rand.generate_random_string(charset, length)

    def generate_time_random_string(
        self,
        time: int | str,
        min_length: int | None = None,
        epoch_offset: int | None = None,
    ) -> str:
        return rand.generate_time_random_string(time, min_length, epoch_offset, self.charsets)

    def generate_uuid(self) -> str:
        return rand.generate_uuid()

    def generate_short_uuid(self) -> str:
        return rand.generate_short_uuid(self.charsets)

    # Numerals

    def convert(self, source_alphabet: str, target_alphabet: str, numeral: str) -> str:
        return base.convert(source_alphabet, target_alphabet, numeral)

    def int_to_base36(self, number: int | str) -> str:
        return base.int_to_base36(number, self.charsets)

    def base36_to_int(self, numeral: str) -> int:
        return base.base36_to_int(numeral, self.charsets)

    # Ciphers and digests

    def encrypt(
        self,
        plaintext: str | bytes,
        passphrase: str | bytes,
        scheme: CipherScheme = CipherScheme.CURRENT,
    ) -> str:
        return crypto.encrypt(plaintext, passphrase, scheme)

    def decrypt(
        self,
        ciphertext: str,
        passphrase: str | bytes,
        scheme: CipherScheme = CipherScheme.CURRENT,
    ) -> str:
        return crypto.decrypt(ciphertext, passphrase, scheme)

    def md5_string(self, text: str | bytes) -> str:
        return crypto.md5_string(text)

    def sha256_string(self, text: str | bytes, secret: str | bytes | None = None) -> str:
        return crypto.sha256_string(text, secret)

    # Base64

    def buffer_to_base64(self, data: bytes) -> str:
        return b64.buffer_to_base64(data)

    def string_to_base64(self, text: str) -> str:
        return b64.string_to_base64(text)

    def base64_to_string(self, b64_text: str) -> str:
        return b64.base64_to_string(b64_text)

    def url_encode_base64(self, b64_text: str) -> str:
        return b64.url_encode_base64(b64_text)

    def url_decode_base64(self, url_b64: str | None) -> str | None:
        return b64.url_decode_base64(url_b64)
