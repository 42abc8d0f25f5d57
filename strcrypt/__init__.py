"""strcrypt - Random strings, identifiers, numeral conversion and AES helpers.

This package provides charset-constrained secure random strings, base-36
time-ordered identifiers, arbitrary-base numeral conversion, AES-128-CBC
string encryption with passphrase-derived keys, and URL-safe base64.
"""

from strcrypt.b64 import (
    base64_to_string,
    buffer_to_base64,
    string_to_base64,
    url_decode_base64,
    url_encode_base64,
)
from strcrypt.base import base36_to_int, convert, hex_to_base36, int_to_base36, numeral_to_int
from strcrypt.config import DEFAULT_CHARSETS, Charsets
from strcrypt.crypto import (
    CipherScheme,
    aes_decrypt,
    aes_decrypt_legacy,
    aes_encrypt,
    aes_encrypt_legacy,
    decrypt,
    encrypt,
    md5_string,
    sha256_string,
)
from strcrypt.errors import (
    DecryptionFailed,
    EntropyUnavailable,
    GeneratorUnavailable,
    InvalidAlphabet,
    InvalidDigit,
    InvalidTime,
    StrCryptError,
)
from strcrypt.kit import CryptoKit
from strcrypt.rand import (
    generate_random_string,
    generate_short_uuid,
    generate_time_random_string,
    generate_uuid,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CHARSETS",
    "Charsets",
    "CipherScheme",
    "CryptoKit",
    "DecryptionFailed",
    "EntropyUnavailable",
    "GeneratorUnavailable",
    "InvalidAlphabet",
    "InvalidDigit",
    "InvalidTime",
    "StrCryptError",
    "__version__",
    "aes_decrypt",
    "aes_decrypt_legacy",
    "aes_encrypt",
    "aes_encrypt_legacy",
    "base36_to_int",
    "base64_to_string",
    "buffer_to_base64",
    "convert",
    "decrypt",
    "encrypt",
    "generate_random_string",
    "generate_short_uuid",
    "generate_time_random_string",
    "generate_uuid",
    "hex_to_base36",
    "int_to_base36",
    "md5_string",
    "numeral_to_int",
    "sha256_string",
    "string_to_base64",
    "url_decode_base64",
    "url_encode_base64",
]
