"""AES-128-CBC string encryption and digest helpers.

Two key derivations are supported. ``CipherScheme.CURRENT`` derives the key
and IV explicitly from MD5 digests of the passphrase. ``CipherScheme.LEGACY``
uses OpenSSL's ``EVP_BytesToKey`` (MD5, one round, no salt), which is what
password-based cipher constructors did implicitly; it exists only to read
data encrypted that way.

The IV is derived from the passphrase, so equal plaintexts under equal
passphrases encrypt identically. There is no integrity protection.
"""

import enum
import hashlib
import hmac
import logging

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from strcrypt.errors import DecryptionFailed

__all__ = [
    "CipherScheme",
    "aes_decrypt",
    "aes_decrypt_legacy",
    "aes_encrypt",
    "aes_encrypt_legacy",
    "decrypt",
    "derive_key_iv",
    "encrypt",
    "evp_bytes_to_key",
    "md5_string",
    "sha256_string",
]

logger = logging.getLogger(__name__)

KEY_BYTES = 16
IV_BYTES = 16
BLOCK_BITS = 128


class CipherScheme(enum.Enum):
    """Key/IV derivation used for a ciphertext. Not recorded in the output."""

    CURRENT = "current"
    LEGACY = "legacy"


def _to_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def evp_bytes_to_key(passphrase: bytes, key_bytes: int, iv_bytes: int) -> tuple[bytes, bytes]:
    """OpenSSL EVP_BytesToKey with MD5, a single round and no salt."""
    material = b""
    block = b""
    while len(material) < key_bytes + iv_bytes:
        block = hashlib.md5(block + passphrase).digest()
        material += block
    return material[:key_bytes], material[key_bytes : key_bytes + iv_bytes]


def derive_key_iv(
    passphrase: str | bytes, scheme: CipherScheme = CipherScheme.CURRENT
) -> tuple[bytes, bytes]:
    """Derive the 16 byte AES key and 16 byte IV for a passphrase."""
    secret = _to_bytes(passphrase)
    if scheme is CipherScheme.LEGACY:
        logger.debug("Deriving key with legacy scheme")
        return evp_bytes_to_key(secret, KEY_BYTES, IV_BYTES)
    key = hashlib.md5(secret).digest()[:KEY_BYTES]
    iv = hashlib.md5(key + secret).digest()
    return key, iv


def _cipher(passphrase: str | bytes, scheme: CipherScheme) -> Cipher:
    key, iv = derive_key_iv(passphrase, scheme)
    return Cipher(algorithms.AES(key), modes.CBC(iv))


def encrypt(
    plaintext: str | bytes,
    passphrase: str | bytes,
    scheme: CipherScheme = CipherScheme.CURRENT,
) -> str:
    """Encrypt plaintext, returning lowercase hex ciphertext."""
    padder = padding.PKCS7(BLOCK_BITS).padder()
    data = padder.update(_to_bytes(plaintext)) + padder.finalize()
    enc = _cipher(passphrase, scheme).encryptor()
    return (enc.update(data) + enc.finalize()).hex()


def decrypt(
    ciphertext: str,
    passphrase: str | bytes,
    scheme: CipherScheme = CipherScheme.CURRENT,
) -> str:
    """Decrypt hex ciphertext produced by encrypt with the same scheme.

    Raises:
        DecryptionFailed: Bad hex, length not a whole number of blocks,
            invalid padding, or a result that is not UTF-8.
    """
    try:
        data = bytes.fromhex(ciphertext)
    except (TypeError, ValueError) as e:
        logger.debug("Ciphertext is not hex: %s", e)
        raise DecryptionFailed("Ciphertext is not valid hex") from e
    # fromhex skips whitespace
    if len(ciphertext) != 2 * len(data):
        logger.debug("Ciphertext contains non-hex characters")
        raise DecryptionFailed("Ciphertext is not valid hex")
    if not data or len(data) % (BLOCK_BITS // 8):
        logger.debug("Ciphertext length %d is not a whole number of blocks", len(data))
        raise DecryptionFailed(f"Ciphertext length {len(data)} is not a multiple of the block size")

    dec = _cipher(passphrase, scheme).decryptor()
    unpadder = padding.PKCS7(BLOCK_BITS).unpadder()
    try:
        padded = dec.update(data) + dec.finalize()
        plain = unpadder.update(padded) + unpadder.finalize()
        return plain.decode("utf-8")
    except ValueError as e:
        # UnicodeDecodeError is a ValueError too
        logger.debug("Decryption failed: %s", e)
        raise DecryptionFailed("Wrong passphrase or corrupted ciphertext") from e


def aes_encrypt(plaintext: str | bytes, passphrase: str | bytes) -> str:
    return encrypt(plaintext, passphrase, CipherScheme.CURRENT)


def aes_decrypt(ciphertext: str, passphrase: str | bytes) -> str:
    return decrypt(ciphertext, passphrase, CipherScheme.CURRENT)


def aes_encrypt_legacy(plaintext: str | bytes, passphrase: str | bytes) -> str:
    """Encrypt with the legacy derivation. Prefer aes_encrypt for new data."""
    return encrypt(plaintext, passphrase, CipherScheme.LEGACY)


def aes_decrypt_legacy(ciphertext: str, passphrase: str | bytes) -> str:
    return decrypt(ciphertext, passphrase, CipherScheme.LEGACY)


def md5_string(text: str | bytes) -> str:
    """MD5 hex digest."""
    return hashlib.md5(_to_bytes(text)).hexdigest()


def sha256_string(text: str | bytes, secret: str | bytes | None = None) -> str:
    """HMAC-SHA256 hex digest. A missing secret is the empty key."""
    key = _to_bytes(secret) if secret is not None else b""
    return hmac.new(key, _to_bytes(text), hashlib.sha256).hexdigest()
