"""Base64 helpers, including the URL-safe alphabet without padding."""

import base64

__all__ = [
    "base64_to_string",
    "buffer_to_base64",
    "string_to_base64",
    "url_decode_base64",
    "url_encode_base64",
]


def url_encode_base64(b64: str) -> str:
    """Strip '=' padding and map '/' to '_' and '+' to '-'."""
    return b64.replace("=", "").replace("/", "_").replace("+", "-")


def url_decode_base64(url_b64: str | None) -> str | None:
    """Inverse of url_encode_base64. Empty or None input is returned as is."""
    if not url_b64:
        return url_b64
    # Base64 text comes in groups of 4 characters
    url_b64 += "=" * (-len(url_b64) % 4)
    return url_b64.replace("_", "/").replace("-", "+")


def buffer_to_base64(data: bytes | bytearray | memoryview) -> str:
    return base64.b64encode(data).decode("ascii")


def string_to_base64(text: str) -> str:
    """Base64 of the UTF-8 encoding of text."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def base64_to_string(b64: str) -> str:
    """Decode base64 into text, replacing invalid UTF-8 sequences."""
    return base64.b64decode(b64).decode("utf-8", errors="replace")
