#!/usr/bin/env python3
"""
Byte-level encodings of the clipboard text (UTF-8): hex and Base64.

Decoders are strict about the result: bytes that are not valid UTF-8 raise
UnicodeDecodeError instead of producing replacement characters.
"""
import base64
import re

_WHITESPACE = re.compile(r"\s+")


def hex_encode(text: str) -> str:
    """Hex-encode the UTF-8 bytes of the text."""
    return text.encode("utf-8").hex()


def hex_decode(text: str) -> str:
    """Decode hex digits back to a UTF-8 string."""
    return bytes.fromhex(_WHITESPACE.sub("", text)).decode("utf-8")


def base64_encode(text: str) -> str:
    """Base64-encode the clipboard text (UTF-8)."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def base64_decode(text: str) -> str:
    """Base64-decode the text back to a UTF-8 string (standard or url-safe)."""
    data = _WHITESPACE.sub("", text).replace("-", "+").replace("_", "/")
    data += "=" * (-len(data) % 4)
    raw = base64.b64decode(data.encode("ascii"), validate=True)
    return raw.decode("utf-8")
