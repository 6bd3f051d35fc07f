#!/usr/bin/env python3
"""
Message digests of the UTF-8 bytes of the clipboard text, hex-encoded.
"""
import hashlib


def _digest(name: str, text: str) -> str:
    return hashlib.new(name, text.encode("utf-8")).hexdigest()


def md5(text: str) -> str:
    """MD5 digest (hex) of the text."""
    return _digest("md5", text)


def sha1(text: str) -> str:
    """SHA-1 digest (hex) of the text."""
    return _digest("sha1", text)


def sha256(text: str) -> str:
    """SHA-256 digest (hex) of the text."""
    return _digest("sha256", text)
