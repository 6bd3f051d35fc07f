#!/usr/bin/env python3
"""
Integer conversions between hexadecimal, decimal and binary.

Input is read like JavaScript's parseInt(text, base): leading/trailing
whitespace is ignored, a sign is allowed, hex may carry a 0x prefix and
parsing stops at the first character that is not a digit of the base.
Spaces inside binary input are removed first so grouped output can be
pasted straight back in. Unparseable input gives an empty string.

Binary output is split into 8-character groups from the left:

    decimal_to_binary("300") -> "10010110 0"
"""
import re

_DIGITS = {
    2:  "01",
    10: "0123456789",
    16: "0123456789abcdefABCDEF",
}


def parse_int(text: str, base: int):
    """Parse the leading integer of text in the given base, or None."""
    text = text.strip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if base == 16 and text[:2] in ("0x", "0X"):
        text = text[2:]
    m = re.match(f"[{_DIGITS[base]}]+", text)
    if not m:
        return None
    return sign * int(m.group(0), base)


def format_binary(digits: str) -> str:
    """Group a binary digit string into space-separated 8-character windows."""
    return " ".join(digits[i:i + 8] for i in range(0, len(digits), 8))


def to_base(n: int, base: int) -> str:
    sign = "-" if n < 0 else ""
    n = abs(n)
    if base == 2:
        return sign + format(n, "b")
    if base == 16:
        return sign + format(n, "x")
    return sign + str(n)


def _convert(text: str, src: int, dst: int) -> str:
    if src == 2:
        text = text.strip().replace(" ", "")
    n = parse_int(text, src)
    if n is None:
        return ""
    out = to_base(n, dst)
    return format_binary(out) if dst == 2 else out


def hex_to_decimal(text: str) -> str:
    """Hexadecimal integer to decimal."""
    return _convert(text, 16, 10)


def hex_to_binary(text: str) -> str:
    """Hexadecimal integer to binary, grouped in bytes."""
    return _convert(text, 16, 2)


def decimal_to_hex(text: str) -> str:
    """Decimal integer to hexadecimal."""
    return _convert(text, 10, 16)


def decimal_to_binary(text: str) -> str:
    """Decimal integer to binary, grouped in bytes."""
    return _convert(text, 10, 2)


def binary_to_hex(text: str) -> str:
    """Binary integer to hexadecimal."""
    return _convert(text, 2, 16)


def binary_to_decimal(text: str) -> str:
    """Binary integer to decimal."""
    return _convert(text, 2, 10)
