#!/usr/bin/env python3
"""
JSON reformatting: pretty-print, minify and escape-as-string.

Input must be strict JSON; NaN / Infinity literals are rejected.
Numbers are written back the way a browser would: integral values lose
their fraction (1.0 -> 1, 1e5 -> 100000) below 1e21, and values too large
for a double become null.
"""
import json
import math


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON literal: {name}")


def _parse_float(literal: str):
    value = float(literal)
    if math.isinf(value):
        return None
    if value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


def load_json(text: str):
    """Parse strict JSON, raising ValueError on anything else."""
    return json.loads(text, parse_float=_parse_float, parse_constant=_reject_constant)


def json_pretty(text: str) -> str:
    """Pretty-print JSON with 2-space indentation and unicode preserved."""
    return json.dumps(load_json(text), indent=2, ensure_ascii=False)


def json_minify(text: str) -> str:
    """Minify JSON by removing all unnecessary whitespace."""
    return json.dumps(load_json(text), separators=(",", ":"), ensure_ascii=False)


def json_escape(text: str) -> str:
    """Quote the raw text as a single JSON string literal."""
    return json.dumps(text, ensure_ascii=False)
