#!/usr/bin/env python3
"""
JSON <-> form (query string) conversion with nested bracket keys.

    {"a": {"b": 1}, "c": [true, null]}  <->  a%5Bb%5D=1&c%5B0%5D=true&c%5B1%5D=

Encoding follows the common Node "qs" conventions: nested objects become
a[b], arrays become a[0], a[1]..., null becomes an empty value, empty
objects/arrays are skipped and brackets are percent-encoded. Decoding accepts
a[b], a[] and a[0] forms, '+' as space, and repeated plain keys as arrays.
"""
import json
import re
from urllib.parse import quote, unquote_plus

from .json_tools import load_json

# qs stops nesting after this many bracket levels; the rest stays literal
MAX_DEPTH = 5
# a[N] with N above this becomes an object key instead of an array index
ARRAY_LIMIT = 20

_KEY = re.compile(r"^([^\[\]]*)((?:\[[^\[\]]*\])*)$")
_SEGMENT = re.compile(r"\[([^\[\]]*)\]")


# ─── Encoding ─────────────────────────────────────────────────────────────────

def _scalar(value) -> str:
    if value is None:
        return ""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _flatten(prefix: str, value, out: list):
    if isinstance(value, dict):
        for key, child in value.items():
            _flatten(f"{prefix}[{key}]", child, out)
    elif isinstance(value, list):
        for i, child in enumerate(value):
            _flatten(f"{prefix}[{i}]", child, out)
    else:
        out.append((prefix, _scalar(value)))


def encode_form(data) -> str:
    """Encode a dict (or list) as a nested query string."""
    if isinstance(data, list):
        data = {str(i): v for i, v in enumerate(data)}
    if not isinstance(data, dict):
        return ""
    pairs = []
    for key, value in data.items():
        _flatten(str(key), value, pairs)
    return "&".join(f"{quote(k, safe='')}={quote(v, safe='')}" for k, v in pairs)


# ─── Decoding ─────────────────────────────────────────────────────────────────

def _split_key(key: str) -> list:
    m = _KEY.match(key)
    if not m or not m.group(1) and not m.group(2):
        return [key]
    if not m.group(1):
        # "[a]=1" has no parent; qs uses the first segment as the key
        segments = _SEGMENT.findall(m.group(2))
        head, rest = segments[0], segments[1:]
    else:
        head, rest = m.group(1), _SEGMENT.findall(m.group(2))
    if len(rest) > MAX_DEPTH:
        tail = "".join(f"[{s}]" for s in rest[MAX_DEPTH:])
        rest = rest[:MAX_DEPTH] + [tail]
    return [head] + rest


def _child_key(node: dict, segment: str):
    if segment == "":
        return sum(1 for k in node if isinstance(k, int))
    if segment.isdigit() and int(segment) <= ARRAY_LIMIT and str(int(segment)) == segment:
        return int(segment)
    return segment


def _assign(node: dict, path: list, value: str):
    head, rest = path[0], path[1:]
    if not rest:
        if head in node:
            existing = node[head]
            if isinstance(existing, list):
                existing.append(value)
            elif isinstance(existing, dict):
                existing[sum(1 for k in existing if isinstance(k, int))] = value
            else:
                node[head] = [existing, value]
        else:
            node[head] = value
        return

    child = node.get(head)
    if isinstance(child, list):
        child = {i: v for i, v in enumerate(child)}
    elif not isinstance(child, dict):
        child = {} if child is None else {0: child}
    node[head] = child
    _assign(child, [_child_key(child, rest[0])] + rest[1:], value)


def _finalize(node):
    if isinstance(node, list):
        return [_finalize(v) for v in node]
    if not isinstance(node, dict):
        return node
    if node and all(isinstance(k, int) for k in node):
        return [_finalize(node[k]) for k in sorted(node)]
    return {str(k): _finalize(v) for k, v in node.items()}


def decode_form(text: str) -> dict:
    """Decode a nested query string into a dict."""
    root = {}
    for part in text.split("&"):
        if not part:
            continue
        key, _, value = part.partition("=")
        key, value = unquote_plus(key), unquote_plus(value)
        if not key:
            continue
        _assign(root, _split_key(key), value)
    return _finalize(root)


# ─── Transforms ───────────────────────────────────────────────────────────────

def json_to_form(text: str) -> str:
    """Convert a JSON object to an x-www-form-urlencoded query string."""
    return encode_form(load_json(text.strip()))


def form_to_json(text: str) -> str:
    """Convert a query string to pretty-printed JSON."""
    return json.dumps(decode_form(text.strip()), indent=2, ensure_ascii=False)
