#!/usr/bin/env python3
"""
manipulations.py — the ordered transform catalog and the runner.

Every catalog entry is a registry dict:

    {name, label, description, fn}

fn(text: str) -> str | None. Returning None (or "") means "no meaningful
result"; raising means the input did not fit. manipulate_string() runs every
entry over the same text and always returns one Result per entry, in catalog
order, with failures turned into an empty value.

The catalog order is the display order.
"""
import traceback
from typing import Callable, NamedTuple, Optional

from transforms import (
    encoding,
    form,
    hashing,
    json_tools,
    jwt_tools,
    number_base,
    timestamps,
    web,
    words,
)


class Result(NamedTuple):
    label: str
    value: str


def raw(text: str) -> str:
    """Return the clipboard text unchanged."""
    return text


def describe(fn: Callable) -> str:
    """First non-blank line of fn's docstring, used as its description."""
    doc = (fn.__doc__ or "").strip() or "No description."
    return next((ln.strip() for ln in doc.splitlines() if ln.strip()), doc)


def _entry(label: str, fn: Callable) -> dict:
    return {
        "name":        fn.__name__,
        "label":       label,
        "description": describe(fn),
        "fn":          fn,
    }


# ─── Catalog ──────────────────────────────────────────────────────────────────

MANIPULATIONS = [
    _entry("Raw",                                       raw),
    _entry("Hex encoding",                              encoding.hex_encode),
    _entry("Hex decoding",                              encoding.hex_decode),
    _entry("Base64 encoding",                           encoding.base64_encode),
    _entry("Base64 decoding",                           encoding.base64_decode),
    _entry("URL encoding",                              web.url_encode),
    _entry("URL decoding",                              web.url_decode),
    _entry("HTML encoding",                             web.html_encode),
    _entry("HTML decoding",                             web.html_decode),
    _entry("Parse URL",                                 web.parse_url),
    _entry("Convert UNIX timestamp (sec) to ISO 8601",  timestamps.unix_sec_to_iso),
    _entry("Convert ISO 8601 to UNIX timestamp (sec)",  timestamps.iso_to_unix_sec),
    _entry("Convert UNIX timestamp (ms) to ISO 8601",   timestamps.unix_ms_to_iso),
    _entry("Convert ISO 8601 to UNIX timestamp (ms)",   timestamps.iso_to_unix_ms),
    _entry("Convert duration from now",                 timestamps.duration_from_now),
    _entry("Prettify JSON",                             json_tools.json_pretty),
    _entry("Minify JSON",                               json_tools.json_minify),
    _entry("Escape as JSON string",                     json_tools.json_escape),
    _entry("Convert JSON to form",                      form.json_to_form),
    _entry("Convert form to JSON",                      form.form_to_json),
    _entry("Extract JWT",                               jwt_tools.extract_jwt),
    _entry("Extract and Decode JWT",                    jwt_tools.extract_and_decode_jwt),
    _entry("Calculate md5",                             hashing.md5),
    _entry("Calculate sha1",                            hashing.sha1),
    _entry("Calculate sha256",                          hashing.sha256),
    _entry("Convert camelCase",                         words.camel_case),
    _entry("Convert PascalCase",                        words.pascal_case),
    _entry("Convert lower-kebab-case",                  words.lower_kebab_case),
    _entry("Convert UPPER-KEBAB-CASE",                  words.upper_kebab_case),
    _entry("Convert lower_snake_case",                  words.lower_snake_case),
    _entry("Convert UPPER_SNAKE_CASE",                  words.upper_snake_case),
    _entry("Convert dot.case",                          words.dot_case),
    _entry("Convert lowercase",                         words.lowercase),
    _entry("Convert UPPERCASE",                         words.uppercase),
    _entry("Convert words lowercase",                   words.words_lowercase),
    _entry("Convert First word capitalized",            words.first_word_capitalized),
    _entry("Convert Words Capitalized",                 words.words_capitalized),
    _entry("Generate fuzzy search regex",               words.fuzzy_search_regex),
    _entry("Hex(16) to Decimal(10)",                    number_base.hex_to_decimal),
    _entry("Hex(16) to Binary(2)",                      number_base.hex_to_binary),
    _entry("Decimal(10) to Hex(16)",                    number_base.decimal_to_hex),
    _entry("Decimal(10) to Binary(2)",                  number_base.decimal_to_binary),
    _entry("Binary(2) to Hex(16)",                      number_base.binary_to_hex),
    _entry("Binary(2) to Decimal(10)",                  number_base.binary_to_decimal),
]


def get_manipulation(key: str) -> Optional[dict]:
    """Look up a catalog entry by label or name (case-insensitive)."""
    key = key.strip().casefold()
    return next(
        (m for m in MANIPULATIONS
         if m["label"].casefold() == key or m["name"].casefold() == key),
        None,
    )


# ─── Runner ───────────────────────────────────────────────────────────────────

def apply(entry: dict, text: str, log: Optional[Callable] = None) -> str:
    """
    Run a single catalog entry. Never raises: failures and None become "".
    log, when given, is called as log(message, tag, transform_name).
    """
    try:
        value = entry["fn"](text)
    except Exception as exc:
        if log:
            log(f"✗ [{entry['label']}] {type(exc).__name__}: {exc}", "err", entry["name"])
            log(traceback.format_exc(), "debug", entry["name"])
        return ""

    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)
    return value


def manipulate_string(text: str, log: Optional[Callable] = None) -> list:
    """Apply every catalog entry to text; one Result per entry, catalog order."""
    return [
        Result(entry["label"], apply(entry, text, log))
        for entry in MANIPULATIONS
    ]
