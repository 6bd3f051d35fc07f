#!/usr/bin/env python3
"""
words.py — word splitting and case conversion transforms.

split_into_words() is the shared tokenizer: it breaks any string into word
tokens on separators, camelCase humps, digit/letter transitions and the end
of an acronym run. Every case conversion except plain lower/UPPER works on
its tokens.

    split_into_words("fooBarBAZ_qux-quux") -> ["foo", "Bar", "BAZ", "qux", "quux"]
    split_into_words("HTTPServer2go")      -> ["HTTP", "Server", "2", "go"]
"""

# Character classes used by the scanner
_SEP, _LOWER, _UPPER, _DIGIT = range(4)


def _kind(ch: str) -> int:
    if ch.isdigit():
        return _DIGIT
    if ch.isalpha():
        return _UPPER if ch.isupper() else _LOWER
    return _SEP


def split_into_words(text: str) -> list:
    """Split text into case- and boundary-aware word tokens."""
    words = []
    current = []
    kinds = [_kind(ch) for ch in text]

    for i, ch in enumerate(text):
        kind = kinds[i]
        if kind == _SEP:
            if current:
                words.append("".join(current))
                current = []
            continue

        if current:
            prev = kinds[i - 1]
            nxt = kinds[i + 1] if i + 1 < len(text) else _SEP
            boundary = (
                (prev == _DIGIT) != (kind == _DIGIT)
                or (prev == _LOWER and kind == _UPPER)
                or (prev == _UPPER and kind == _UPPER and nxt == _LOWER)
            )
            if boundary:
                words.append("".join(current))
                current = []

        current.append(ch)

    if current:
        words.append("".join(current))
    return words


def capitalize(word: str) -> str:
    """Uppercase the first character, leave the rest as-is."""
    return word[:1].upper() + word[1:]


def _words(text: str) -> list:
    return split_into_words(text.strip())


# ─── Joined forms ─────────────────────────────────────────────────────────────

def camel_case(text: str) -> str:
    """Join words as camelCase."""
    words = _words(text)
    return "".join(
        w.lower() if i == 0 else capitalize(w) for i, w in enumerate(words)
    )


def pascal_case(text: str) -> str:
    """Join words as PascalCase."""
    return "".join(capitalize(w) for w in _words(text))


def lower_kebab_case(text: str) -> str:
    """Join lowercased words with hyphens."""
    return "-".join(w.lower() for w in _words(text))


def upper_kebab_case(text: str) -> str:
    """Join uppercased words with hyphens."""
    return "-".join(w.upper() for w in _words(text))


def lower_snake_case(text: str) -> str:
    """Join lowercased words with underscores."""
    return "_".join(w.lower() for w in _words(text))


def upper_snake_case(text: str) -> str:
    """Join uppercased words with underscores."""
    return "_".join(w.upper() for w in _words(text))


def dot_case(text: str) -> str:
    """Join lowercased words with dots."""
    return ".".join(w.lower() for w in _words(text))


# ─── Whole text ───────────────────────────────────────────────────────────────

def lowercase(text: str) -> str:
    """Convert all text to lowercase."""
    return text.lower()


def uppercase(text: str) -> str:
    """Convert all text to UPPERCASE."""
    return text.upper()


# ─── Space separated ──────────────────────────────────────────────────────────

def words_lowercase(text: str) -> str:
    """Lowercase every word, separated by single spaces."""
    return " ".join(w.lower() for w in _words(text))


def first_word_capitalized(text: str) -> str:
    """Capitalise the first word only, separated by single spaces."""
    words = _words(text)
    return " ".join(capitalize(w) if i == 0 else w for i, w in enumerate(words))


def words_capitalized(text: str) -> str:
    """Capitalise every word, separated by single spaces."""
    return " ".join(capitalize(w) for w in _words(text))


def fuzzy_search_regex(text: str) -> str:
    """Build a regex matching the words in order with anything between them."""
    return ".*".join(_words(text))
