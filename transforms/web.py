#!/usr/bin/env python3
"""
Web encodings: percent-encoding, HTML entities and URL breakdown.

URL encoding mirrors encodeURIComponent: everything but the unreserved
characters and  ! ~ * ' ( )  is percent-encoded. Decoding is strict, a stray
'%' or an invalid UTF-8 sequence raises ValueError.
"""
import html
import json
import re
from urllib.parse import parse_qsl, quote, unquote_to_bytes, urlsplit

_URI_COMPONENT_SAFE = "!~*'()"
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
})

# Schemes with a host and a default port, as browsers treat them
SPECIAL_SCHEMES = {
    "http":  80,
    "https": 443,
    "ws":    80,
    "wss":   443,
    "ftp":   21,
    "file":  None,
}


def url_encode(text: str) -> str:
    """Percent-encode (URL-encode) the text as a URI component."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def url_decode(text: str) -> str:
    """Decode a percent-encoded (URL-encoded) string back to plain text."""
    bad = _BAD_PERCENT.search(text)
    if bad:
        raise ValueError(f"malformed percent-escape at offset {bad.start()}")
    return unquote_to_bytes(text).decode("utf-8")


def html_encode(text: str) -> str:
    """Escape HTML special characters as entities."""
    return text.translate(_HTML_ESCAPES)


def html_decode(text: str) -> str:
    """Decode named and numeric HTML entities."""
    return html.unescape(text)


# ─── URL breakdown ────────────────────────────────────────────────────────────

def parse_url(text: str) -> str:
    """Break a URL into its components as pretty-printed JSON."""
    parts = urlsplit(text.strip())
    scheme = parts.scheme.lower()
    if not scheme:
        raise ValueError("URL has no scheme")

    special = scheme in SPECIAL_SCHEMES
    hostname = (parts.hostname or "").lower()
    if special and scheme != "file" and not hostname:
        raise ValueError("URL has no host")

    # .port raises ValueError for out-of-range or non-numeric ports
    port = parts.port
    if port is None or port == SPECIAL_SCHEMES.get(scheme):
        port = ""
    else:
        port = str(port)

    if ":" in hostname:
        hostname = f"[{hostname}]"
    host = f"{hostname}:{port}" if port else hostname

    pathname = parts.path
    if special and not pathname:
        pathname = "/"

    search = f"?{parts.query}" if parts.query else ""
    fragment = f"#{parts.fragment}" if parts.fragment else ""
    protocol = f"{scheme}:"

    username = parts.username or ""
    password = parts.password or ""
    userinfo = ""
    if username or password:
        userinfo = username + (f":{password}" if password else "") + "@"

    if parts.netloc or special:
        href = f"{protocol}//{userinfo}{host}{pathname}{search}{fragment}"
    else:
        href = f"{protocol}{pathname}{search}{fragment}"

    if special and scheme != "file":
        origin = f"{protocol}//{host}"
    else:
        origin = "null"

    pairs = parse_qsl(parts.query, keep_blank_values=True)
    search_params = {}
    search_all_params = {}
    for key, value in pairs:
        search_params[key] = value
        search_all_params.setdefault(key, []).append(value)

    return json.dumps(
        {
            "href":            href,
            "origin":          origin,
            "protocol":        protocol,
            "username":        username,
            "password":        password,
            "host":            host,
            "port":            port,
            "hostname":        hostname,
            "pathname":        pathname,
            "search":          search,
            "searchParams":    search_params,
            "searchAllParams": search_all_params,
            "hash":            fragment,
        },
        indent=2,
        ensure_ascii=False,
    )
