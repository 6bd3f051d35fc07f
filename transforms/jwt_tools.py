#!/usr/bin/env python3
"""
Find JSON Web Tokens anywhere in the clipboard text and optionally decode
them. Handy when inspecting copied HTTP headers, logs or cookies.

Decoding uses PyJWT with every check switched off: signatures are not
verified and expired or not-yet-valid tokens still decode.
"""
import json
import re

import jwt

from .timestamps import from_unix_ms, to_iso8601

# header.payload.signature, both JSON parts start with '{"' -> "eyJ"
JWT_PATTERN = re.compile(r"eyJ[a-zA-Z0-9_-]+?\.eyJ[a-zA-Z0-9_-]+?\.[a-zA-Z0-9_-]*")

DATE_CLAIMS = ("iat", "nbf", "exp")

UNVERIFIED = {
    "verify_signature": False,
    "verify_exp":       False,
    "verify_nbf":       False,
    "verify_iat":       False,
    "verify_aud":       False,
    "verify_iss":       False,
    "verify_sub":       False,
    "verify_jti":       False,
}


def _claim_iso8601(value):
    # any truthy claim counts, numeric strings included ("1700000000")
    if not value or isinstance(value, (dict, list)):
        return None
    try:
        seconds = float(value)
    except ValueError:
        return None
    return to_iso8601(from_unix_ms(round(seconds * 1000)))


def decode_jwt(token: str) -> dict:
    """Decode a JWT into {header, payload, <claim>_iso8601..., signature}."""
    header = jwt.get_unverified_header(token)
    payload = jwt.decode(token, options=UNVERIFIED)

    decoded = {"header": header, "payload": payload}
    for claim in DATE_CLAIMS:
        iso = _claim_iso8601(payload.get(claim))
        if iso is not None:
            decoded[f"{claim}_iso8601"] = iso
    decoded["signature"] = token.rsplit(".", 1)[-1]
    return decoded


def extract_jwt(text: str):
    """Extract every JWT in the text, one per line."""
    matches = JWT_PATTERN.findall(text)
    if not matches:
        return None
    return "\n".join(matches)


def extract_and_decode_jwt(text: str) -> str:
    """Extract every JWT in the text and decode header and payload as JSON."""
    out = []
    for token in JWT_PATTERN.findall(text):
        try:
            decoded = decode_jwt(token)
        except (jwt.exceptions.InvalidTokenError, ValueError, OverflowError):
            out.append(token)
            continue
        out.append(json.dumps(decoded, indent=2, ensure_ascii=False))
    return "\n".join(out)
