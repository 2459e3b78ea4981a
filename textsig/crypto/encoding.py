# MIT License © 2025 Motohiro Suzuki
"""
textsig/crypto/encoding.py

Text-safe signature form: URL-safe base64 without "=" padding.

Decoding is strict:
- "=" padding is rejected
- only [A-Za-z0-9_-] is accepted
- non-canonical trailing bits are rejected (encode(decode(s)) must equal s)
"""

from __future__ import annotations

import base64
import binascii
import re

from textsig.errors import DecodeError

_URLSAFE_RE = re.compile(r"^[A-Za-z0-9_-]*$")


def encode_signature(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def decode_signature(text: str) -> bytes:
    s = text.strip()
    if not _URLSAFE_RE.match(s):
        raise DecodeError("signature is not URL-safe base64 without padding")
    if len(s) % 4 == 1:
        raise DecodeError(f"invalid base64 length: {len(s)}")

    try:
        raw = base64.urlsafe_b64decode(s + "=" * (-len(s) % 4))
    except (binascii.Error, ValueError) as e:
        raise DecodeError("signature is not valid base64") from e

    if encode_signature(raw) != s:
        raise DecodeError("signature has non-canonical trailing bits")
    return raw
