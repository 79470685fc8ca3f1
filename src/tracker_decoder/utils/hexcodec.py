"""Conversion between wire hex text and raw bytes."""

from __future__ import annotations

import string

from ..exceptions import EncodingError

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_bytes(text: str) -> bytes:
    """Decode hex text (either case) into bytes.

    Raises:
        EncodingError: If the length is odd or a character is not a hex digit.
    """
    if len(text) % 2:
        raise EncodingError(f"Hex text must have an even length, got {len(text)}")
    bad = next((c for c in text if c not in _HEX_DIGITS), None)
    if bad is not None:
        raise EncodingError(f"Invalid hex character {bad!r}")
    return bytes.fromhex(text)


def bytes_to_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex, two characters per byte."""
    return bytes(data).hex()
