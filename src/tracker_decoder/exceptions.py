"""Exception types raised while decoding tracker packets.

Every error derives from :class:`DecodeError`, itself a ``ValueError``,
so callers can catch the whole family or a single failure kind.
"""

from __future__ import annotations


class DecodeError(ValueError):
    """Base exception for all packet decoding errors."""


class FrameError(DecodeError):
    """Packet envelope is malformed or too short for the identifier."""


class EncodingError(DecodeError):
    """Hex text has an odd length or contains non-hex characters."""


class KeyLengthError(DecodeError):
    """Cipher key is not exactly 16 bytes."""

    def __init__(self, length: int) -> None:
        super().__init__(f"Key size must be 128 bits (16 bytes), got {length} bytes")
        self.length = length


class BlockError(DecodeError):
    """Cipher input block is not exactly 8 bytes."""

    def __init__(self, length: int) -> None:
        super().__init__(f"Block size must be 64 bits (8 bytes), got {length} bytes")
        self.length = length


class ChecksumError(DecodeError):
    """Decrypted output is shorter than the trailing checksum."""
