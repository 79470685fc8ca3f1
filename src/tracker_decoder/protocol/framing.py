"""Packet envelope: start/end markers, device identifier, trailing checksum.

Packet layout (hex text on the wire)::

    +--------+-------------+------------------------------------+--------+
    | Start  | Identifier  |   Stuffed, XTEA-encrypted payload  |  End   |
    | 0xC0   | 8 bytes LE  | (plaintext + 2-byte checksum)      | 0xC2   |
    +--------+-------------+------------------------------------+--------+

- Identifier: unsigned 64-bit device hardware ID (IMEI-like), little-endian
- Payload: byte-stuffed with sentinel 0xC4, see :mod:`.stuffing`
- Checksum: last 2 bytes of the decrypted payload, removed but not verified
"""

from __future__ import annotations

from ..exceptions import ChecksumError, FrameError

START_MARKER = 0xC0
END_MARKER = 0xC2
IDENTIFIER_SIZE = 8
CHECKSUM_SIZE = 2

_START_HEX = f"{START_MARKER:02x}"
_END_HEX = f"{END_MARKER:02x}"
_MAX_IDENTIFIER = (1 << (8 * IDENTIFIER_SIZE)) - 1


def strip_markers(packet: str) -> str:
    """Check the envelope markers and return the interior hex text.

    Raises:
        FrameError: If the packet does not start with ``c0`` and end with ``c2``.
    """
    text = packet.lower()
    if len(text) < 4 or not (text.startswith(_START_HEX) and text.endswith(_END_HEX)):
        raise FrameError("Missing start/end packet identifier")
    return text[2:-2]


def add_markers(interior: str) -> str:
    """Wrap interior hex text in the start/end markers."""
    return _START_HEX + interior.lower() + _END_HEX


def read_identifier(data: bytes) -> tuple[int, bytes]:
    """Split the device identifier off the front of the packet body.

    Returns:
        The little-endian identifier and the remaining (stuffed) bytes.

    Raises:
        FrameError: If fewer than 8 bytes are available.
    """
    if len(data) < IDENTIFIER_SIZE:
        raise FrameError(
            f"Packet too short for the {IDENTIFIER_SIZE}-byte identifier: "
            f"{len(data)} bytes"
        )
    identifier = int.from_bytes(data[:IDENTIFIER_SIZE], "little")
    return identifier, bytes(data[IDENTIFIER_SIZE:])


def write_identifier(identifier: int) -> bytes:
    """Serialize a device identifier as 8 little-endian bytes."""
    if not 0 <= identifier <= _MAX_IDENTIFIER:
        raise FrameError(f"Identifier must fit in 64 bits, got {identifier}")
    return identifier.to_bytes(IDENTIFIER_SIZE, "little")


def trim_checksum(plaintext_hex: str) -> tuple[str, str]:
    """Drop the trailing checksum from decrypted hex text.

    The checksum is only removed, never checked.

    Returns:
        ``(payload_hex, checksum_hex)``.

    Raises:
        ChecksumError: If fewer than 4 hex characters are present.
    """
    width = CHECKSUM_SIZE * 2
    if len(plaintext_hex) < width:
        raise ChecksumError(
            f"Decrypted payload too short for the {CHECKSUM_SIZE}-byte checksum: "
            f"{len(plaintext_hex) // 2} bytes"
        )
    return plaintext_hex[:-width], plaintext_hex[-width:]
