"""Full packet decode pipeline and its inverse.

Decoding runs strictly forward::

    hex text -> strip markers -> bytes -> identifier + stuffed body
             -> destuff -> XTEA decrypt -> trim checksum -> DecodedFrame

Each call is stateless; nothing is shared between invocations.
"""

from __future__ import annotations

import logging

from ..crypto.xtea import BLOCK_SIZE, DEFAULT_ROUNDS, KEY_SIZE, decrypt, encrypt
from ..exceptions import BlockError, ChecksumError, KeyLengthError
from ..models.frame import DecodedFrame
from ..utils.hexcodec import bytes_to_hex, hex_to_bytes
from .framing import (
    CHECKSUM_SIZE,
    add_markers,
    read_identifier,
    strip_markers,
    trim_checksum,
    write_identifier,
)
from .stuffing import destuff, stuff

logger = logging.getLogger(__name__)


def key_bytes(crypto_key: str | bytes) -> bytes:
    """Return the raw 16-byte key for a text or bytes key.

    Text keys are UTF-8 encoded, not hex-decoded.

    Raises:
        TypeError: If the key is neither text nor bytes.
        KeyLengthError: If the encoded key is not 16 bytes.
    """
    if isinstance(crypto_key, str):
        key = crypto_key.encode("utf-8")
    elif isinstance(crypto_key, (bytes, bytearray)):
        key = bytes(crypto_key)
    else:
        raise TypeError(f"Key must be str or bytes, got {type(crypto_key).__name__}")
    if len(key) != KEY_SIZE:
        raise KeyLengthError(len(key))
    return key


def decode(
    input_hex: str,
    crypto_key: str | bytes,
    rounds: int = DEFAULT_ROUNDS,
) -> DecodedFrame:
    """Decode one wire packet into its identifier and cleartext payload.

    Args:
        input_hex: Full packet as hex text, ``c0`` ... ``c2``.
        crypto_key: 16-byte XTEA key, as text or bytes.
        rounds: XTEA cycles.

    Raises:
        FrameError: Missing markers or no room for the identifier.
        EncodingError: Malformed hex text.
        KeyLengthError: Key is not 16 bytes.
        BlockError: De-stuffed payload is not a whole number of 8-byte blocks.
        ChecksumError: Decrypted payload is shorter than the checksum.
    """
    interior = strip_markers(input_hex)
    identifier, stuffed = read_identifier(hex_to_bytes(interior))
    key = key_bytes(crypto_key)

    payload = destuff(stuffed)
    logger.debug(
        "Packet %d: %d stuffed bytes, %d after destuffing",
        identifier,
        len(stuffed),
        len(payload),
    )

    plaintext_hex = bytes_to_hex(decrypt(key, payload, rounds))
    payload_hex, checksum_hex = trim_checksum(plaintext_hex)
    return DecodedFrame(identifier=identifier, payload=payload_hex, checksum=checksum_hex)


def build_packet(
    identifier: int,
    plaintext: bytes | str,
    crypto_key: str | bytes,
    checksum: bytes = b"\x00" * CHECKSUM_SIZE,
    rounds: int = DEFAULT_ROUNDS,
) -> str:
    """Build the wire hex for a packet that :func:`decode` restores.

    Args:
        identifier: Device identifier (unsigned 64-bit).
        plaintext: Cleartext payload, as bytes or hex text.
        crypto_key: 16-byte XTEA key, as text or bytes.
        checksum: Trailing checksum bytes appended before encryption.
        rounds: XTEA cycles.

    Raises:
        BlockError: If plaintext plus checksum is not a multiple of 8 bytes.
        ChecksumError: If the checksum is not 2 bytes.
    """
    if isinstance(plaintext, str):
        plaintext = hex_to_bytes(plaintext)
    if len(checksum) != CHECKSUM_SIZE:
        raise ChecksumError(f"Checksum must be {CHECKSUM_SIZE} bytes, got {len(checksum)}")
    key = key_bytes(crypto_key)

    body = bytes(plaintext) + bytes(checksum)
    if len(body) % BLOCK_SIZE:
        raise BlockError(len(body) % BLOCK_SIZE)

    stuffed = stuff(encrypt(key, body, rounds))
    return add_markers(bytes_to_hex(write_identifier(identifier) + stuffed))
