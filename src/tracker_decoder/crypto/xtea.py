"""XTEA block cipher with little-endian word layout.

Key and block bytes are read as little-endian 32-bit words
(``k[0..3]`` and ``v0, v1``). Blocks are processed independently,
without chaining or IV.
"""

from __future__ import annotations

import struct

from ..exceptions import BlockError, KeyLengthError

BLOCK_SIZE = 8
KEY_SIZE = 16
DELTA = 0x9E3779B9
DEFAULT_ROUNDS = 32
MASK32 = 0xFFFFFFFF

_KEY = struct.Struct("<4I")
_BLOCK = struct.Struct("<2I")


def _key_words(key: bytes) -> tuple[int, int, int, int]:
    if len(key) != KEY_SIZE:
        raise KeyLengthError(len(key))
    return _KEY.unpack(key)


def _check_rounds(rounds: int) -> None:
    if rounds < 1:
        raise ValueError(f"Rounds must be a positive integer, got {rounds}")


def _decrypt_words(k, v0: int, v1: int, rounds: int) -> tuple[int, int]:
    total = (DELTA * rounds) & MASK32
    for _ in range(rounds):
        v1 = (v1 - ((((v0 << 4) ^ (v0 >> 5)) + v0) ^ (total + k[(total >> 11) & 3]))) & MASK32
        total = (total - DELTA) & MASK32
        v0 = (v0 - ((((v1 << 4) ^ (v1 >> 5)) + v1) ^ (total + k[total & 3]))) & MASK32
    return v0, v1


def _encrypt_words(k, v0: int, v1: int, rounds: int) -> tuple[int, int]:
    total = 0
    for _ in range(rounds):
        v0 = (v0 + ((((v1 << 4) ^ (v1 >> 5)) + v1) ^ (total + k[total & 3]))) & MASK32
        total = (total + DELTA) & MASK32
        v1 = (v1 + ((((v0 << 4) ^ (v0 >> 5)) + v0) ^ (total + k[(total >> 11) & 3]))) & MASK32
    return v0, v1


def decrypt_block(key: bytes, block: bytes, rounds: int = DEFAULT_ROUNDS) -> bytes:
    """Decrypt a single 8-byte block.

    Args:
        key: 16-byte cipher key.
        block: 8-byte ciphertext block.
        rounds: Number of XTEA cycles (32 on the wire).

    Raises:
        KeyLengthError: If the key is not 16 bytes.
        BlockError: If the block is not 8 bytes.
    """
    k = _key_words(key)
    if len(block) != BLOCK_SIZE:
        raise BlockError(len(block))
    _check_rounds(rounds)
    return _BLOCK.pack(*_decrypt_words(k, *_BLOCK.unpack(block), rounds))


def encrypt_block(key: bytes, block: bytes, rounds: int = DEFAULT_ROUNDS) -> bytes:
    """Encrypt a single 8-byte block; the inverse of :func:`decrypt_block`."""
    k = _key_words(key)
    if len(block) != BLOCK_SIZE:
        raise BlockError(len(block))
    _check_rounds(rounds)
    return _BLOCK.pack(*_encrypt_words(k, *_BLOCK.unpack(block), rounds))


def _chunks(data: bytes):
    for offset in range(0, len(data), BLOCK_SIZE):
        yield data[offset : offset + BLOCK_SIZE]


def decrypt(key: bytes, data: bytes, rounds: int = DEFAULT_ROUNDS) -> bytes:
    """Decrypt consecutive 8-byte blocks and concatenate them in order.

    A trailing partial block is not padded; it raises :class:`BlockError`.
    """
    _key_words(key)
    return b"".join(decrypt_block(key, chunk, rounds) for chunk in _chunks(data))


def encrypt(key: bytes, data: bytes, rounds: int = DEFAULT_ROUNDS) -> bytes:
    """Encrypt consecutive 8-byte blocks and concatenate them in order."""
    _key_words(key)
    return b"".join(encrypt_block(key, chunk, rounds) for chunk in _chunks(data))
