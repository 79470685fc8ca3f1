"""Tests for the XTEA block cipher."""

import pytest

from tracker_decoder.crypto.xtea import (
    BLOCK_SIZE,
    decrypt,
    decrypt_block,
    encrypt,
    encrypt_block,
)
from tracker_decoder.exceptions import BlockError, KeyLengthError

KEY = b"0123456789abcdef"


def _swap_words(data: bytes) -> bytes:
    """Reverse the byte order of each 32-bit word."""
    return b"".join(data[i : i + 4][::-1] for i in range(0, len(data), 4))


def test_known_vector():
    """Reference XTEA vector (big-endian words) holds after word swapping."""
    key = _swap_words(bytes.fromhex("000102030405060708090a0b0c0d0e0f"))
    plaintext = _swap_words(bytes.fromhex("4142434445464748"))
    ciphertext = _swap_words(bytes.fromhex("497df3d072612cb5"))
    assert encrypt_block(key, plaintext) == ciphertext
    assert decrypt_block(key, ciphertext) == plaintext


def test_known_vector_zero_key():
    """All-zero key and block encrypt to the reference ciphertext."""
    ciphertext = _swap_words(bytes.fromhex("dee9d4d8f7131ed9"))
    assert encrypt_block(b"\x00" * 16, b"\x00" * 8) == ciphertext
    assert decrypt_block(b"\x00" * 16, ciphertext) == b"\x00" * 8


@pytest.mark.parametrize(
    "block",
    [
        b"\x00" * 8,
        b"\xff" * 8,
        bytes(range(8)),
        bytes.fromhex("c4c0c2c4deadbeef"),
    ],
)
def test_block_roundtrip(block):
    """Decrypting an encrypted block restores it."""
    assert decrypt_block(KEY, encrypt_block(KEY, block)) == block


def test_encrypt_changes_block():
    """Encryption should not be the identity."""
    block = b"tracker!"
    assert encrypt_block(KEY, block) != block


def test_key_changes_output():
    """Different keys should produce different ciphertext."""
    block = b"tracker!"
    assert encrypt_block(KEY, block) != encrypt_block(b"fedcba9876543210", block)


def test_rounds_parameter():
    """Round count is part of the cipher."""
    block = b"tracker!"
    assert encrypt_block(KEY, block, rounds=16) != encrypt_block(KEY, block)
    assert decrypt_block(KEY, encrypt_block(KEY, block, rounds=16), rounds=16) == block


def test_zero_rounds_rejected():
    """Zero rounds is not a valid cipher configuration."""
    with pytest.raises(ValueError):
        decrypt_block(KEY, b"\x00" * 8, rounds=0)


def test_short_key():
    """A 15-byte key is rejected."""
    with pytest.raises(KeyLengthError):
        decrypt_block(KEY[:15], b"\x00" * 8)


def test_long_key():
    """A 17-byte key is rejected."""
    with pytest.raises(KeyLengthError):
        encrypt_block(KEY + b"x", b"\x00" * 8)


@pytest.mark.parametrize("size", [0, 7, 9])
def test_bad_block_size(size):
    """Only exactly 8-byte blocks are accepted."""
    with pytest.raises(BlockError):
        decrypt_block(KEY, b"\x00" * size)


def test_decrypt_blocks_independently():
    """Each block is decrypted standalone and output keeps input order."""
    first = encrypt_block(KEY, b"AAAAAAAA")
    second = encrypt_block(KEY, b"BBBBBBBB")
    assert decrypt(KEY, first + second + first) == b"AAAAAAAABBBBBBBBAAAAAAAA"


def test_multi_block_roundtrip():
    """Several blocks survive encrypt then decrypt."""
    data = bytes(range(4 * BLOCK_SIZE))
    assert decrypt(KEY, encrypt(KEY, data)) == data


def test_decrypt_empty():
    """No input blocks means no output."""
    assert decrypt(KEY, b"") == b""


def test_decrypt_partial_final_block():
    """A trailing partial block is reported, not padded."""
    with pytest.raises(BlockError):
        decrypt(KEY, b"\x00" * 12)


def test_decrypt_empty_checks_key():
    """The key is checked even with no data."""
    with pytest.raises(KeyLengthError):
        decrypt(b"short", b"")
