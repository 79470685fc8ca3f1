"""Block cipher used for packet payloads."""

from .xtea import decrypt, decrypt_block, encrypt, encrypt_block
