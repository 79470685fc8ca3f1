"""Byte-stuffing with the 0xC4 sentinel.

On the wire a sentinel either doubles itself (``C4 C4`` is a literal
``C4``) or raises the following byte by one (``C4 C1`` is ``C0``), which
keeps the envelope markers out of the packet body.
"""

from __future__ import annotations

from .framing import END_MARKER, START_MARKER

STUFF_BYTE = 0xC4

# Bytes escaped as sentinel + (byte + 1)
_RAISED = frozenset({START_MARKER, END_MARKER})


def destuff(data: bytes) -> bytes:
    """Resolve escape sequences in a stuffed payload.

    Scans left to right with one byte of lookahead. A sentinel followed by
    a different byte is dropped and that byte is read as one less (mod 256);
    the lowered byte is then handled like any other, so it may act as a
    sentinel itself. A trailing sentinel is dropped.
    """
    out = bytearray()
    lower_next = False
    i = 0
    n = len(data)
    while i < n:
        byte = (data[i] - 1) & 0xFF if lower_next else data[i]
        lower_next = False
        if byte != STUFF_BYTE:
            out.append(byte)
            i += 1
            continue
        if i + 1 < n and data[i + 1] == STUFF_BYTE:
            out.append(STUFF_BYTE)
            i += 2
            continue
        lower_next = i + 1 < n
        i += 1
    return bytes(out)


def stuff(data: bytes) -> bytes:
    """Escape sentinel and marker bytes so :func:`destuff` restores ``data``."""
    out = bytearray()
    for byte in data:
        if byte == STUFF_BYTE:
            out += bytes([STUFF_BYTE, STUFF_BYTE])
        elif byte in _RAISED:
            out += bytes([STUFF_BYTE, byte + 1])
        else:
            out.append(byte)
    return bytes(out)
