"""Decoder for XTEA-encrypted, byte-stuffed tracker telemetry packets."""

from .exceptions import (
    DecodeError,
    FrameError,
    EncodingError,
    KeyLengthError,
    BlockError,
    ChecksumError,
)
from .models.frame import DecodedFrame
from .protocol.decoder import decode, build_packet

__version__ = "0.1.0"
