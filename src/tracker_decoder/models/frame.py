"""Decoded packet model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DecodedFrame:
    """Device identifier and cleartext payload recovered from one packet."""

    identifier: int
    payload: str  # lowercase hex, checksum removed
    checksum: str = ""  # removed trailing bytes, never verified

    @property
    def payload_bytes(self) -> bytes:
        return bytes.fromhex(self.payload)

    def to_dict(self) -> dict:
        return {
            "identifier": self.identifier,
            "payload": self.payload,
            "checksum": self.checksum,
        }

    def __repr__(self) -> str:
        return (
            f"DecodedFrame(identifier={self.identifier}, "
            f"payload={self.payload or '(empty)'}, "
            f"checksum={self.checksum or '(empty)'})"
        )
