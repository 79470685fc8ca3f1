"""MCP server entry point for the tracker packet decoder.

Exposes the decode pipeline as tools via the Model Context Protocol
using the official Python MCP SDK with stdio transport.
"""

from __future__ import annotations

import logging
import os
from typing import Any

from mcp.server.fastmcp import FastMCP

from .exceptions import DecodeError
from .protocol import decoder
from .utils.hexcodec import hex_to_bytes

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "TRACKER_DECODER_LOG_LEVEL"

mcp = FastMCP(
    "tracker-decoder",
    instructions="MCP server for decoding XTEA-encrypted tracker telemetry packets",
)


# ─── DECODER TOOLS ───────────────────────────────────────────────────

@mcp.tool()
def decode_packet(packet_hex: str, crypto_key: str) -> dict[str, Any]:
    """Decode a tracker packet into its device identifier and payload.

    Args:
        packet_hex: Full wire packet as hex text, starting with c0 and ending with c2.
        crypto_key: 16-character XTEA key (text, not hex).
    """
    try:
        frame = decoder.decode(packet_hex, crypto_key)
    except DecodeError as e:
        logger.warning("Decode failed (%s): %s", type(e).__name__, e)
        return {"error": str(e), "kind": type(e).__name__}
    return frame.to_dict()


@mcp.tool()
def build_packet(
    identifier: int,
    payload_hex: str,
    crypto_key: str,
    checksum_hex: str = "0000",
) -> dict[str, Any]:
    """Build a wire packet for a device identifier and cleartext payload.

    The payload plus the 2-byte checksum must be a multiple of 8 bytes.

    Args:
        identifier: Device identifier (unsigned 64-bit).
        payload_hex: Cleartext payload as hex text.
        crypto_key: 16-character XTEA key (text, not hex).
        checksum_hex: 2-byte checksum as hex text (default 0000).
    """
    try:
        checksum = hex_to_bytes(checksum_hex)
        packet = decoder.build_packet(identifier, payload_hex, crypto_key, checksum)
    except DecodeError as e:
        logger.warning("Build failed (%s): %s", type(e).__name__, e)
        return {"error": str(e), "kind": type(e).__name__}
    return {"identifier": identifier, "packet": packet}


# ─── ENTRY POINT ─────────────────────────────────────────────────────

def main():
    """Run the MCP server with stdio transport."""
    logging.basicConfig(level=os.environ.get(LOG_LEVEL_ENV, "INFO").upper())
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
