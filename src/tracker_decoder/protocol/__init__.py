"""Protocol layer: envelope framing, byte-stuffing, and the decode pipeline."""

from .framing import strip_markers, read_identifier, trim_checksum
from .stuffing import destuff, stuff
from .decoder import decode, build_packet
