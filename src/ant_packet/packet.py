"""ANT packet encoding/decoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from ant_packet.checksum import compute_checksum, validate_checksum
from ant_packet.constants import CHECKSUM_SIZE, HEADER_SIZE, MIN_FRAME_SIZE
from ant_packet.errors import ChecksumMismatchError, MinimumLengthError, TruncatedPayloadError

_HEADER_FORMAT = "<BBB"


@dataclass(frozen=True)
class Packet:
    """A single ANT frame.

    Wire layout (single-byte fields):
        Byte 0:                 sync (0xA4)
        Byte 1:                 message length N
        Byte 2:                 message id
        Bytes 3..3+N-1:         data bytes (LSB ordering by convention)
        Byte 3+N:               checksum, XOR of all previous bytes including sync
    """

    sync: int
    length: int
    id: int
    data: bytes
    checksum: int

    def __repr__(self) -> str:
        return (
            f"Packet(sync=0x{self.sync:02X}, length={self.length}, id=0x{self.id:02X}, "
            f"data={self.data.hex(' ') if self.data else '(empty)'}, "
            f"checksum=0x{self.checksum:02X})"
        )

    @property
    def frame_size(self) -> int:
        return HEADER_SIZE + len(self.data) + CHECKSUM_SIZE

    def compute_checksum(self) -> int:
        return compute_checksum(self)

    def validate_checksum(self) -> bool:
        return validate_checksum(self)

    def encode(self) -> bytes:
        return struct.pack(_HEADER_FORMAT, self.sync, self.length, self.id) + self.data + bytes([self.checksum])

    def encode_into(self, buf: bytearray) -> int:
        """Append the frame to ``buf`` and return the buffer length afterwards."""
        buf.extend(struct.pack(_HEADER_FORMAT, self.sync, self.length, self.id))
        buf.extend(self.data)
        buf.append(self.checksum)
        return len(buf)

    @classmethod
    def decode(cls, data: bytes | bytearray | memoryview) -> Packet:
        """Parse one frame from the start of ``data``.

        Trailing bytes after the checksum are ignored. Raises
        ``MinimumLengthError``, ``TruncatedPayloadError`` or
        ``ChecksumMismatchError``.
        """
        if len(data) < MIN_FRAME_SIZE:
            raise MinimumLengthError(
                f"Frame too short: {len(data)} bytes, need at least {MIN_FRAME_SIZE}"
            )

        sync, length, msg_id = struct.unpack_from(_HEADER_FORMAT, data, 0)

        payload_end = HEADER_SIZE + length
        if len(data) < payload_end:
            raise TruncatedPayloadError(
                f"Unexpected EOF: length declares {length} data bytes, "
                f"only {len(data) - HEADER_SIZE} available"
            )
        payload = bytes(data[HEADER_SIZE:payload_end])

        if len(data) < payload_end + CHECKSUM_SIZE:
            raise TruncatedPayloadError("Unexpected EOF: checksum byte missing")
        checksum = data[payload_end]

        pkt = cls(sync=sync, length=length, id=msg_id, data=payload, checksum=checksum)
        expected = pkt.compute_checksum()
        if expected != checksum:
            raise ChecksumMismatchError(
                f"Checksum mismatch: expected 0x{expected:02X}, got 0x{checksum:02X}"
            )
        return pkt
