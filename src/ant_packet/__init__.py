"""Builder, codec and checksum for ANT wireless protocol packets."""

from ant_packet.codec import build_packet, encode, encode_into, decode
from ant_packet.packet import Packet
from ant_packet.checksum import xor_checksum, compute_checksum, validate_checksum
from ant_packet.formatter import describe
from ant_packet.registry import FrameTemplate, TemplateRegistry, load_registry
from ant_packet.catalog import ANT_TEMPLATES, DEFAULT_REGISTRY
from ant_packet.errors import (
    ErrorKind,
    PacketError,
    ArgumentsMissingError,
    UnknownMessageClassError,
    ArgumentLengthMismatchError,
    InvalidArgumentError,
    MinimumLengthError,
    TruncatedPayloadError,
    ChecksumMismatchError,
)
from ant_packet.constants import (
    SYNC_BYTE,
    MAX_DATA_LENGTH,
    HEADER_SIZE,
    CHECKSUM_SIZE,
    MIN_FRAME_SIZE,
)

__all__ = [
    "build_packet",
    "encode",
    "encode_into",
    "decode",
    "Packet",
    "xor_checksum",
    "compute_checksum",
    "validate_checksum",
    "describe",
    "FrameTemplate",
    "TemplateRegistry",
    "load_registry",
    "ANT_TEMPLATES",
    "DEFAULT_REGISTRY",
    "ErrorKind",
    "PacketError",
    "ArgumentsMissingError",
    "UnknownMessageClassError",
    "ArgumentLengthMismatchError",
    "InvalidArgumentError",
    "MinimumLengthError",
    "TruncatedPayloadError",
    "ChecksumMismatchError",
    "SYNC_BYTE",
    "MAX_DATA_LENGTH",
    "HEADER_SIZE",
    "CHECKSUM_SIZE",
    "MIN_FRAME_SIZE",
]
