"""Top-level build/encode/decode functions for ANT packets."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from ant_packet.catalog import DEFAULT_REGISTRY
from ant_packet.checksum import compute_checksum
from ant_packet.constants import SYNC_BYTE
from ant_packet.errors import (
    ArgumentLengthMismatchError,
    ArgumentsMissingError,
    InvalidArgumentError,
    PacketError,
)
from ant_packet.packet import Packet
from ant_packet.registry import TemplateRegistry

logger = logging.getLogger(__name__)


def build_packet(
    message_class: str,
    arguments: Sequence[int] | bytes | bytearray | None,
    registry: TemplateRegistry = DEFAULT_REGISTRY,
) -> Packet:
    """Build a packet for ``message_class`` carrying ``arguments`` as its data bytes.

    The arguments are copied; the caller may reuse its buffer afterwards.
    """
    if arguments is None:
        raise ArgumentsMissingError("No arguments supplied")

    template = registry.by_class(message_class)

    if len(arguments) != template.data_length:
        raise ArgumentLengthMismatchError(
            f"{template.name} takes {template.data_length} data bytes, got {len(arguments)}"
        )

    try:
        # element by element; bytes() of a wide buffer copies its raw memory
        data = bytes(list(arguments))
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{template.name}: arguments must be bytes in 0..255 ({e})") from e

    pkt = Packet(
        sync=SYNC_BYTE,
        length=template.data_length,
        id=template.message_id,
        data=data,
        checksum=0,
    )
    return replace(pkt, checksum=compute_checksum(pkt))


def encode(packet: Packet) -> bytes:
    """Serialize a packet to its wire bytes."""
    return packet.encode()


def encode_into(packet: Packet, buf: bytearray) -> int:
    """Append a packet's wire bytes to ``buf``; returns the buffer length."""
    return packet.encode_into(buf)


def decode(data: bytes | bytearray | memoryview) -> Packet:
    """Parse wire bytes into a packet, validating length and checksum."""
    try:
        return Packet.decode(data)
    except PacketError as e:
        logger.debug("Rejected frame %s: %s", bytes(data[:8]).hex(" "), e)
        raise
