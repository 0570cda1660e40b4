"""XOR checksum used by ANT frames."""

from __future__ import annotations

from functools import reduce
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from ant_packet.packet import Packet


def xor_checksum(data: Iterable[int]) -> int:
    """XOR every byte of ``data`` together, left to right.

    Returns 0 for an empty sequence.
    """
    return reduce(lambda acc, byte: acc ^ byte, data, 0) & 0xFF


def compute_checksum(packet: Packet) -> int:
    """Checksum over sync, length, id and every payload byte of ``packet``."""
    return xor_checksum((packet.sync, packet.length, packet.id, *packet.data))


def validate_checksum(packet: Packet) -> bool:
    """True if the stored checksum of ``packet`` matches its contents."""
    return compute_checksum(packet) == packet.checksum
