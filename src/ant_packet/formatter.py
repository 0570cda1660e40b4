"""Human readable rendering of packets for logs and debugging."""

from __future__ import annotations

import logging

from ant_packet.catalog import DEFAULT_REGISTRY
from ant_packet.packet import Packet
from ant_packet.registry import TemplateRegistry

logger = logging.getLogger(__name__)

UNKNOWN_LABEL = "unknown"


def describe(packet: Packet, registry: TemplateRegistry = DEFAULT_REGISTRY) -> str:
    """Render ``packet`` with the field labels of its template.

    Example::

        "Open Channel" - Class: open_channel (id 0x4B)
            Channel Number: 0x00
    """
    template = registry.get_by_id(packet.id)
    if template is None:
        logger.debug("No template for message id 0x%02X", packet.id)
        name, message_class, labels = UNKNOWN_LABEL, UNKNOWN_LABEL, ()
    else:
        name, message_class, labels = template.name, template.message_class, template.field_descriptions

    lines = [f'"{name}" - Class: {message_class} (id 0x{packet.id:02X})']
    for i, value in enumerate(packet.data):
        label = labels[i] if i < len(labels) else f"Byte {i}"
        lines.append(f"\t{label}: 0x{value:02X}")
    return "\n".join(lines)
