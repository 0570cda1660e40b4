"""Standard ANT message templates used when talking to a weigh scale."""

from __future__ import annotations

from ant_packet.registry import FrameTemplate, TemplateRegistry


def _data_bytes(prefix: str, count: int = 8) -> tuple[str, ...]:
    return tuple(f"{prefix} {i}" for i in range(count))


ANT_TEMPLATES: tuple[FrameTemplate, ...] = (
    # Configuration
    FrameTemplate(
        message_class="unassign_channel",
        message_id=0x41,
        name="Unassign Channel",
        data_length=1,
        field_descriptions=("Channel Number",),
    ),
    FrameTemplate(
        message_class="assign_channel",
        message_id=0x42,
        name="Assign Channel",
        data_length=3,
        field_descriptions=("Channel Number", "Channel Type", "Network Number"),
    ),
    FrameTemplate(
        message_class="channel_period",
        message_id=0x43,
        name="Channel Period",
        data_length=3,
        field_descriptions=("Channel Number", "Messaging Period LSB", "Messaging Period MSB"),
    ),
    FrameTemplate(
        message_class="search_timeout",
        message_id=0x44,
        name="Search Timeout",
        data_length=2,
        field_descriptions=("Channel Number", "Search Timeout"),
    ),
    FrameTemplate(
        message_class="channel_rf_frequency",
        message_id=0x45,
        name="Channel RF Frequency",
        data_length=2,
        field_descriptions=("Channel Number", "RF Frequency"),
    ),
    FrameTemplate(
        message_class="set_network_key",
        message_id=0x46,
        name="Set Network Key",
        data_length=9,
        field_descriptions=("Network Number", *_data_bytes("Network Key")),
    ),
    FrameTemplate(
        message_class="transmit_power",
        message_id=0x47,
        name="Transmit Power",
        data_length=2,
        field_descriptions=("Filler", "TX Power"),
    ),
    FrameTemplate(
        message_class="channel_id",
        message_id=0x51,
        name="Channel ID",
        data_length=5,
        field_descriptions=(
            "Channel Number",
            "Device Number LSB",
            "Device Number MSB",
            "Device Type",
            "Transmission Type",
        ),
    ),
    # Control
    FrameTemplate(
        message_class="reset_system",
        message_id=0x4A,
        name="Reset System",
        data_length=1,
        field_descriptions=("Filler",),
    ),
    FrameTemplate(
        message_class="open_channel",
        message_id=0x4B,
        name="Open Channel",
        data_length=1,
        field_descriptions=("Channel Number",),
    ),
    FrameTemplate(
        message_class="close_channel",
        message_id=0x4C,
        name="Close Channel",
        data_length=1,
        field_descriptions=("Channel Number",),
    ),
    FrameTemplate(
        message_class="request_message",
        message_id=0x4D,
        name="Request Message",
        data_length=2,
        field_descriptions=("Channel Number", "Message ID"),
    ),
    # Data
    FrameTemplate(
        message_class="broadcast_data",
        message_id=0x4E,
        name="Broadcast Data",
        data_length=9,
        field_descriptions=("Channel Number", *_data_bytes("Data")),
    ),
    FrameTemplate(
        message_class="acknowledged_data",
        message_id=0x4F,
        name="Acknowledged Data",
        data_length=9,
        field_descriptions=("Channel Number", *_data_bytes("Data")),
    ),
    FrameTemplate(
        message_class="burst_data",
        message_id=0x50,
        name="Burst Transfer Data",
        data_length=9,
        field_descriptions=("Sequence/Channel Number", *_data_bytes("Data")),
    ),
    # Channel events and requested responses
    FrameTemplate(
        message_class="channel_event",
        message_id=0x40,
        name="Channel Response / Event",
        data_length=3,
        field_descriptions=("Channel Number", "Message ID", "Message Code"),
    ),
    FrameTemplate(
        message_class="channel_status",
        message_id=0x52,
        name="Channel Status",
        data_length=2,
        field_descriptions=("Channel Number", "Channel Status"),
    ),
    FrameTemplate(
        message_class="capabilities",
        message_id=0x54,
        name="Capabilities",
        data_length=6,
        field_descriptions=(
            "Max ANT Channels",
            "Max Networks",
            "Standard Options",
            "Advanced Options",
            "Advanced Options 2",
            "Reserved",
        ),
    ),
    FrameTemplate(
        message_class="serial_number",
        message_id=0x61,
        name="Serial Number",
        data_length=4,
        field_descriptions=_data_bytes("Serial Number", 4),
    ),
    FrameTemplate(
        message_class="ant_version",
        message_id=0x3E,
        name="ANT Version",
        data_length=11,
        field_descriptions=_data_bytes("Version", 11),
    ),
    FrameTemplate(
        message_class="startup_message",
        message_id=0x6F,
        name="Startup Message",
        data_length=1,
        field_descriptions=("Startup Reason",),
    ),
)

DEFAULT_REGISTRY = TemplateRegistry(ANT_TEMPLATES)
