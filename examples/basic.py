"""Basic example: build, encode, decode and describe ANT packets."""

from ant_packet import (
    FrameTemplate,
    TemplateRegistry,
    PacketError,
    build_packet,
    decode,
    describe,
    encode,
)


def hex_dump(data: bytes, label: str = "") -> None:
    if label:
        print(f"\n  {label}")
    for i in range(0, len(data), 16):
        hex_values = " ".join(f"{b:02x}" for b in data[i : i + 16])
        print(f"  {i:04x}: {hex_values}")


def main() -> None:
    print("=" * 60)
    print("  ANT packet codec example")
    print("=" * 60)

    # Channel setup sequence for an ANT+ weight scale on channel 0
    setup = [
        ("reset_system", [0x00]),
        ("assign_channel", [0x00, 0x00, 0x00]),
        ("channel_id", [0x00, 0x00, 0x00, 0x77, 0x00]),
        ("channel_rf_frequency", [0x00, 57]),
        ("channel_period", [0x00, 0x00, 0x20]),
        ("open_channel", [0x00]),
    ]
    for message_class, args in setup:
        pkt = build_packet(message_class, args)
        wire = encode(pkt)
        hex_dump(wire, f"{message_class}:")
        print(describe(decode(wire)))

    # Caller-supplied registry
    registry = TemplateRegistry(
        [
            FrameTemplate(
                message_class="x",
                message_id=0x10,
                name="Example",
                data_length=2,
                field_descriptions=("First", "Second"),
            )
        ]
    )
    pkt = build_packet("x", [0x01, 0x02], registry)
    hex_dump(encode(pkt), "Custom class:")
    print(describe(pkt, registry))

    print("\nCorrupted frame:")
    try:
        decode(bytes([0xA4, 0x02, 0x10, 0x01, 0x03, 0xB5]))
    except PacketError as e:
        print(f"  {e.kind.name}: {e}")


if __name__ == "__main__":
    main()
