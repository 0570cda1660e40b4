"""Talk to an ANT USB stick over serial.

Resets the radio, requests its capabilities and prints every frame
received until the read times out.
"""

import logging

import serial

from ant_packet import (
    HEADER_SIZE,
    SYNC_BYTE,
    Packet,
    PacketError,
    build_packet,
    decode,
    describe,
    encode,
)

CAPABILITIES_ID = 0x54


class AntSerial:
    """ANT framing over a serial port."""

    def __init__(self, port: str = "/dev/ttyUSB0", baudrate: int = 115200, timeout: float = 2.0):
        print(f"Opening {port} @ {baudrate} baud...")
        self.port = serial.Serial(port, baudrate, timeout=timeout)

    def close(self) -> None:
        self.port.close()

    def __enter__(self) -> "AntSerial":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def send(self, message_class: str, args: list[int]) -> None:
        self.port.write(encode(build_packet(message_class, args)))
        self.port.flush()

    def receive_frame(self) -> bytes | None:
        """Read one frame: scan for the sync byte, then read length + id + data + checksum.

        Returns None on timeout.
        """
        while True:
            b = self.port.read(1)
            if not b:
                return None
            if b[0] == SYNC_BYTE:
                break

        header_tail = self.port.read(HEADER_SIZE - 1)
        if len(header_tail) < HEADER_SIZE - 1:
            return None

        rest = self.port.read(header_tail[0] + 1)
        if len(rest) < header_tail[0] + 1:
            return None

        return bytes([SYNC_BYTE]) + header_tail + rest

    def receive_packet(self) -> Packet | None:
        frame = self.receive_frame()
        if frame is None:
            return None
        # a zero-payload frame is one byte short of the decoder's minimum
        return decode(frame.ljust(5, b"\x00"))


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    with AntSerial() as ant:
        ant.send("reset_system", [0x00])
        ant.send("request_message", [0x00, CAPABILITIES_ID])
        while True:
            try:
                pkt = ant.receive_packet()
            except PacketError as e:
                print(f"  dropped frame ({e.kind.name})")
                continue
            if pkt is None:
                print("  (no response)")
                break
            print(describe(pkt))


if __name__ == "__main__":
    main()
