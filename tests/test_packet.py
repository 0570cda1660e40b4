"""Tests for packet building, encoding and decoding."""

import array
import logging

import pytest

from ant_packet import (
    DEFAULT_REGISTRY,
    MIN_FRAME_SIZE,
    SYNC_BYTE,
    ArgumentLengthMismatchError,
    ArgumentsMissingError,
    ChecksumMismatchError,
    ErrorKind,
    FrameTemplate,
    InvalidArgumentError,
    MinimumLengthError,
    PacketError,
    TemplateRegistry,
    TruncatedPayloadError,
    UnknownMessageClassError,
    build_packet,
    decode,
    encode,
    encode_into,
)


REGISTRY = TemplateRegistry(
    [
        FrameTemplate(message_class="x", message_id=0x10, name="Example", data_length=2),
        FrameTemplate(message_class="ping", message_id=0x20, name="Ping", data_length=0),
    ]
)


def test_packet_starts_with_sync():
    pkt = build_packet("x", [1, 2], REGISTRY)
    assert encode(pkt)[0] == SYNC_BYTE


def test_frame_size():
    pkt = build_packet("x", [1, 2], REGISTRY)
    assert pkt.frame_size == 6
    assert len(encode(pkt)) == pkt.frame_size


def test_build_copies_arguments():
    buf = bytearray([0x01, 0x02])
    pkt = build_packet("x", buf, REGISTRY)
    buf[0] = 0xFF
    assert pkt.data == b"\x01\x02"


def test_build_accepts_bytes_and_lists():
    assert build_packet("x", b"\x01\x02", REGISTRY) == build_packet("x", [1, 2], REGISTRY)


def test_build_wide_item_buffer_packs_one_byte_per_element():
    pkt = build_packet("x", array.array("H", [1, 2]), REGISTRY)
    assert pkt.data == b"\x01\x02"
    assert len(pkt.data) == pkt.length
    assert encode(pkt) == bytes([0xA4, 0x02, 0x10, 0x01, 0x02, 0xB5])


def test_build_wide_item_buffer_out_of_range():
    with pytest.raises(InvalidArgumentError):
        build_packet("x", array.array("H", [1, 0x100]), REGISTRY)


def test_build_arguments_missing():
    with pytest.raises(ArgumentsMissingError) as exc:
        build_packet("x", None, REGISTRY)
    assert exc.value.kind is ErrorKind.ARGUMENTS_MISSING


def test_missing_arguments_checked_before_class():
    with pytest.raises(ArgumentsMissingError):
        build_packet("nope", None, REGISTRY)


def test_build_unknown_class():
    with pytest.raises(UnknownMessageClassError, match="Unknown message class 'nope'") as exc:
        build_packet("nope", [1, 2], REGISTRY)
    assert exc.value.kind is ErrorKind.UNKNOWN_MESSAGE_CLASS


def test_unknown_class_checked_before_length():
    with pytest.raises(UnknownMessageClassError):
        build_packet("nope", [1, 2, 3, 4, 5], REGISTRY)


def test_build_length_mismatch():
    with pytest.raises(ArgumentLengthMismatchError, match="takes 2 data bytes, got 3") as exc:
        build_packet("x", [1, 2, 3], REGISTRY)
    assert exc.value.kind is ErrorKind.ARGUMENT_LENGTH_MISMATCH


@pytest.mark.parametrize("template", list(DEFAULT_REGISTRY), ids=lambda t: t.message_class)
def test_length_enforced_for_every_registered_class(template):
    with pytest.raises(ArgumentLengthMismatchError):
        build_packet(template.message_class, bytes(template.data_length + 1))
    if template.data_length:
        with pytest.raises(ArgumentLengthMismatchError):
            build_packet(template.message_class, bytes(template.data_length - 1))


@pytest.mark.parametrize("bad", [[256], [-1], ["a"], [1.5]])
def test_build_rejects_non_byte_arguments(bad):
    with pytest.raises(InvalidArgumentError) as exc:
        build_packet("open_channel", bad)
    assert exc.value.kind is ErrorKind.INVALID_ARGUMENT


def test_empty_arguments_for_zero_length_class():
    pkt = build_packet("ping", [], REGISTRY)
    assert pkt.length == 0
    assert pkt.data == b""
    assert pkt.checksum == SYNC_BYTE ^ 0x00 ^ 0x20
    assert encode(pkt) == bytes([0xA4, 0x00, 0x20, 0x84])


@pytest.mark.parametrize("template", list(DEFAULT_REGISTRY), ids=lambda t: t.message_class)
def test_roundtrip_every_registered_class(template):
    args = bytes((0x11 * i) & 0xFF for i in range(template.data_length))
    pkt = build_packet(template.message_class, args)
    rt = decode(encode(pkt))
    assert rt == pkt
    assert rt.id == template.message_id


def test_encode_into_appends_and_returns_length():
    pkt = build_packet("x", [1, 2], REGISTRY)
    buf = bytearray(b"\xff")
    n = encode_into(pkt, buf)
    assert n == 7
    assert bytes(buf[1:]) == encode(pkt)


def test_decode_minimum_length():
    for size in range(MIN_FRAME_SIZE):
        with pytest.raises(MinimumLengthError) as exc:
            decode(bytes([0xA4, 0x00, 0x20, 0x84])[:size])
        assert exc.value.kind is ErrorKind.MINIMUM_LENGTH_VIOLATION


def test_zero_payload_frame_alone_below_decoder_minimum():
    frame = encode(build_packet("ping", [], REGISTRY))
    assert len(frame) == 4
    with pytest.raises(MinimumLengthError):
        decode(frame)
    assert decode(frame + b"\x00") == build_packet("ping", [], REGISTRY)


def test_decode_zero_payload_five_bytes():
    pkt = decode(bytes([0xA4, 0x00, 0x20, 0x84, 0x00]))
    assert pkt.length == 0
    assert pkt.data == b""
    assert pkt.checksum == 0x84


def test_decode_truncated_payload():
    # length declares 5 data bytes, only 3 follow
    with pytest.raises(TruncatedPayloadError) as exc:
        decode(bytes([0xA4, 0x05, 0x10, 0x01, 0x02, 0x03]))
    assert exc.value.kind is ErrorKind.TRUNCATED_PAYLOAD


def test_decode_missing_checksum_byte():
    with pytest.raises(TruncatedPayloadError, match="checksum"):
        decode(bytes([0xA4, 0x02, 0x10, 0x01, 0x02]))


def test_decode_checksum_mismatch():
    frame = bytearray(encode(build_packet("x", [1, 2], REGISTRY)))
    frame[-1] ^= 0xFF
    with pytest.raises(ChecksumMismatchError) as exc:
        decode(bytes(frame))
    assert exc.value.kind is ErrorKind.CHECKSUM_MISMATCH


def test_decode_does_not_check_sync_or_id():
    # structurally valid frame with a foreign sync byte and unregistered id
    frame = bytes([0x00, 0x01, 0xEE, 0x05, 0x00 ^ 0x01 ^ 0xEE ^ 0x05])
    pkt = decode(frame)
    assert pkt.sync == 0x00
    assert pkt.id == 0xEE


def test_decode_ignores_trailing_bytes():
    pkt = build_packet("x", [1, 2], REGISTRY)
    assert decode(encode(pkt) + b"\xa4\x00") == pkt


def test_decode_accepts_bytearray_and_memoryview():
    frame = encode(build_packet("x", [1, 2], REGISTRY))
    assert decode(bytearray(frame)) == decode(frame)
    assert decode(memoryview(frame)) == decode(frame)


def test_decode_is_deterministic():
    frame = encode(build_packet("x", [7, 9], REGISTRY))
    assert decode(frame) == decode(frame)


def test_every_single_bit_flip_rejected():
    frame = encode(build_packet("x", [1, 2], REGISTRY))
    for i in range(len(frame)):
        for bit in range(8):
            corrupt = bytearray(frame)
            corrupt[i] ^= 1 << bit
            with pytest.raises(PacketError):
                decode(bytes(corrupt))


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        decode(b"\xa4")


def test_packet_is_immutable():
    pkt = build_packet("x", [1, 2], REGISTRY)
    with pytest.raises(AttributeError):
        pkt.checksum = 0


def test_packet_repr():
    r = repr(build_packet("x", [1, 2], REGISTRY))
    assert "id=0x10" in r
    assert "01 02" in r
    assert "checksum=0xB5" in r


def test_rejected_frame_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="ant_packet.codec"):
        with pytest.raises(ChecksumMismatchError):
            decode(bytes([0xA4, 0x02, 0x10, 0x01, 0x03, 0xB5]))
    assert "Rejected frame a4 02 10 01 03 b5" in caplog.text
