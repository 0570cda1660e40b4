"""Error kinds raised by the packet builder and decoder."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Closed set of reasons a packet operation can fail."""

    ARGUMENTS_MISSING = "arguments_missing"
    UNKNOWN_MESSAGE_CLASS = "unknown_message_class"
    ARGUMENT_LENGTH_MISMATCH = "argument_length_mismatch"
    INVALID_ARGUMENT = "invalid_argument"
    MINIMUM_LENGTH_VIOLATION = "minimum_length_violation"
    TRUNCATED_PAYLOAD = "truncated_payload"
    CHECKSUM_MISMATCH = "checksum_mismatch"


class PacketError(ValueError):
    """Base class for every packet failure. ``kind`` identifies the reason."""

    kind: ErrorKind


class ArgumentsMissingError(PacketError):
    kind = ErrorKind.ARGUMENTS_MISSING


class UnknownMessageClassError(PacketError, LookupError):
    kind = ErrorKind.UNKNOWN_MESSAGE_CLASS


class ArgumentLengthMismatchError(PacketError):
    kind = ErrorKind.ARGUMENT_LENGTH_MISMATCH


class InvalidArgumentError(PacketError):
    kind = ErrorKind.INVALID_ARGUMENT


class MinimumLengthError(PacketError):
    kind = ErrorKind.MINIMUM_LENGTH_VIOLATION


class TruncatedPayloadError(PacketError):
    kind = ErrorKind.TRUNCATED_PAYLOAD


class ChecksumMismatchError(PacketError):
    kind = ErrorKind.CHECKSUM_MISMATCH
