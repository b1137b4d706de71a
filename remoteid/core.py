"""Message types, protocol versions and errors shared by all Remote ID messages."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Type, TypeVar

_E = TypeVar("_E", bound=IntEnum)


class MessageType(IntEnum):
    """Remote ID message types."""

    BASIC_ID = 0x0
    LOCATION = 0x1
    AUTH = 0x2
    SELF_ID = 0x3
    SYSTEM = 0x4
    OPERATOR_ID = 0x5
    MESSAGE_PACK = 0xF


class ProtocolVersion(IntEnum):
    """Remote ID protocol versions."""

    VERSION_0 = 0x0
    VERSION_1 = 0x1
    VERSION_2 = 0x2
    PRIVATE_USE = 0xF


class ErrorCode(IntEnum):
    """Reasons an operation on a message can fail."""

    SUCCESS = 0
    NULL_POINTER = -1
    BUFFER_TOO_SMALL = -2
    BUFFER_TOO_LARGE = -3
    INVALID_CHARACTER = -4
    OUT_OF_RANGE = -5
    UNKNOWN_MESSAGE_TYPE = -6
    INVALID_LATITUDE = -7
    INVALID_LONGITUDE = -8
    INVALID_TRACK_DIRECTION = -9
    INVALID_TIMESTAMP = -10
    INVALID_PROTOCOL_VERSION = -11
    INVALID_MESSAGE_COUNT = -12
    INVALID_MESSAGE_SIZE = -13
    INVALID_LAST_PAGE_INDEX = -14
    INVALID_PAGE_NUMBER = -15
    NON_EMPTY_SIGNATURE = -16
    INVALID_UUID_VERSION = -17
    INVALID_UUID_VARIANT = -18
    INVALID_UUID_PADDING = -19


def _member(enum_cls: Type[_E], value: object) -> Optional[_E]:
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return None


def message_type_to_string(message_type: int) -> str:
    """Return the symbolic name of a message type, or "UNKNOWN"."""
    member = _member(MessageType, message_type)
    return "UNKNOWN" if member is None else f"RID_MESSAGE_TYPE_{member.name}"


def protocol_version_to_string(version: int) -> str:
    """Return the symbolic name of a protocol version, or "UNKNOWN"."""
    member = _member(ProtocolVersion, version)
    return "UNKNOWN" if member is None else f"RID_PROTOCOL_{member.name}"


def error_to_string(error: int) -> str:
    """Return the symbolic name of an error code, or "UNKNOWN"."""
    member = _member(ErrorCode, error)
    if member is None:
        return "UNKNOWN"
    if member is ErrorCode.SUCCESS:
        return "RID_SUCCESS"
    return f"RID_ERROR_{member.name}"


def is_valid_protocol_version(version: int) -> bool:
    """Versions 0, 1, 2 and the private-use value are valid."""
    return 0 <= version <= ProtocolVersion.VERSION_2 or version == ProtocolVersion.PRIVATE_USE


class RidError(ValueError):
    """Raised when a message field or operation is invalid."""

    def __init__(self, code: ErrorCode, message: Optional[str] = None) -> None:
        self.code = ErrorCode(code)
        super().__init__(message or error_to_string(self.code))


def _validate_header(protocol_version: int, message_type: int, expected: MessageType) -> None:
    if not is_valid_protocol_version(protocol_version):
        raise RidError(ErrorCode.INVALID_PROTOCOL_VERSION)
    if message_type != expected:
        raise RidError(ErrorCode.UNKNOWN_MESSAGE_TYPE)


def _check_ascii(raw: bytes) -> None:
    if any(byte > 127 for byte in raw):
        raise RidError(ErrorCode.INVALID_CHARACTER)


def _pack_ascii(value: object, size: int) -> bytes:
    """Encode text into a NUL padded ASCII field of the given size."""
    if isinstance(value, str):
        data = value.encode("utf-8")
    elif isinstance(value, (bytes, bytearray)):
        data = bytes(value)
    else:
        raise TypeError(f"expected str or bytes, got {type(value).__name__}")
    data = data.split(b"\0", 1)[0]
    if len(data) > size:
        raise RidError(ErrorCode.BUFFER_TOO_LARGE)
    _check_ascii(data)
    return data.ljust(size, b"\0")


def _fit_raw(raw: object, size: int) -> bytes:
    data = bytes(raw)  # type: ignore[arg-type]
    if len(data) > size:
        raise RidError(ErrorCode.BUFFER_TOO_LARGE)
    return data.ljust(size, b"\0")


def _unpack_ascii(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("latin-1")