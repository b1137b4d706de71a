"""Self-ID message: a free text description of the flight."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from remoteid.core import (
    MessageType,
    ProtocolVersion,
    _check_ascii,
    _fit_raw,
    _member,
    _pack_ascii,
    _unpack_ascii,
    _validate_header,
)

DESCRIPTION_SIZE = 23


class DescriptionType(IntEnum):
    """Kind of text carried in a Self-ID message."""

    TEXT = 0
    EMERGENCY = 1
    EXTENDED_STATUS = 2


def description_type_to_string(description_type: int) -> str:
    """Return the symbolic name of a description type, or "UNKNOWN"."""
    member = _member(DescriptionType, description_type)
    return "UNKNOWN" if member is None else f"RID_DESCRIPTION_TYPE_{member.name}"


@dataclass
class SelfId:
    """Self-ID message with a description of at most 23 ASCII characters."""

    description_type: int = DescriptionType.TEXT
    raw_description: bytes = bytes(DESCRIPTION_SIZE)
    protocol_version: int = ProtocolVersion.VERSION_2
    message_type: int = MessageType.SELF_ID

    def __post_init__(self) -> None:
        self.raw_description = _fit_raw(self.raw_description, DESCRIPTION_SIZE)

    @property
    def description(self) -> str:
        """The description text, up to the first NUL byte."""
        return _unpack_ascii(self.raw_description)

    @description.setter
    def description(self, value: str) -> None:
        self.raw_description = _pack_ascii(value, DESCRIPTION_SIZE)

    def validate(self) -> None:
        """Raise RidError if any field holds an invalid value."""
        _validate_header(self.protocol_version, self.message_type, MessageType.SELF_ID)
        _check_ascii(self.raw_description)

    def to_json(self) -> str:
        """Return the message as a JSON object string."""
        return (
            f'{{"protocol_version": {int(self.protocol_version)}, '
            f'"message_type": {int(self.message_type)}, '
            f'"description_type": {int(self.description_type)}, '
            f'"description": "{self.description}"}}'
        )