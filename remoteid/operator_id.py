"""Operator ID message: the registration identifier of the operator."""

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

OPERATOR_ID_SIZE = 20


class OperatorIdType(IntEnum):
    """Kind of identifier carried in an Operator ID message."""

    OPERATOR_ID = 0


def operator_id_type_to_string(id_type: int) -> str:
    """Return the symbolic name of an operator ID type, or "UNKNOWN"."""
    member = _member(OperatorIdType, id_type)
    return "UNKNOWN" if member is None else f"RID_ID_TYPE_{member.name}"


@dataclass
class OperatorId:
    """Operator ID message with an identifier of at most 20 ASCII characters."""

    id_type: int = OperatorIdType.OPERATOR_ID
    raw_operator_id: bytes = bytes(OPERATOR_ID_SIZE)
    protocol_version: int = ProtocolVersion.VERSION_2
    message_type: int = MessageType.OPERATOR_ID

    def __post_init__(self) -> None:
        self.raw_operator_id = _fit_raw(self.raw_operator_id, OPERATOR_ID_SIZE)

    @property
    def operator_id(self) -> str:
        """The operator identifier, up to the first NUL byte."""
        return _unpack_ascii(self.raw_operator_id)

    @operator_id.setter
    def operator_id(self, value: str) -> None:
        self.raw_operator_id = _pack_ascii(value, OPERATOR_ID_SIZE)

    def validate(self) -> None:
        """Raise RidError if any field holds an invalid value."""
        _validate_header(self.protocol_version, self.message_type, MessageType.OPERATOR_ID)
        _check_ascii(self.raw_operator_id)

    def to_json(self) -> str:
        """Return the message as a JSON object string."""
        return (
            f'{{"protocol_version": {int(self.protocol_version)}, '
            f'"message_type": {int(self.message_type)}, '
            f'"id_type": {int(self.id_type)}, '
            f'"operator_id": "{self.operator_id}"}}'
        )