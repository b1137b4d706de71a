"""Operations on any Remote ID message, dispatched on its message type."""

from __future__ import annotations

from typing import Any

from remoteid.core import ErrorCode, MessageType, RidError, _member


def get_type(message: Any) -> int:
    """Return the message type of a message."""
    return message.message_type


def get_protocol_version(message: Any) -> int:
    """Return the protocol version of a message."""
    return message.protocol_version


def validate(message: Any) -> None:
    """Validate a message according to its type.

    Authentication pages are accepted without checks; unknown message
    types raise RidError.
    """
    message_type = _member(MessageType, get_type(message))
    if message_type is None:
        raise RidError(ErrorCode.UNKNOWN_MESSAGE_TYPE)
    if message_type is MessageType.AUTH:
        return
    message.validate()


def to_json(message: Any) -> str:
    """Return a message as a JSON object string.

    Messages of unknown type, or without a JSON form of their own, are
    written as their protocol version and message type only.
    """
    message_type = _member(MessageType, get_type(message))
    formatter = getattr(message, "to_json", None)
    if message_type is not None and callable(formatter):
        return formatter()
    return (
        f'{{"protocol_version": {int(get_protocol_version(message))}, '
        f'"message_type": {int(get_type(message))}}}'
    )