"""Message pack: a container of up to nine Remote ID messages."""

from __future__ import annotations

import copy
import operator
from dataclasses import dataclass, field
from typing import Any, Iterator, List

from remoteid.core import ErrorCode, MessageType, ProtocolVersion, RidError, _validate_header
from remoteid.message import to_json as _message_to_json

MESSAGE_SIZE = 25
"""Size in bytes of a single encoded message."""

MAX_MESSAGES = 9


@dataclass
class MessagePack:
    """An ordered collection of messages sent together.

    Messages are copied on insertion, so later changes to the original
    object do not affect the pack.
    """

    messages: List[Any] = field(default_factory=list)
    message_size: int = MESSAGE_SIZE
    protocol_version: int = ProtocolVersion.VERSION_2
    message_type: int = MessageType.MESSAGE_PACK

    def __post_init__(self) -> None:
        self.messages = [copy.copy(message) for message in self.messages]

    @property
    def message_count(self) -> int:
        """Number of messages in the pack."""
        return len(self.messages)

    def append(self, message: Any) -> None:
        """Add a copy of a message at the end of the pack."""
        if len(self.messages) >= MAX_MESSAGES:
            raise RidError(ErrorCode.OUT_OF_RANGE)
        self.messages.append(copy.copy(message))

    def __getitem__(self, index: int) -> Any:
        return self.messages[operator.index(index)]

    def __setitem__(self, index: int, message: Any) -> None:
        self.messages[operator.index(index)] = copy.copy(message)

    def __delitem__(self, index: int) -> None:
        del self.messages[operator.index(index)]

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.messages)

    def validate(self) -> None:
        """Raise RidError if the pack header or message count is invalid."""
        _validate_header(self.protocol_version, self.message_type, MessageType.MESSAGE_PACK)
        if self.message_size != MESSAGE_SIZE:
            raise RidError(ErrorCode.INVALID_MESSAGE_SIZE)
        if len(self.messages) > MAX_MESSAGES:
            raise RidError(ErrorCode.INVALID_MESSAGE_COUNT)

    def to_json(self) -> str:
        """Return the pack and its messages as a JSON object string."""
        body = ", ".join(_message_to_json(message) for message in self.messages)
        return (
            f'{{"protocol_version": {int(self.protocol_version)}, '
            f'"message_type": {int(self.message_type)}, '
            f'"message_count": {len(self.messages)}, '
            f'"messages": [{body}]}}'
        )