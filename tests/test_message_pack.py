import json

import pytest

from remoteid.core import ErrorCode, MessageType, ProtocolVersion, RidError
from remoteid.message import to_json, validate
from remoteid.message_pack import MAX_MESSAGES, MESSAGE_SIZE, MessagePack
from remoteid.operator_id import OperatorId
from remoteid.self_id import SelfId
from remoteid.system import System


def make_self_id(text):
    message = SelfId()
    message.description = text
    return message


def expect_error(code, func, *args):
    with pytest.raises(RidError) as info:
        func(*args)
    assert info.value.code == code


def test_defaults():
    pack = MessagePack()
    assert len(pack) == 0
    assert pack.message_count == 0
    assert pack.message_size == MESSAGE_SIZE
    assert pack.protocol_version == ProtocolVersion.VERSION_2
    assert pack.message_type == MessageType.MESSAGE_PACK


def test_append_and_get():
    pack = MessagePack()
    first = make_self_id("first")
    second = OperatorId()
    pack.append(first)
    pack.append(second)
    assert len(pack) == 2
    assert pack[0] == first
    assert pack[1] == second
    assert list(pack) == [first, second]


def test_append_copies_message():
    pack = MessagePack()
    message = make_self_id("original")
    pack.append(message)
    message.description = "changed"
    assert pack[0].description == "original"


def test_append_beyond_capacity():
    pack = MessagePack()
    for number in range(MAX_MESSAGES):
        pack.append(make_self_id(str(number)))
    assert len(pack) == MAX_MESSAGES
    expect_error(ErrorCode.OUT_OF_RANGE, pack.append, SelfId())
    assert len(pack) == MAX_MESSAGES


def test_get_out_of_range():
    pack = MessagePack()
    pack.append(make_self_id("only"))
    with pytest.raises(IndexError):
        pack[1]
    assert len(pack) == 1
    assert pack[0].description == "only"


def test_delete_shifts_messages():
    pack = MessagePack()
    names = ["a", "b", "c"]
    for name in names:
        pack.append(make_self_id(name))
    del pack[0]
    assert [message.description for message in pack] == names[1:]
    del pack[1]
    assert [message.description for message in pack] == names[1:2]


def test_delete_out_of_range():
    pack = MessagePack()
    with pytest.raises(IndexError):
        del pack[0]
    assert len(pack) == 0
    assert pack.message_count == 0


def test_replace():
    pack = MessagePack()
    pack.append(make_self_id("old"))
    pack.append(make_self_id("keep"))
    replacement = make_self_id("new")
    pack[0] = replacement
    assert pack[0] == replacement
    assert pack[1].description == "keep"
    assert len(pack) == 2


def test_replace_out_of_range():
    pack = MessagePack()
    with pytest.raises(IndexError):
        pack[0] = SelfId()
    assert len(pack) == 0


def test_constructor_copies_messages():
    message = make_self_id("one")
    pack = MessagePack(messages=[message])
    message.description = "two"
    assert pack[0].description == "one"


def test_validate_valid():
    pack = MessagePack()
    pack.append(SelfId())
    pack.validate()
    validate(pack)
    assert pack.message_count == 1


def test_validate_protocol_version():
    pack = MessagePack(protocol_version=5)
    expect_error(ErrorCode.INVALID_PROTOCOL_VERSION, pack.validate)
    pack.protocol_version = ProtocolVersion.PRIVATE_USE
    pack.validate()
    assert pack.protocol_version == ProtocolVersion.PRIVATE_USE


def test_validate_message_type():
    pack = MessagePack(message_type=MessageType.SYSTEM)
    expect_error(ErrorCode.UNKNOWN_MESSAGE_TYPE, pack.validate)


def test_validate_message_size():
    pack = MessagePack(message_size=MESSAGE_SIZE - 1)
    expect_error(ErrorCode.INVALID_MESSAGE_SIZE, pack.validate)


def test_validate_message_count():
    pack = MessagePack(messages=[SelfId()] * (MAX_MESSAGES + 1))
    expect_error(ErrorCode.INVALID_MESSAGE_COUNT, pack.validate)


def test_to_json_empty():
    assert MessagePack().to_json() == (
        '{"protocol_version": 2, "message_type": 15, "message_count": 0, "messages": []}'
    )


def test_to_json_with_messages():
    pack = MessagePack()
    members = [make_self_id("Bearmetal photo shoot"), OperatorId(), System()]
    for message in members:
        pack.append(message)
    data = json.loads(pack.to_json())
    assert data["message_count"] == len(members)
    assert data["message_type"] == MessageType.MESSAGE_PACK
    assert data["messages"] == [json.loads(message.to_json()) for message in members]


def test_generic_to_json_matches():
    pack = MessagePack()
    pack.append(make_self_id("x"))
    assert to_json(pack) == pack.to_json()