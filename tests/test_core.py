import pytest

from remoteid.core import (
    ErrorCode,
    MessageType,
    ProtocolVersion,
    RidError,
    error_to_string,
    is_valid_protocol_version,
    message_type_to_string,
    protocol_version_to_string,
)


@pytest.mark.parametrize(
    "message_type, expected",
    [
        (MessageType.BASIC_ID, "RID_MESSAGE_TYPE_BASIC_ID"),
        (MessageType.LOCATION, "RID_MESSAGE_TYPE_LOCATION"),
        (MessageType.AUTH, "RID_MESSAGE_TYPE_AUTH"),
        (MessageType.SELF_ID, "RID_MESSAGE_TYPE_SELF_ID"),
        (MessageType.SYSTEM, "RID_MESSAGE_TYPE_SYSTEM"),
        (MessageType.OPERATOR_ID, "RID_MESSAGE_TYPE_OPERATOR_ID"),
        (MessageType.MESSAGE_PACK, "RID_MESSAGE_TYPE_MESSAGE_PACK"),
    ],
)
def test_message_type_to_string(message_type, expected):
    assert message_type_to_string(message_type) == expected
    assert message_type_to_string(int(message_type)) == expected


def test_message_type_to_string_unknown():
    assert message_type_to_string(99) == "UNKNOWN"


@pytest.mark.parametrize(
    "version, expected",
    [
        (ProtocolVersion.VERSION_0, "RID_PROTOCOL_VERSION_0"),
        (ProtocolVersion.VERSION_1, "RID_PROTOCOL_VERSION_1"),
        (ProtocolVersion.VERSION_2, "RID_PROTOCOL_VERSION_2"),
        (ProtocolVersion.PRIVATE_USE, "RID_PROTOCOL_PRIVATE_USE"),
    ],
)
def test_protocol_version_to_string(version, expected):
    assert protocol_version_to_string(version) == expected


def test_protocol_version_to_string_unknown():
    assert protocol_version_to_string(7) == "UNKNOWN"


@pytest.mark.parametrize(
    "error, expected",
    [
        (ErrorCode.SUCCESS, "RID_SUCCESS"),
        (ErrorCode.NULL_POINTER, "RID_ERROR_NULL_POINTER"),
        (ErrorCode.BUFFER_TOO_LARGE, "RID_ERROR_BUFFER_TOO_LARGE"),
        (ErrorCode.INVALID_CHARACTER, "RID_ERROR_INVALID_CHARACTER"),
        (ErrorCode.INVALID_PROTOCOL_VERSION, "RID_ERROR_INVALID_PROTOCOL_VERSION"),
        (ErrorCode.INVALID_UUID_PADDING, "RID_ERROR_INVALID_UUID_PADDING"),
    ],
)
def test_error_to_string(error, expected):
    assert error_to_string(error) == expected


def test_every_error_has_a_distinct_name():
    names = {error_to_string(code) for code in ErrorCode}
    assert len(names) == len(ErrorCode)
    assert "UNKNOWN" not in names


def test_error_to_string_unknown():
    assert error_to_string(12345) == "UNKNOWN"


@pytest.mark.parametrize("version", [0, 1, 2, ProtocolVersion.PRIVATE_USE])
def test_valid_protocol_versions(version):
    assert is_valid_protocol_version(version) is True


@pytest.mark.parametrize("version", [3, 5, 14])
def test_invalid_protocol_versions(version):
    assert is_valid_protocol_version(version) is False


def test_rid_error_carries_code_and_name():
    error = RidError(ErrorCode.OUT_OF_RANGE)
    assert error.code is ErrorCode.OUT_OF_RANGE
    assert str(error) == "RID_ERROR_OUT_OF_RANGE"


def test_rid_error_is_value_error():
    error = RidError(ErrorCode.INVALID_CHARACTER)
    assert isinstance(error, ValueError)
    assert error.code is ErrorCode.INVALID_CHARACTER
    assert str(error) == "RID_ERROR_INVALID_CHARACTER"