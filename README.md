# remoteid

A small, dependency-free Python library for building, validating and
writing out as JSON the Self-ID, Operator ID and System messages of drone
Remote ID (ASTM F3411-22a), and for grouping messages into message packs.

Messages are plain Python dataclasses. Setting a field to a value the
specification does not allow raises `RidError`, and each message has a
`validate()` method that checks the whole message.

## Installation

```
pip install remoteid
```

Python 3.10 or later is required. There are no runtime dependencies.

## What is included

| Module                  | Contents                                                          |
|-------------------------|-------------------------------------------------------------------|
| `remoteid.core`         | `MessageType`, `ProtocolVersion`, `ErrorCode`, `RidError` and name functions |
| `remoteid.self_id`      | `SelfId` message and `DescriptionType`                            |
| `remoteid.operator_id`  | `OperatorId` message and `OperatorIdType`                         |
| `remoteid.system`       | `System` message, operator location type and UA classification   |
| `remoteid.message_pack` | `MessagePack`, a container of up to nine messages                 |
| `remoteid.message`      | Generic `get_type`, `get_protocol_version`, `validate`, `to_json` |
| `remoteid.transport`    | `Transport` (Bluetooth legacy / long range, Wi-Fi NAN / beacon)   |
| `remoteid.version`      | `version_to_string()`                                             |

New messages start with protocol version 2 (`ProtocolVersion.VERSION_2`)
and the message type of their class.

## Usage

### Self ID

```python
from remoteid.self_id import SelfId, DescriptionType

message = SelfId()
message.description_type = DescriptionType.TEXT
message.description = "Survey flight"

message.validate()
print(message.to_json())
```

Descriptions are limited to 23 ASCII characters; anything longer raises
`RidError` with `ErrorCode.BUFFER_TOO_LARGE`, and non-ASCII text raises
`RidError` with `ErrorCode.INVALID_CHARACTER`. The stored bytes are kept in
`raw_description`.

### Operator ID

```python
from remoteid.operator_id import OperatorId

operator = OperatorId()
operator.operator_id = "OP-EXAMPLE-0001"
operator.validate()
print(operator.to_json())
```

Operator IDs are limited to 20 ASCII characters and are stored in
`raw_operator_id`.

### System

```python
from remoteid.system import System, OperatorLocationType

system = System()
system.operator_location_type = OperatorLocationType.TAKEOFF
system.operator_latitude = 60.1699
system.operator_longitude = 24.9384
system.operator_altitude = 25.0
system.area_radius = 500
system.area_ceiling = 120.0
system.area_floor = 0.0
system.unixtime = 1700000000

system.validate()
print(system.to_json())
```

Physical values are converted to their encoded form on assignment and kept
in the `raw_` fields: latitude and longitude in units of 10^-7 degrees,
altitudes in half metres above -1000 m, the area radius in steps of ten
metres. `timestamp` counts seconds since 2019-01-01 00:00:00 UTC, and
`unixtime` reads and writes the same value as Unix time. Values outside
their range (latitude beyond ±90, longitude beyond ±180, altitudes outside
-1000 to 31767 m, a radius above 2550 m, an enumeration field above its
maximum) raise `RidError` with `ErrorCode.OUT_OF_RANGE`.

### Errors

Invalid input raises `remoteid.core.RidError`, a subclass of `ValueError`.
The error carries an `ErrorCode` in its `code` attribute, and
`error_to_string` turns a code into its name:

```python
from remoteid.core import RidError, error_to_string
from remoteid.self_id import SelfId

message = SelfId()
try:
    message.description = "This description is far too long to fit"
except RidError as error:
    print(error_to_string(error.code))  # RID_ERROR_BUFFER_TOO_LARGE
```

`validate()` raises `ErrorCode.INVALID_PROTOCOL_VERSION` for a version
other than 0, 1, 2 or private use (15), and `ErrorCode.UNKNOWN_MESSAGE_TYPE`
when the message type does not match the class.

### Message packs

A `MessagePack` behaves like a short list of messages. Messages are copied
when they are added, so later changes to the original do not reach the pack.

```python
from remoteid.message_pack import MessagePack
from remoteid.operator_id import OperatorId
from remoteid.self_id import SelfId

pack = MessagePack()
pack.append(SelfId())
pack.append(OperatorId())

print(len(pack))
for message in pack:
    print(message.to_json())

del pack[0]
pack.validate()
print(pack.to_json())
```

A pack holds at most nine messages; appending a tenth raises `RidError`
with `ErrorCode.OUT_OF_RANGE`. Indexing, replacing and deleting use the
usual list indices.

### Working with any message

The functions in `remoteid.message` dispatch on the message type, so you
can handle messages without knowing their class in advance:

```python
from remoteid import message
from remoteid.core import message_type_to_string
from remoteid.self_id import SelfId

msg = SelfId()
print(message_type_to_string(message.get_type(msg)))  # RID_MESSAGE_TYPE_SELF_ID
message.validate(msg)
print(message.to_json(msg))
```

`validate` raises `RidError` for an unknown message type and accepts
authentication messages without checks. `to_json` writes a message that has
no `to_json` of its own, or whose type is unknown, as just its protocol
version and message type.

### Names of enumerated values

Each enumeration has a matching `*_to_string` function that returns the
canonical name of a value, or `"UNKNOWN"` for values outside the
specification: `message_type_to_string`, `protocol_version_to_string`,
`error_to_string`, `description_type_to_string`,
`operator_id_type_to_string`, `operator_location_type_to_string`,
`classification_type_to_string`, `ua_classification_category_to_string`,
`ua_classification_class_to_string` and `transport_to_string`.

## What this package does not do

- It has no classes for the Basic ID, Location or Authentication messages.
- It does not encode messages to, or decode them from, the 25-byte wire
  format; `to_json` is the only output form. Text fields are written into
  the JSON as they are, without escaping.
- It does not send or receive anything: `Transport` only names the radio
  transports.
- It has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```