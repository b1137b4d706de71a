"""System message: operator location, area of operation and classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from remoteid.core import (
    ErrorCode,
    MessageType,
    ProtocolVersion,
    RidError,
    _member,
    _validate_header,
)

SYSTEM_TIMESTAMP_EPOCH = 1546300800
"""Unix time of 2019-01-01 00:00:00 UTC, the origin of System timestamps."""

OPERATOR_ALTITUDE_INVALID = -1000.0
OPERATOR_ALTITUDE_INVALID_ENCODED = 0
ALTITUDE_MIN = -1000.0
ALTITUDE_MAX = 31767.0
AREA_RADIUS_MAX = 2550
AREA_CEILING_MIN = ALTITUDE_MIN
AREA_CEILING_MAX = ALTITUDE_MAX
AREA_FLOOR_MIN = ALTITUDE_MIN
AREA_FLOOR_MAX = ALTITUDE_MAX

LATITUDE_LIMIT_ENCODED = 900_000_000
LONGITUDE_LIMIT_ENCODED = 1_800_000_000

OPERATOR_LOCATION_TYPE_MAX = 3
CLASSIFICATION_TYPE_MAX = 7
UA_CLASSIFICATION_CATEGORY_MAX = 15
UA_CLASSIFICATION_CLASS_MAX = 15


class OperatorLocationType(IntEnum):
    """Source of the operator location."""

    TAKEOFF = 0
    DYNAMIC = 1
    FIXED = 2


class ClassificationType(IntEnum):
    """Classification scheme of the aircraft."""

    UNDECLARED = 0
    EUROPEAN_UNION = 1


class UaClassificationCategory(IntEnum):
    """EU category of operation."""

    UNDEFINED = 0
    OPEN = 1
    SPECIFIC = 2
    CERTIFIED = 3


class UaClassificationClass(IntEnum):
    """EU aircraft class."""

    UNDEFINED = 0
    CLASS_0 = 1
    CLASS_1 = 2
    CLASS_2 = 3
    CLASS_3 = 4
    CLASS_4 = 5
    CLASS_5 = 6
    CLASS_6 = 7


def operator_location_type_to_string(location_type: int) -> str:
    """Return the symbolic name of an operator location type, or "UNKNOWN"."""
    member = _member(OperatorLocationType, location_type)
    return "UNKNOWN" if member is None else f"RID_OPERATOR_LOCATION_TYPE_{member.name}"


def classification_type_to_string(classification_type: int) -> str:
    """Return the symbolic name of a classification type, or "UNKNOWN"."""
    member = _member(ClassificationType, classification_type)
    return "UNKNOWN" if member is None else f"RID_CLASSIFICATION_TYPE_{member.name}"


def ua_classification_category_to_string(category: int) -> str:
    """Return the symbolic name of a UA category, or "UNKNOWN"."""
    member = _member(UaClassificationCategory, category)
    return "UNKNOWN" if member is None else f"RID_UA_CLASSIFICATION_CATEGORY_{member.name}"


def ua_classification_class_to_string(ua_class: int) -> str:
    """Return the symbolic name of a UA class, or "UNKNOWN"."""
    member = _member(UaClassificationClass, ua_class)
    if member is None:
        return "UNKNOWN"
    return f"RID_UA_CLASSIFICATION_CLASS_{member.name.removeprefix('CLASS_')}"


_INT_LIMITS = {
    "operator_location_type": OPERATOR_LOCATION_TYPE_MAX,
    "classification_type": CLASSIFICATION_TYPE_MAX,
    "ua_classification_category": UA_CLASSIFICATION_CATEGORY_MAX,
    "ua_classification_class": UA_CLASSIFICATION_CLASS_MAX,
    "area_count": 0xFFFF,
    "timestamp": 0xFFFFFFFF,
}


def _encode_degrees(degrees: float) -> int:
    scaled = degrees * 10000000.0
    return int(scaled + 0.5) if degrees >= 0.0 else int(scaled - 0.5)


def _encode_altitude(altitude: float) -> int:
    return int(((altitude + 1000.0) / 0.5) + 0.5)


def _decode_altitude(raw: int) -> float:
    return (raw * 0.5) - 1000.0


def _check_altitude(altitude: float, low: float, high: float) -> None:
    if altitude < low or altitude > high:
        raise RidError(ErrorCode.OUT_OF_RANGE)


@dataclass
class System:
    """System message.

    Fields prefixed with ``raw_`` hold the encoded wire values; the
    matching properties convert to and from physical units.
    """

    operator_location_type: int = OperatorLocationType.TAKEOFF
    classification_type: int = ClassificationType.UNDECLARED
    ua_classification_category: int = UaClassificationCategory.UNDEFINED
    ua_classification_class: int = UaClassificationClass.UNDEFINED
    raw_operator_latitude: int = 0
    raw_operator_longitude: int = 0
    raw_operator_altitude: int = 0
    area_count: int = 1
    raw_area_radius: int = 0
    raw_area_ceiling: int = 0
    raw_area_floor: int = 0
    timestamp: int = 0
    protocol_version: int = ProtocolVersion.VERSION_2
    message_type: int = MessageType.SYSTEM

    def __setattr__(self, name: str, value: object) -> None:
        limit = _INT_LIMITS.get(name)
        if limit is not None and not 0 <= value <= limit:  # type: ignore[operator]
            raise RidError(ErrorCode.OUT_OF_RANGE)
        super().__setattr__(name, value)

    @property
    def operator_latitude(self) -> float:
        """Operator latitude in degrees."""
        return self.raw_operator_latitude / 10000000.0

    @operator_latitude.setter
    def operator_latitude(self, degrees: float) -> None:
        if degrees > 90.0 or degrees < -90.0:
            raise RidError(ErrorCode.OUT_OF_RANGE)
        self.raw_operator_latitude = _encode_degrees(degrees)

    @property
    def operator_longitude(self) -> float:
        """Operator longitude in degrees."""
        return self.raw_operator_longitude / 10000000.0

    @operator_longitude.setter
    def operator_longitude(self, degrees: float) -> None:
        if degrees > 180.0 or degrees < -180.0:
            raise RidError(ErrorCode.OUT_OF_RANGE)
        self.raw_operator_longitude = _encode_degrees(degrees)

    @property
    def operator_altitude(self) -> float:
        """Operator geodetic altitude in meters."""
        return _decode_altitude(self.raw_operator_altitude)

    @operator_altitude.setter
    def operator_altitude(self, altitude: float) -> None:
        if altitude == OPERATOR_ALTITUDE_INVALID:
            self.raw_operator_altitude = OPERATOR_ALTITUDE_INVALID_ENCODED
            return
        _check_altitude(altitude, ALTITUDE_MIN, ALTITUDE_MAX)
        self.raw_operator_altitude = _encode_altitude(altitude)

    @property
    def area_radius(self) -> int:
        """Radius of the area of operation in meters, in steps of ten."""
        return self.raw_area_radius * 10

    @area_radius.setter
    def area_radius(self, meters: int) -> None:
        if meters < 0 or meters > AREA_RADIUS_MAX:
            raise RidError(ErrorCode.OUT_OF_RANGE)
        self.raw_area_radius = int(meters) // 10

    @property
    def area_ceiling(self) -> float:
        """Ceiling of the area of operation in meters."""
        return _decode_altitude(self.raw_area_ceiling)

    @area_ceiling.setter
    def area_ceiling(self, altitude: float) -> None:
        _check_altitude(altitude, AREA_CEILING_MIN, AREA_CEILING_MAX)
        self.raw_area_ceiling = _encode_altitude(altitude)

    @property
    def area_floor(self) -> float:
        """Floor of the area of operation in meters."""
        return _decode_altitude(self.raw_area_floor)

    @area_floor.setter
    def area_floor(self, altitude: float) -> None:
        _check_altitude(altitude, AREA_FLOOR_MIN, AREA_FLOOR_MAX)
        self.raw_area_floor = _encode_altitude(altitude)

    @property
    def unixtime(self) -> int:
        """The timestamp as seconds since the Unix epoch."""
        return (self.timestamp + SYSTEM_TIMESTAMP_EPOCH) & 0xFFFFFFFF

    @unixtime.setter
    def unixtime(self, unixtime: int) -> None:
        self.timestamp = (unixtime - SYSTEM_TIMESTAMP_EPOCH) & 0xFFFFFFFF

    def validate(self) -> None:
        """Raise RidError if any field holds an invalid value."""
        _validate_header(self.protocol_version, self.message_type, MessageType.SYSTEM)
        if not -LATITUDE_LIMIT_ENCODED <= self.raw_operator_latitude <= LATITUDE_LIMIT_ENCODED:
            raise RidError(ErrorCode.INVALID_LATITUDE)
        if not -LONGITUDE_LIMIT_ENCODED <= self.raw_operator_longitude <= LONGITUDE_LIMIT_ENCODED:
            raise RidError(ErrorCode.INVALID_LONGITUDE)

    def to_json(self) -> str:
        """Return the message as a JSON object string."""
        return (
            f'{{"protocol_version": {int(self.protocol_version)}, '
            f'"message_type": {int(self.message_type)}, '
            f'"operator_location_type": {int(self.operator_location_type)}, '
            f'"classification_type": {int(self.classification_type)}, '
            f'"ua_classification_category": {int(self.ua_classification_category)}, '
            f'"ua_classification_class": {int(self.ua_classification_class)}, '
            f'"operator_latitude": {self.operator_latitude:f}, '
            f'"operator_longitude": {self.operator_longitude:f}, '
            f'"operator_altitude": {self.operator_altitude:f}, '
            f'"area_count": {int(self.area_count)}, '
            f'"area_radius": {self.area_radius}, '
            f'"area_ceiling": {self.area_ceiling:f}, '
            f'"area_floor": {self.area_floor:f}, '
            f'"timestamp": {int(self.timestamp)}}}'
        )