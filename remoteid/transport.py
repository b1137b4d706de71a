"""Radio transports over which Remote ID messages are broadcast."""

from __future__ import annotations

from enum import IntEnum

from remoteid.core import _member


class Transport(IntEnum):
    """Broadcast transport."""

    BLUETOOTH_LEGACY = 0
    BLUETOOTH_LONG_RANGE = 1
    WIFI_NAN = 2
    WIFI_BEACON = 3


def transport_to_string(transport: int) -> str:
    """Return the symbolic name of a transport, or "UNKNOWN"."""
    member = _member(Transport, transport)
    return "UNKNOWN" if member is None else f"RID_TRANSPORT_{member.name}"