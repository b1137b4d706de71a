"""Build, validate and write as JSON Remote ID Self-ID, Operator ID, System and message pack messages."""

__version__ = "0.2.0.dev0"

__all__ = [
    "core",
    "message",
    "message_pack",
    "operator_id",
    "self_id",
    "system",
    "transport",
    "version",
]