"""
Push decode pipeline.

Envelope parser followed by the notification decoder; both are pure and
hold no state between calls.
"""

from pipeline.decoder import (
    decode_base64,
    decode_notification,
    decode_utf8,
    encode_notification,
    parse_notification,
)
from pipeline.envelope import parse_envelope
from pipeline.errors import (
    ERROR_STATUS,
    ErrorKind,
    InvalidEncoding,
    InvalidNotificationPayload,
    MalformedEnvelope,
    NotificationError,
    status_for,
)

__all__ = [
    "ERROR_STATUS",
    "ErrorKind",
    "InvalidEncoding",
    "InvalidNotificationPayload",
    "MalformedEnvelope",
    "NotificationError",
    "decode_base64",
    "decode_notification",
    "decode_utf8",
    "encode_notification",
    "parse_envelope",
    "parse_notification",
    "status_for",
]
