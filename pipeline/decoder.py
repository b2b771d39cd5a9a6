"""
Notification decoder.

``message.data`` is a Gmail notification serialized as JSON, encoded as UTF-8
and then as standard padded base64. Decoding runs the three stages in order
and stops at the first failure:

1. base64 text -> bytes        (InvalidEncoding)
2. bytes -> UTF-8 text         (InvalidEncoding)
3. JSON text -> notification   (InvalidNotificationPayload)
"""

import base64
import binascii
import json
import logging

from pydantic import ValidationError

from pipeline.errors import (
    InvalidEncoding,
    InvalidNotificationPayload,
    summarize_validation_error,
)
from schemas.gmail import GmailNotification

logger = logging.getLogger(__name__)


def decode_base64(data: str) -> bytes:
    """
    Decode standard, padded base64.

    Characters outside the alphabet are rejected, and so is non-canonical
    input whose final character carries non-zero trailing bits.
    """
    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncoding("base64", f"Error decoding base64 data: {e}", cause=e) from e

    if base64.b64encode(raw) != data.encode("ascii"):
        raise InvalidEncoding("base64", "Error decoding base64 data: non-canonical trailing bits")
    return raw


def decode_utf8(raw: bytes) -> str:
    """Decode bytes as strict UTF-8."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncoding("utf8", f"Decoded data is not UTF-8: {e}", cause=e) from e


def parse_notification(text: str, *, reject_empty: bool = False) -> GmailNotification:
    """
    Parse decoded JSON text into a GmailNotification.

    Args:
        text: JSON object with ``email_address`` and ``history_id`` strings
        reject_empty: Treat empty field values as invalid instead of suspicious

    Returns:
        GmailNotification: The decoded notification

    Raises:
        InvalidNotificationPayload: If the text is not JSON, not an object,
            or a field is missing or not a string
    """
    try:
        notification = GmailNotification.model_validate_json(text)
    except ValidationError as e:
        raise InvalidNotificationPayload(
            "notification", summarize_validation_error(e), cause=e
        ) from e

    if notification.has_empty_fields:
        if reject_empty:
            raise InvalidNotificationPayload(
                "notification", "email_address and history_id must be non-empty"
            )
        logger.warning(
            "Notification has empty fields",
            extra={
                "email_address_empty": not notification.email_address,
                "history_id_empty": not notification.history_id,
            },
        )

    return notification


def decode_notification(data: str, *, reject_empty: bool = False) -> GmailNotification:
    """Run all three decode stages over ``message.data``."""
    raw = decode_base64(data)
    text = decode_utf8(raw)
    return parse_notification(text, reject_empty=reject_empty)


def encode_notification(notification: GmailNotification) -> str:
    """
    Encode a notification the way the publisher does (JSON, UTF-8, base64).

    Inverse of ``decode_notification``; used to build test and dev envelopes.
    """
    text = json.dumps(notification.model_dump(), separators=(",", ":"))
    return base64.b64encode(text.encode("utf-8")).decode("ascii")
