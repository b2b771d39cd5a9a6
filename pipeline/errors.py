"""
Error taxonomy for the push decode pipeline.

Every failure is terminal for its request. Each error records which stage
failed and the underlying cause for logging; only ``public_detail`` is ever
returned to the caller.
"""

from enum import Enum

from pydantic import ValidationError


class ErrorKind(str, Enum):
    """Which class of input problem stopped the pipeline."""

    MALFORMED_ENVELOPE = "malformed_envelope"
    INVALID_ENCODING = "invalid_encoding"
    INVALID_NOTIFICATION_PAYLOAD = "invalid_notification_payload"


class NotificationError(Exception):
    """Base class for pipeline failures."""

    kind: ErrorKind
    # Same for every kind; the kind itself is only logged.
    public_detail = "Invalid push notification"

    def __init__(self, stage: str, message: str, cause: Exception | None = None):
        super().__init__(f"{stage}: {message}")
        self.stage = stage
        self.message = message
        self.cause = cause

    def log_context(self) -> dict[str, str]:
        """Fields suitable for ``extra=`` on a log call."""
        return {
            "error_kind": self.kind.value,
            "stage": self.stage,
            "cause": repr(self.cause) if self.cause is not None else self.message,
        }


class MalformedEnvelope(NotificationError):
    """Request body is not a well-formed push envelope."""

    kind = ErrorKind.MALFORMED_ENVELOPE


class InvalidEncoding(NotificationError):
    """``message.data`` is not valid base64, or not UTF-8 once decoded."""

    kind = ErrorKind.INVALID_ENCODING


class InvalidNotificationPayload(NotificationError):
    """Decoded payload is not a valid Gmail notification."""

    kind = ErrorKind.INVALID_NOTIFICATION_PAYLOAD


# HTTP status per error kind; must cover every ErrorKind.
ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.MALFORMED_ENVELOPE: 400,
    ErrorKind.INVALID_ENCODING: 400,
    ErrorKind.INVALID_NOTIFICATION_PAYLOAD: 400,
}


def status_for(error: NotificationError) -> int:
    """Return the HTTP status code a pipeline error maps to."""
    return ERROR_STATUS[error.kind]


def summarize_validation_error(error: ValidationError) -> str:
    """Compact one-line description of a pydantic ValidationError."""
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item["loc"]) or "<root>"
        parts.append(f"{loc}: {item['msg']}")
    return "; ".join(parts)
