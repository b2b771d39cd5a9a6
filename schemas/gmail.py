"""
Gmail mailbox-change notification schemas.

The decoded payload of a Gmail watch push, plus the webhook's ack body.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class GmailNotification(BaseModel):
    """
    A single mailbox change: which mailbox, and the history id to sync from.

    ``history_id`` is kept as a string; Gmail history ids can exceed what some
    consumers hold in a 53-bit float.
    """

    email_address: StrictStr = Field(
        description="Mailbox the change concerns",
        examples=["user@example.com"],
    )
    history_id: StrictStr = Field(
        description="Opaque, monotonically increasing per-mailbox change marker",
        examples=["123456"],
    )

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "examples": [{"email_address": "user@example.com", "history_id": "123456"}]
        },
    )

    @property
    def has_empty_fields(self) -> bool:
        """True when either field decoded to an empty string."""
        return not self.email_address or not self.history_id


class WebhookAck(BaseModel):
    """Response body for an accepted push delivery."""

    status: Literal["ok"] = "ok"
