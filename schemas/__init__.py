"""
Pydantic schemas for the Gmail push ingestor.

Provides data models for:
- The Pub/Sub push envelope (wire level)
- The decoded Gmail notification (domain level)
- The webhook acknowledgement body
"""

from schemas.gmail import GmailNotification, WebhookAck
from schemas.pubsub import PubSubEnvelope, PubSubMessageData

__all__ = [
    # Pub/Sub
    "PubSubEnvelope",
    "PubSubMessageData",
    # Gmail
    "GmailNotification",
    "WebhookAck",
]
