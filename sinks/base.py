"""
Base interface for notification sinks.

A sink is whatever consumes a decoded notification after the webhook has
validated it: a log line, an in-process queue, a worker. The webhook only
needs to call it; retries and timeouts belong to the sink.
"""

from abc import ABC, abstractmethod

from schemas.gmail import GmailNotification
from schemas.pubsub import PubSubEnvelope


class BaseSink(ABC):
    """Abstract base class for notification sinks."""

    name: str = "base"

    @abstractmethod
    async def deliver(
        self, notification: GmailNotification, envelope: PubSubEnvelope
    ) -> None:
        """
        Accept one decoded notification.

        Args:
            notification: The decoded Gmail notification
            envelope: The envelope it arrived in (message id, publish time,
                subscription), for dedupe and tracing
        """

    async def close(self) -> None:
        """Release resources on application shutdown."""
