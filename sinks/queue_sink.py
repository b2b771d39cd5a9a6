"""
In-process queue sink.

Hands notifications to an ``asyncio.Queue`` so a consumer task in the same
process (e.g. a Gmail history sync worker) can process them off the request
path.
"""

import asyncio
import logging
from dataclasses import dataclass

from schemas.gmail import GmailNotification
from schemas.pubsub import PubSubEnvelope
from sinks.base import BaseSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueuedNotification:
    """Queue item: the notification plus the delivery metadata it came with."""

    notification: GmailNotification
    message_id: str
    publish_time: str
    subscription: str


class QueueSink(BaseSink):
    """
    Puts each notification on a bounded queue without waiting.

    When the queue is full ``asyncio.QueueFull`` propagates to the caller so
    the delivery can be refused and redelivered later.
    """

    name = "queue"

    def __init__(self, maxsize: int = 0):
        self.queue: asyncio.Queue[QueuedNotification] = asyncio.Queue(maxsize=maxsize)

    async def deliver(
        self, notification: GmailNotification, envelope: PubSubEnvelope
    ) -> None:
        item = QueuedNotification(
            notification=notification,
            message_id=envelope.message.message_id,
            publish_time=envelope.message.publish_time,
            subscription=envelope.subscription,
        )
        self.queue.put_nowait(item)
        logger.debug(
            "Notification queued",
            extra={"message_id": item.message_id, "queue_size": self.queue.qsize()},
        )

    async def close(self) -> None:
        pending = self.queue.qsize()
        if pending:
            logger.warning("Queue sink closed with pending notifications", extra={"pending": pending})
