"""Sink that records each notification in the application log."""

import logging

from schemas.gmail import GmailNotification
from schemas.pubsub import PubSubEnvelope
from sinks.base import BaseSink

logger = logging.getLogger(__name__)


class LoggingSink(BaseSink):
    """Logs notifications at INFO. Default when no downstream consumer is wired."""

    name = "logging"

    async def deliver(
        self, notification: GmailNotification, envelope: PubSubEnvelope
    ) -> None:
        logger.info(
            "Gmail notification received",
            extra={
                "email_address": notification.email_address,
                "history_id": notification.history_id,
                "message_id": envelope.message.message_id,
                "publish_time": envelope.message.publish_time,
                "subscription": envelope.subscription,
            },
        )
