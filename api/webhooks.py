"""
Webhook endpoints for Gmail push notifications.

Pub/Sub push subscriptions POST one envelope per request. The handler runs
the envelope parser and notification decoder, hands the result to the sink
and translates the outcome into a status code:

- 200: notification decoded and accepted by the sink
- 400: body could not be decoded (Pub/Sub should not redeliver it as-is)
- 500: the sink failed; Pub/Sub redelivers
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request, status

from config import Settings
from pipeline import NotificationError, decode_notification, parse_envelope, status_for
from schemas.gmail import GmailNotification, WebhookAck
from schemas.pubsub import PubSubEnvelope
from sinks.base import BaseSink
from utils.logging import bind_message_id

logger = logging.getLogger(__name__)

DEFAULT_WEBHOOK_PATH = "/gmail-event"


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_sink(request: Request) -> BaseSink:
    """Sink injected into the application at construction time."""
    return request.app.state.sink


async def receive_gmail_event(
    request: Request,
    background_tasks: BackgroundTasks,
    settings: Settings = Depends(get_app_settings),
    sink: BaseSink = Depends(get_sink),
) -> WebhookAck:
    """
    Receive a Pub/Sub push delivery carrying a Gmail mailbox change.

    **Request Body:**
    ```json
    {
      "message": {
        "data": "eyJlbWFpbF9hZGRyZXNzIjoidXNlckBleGFtcGxlLmNvbSIsImhpc3RvcnlfaWQiOiIxMjM0NTYifQ==",
        "messageId": "unique_message_id",
        "publishTime": "2021-05-05T12:00:00.000Z"
      },
      "subscription": "projects/my-project/subscriptions/my-subscription"
    }
    ```

    Raises:
        HTTPException: 400 with a generic detail if decoding fails,
            500 if the sink fails in ``await`` mode
    """
    body = await request.body()

    try:
        envelope = parse_envelope(body)
        bind_message_id(envelope.message.message_id)
        notification = decode_notification(
            envelope.message.data, reject_empty=settings.reject_empty_notification_fields
        )
    except NotificationError as e:
        logger.warning(f"Rejected push delivery: {e}", extra=e.log_context())
        raise HTTPException(status_code=status_for(e), detail=e.public_detail) from e

    logger.info(
        "Decoded Gmail notification",
        extra={
            "subscription": envelope.subscription,
            "history_id": notification.history_id,
        },
    )

    if settings.sink_mode == "background":
        background_tasks.add_task(_deliver_in_background, sink, notification, envelope)
        return WebhookAck()

    try:
        await sink.deliver(notification, envelope)
    except Exception as e:
        logger.error(
            f"Sink '{sink.name}' failed: {e}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process notification",
        ) from e

    return WebhookAck()


async def _deliver_in_background(
    sink: BaseSink, notification: GmailNotification, envelope: PubSubEnvelope
) -> None:
    """Run the sink after the response is sent; failures can only be logged here."""
    try:
        await sink.deliver(notification, envelope)
    except Exception as e:
        logger.error(
            f"Background sink '{sink.name}' failed: {e}",
            exc_info=True,
        )


def create_webhook_router(path: str = DEFAULT_WEBHOOK_PATH) -> APIRouter:
    """
    Build the webhook router with the push endpoint mounted at ``path``.

    Only POST is registered; other methods get 405 from the framework.
    """
    router = APIRouter(tags=["Webhooks"])
    router.add_api_route(
        path,
        receive_gmail_event,
        methods=["POST"],
        status_code=status.HTTP_200_OK,
        response_model=WebhookAck,
        responses={
            400: {"description": "Undecodable push delivery"},
            500: {"description": "Sink failed to accept the notification"},
        },
    )
    return router
