"""
Logging utilities for the Gmail push ingestor.

Provides:
- Request ID and Pub/Sub message ID tracking across async contexts
- Request ID middleware for FastAPI
- Root logger configuration (stdout, request/message-aware format)
"""

import logging
import sys
import uuid
from contextvars import ContextVar

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from config import Settings, get_settings

# Per-request correlation ids; "-" until known
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")
message_id_var: ContextVar[str] = ContextVar("pubsub_message_id", default="-")


def bind_message_id(message_id: str) -> None:
    """Attach the Pub/Sub message id to every later log record of this request."""
    message_id_var.set(message_id)


class DeliveryContextFilter(logging.Filter):
    """
    Injects ``request_id`` and ``pubsub_message_id`` into every log record.

    Records logged before the envelope is parsed (or outside a request) get
    "-", so the formatter can always use both fields.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("-")
        record.pubsub_message_id = message_id_var.get("-")
        return True


class RequestIdMiddleware(BaseHTTPMiddleware):
    """
    FastAPI middleware that generates and tracks request IDs.

    - Reuses an incoming X-Request-ID or generates a UUID
    - Starts each request with no Pub/Sub message id bound
    - Adds X-Request-ID header to responses
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

        request_token = request_id_var.set(request_id)
        message_token = message_id_var.set("-")

        try:
            response: Response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            message_id_var.reset(message_token)
            request_id_var.reset(request_token)


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure the root logger with request and message id formatting.

    Sets up:
    - Request and message ID injection via DeliveryContextFilter
    - Log format with timestamp, level, module, function, request_id, message id
    - Output to stdout (container/cloud-friendly)
    - Log level from settings
    """
    if settings is None:
        settings = get_settings()

    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s.%(funcName)s | %(request_id)s | msg=%(pubsub_message_id)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Stream to stdout (good for Docker, Cloud Run, etc.)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.addFilter(DeliveryContextFilter())

    root = logging.getLogger()
    root.handlers.clear()  # Avoid duplicate handlers on reload
    root.setLevel(level)
    root.addHandler(handler)

    # Reduce noise from common libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
