"""Pytest configuration and shared fixtures.

Provides settings, a recording sink, envelope builders and a FastAPI test
client wired to the recording sink.
"""

import base64
import json

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from schemas.gmail import GmailNotification
from schemas.pubsub import PubSubEnvelope
from sinks.base import BaseSink

SAMPLE_DATA = "eyJlbWFpbF9hZGRyZXNzIjoidXNlckBleGFtcGxlLmNvbSIsImhpc3RvcnlfaWQiOiIxMjM0NTYifQ=="
SAMPLE_MESSAGE_ID = "unique_message_id"
SAMPLE_PUBLISH_TIME = "2021-05-05T12:00:00.000Z"
SAMPLE_SUBSCRIPTION = "projects/my-project/subscriptions/my-subscription"


class RecordingSink(BaseSink):
    """Sink that keeps every delivery for later assertions."""

    name = "recording"

    def __init__(self):
        self.received: list[tuple[GmailNotification, PubSubEnvelope]] = []
        self.closed = False

    async def deliver(self, notification, envelope):
        self.received.append((notification, envelope))

    async def close(self):
        self.closed = True

    @property
    def notifications(self) -> list[GmailNotification]:
        return [notification for notification, _ in self.received]


class FailingSink(BaseSink):
    """Sink whose downstream is unavailable."""

    name = "failing"

    def __init__(self):
        self.calls = 0

    async def deliver(self, notification, envelope):
        self.calls += 1
        raise ConnectionError("downstream unavailable: secret-host:5432")


def encode_payload(payload) -> str:
    """JSON-encode, UTF-8 encode and base64 encode an inner payload."""
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


def make_envelope(
    data: str = SAMPLE_DATA,
    message_id: str = SAMPLE_MESSAGE_ID,
    publish_time: str = SAMPLE_PUBLISH_TIME,
    subscription: str = SAMPLE_SUBSCRIPTION,
) -> dict:
    """Build a push envelope dict as Pub/Sub sends it."""
    return {
        "message": {
            "data": data,
            "messageId": message_id,
            "publishTime": publish_time,
        },
        "subscription": subscription,
    }


@pytest.fixture
def test_settings():
    """Create test-specific settings."""
    return Settings(
        _env_file=None,
        app_env="test",
        log_level="ERROR",  # Reduce noise in tests
        sink="logging",
        sink_mode="await",
    )


@pytest.fixture
def recording_sink():
    """Fresh recording sink per test."""
    return RecordingSink()


@pytest.fixture
def test_client(test_settings, recording_sink):
    """FastAPI test client with the recording sink injected."""
    app = create_app(settings=test_settings, sink=recording_sink)

    with TestClient(app) as client:
        yield client


@pytest.fixture
def sample_envelope():
    """The canonical happy-path envelope."""
    return make_envelope()


@pytest.fixture
def envelope_factory():
    """Builder for push envelope dicts."""
    return make_envelope


@pytest.fixture
def payload_encoder():
    """Encoder for inner notification payloads."""
    return encode_payload
