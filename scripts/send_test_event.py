#!/usr/bin/env python3
"""
Send a Pub/Sub-style push delivery to a running ingestor.

Usage:
    python scripts/send_test_event.py [--email user@example.com] [--history-id 123456] [--raw-data DATA]

Environment variables:
    INGESTOR_URL - Base URL of the ingestor (default: http://127.0.0.1:8080)
    WEBHOOK_PATH - Webhook route (default: /gmail-event)
"""

import argparse
import asyncio
import os
import sys
import uuid
from datetime import UTC, datetime

import httpx
from dotenv import load_dotenv

# Add parent directory to path to import from app
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pipeline import encode_notification  # noqa: E402
from schemas.gmail import GmailNotification  # noqa: E402

load_dotenv()

INGESTOR_URL = os.getenv("INGESTOR_URL", "http://127.0.0.1:8080")
WEBHOOK_PATH = os.getenv("WEBHOOK_PATH", "/gmail-event")
SUBSCRIPTION = "projects/my-project/subscriptions/my-subscription"

# Color codes for output
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
RED = "\033[0;31m"
NC = "\033[0m"  # No Color


def print_colored(color: str, message: str) -> None:
    """Print colored message."""
    print(f"{color}{message}{NC}")


def build_envelope(data: str) -> dict:
    """Wrap encoded message data the way a push subscription does."""
    return {
        "message": {
            "data": data,
            "messageId": uuid.uuid4().hex,
            "publishTime": datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        },
        "subscription": SUBSCRIPTION,
    }


async def main(email: str, history_id: str, raw_data: str | None) -> None:
    """Post one envelope and report the response."""
    if raw_data is None:
        notification = GmailNotification(email_address=email, history_id=history_id)
        data = encode_notification(notification)
    else:
        data = raw_data

    envelope = build_envelope(data)
    url = f"{INGESTOR_URL}{WEBHOOK_PATH}"

    print_colored(YELLOW, f"Posting message {envelope['message']['messageId']} to {url}")

    async with httpx.AsyncClient() as client:
        try:
            response = await client.post(url, json=envelope, timeout=10.0)
        except httpx.RequestError as e:
            print_colored(RED, f"✗ Ingestor not available at {INGESTOR_URL}: {e}")
            print_colored(YELLOW, "  Make sure the server is running: python main.py")
            sys.exit(1)

    color = GREEN if response.is_success else RED
    print_colored(color, f"{response.status_code} {response.text}")
    if not response.is_success:
        sys.exit(1)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Send a test Gmail push notification")
    parser.add_argument("--email", default="user@example.com", help="Mailbox address")
    parser.add_argument("--history-id", default="123456", help="Gmail history id")
    parser.add_argument(
        "--raw-data",
        default=None,
        help="Send this string as message.data verbatim (to exercise rejections)",
    )
    args = parser.parse_args()

    asyncio.run(main(email=args.email, history_id=args.history_id, raw_data=args.raw_data))
