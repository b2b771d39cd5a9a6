"""
Notification sinks.

Provides the sink interface, the built-in sinks and a settings-driven factory.
"""

from sinks.base import BaseSink
from sinks.factory import create_sink
from sinks.logging_sink import LoggingSink
from sinks.queue_sink import QueuedNotification, QueueSink

__all__ = [
    "BaseSink",
    "LoggingSink",
    "QueueSink",
    "QueuedNotification",
    "create_sink",
]
