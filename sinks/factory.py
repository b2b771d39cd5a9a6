"""Build the configured sink."""

from config import Settings, get_settings
from sinks.base import BaseSink
from sinks.logging_sink import LoggingSink
from sinks.queue_sink import QueueSink


def create_sink(settings: Settings | None = None) -> BaseSink:
    """
    Create the sink named by ``settings.sink``.

    Args:
        settings: Application settings (if None, uses get_settings())

    Returns:
        BaseSink: Configured sink instance

    Raises:
        ValueError: If the sink name is unknown
    """
    if settings is None:
        settings = get_settings()

    if settings.sink == "logging":
        return LoggingSink()
    if settings.sink == "queue":
        return QueueSink(maxsize=settings.queue_sink_maxsize)

    raise ValueError(f"Unsupported sink: {settings.sink}")
