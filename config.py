"""Configuration for the Gmail push ingestor.

Typed, 12-factor settings via Pydantic v2. Controls logging, the bind address,
the webhook route and how decoded notifications are handed to the sink.
No I/O or side effects at import.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    # --- Pydantic model config  ---
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- App / Logging ---
    app_env: Literal["development", "test", "production"] = Field(
        default="development",
        description="Application environment (affects logging, docs exposure, etc.)",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="DEBUG", description="Python logging verbosity level."
    )

    @property
    def is_prod(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @property
    def is_dev(self) -> bool:
        """Check if running in development environment."""
        return self.app_env == "development"

    @property
    def log_level_int(self) -> int:
        """Return stdlib logging level as int (e.g., logging.INFO)."""
        import logging

        return getattr(logging, self.log_level, logging.INFO)

    # --- Server ---
    host: str = Field(default="127.0.0.1", description="Interface the server binds to.")
    port: int = Field(default=8080, ge=1, le=65535, description="Port the server binds to.")

    # --- Webhook ---
    webhook_path: str = Field(
        default="/gmail-event",
        description="Route that receives Pub/Sub push deliveries.",
    )
    reject_empty_notification_fields: bool = Field(
        default=False,
        description=(
            "Reject notifications whose email_address or history_id is an empty string. "
            "When False they are accepted and logged as suspicious."
        ),
    )

    # --- Sink hand-off ---
    sink: Literal["logging", "queue"] = Field(
        default="logging",
        description="Default sink used when none is injected into create_app().",
    )
    sink_mode: Literal["await", "background"] = Field(
        default="await",
        description=(
            "'await' runs the sink before responding; "
            "'background' schedules it after the 200 response is sent."
        ),
    )
    queue_sink_maxsize: int = Field(
        default=1000,
        ge=0,
        description="Capacity of the in-process queue sink (0 means unbounded).",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide singleton Settings instance (FastAPI DI-friendly).

    Returns:
        Settings: The application settings instance.
    """
    return Settings()
