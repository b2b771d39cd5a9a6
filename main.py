"""
FastAPI application entrypoint for the Gmail push ingestor.

- Primary: Expose create_app() factory for Uvicorn (--factory) in all environments.
- Convenience: Allow `python main.py` for local development runs.

Architecture:
- Pub/Sub push webhook -> envelope parser -> notification decoder -> sink
- The sink is injected at construction time; no process-wide mutable state
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.webhooks import create_webhook_router
from config import Settings, get_settings
from sinks import BaseSink, create_sink
from utils.logging import RequestIdMiddleware, configure_logging

# Configure logging at import time
configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Async context manager for application lifespan events.

    Logs startup configuration and closes the sink on shutdown.
    """
    settings: Settings = app.state.settings
    sink: BaseSink = app.state.sink

    logger.info(
        "Starting Gmail push ingestor",
        extra={
            "env": settings.app_env,
            "webhook_path": settings.webhook_path,
            "sink": sink.name,
            "sink_mode": settings.sink_mode,
        },
    )

    yield  # Application is running

    logger.info("Shutting down Gmail push ingestor")
    await sink.close()


def create_app(settings: Settings | None = None, sink: BaseSink | None = None) -> FastAPI:
    """
    Application factory for FastAPI.

    Args:
        settings: Application settings (if None, uses get_settings())
        sink: Consumer for decoded notifications (if None, built from settings)

    Returns:
        FastAPI: Configured application instance
    """
    if settings is None:
        settings = get_settings()
    if sink is None:
        sink = create_sink(settings)

    app = FastAPI(
        title="Gmail Push Ingestor",
        description="Receives Gmail watch notifications from Pub/Sub push subscriptions",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_dev else None,  # Disable in production
        redoc_url="/redoc" if settings.is_dev else None,
    )

    app.state.settings = settings
    app.state.sink = sink

    # --- Middleware ---

    # Request ID tracking (for correlation across logs)
    app.add_middleware(RequestIdMiddleware)

    # --- Routes ---

    app.include_router(create_webhook_router(settings.webhook_path))

    @app.get("/health", tags=["System"])
    async def health_check():
        """Health check endpoint for load balancers and monitoring."""
        return {"status": "healthy", "env": settings.app_env}

    logger.info(
        "FastAPI application created",
        extra={"env": settings.app_env, "routes_count": len(app.routes)},
    )

    return app


if __name__ == "__main__":
    """
    Development server entry point.

    Run with: python main.py

    In production, use:
        uvicorn main:create_app --factory --host 0.0.0.0 --port 8080
    """
    import uvicorn

    settings = get_settings()

    logger.info(f"Server is running on http://{settings.host}:{settings.port}")

    uvicorn.run(
        "main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.is_dev,
        log_level=settings.log_level.lower(),
    )
