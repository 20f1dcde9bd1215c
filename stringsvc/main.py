"""stringsvc — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Service wired as Service -> Logging -> Instrumenting before any route is built
    - Logger and metrics registry are injected, never read from ambient globals
      by the service layers

Design Decisions:
    - create_app factory: tests build isolated apps with their own CollectorRegistry,
      production uses the module-level `app` (uvicorn stringsvc.main:app)
    - serve() is the console script; a failure to bind the port is the only
      fatal condition and is left to uvicorn to report
"""

import logging

import uvicorn
from fastapi import FastAPI
from prometheus_client import REGISTRY, CollectorRegistry

from stringsvc.api.error_handlers import register_error_handlers
from stringsvc.api.routes import health, metrics, strings
from stringsvc.config import Settings, get_settings
from stringsvc.core.string_service import BasicStringService, StringService
from stringsvc.infrastructure.metrics import create_instruments
from stringsvc.infrastructure.observability import setup_logging
from stringsvc.services.endpoints import compose_service

logger = logging.getLogger(__name__)

CALL_LOGGER_NAME = "stringsvc.calls"


def create_app(
    settings: Settings | None = None,
    registry: CollectorRegistry | None = None,
    call_logger: logging.Logger | None = None,
    service: StringService | None = None,
) -> FastAPI:
    """Build the FastAPI app with the decorated string service behind it."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    if registry is None:
        registry = REGISTRY
    instruments = create_instruments(
        registry, settings.metrics_namespace, settings.metrics_subsystem,
    )

    svc = compose_service(
        service or BasicStringService(),
        call_logger or logging.getLogger(CALL_LOGGER_NAME),
        instruments,
    )

    app = FastAPI(title=settings.service_name, version=settings.service_version)
    app.include_router(strings.create_router(svc))
    app.include_router(health.create_router(settings))
    if settings.metrics_enabled:
        app.include_router(metrics.create_router(registry))
    register_error_handlers(app)
    return app


app = create_app()


def serve() -> None:
    """Run the service on the configured host and port."""
    settings = get_settings()
    logger.info(f"Listening on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
