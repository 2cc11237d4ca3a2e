"""Run a service under uvicorn with graceful shutdown."""

import uvicorn
from fastapi import FastAPI

from newsboard.config import Settings
from newsboard.core.logging import get_logger


logger = get_logger(__name__)


def serve(app: FastAPI, settings: Settings, port: int) -> None:
    """Serve ``app`` until interrupted.

    uvicorn stops accepting connections on SIGINT/SIGTERM and gives in-flight
    requests ``shutdown_grace_period_seconds`` to finish before exiting.
    Logging is already configured by the app factory, so uvicorn's own log
    config is disabled.
    """
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=port,
        timeout_graceful_shutdown=settings.shutdown_grace_period_seconds,
        log_config=None,
    )
    server = uvicorn.Server(config)

    logger.info(
        "http_server_started",
        service=app.state.service_name,
        address=f"{settings.host}:{port}",
    )
    server.run()
    logger.info("http_server_stopped", service=app.state.service_name)
