"""Content filter service - application entry point."""

from fastapi import FastAPI

from newsboard.config import Settings, get_settings
from newsboard.core.app import create_service_app
from newsboard.core.server import serve

from .router import router
from .service import ContentFilter


SERVICE_NAME = "censor"


def create_app(
    settings: Settings | None = None,
    content_filter: ContentFilter | None = None,
) -> FastAPI:
    """Create the content filter application."""
    settings = settings or get_settings()

    app = create_service_app(
        SERVICE_NAME,
        settings,
        routers=[router],
        description="Denylist check for user-submitted text",
    )
    app.state.content_filter = content_filter or ContentFilter(settings.censor_denylist)
    return app


def run() -> None:
    """Console entry point: serve the content filter."""
    settings = get_settings()
    serve(create_app(settings), settings, settings.censor_port)


if __name__ == "__main__":
    run()
