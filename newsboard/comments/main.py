"""Comment store service - application entry point."""

from fastapi import FastAPI

from newsboard.config import Settings, get_settings
from newsboard.core.app import create_service_app
from newsboard.core.server import serve

from .router import router
from .store import InMemoryCommentStore


SERVICE_NAME = "comments"


def create_app(
    settings: Settings | None = None,
    store: InMemoryCommentStore | None = None,
) -> FastAPI:
    """Create the comment store application.

    The store is created here, once per application, and reaches the
    handlers through ``get_comment_store``.
    """
    settings = settings or get_settings()

    app = create_service_app(
        SERVICE_NAME,
        settings,
        routers=[router],
        description="In-memory comment store",
    )
    app.state.comment_store = store if store is not None else InMemoryCommentStore()
    return app


def run() -> None:
    """Console entry point: serve the comment store."""
    settings = get_settings()
    serve(create_app(settings), settings, settings.comments_port)


if __name__ == "__main__":
    run()
