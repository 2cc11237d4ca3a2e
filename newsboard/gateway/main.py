"""Gateway service - application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from newsboard.config import Settings, get_settings
from newsboard.core.app import create_service_app
from newsboard.core.server import serve

from .clients import CensorClient, CommentStoreClient
from .router import router
from .service import GatewayService


SERVICE_NAME = "gateway"


def build_gateway_service(settings: Settings) -> GatewayService:
    """Wire the gateway to the downstream services named in settings."""
    timeout = settings.downstream_timeout_seconds
    return GatewayService(
        censor=CensorClient(settings.censor_service_url, timeout=timeout),
        comments=CommentStoreClient(settings.comments_service_url, timeout=timeout),
        page_size=settings.news_page_size,
    )


def create_app(
    settings: Settings | None = None,
    gateway_service: GatewayService | None = None,
) -> FastAPI:
    """Create the gateway application."""
    settings = settings or get_settings()

    app = create_service_app(
        SERVICE_NAME,
        settings,
        routers=[router],
        description="Public API: news feed and comment posting",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.state.gateway_service = gateway_service or build_gateway_service(settings)
    return app


def run() -> None:
    """Console entry point: serve the gateway."""
    settings = get_settings()
    serve(create_app(settings), settings, settings.gateway_port)


if __name__ == "__main__":
    run()
