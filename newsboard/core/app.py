"""FastAPI application factory shared by the three services.

Every service gets the same middleware stack, plain-text error handlers,
health endpoints and root endpoint; the service-specific modules only add
their routers and state.
"""

from collections.abc import AsyncGenerator, Callable, Sequence
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from newsboard.config import Settings
from newsboard.core.logging import configure_structlog, get_logger
from newsboard.core.middleware import RequestContextMiddleware
from newsboard.health import router as health_router


logger = get_logger(__name__)

Lifespan = Callable[[FastAPI], AbstractAsyncContextManager[None]]


def describe_validation_error(errors: Sequence[Any]) -> str:
    """Turn the first request validation error into a short message.

    Body errors are reported as bad JSON, query errors name the parameter
    and path errors name the path segment.
    """
    if not errors:
        return "Invalid request"

    error = errors[0]
    loc = tuple(error.get("loc", ()))
    source = loc[0] if loc else None
    field = ".".join(str(part) for part in loc[1:])

    if source == "body":
        if error.get("type") == "json_invalid" or not field:
            return "Invalid JSON"
        return f"Invalid JSON: {field}: {error.get('msg', 'invalid value')}"

    if source == "query":
        if error.get("type") == "missing":
            return f"{field} parameter is required"
        return f"Invalid {field} parameter"

    return f"Invalid {field}" if field else "Invalid request"


def service_lifespan(service_name: str) -> Lifespan:
    """Build a lifespan that logs service startup and shutdown."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        settings: Settings = app.state.settings
        logger.info(
            "starting_service",
            service=service_name,
            version=settings.app_version,
            environment=settings.environment,
        )
        yield
        logger.info("shutting_down_service", service=service_name)

    return lifespan


def create_service_app(
    service_name: str,
    settings: Settings,
    routers: Sequence[APIRouter],
    description: str = "",
    lifespan: Lifespan | None = None,
) -> FastAPI:
    """Create and configure a FastAPI application for one service.

    Args:
        service_name: Short service name used in logs and health responses.
        settings: Application settings.
        routers: Service-specific routers to include.
        description: OpenAPI description.
        lifespan: Optional lifespan; defaults to one that logs start/stop.

    Returns:
        The configured application. Service state is attached by the caller.
    """
    configure_structlog(settings, service_name)

    # debug=False keeps Starlette from rendering tracebacks in responses
    app = FastAPI(
        title=f"{settings.app_name}-{service_name}",
        version=settings.app_version,
        description=description,
        debug=False,
        lifespan=lifespan or service_lifespan(service_name),
        default_response_class=ORJSONResponse,
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.is_development else None,
    )
    app.state.settings = settings
    app.state.service_name = service_name

    app.add_middleware(
        RequestContextMiddleware,
        log_requests=settings.log_requests,
        exclude_paths=settings.log_exclude_paths,
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> PlainTextResponse:
        """Answer HTTP errors with their detail as plain text."""
        logger.warning(
            "http_exception",
            status_code=exc.status_code,
            detail=str(exc.detail),
            path=request.url.path,
            method=request.method,
        )
        return PlainTextResponse(
            str(exc.detail), status_code=exc.status_code, headers=exc.headers
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> PlainTextResponse:
        """Answer undecodable or invalid input with 400."""
        logger.warning(
            "validation_error",
            errors=exc.errors(),
            path=request.url.path,
            method=request.method,
        )
        return PlainTextResponse(
            describe_validation_error(exc.errors()),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request, exc: Exception
    ) -> PlainTextResponse:
        """Catch-all handler; details go to the log, never to the client."""
        logger.exception(
            "unhandled_exception",
            error_type=type(exc).__name__,
            error_message=str(exc),
            path=request.url.path,
            method=request.method,
        )
        return PlainTextResponse(
            "Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    app.include_router(health_router)
    for router in routers:
        app.include_router(router)

    @app.get("/", include_in_schema=False)
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {
            "service": service_name,
            "version": settings.app_version,
        }

    return app
