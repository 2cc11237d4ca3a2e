# Core infrastructure
from newsboard.core.app import create_service_app, describe_validation_error
from newsboard.core.context import (
    REQUEST_ID_HEADER,
    clear_context,
    current_log_request_id,
    generate_request_id,
    get_context,
    request_id_headers,
    set_request_id,
)
from newsboard.core.dependencies import RequestIdDep
from newsboard.core.logging import configure_structlog, get_logger
from newsboard.core.middleware import RequestContextMiddleware
from newsboard.core.server import serve


__all__ = [
    "REQUEST_ID_HEADER",
    "RequestContextMiddleware",
    "RequestIdDep",
    "clear_context",
    "configure_structlog",
    "create_service_app",
    "current_log_request_id",
    "describe_validation_error",
    "generate_request_id",
    "get_context",
    "get_logger",
    "request_id_headers",
    "serve",
    "set_request_id",
]
