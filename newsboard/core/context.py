"""Request id handling for log correlation.

The request id travels between services in the ``X-Request-ID`` header.
Inside a service it is handed to handlers explicitly (see
``newsboard.core.dependencies``); the context variable below only exists so
that every log line emitted while serving a request carries the id.
"""

from contextvars import ContextVar
from typing import Any
from uuid import uuid4


REQUEST_ID_HEADER = "X-Request-ID"

# Bound for the duration of a request, read by the logging processor
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def generate_request_id() -> str:
    """Generate a new unique request ID."""
    return str(uuid4())


def current_log_request_id() -> str:
    """Request ID bound to the logging context (empty outside a request)."""
    return request_id_var.get()


def set_request_id(request_id: str | None = None) -> str:
    """Bind the request ID for the current context.

    Args:
        request_id: Optional request ID. If not provided, generates a new one.

    Returns:
        The request ID that was set.
    """
    rid = request_id or generate_request_id()
    request_id_var.set(rid)
    return rid


def request_id_headers(request_id: str) -> dict[str, str]:
    """Headers that forward a request ID to a downstream service."""
    if not request_id:
        return {}
    return {REQUEST_ID_HEADER: request_id}


def get_context() -> dict[str, Any]:
    """Get the bound context as a dictionary for log enrichment."""
    context: dict[str, Any] = {}

    request_id = current_log_request_id()
    if request_id:
        context["request_id"] = request_id

    return context


def clear_context() -> None:
    """Clear the bound request ID.

    Called at the end of each request to prevent leakage between requests.
    """
    request_id_var.set("")
