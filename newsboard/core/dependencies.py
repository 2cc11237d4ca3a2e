"""FastAPI dependencies shared by every service."""

from typing import Annotated

from fastapi import Depends, Request

from newsboard.core.context import generate_request_id


def get_request_id(request: Request) -> str:
    """Return the request ID assigned by ``RequestContextMiddleware``.

    Falls back to a fresh id when the middleware is not installed
    (e.g. a router mounted on a bare app in tests).
    """
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        request_id = generate_request_id()
        request.state.request_id = request_id
    return request_id


RequestIdDep = Annotated[str, Depends(get_request_id)]
