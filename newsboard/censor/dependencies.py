"""FastAPI dependencies for the content filter."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from .service import CensorError, ContentFilter


async def get_content_filter(request: Request) -> ContentFilter:
    """Get the content filter from app state."""
    content_filter = getattr(request.app.state, "content_filter", None)
    if content_filter is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Content filter not available",
        )
    return content_filter


ContentFilterDep = Annotated[ContentFilter, Depends(get_content_filter)]


def handle_censor_error(error: CensorError) -> HTTPException:
    """Convert content filter errors to HTTP exceptions."""
    status_map = {
        "content_rejected": status.HTTP_400_BAD_REQUEST,
    }

    return HTTPException(
        status_code=status_map.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
        detail=error.message,
    )
