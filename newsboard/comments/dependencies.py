"""FastAPI dependencies for the comment store."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from .store import InMemoryCommentStore


async def get_comment_store(request: Request) -> InMemoryCommentStore:
    """Get the comment store owned by the application.

    Args:
        request: FastAPI request

    Returns:
        InMemoryCommentStore instance
    """
    store = getattr(request.app.state, "comment_store", None)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Comment store not available",
        )
    return store


CommentStoreDep = Annotated[InMemoryCommentStore, Depends(get_comment_store)]
