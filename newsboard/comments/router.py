"""Comment store API endpoints."""

from fastapi import APIRouter, Query, status

from newsboard.core.types import INT64_MAX, INT64_MIN

from .dependencies import CommentStoreDep
from .schemas import CommentResponse, CreateCommentRequest, CreateCommentResponse


router = APIRouter(prefix="/comments", tags=["comments"])


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create comment",
)
async def create_comment(
    data: CreateCommentRequest,
    store: CommentStoreDep,
) -> CreateCommentResponse:
    """Store a comment and return its id.

    Neither ``news_id`` nor ``parent_id`` is checked against anything.
    """
    comment = store.create(
        news_id=data.news_id,
        parent_id=data.parent_id,
        text=data.text,
    )
    return CreateCommentResponse(id=comment.id)


@router.get(
    "",
    response_model=list[CommentResponse],
    response_model_exclude_none=True,
    summary="List comments of a news item",
)
async def list_comments(
    store: CommentStoreDep,
    news_id: int = Query(..., ge=INT64_MIN, le=INT64_MAX),
) -> list[CommentResponse]:
    """Comments for ``news_id`` in creation order; empty list if none."""
    return [CommentResponse.from_comment(c) for c in store.list_by_news(news_id)]
