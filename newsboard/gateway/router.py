"""Gateway API endpoints."""

from fastapi import APIRouter, Path, Query, status

from newsboard.core.dependencies import RequestIdDep
from newsboard.core.types import INT64_MAX, INT64_MIN

from .dependencies import GatewayServiceDep, handle_gateway_error
from .news import parse_page
from .schemas import (
    CommentCreatedResponse,
    CreateCommentRequest,
    NewsDetail,
    NewsListResponse,
)
from .service import GatewayError


router = APIRouter(tags=["gateway"])


@router.get(
    "/news",
    response_model=NewsListResponse,
    summary="List news",
)
async def list_news(
    gateway: GatewayServiceDep,
    page: str | None = Query(default=None),
    s: str | None = Query(default=None),
    search: str | None = Query(default=None),
) -> NewsListResponse:
    """Paginated news feed.

    ``s`` and ``search`` are both accepted as the title filter; ``s`` wins
    when both are given. An unusable ``page`` falls back to 1.
    """
    return gateway.list_news(page=parse_page(page), search=s or search)


@router.get(
    "/news/{news_id}",
    response_model=NewsDetail,
    response_model_exclude_none=True,
    summary="Get news with comments",
)
async def get_news(
    gateway: GatewayServiceDep,
    request_id: RequestIdDep,
    news_id: int = Path(ge=INT64_MIN, le=INT64_MAX),
) -> NewsDetail:
    """News item and its comments.

    Still answers 200, with no comments, when the comment store fails.
    """
    return await gateway.get_news_detail(news_id, request_id)


@router.post(
    "/comment",
    response_model=CommentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create comment",
)
async def create_comment(
    data: CreateCommentRequest,
    gateway: GatewayServiceDep,
    request_id: RequestIdDep,
) -> CommentCreatedResponse:
    """Post a comment after it passes the content filter."""
    try:
        comment_id = await gateway.create_comment(data, request_id)
    except GatewayError as e:
        raise handle_gateway_error(e) from e

    return CommentCreatedResponse(message="Comment created successfully", id=comment_id)
