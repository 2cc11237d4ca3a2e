"""Gateway orchestration.

Business logic for:
- Comment creation: content filter first, comment store only on acceptance
- News detail: mocked item plus comments, degrading to no comments when the
  comment store fails
- News feed: mocked list with title search and pagination

The request id is passed explicitly to every downstream call.
"""

import structlog

from .clients import CensorClient, CommentStoreClient, UpstreamError
from .news import MockNewsFeed, paginate
from .schemas import CreateCommentRequest, NewsDetail, NewsListResponse


logger = structlog.get_logger(__name__)


# ==============================================================================
# Custom Exceptions
# ==============================================================================


class GatewayError(Exception):
    """Base gateway error."""

    def __init__(self, message: str, code: str = "gateway_error"):
        self.message = message
        self.code = code
        super().__init__(message)


class ContentRejectedError(GatewayError):
    """The content filter rejected the comment text."""

    def __init__(self, message: str = "Comment contains prohibited content"):
        super().__init__(message, "content_rejected")


class FilterUnavailableError(GatewayError):
    """The content filter could not give a verdict."""

    def __init__(self, message: str = "Content filter unavailable"):
        super().__init__(message, "upstream_unavailable")


class CommentPersistError(GatewayError):
    """The comment passed the filter but could not be stored."""

    def __init__(self, message: str = "Failed to save comment"):
        super().__init__(message, "persistence_failed")


# ==============================================================================
# Service
# ==============================================================================


class GatewayService:
    """Orchestrates the content filter and the comment store."""

    def __init__(
        self,
        censor: CensorClient,
        comments: CommentStoreClient,
        news_feed: MockNewsFeed | None = None,
        page_size: int = 10,
    ) -> None:
        self.censor = censor
        self.comments = comments
        self.news_feed = news_feed or MockNewsFeed()
        self.page_size = page_size

    async def create_comment(self, data: CreateCommentRequest, request_id: str) -> int:
        """Filter and store a comment, returning the id assigned by the store.

        Raises:
            ContentRejectedError: the filter rejected the text.
            FilterUnavailableError: the filter could not be consulted.
            CommentPersistError: the store failed after the text was accepted.
                Nothing is rolled back or retried.
        """
        try:
            accepted = await self.censor.check(data.text, request_id)
        except UpstreamError as e:
            logger.error("censor_check_failed", news_id=data.news_id, error=str(e))
            raise FilterUnavailableError() from e

        if not accepted:
            logger.info("comment_rejected", news_id=data.news_id)
            raise ContentRejectedError()

        try:
            comment_id = await self.comments.create(data, request_id)
        except UpstreamError as e:
            logger.error("comment_save_failed", news_id=data.news_id, error=str(e))
            raise CommentPersistError() from e

        logger.info("comment_accepted", news_id=data.news_id, comment_id=comment_id)
        return comment_id

    async def get_news_detail(self, news_id: int, request_id: str) -> NewsDetail:
        """News item with its comments; comment fetch failures yield no comments."""
        news = self.news_feed.get_news(news_id)

        try:
            comments = await self.comments.list_by_news(news_id, request_id)
        except UpstreamError as e:
            logger.warning("comment_fetch_failed", news_id=news_id, error=str(e))
            comments = []

        return NewsDetail(**news.model_dump(), comments=comments)

    def list_news(self, page: int, search: str | None = None) -> NewsListResponse:
        """One page of the (mocked) feed."""
        items, pagination = paginate(
            self.news_feed.list_news(search), page, self.page_size
        )
        return NewsListResponse(news=items, pagination=pagination)
