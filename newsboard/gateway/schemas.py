"""Pydantic schemas for the gateway API.

The gateway keeps its own copy of the comment wire format; comments it
returns are decoded from the comment store's responses, never owned here.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from newsboard.core.types import Int64


# ==============================================================================
# News
# ==============================================================================


class NewsSummary(BaseModel):
    """News item as shown in the feed."""

    id: int
    title: str
    content: str
    pub_time: datetime


class Comment(BaseModel):
    """Comment as received from the comment store."""

    id: int
    news_id: Int64
    parent_id: Int64 | None = None
    text: str


class NewsDetail(NewsSummary):
    """News item with its comments."""

    comments: list[Comment] = Field(default_factory=list)


class Pagination(BaseModel):
    """Position in the news feed."""

    page: int
    total_pages: int


class NewsListResponse(BaseModel):
    """One page of the news feed."""

    news: list[NewsSummary]
    pagination: Pagination


# ==============================================================================
# Comments
# ==============================================================================


class CreateCommentRequest(BaseModel):
    """Request to post a comment under a news item."""

    news_id: Int64
    parent_id: Int64 | None = None
    text: str


class CommentCreatedResponse(BaseModel):
    """Confirmation with the id assigned by the comment store."""

    message: str
    id: int
