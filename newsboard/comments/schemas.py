"""Pydantic schemas for the comment store API."""

from pydantic import BaseModel

from newsboard.core.types import Int64

from .models import Comment


class CreateCommentRequest(BaseModel):
    """Request to store a new comment."""

    news_id: Int64
    parent_id: Int64 | None = None
    text: str


class CreateCommentResponse(BaseModel):
    """Id assigned to a stored comment."""

    id: int


class CommentResponse(BaseModel):
    """Comment as returned by the list endpoint."""

    id: int
    news_id: int
    parent_id: int | None = None
    text: str

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            news_id=comment.news_id,
            parent_id=comment.parent_id,
            text=comment.text,
        )
