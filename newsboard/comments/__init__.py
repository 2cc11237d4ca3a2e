"""Comment store service.

Append-only, in-memory storage of comments grouped by news item.
"""

from .models import Comment
from .store import InMemoryCommentStore


__all__ = [
    "Comment",
    "InMemoryCommentStore",
]
