"""In-memory comment store.

Business logic for:
- Appending comments with sequential ids
- Listing comments of a news item in insertion order

State lives only in process memory. Ids start at 1 and are unique for the
lifetime of the process; a restart starts over at 1.
"""

import threading

import structlog

from .models import Comment


logger = structlog.get_logger(__name__)


class InMemoryCommentStore:
    """Append-only comment sequence guarded by a single lock.

    ``create`` reads the counter, assigns the id and appends while holding
    the lock, so concurrent creates never share an id or lose a write.
    ``list_by_news`` copies the sequence under the same lock and never sees
    a half-finished append.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._comments: list[Comment] = []
        self._next_id = 1

    def create(self, news_id: int, text: str, parent_id: int | None = None) -> Comment:
        """Store a new comment and return the full record."""
        with self._lock:
            comment = Comment(
                id=self._next_id,
                news_id=news_id,
                parent_id=parent_id,
                text=text,
            )
            self._comments.append(comment)
            self._next_id += 1

        logger.info(
            "comment_created",
            comment_id=comment.id,
            news_id=news_id,
            parent_id=parent_id,
        )
        return comment

    def list_by_news(self, news_id: int) -> list[Comment]:
        """All comments for ``news_id`` in insertion order (maybe empty)."""
        with self._lock:
            snapshot = list(self._comments)
        return [comment for comment in snapshot if comment.news_id == news_id]

    def __len__(self) -> int:
        with self._lock:
            return len(self._comments)
