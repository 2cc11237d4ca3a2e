"""Comment record held by the comment store.

Comments are flat records grouped by ``news_id``. ``parent_id`` links a
reply to another comment but is never checked: unknown parents, cycles and
arbitrary depth are all accepted.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Comment:
    """Immutable comment record."""

    id: int
    news_id: int
    text: str
    parent_id: int | None = None
