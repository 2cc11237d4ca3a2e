"""Mocked news feed.

There is no news aggregator behind the gateway yet; items are fabricated on
every call.
"""

import math
from datetime import UTC, datetime, timedelta

from newsboard.core.types import INT64_MAX

from .schemas import NewsSummary, Pagination


class MockNewsFeed:
    """Fabricates news items relative to the current time."""

    def list_news(self, search: str | None = None) -> list[NewsSummary]:
        """The whole feed, filtered by a case-insensitive title search."""
        now = datetime.now(UTC)
        news = [
            NewsSummary(
                id=1,
                title="First News",
                content="This is the content of the first news article",
                pub_time=now - timedelta(hours=24),
            ),
            NewsSummary(
                id=2,
                title="Second News",
                content="This is the content of the second news article",
                pub_time=now - timedelta(hours=12),
            ),
        ]

        if search:
            needle = search.lower()
            news = [item for item in news if needle in item.title.lower()]

        return news

    def get_news(self, news_id: int) -> NewsSummary:
        """Any id resolves to a fabricated item."""
        return NewsSummary(
            id=news_id,
            title=f"News {news_id}",
            content=f"Content of news {news_id}",
            pub_time=datetime.now(UTC),
        )


def parse_page(raw: str | None) -> int:
    """Page number from a query value; anything unusable means page 1.

    Values past the signed 64-bit range count as unusable.
    """
    if not raw:
        return 1
    try:
        page = int(raw)
    except ValueError:
        return 1
    return page if 0 < page <= INT64_MAX else 1


def paginate(
    items: list[NewsSummary], page: int, page_size: int
) -> tuple[list[NewsSummary], Pagination]:
    """Slice ``items`` for ``page``; an empty feed still has one page."""
    total_pages = max(1, math.ceil(len(items) / page_size))
    start = (page - 1) * page_size
    return items[start : start + page_size], Pagination(
        page=page, total_pages=total_pages
    )
