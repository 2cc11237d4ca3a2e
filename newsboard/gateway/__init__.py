"""Gateway service.

Public entry point for clients: serves the (mocked) news feed and posts
comments through the content filter to the comment store.
"""

from .clients import CensorClient, CommentStoreClient, UpstreamError
from .service import (
    CommentPersistError,
    ContentRejectedError,
    FilterUnavailableError,
    GatewayError,
    GatewayService,
)


__all__ = [
    "CensorClient",
    "CommentPersistError",
    "CommentStoreClient",
    "ContentRejectedError",
    "FilterUnavailableError",
    "GatewayError",
    "GatewayService",
    "UpstreamError",
]
