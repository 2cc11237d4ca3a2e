"""Content filter service.

Checks user-submitted text against a fixed denylist.
"""

from .service import (
    DEFAULT_DENYLIST,
    CensorError,
    ContentFilter,
    RejectedContentError,
)


__all__ = [
    "DEFAULT_DENYLIST",
    "CensorError",
    "ContentFilter",
    "RejectedContentError",
]
