"""Content filter.

Rejects text containing any denylisted term. Matching is a plain
case-insensitive substring test, so a term also matches inside a longer
word ("xQWERTYx" is rejected).
"""

from collections.abc import Iterable

import structlog


logger = structlog.get_logger(__name__)


DEFAULT_DENYLIST: tuple[str, ...] = ("qwerty", "йцукен", "zxvbnm")


class CensorError(Exception):
    """Base content filter error."""

    def __init__(self, message: str, code: str = "censor_error"):
        self.message = message
        self.code = code
        super().__init__(message)


class RejectedContentError(CensorError):
    """Text contains a denylisted term."""

    def __init__(self, term: str, message: str = "Text contains prohibited content"):
        self.term = term
        super().__init__(message, "content_rejected")


class ContentFilter:
    """Stateless denylist check.

    The denylist is fixed when the filter is built; there is no way to
    change it afterwards.
    """

    def __init__(self, denylist: Iterable[str] = DEFAULT_DENYLIST) -> None:
        self._denylist = tuple(term.lower() for term in denylist if term)

    @property
    def denylist(self) -> tuple[str, ...]:
        return self._denylist

    def find_prohibited_term(self, text: str) -> str | None:
        """Return the first denylisted term found in ``text``, if any."""
        lowered = text.lower()
        for term in self._denylist:
            if term in lowered:
                return term
        return None

    def is_allowed(self, text: str) -> bool:
        return self.find_prohibited_term(text) is None

    def check(self, text: str) -> None:
        """Accept ``text`` or raise ``RejectedContentError``."""
        term = self.find_prohibited_term(text)
        if term is not None:
            logger.info("content_rejected", term=term, text_length=len(text))
            raise RejectedContentError(term)
