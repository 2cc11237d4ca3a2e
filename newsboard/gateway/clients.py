"""HTTP clients for the services behind the gateway.

Each call takes the request id of the inbound request and forwards it in
``X-Request-ID``. Calls are made once with a fixed timeout; there are no
retries. Transport problems and unexpected responses surface as
``UpstreamError``.
"""

from typing import Any

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from newsboard.core.context import request_id_headers
from newsboard.core.types import Int64

from .schemas import Comment, CreateCommentRequest


logger = structlog.get_logger(__name__)

_comment_id = TypeAdapter(Int64)
_comment_list = TypeAdapter(list[Comment])


class UpstreamError(Exception):
    """A downstream service could not be reached or answered unexpectedly."""

    def __init__(self, service: str, message: str, status_code: int | None = None):
        self.service = service
        self.message = message
        self.status_code = status_code
        super().__init__(f"{service}: {message}")


class ServiceClient:
    """Base client for one downstream service.

    A fresh ``httpx.AsyncClient`` is opened per call. ``transport`` lets
    tests route calls to an in-process app or a mock handler.
    """

    service_name = "upstream"

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        request_id: str,
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                return await client.request(
                    method, path, headers=request_id_headers(request_id), **kwargs
                )
        except httpx.TimeoutException as e:
            logger.error(
                "upstream_timeout",
                service=self.service_name,
                method=method,
                path=path,
                error=str(e),
            )
            raise UpstreamError(self.service_name, "timeout") from e
        except httpx.RequestError as e:
            logger.error(
                "upstream_request_error",
                service=self.service_name,
                method=method,
                path=path,
                error=str(e),
            )
            raise UpstreamError(self.service_name, f"request error: {e}") from e

    def _unexpected_status(self, response: httpx.Response) -> UpstreamError:
        logger.error(
            "upstream_unexpected_status",
            service=self.service_name,
            status_code=response.status_code,
            response_text=response.text[:500],
        )
        return UpstreamError(
            self.service_name,
            f"returned status {response.status_code}",
            status_code=response.status_code,
        )


class CensorClient(ServiceClient):
    """Client for the content filter."""

    service_name = "censor"

    async def check(self, text: str, request_id: str) -> bool:
        """Return True if the filter accepts ``text``, False if it rejects it.

        Raises:
            UpstreamError: the filter is unreachable or answered with anything
                other than 200 or 400.
        """
        response = await self._request(
            "POST", "/check", request_id, json={"text": text}
        )

        if response.status_code == httpx.codes.OK:
            return True
        if response.status_code == httpx.codes.BAD_REQUEST:
            return False
        raise self._unexpected_status(response)


class CommentStoreClient(ServiceClient):
    """Client for the comment store."""

    service_name = "comments"

    async def create(self, data: CreateCommentRequest, request_id: str) -> int:
        """Store a comment and return the id assigned by the store."""
        response = await self._request(
            "POST", "/comments", request_id, json=data.model_dump()
        )

        if response.status_code not in (httpx.codes.OK, httpx.codes.CREATED):
            raise self._unexpected_status(response)

        try:
            return _comment_id.validate_python(response.json()["id"])
        except (ValueError, KeyError, TypeError) as e:
            raise UpstreamError(self.service_name, "malformed create response") from e

    async def list_by_news(self, news_id: int, request_id: str) -> list[Comment]:
        """Comments stored for ``news_id``, in creation order."""
        response = await self._request(
            "GET", "/comments", request_id, params={"news_id": news_id}
        )

        if response.status_code != httpx.codes.OK:
            raise self._unexpected_status(response)

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(self.service_name, "malformed list response") from e

        if payload is None:
            return []

        try:
            return _comment_list.validate_python(payload)
        except ValidationError as e:
            raise UpstreamError(self.service_name, "malformed list response") from e
