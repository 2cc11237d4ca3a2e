"""Shared test fixtures.

Every fixture builds fresh applications, so no state (such as stored
comments) leaks between tests.
"""

import os
from collections.abc import Callable


# Keep tests from writing log files or depending on a developer .env
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from newsboard.censor.main import create_app as create_censor_app  # noqa: E402
from newsboard.comments.main import create_app as create_comments_app  # noqa: E402
from newsboard.comments.store import InMemoryCommentStore  # noqa: E402
from newsboard.config import Settings  # noqa: E402
from newsboard.gateway.clients import CensorClient, CommentStoreClient  # noqa: E402
from newsboard.gateway.main import create_app as create_gateway_app  # noqa: E402
from newsboard.gateway.service import GatewayService  # noqa: E402


CENSOR_URL = "http://censor.test"
COMMENTS_URL = "http://comments.test"


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment's log file configuration."""
    return Settings(environment="testing", log_file_enabled=False)


@pytest.fixture
def censor_app(settings: Settings) -> FastAPI:
    """Content filter application."""
    return create_censor_app(settings)


@pytest.fixture
def comment_store() -> InMemoryCommentStore:
    """Empty comment store."""
    return InMemoryCommentStore()


@pytest.fixture
def comments_app(settings: Settings, comment_store: InMemoryCommentStore) -> FastAPI:
    """Comment store application backed by ``comment_store``."""
    return create_comments_app(settings, store=comment_store)


@pytest.fixture
def censor_client(censor_app: FastAPI) -> TestClient:
    """HTTP client for the content filter."""
    return TestClient(censor_app)


@pytest.fixture
def comments_client(comments_app: FastAPI) -> TestClient:
    """HTTP client for the comment store."""
    return TestClient(comments_app)


def make_gateway_service(
    censor_transport: httpx.AsyncBaseTransport,
    comments_transport: httpx.AsyncBaseTransport,
) -> GatewayService:
    """Gateway service whose downstream calls go through the given transports."""
    return GatewayService(
        censor=CensorClient(CENSOR_URL, timeout=1.0, transport=censor_transport),
        comments=CommentStoreClient(
            COMMENTS_URL, timeout=1.0, transport=comments_transport
        ),
    )


@pytest.fixture
def build_gateway(settings: Settings) -> Callable[..., FastAPI]:
    """Factory for gateway apps with custom downstream transports."""

    def build(
        censor_transport: httpx.AsyncBaseTransport,
        comments_transport: httpx.AsyncBaseTransport,
    ) -> FastAPI:
        service = make_gateway_service(censor_transport, comments_transport)
        return create_gateway_app(settings, gateway_service=service)

    return build


@pytest.fixture
def gateway_app(
    build_gateway: Callable[..., FastAPI], censor_app: FastAPI, comments_app: FastAPI
) -> FastAPI:
    """Gateway wired in-process to real content filter and comment store apps."""
    return build_gateway(
        httpx.ASGITransport(app=censor_app),
        httpx.ASGITransport(app=comments_app),
    )


@pytest.fixture
def client(gateway_app: FastAPI) -> TestClient:
    """HTTP client for the gateway."""
    return TestClient(gateway_app)
