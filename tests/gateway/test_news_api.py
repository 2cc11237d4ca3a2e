"""Tests for the gateway news endpoints."""

from collections.abc import Callable

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from newsboard.comments.store import InMemoryCommentStore
from newsboard.core.types import INT64_MAX, INT64_MIN
from newsboard.gateway.news import MockNewsFeed, paginate, parse_page


def refuse_connection(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


# ==============================================================================
# News feed
# ==============================================================================


class TestListNews:
    """GET /news."""

    def test_returns_first_page(self, client: TestClient):
        response = client.get("/news")

        assert response.status_code == 200
        data = response.json()
        assert [item["title"] for item in data["news"]] == ["First News", "Second News"]
        assert data["pagination"] == {"page": 1, "total_pages": 1}
        assert set(data["news"][0]) == {"id", "title", "content", "pub_time"}

    @pytest.mark.parametrize("param", ["s", "search"])
    def test_search_filters_by_title(self, client: TestClient, param: str):
        response = client.get("/news", params={param: "sECOND"})

        assert response.status_code == 200
        assert [item["id"] for item in response.json()["news"]] == [2]

    def test_s_wins_over_search(self, client: TestClient):
        response = client.get("/news", params={"s": "first", "search": "second"})
        assert [item["id"] for item in response.json()["news"]] == [1]

    def test_no_match_returns_empty_list(self, client: TestClient):
        data = client.get("/news", params={"s": "nothing"}).json()
        assert data["news"] == []
        assert data["pagination"]["total_pages"] == 1

    @pytest.mark.parametrize("page", ["abc", "0", "-3", ""])
    def test_unusable_page_falls_back_to_one(self, client: TestClient, page: str):
        response = client.get("/news", params={"page": page})
        assert response.status_code == 200
        assert response.json()["pagination"]["page"] == 1

    def test_page_past_the_end_is_empty(self, client: TestClient):
        data = client.get("/news", params={"page": "3"}).json()
        assert data["news"] == []
        assert data["pagination"] == {"page": 3, "total_pages": 1}

    @pytest.mark.parametrize(
        "page", [str(INT64_MAX + 1), "99999999999999999999", "9" * 5000]
    )
    def test_page_out_of_int64_range_falls_back_to_one(
        self, client: TestClient, page: str
    ):
        response = client.get("/news", params={"page": page})
        assert response.status_code == 200
        assert response.json()["pagination"]["page"] == 1

    def test_largest_int64_page_is_kept(self, client: TestClient):
        response = client.get("/news", params={"page": str(INT64_MAX)})
        assert response.status_code == 200
        data = response.json()
        assert data["news"] == []
        assert data["pagination"]["page"] == INT64_MAX


class TestPagination:
    """Pagination helpers."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (None, 1),
            ("", 1),
            ("2", 2),
            ("x", 1),
            ("0", 1),
            ("-1", 1),
            ("10", 10),
            (str(INT64_MAX), INT64_MAX),
            (str(INT64_MAX + 1), 1),
        ],
    )
    def test_parse_page(self, raw, expected):
        assert parse_page(raw) == expected

    @pytest.mark.parametrize(
        ("count", "total_pages"), [(0, 1), (1, 1), (10, 1), (11, 2), (20, 2), (21, 3)]
    )
    def test_total_pages(self, count, total_pages):
        item = MockNewsFeed().get_news(1)
        _, pagination = paginate([item] * count, page=1, page_size=10)
        assert pagination.total_pages == total_pages

    def test_second_page_slice(self):
        items = [MockNewsFeed().get_news(i) for i in range(1, 13)]
        page_items, _ = paginate(items, page=2, page_size=10)
        assert [item.id for item in page_items] == [11, 12]


# ==============================================================================
# News detail
# ==============================================================================


class TestNewsDetail:
    """GET /news/{id}."""

    def test_includes_stored_comments(
        self, client: TestClient, comment_store: InMemoryCommentStore
    ):
        comment_store.create(news_id=4, text="first")
        comment_store.create(news_id=5, text="other news")
        comment_store.create(news_id=4, text="reply", parent_id=1)

        response = client.get("/news/4")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == 4
        assert data["title"] == "News 4"
        assert data["content"] == "Content of news 4"
        assert data["comments"] == [
            {"id": 1, "news_id": 4, "text": "first"},
            {"id": 3, "news_id": 4, "parent_id": 1, "text": "reply"},
        ]

    def test_no_comments_is_empty_list(self, client: TestClient):
        response = client.get("/news/8")
        assert response.status_code == 200
        assert response.json()["comments"] == []

    def test_invalid_id_returns_400(self, client: TestClient):
        response = client.get("/news/abc")
        assert response.status_code == 400
        assert response.text == "Invalid news_id"

    @pytest.mark.parametrize("news_id", [INT64_MAX + 1, INT64_MIN - 1, 10**20])
    def test_id_out_of_int64_range_returns_400(self, client: TestClient, news_id: int):
        response = client.get(f"/news/{news_id}")
        assert response.status_code == 400
        assert response.text == "Invalid news_id"

    @pytest.mark.parametrize("news_id", [INT64_MAX, INT64_MIN])
    def test_id_at_int64_bounds_is_served(
        self, client: TestClient, comment_store: InMemoryCommentStore, news_id: int
    ):
        comment_store.create(news_id=news_id, text="edge")

        response = client.get(f"/news/{news_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == news_id
        assert data["comments"] == [{"id": 1, "news_id": news_id, "text": "edge"}]

    @pytest.mark.parametrize(
        "store_behaviour",
        [
            refuse_connection,
            lambda _: httpx.Response(500, text="boom"),
            lambda _: httpx.Response(200, text="not json"),
            lambda _: httpx.Response(200, json={"unexpected": "shape"}),
        ],
        ids=["unreachable", "server-error", "not-json", "wrong-shape"],
    )
    def test_store_failure_degrades_to_no_comments(
        self,
        build_gateway: Callable[..., FastAPI],
        censor_app: FastAPI,
        store_behaviour: Callable[[httpx.Request], httpx.Response],
    ):
        app = build_gateway(
            httpx.ASGITransport(app=censor_app), httpx.MockTransport(store_behaviour)
        )

        response = TestClient(app).get("/news/1")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == 1
        assert data["comments"] == []

    def test_null_comment_list_is_empty(
        self, build_gateway: Callable[..., FastAPI], censor_app: FastAPI
    ):
        app = build_gateway(
            httpx.ASGITransport(app=censor_app),
            httpx.MockTransport(
                lambda _: httpx.Response(
                    200, content=b"null", headers={"Content-Type": "application/json"}
                )
            ),
        )
        assert TestClient(app).get("/news/1").json()["comments"] == []

    def test_request_id_forwarded_to_store(
        self, build_gateway: Callable[..., FastAPI], censor_app: FastAPI
    ):
        seen: list[httpx.Request] = []

        def store(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        app = build_gateway(
            httpx.ASGITransport(app=censor_app), httpx.MockTransport(store)
        )

        TestClient(app).get("/news/6", headers={"X-Request-ID": "trace-6"})

        assert seen[0].headers["X-Request-ID"] == "trace-6"
        assert seen[0].url.params["news_id"] == "6"
