"""Tests for the headline client and the /api/news passthrough."""

from __future__ import annotations

import dataclasses

import httpx
import pytest
from fastapi.testclient import TestClient

from veo_builder.api.main import create_app
from veo_builder.config.settings import Settings
from veo_builder.integrations.news_client import NewsClient, NewsRequestError, parse_articles

UPSTREAM_PAYLOAD = {
    "status": "ok",
    "articles": [
        {
            "title": "Rain expected",
            "url": "https://news.test/rain",
            "publishedAt": "2026-10-19T08:00:00Z",
            "source": {"id": None, "name": "Weather Desk"},
            "content": "dropped",
        },
        {"title": "[Removed]", "url": "https://removed", "source": {"name": "x"}},
        {"title": None, "url": "https://untitled", "source": {"name": "y"}},
    ],
}


def _transport(status_code: int = 200, payload: dict | None = None) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v2/top-headlines"
        assert request.url.params["apiKey"] == "test-news-key"
        assert request.url.params["pageSize"] == "10"
        return httpx.Response(status_code, json=payload if payload is not None else UPSTREAM_PAYLOAD)

    return httpx.MockTransport(handler)


def test_parse_articles_filters_removed_and_untitled() -> None:
    articles = parse_articles(UPSTREAM_PAYLOAD)

    assert [article.title for article in articles] == ["Rain expected"]
    assert articles[0].source.name == "Weather Desk"


def test_parse_articles_raises_on_error_status() -> None:
    with pytest.raises(NewsRequestError, match="rate limited"):
        parse_articles({"status": "error", "message": "rate limited"})


@pytest.mark.asyncio
async def test_client_fetches_headlines(settings: Settings) -> None:
    client = NewsClient(settings, transport=_transport())
    try:
        articles = await client.top_headlines()
    finally:
        await client.close()

    assert len(articles) == 1


@pytest.mark.asyncio
async def test_client_wraps_http_errors(settings: Settings) -> None:
    client = NewsClient(settings, transport=_transport(status_code=503))
    try:
        with pytest.raises(NewsRequestError) as excinfo:
            await client.top_headlines()
    finally:
        await client.close()

    assert excinfo.value.status_code == 503


def test_client_requires_key(settings: Settings) -> None:
    with pytest.raises(RuntimeError, match="not configured"):
        NewsClient(dataclasses.replace(settings, news_api_key=""))


def test_news_endpoint_returns_ticker_fields(settings: Settings) -> None:
    app = create_app(settings)
    app.state.news_transport = _transport()

    with TestClient(app) as client:
        response = client.get("/api/news")

    assert response.status_code == 200
    assert response.json() == [
        {
            "title": "Rain expected",
            "url": "https://news.test/rain",
            "publishedAt": "2026-10-19T08:00:00Z",
            "source": {"name": "Weather Desk"},
        }
    ]


def test_news_endpoint_reports_upstream_failure(settings: Settings) -> None:
    app = create_app(settings)
    app.state.news_transport = _transport(status_code=500)

    with TestClient(app) as client:
        response = client.get("/api/news")

    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to fetch news"


def test_news_endpoint_without_key(settings: Settings) -> None:
    app = create_app(dataclasses.replace(settings, news_api_key=""))

    with TestClient(app) as client:
        response = client.get("/api/news")

    assert response.status_code == 500
    assert response.json()["detail"] == "News API key not configured"


def _html_transport() -> httpx.MockTransport:
    return httpx.MockTransport(
        lambda request: httpx.Response(
            200, text="<html>oops</html>", headers={"content-type": "text/html"}
        )
    )


@pytest.mark.asyncio
async def test_client_wraps_non_json_body(settings: Settings) -> None:
    client = NewsClient(settings, transport=_html_transport())
    try:
        with pytest.raises(NewsRequestError, match="non-JSON"):
            await client.top_headlines()
    finally:
        await client.close()


def test_parse_articles_rejects_non_object_payload() -> None:
    with pytest.raises(NewsRequestError, match="unexpected payload"):
        parse_articles([UPSTREAM_PAYLOAD])


def test_parse_articles_skips_malformed_items() -> None:
    payload = {
        "status": "ok",
        "articles": ["junk", {"title": 5}, {"title": "Kept", "source": "Desk", "url": 3}],
    }

    articles = parse_articles(payload)

    assert [article.title for article in articles] == ["Kept"]
    assert articles[0].url is None
    assert articles[0].source.name is None


@pytest.mark.parametrize(
    "transport",
    [
        _html_transport(),
        httpx.MockTransport(lambda request: httpx.Response(200, json=["not", "an", "object"])),
    ],
)
def test_news_endpoint_reports_unreadable_upstream(settings: Settings, transport: httpx.MockTransport) -> None:
    app = create_app(settings)
    app.state.news_transport = transport

    with TestClient(app) as client:
        response = client.get("/api/news")

    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to fetch news"
