"""Async client for the third-party headline API behind ``/api/news``."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from veo_builder.config.settings import Settings

logger = logging.getLogger(__name__)

REMOVED_TITLE = "[Removed]"


class NewsRequestError(RuntimeError):
    """Raised when the headline provider fails or answers with an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class NewsSource(BaseModel):
    name: str | None = None


class NewsArticle(BaseModel):
    title: str
    url: str | None = None
    publishedAt: str | None = None
    source: NewsSource = NewsSource()


def parse_articles(payload: Any) -> list[NewsArticle]:
    """Keep articles with a usable title and reduce them to the ticker fields."""

    if not isinstance(payload, dict):
        raise NewsRequestError("News API returned an unexpected payload")
    if payload.get("status") != "ok":
        raise NewsRequestError(f"News API error: {payload.get('message', 'unknown error')}")

    articles: list[NewsArticle] = []
    articles_raw = payload.get("articles")
    for item in articles_raw if isinstance(articles_raw, list) else []:
        if not isinstance(item, dict):
            continue
        title = item.get("title")
        if not isinstance(title, str) or not title or title == REMOVED_TITLE:
            continue
        source = item.get("source")
        articles.append(
            NewsArticle(
                title=title,
                url=_text(item.get("url")),
                publishedAt=_text(item.get("publishedAt")),
                source=NewsSource(name=_text(source.get("name")) if isinstance(source, dict) else None),
            )
        )
    return articles


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) else None


class NewsClient:
    """Thin wrapper over the headline endpoint."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        if not settings.news_api_key:
            raise RuntimeError("News API key not configured")

        self._settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.news_api_base_url.rstrip("/"),
            timeout=settings.request_timeout,
            transport=transport,
        )

    async def top_headlines(self) -> list[NewsArticle]:
        params = {
            "country": self._settings.news_country,
            "category": self._settings.news_category,
            "pageSize": self._settings.news_page_size,
            "apiKey": self._settings.news_api_key,
        }
        try:
            response = await self._client.get("/top-headlines", params=params)
            response.raise_for_status()
        except httpx.TimeoutException as exc:  # pragma: no cover - network safeguard
            raise NewsRequestError("Timed out waiting for the News API.") from exc
        except httpx.HTTPStatusError as exc:
            raise NewsRequestError(
                f"News API error: {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise NewsRequestError(f"News API request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise NewsRequestError("News API returned a non-JSON body") from exc
        return parse_articles(payload)

    async def ping(self) -> bool:
        """Return ``True`` if the provider answers a headline request."""

        await self.top_headlines()
        return True

    async def close(self) -> None:
        """Release HTTP resources."""

        await self._client.aclose()
