"""Passthrough of third-party headlines for the landing page ticker."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request

from veo_builder.config.settings import get_settings
from veo_builder.integrations.news_client import NewsArticle, NewsClient, NewsRequestError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/news", tags=["news"])


@router.get("", response_model=list[NewsArticle])
async def headlines(request: Request) -> list[NewsArticle]:
    settings = getattr(request.app.state, "settings", None) or get_settings()
    if not settings.news_api_key:
        raise HTTPException(status_code=500, detail="News API key not configured")

    client = NewsClient(settings, transport=getattr(request.app.state, "news_transport", None))
    try:
        return await client.top_headlines()
    except NewsRequestError as exc:
        logger.error("Error fetching news: %s", exc)
        raise HTTPException(status_code=502, detail="Failed to fetch news") from exc
    finally:
        await client.close()
