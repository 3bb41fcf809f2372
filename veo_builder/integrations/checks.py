"""Connectivity checks for the database and external providers."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable

from sqlalchemy import text
from sqlalchemy.engine import make_url

from veo_builder.config.settings import get_settings
from veo_builder.db.session import create_engine
from veo_builder.integrations.news_client import NewsClient


@dataclass(slots=True)
class IntegrationCheckResult:
    """Structured result describing the integration check outcome."""

    name: str
    success: bool
    message: str
    target: str = ""


async def _run_check(
    name: str,
    factory: Callable[[], Awaitable[bool]],
    success_message: str,
    target: str = "",
) -> IntegrationCheckResult:
    try:
        result = await factory()
    except Exception as exc:  # pragma: no cover - reported, not raised
        return IntegrationCheckResult(name=name, success=False, message=str(exc), target=target)

    if result:
        return IntegrationCheckResult(
            name=name, success=True, message=success_message, target=target
        )
    return IntegrationCheckResult(
        name=name,
        success=False,
        message="Service responded with non-success status.",
        target=target,
    )


async def check_news_api() -> IntegrationCheckResult:
    """Request headlines once and report whether the provider answered."""

    async def _ping() -> bool:
        client = NewsClient(get_settings())
        try:
            return await client.ping()
        finally:
            await client.close()

    return await _run_check(
        name="News API",
        factory=_ping,
        success_message="News API is reachable.",
        target=get_settings().news_api_base_url,
    )


async def check_database() -> IntegrationCheckResult:
    """Open a connection to the configured database and run a trivial query."""

    async def _ping() -> bool:
        engine = create_engine(get_settings().database_url)
        try:
            async with engine.connect() as conn:
                result = await conn.execute(text("SELECT 1"))
                return result.scalar() == 1
        finally:
            await engine.dispose()

    return await _run_check(
        name="Database",
        factory=_ping,
        success_message="Database accepts connections.",
        target=make_url(get_settings().database_url).render_as_string(hide_password=True),
    )


async def run_all_checks() -> list[IntegrationCheckResult]:
    """Execute all integration checks concurrently."""

    return list(await asyncio.gather(check_database(), check_news_api()))


def format_report(results: Iterable[IntegrationCheckResult]) -> str:
    """One line per check plus a summary, e.g. ``[ok] Database (sqlite+...)``."""

    lines = []
    failed = 0
    for result in results:
        status = "ok" if result.success else "FAIL"
        if not result.success:
            failed += 1
        target = f" ({result.target})" if result.target else ""
        lines.append(f"[{status}] {result.name}{target}: {result.message}")
    if failed:
        lines.append(f"{failed} integration(s) failing.")
    else:
        lines.append("All integrations reachable.")
    return "\n".join(lines)
