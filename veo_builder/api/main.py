"""FastAPI entrypoint and HTTP routes."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from veo_builder.api.auth import DevIdentityProvider, EdgeProxyIdentityProvider, IdentityProvider
from veo_builder.api.routers import auth, catalog, news, prompts
from veo_builder.config.settings import Settings, get_settings
from veo_builder.db.session import create_engine, create_session_factory, init_db
from veo_builder.monitoring.logging import configure_logging

logger = logging.getLogger(__name__)


def _default_identity_provider(settings: Settings) -> IdentityProvider:
    if settings.auth_dev_bypass:
        logger.warning("AUTH_DEV_BYPASS is enabled; every request acts as %s", settings.dev_user_email)
        return DevIdentityProvider(settings.dev_user_email)
    return EdgeProxyIdentityProvider()


def create_app(
    settings: Settings | None = None,
    identity_provider: IdentityProvider | None = None,
) -> FastAPI:
    """Initialise the FastAPI application."""

    settings = settings or get_settings()
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        engine = create_engine(settings.database_url)
        await init_db(engine)
        app.state.session_factory = create_session_factory(engine)
        logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            await engine.dispose()

    app = FastAPI(
        title="Veo Prompt Builder API",
        version="0.1.0",
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.identity_provider = identity_provider or _default_identity_provider(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok"}

    app.include_router(prompts.router)
    app.include_router(auth.router)
    app.include_router(news.router)
    app.include_router(catalog.router)
    app.mount("/metrics", make_asgi_app())

    return app


app = create_app()
