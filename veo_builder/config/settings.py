"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_csv(name: str, default: str = "*") -> tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """Centralised project settings based on OS environment variables."""

    environment: str = "dev"
    log_level: str = "INFO"

    database_url: str = "sqlite+aiosqlite:///./data/app.db"
    allowed_origins: tuple[str, ...] = field(default=("*",))

    news_api_key: str = ""
    news_api_base_url: str = "https://newsapi.org/v2"
    news_country: str = "us"
    news_category: str = "general"
    news_page_size: int = 10
    request_timeout: float = 10.0

    # Development only: skip the edge proxy and act as a fixed local user.
    auth_dev_bypass: bool = False
    dev_user_email: str = "dev@example.com"


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        database_url=os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./data/app.db"),
        allowed_origins=_env_csv("ALLOWED_ORIGINS", "*"),
        news_api_key=os.getenv("NEWS_API_KEY", ""),
        news_api_base_url=os.getenv("NEWS_API_BASE_URL", "https://newsapi.org/v2"),
        news_country=os.getenv("NEWS_COUNTRY", "us"),
        news_category=os.getenv("NEWS_CATEGORY", "general"),
        news_page_size=int(os.getenv("NEWS_PAGE_SIZE", "10")),
        request_timeout=float(os.getenv("REQUEST_TIMEOUT", "10")),
        auth_dev_bypass=_env_bool("AUTH_DEV_BYPASS", False),
        dev_user_email=os.getenv("DEV_USER_EMAIL", "dev@example.com"),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
