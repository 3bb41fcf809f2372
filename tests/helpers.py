"""Helpers for building edge-proxy identity headers in tests."""

from __future__ import annotations

import base64
import json
import time
from typing import Any

from veo_builder.api.auth import ASSERTION_HEADER, EMAIL_HEADER


def make_assertion(payload: dict[str, Any]) -> str:
    """Return an unsigned JWT-shaped token carrying ``payload``."""

    def _segment(data: dict[str, Any]) -> str:
        raw = json.dumps(data).encode("utf-8")
        return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")

    return f"{_segment({'alg': 'RS256'})}.{_segment(payload)}.signature"


def identity_headers(email: str = "ada@example.com", **claims: Any) -> dict[str, str]:
    payload = {"sub": email, "exp": int(time.time()) + 600, **claims}
    return {EMAIL_HEADER: email, ASSERTION_HEADER: make_assertion(payload)}
