"""Identity extraction from edge-proxy headers and route dependencies.

The edge proxy authenticates the user and forwards two headers: the
authenticated e-mail and a JWT assertion. The assertion is decoded only to read
display fields. Its signature is NOT verified here; the proxy is the trust
boundary, and verification against the proxy's public keys belongs in front of
this service in production.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from fastapi import Depends, HTTPException, Request, status

logger = logging.getLogger(__name__)

EMAIL_HEADER = "Cf-Access-Authenticated-User-Email"
ASSERTION_HEADER = "Cf-Access-Jwt-Assertion"
DEFAULT_TTL_SECONDS = 3600


@dataclass(slots=True, frozen=True)
class Identity:
    """Caller as described by the upstream proxy."""

    sub: str
    email: str
    name: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    picture: str | None = None
    issued_at: int = 0
    expires_at: int = 0

    def is_expired(self, now: float | None = None) -> bool:
        current = int(now if now is not None else time.time())
        return self.expires_at <= current

    @property
    def first_name(self) -> str | None:
        if self.given_name:
            return self.given_name
        if self.name:
            return self.name.split(" ")[0]
        return None

    @property
    def last_name(self) -> str | None:
        if self.family_name:
            return self.family_name
        if self.name:
            return " ".join(self.name.split(" ")[1:]) or None
        return None


class IdentityProvider(Protocol):
    """Resolves the caller from request headers, or ``None`` if anonymous."""

    def identify(self, headers: Mapping[str, str]) -> Identity | None: ...


def decode_jwt_payload(token: str) -> dict[str, Any]:
    """Decode the middle segment of a JWT without checking its signature."""

    parts = token.split(".")
    if len(parts) != 3:
        logger.warning("Identity assertion is not a three-part JWT")
        return {}

    segment = parts[1]
    segment += "=" * (-len(segment) % 4)
    try:
        decoded = base64.urlsafe_b64decode(segment.encode("ascii"))
        payload = json.loads(decoded)
    except (binascii.Error, UnicodeError, ValueError):
        logger.warning("Failed to decode identity assertion payload")
        return {}
    return payload if isinstance(payload, dict) else {}


class EdgeProxyIdentityProvider:
    """Reads the identity headers injected by the access proxy."""

    def identify(self, headers: Mapping[str, str]) -> Identity | None:
        assertion = headers.get(ASSERTION_HEADER)
        email = headers.get(EMAIL_HEADER)
        if not assertion or not email:
            return None

        payload = decode_jwt_payload(assertion)
        now = int(time.time())
        return Identity(
            sub=_claim_str(payload, "sub") or email,
            email=email,
            name=_claim_str(payload, "name"),
            given_name=_claim_str(payload, "given_name"),
            family_name=_claim_str(payload, "family_name"),
            picture=_claim_str(payload, "picture"),
            issued_at=_claim_time(payload, "iat", now),
            expires_at=_claim_time(payload, "exp", now + DEFAULT_TTL_SECONDS),
        )


def _claim_str(payload: Mapping[str, Any], key: str) -> str | None:
    value = payload.get(key)
    return value if isinstance(value, str) and value else None


def _claim_time(payload: Mapping[str, Any], key: str, default: int) -> int:
    """Epoch seconds from a numeric claim; anything else falls back to ``default``."""

    value = payload.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if not value or not math.isfinite(value):
        return default
    return int(value)


class DevIdentityProvider:
    """Always returns the same local user; for development without the proxy."""

    def __init__(self, email: str = "dev@example.com") -> None:
        self._email = email

    def identify(self, headers: Mapping[str, str]) -> Identity | None:
        now = int(time.time())
        return Identity(
            sub=self._email,
            email=self._email,
            name="Development User",
            given_name="Development",
            family_name="User",
            issued_at=now,
            expires_at=now + DEFAULT_TTL_SECONDS,
        )


def get_identity_provider(request: Request) -> IdentityProvider:
    return request.app.state.identity_provider


def require_identity(
    request: Request,
    provider: IdentityProvider = Depends(get_identity_provider),
) -> Identity:
    """Return the caller or reject the request with 401."""

    identity = provider.identify(request.headers)
    if identity is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    if identity.is_expired():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token expired")
    return identity


IdentityDependency = Depends(require_identity)
