"""Async HTTP client for the saved-prompt endpoints."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from veo_builder.prompts.models import PromptElements, SavedPrompt


class PromptStoreError(RuntimeError):
    """Raised when the prompt store cannot complete a request."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class NotAuthenticatedError(PromptStoreError):
    """The store answered 401; the caller is not logged in."""


class PromptStoreClient:
    """``list`` / ``save`` / ``delete`` over ``/api/prompts``."""

    def __init__(
        self,
        base_url: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers=dict(headers or {}),
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""

        await self._client.aclose()

    async def _request(self, method: str, endpoint: str, *, json_body: Any = None) -> httpx.Response:
        try:
            response = await self._client.request(method, endpoint, json=json_body)
        except httpx.TimeoutException as exc:  # pragma: no cover - network safeguard
            raise PromptStoreError("Timed out waiting for the prompt store.") from exc
        except httpx.HTTPError as exc:
            raise PromptStoreError(f"Prompt store request failed: {exc}") from exc

        if response.status_code == 401:
            raise NotAuthenticatedError("Not logged in.", status_code=401)
        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.is_success:
            return
        try:
            detail = response.json().get("detail")
        except ValueError:
            detail = None
        raise PromptStoreError(
            f"Prompt store returned {response.status_code}: {detail or response.text}",
            status_code=response.status_code,
        )

    async def list(self) -> list[SavedPrompt]:
        response = await self._request("GET", "/api/prompts")
        self._raise_for_status(response)
        return [SavedPrompt.model_validate(item) for item in response.json()]

    async def save(self, text: str, elements: PromptElements) -> SavedPrompt:
        response = await self._request(
            "POST",
            "/api/prompts",
            json_body={"text": text, "elements": elements.to_wire()},
        )
        self._raise_for_status(response)
        return SavedPrompt.model_validate(response.json())

    async def delete(self, prompt_id: str) -> bool:
        """Delete a prompt; ``False`` when the store does not know the id."""

        response = await self._request("DELETE", f"/api/prompts/{prompt_id}")
        if response.status_code == 404:
            return False
        self._raise_for_status(response)
        return bool(response.json().get("success"))
