"""HTTP tests for the saved-prompt endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from helpers import identity_headers


def test_prompts_require_identity(client: TestClient) -> None:
    assert client.get("/api/prompts").status_code == 401
    assert client.post("/api/prompts", json={"text": "x", "elements": {}}).status_code == 401
    assert client.delete("/api/prompts/1").status_code == 401


def test_save_and_list_round_trip(client: TestClient, auth_headers: dict[str, str]) -> None:
    elements = {
        "subject": "person",
        "subjectAge": "Elderly",
        "style": ["Surreal", "Animated"],
        "cameraMotion": "Dolly in",
    }

    created = client.post(
        "/api/prompts",
        json={"text": "An elderly person.", "elements": elements},
        headers=auth_headers,
    )

    assert created.status_code == 200
    body = created.json()
    assert body["text"] == "An elderly person."
    assert body["elements"] == elements
    assert isinstance(body["id"], str)
    assert "createdAt" in body

    listed = client.get("/api/prompts", headers=auth_headers).json()
    assert listed == [body]


def test_save_requires_text_and_elements(client: TestClient, auth_headers: dict[str, str]) -> None:
    missing_elements = client.post("/api/prompts", json={"text": "Hi."}, headers=auth_headers)
    blank_text = client.post("/api/prompts", json={"text": "  ", "elements": {}}, headers=auth_headers)

    assert missing_elements.status_code == 400
    assert missing_elements.json()["detail"] == "Text and elements are required"
    assert blank_text.status_code == 400


def test_save_rejects_malformed_elements(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.post(
        "/api/prompts",
        json={"text": "Hi.", "elements": {"style": "Cinematic"}},
        headers=auth_headers,
    )

    assert response.status_code == 422


def test_delete_prompt(client: TestClient, auth_headers: dict[str, str]) -> None:
    prompt_id = client.post(
        "/api/prompts",
        json={"text": "A cat.", "elements": {"subject": "cat"}},
        headers=auth_headers,
    ).json()["id"]

    first = client.delete(f"/api/prompts/{prompt_id}", headers=auth_headers)
    second = client.delete(f"/api/prompts/{prompt_id}", headers=auth_headers)

    assert first.status_code == 200
    assert first.json() == {"success": True}
    assert second.status_code == 404
    assert second.json()["detail"] == "Prompt not found"


def test_delete_rejects_non_numeric_id(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.delete("/api/prompts/abc", headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid prompt ID"


def test_users_cannot_see_or_delete_each_others_prompts(client: TestClient) -> None:
    owner = identity_headers("owner@example.com")
    other = identity_headers("other@example.com")
    prompt_id = client.post(
        "/api/prompts",
        json={"text": "Mine.", "elements": {}},
        headers=owner,
    ).json()["id"]

    assert client.get("/api/prompts", headers=other).json() == []
    assert client.delete(f"/api/prompts/{prompt_id}", headers=other).status_code == 404
    assert len(client.get("/api/prompts", headers=owner).json()) == 1


def test_build_endpoint(client: TestClient) -> None:
    response = client.post("/api/prompts/build", json={"subject": "cat", "action": "Flying"})

    assert response.status_code == 200
    assert response.json() == {"text": "A cat, flying."}


def test_analyze_endpoint_builds_text_when_missing(client: TestClient) -> None:
    response = client.post("/api/prompts/analyze", json={"elements": {"subject": "cat"}})

    assert response.status_code == 200
    body = response.json()
    assert body["overall"] == 42
    assert body["label"] == "Fair"
    assert len(body["suggestions"]) == 3


def test_catalog_endpoints(client: TestClient) -> None:
    catalogs = client.get("/api/catalog").json()
    report = client.post(
        "/api/catalog/validate",
        json={"subject": "A person", "style": ["Cinematic", "Vaporwave"], "customAction": "juggling"},
    ).json()

    assert catalogs["audio"][0] == "No audio"
    assert "Film Noir" in catalogs["style"]
    assert report == {"offCatalog": ["style"]}
