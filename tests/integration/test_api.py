"""Integration tests for the FastAPI REST API."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from dockercheck.api.app import create_app
from dockercheck.keywords import DEFAULT_KEYWORDS
from dockercheck.settings import Settings
from tests.conftest import SAMPLE_DOCKERFILE


@pytest.fixture
def app():
    settings = Settings(_env_file=None, max_document_chars=50_000)
    return create_app(settings=settings)


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


# ---------------------------------------------------------------------------
# Health & Keywords
# ---------------------------------------------------------------------------


class TestHealthEndpoint:
    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "version" in data

    async def test_timing_header(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert "x-request-duration-ms" in response.headers


class TestKeywordsEndpoint:
    async def test_list_keywords(self, client: AsyncClient) -> None:
        response = await client.get("/keywords")
        assert response.status_code == 200
        assert response.json()["keywords"] == list(DEFAULT_KEYWORDS)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestValidateEndpoint:
    async def test_clean_document(self, client: AsyncClient) -> None:
        response = await client.post("/validate", json={"content": SAMPLE_DOCKERFILE})
        assert response.status_code == 200
        data = response.json()
        assert data == {"diagnostics": [], "errors": 0, "warnings": 0}

    async def test_diagnostic_shape(self, client: AsyncClient) -> None:
        response = await client.post("/validate", json={"content": "FROM node node2"})
        assert response.status_code == 200
        data = response.json()
        assert data["errors"] == 1
        assert data["diagnostics"] == [
            {
                "range": {
                    "start": {"line": 0, "character": 10},
                    "end": {"line": 0, "character": 15},
                },
                "message": "Instruction has an extra argument",
                "severity": 1,
                "code": 2,
                "source": "dockerfile-lsp",
            }
        ]

    async def test_warnings_counted(self, client: AsyncClient) -> None:
        response = await client.post("/validate", json={"content": "FROM node\nrun make"})
        data = response.json()
        assert data["errors"] == 0
        assert data["warnings"] == 1

    async def test_settings_override(self, client: AsyncClient) -> None:
        body = {
            "content": "FROM node\nMAINTAINER me",
            "settings": {"deprecatedMaintainer": "error"},
        }
        data = (await client.post("/validate", json=body)).json()
        assert data["errors"] == 1
        assert data["diagnostics"][0]["code"] == 10

    async def test_custom_keywords(self, client: AsyncClient) -> None:
        body = {"content": "FROM node\nFOO bar", "keywords": ["FROM", "FOO"]}
        data = (await client.post("/validate", json=body)).json()
        assert data["diagnostics"] == []

    async def test_invalid_severity_rejected(self, client: AsyncClient) -> None:
        body = {"content": "FROM node", "settings": {"deprecatedMaintainer": "loud"}}
        response = await client.post("/validate", json=body)
        assert response.status_code == 422

    async def test_missing_content_rejected(self, client: AsyncClient) -> None:
        response = await client.post("/validate", json={})
        assert response.status_code == 422

    async def test_document_over_char_limit(self, client: AsyncClient) -> None:
        response = await client.post("/validate", json={"content": "#" * 60_000})
        assert response.status_code == 413
        assert "too large" in response.json()["detail"]
