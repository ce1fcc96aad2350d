"""Regression tests for RequestBodyLimitMiddleware."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from dockercheck.api.app import create_app
from dockercheck.settings import Settings


@pytest.fixture
def app():
    return create_app(settings=Settings(_env_file=None, max_document_chars=2_000_000))


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


class TestInvalidContentLength:
    """Non-integer Content-Length must not cause a 500."""

    async def test_non_integer_content_length(self, client: AsyncClient) -> None:
        """Invalid Content-Length (non-int) falls through to streaming, not 500."""
        response = await client.post(
            "/health",
            content=b"small body",
            headers={"content-length": "not-a-number"},
        )
        # Should NOT be 500; the request either succeeds or gets a 4xx
        assert response.status_code != 500

    async def test_negative_content_length(self, client: AsyncClient) -> None:
        response = await client.post(
            "/health",
            content=b"small body",
            headers={"content-length": "-1"},
        )
        assert response.status_code != 500


class TestOverLimit:
    async def test_declared_length_over_limit(self, client: AsyncClient) -> None:
        response = await client.post(
            "/keywords",
            content=b"x",
            headers={"content-length": str(2 * 1024 * 1024)},
        )
        assert response.status_code == 413

    async def test_chunked_body_over_default_limit(self, client: AsyncClient) -> None:
        """Body exceeding 1 MB default limit without Content-Length header."""
        oversized = b"x" * (1 * 1024 * 1024 + 1)
        response = await client.post(
            "/keywords",
            content=oversized,
            headers={"transfer-encoding": "chunked"},
        )
        assert response.status_code == 413
        assert "too large" in response.json()["detail"]

    async def test_validate_allows_larger_bodies(self, client: AsyncClient) -> None:
        content = "FROM node\n" + "# padding\n" * 150_000
        response = await client.post("/validate", json={"content": content})
        assert response.status_code == 200
        assert response.json()["diagnostics"] == []
