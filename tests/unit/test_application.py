"""Tests for application factory and endpoints."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from app.application import create_app
from app.storage.manager import store_manager


class TestApplication:
    """Application wiring tests."""

    def test_create_app_includes_routes(self):
        """Core and API routes are registered."""
        app = create_app()
        routes = app.openapi()["paths"]
        assert "/" in routes
        assert "/health" in routes
        assert "/api/health" in routes
        assert "/api/semesters" in routes
        assert "/api/subjects" in routes
        assert "/api/pdfs" in routes

    def test_health_endpoint(self):
        """Health endpoint works without storage."""
        with TestClient(create_app()) as client:
            response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_unknown_route_returns_json_404(self):
        """Unknown paths get a JSON 404 body."""
        with TestClient(create_app()) as client:
            response = client.get("/nope")
        assert response.status_code == 404
        assert response.json()["error"] == "Not Found"

    def test_lifespan_selects_store_once(self, local_store):
        """Startup initializes the store and shutdown closes it."""
        with patch(
            "app.application.init_store", new_callable=AsyncMock
        ) as mock_init, patch(
            "app.application.close_store", new_callable=AsyncMock
        ) as mock_close:
            mock_init.return_value = local_store
            with TestClient(create_app()) as client:
                client.get("/health")
                client.get("/health")

        mock_init.assert_awaited_once()
        mock_close.assert_awaited_once()

    def test_lifespan_seeds_remote_store(self, monkeypatch):
        """Startup seeds defaults when the remote store is selected."""
        remote = AsyncMock()
        remote.name = "remote"
        app = create_app()
        monkeypatch.setattr(
            "app.application.get_settings",
            lambda: SimpleNamespace(seed_defaults=True),
        )
        with patch(
            "app.application.init_store", new=AsyncMock(return_value=remote)
        ), patch("app.application.close_store", new_callable=AsyncMock), patch(
            "app.application.SemesterSeeder.ensure_defaults", new_callable=AsyncMock
        ) as mock_seed:
            with TestClient(app):
                pass

        mock_seed.assert_awaited_once_with(remote)


@pytest.mark.asyncio
async def test_storage_health_reports_backend(async_client, store):
    """Storage health check reports the selected backend."""
    response = await async_client.get("/api/health/storage")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "backend": store.name}


@pytest.mark.asyncio
async def test_requests_without_store_are_unavailable(monkeypatch):
    """Requests before a store is selected get 503."""
    monkeypatch.setattr(store_manager, "_store", None)
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/semesters")

    assert response.status_code == 503
    assert response.json()["error"] == "Service Unavailable"
