"""Unit tests for process-wide store selection."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from app.exceptions import StoreNotInitializedError
from app.storage.database import DatabaseRecordStore
from app.storage.local import LocalRecordStore
from app.storage.manager import StoreManager


def _settings(backend: str, tmp_path) -> SimpleNamespace:
    return SimpleNamespace(
        storage_backend=backend, local_store_path=str(tmp_path / "local")
    )


class TestStoreManager:
    """Tests for StoreManager backend selection."""

    @pytest.mark.asyncio
    async def test_local_backend_skips_database(self, tmp_path):
        """STORAGE_BACKEND=local never touches the database."""
        with patch(
            "app.storage.manager.get_settings", return_value=_settings("local", tmp_path)
        ), patch("app.storage.manager.init_db", new_callable=AsyncMock) as mock_init:
            store = await StoreManager().init_store()

        assert isinstance(store, LocalRecordStore)
        mock_init.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_auto_uses_database_when_reachable(self, tmp_path):
        """auto selects the remote store after a successful connection."""
        with patch(
            "app.storage.manager.get_settings", return_value=_settings("auto", tmp_path)
        ), patch("app.storage.manager.init_db", new=AsyncMock(return_value=True)):
            store = await StoreManager().init_store()

        assert isinstance(store, DatabaseRecordStore)

    @pytest.mark.asyncio
    async def test_auto_falls_back_to_local(self, tmp_path):
        """auto degrades to the local store when the database is unreachable."""
        with patch(
            "app.storage.manager.get_settings", return_value=_settings("auto", tmp_path)
        ), patch("app.storage.manager.init_db", new=AsyncMock(return_value=False)):
            store = await StoreManager().init_store()

        assert isinstance(store, LocalRecordStore)

    @pytest.mark.asyncio
    async def test_remote_keeps_database_store_when_unreachable(self, tmp_path):
        """remote stays on the database store and fails soft later."""
        with patch(
            "app.storage.manager.get_settings",
            return_value=_settings("remote", tmp_path),
        ), patch("app.storage.manager.init_db", new=AsyncMock(return_value=False)):
            store = await StoreManager().init_store()

        assert isinstance(store, DatabaseRecordStore)

    @pytest.mark.asyncio
    async def test_selection_happens_once(self, tmp_path):
        """Repeated initialization returns the first selection."""
        manager = StoreManager()
        with patch(
            "app.storage.manager.get_settings", return_value=_settings("auto", tmp_path)
        ), patch(
            "app.storage.manager.init_db", new=AsyncMock(return_value=False)
        ) as mock_init:
            first = await manager.init_store()
            second = await manager.init_store()

        assert first is second
        assert manager.store is first
        mock_init.assert_awaited_once()

    def test_store_before_init_raises(self):
        """Accessing the store before startup raises."""
        with pytest.raises(StoreNotInitializedError):
            StoreManager().store

    @pytest.mark.asyncio
    async def test_close_disposes_database(self, local_store):
        """Closing a remote store disposes the engine and resets state."""
        manager = StoreManager()
        manager.set_store(DatabaseRecordStore(AsyncMock()))
        with patch("app.storage.manager.close_db", new_callable=AsyncMock) as mock_close:
            await manager.close()

        mock_close.assert_awaited_once()
        with pytest.raises(StoreNotInitializedError):
            manager.store

    @pytest.mark.asyncio
    async def test_close_local_store(self, local_store):
        """Closing a local store only forgets it."""
        manager = StoreManager()
        manager.set_store(local_store)
        with patch("app.storage.manager.close_db", new_callable=AsyncMock) as mock_close:
            await manager.close()

        mock_close.assert_not_awaited()
