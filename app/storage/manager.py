"""Record store selection with process-wide lifecycle management."""

import logging
from typing import Optional

from app.config import get_settings
from app.exceptions import StoreNotInitializedError
from app.storage.base import RecordStore
from app.storage.database import DatabaseRecordStore
from app.storage.local import LocalFallbackStore, LocalRecordStore
from app.utils.db import close_db, db_manager, init_db

logger = logging.getLogger(__name__)


class StoreManager:
    """Manager holding the record store chosen for this process.

    The backend is decided once at startup and never re-evaluated, so a
    session cannot switch stores midway.
    """

    def __init__(self) -> None:
        """Initialize manager with no store."""
        self._store: Optional[RecordStore] = None

    async def init_store(self) -> RecordStore:
        """Select and initialize the record store from settings.

        ``STORAGE_BACKEND`` decides the backend:
        - ``remote``: database store, even if the connection check fails
        - ``local``: JSON fallback store
        - ``auto``: database store if reachable, local store otherwise

        Returns:
            Selected record store. Repeated calls return the same store.
        """
        if self._store is not None:
            return self._store

        settings = get_settings()
        backend = settings.storage_backend

        if backend in ("remote", "auto"):
            connected = await init_db()
            if connected or backend == "remote":
                if not connected:
                    logger.warning(
                        "Database unavailable, remote store will fail soft",
                        extra={"backend": backend},
                    )
                self._store = DatabaseRecordStore(db_manager.session_factory)
            else:
                logger.warning(
                    "Database unavailable, falling back to local store",
                    extra={"path": settings.local_store_path},
                )

        if self._store is None:
            self._store = LocalRecordStore(
                LocalFallbackStore(settings.local_store_path)
            )

        logger.info("Record store selected", extra={"backend": self._store.name})
        return self._store

    def set_store(self, store: RecordStore) -> None:
        """Install an explicit store (used by tests and embedding callers)."""
        self._store = store

    @property
    def store(self) -> RecordStore:
        """Get the selected store.

        Raises:
            StoreNotInitializedError: If no store has been selected yet.
        """
        if self._store is None:
            raise StoreNotInitializedError("Record store is not initialized")
        return self._store

    async def close(self) -> None:
        """Release backend resources and forget the selected store."""
        if isinstance(self._store, DatabaseRecordStore):
            await close_db()
        self._store = None


# Global store manager instance
store_manager = StoreManager()


async def init_store() -> RecordStore:
    """Initialize the process-wide record store."""
    logger.info("Initializing record store...")
    return await store_manager.init_store()


def get_record_store() -> RecordStore:
    """Get the process-wide record store.

    Raises:
        StoreNotInitializedError: If store is not initialized.
    """
    return store_manager.store


async def close_store() -> None:
    """Close the process-wide record store."""
    logger.info("Closing record store...")
    await store_manager.close()
    logger.info("Record store closed")
