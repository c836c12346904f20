"""Record storage backends."""

from app.storage.base import ASCENDING, DESCENDING, Record, RecordStore, SortSpec
from app.storage.database import DatabaseRecordStore
from app.storage.local import LocalFallbackStore, LocalRecordStore
from app.storage.manager import (
    close_store,
    get_record_store,
    init_store,
    store_manager,
)

__all__ = [
    "ASCENDING",
    "DESCENDING",
    "Record",
    "RecordStore",
    "SortSpec",
    "DatabaseRecordStore",
    "LocalFallbackStore",
    "LocalRecordStore",
    "close_store",
    "get_record_store",
    "init_store",
    "store_manager",
]
