"""Local fallback store persisting collections as JSON files.

Used when no database is reachable. Each collection name maps to one file
holding the whole ordered list of records.
"""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from app.exceptions import LocalStoreError
from app.storage.base import Record, SortSpec, matches, sort_records

logger = logging.getLogger(__name__)


class LocalFallbackStore:
    """Key-value store mapping a collection name to a list of records.

    Attributes:
        root: Directory holding one ``<collection>.json`` file per key
    """

    def __init__(self, root: Union[str, Path]) -> None:
        """Initialize store rooted at a directory.

        Args:
            root: Directory for collection files, created on first write
        """
        self.root = Path(root)

    def _path(self, collection: str) -> Path:
        if not collection or "/" in collection or collection.startswith("."):
            raise LocalStoreError(f"Invalid collection name '{collection}'")
        return self.root / f"{collection}.json"

    def _read(self, collection: str) -> List[Record]:
        path = self._path(collection)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise LocalStoreError(f"Failed to read '{collection}': {e}") from e

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            raise LocalStoreError(f"Corrupt data in '{collection}': {e}") from e
        if not isinstance(records, list):
            raise LocalStoreError(f"Collection '{collection}' is not a list")
        if not all(isinstance(record, dict) for record in records):
            raise LocalStoreError(f"Collection '{collection}' holds non-record items")
        return records

    def _write(self, collection: str, records: List[Record]) -> None:
        path = self._path(collection)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.root, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(records, fh)
                os.replace(tmp_name, path)
            except Exception:
                os.unlink(tmp_name)
                raise
        except (OSError, TypeError, ValueError) as e:
            raise LocalStoreError(f"Failed to write '{collection}': {e}") from e

    async def read(self, collection: str) -> List[Record]:
        """Read all records of a collection, empty if absent.

        Raises:
            LocalStoreError: If the file cannot be read or parsed
        """
        return await asyncio.to_thread(self._read, collection)

    async def write(self, collection: str, records: List[Record]) -> None:
        """Replace all records of a collection.

        Raises:
            LocalStoreError: If the file cannot be written
        """
        await asyncio.to_thread(self._write, collection, records)


class LocalRecordStore:
    """Record store served entirely from a LocalFallbackStore.

    Every mutation reads the full collection, changes it in memory and
    writes it back. A lock serializes mutations so interleaved coroutines
    cannot lose writes.
    """

    name = "local"

    def __init__(self, fallback: LocalFallbackStore) -> None:
        """Initialize store over a key-value fallback.

        Args:
            fallback: Underlying key-value store
        """
        self.fallback = fallback
        self._lock = asyncio.Lock()

    async def insert(self, collection: str, record: Record) -> Record:
        """Append a record to the collection."""
        async with self._lock:
            records = await self.fallback.read(collection)
            records.append(dict(record))
            await self.fallback.write(collection, records)
        logger.debug(
            "Created local record",
            extra={"collection": collection, "id": record.get("id")},
        )
        return dict(record)

    async def find(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[SortSpec] = None,
        limit: Optional[int] = None,
    ) -> List[Record]:
        """Filter and sort the collection in memory."""
        records = await self.fallback.read(collection)
        result = sort_records([r for r in records if matches(r, filters)], sort)
        return result[:limit] if limit else result

    async def get(self, collection: str, record_id: str) -> Optional[Record]:
        """Get a record by id."""
        for record in await self.fallback.read(collection):
            if record.get("id") == record_id:
                return record
        return None

    async def update(
        self, collection: str, record_id: str, fields: Dict[str, Any]
    ) -> bool:
        """Merge fields into the record with the given id."""
        async with self._lock:
            records = await self.fallback.read(collection)
            matched = False
            updated = []
            for record in records:
                if record.get("id") == record_id:
                    record = {**record, **fields}
                    matched = True
                updated.append(record)
            if matched:
                await self.fallback.write(collection, updated)
        return matched

    async def delete(self, collection: str, record_id: str) -> bool:
        """Remove the record with the given id."""
        async with self._lock:
            records = await self.fallback.read(collection)
            remaining = [r for r in records if r.get("id") != record_id]
            if len(remaining) == len(records):
                return False
            await self.fallback.write(collection, remaining)
        return True

    async def count(self, collection: str) -> int:
        """Count records in a collection."""
        return len(await self.fallback.read(collection))
