"""Semester service providing ordering and default-data seeding."""

import asyncio
from typing import List, Optional

from app.schemas.semester import SemesterCreate, SemesterResponse, SemesterUpdate
from app.services.base import BaseService, FieldData
from app.services.seeder import SEMESTER_COLLECTION, SemesterSeeder
from app.storage.base import ASCENDING, DESCENDING, Record, RecordStore


class SemesterService(BaseService[SemesterResponse]):
    """Service for managing Semester entities.

    Semesters are listed by order, then name. A semester created without a
    positive order is placed after the current highest one.

    When a seeder is given, reading an empty collection seeds the default
    semesters first.

    Attributes:
        seeder: Optional default-data seeder
        order_lock: Lock serializing order allocation with insertion
    """

    collection = SEMESTER_COLLECTION
    entity_name = "Semester"
    schema = SemesterResponse
    create_schema = SemesterCreate
    update_schema = SemesterUpdate
    sort = (("order", ASCENDING), ("name", ASCENDING))

    def __init__(
        self,
        store: RecordStore,
        seeder: Optional[SemesterSeeder] = None,
        order_lock: Optional[asyncio.Lock] = None,
    ) -> None:
        """Initialize service.

        Args:
            store: Record store for operations
            seeder: Seeder run when the collection is read empty
            order_lock: Process-wide lock for order allocation
        """
        super().__init__(store)
        self.seeder = seeder
        self.order_lock = order_lock or asyncio.Lock()

    async def _load_all(self) -> List[Record]:
        records = await super()._load_all()
        if records or self.seeder is None:
            return records
        await self.seeder.ensure_defaults(self.store)
        return await super()._load_all()

    async def _next_order(self) -> int:
        highest = await self.store.find(
            self.collection, sort=(("order", DESCENDING),), limit=1
        )
        if not highest:
            return 1
        return (highest[0].get("order") or 0) + 1

    async def _prepare(self, record: Record) -> Record:
        if not record.get("order"):
            record["order"] = await self._next_order()
        return record

    async def _create(self, data: FieldData) -> SemesterResponse:
        async with self.order_lock:
            return await super()._create(data)
