"""Base service class providing uniform CRUD over a record store."""

import asyncio
import logging
import uuid
from typing import Any, Generic, List, Mapping, Optional, TypeVar, Union

from pydantic import ValidationError

from app.exceptions import AppError, RecordNotFoundError
from app.schemas.base import WireModel
from app.storage.base import Record, RecordStore, SortSpec

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=WireModel)

FieldData = Union[Mapping[str, Any], WireModel]

# Faults every soft operation converts into its empty result. Stores wrap
# their own errors in AppError; OSError and timeouts cover stores that do not.
SOFT_FAULTS = (AppError, ValidationError, OSError, asyncio.TimeoutError)


def new_id() -> str:
    """Generate an opaque unique identifier."""
    return uuid.uuid4().hex


class BaseService(Generic[T]):
    """Base service managing one entity kind over an injected record store.

    The store (remote database or local fallback) is chosen once per process
    and passed in; the service never inspects the environment itself.

    Soft operations never raise:
    - get_all, find: empty list on fault
    - get_by_id, add: None on fault
    - update, delete: False on fault, True when nothing matched

    The ``*_or_fail`` variants raise instead, so callers can tell a missing
    record apart from a successful write.

    Usage:
        class SubjectService(BaseService[SubjectResponse]):
            collection = "subjects"
            schema = SubjectResponse
            create_schema = SubjectCreate
            update_schema = SubjectUpdate
            sort = (("name", ASCENDING),)

        service = SubjectService(store)
        subject = await service.add({"name": "Physics", "semesterId": "s1"})

    Attributes:
        store: Record store for operations
        collection: Collection name in the store
        schema: Response schema used to normalize records
        sort: Default sort specification
    """

    collection: str
    entity_name: str
    schema: type[T]
    create_schema: type[WireModel]
    update_schema: type[WireModel]
    sort: SortSpec = ()

    def __init__(self, store: RecordStore) -> None:
        """Initialize service with a record store.

        Args:
            store: Record store for operations
        """
        self.store = store

    def _normalize(self, record: Record) -> Optional[T]:
        try:
            return self.schema.model_validate(record)
        except ValidationError as e:
            logger.warning(
                f"Skipping malformed {self.entity_name} record",
                extra={"id": record.get("id"), "error": str(e)},
            )
            return None

    def _normalize_all(self, records: List[Record]) -> List[T]:
        entities = (self._normalize(record) for record in records)
        return [entity for entity in entities if entity is not None]

    def _as_create(self, data: FieldData) -> Record:
        if isinstance(data, WireModel):
            data = data.model_dump()
        return self.create_schema.model_validate(data).to_record()

    def _as_patch(self, data: FieldData) -> Record:
        if isinstance(data, WireModel):
            data = data.model_dump(exclude_unset=True)
        return self.update_schema.model_validate(data).to_patch()

    async def _prepare(self, record: Record) -> Record:
        """Hook completing a new record before insertion."""
        return record

    async def _create(self, data: FieldData) -> T:
        record = {"id": new_id(), **self._as_create(data)}
        record = await self._prepare(record)
        stored = await self.store.insert(self.collection, record)
        logger.debug(
            f"Created {self.entity_name}",
            extra={"id": record["id"], "backend": self.store.name},
        )
        return self.schema.model_validate(stored)

    async def _load_all(self) -> List[Record]:
        return await self.store.find(self.collection, sort=self.sort)

    async def get_all(self) -> List[T]:
        """Retrieve all entities in default sort order.

        Returns:
            List of entities, empty on any fault
        """
        try:
            return self._normalize_all(await self._load_all())
        except SOFT_FAULTS as e:
            logger.error(
                f"Failed to get all {self.entity_name}",
                extra={"error": str(e), "backend": self.store.name},
                exc_info=True,
            )
            return []

    async def find(self, **filters: Any) -> List[T]:
        """Find entities whose wire fields equal the given values.

        Returns:
            Matching entities in default sort order, empty on any fault
        """
        try:
            records = await self.store.find(
                self.collection, filters=filters, sort=self.sort
            )
            return self._normalize_all(records)
        except SOFT_FAULTS as e:
            logger.error(
                f"Failed to find {self.entity_name}",
                extra={"filters": filters, "error": str(e)},
                exc_info=True,
            )
            return []

    async def get_by_id(self, record_id: str) -> Optional[T]:
        """Retrieve an entity by identifier.

        Returns:
            Entity, or None if missing or on any fault
        """
        try:
            record = await self.store.get(self.collection, record_id)
        except SOFT_FAULTS as e:
            logger.error(
                f"Failed to get {self.entity_name} by id",
                extra={"id": record_id, "error": str(e)},
                exc_info=True,
            )
            return None
        return self._normalize(record) if record is not None else None

    async def get_by_id_or_fail(self, record_id: str) -> T:
        """Retrieve an entity by identifier or raise.

        Raises:
            RecordNotFoundError: If no entity has the identifier
            AppError: If the store fails
        """
        record = await self.store.get(self.collection, record_id)
        if record is None:
            raise RecordNotFoundError(self.entity_name, record_id)
        return self.schema.model_validate(record)

    async def create(self, data: FieldData) -> T:
        """Create an entity with a generated identifier, raising on fault.

        Raises:
            ValidationError: If fields are invalid
            AppError: If the store fails
        """
        return await self._create(data)

    async def add(self, data: FieldData) -> Optional[T]:
        """Create an entity with a generated identifier.

        Args:
            data: Entity fields (camelCase or snake_case keys, or a schema)

        Returns:
            Created entity, or None on any fault
        """
        try:
            return await self._create(data)
        except SOFT_FAULTS as e:
            logger.error(
                f"Failed to add {self.entity_name}",
                extra={"error": str(e), "backend": self.store.name},
                exc_info=True,
            )
            return None

    async def update(self, record_id: str, data: FieldData) -> bool:
        """Merge fields into an entity.

        Reports success even when no entity matched.

        Returns:
            False only on fault
        """
        try:
            matched = await self.store.update(
                self.collection, record_id, self._as_patch(data)
            )
        except SOFT_FAULTS as e:
            logger.error(
                f"Failed to update {self.entity_name}",
                extra={"id": record_id, "error": str(e)},
                exc_info=True,
            )
            return False
        if not matched:
            logger.debug(
                f"No {self.entity_name} matched update", extra={"id": record_id}
            )
        return True

    async def update_or_fail(self, record_id: str, data: FieldData) -> T:
        """Merge fields into an entity and return the result.

        Raises:
            RecordNotFoundError: If no entity has the identifier
            ValidationError: If fields are invalid
            AppError: If the store fails
        """
        if not await self.store.update(
            self.collection, record_id, self._as_patch(data)
        ):
            raise RecordNotFoundError(self.entity_name, record_id)
        return await self.get_by_id_or_fail(record_id)

    async def delete(self, record_id: str) -> bool:
        """Permanently delete an entity.

        Reports success even when no entity matched. Related entities are
        left in place.

        Returns:
            False only on fault
        """
        try:
            matched = await self.store.delete(self.collection, record_id)
        except SOFT_FAULTS as e:
            logger.error(
                f"Failed to delete {self.entity_name}",
                extra={"id": record_id, "error": str(e)},
                exc_info=True,
            )
            return False
        if not matched:
            logger.debug(
                f"No {self.entity_name} matched delete", extra={"id": record_id}
            )
        return True

    async def delete_or_fail(self, record_id: str) -> None:
        """Permanently delete an entity.

        Raises:
            RecordNotFoundError: If no entity has the identifier
            AppError: If the store fails
        """
        if not await self.store.delete(self.collection, record_id):
            raise RecordNotFoundError(self.entity_name, record_id)

