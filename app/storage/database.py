"""Remote record store backed by the database through SQLAlchemy."""

import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional, Type

from sqlalchemy import func, select
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.exceptions import DatabaseConnectionError, InvalidFilterError
from app.models import Pdf, Semester, Subject
from app.models.base import BaseModel
from app.storage.base import DESCENDING, Record, SortSpec

logger = logging.getLogger(__name__)

DEFAULT_MODELS: Mapping[str, Type[BaseModel]] = {
    Semester.__tablename__: Semester,
    Subject.__tablename__: Subject,
    Pdf.__tablename__: Pdf,
}

# Driver errors such as a refused connection or a connect timeout reach us
# unwrapped by SQLAlchemy
DATABASE_FAULTS = (DBAPIError, SQLAlchemyError, OSError, asyncio.TimeoutError)


class DatabaseRecordStore:
    """Record store running every operation in its own committed session.

    Write operations (insert, update, delete) commit; read operations don't.
    SQLAlchemy errors and driver connection failures trigger a rollback and
    surface as DatabaseConnectionError.

    Usage:
        store = DatabaseRecordStore(db_manager.session_factory)
        record = await store.insert("semesters", {"id": "a1", "name": "S1"})
    """

    name = "remote"

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        models: Optional[Mapping[str, Type[BaseModel]]] = None,
    ) -> None:
        """Initialize store.

        Args:
            session_factory: Factory producing async sessions
            models: Collection name to model class mapping
        """
        self._session_factory = session_factory
        self._models = dict(models or DEFAULT_MODELS)

    def _model(self, collection: str) -> Type[BaseModel]:
        try:
            return self._models[collection]
        except KeyError:
            raise InvalidFilterError(f"Unknown collection '{collection}'") from None

    def _column(self, model: Type[BaseModel], field: str) -> Any:
        try:
            return model.column_for(field)
        except KeyError:
            raise InvalidFilterError(
                f"Invalid field '{field}' for model {model.__name__}"
            ) from None

    async def insert(self, collection: str, record: Record) -> Record:
        """Insert a record and commit.

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        model = self._model(collection)
        async with self._session_factory() as session:
            try:
                instance = model.from_record(record)
                session.add(instance)
                await session.flush()
                await session.refresh(instance)
                await session.commit()
                logger.debug(
                    f"Created {model.__name__}",
                    extra={"model": model.__name__, "id": instance.id},
                )
                return instance.to_record()
            except DATABASE_FAULTS as e:
                await session.rollback()
                if isinstance(e, IntegrityError):
                    raise DatabaseConnectionError(
                        f"Integrity constraint violation: {str(e)}"
                    ) from e
                raise DatabaseConnectionError(
                    f"Database error during create: {str(e)}"
                ) from e

    async def find(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[SortSpec] = None,
        limit: Optional[int] = None,
    ) -> List[Record]:
        """Find records matching filters, ordered by sort specification.

        Raises:
            InvalidFilterError: If a filter or sort field is unknown
            DatabaseConnectionError: If database operation fails
        """
        model = self._model(collection)
        query = select(model)
        for field, value in (filters or {}).items():
            column = self._column(model, field)
            query = query.where(column == model.to_column_value(field, value))
        for field, direction in sort or ():
            column = self._column(model, field)
            query = query.order_by(
                column.desc() if direction == DESCENDING else column.asc()
            )
        if limit:
            query = query.limit(limit)

        async with self._session_factory() as session:
            try:
                result = await session.execute(query)
                return [instance.to_record() for instance in result.scalars().all()]
            except DATABASE_FAULTS as e:
                raise DatabaseConnectionError(
                    f"Database error during find: {str(e)}"
                ) from e

    async def get(self, collection: str, record_id: str) -> Optional[Record]:
        """Get a record by id.

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        model = self._model(collection)
        async with self._session_factory() as session:
            try:
                instance = await session.get(model, record_id)
                return instance.to_record() if instance is not None else None
            except DATABASE_FAULTS as e:
                raise DatabaseConnectionError(
                    f"Database error during get: {str(e)}"
                ) from e

    async def update(
        self, collection: str, record_id: str, fields: Dict[str, Any]
    ) -> bool:
        """Merge fields into the record and commit.

        Returns:
            False if no record has the given id

        Raises:
            InvalidFilterError: If a field is unknown
            DatabaseConnectionError: If database operation fails
        """
        model = self._model(collection)
        attrs: Dict[str, Any] = {}
        for field, value in fields.items():
            self._column(model, field)
            attrs[model.record_fields[field]] = model.to_column_value(field, value)

        async with self._session_factory() as session:
            try:
                instance = await session.get(model, record_id)
                if instance is None:
                    return False
                for attr, value in attrs.items():
                    setattr(instance, attr, value)
                await session.flush()
                await session.commit()
                logger.debug(
                    f"Updated {model.__name__}",
                    extra={"model": model.__name__, "id": record_id},
                )
                return True
            except DATABASE_FAULTS as e:
                await session.rollback()
                raise DatabaseConnectionError(
                    f"Database error during update: {str(e)}"
                ) from e

    async def delete(self, collection: str, record_id: str) -> bool:
        """Delete the record and commit.

        Returns:
            False if no record has the given id

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        model = self._model(collection)
        async with self._session_factory() as session:
            try:
                instance = await session.get(model, record_id)
                if instance is None:
                    return False
                await session.delete(instance)
                await session.flush()
                await session.commit()
                logger.debug(
                    f"Deleted {model.__name__}",
                    extra={"model": model.__name__, "id": record_id},
                )
                return True
            except DATABASE_FAULTS as e:
                await session.rollback()
                raise DatabaseConnectionError(
                    f"Database error during delete: {str(e)}"
                ) from e

    async def count(self, collection: str) -> int:
        """Count records in a collection.

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        model = self._model(collection)
        async with self._session_factory() as session:
            try:
                result = await session.execute(select(func.count(model.id)))
                return result.scalar_one()
            except DATABASE_FAULTS as e:
                raise DatabaseConnectionError(
                    f"Database error during count: {str(e)}"
                ) from e
