"""Base model class with record mapping and timestamp tracking."""

from datetime import datetime, timedelta, timezone
from typing import Any, ClassVar, Dict, Type, TypeVar

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.utils.db import Base

T = TypeVar("T", bound="BaseModel")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def datetime_to_millis(value: datetime) -> int:
    """Convert datetime to integer milliseconds since epoch.

    Naive datetimes are treated as UTC (SQLite drops tzinfo on storage).
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // timedelta(milliseconds=1)


def millis_to_datetime(value: int) -> datetime:
    """Convert integer milliseconds since epoch to an aware UTC datetime."""
    return EPOCH + timedelta(milliseconds=value)


class BaseModel(Base):
    """Abstract base class for stored entities.

    Provides common functionality for all models:
    - Opaque string primary key (id), assigned by the caller
    - Timestamps (created_at, updated_at)
    - Mapping between wire records and columns

    Each subclass declares ``record_fields``: wire field name -> attribute
    name. Fields listed in ``datetime_fields`` are exchanged as integer
    milliseconds on the wire.

    Usage:
        class Semester(BaseModel):
            __tablename__ = "semesters"
            record_fields = {"id": "id", "name": "name", "order": "order"}

            name: Mapped[str] = mapped_column(String(255))
    """

    __abstract__ = True  # This is an abstract base class

    record_fields: ClassVar[Dict[str, str]] = {"id": "id"}
    datetime_fields: ClassVar[frozenset] = frozenset()

    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    # Timestamps - automatically managed
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    @classmethod
    def column_for(cls, field: str) -> Any:
        """Get mapped column attribute for a wire field name.

        Raises:
            KeyError: If the field is not part of the record shape
        """
        return getattr(cls, cls.record_fields[field])

    @classmethod
    def to_column_value(cls, field: str, value: Any) -> Any:
        """Convert a wire value to its column representation."""
        if field in cls.datetime_fields and isinstance(value, int):
            return millis_to_datetime(value)
        return value

    @classmethod
    def from_record(cls: Type[T], record: Dict[str, Any]) -> T:
        """Build a model instance from a wire record.

        Unknown keys are ignored.
        """
        kwargs = {
            attr: cls.to_column_value(field, record[field])
            for field, attr in cls.record_fields.items()
            if field in record
        }
        return cls(**kwargs)

    def to_record(self) -> Dict[str, Any]:
        """Convert model instance to its wire record."""
        record: Dict[str, Any] = {}
        for field, attr in self.record_fields.items():
            value = getattr(self, attr)
            if field in self.datetime_fields and isinstance(value, datetime):
                value = datetime_to_millis(value)
            record[field] = value
        return record

    def to_dict(self) -> Dict[str, Any]:
        """Convert model instance to dictionary of columns."""
        return {
            column.name: getattr(self, column.name) for column in self.__table__.columns
        }

    def __repr__(self) -> str:
        """String representation of the model."""
        attrs = ", ".join(
            f"{key}={repr(value)}"
            for key, value in self.to_dict().items()
            if key != "id"
        )
        return f"{self.__class__.__name__}(id={self.id!r}, {attrs})"
