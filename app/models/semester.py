"""Semester model representing academic terms."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class Semester(BaseModel):
    """Semester model for storing academic terms in display order.

    Attributes:
        name: Display name (e.g., "Semester 1")
        order: Position used as the default sort key
        created_at: Timestamp when record was created (inherited)
        updated_at: Timestamp when record was last updated (inherited)
    """

    __tablename__ = "semesters"

    record_fields = {"id": "id", "name": "name", "order": "order"}

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)

    def __repr__(self) -> str:
        """String representation of the semester."""
        return f"Semester(id={self.id!r}, name={self.name!r}, order={self.order})"
