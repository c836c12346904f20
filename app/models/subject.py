"""Subject model representing academic subjects."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class Subject(BaseModel):
    """Subject model for storing academic subjects with semester information.

    The semester reference is a plain column, not a foreign key: deleting a
    semester leaves its subjects in place.

    Attributes:
        name: Name of the subject (e.g., "Mathematics", "Physics")
        semester_id: Identifier of the owning semester
        created_at: Timestamp when record was created (inherited)
        updated_at: Timestamp when record was last updated (inherited)
    """

    __tablename__ = "subjects"

    record_fields = {"id": "id", "name": "name", "semesterId": "semester_id"}

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    semester_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    def __repr__(self) -> str:
        """String representation of the subject."""
        return (
            f"Subject(id={self.id!r}, name={self.name!r}, "
            f"semester_id={self.semester_id!r})"
        )
