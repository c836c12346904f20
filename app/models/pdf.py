"""PDF model representing uploaded notes and resources."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel


class Pdf(BaseModel):
    """PDF resource attached to a semester and subject.

    ``created_at`` is set by the caller at creation and exchanged as integer
    milliseconds on the wire. Semester and subject references are not
    enforced.

    Attributes:
        title: Display title
        file_name: Original file name
        file_url: Location the file can be fetched from
        semester_id: Identifier of the owning semester
        subject_id: Identifier of the owning subject
    """

    __tablename__ = "pdfs"

    record_fields = {
        "id": "id",
        "title": "title",
        "fileName": "file_name",
        "fileUrl": "file_url",
        "semesterId": "semester_id",
        "subjectId": "subject_id",
        "createdAt": "created_at",
    }
    datetime_fields = frozenset({"createdAt"})

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_url: Mapped[str] = mapped_column(Text, nullable=False)
    semester_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    subject_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    def __repr__(self) -> str:
        """String representation of the PDF."""
        return f"Pdf(id={self.id!r}, title={self.title!r}, file_name={self.file_name!r})"
