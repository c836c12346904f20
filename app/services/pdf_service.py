"""PDF service providing CRUD and listings by subject or semester."""

from datetime import datetime, timezone
from typing import List

from app.models.base import datetime_to_millis
from app.schemas.pdf import PdfCreate, PdfResponse, PdfUpdate
from app.services.base import BaseService
from app.storage.base import DESCENDING, Record


def now_millis() -> int:
    """Current time in milliseconds since epoch."""
    return datetime_to_millis(datetime.now(timezone.utc))


class PdfService(BaseService[PdfResponse]):
    """Service for managing PDF resources.

    PDFs are listed newest first. ``createdAt`` is stamped once at creation
    and cannot be changed by updates.
    """

    collection = "pdfs"
    entity_name = "PDF"
    schema = PdfResponse
    create_schema = PdfCreate
    update_schema = PdfUpdate
    sort = (("createdAt", DESCENDING),)

    async def _prepare(self, record: Record) -> Record:
        record["createdAt"] = now_millis()
        return record

    async def get_by_subject(self, subject_id: str) -> List[PdfResponse]:
        """Get PDFs of a subject, newest first."""
        return await self.find(subjectId=subject_id)

    async def get_by_semester(self, semester_id: str) -> List[PdfResponse]:
        """Get PDFs of a semester, newest first."""
        return await self.find(semesterId=semester_id)
