"""Business logic services package."""

from app.services.base import BaseService
from app.services.pdf_service import PdfService
from app.services.seeder import DEFAULT_SEMESTERS, SemesterSeeder
from app.services.semester_service import SemesterService
from app.services.subject_service import SubjectService

__all__ = [
    "BaseService",
    "DEFAULT_SEMESTERS",
    "PdfService",
    "SemesterSeeder",
    "SemesterService",
    "SubjectService",
]
