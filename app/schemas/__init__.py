"""Pydantic schemas for API request/response models."""

from app.schemas.pdf import PdfCreate, PdfResponse, PdfUpdate
from app.schemas.semester import SemesterCreate, SemesterResponse, SemesterUpdate
from app.schemas.subject import SubjectCreate, SubjectResponse, SubjectUpdate

__all__ = [
    "PdfCreate",
    "PdfResponse",
    "PdfUpdate",
    "SemesterCreate",
    "SemesterResponse",
    "SemesterUpdate",
    "SubjectCreate",
    "SubjectResponse",
    "SubjectUpdate",
]
