"""Data models package."""

from app.exceptions import (
    DatabaseConnectionError,
    InvalidFilterError,
    ModelError,
    RecordNotFoundError,
)
from app.models.base import BaseModel
from app.models.pdf import Pdf
from app.models.semester import Semester
from app.models.subject import Subject

__all__ = [
    "BaseModel",
    "ModelError",
    "RecordNotFoundError",
    "DatabaseConnectionError",
    "InvalidFilterError",
    "Semester",
    "Subject",
    "Pdf",
]
