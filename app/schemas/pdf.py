"""PDF schemas for API request/response models."""

from typing import Optional

from pydantic import Field

from app.schemas.base import WireModel


class PdfCreate(WireModel):
    """Schema for registering a PDF resource."""

    title: str = Field(..., min_length=1, max_length=255)
    file_name: str = Field(..., min_length=1, max_length=255)
    file_url: str = Field(..., min_length=1)
    semester_id: str = Field(..., min_length=1, max_length=64)
    subject_id: str = Field(..., min_length=1, max_length=64)


class PdfUpdate(WireModel):
    """Schema for a partial PDF update.

    ``createdAt`` is not updatable.
    """

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    file_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    file_url: Optional[str] = Field(default=None, min_length=1)
    semester_id: Optional[str] = Field(default=None, min_length=1, max_length=64)
    subject_id: Optional[str] = Field(default=None, min_length=1, max_length=64)


class PdfResponse(WireModel):
    """Response schema for PDF.

    Attributes:
        created_at: Creation time in milliseconds since epoch.
    """

    id: str
    title: str
    file_name: str
    file_url: str
    semester_id: str
    subject_id: str
    created_at: int
