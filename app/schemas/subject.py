"""Subject schemas for API request/response models."""

from typing import Optional

from pydantic import Field

from app.schemas.base import WireModel


class SubjectCreate(WireModel):
    """Schema for creating a subject.

    Attributes:
        name: Name of the subject.
        semester_id: Identifier of the owning semester (not verified).
    """

    name: str = Field(..., min_length=1, max_length=255)
    semester_id: str = Field(..., min_length=1, max_length=64)


class SubjectUpdate(WireModel):
    """Schema for a partial subject update."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    semester_id: Optional[str] = Field(default=None, min_length=1, max_length=64)


class SubjectResponse(WireModel):
    """Response schema for subject.

    Attributes:
        id: Subject ID.
        name: Subject name.
        semester_id: Owning semester ID.
    """

    id: str
    name: str
    semester_id: str
