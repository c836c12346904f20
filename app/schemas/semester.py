"""Semester schemas for API request/response models."""

from typing import Any, Optional

from pydantic import Field, field_validator

from app.schemas.base import WireModel


class SemesterCreate(WireModel):
    """Schema for creating a semester.

    Attributes:
        name: Display name.
        order: Sort position. Omitted or 0 means "after the last semester".
    """

    name: str = Field(..., min_length=1, max_length=255)
    order: Optional[int] = Field(default=None, ge=0)


class SemesterUpdate(WireModel):
    """Schema for a partial semester update."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    order: Optional[int] = Field(default=None, ge=0)


class SemesterResponse(WireModel):
    """Response schema for semester.

    Attributes:
        id: Semester identifier.
        name: Semester name.
        order: Sort position.
    """

    id: str
    name: str
    order: int = 0

    @field_validator("order", mode="before")
    @classmethod
    def default_missing_order(cls, value: Any) -> Any:
        """Treat a null order as 0."""
        return 0 if value is None else value
