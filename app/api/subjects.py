"""Subjects API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from fastapi import status as http_status

from app.exceptions import DatabaseConnectionError
from app.schemas.subject import SubjectCreate, SubjectResponse, SubjectUpdate
from app.services.subject_service import SubjectService
from app.utils.dependencies import dependencies

router = APIRouter(
    prefix="/subjects",
    tags=["Subjects"],
)


@router.get("")
async def list_subjects(
    semester_id: Optional[str] = Query(
        default=None, alias="semesterId", description="Filter by semester"
    ),
    service: SubjectService = Depends(dependencies.subject),
) -> list[SubjectResponse]:
    """List subjects ordered by name.

    Args:
        semester_id: Only return subjects of this semester.
        service: SubjectService instance.
    """
    if semester_id is not None:
        return await service.get_by_semester(semester_id)
    return await service.get_all()


@router.post("", status_code=http_status.HTTP_201_CREATED)
async def create_subject(
    data: SubjectCreate,
    service: SubjectService = Depends(dependencies.subject),
) -> SubjectResponse:
    """Create a new subject.

    Raises:
        DatabaseConnectionError: If the subject could not be stored.
    """
    subject = await service.add(data)
    if subject is None:
        raise DatabaseConnectionError("Failed to create subject")
    return subject


@router.patch("/{subject_id}")
async def update_subject(
    subject_id: str,
    data: SubjectUpdate,
    service: SubjectService = Depends(dependencies.subject),
) -> SubjectResponse:
    """Partially update a subject."""
    return await service.update_or_fail(subject_id, data)


@router.delete("/{subject_id}", status_code=http_status.HTTP_204_NO_CONTENT)
async def delete_subject(
    subject_id: str,
    service: SubjectService = Depends(dependencies.subject),
) -> Response:
    """Delete a subject. Its PDFs are kept."""
    await service.delete_or_fail(subject_id)
    return Response(status_code=http_status.HTTP_204_NO_CONTENT)
