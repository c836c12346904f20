"""Semesters API endpoints."""

from fastapi import APIRouter, Depends, Response
from fastapi import status as http_status

from app.exceptions import DatabaseConnectionError
from app.schemas.semester import SemesterCreate, SemesterResponse, SemesterUpdate
from app.services.semester_service import SemesterService
from app.utils.dependencies import dependencies

router = APIRouter(
    prefix="/semesters",
    tags=["Semesters"],
)


@router.get("")
async def list_semesters(
    service: SemesterService = Depends(dependencies.semester),
) -> list[SemesterResponse]:
    """List semesters ordered by order, then name.

    Seeds the default semesters when the remote store is empty.
    """
    return await service.get_all()


@router.post("", status_code=http_status.HTTP_201_CREATED)
async def create_semester(
    data: SemesterCreate,
    service: SemesterService = Depends(dependencies.semester),
) -> SemesterResponse:
    """Create a new semester.

    Raises:
        DatabaseConnectionError: If the semester could not be stored.
    """
    semester = await service.add(data)
    if semester is None:
        raise DatabaseConnectionError("Failed to create semester")
    return semester


@router.patch("/{semester_id}")
async def update_semester(
    semester_id: str,
    data: SemesterUpdate,
    service: SemesterService = Depends(dependencies.semester),
) -> SemesterResponse:
    """Partially update a semester.

    Raises:
        RecordNotFoundError: If semester does not exist.
    """
    return await service.update_or_fail(semester_id, data)


@router.delete("/{semester_id}", status_code=http_status.HTTP_204_NO_CONTENT)
async def delete_semester(
    semester_id: str,
    service: SemesterService = Depends(dependencies.semester),
) -> Response:
    """Delete a semester. Its subjects and PDFs are kept.

    Raises:
        RecordNotFoundError: If semester does not exist.
    """
    await service.delete_or_fail(semester_id)
    return Response(status_code=http_status.HTTP_204_NO_CONTENT)
