"""PDF API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from fastapi import status as http_status

from app.exceptions import DatabaseConnectionError
from app.schemas.pdf import PdfCreate, PdfResponse, PdfUpdate
from app.services.pdf_service import PdfService
from app.utils.dependencies import dependencies

router = APIRouter(
    prefix="/pdfs",
    tags=["PDFs"],
)


@router.get("")
async def list_pdfs(
    subject_id: Optional[str] = Query(default=None, alias="subjectId"),
    semester_id: Optional[str] = Query(default=None, alias="semesterId"),
    service: PdfService = Depends(dependencies.pdf),
) -> list[PdfResponse]:
    """List PDFs, newest first.

    Args:
        subject_id: Only return PDFs of this subject (takes precedence).
        semester_id: Only return PDFs of this semester.
        service: PdfService instance.
    """
    if subject_id is not None:
        return await service.get_by_subject(subject_id)
    if semester_id is not None:
        return await service.get_by_semester(semester_id)
    return await service.get_all()


@router.post("", status_code=http_status.HTTP_201_CREATED)
async def create_pdf(
    data: PdfCreate,
    service: PdfService = Depends(dependencies.pdf),
) -> PdfResponse:
    """Register a PDF resource."""
    pdf = await service.add(data)
    if pdf is None:
        raise DatabaseConnectionError("Failed to create PDF")
    return pdf


@router.get("/{pdf_id}")
async def get_pdf(
    pdf_id: str,
    service: PdfService = Depends(dependencies.pdf),
) -> PdfResponse:
    """Get a PDF by ID.

    Raises:
        RecordNotFoundError: If PDF does not exist.
    """
    return await service.get_by_id_or_fail(pdf_id)


@router.patch("/{pdf_id}")
async def update_pdf(
    pdf_id: str,
    data: PdfUpdate,
    service: PdfService = Depends(dependencies.pdf),
) -> PdfResponse:
    """Partially update a PDF. ``createdAt`` is never changed."""
    return await service.update_or_fail(pdf_id, data)


@router.delete("/{pdf_id}", status_code=http_status.HTTP_204_NO_CONTENT)
async def delete_pdf(
    pdf_id: str,
    service: PdfService = Depends(dependencies.pdf),
) -> Response:
    """Delete a PDF."""
    await service.delete_or_fail(pdf_id)
    return Response(status_code=http_status.HTTP_204_NO_CONTENT)
