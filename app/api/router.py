"""API router factory with core endpoints."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.exceptions import AppError
from app.storage.base import RecordStore
from app.storage.manager import get_record_store

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def create_api_router() -> APIRouter:
    """Create router with storage-backed API endpoints.

    All routes are mounted under /api prefix.

    Returns:
        APIRouter with entity endpoints and health checks.
    """
    from app.api.pdfs import router as pdfs_router
    from app.api.semesters import router as semesters_router
    from app.api.subjects import router as subjects_router

    router = APIRouter(prefix=API_PREFIX)

    @router.get("/health", tags=["Health"], status_code=status.HTTP_200_OK)
    async def health_check() -> dict:
        """Health check endpoint - basic application health."""
        return {"status": "healthy", "service": "study-portal"}

    @router.get(
        "/health/storage",
        tags=["Health"],
        status_code=status.HTTP_200_OK,
        response_model=None,
    )
    async def health_check_storage(
        store: RecordStore = Depends(get_record_store),
    ) -> JSONResponse:
        """Deep health check - reports the selected backend and reachability."""
        try:
            await store.count("semesters")
            return JSONResponse(
                status_code=status.HTTP_200_OK,
                content={"status": "healthy", "backend": store.name},
            )
        except AppError as e:
            logger.error(f"Storage health check failed: {e}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={
                    "status": "unhealthy",
                    "error": str(e),
                },
            )

    router.include_router(semesters_router)
    router.include_router(subjects_router)
    router.include_router(pdfs_router)

    return router
