"""Dependency injection functions for FastAPI routes.

Uses descriptor pattern to automatically create dependency functions
for all services, eliminating code duplication.
"""

from typing import Any, Type, TypeVar

from fastapi import Depends, Request

from app.services.pdf_service import PdfService
from app.services.semester_service import SemesterService
from app.services.subject_service import SubjectService
from app.storage.base import RecordStore
from app.storage.manager import get_record_store

T = TypeVar("T")


class ServiceDependency:
    """Descriptor that creates a dependency injection function for a service.

    Caches the dependency function to ensure the same function object is returned
    each time, enabling proper use of FastAPI's dependency_overrides.
    """

    def __init__(self, service_class: Type[T]) -> None:
        """Initialize service dependency descriptor.

        Args:
            service_class: The service class to create instances of.
        """
        self.service_class = service_class
        self._cached_func: Any = None

    def __get__(self, instance: Any, owner: type) -> Any:
        """Create and return cached dependency function when accessed."""
        if self._cached_func is None:

            def dependency_func(
                store: RecordStore = Depends(get_record_store),
            ) -> T:
                """Get service instance for dependency injection."""
                return self.service_class(store)

            self._cached_func = dependency_func
        return self._cached_func


def get_semester_service(
    request: Request,
    store: RecordStore = Depends(get_record_store),
) -> SemesterService:
    """Get SemesterService wired with the process-wide seeder and order lock.

    Seed-on-read only applies to the remote store.
    """
    seeder = request.app.state.semester_seeder if store.name == "remote" else None
    return SemesterService(
        store,
        seeder=seeder,
        order_lock=request.app.state.semester_order_lock,
    )


class ServiceDependencies:
    """Container for all service dependency injection functions."""

    semester = staticmethod(get_semester_service)
    subject = ServiceDependency(SubjectService)
    pdf = ServiceDependency(PdfService)


# Create singleton instance for easy access
dependencies = ServiceDependencies()
