"""Subject service providing CRUD and per-semester listing."""

from typing import List

from app.schemas.subject import SubjectCreate, SubjectResponse, SubjectUpdate
from app.services.base import BaseService
from app.storage.base import ASCENDING


class SubjectService(BaseService[SubjectResponse]):
    """Service for managing Subject entities.

    Subjects are listed by name. The semester reference is not checked on
    write and survives deletion of the semester.

    Usage:
        service = SubjectService(store)
        subject = await service.add({"name": "Physics", "semesterId": sem.id})
        subjects = await service.get_by_semester(sem.id)
    """

    collection = "subjects"
    entity_name = "Subject"
    schema = SubjectResponse
    create_schema = SubjectCreate
    update_schema = SubjectUpdate
    sort = (("name", ASCENDING),)

    async def get_by_semester(self, semester_id: str) -> List[SubjectResponse]:
        """Get subjects belonging to a semester, sorted by name."""
        return await self.find(semesterId=semester_id)
