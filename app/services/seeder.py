"""Default semester seeding."""

import asyncio
import logging

from app.services.base import SOFT_FAULTS, new_id
from app.storage.base import RecordStore

logger = logging.getLogger(__name__)

SEMESTER_COLLECTION = "semesters"

DEFAULT_SEMESTERS = [(f"Semester {order}", order) for order in range(1, 9)]


class SemesterSeeder:
    """Creates the default semesters when the collection is empty.

    Only one seeding run may be in flight at a time; a caller waiting on the
    lock re-checks emptiness and skips if another run already seeded.
    Share one instance per process.
    """

    def __init__(self) -> None:
        """Initialize seeder with its single-flight lock."""
        self._lock = asyncio.Lock()

    async def ensure_defaults(self, store: RecordStore) -> int:
        """Create semesters 1-8 if no semester exists.

        Each insert failure is logged and skipped; the rest still run.

        Args:
            store: Record store to seed

        Returns:
            Number of semesters created
        """
        async with self._lock:
            try:
                existing = await store.count(SEMESTER_COLLECTION)
            except SOFT_FAULTS as e:
                logger.error(
                    "Failed to check semesters before seeding",
                    extra={"error": str(e)},
                    exc_info=True,
                )
                return 0
            if existing:
                return 0

            logger.info("No semesters found, creating defaults")
            created = 0
            for name, order in DEFAULT_SEMESTERS:
                try:
                    await store.insert(
                        SEMESTER_COLLECTION,
                        {"id": new_id(), "name": name, "order": order},
                    )
                    created += 1
                except SOFT_FAULTS as e:
                    logger.error(
                        f"Error creating default semester {name}",
                        extra={"error": str(e)},
                        exc_info=True,
                    )
            logger.info("Default semesters created", extra={"created": created})
            return created
