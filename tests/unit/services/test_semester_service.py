"""Unit tests for SemesterService on both backends."""

import asyncio

import pytest

from app.services.semester_service import SemesterService
from app.services.subject_service import SubjectService


@pytest.mark.asyncio
async def test_add_then_get_all(store):
    """An added semester is listed with its generated id."""
    service = SemesterService(store)

    semester = await service.add({"name": "Semester 1", "order": 1})

    assert semester is not None
    assert semester.id
    assert semester.name == "Semester 1"
    assert semester.order == 1
    assert await service.get_all() == [semester]


@pytest.mark.asyncio
async def test_get_all_sorted_by_order_then_name(store):
    """Semesters sort by order, ties broken by name."""
    service = SemesterService(store)
    await service.add({"name": "Zeta", "order": 2})
    await service.add({"name": "Alpha", "order": 2})
    await service.add({"name": "First", "order": 1})

    names = [s.name for s in await service.get_all()]

    assert names == ["First", "Alpha", "Zeta"]


@pytest.mark.asyncio
async def test_add_without_order_goes_last(store):
    """Missing or zero order is allocated after the highest."""
    service = SemesterService(store)
    await service.add({"name": "Semester 4", "order": 4})

    appended = await service.add({"name": "Extra"})
    zero = await service.add({"name": "Zero", "order": 0})

    assert appended.order == 5
    assert zero.order == 6


@pytest.mark.asyncio
async def test_add_without_order_on_empty_store_starts_at_one(store):
    """The first auto-ordered semester gets order 1."""
    semester = await SemesterService(store).add({"name": "Only"})
    assert semester.order == 1


@pytest.mark.asyncio
async def test_concurrent_auto_order_allocation_is_unique(store):
    """Concurrent adds sharing a lock never reuse an order."""
    lock = asyncio.Lock()
    services = [SemesterService(store, order_lock=lock) for _ in range(5)]

    created = await asyncio.gather(
        *(service.add({"name": f"S{i}"}) for i, service in enumerate(services))
    )

    assert sorted(s.order for s in created) == [1, 2, 3, 4, 5]


@pytest.mark.asyncio
async def test_semester_nine_scenario(store):
    """Add, rename and delete a ninth semester next to the defaults."""
    service = SemesterService(store)
    for order in range(1, 9):
        await service.add({"name": f"Semester {order}", "order": order})

    added = await service.add({"name": "Semester 9", "order": 9})
    assert (await service.get_all())[-1] == added

    assert await service.update(added.id, {"name": "Sem IX"}) is True
    renamed = (await service.get_all())[-1]
    assert renamed.id == added.id
    assert renamed.name == "Sem IX"
    assert renamed.order == 9

    assert await service.delete(added.id) is True
    assert 9 not in [s.order for s in await service.get_all()]


@pytest.mark.asyncio
async def test_update_is_sparse_merge(store):
    """Fields absent from the update stay unchanged."""
    service = SemesterService(store)
    semester = await service.add({"name": "Old", "order": 3})

    await service.update(semester.id, {"order": 7})

    updated = await service.get_by_id(semester.id)
    assert updated.name == "Old"
    assert updated.order == 7


@pytest.mark.asyncio
async def test_update_cannot_change_id(store):
    """An id in the patch is ignored."""
    service = SemesterService(store)
    semester = await service.add({"name": "Keep", "order": 1})

    await service.update(semester.id, {"id": "hijack", "name": "Kept"})

    assert await service.get_by_id("hijack") is None
    assert (await service.get_by_id(semester.id)).name == "Kept"


@pytest.mark.asyncio
async def test_update_and_delete_unknown_id_report_success(store):
    """No-match writes still report success."""
    service = SemesterService(store)

    assert await service.update("missing", {"name": "x"}) is True
    assert await service.delete("missing") is True


@pytest.mark.asyncio
async def test_delete_leaves_subjects_orphaned(store):
    """Deleting a semester does not cascade to its subjects."""
    semesters = SemesterService(store)
    subjects = SubjectService(store)
    semester = await semesters.add({"name": "Semester 1", "order": 1})
    subject = await subjects.add({"name": "Physics", "semesterId": semester.id})

    assert await semesters.delete(semester.id) is True

    assert await semesters.get_by_id(semester.id) is None
    assert await subjects.get_by_semester(semester.id) == [subject]


@pytest.mark.asyncio
async def test_get_all_seeds_when_seeder_given(store, seeder):
    """Reading an empty collection with a seeder yields semesters 1-8."""
    service = SemesterService(store, seeder=seeder)

    semesters = await service.get_all()

    assert [s.order for s in semesters] == list(range(1, 9))
    assert [s.name for s in semesters] == [f"Semester {i}" for i in range(1, 9)]


@pytest.mark.asyncio
async def test_get_all_without_seeder_stays_empty(store):
    """Without a seeder an empty collection reads empty."""
    assert await SemesterService(store).get_all() == []


@pytest.mark.asyncio
async def test_get_all_does_not_seed_non_empty_collection(store, seeder):
    """Existing semesters suppress seeding."""
    service = SemesterService(store, seeder=seeder)
    await service.add({"name": "Custom", "order": 1})

    semesters = await service.get_all()

    assert [s.name for s in semesters] == ["Custom"]
