# tests/test_mock_api.py

import random
from datetime import datetime, timezone

import pytest

from models.student import StudentDraft
from services.errors import NetworkError, ServerError, ValidationError
from services.mock_api import COURSES, FALLBACK_COURSES, MockApi, SimulationSettings

pytestmark = pytest.mark.anyio


async def test_fetch_courses_returns_catalogue(api):
    courses = await api.fetch_courses()

    assert [c.id for c in courses] == [1, 2, 3, 4, 5, 6, 7]
    assert courses[0].name == "HTML Basics"
    assert FALLBACK_COURSES == COURSES[:4]


async def test_fetch_courses_network_error():
    api = MockApi(SimulationSettings.instant(fetch_failure_rate=1.0))

    with pytest.raises(NetworkError):
        await api.fetch_courses()


async def test_save_student_assigns_id_and_timestamps(api):
    student = await api.save_student({"name": "Ana", "email": "ana@x.com"})

    assert student.id > 0
    assert student.createdAt is not None
    assert student.createdAt == student.updatedAt
    dumped = student.model_dump(mode="json")
    assert dumped["createdAt"].startswith("2026-10-19T09:30:00")
    assert dumped["createdAt"] == dumped["updatedAt"]
    assert dumped["name"] == "Ana"


async def test_save_student_requires_name_and_email(api):
    with pytest.raises(ValidationError):
        await api.save_student(StudentDraft(name="", email="ana@x.com"))
    with pytest.raises(ValidationError):
        await api.save_student(StudentDraft(name="Ana", email="   "))


async def test_save_student_server_error():
    api = MockApi(SimulationSettings.instant(save_failure_rate=1.0))

    with pytest.raises(ServerError):
        await api.save_student({"name": "Ana", "email": "ana@x.com"})


async def test_ids_stay_unique_within_one_millisecond():
    fixed = datetime(2026, 10, 19, tzinfo=timezone.utc)
    api = MockApi(SimulationSettings.instant(), clock=lambda: fixed)

    first = await api.save_student({"name": "Ana", "email": "ana@x.com"})
    second = await api.save_student({"name": "Bo", "email": "bo@x.com"})

    assert first.id == int(fixed.timestamp() * 1000)
    assert second.id == first.id + 1


async def test_reserve_ids_skips_known_ids():
    fixed = datetime(2026, 10, 19, tzinfo=timezone.utc)
    api = MockApi(SimulationSettings.instant(), clock=lambda: fixed)
    taken = int(fixed.timestamp() * 1000) + 10

    api.reserve_ids([5, taken])
    student = await api.save_student({"name": "Ana", "email": "ana@x.com"})

    assert student.id == taken + 1


async def test_update_student_keeps_id_and_refreshes_timestamp(api):
    created = await api.save_student({"name": "Ana", "email": "ana@x.com"})

    updated = await api.update_student(created.id, {"name": "Ana Maria", "email": "ana@x.com"})

    assert updated.id == created.id
    assert updated.name == "Ana Maria"
    assert updated.updatedAt > created.updatedAt


async def test_update_student_validates(api):
    with pytest.raises(ValidationError):
        await api.update_student(1, {"name": "Ana", "email": ""})


async def test_latency_is_drawn_from_bounds():
    delays = []

    async def record(delay):
        delays.append(delay)

    settings = SimulationSettings(
        fetch_delay=(1.0, 2.0),
        save_delay=(0.3, 0.5),
        update_delay=(0.2, 0.2),
        fetch_failure_rate=0.0,
        save_failure_rate=0.0,
    )
    api = MockApi(settings, rng=random.Random(1), sleep=record)

    await api.fetch_courses()
    await api.save_student({"name": "Ana", "email": "ana@x.com"})
    await api.update_student(1, {"name": "Ana", "email": "ana@x.com"})

    assert 1.0 <= delays[0] <= 2.0
    assert 0.3 <= delays[1] <= 0.5
    assert delays[2] == 0.2
