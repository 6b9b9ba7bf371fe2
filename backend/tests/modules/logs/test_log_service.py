"""
Tests for the exercise log service.
"""

from datetime import date

import pytest

from modules.logs.exceptions import LogNotFoundError
from modules.logs.models import CreateLogRequest, UpdateLogRequest
from modules.logs.service import LogService
from tests.fakes import InMemoryLogRepository

ALICE = "alice-id"
BOB = "bob-id"


def squat(day: date, **overrides) -> CreateLogRequest:
    values = {"date": day, "exercise": "Squat", "weight": 100, "reps": 5, "sets": 3}
    values.update(overrides)
    return CreateLogRequest(**values)


@pytest.fixture
def service() -> LogService:
    return LogService(InMemoryLogRepository())


class TestLogRequest:
    def test_defaults(self):
        request = CreateLogRequest(exercise="Plank", reps=1, sets=3)
        assert request.date == date.today()
        assert request.weight == 0

    @pytest.mark.parametrize("field", ["reps", "sets"])
    def test_reps_and_sets_must_be_positive(self, field):
        with pytest.raises(ValueError):
            squat(date(2026, 1, 1), **{field: 0})


class TestLogService:
    @pytest.mark.asyncio
    async def test_latest_date_first(self, service):
        await service.create_log(ALICE, squat(date(2026, 1, 1)))
        await service.create_log(ALICE, squat(date(2026, 1, 3)))
        await service.create_log(ALICE, squat(date(2026, 1, 2)))
        logs = await service.list_logs(ALICE)
        assert [entry.date.day for entry in logs] == [3, 2, 1]

    @pytest.mark.asyncio
    async def test_list_only_own_logs(self, service):
        await service.create_log(ALICE, squat(date(2026, 1, 1)))
        await service.create_log(BOB, squat(date(2026, 1, 1), exercise="Bench"))
        logs = await service.list_logs(BOB)
        assert [entry.exercise for entry in logs] == ["Bench"]

    @pytest.mark.asyncio
    async def test_sparse_update(self, service):
        entry = await service.create_log(ALICE, squat(date(2026, 1, 1)))
        updated = await service.update_log(entry.id, ALICE, UpdateLogRequest(weight=110))
        assert updated.weight == 110
        assert updated.reps == 5

    @pytest.mark.asyncio
    async def test_foreign_log_looks_missing(self, service):
        entry = await service.create_log(ALICE, squat(date(2026, 1, 1)))
        with pytest.raises(LogNotFoundError):
            await service.update_log(entry.id, BOB, UpdateLogRequest(reps=10))
        with pytest.raises(LogNotFoundError):
            await service.delete_log(entry.id, BOB)
        assert (await service.get_log(entry.id, ALICE)).reps == 5
