from __future__ import annotations

from datetime import date, datetime

import pytest

from src.moto_tracker.moto_tracker.attendance.model import AttendanceStore, DayRecord


class InMemoryAttendanceRepo:
    def __init__(self, initial: dict[str, DayRecord] | None = None, *, fail_on_save: bool = False):
        self._data = dict(initial or {})
        self.saves = 0
        self.fail_on_save = fail_on_save

    def load(self) -> dict[str, DayRecord]:
        return dict(self._data)

    def save(self, store: AttendanceStore) -> None:
        if self.fail_on_save:
            raise OSError("disk full")
        self.saves += 1
        self._data = dict(store)

    @property
    def data(self) -> dict[str, DayRecord]:
        return self._data


@pytest.fixture
def fixed_today() -> date:
    # Wednesday
    return date(2024, 2, 14)


@pytest.fixture
def fixed_now(fixed_today) -> datetime:
    return datetime.combine(fixed_today, datetime.min.time()).replace(hour=9, minute=30)


@pytest.fixture
def memory_repo() -> InMemoryAttendanceRepo:
    return InMemoryAttendanceRepo()


@pytest.fixture
def make_repo():
    return InMemoryAttendanceRepo
