"""Example: drive the service layer directly (no Flask).

Runs against a throwaway JSON file so the configured store is never touched.
"""

import tempfile
from datetime import date
from pathlib import Path

from src.moto_tracker.moto_tracker.attendance.json_file_repository import JsonFileAttendanceRepository
from src.moto_tracker.moto_tracker.container import build_container
from src.moto_tracker.moto_tracker.core.enums import DayStatus, Leg, Person
from src.moto_tracker.moto_tracker.core.profiles import get_profile


def main():
    with tempfile.TemporaryDirectory() as tmp:
        for name in ("basic", "extended"):
            profile = get_profile(name)
            repo = JsonFileAttendanceRepository(Path(tmp) / "moto_tracker.json", key=profile.storage_key)
            container = build_container(profile=profile, repository=repo)
            service = container.attendance_service

            day = date(2024, 2, 14)
            if name == "basic":
                pending = service.request_toggle(day, Person.JORGE, Leg.IDA)
            else:
                pending = service.request_day_status(day, Person.WILLIAM, DayStatus.FULL)
            print(f"[{name}] {pending.describe()}")
            service.confirm()

            print(f"[{name}]", service.month_stats(day, today=day).to_dict())


if __name__ == "__main__":
    main()
