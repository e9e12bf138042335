from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.json_file_repository import JsonFileAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.exceptions import ValidationError
from .core.profiles import TrackerProfile
from .database.connection import DatabaseConnection, DBConfig
from .report.service import ReportService


@dataclass(frozen=True)
class Container:
    profile: TrackerProfile
    attendance_repo: AttendanceRepository

    attendance_service: AttendanceService
    report_service: ReportService


def build_repository(
    *,
    profile: TrackerProfile,
    storage_backend: str,
    data_file: str,
    db_config: Optional[dict] = None,
) -> AttendanceRepository:
    backend = (storage_backend or "json").strip().lower()
    if backend == "json":
        return JsonFileAttendanceRepository(data_file, key=profile.storage_key)
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        return MySQLAttendanceRepository(conn, key=profile.storage_key)
    raise ValidationError(f"STORAGE_BACKEND inválido: {storage_backend!r}")


def build_container(
    *,
    profile: TrackerProfile,
    storage_backend: str = "json",
    data_file: str = "instance/moto_tracker.json",
    db_config: Optional[dict] = None,
    repository: Optional[AttendanceRepository] = None,
) -> Container:
    attendance_repo = repository or build_repository(
        profile=profile,
        storage_backend=storage_backend,
        data_file=data_file,
        db_config=db_config,
    )

    return Container(
        profile=profile,
        attendance_repo=attendance_repo,
        attendance_service=AttendanceService(attendance_repo, profile),
        report_service=ReportService(),
    )
