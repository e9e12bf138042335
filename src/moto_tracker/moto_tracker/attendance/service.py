from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from functools import partial
from types import MappingProxyType
from typing import Mapping, Optional

from ..common.datetime_utils import calendar_days, date_key
from ..core.enums import DayModel, DayStatus, Leg, Person
from ..core.exceptions import ValidationError
from ..core.profiles import TrackerProfile
from ..holidays.calendar import can_register, is_holiday, is_working_day
from ..stats.aggregator import MonthStats, compute_month_stats
from .gate import ConfirmationGate, PendingChange
from .model import DayRecord
from .repository import AttendanceRepository
from .store import SetDayStatus, ToggleTrip, get_record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarDay:
    day: date
    key: str
    in_month: bool
    is_today: bool
    holiday: Optional[str]
    active: bool
    record: DayRecord


class AttendanceService:
    """Owns the in-memory store and applies confirmed changes.

    Every confirmed change goes through the pure reducer first; the resulting
    store replaces the current one and is then written to the repository.
    """

    def __init__(self, repository: AttendanceRepository, profile: TrackerProfile):
        self._repository = repository
        self._profile = profile
        self._gate = ConfirmationGate()
        self._store: dict[str, DayRecord] = repository.load()

    @property
    def profile(self) -> TrackerProfile:
        return self._profile

    @property
    def store(self) -> Mapping[str, DayRecord]:
        return MappingProxyType(self._store)

    @property
    def pending(self) -> Optional[PendingChange]:
        return self._gate.pending

    def record_for(self, d: date) -> DayRecord:
        return get_record(self._store, d)

    def is_active(self, d: date) -> bool:
        """Whether trips may be registered on `d` under the current profile."""
        return is_working_day(d, holiday_blocks_registration=self._profile.holiday_blocks_registration)

    def _require_active(self, d: date) -> None:
        if not can_register(d):
            raise ValidationError("Não é possível registar viagens ao fim de semana")
        if not self.is_active(d):
            raise ValidationError(f"Não é possível registar viagens no feriado: {is_holiday(d)}")

    def request_toggle(self, d: date, person: Person, leg: Leg) -> PendingChange:
        if self._profile.day_model != DayModel.TOGGLE:
            raise ValidationError("Este perfil regista o dia inteiro; use o estado do dia")
        self._require_active(d)
        return self._gate.request(ToggleTrip(day=d, person=person, leg=leg), current=self.record_for(d))

    def request_day_status(self, d: date, person: Person, status: DayStatus) -> PendingChange:
        if self._profile.day_model != DayModel.DAY_STATUS:
            raise ValidationError("Este perfil regista cada viagem separadamente")
        self._require_active(d)
        return self._gate.request(SetDayStatus(day=d, person=person, status=status), current=self.record_for(d))

    def confirm(self) -> DayRecord:
        pending = self._gate.pending
        self._store = self._gate.confirm(self._store)
        self._persist()
        return self.record_for(pending.day)

    def cancel(self) -> None:
        self._gate.cancel()

    def _persist(self) -> None:
        try:
            self._repository.save(self._store)
        except Exception:
            # Memory and storage stay diverged until the next successful write.
            logger.warning("Failed to persist attendance store", exc_info=True)

    def month_stats(self, month: date, *, today: date) -> MonthStats:
        return compute_month_stats(
            self._store,
            month,
            today=today,
            cost_per_leg=self._profile.cost_per_leg,
            is_working=partial(
                is_working_day,
                holiday_blocks_registration=self._profile.holiday_blocks_registration,
            ),
        )

    def calendar(self, month: date, *, today: date) -> list[CalendarDay]:
        out = []
        for d in calendar_days(month):
            in_month = d.year == month.year and d.month == month.month
            out.append(
                CalendarDay(
                    day=d,
                    key=date_key(d),
                    in_month=in_month,
                    is_today=d == today,
                    holiday=is_holiday(d),
                    active=self.is_active(d),
                    record=self.record_for(d),
                )
            )
        return out
