from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Iterator

from ..common.datetime_utils import days_in_month, parse_date_key
from ..core.enums import Person
from ..holidays.calendar import is_working_day
from ..attendance.model import AttendanceStore, DayRecord

WorkingDayPredicate = Callable[[date], bool]


@dataclass(frozen=True)
class BasicPersonStats:
    confirmed_total: int
    completed_trips: int


@dataclass(frozen=True)
class PersonStats:
    confirmed_total: int
    completed_trips: int
    legs_done: int
    active_days: int
    average_per_active_day: float
    forecast: int


@dataclass(frozen=True)
class MonthStats:
    month: date
    cost_per_leg: int
    per_person: dict[Person, PersonStats]
    working_days_total: int
    working_days_passed: int
    working_days_remaining: int
    attendance_efficiency: int

    def for_person(self, person: Person) -> PersonStats:
        return self.per_person[person]

    def to_dict(self) -> dict:
        return {
            "month": self.month.strftime("%Y-%m"),
            "cost_per_leg": self.cost_per_leg,
            "working_days_total": self.working_days_total,
            "working_days_passed": self.working_days_passed,
            "working_days_remaining": self.working_days_remaining,
            "attendance_efficiency": self.attendance_efficiency,
            "persons": {
                p.value: {
                    "confirmed_total": s.confirmed_total,
                    "completed_trips": s.completed_trips,
                    "legs_done": s.legs_done,
                    "active_days": s.active_days,
                    "average_per_active_day": s.average_per_active_day,
                    "forecast": s.forecast,
                }
                for p, s in self.per_person.items()
            },
        }


def round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def safe_div(numerator: float, denominator: float) -> float:
    if not denominator:
        return 0.0
    return numerator / denominator


def records_in_month(store: AttendanceStore, month: date) -> Iterator[tuple[date, DayRecord]]:
    """Entries whose date falls in `month`. Non-canonical keys are skipped."""
    for key, record in store.items():
        d = parse_date_key(key)
        if d is None:
            continue
        if d.year == month.year and d.month == month.month:
            yield d, record


def compute_basic_stats(store: AttendanceStore, month: date, *, cost_per_leg: int) -> dict[Person, BasicPersonStats]:
    """Totals and completed round trips.

    A completed trip is half a leg count truncated: one leg alone counts 0.
    """
    legs = {p: 0 for p in Person}
    for _, record in records_in_month(store, month):
        for p in Person:
            legs[p] += record.for_person(p).legs_done

    return {
        p: BasicPersonStats(confirmed_total=legs[p] * cost_per_leg, completed_trips=legs[p] // 2)
        for p in Person
    }


def count_working_days(month: date, today: date, is_working: WorkingDayPredicate) -> tuple[int, int, int]:
    """(total, passed, remaining) working days; passed includes today."""
    total = passed = remaining = 0
    for d in days_in_month(month):
        if not is_working(d):
            continue
        total += 1
        if d > today:
            remaining += 1
        else:
            passed += 1
    return total, passed, remaining


def compute_month_stats(
    store: AttendanceStore,
    month: date,
    *,
    today: date,
    cost_per_leg: int,
    is_working: WorkingDayPredicate | None = None,
) -> MonthStats:
    is_working = is_working or is_working_day
    basic = compute_basic_stats(store, month, cost_per_leg=cost_per_leg)

    active = {p: 0 for p in Person}
    legs = {p: 0 for p in Person}
    for _, record in records_in_month(store, month):
        for p in Person:
            state = record.for_person(p)
            legs[p] += state.legs_done
            if state.any_done:
                active[p] += 1

    total, passed, remaining = count_working_days(month, today, is_working)

    per_person = {}
    for p in Person:
        confirmed = basic[p].confirmed_total
        per_person[p] = PersonStats(
            confirmed_total=confirmed,
            completed_trips=basic[p].completed_trips,
            legs_done=legs[p],
            active_days=active[p],
            average_per_active_day=safe_div(confirmed, active[p]),
            forecast=confirmed + remaining * 2 * cost_per_leg,
        )

    efficiency = 0
    if total:
        efficiency = round_half_up(100 * sum(active.values()) / (total * 2))

    return MonthStats(
        month=month.replace(day=1),
        cost_per_leg=cost_per_leg,
        per_person=per_person,
        working_days_total=total,
        working_days_passed=passed,
        working_days_remaining=remaining,
        attendance_efficiency=efficiency,
    )
