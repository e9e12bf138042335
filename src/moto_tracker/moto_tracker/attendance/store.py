"""Pure accessors and reducer over the attendance store.

None of these functions mutate their input: every change returns a new
mapping, so callers holding the previous store keep a valid "before" view.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

from ..common.datetime_utils import date_key
from ..core.enums import DayStatus, Leg, Person
from .model import EMPTY_DAY, AttendanceStore, DayRecord, TripState


def get_record(store: AttendanceStore, d: date) -> DayRecord:
    return store.get(date_key(d), EMPTY_DAY)


def _with_record(store: AttendanceStore, d: date, record: DayRecord) -> dict[str, DayRecord]:
    out = dict(store)
    out[date_key(d)] = record
    return out


def set_trip_state(store: AttendanceStore, d: date, person: Person, leg: Leg, done: bool) -> dict[str, DayRecord]:
    record = get_record(store, d)
    state = record.for_person(person).with_leg(leg, done)
    return _with_record(store, d, record.with_person(person, state))


def toggle_trip(store: AttendanceStore, d: date, person: Person, leg: Leg) -> dict[str, DayRecord]:
    current = get_record(store, d).for_person(person).get(leg)
    return set_trip_state(store, d, person, leg, not current)


def set_day_status(store: AttendanceStore, d: date, person: Person, status: DayStatus) -> dict[str, DayRecord]:
    """Replace both legs at once (does not toggle)."""
    record = get_record(store, d)
    return _with_record(store, d, record.with_person(person, TripState.from_status(status)))


@dataclass(frozen=True)
class SetTripState:
    day: date
    person: Person
    leg: Leg
    done: bool


@dataclass(frozen=True)
class ToggleTrip:
    day: date
    person: Person
    leg: Leg


@dataclass(frozen=True)
class SetDayStatus:
    day: date
    person: Person
    status: DayStatus


Action = Union[SetTripState, ToggleTrip, SetDayStatus]


def apply_action(store: AttendanceStore, action: Action) -> dict[str, DayRecord]:
    if isinstance(action, SetTripState):
        return set_trip_state(store, action.day, action.person, action.leg, action.done)
    if isinstance(action, ToggleTrip):
        return toggle_trip(store, action.day, action.person, action.leg)
    if isinstance(action, SetDayStatus):
        return set_day_status(store, action.day, action.person, action.status)
    raise TypeError(f"Unsupported action: {type(action)!r}")
