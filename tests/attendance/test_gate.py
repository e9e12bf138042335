from datetime import date

import pytest

from src.moto_tracker.moto_tracker.attendance.gate import ConfirmationGate
from src.moto_tracker.moto_tracker.attendance.model import DayRecord, TripState
from src.moto_tracker.moto_tracker.attendance.store import SetDayStatus, ToggleTrip, get_record
from src.moto_tracker.moto_tracker.core.enums import DayStatus, GateState, Leg, Person
from src.moto_tracker.moto_tracker.core.exceptions import ValidationError

DAY = date(2024, 2, 14)


def test_request_stages_without_mutating():
    gate = ConfirmationGate()
    store = {}

    gate.request(ToggleTrip(day=DAY, person=Person.JORGE, leg=Leg.IDA), current=get_record(store, DAY))

    assert gate.state == GateState.PENDING
    assert store == {}


def test_confirm_applies_and_returns_to_idle():
    gate = ConfirmationGate()
    gate.request(ToggleTrip(day=DAY, person=Person.JORGE, leg=Leg.IDA), current=DayRecord())

    new_store = gate.confirm({})

    assert gate.state == GateState.IDLE
    assert get_record(new_store, DAY).jorge.outbound_done is True


def test_cancel_discards_change():
    gate = ConfirmationGate()
    gate.request(ToggleTrip(day=DAY, person=Person.JORGE, leg=Leg.IDA), current=DayRecord())
    gate.cancel()

    assert gate.state == GateState.IDLE
    assert gate.pending is None


def test_confirm_when_idle_raises():
    with pytest.raises(ValidationError):
        ConfirmationGate().confirm({})


def test_new_request_replaces_pending_one():
    gate = ConfirmationGate()
    gate.request(ToggleTrip(day=DAY, person=Person.JORGE, leg=Leg.IDA), current=DayRecord())
    gate.request(ToggleTrip(day=DAY, person=Person.WILLIAM, leg=Leg.REGRESSO), current=DayRecord())

    new_store = gate.confirm({})
    rec = get_record(new_store, DAY)
    assert rec.jorge == TripState()
    assert rec.william.return_done is True


def test_describe_toggle_message():
    gate = ConfirmationGate()
    pending = gate.request(ToggleTrip(day=DAY, person=Person.JORGE, leg=Leg.IDA), current=DayRecord())
    assert pending.describe() == "Deseja marcar a IDA para Jorge em 14/02/2024 como realizada?"

    done = DayRecord(jorge=TripState(outbound_done=True))
    pending = gate.request(ToggleTrip(day=DAY, person=Person.JORGE, leg=Leg.IDA), current=done)
    assert pending.is_currently_done is True
    assert pending.describe().endswith("como não realizada?")


def test_describe_day_status_message():
    gate = ConfirmationGate()
    pending = gate.request(SetDayStatus(day=DAY, person=Person.WILLIAM, status=DayStatus.FULL), current=DayRecord())
    assert pending.describe() == "Deseja marcar o dia 14/02/2024 de William como ida e regresso?"
