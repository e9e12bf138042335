from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from ..core.enums import DayStatus, Leg, Person


@dataclass(frozen=True)
class TripState:
    """Both legs of one person's commute on one day."""

    outbound_done: bool = False
    return_done: bool = False

    def get(self, leg: Leg) -> bool:
        return self.outbound_done if leg == Leg.IDA else self.return_done

    def with_leg(self, leg: Leg, done: bool) -> "TripState":
        if leg == Leg.IDA:
            return replace(self, outbound_done=bool(done))
        return replace(self, return_done=bool(done))

    @property
    def legs_done(self) -> int:
        return int(self.outbound_done) + int(self.return_done)

    @property
    def any_done(self) -> bool:
        return self.outbound_done or self.return_done

    @property
    def status(self) -> DayStatus:
        if self.outbound_done and self.return_done:
            return DayStatus.FULL
        if self.outbound_done:
            return DayStatus.OUTBOUND_ONLY
        if self.return_done:
            return DayStatus.RETURN_ONLY
        return DayStatus.NONE

    @classmethod
    def from_status(cls, status: DayStatus) -> "TripState":
        return cls(
            outbound_done=status in {DayStatus.FULL, DayStatus.OUTBOUND_ONLY},
            return_done=status in {DayStatus.FULL, DayStatus.RETURN_ONLY},
        )

    def to_dict(self) -> dict[str, bool]:
        return {Leg.IDA.value: self.outbound_done, Leg.REGRESSO.value: self.return_done}

    @classmethod
    def from_dict(cls, raw: Any) -> "TripState":
        if not isinstance(raw, Mapping):
            return cls()
        return cls(
            outbound_done=bool(raw.get(Leg.IDA.value, False)),
            return_done=bool(raw.get(Leg.REGRESSO.value, False)),
        )


@dataclass(frozen=True)
class DayRecord:
    """Registo do dia: always carries both persons."""

    jorge: TripState = TripState()
    william: TripState = TripState()

    def for_person(self, person: Person) -> TripState:
        return self.jorge if person == Person.JORGE else self.william

    def with_person(self, person: Person, state: TripState) -> "DayRecord":
        if person == Person.JORGE:
            return replace(self, jorge=state)
        return replace(self, william=state)

    def to_dict(self) -> dict[str, dict[str, bool]]:
        return {p.value: self.for_person(p).to_dict() for p in Person}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "DayRecord":
        return cls(
            jorge=TripState.from_dict(raw.get(Person.JORGE.value)),
            william=TripState.from_dict(raw.get(Person.WILLIAM.value)),
        )


EMPTY_DAY = DayRecord()

# date-key (YYYY-MM-DD) -> DayRecord. Missing keys mean "no trips".
AttendanceStore = Mapping[str, DayRecord]
