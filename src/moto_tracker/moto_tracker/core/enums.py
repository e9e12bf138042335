from __future__ import annotations

from enum import Enum


class Person(str, Enum):
    """The two tracked riders. Fixed, not extensible at runtime."""

    JORGE = "jorge"
    WILLIAM = "william"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class Leg(str, Enum):
    """One direction of the daily round trip."""

    IDA = "ida"
    REGRESSO = "regresso"


class DayStatus(str, Enum):
    """Whole-day status used by the day-status model."""

    FULL = "full"
    OUTBOUND_ONLY = "outbound_only"
    RETURN_ONLY = "return_only"
    NONE = "none"


class DayModel(str, Enum):
    """How a profile lets the user change a day."""

    TOGGLE = "toggle"
    DAY_STATUS = "day_status"


class GateState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
