from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .constants import TRIP_COST_PER_WAY
from .enums import DayModel
from .exceptions import ValidationError


@dataclass(frozen=True)
class TrackerProfile:
    """Configuration bundle for one flavour of the tracker.

    The two built-in profiles differ in how a day is edited, whether national
    holidays block registration, and which storage slot they read/write.
    """

    name: str
    cost_per_leg: int
    holiday_blocks_registration: bool
    day_model: DayModel
    storage_key: str

    @property
    def daily_potential(self) -> int:
        return self.cost_per_leg * 2


BASIC_PROFILE = TrackerProfile(
    name="basic",
    cost_per_leg=TRIP_COST_PER_WAY,
    holiday_blocks_registration=False,
    day_model=DayModel.TOGGLE,
    storage_key="moto_tracker_data",
)

EXTENDED_PROFILE = TrackerProfile(
    name="extended",
    cost_per_leg=TRIP_COST_PER_WAY,
    holiday_blocks_registration=True,
    day_model=DayModel.DAY_STATUS,
    storage_key="moto_tracker_data_v2",
)

PROFILES = {p.name: p for p in (BASIC_PROFILE, EXTENDED_PROFILE)}


def get_profile(name: str, *, cost_per_leg: Optional[int] = None) -> TrackerProfile:
    profile = PROFILES.get((name or "").strip().lower())
    if profile is None:
        raise ValidationError(f"Perfil desconhecido: {name!r}")
    if cost_per_leg is not None:
        if int(cost_per_leg) < 0:
            raise ValidationError("O custo por viagem não pode ser negativo")
        profile = replace(profile, cost_per_leg=int(cost_per_leg))
    return profile
