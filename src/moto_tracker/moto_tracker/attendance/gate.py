from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.constants import DISPLAY_DATE_FORMAT
from ..core.enums import DayStatus, GateState, Person
from ..core.exceptions import ValidationError
from .model import AttendanceStore, DayRecord, TripState
from .store import Action, SetDayStatus, ToggleTrip, apply_action

STATUS_LABELS = {
    DayStatus.FULL: "ida e regresso",
    DayStatus.OUTBOUND_ONLY: "só ida",
    DayStatus.RETURN_ONLY: "só regresso",
    DayStatus.NONE: "sem viagens",
}


@dataclass(frozen=True)
class PendingChange:
    """A staged change plus the state it was requested against."""

    action: Action
    before: TripState

    @property
    def day(self) -> date:
        return self.action.day

    @property
    def person(self) -> Person:
        return self.action.person

    @property
    def is_currently_done(self) -> bool:
        """For leg toggles: whether the leg was done when the change was requested."""
        if isinstance(self.action, ToggleTrip):
            return self.before.get(self.action.leg)
        return self.before.any_done

    def describe(self) -> str:
        when = self.day.strftime(DISPLAY_DATE_FORMAT)
        who = self.person.display_name
        if isinstance(self.action, SetDayStatus):
            return f"Deseja marcar o dia {when} de {who} como {STATUS_LABELS[self.action.status]}?"

        leg = self.action.leg.value.upper()
        outcome = "não realizada" if self.is_currently_done else "realizada"
        return f"Deseja marcar a {leg} para {who} em {when} como {outcome}?"


class ConfirmationGate:
    """Two-step commit: request() stages, confirm() applies, cancel() discards."""

    def __init__(self):
        self._pending: Optional[PendingChange] = None

    @property
    def state(self) -> GateState:
        return GateState.PENDING if self._pending else GateState.IDLE

    @property
    def pending(self) -> Optional[PendingChange]:
        return self._pending

    def request(self, action: Action, *, current: DayRecord) -> PendingChange:
        self._pending = PendingChange(action=action, before=current.for_person(action.person))
        return self._pending

    def confirm(self, store: AttendanceStore) -> dict:
        if not self._pending:
            raise ValidationError("Não há alteração pendente para confirmar")
        new_store = apply_action(store, self._pending.action)
        self._pending = None
        return new_store

    def cancel(self) -> None:
        self._pending = None
