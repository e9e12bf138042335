from __future__ import annotations

from typing import Protocol

from .model import AttendanceStore, DayRecord


class AttendanceRepository(Protocol):
    """A single key-value slot holding the whole store."""

    def load(self) -> dict[str, DayRecord]:
        """Return the persisted store, or an empty one if absent/malformed."""

        raise NotImplementedError

    def save(self, store: AttendanceStore) -> None:
        """Overwrite the slot with `store` in its entirety."""

        raise NotImplementedError
