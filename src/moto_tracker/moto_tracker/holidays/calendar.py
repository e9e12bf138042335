from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import days_in_month, is_weekend


@dataclass(frozen=True)
class Holiday:
    """Feriado: (month, day, name). Month is 1-based like `date.month`."""

    month: int
    day: int
    name: str

    def matches(self, d: date) -> bool:
        return self.month == d.month and self.day == d.day


ANGOLA_HOLIDAYS: tuple[Holiday, ...] = (
    Holiday(1, 1, "Ano Novo"),
    Holiday(2, 4, "Início da Luta Armada"),
    Holiday(3, 8, "Dia Internacional da Mulher"),
    Holiday(3, 23, "Dia da Libertação da África Austral"),
    Holiday(4, 4, "Dia da Paz e Reconciliação Nacional"),
    Holiday(5, 1, "Dia do Trabalho"),
    Holiday(9, 17, "Dia do Herói Nacional"),
    Holiday(11, 2, "Dia dos Finados"),
    Holiday(11, 11, "Dia da Independência Nacional"),
    Holiday(12, 25, "Dia de Natal"),
)

# Movable feasts per year. Years missing here have no movable holidays;
# extend the table when a new year's dates are published.
VARIABLE_HOLIDAYS: dict[int, tuple[Holiday, ...]] = {
    2024: (
        Holiday(2, 13, "Carnaval"),
        Holiday(3, 29, "Sexta-feira Santa"),
    ),
    2025: (
        Holiday(3, 4, "Carnaval"),
        Holiday(4, 18, "Sexta-feira Santa"),
    ),
}


def variable_holidays(year: int) -> tuple[Holiday, ...]:
    return VARIABLE_HOLIDAYS.get(int(year), ())


def is_holiday(d: date) -> Optional[str]:
    """Return the holiday name for `d`, or None.

    The fixed table is checked first, so it wins if both tables ever define
    the same (month, day).
    """
    for h in ANGOLA_HOLIDAYS:
        if h.matches(d):
            return h.name

    for h in variable_holidays(d.year):
        if h.matches(d):
            return h.name

    return None


def can_register(d: date) -> bool:
    """Trips can be registered on any weekday (Monday..Friday)."""
    return not is_weekend(d)


def is_working_day(d: date, *, holiday_blocks_registration: bool = True) -> bool:
    if not can_register(d):
        return False
    if holiday_blocks_registration and is_holiday(d):
        return False
    return True


def holidays_in_month(d: date) -> list[tuple[date, str]]:
    out = []
    for day in days_in_month(d):
        name = is_holiday(day)
        if name:
            out.append((day, name))
    return out
