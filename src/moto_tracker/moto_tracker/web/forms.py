from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Type, TypeVar

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def parse_form_date(value: str) -> date:
    value = require_non_empty(value, "Data")
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError("Data inválida (AAAA-MM-DD)")


def parse_choice(enum_cls: Type[E], value: str, field_name: str) -> E:
    value = require_non_empty(value, field_name)
    try:
        return enum_cls(value.lower())
    except ValueError:
        raise ValidationError(f"{field_name} inválido: {value}")
