from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..common.datetime_utils import parse_date_key
from .model import AttendanceStore, DayRecord

logger = logging.getLogger(__name__)


def store_to_dict(store: AttendanceStore) -> dict[str, Any]:
    return {key: record.to_dict() for key, record in sorted(store.items())}


def store_from_dict(raw: Any) -> dict[str, DayRecord]:
    """Build a store from decoded JSON.

    Anything that is not a mapping of date-key -> record is treated as
    "no data". Entries whose key is not a canonical YYYY-MM-DD date are
    dropped.
    """
    if not isinstance(raw, dict):
        return {}

    out: dict[str, DayRecord] = {}
    for key, value in raw.items():
        if not isinstance(value, dict):
            continue
        if parse_date_key(str(key)) is None:
            continue
        out[str(key)] = DayRecord.from_dict(value)
    return out


def dumps(store: AttendanceStore) -> str:
    return json.dumps(store_to_dict(store), ensure_ascii=False)


def loads(text: Optional[str]) -> dict[str, DayRecord]:
    """Decode a persisted slot. Malformed or empty input yields an empty store."""
    if not text:
        return {}
    try:
        raw = json.loads(text)
    except (TypeError, ValueError):
        logger.warning("Persisted attendance data is not valid JSON; starting empty")
        return {}
    return store_from_dict(raw)
