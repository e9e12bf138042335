from __future__ import annotations

import json
import logging
from pathlib import Path

from . import codec
from .model import AttendanceStore, DayRecord

logger = logging.getLogger(__name__)


class JsonFileAttendanceRepository:
    """Keeps every slot in one JSON document: {slot_key: {date_key: record}}.

    Other slots in the same file (e.g. another profile's data) are preserved
    on write. A document that cannot be read is never overwritten.
    """

    def __init__(self, path: str | Path, *, key: str):
        self._path = Path(path)
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def _read_document(self) -> dict:
        # Only a missing file means "no slots yet"; read/decode errors propagate.
        if not self._path.exists():
            return {}
        raw = json.loads(self._path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"{self._path} does not hold a JSON object")
        return raw

    def load(self) -> dict[str, DayRecord]:
        try:
            doc = self._read_document()
        except ValueError:
            logger.warning("Data file %s is not valid JSON; starting empty", self._path)
            return {}
        return codec.store_from_dict(doc.get(self._key))

    def save(self, store: AttendanceStore) -> None:
        doc = self._read_document()
        doc[self._key] = codec.store_to_dict(store)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(self._path)
