"""Backup the active attendance slot to a JSON file.

Works with either storage backend: the slot is read through the same
repository the app uses and written to backups/<slot>_<timestamp>.json.
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module, resolve_data_file

from src.moto_tracker.moto_tracker.attendance import codec
from src.moto_tracker.moto_tracker.container import build_repository
from src.moto_tracker.moto_tracker.core.profiles import get_profile


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    profile = get_profile(settings.TRACKER_PROFILE)

    repo = build_repository(
        profile=profile,
        storage_backend=settings.STORAGE_BACKEND,
        data_file=str(resolve_data_file(settings.DATA_FILE)),
        db_config=settings.DB_CONFIG,
    )
    store = repo.load()

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{profile.storage_key}_{ts}.json"
    out_file.write_text(codec.dumps(store), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(store)} dias)")


if __name__ == "__main__":
    main()
