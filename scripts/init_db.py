"""Create the MySQL database and the kv_store table used by the mysql backend."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.moto_tracker.moto_tracker.database.bootstrap import apply_schema, list_tables

SCHEMA_PATH = REPO_ROOT / "database" / "schema.sql"


def main() -> int:
    settings = importlib.import_module(get_settings_module())
    if settings.STORAGE_BACKEND != "mysql":
        print(f"SKIP: STORAGE_BACKEND={settings.STORAGE_BACKEND!r}, nothing to initialise (set it to 'mysql')")
        return 1

    db_config = dict(settings.DB_CONFIG)
    apply_schema(db_config, schema_path=SCHEMA_PATH)
    tables = list_tables(db_config)
    print(
        f"OK: Applied {SCHEMA_PATH.relative_to(REPO_ROOT)} -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(kv_store={'kv_store' in tables})"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
