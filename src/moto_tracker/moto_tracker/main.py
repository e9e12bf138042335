from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module, resolve_data_file

from .attendance.repository import AttendanceRepository
from .container import build_container
from .core.profiles import get_profile
from .database.bootstrap import apply_schema, list_tables
from .web.controller import register as register_tracker
from .web.report_controller import register as register_report

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(
    *,
    settings_module: Optional[str] = None,
    repository: Optional[AttendanceRepository] = None,
    overrides: Optional[dict] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(REPO_ROOT / "templates"))

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {
        name: getattr(settings, name)
        for name in dir(settings)
        if name.isupper()
    }
    values.update(overrides or {})

    app.secret_key = values["SECRET_KEY"]
    app.config["DEBUG"] = bool(values.get("DEBUG", False))
    app.config["TESTING"] = bool(values.get("TESTING", False))

    profile = get_profile(values.get("TRACKER_PROFILE", "basic"), cost_per_leg=values.get("COST_PER_LEG"))
    storage_backend = str(values.get("STORAGE_BACKEND", "json")).lower()
    db_config = values.get("DB_CONFIG") or {}
    data_file = resolve_data_file(values.get("DATA_FILE", "instance/moto_tracker.json"))

    if app.config["DEBUG"]:
        print(
            "[moto-tracker] settings=", settings_module,
            " profile=", profile.name,
            " storage=", storage_backend,
            " slot=", profile.storage_key,
        )

    if repository is None and storage_backend == "mysql" and bool(values.get("AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
        if app.config["DEBUG"]:
            print(f"[moto-tracker] schema ready (tables={len(list_tables(db_config))})")

    container = build_container(
        profile=profile,
        storage_backend=storage_backend,
        data_file=str(data_file),
        db_config=db_config,
        repository=repository,
    )
    app.extensions["moto_tracker"] = container

    register_tracker(app, container)
    register_report(app, container)

    return app
