import os
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    """Settings module for APP_ENV; anything unknown runs as development."""
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _ENV_MODULES.get(env, "config.development")


def resolve_data_file(data_file: str) -> Path:
    """DATA_FILE is relative to the repo root unless it is absolute."""
    path = Path(data_file)
    return path if path.is_absolute() else REPO_ROOT / path
