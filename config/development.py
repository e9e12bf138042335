import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Where the attendance store lives: "json" (local file) or "mysql" (kv_store table)
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json").lower()
DATA_FILE = os.getenv("DATA_FILE", "instance/moto_tracker.json")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "moto_tracker"),
}

# "basic" (per-leg toggle, holidays allowed) or "extended" (day status, holidays blocked)
TRACKER_PROFILE = os.getenv("TRACKER_PROFILE", "basic")
COST_PER_LEG = int(os.environ["COST_PER_LEG"]) if os.getenv("COST_PER_LEG") else None

DEBUG = True

# If enabled with the mysql backend, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
