import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql").lower()
DATA_FILE = os.getenv("DATA_FILE", "instance/moto_tracker.json")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "moto_tracker"),
}

TRACKER_PROFILE = os.getenv("TRACKER_PROFILE", "extended")
COST_PER_LEG = int(os.environ["COST_PER_LEG"]) if os.getenv("COST_PER_LEG") else None

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
