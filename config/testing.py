import os

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "json"
DATA_FILE = os.getenv("DATA_FILE", "instance/moto_tracker_test.json")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "moto_tracker_test"),
}

TRACKER_PROFILE = os.getenv("TRACKER_PROFILE", "basic")
COST_PER_LEG = None

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
