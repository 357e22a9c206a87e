import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "path": os.getenv("DB_PATH", "/var/lib/coach-desk/coach_management.db"),
    "timeout": float(os.getenv("DB_TIMEOUT", "5")),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_COACH_ID = int(os.getenv("DEFAULT_COACH_ID", "1"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
