import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "path": os.getenv("DB_PATH", "coach_management.db"),
    "timeout": float(os.getenv("DB_TIMEOUT", "5")),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Single-coach app: everything falls back to this coach
DEFAULT_COACH_ID = int(os.getenv("DEFAULT_COACH_ID", "1"))

# If enabled, the app creates missing tables on startup (CREATE ... IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed the demo coach on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
