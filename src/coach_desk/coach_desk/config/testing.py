import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "path": os.getenv("DB_PATH", "coach_management_test.db"),
    "timeout": 1.0,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

DEFAULT_COACH_ID = 1

AUTO_INIT_DB = True
AUTO_SEED_DB = True
