import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hrsystem_test"),
}

DATA_SOURCE = "memory"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

GRAND_TOTAL_LABEL = "Grand Total"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
