import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

API_BASE_PATH = os.getenv("API_BASE_PATH", "/api")

# "memory" keeps everything in-process; "mysql" uses DB_CONFIG below.
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "user_management"),
}

# If enabled (mysql only), app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Seed three demo users when the store is empty
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

SIMULATED_FAILURE_RATE = float(os.getenv("SIMULATED_FAILURE_RATE", "0.10"))
MAX_BULK_SIZE = int(os.getenv("MAX_BULK_SIZE", "1000"))
DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
