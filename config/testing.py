SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

API_BASE_PATH = "/api"

STORAGE_BACKEND = "memory"
DB_CONFIG = {}

AUTO_INIT_DB = False
SEED_DEMO_DATA = False

# Deterministic by default; tests that need the failure branch inject their own.
SIMULATED_FAILURE_RATE = 0.0
MAX_BULK_SIZE = 1000
DEFAULT_PAGE_SIZE = 10
