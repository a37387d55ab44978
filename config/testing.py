SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "autopay_test",
}

# Tests never need a MySQL server.
STORAGE_BACKEND = "memory"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False

OPENAI_API_KEY = ""
OPENAI_MODEL = "gpt-4o-mini"
OPENAI_BASE_URL = ""
NARRATIVE_TIMEOUT_SECONDS = 1.0

STANDARD_HOURS_PER_DAY = 8.0
OVERTIME_MULTIPLIER = 1.5
