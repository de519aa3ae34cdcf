import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendsync_test"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False

AT_RISK_THRESHOLD = 75.0

GEMINI_API_KEY = ""
GEMINI_MODEL = "gemini-2.5-flash"
LLM_TIMEOUT = 5.0
