import os

SECRET_KEY = "test-secret"

RECORD_STORE_URL = os.getenv("RECORD_STORE_URL")
RECORD_STORE_KEY = os.getenv("RECORD_STORE_KEY")

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

REALTIME_ENABLED = False
SESSION_IDLE_SECONDS = 1800
