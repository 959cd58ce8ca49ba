import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

RECORD_STORE_URL = os.getenv("RECORD_STORE_URL")
RECORD_STORE_KEY = os.getenv("RECORD_STORE_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

# Supabase only: forward Realtime postgres_changes to live views (multi-worker updates)
REALTIME_ENABLED = bool(int(os.getenv("REALTIME_ENABLED", "1")))
# Live portal views idle longer than this are closed
SESSION_IDLE_SECONDS = int(os.getenv("SESSION_IDLE_SECONDS", "1800"))
