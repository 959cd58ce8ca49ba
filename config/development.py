import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Required. https://<project>.supabase.co or mysql://user@host:3306/hr_portal_db
RECORD_STORE_URL = os.getenv("RECORD_STORE_URL")
# Required. Supabase API key, or the MySQL password.
RECORD_STORE_KEY = os.getenv("RECORD_STORE_KEY")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# MySQL only: apply database/schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# MySQL only: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

# Supabase only: forward Realtime postgres_changes to live views (multi-worker updates)
REALTIME_ENABLED = bool(int(os.getenv("REALTIME_ENABLED", "1")))
# Live portal views idle longer than this are closed
SESSION_IDLE_SECONDS = int(os.getenv("SESSION_IDLE_SECONDS", "1800"))
