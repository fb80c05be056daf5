import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "youth_attendance"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Upload limit for spreadsheet imports (MB)
MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "10"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also create/reset the owner account from OWNER_EMAIL / OWNER_PASSWORD
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
OWNER_EMAIL = os.getenv("OWNER_EMAIL", "owner@example.com")
OWNER_PASSWORD = os.getenv("OWNER_PASSWORD", "owner1234")
