import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timeclock_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "mysql" or "memory" (bounded in-process log, nothing persisted)
STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")
MEMORY_LOG_CAPACITY = int(os.getenv("MEMORY_LOG_CAPACITY", "10000"))

# "exclusive" (each clock-out closes one clock-in) or "first-later" (legacy)
PAIRING_STRATEGY = os.getenv("PAIRING_STRATEGY", "exclusive")
# IANA zone that defines calendar days; empty means the server's local zone
TIMEZONE = os.getenv("TIMEZONE") or None
NOTIFICATION_LIMIT = int(os.getenv("NOTIFICATION_LIMIT", "10"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
