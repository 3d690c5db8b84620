import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timeclock_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")
MEMORY_LOG_CAPACITY = int(os.getenv("MEMORY_LOG_CAPACITY", "10000"))
PAIRING_STRATEGY = os.getenv("PAIRING_STRATEGY", "exclusive")
TIMEZONE = os.getenv("TIMEZONE") or None
NOTIFICATION_LIMIT = int(os.getenv("NOTIFICATION_LIMIT", "10"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
