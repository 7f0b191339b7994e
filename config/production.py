import os

from .config import capacity_settings_from_env

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "company_db"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

REPORT_TIMEOUT_MS = int(os.getenv("REPORT_TIMEOUT_MS", "10000"))

CAPACITY_SETTINGS = capacity_settings_from_env()
