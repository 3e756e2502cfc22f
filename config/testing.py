import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "crewpay_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
CHECK_SCHEMA = False

DEMO_AUTH = True
DEMO_USER_ID = "worker-1"
DEMO_COMPANY_ID = "company-1"
DEMO_ROLE = "admin"

PAYROLL_OVERTIME = True
DAILY_OVERTIME_HOURS = 8
OVERTIME_MULTIPLIER = 1.5

CLOCK_COOLDOWN_SECONDS = 15
CLOCK_WINDOW = None
