import os

from config import parse_clock_window

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "crewpay"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
CHECK_SCHEMA = bool(int(os.getenv("CHECK_SCHEMA", "1")))

# Local demos without the hosted auth provider.
DEMO_AUTH = bool(int(os.getenv("DEMO_AUTH", "0")))
DEMO_USER_ID = os.getenv("DEMO_USER_ID", "demo-user")
DEMO_COMPANY_ID = os.getenv("DEMO_COMPANY_ID", "demo-company")
DEMO_ROLE = os.getenv("DEMO_ROLE", "admin")

PAYROLL_OVERTIME = bool(int(os.getenv("PAYROLL_OVERTIME", "1")))
DAILY_OVERTIME_HOURS = float(os.getenv("DAILY_OVERTIME_HOURS", "8"))
OVERTIME_MULTIPLIER = float(os.getenv("OVERTIME_MULTIPLIER", "1.5"))

CLOCK_COOLDOWN_SECONDS = int(os.getenv("CLOCK_COOLDOWN_SECONDS", "15"))
CLOCK_WINDOW = parse_clock_window(os.getenv("CLOCK_WINDOW", ""))
