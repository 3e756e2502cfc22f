import os

from config import parse_clock_window

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "crewpay"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "crewpay"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
CHECK_SCHEMA = True

# Never read from the environment here: production always uses the session identity.
DEMO_AUTH = False

PAYROLL_OVERTIME = bool(int(os.getenv("PAYROLL_OVERTIME", "1")))
DAILY_OVERTIME_HOURS = float(os.getenv("DAILY_OVERTIME_HOURS", "8"))
OVERTIME_MULTIPLIER = float(os.getenv("OVERTIME_MULTIPLIER", "1.5"))

CLOCK_COOLDOWN_SECONDS = int(os.getenv("CLOCK_COOLDOWN_SECONDS", "15"))
CLOCK_WINDOW = parse_clock_window(os.getenv("CLOCK_WINDOW", ""))
