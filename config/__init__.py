from __future__ import annotations

import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module; anything unknown means development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def parse_clock_window(value: str | None):
    """'6-18' -> (6, 18); empty means no restriction."""
    if not value:
        return None
    start, _, end = value.partition("-")
    return int(start), int(end)
