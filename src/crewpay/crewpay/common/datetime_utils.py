from __future__ import annotations

import re
from datetime import date, datetime

_CLOCK_RE = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)(?::([0-5]\d))?$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def is_clock_time(value) -> bool:
    """True for a valid 24h ``HH:MM`` or ``HH:MM:SS`` string."""
    return isinstance(value, str) and bool(_CLOCK_RE.match(value.strip()))


def to_hhmm(value) -> str:
    """Normalize a clock value (``HH:MM[:SS]`` string or time) to ``HH:MM``."""
    if hasattr(value, "strftime"):
        return value.strftime("%H:%M")
    text = str(value).strip()
    m = _CLOCK_RE.match(text)
    if not m:
        return text
    return f"{int(m.group(1)):02d}:{m.group(2)}"


def to_local_naive(value: datetime) -> datetime:
    """Timezone-aware datetimes become naive local time; naive ones pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
