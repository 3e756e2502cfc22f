from __future__ import annotations

from typing import Optional

from ..core.enums import ClockEventType
from .model import WorkerClockStatus


def validate_clock_event(qr_type: ClockEventType | str, status: Optional[WorkerClockStatus]) -> Optional[str]:
    """Why ``qr_type`` may not be recorded now, or None when it may."""
    qr_type = ClockEventType(qr_type)

    if status is None:
        # Nothing yet today: only a clock-in starts the day.
        if qr_type != ClockEventType.CLOCK_IN:
            return "You must clock in first before using other QR codes"
        return None

    if qr_type == ClockEventType.CLOCK_IN:
        if status.is_clocked_in:
            return "You are already clocked in"
    elif qr_type == ClockEventType.CLOCK_OUT:
        if not status.is_clocked_in:
            return "You must be clocked in to clock out"
        if status.current_break_start:
            return "You must end your break before clocking out"
    elif qr_type == ClockEventType.BREAK_START:
        if not status.is_clocked_in:
            return "You must be clocked in to start a break"
        if status.current_break_start:
            return "You are already on a break"
    elif qr_type == ClockEventType.BREAK_END:
        if not status.current_break_start:
            return "You are not currently on a break"
    return None


def success_message(qr_type: ClockEventType | str) -> str:
    return {
        ClockEventType.CLOCK_IN: "Successfully clocked in",
        ClockEventType.CLOCK_OUT: "Successfully clocked out",
        ClockEventType.BREAK_START: "Break started",
        ClockEventType.BREAK_END: "Break ended",
    }.get(ClockEventType(qr_type), "Event recorded successfully")
