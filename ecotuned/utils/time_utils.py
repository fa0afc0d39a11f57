"""
Time and date utilities for day-aware recommendations.

Key concepts:
  - Clock: the single source of "now". Everything that needs the current UK
    hour (elapsed drying hours, time-status annotation) receives a ``Clock``
    explicitly; nothing reads the system time directly.
  - Day classification: weekends are derived from the forecast date itself,
    not from the clock.
  - Hour labels: 12-hour clock strings ("9am", "12pm", "3pm") used in
    recommendation text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from zoneinfo import ZoneInfo

UK_TIMEZONE_NAME = "Europe/London"


class Clock:
    """Source of the current time, always timezone-aware."""

    def now(self) -> datetime:
        raise NotImplementedError

    def current_hour(self, tz_name: str = UK_TIMEZONE_NAME) -> int:
        """Return the current wall-clock hour (0–23) in ``tz_name``."""
        return self.now().astimezone(ZoneInfo(tz_name)).hour


@dataclass(frozen=True)
class SystemClock(Clock):
    """Reads the real wall clock in the given timezone."""

    tz_name: str = UK_TIMEZONE_NAME

    def now(self) -> datetime:
        return datetime.now(tz=ZoneInfo(self.tz_name))


@dataclass(frozen=True)
class FixedClock(Clock):
    """Always returns the same instant. Naive datetimes are taken as UK local time."""

    instant: datetime = field(default_factory=lambda: datetime(2025, 1, 1, 12, 0))

    def now(self) -> datetime:
        if self.instant.tzinfo is None:
            return self.instant.replace(tzinfo=ZoneInfo(UK_TIMEZONE_NAME))
        return self.instant


def is_weekend(date_str: str) -> bool:
    """Return ``True`` if the ISO date (``YYYY-MM-DD``) falls on Saturday or Sunday.

    Raises:
        ValueError: If ``date_str`` is not an ISO date.
    """
    return date.fromisoformat(date_str[:10]).weekday() >= 5


def hour_of(timestamp: str) -> int:
    """Return the hour component of an ISO local timestamp such as ``2025-01-08T16:30``."""
    return datetime.fromisoformat(timestamp).hour


def format_hour_12h(hour: int) -> str:
    """Format a 0–23 hour as a 12-hour label: 0 → ``"12am"``, 13 → ``"1pm"``."""
    hour = hour % 24
    if hour == 0:
        return "12am"
    if hour < 12:
        return f"{hour}am"
    if hour == 12:
        return "12pm"
    return f"{hour - 12}pm"
