"""
Shared data types and date helpers for habit-heatmap.
"""

from dataclasses import dataclass, field
from datetime import date, datetime

DATE_FORMAT = "%Y-%m-%d"

SNAPSHOT_FIELDS = ("habits", "history", "notes", "settings")

SAMPLE_HABITS = [
    {"id": "1", "name": "Alcohol", "weight": 3},
    {"id": "2", "name": "Sugar", "weight": 1},
]


@dataclass
class DayCell:
    """One cell of the heatmap grid."""

    date: str
    habits_done: list[str] = field(default_factory=list)
    is_future: bool = False
    is_before_start: bool = False
    is_today: bool = False
    is_placeholder: bool = False
    has_note: bool = False

    @property
    def is_clickable(self) -> bool:
        # Before-start wins over today when the start date is in the future
        return not (self.is_placeholder or self.is_future or self.is_before_start)


@dataclass
class MonthGroup:
    """A calendar month of day cells, placeholders first."""

    name: str
    year: int
    days: list[DayCell] = field(default_factory=list)


def format_date(value: date) -> str:
    """Format a date as a zero-padded YYYY-MM-DD string."""
    return value.strftime(DATE_FORMAT)


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD string. Raises ValueError on malformed input."""
    return datetime.strptime(value, DATE_FORMAT).date()


def default_start_date(today: date | None = None) -> str:
    """January 1 of the current year."""
    if today is None:
        today = date.today()
    return format_date(date(today.year, 1, 1))


def resolve_start_date(start_date: str | None, today: date | None = None) -> str:
    """
    Return a usable start date string.

    Args:
        start_date: Stored start date, possibly missing or malformed
        today: Reference date for the fallback

    Returns:
        The normalized start date, or January 1 of today's year when
        start_date cannot be parsed.
    """
    if isinstance(start_date, str):
        try:
            return format_date(parse_date(start_date.strip()))
        except ValueError:
            pass
    return default_start_date(today)


def is_clean(history: dict, date_str: str) -> bool:
    """A day is clean when it has no recorded habits."""
    return not history.get(date_str)


def bootstrap_snapshot(today: date | None = None) -> dict:
    """Document used when no data exists yet."""
    return {
        "habits": [dict(habit) for habit in SAMPLE_HABITS],
        "history": {},
        "notes": {},
        "settings": {"start_date": default_start_date(today)},
    }


def cleared_snapshot(today: date | None = None) -> dict:
    """Document written by a clear-all: empty habits, start date today."""
    if today is None:
        today = date.today()
    return {
        "habits": [],
        "history": {},
        "notes": {},
        "settings": {"start_date": format_date(today)},
    }
