"""
Calendar grid builder for the habit heatmap.

Builds 12 month groups ending at the current month, each padded with
leading placeholders so the first day lands in its Monday-first column.
"""

import calendar
from datetime import date
from typing import Optional

from habit_heatmap.models import DayCell, MonthGroup, format_date, resolve_start_date

MONTHS_TO_DISPLAY = 12

MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def build_month_groups(
    history: dict,
    notes: dict,
    start_date: Optional[str],
    today: Optional[date] = None,
) -> list[MonthGroup]:
    """
    Build the month groups for heatmap display.

    Args:
        history: Mapping of date string -> list of habit names done that day
        notes: Mapping of date string -> journal text
        start_date: First tracked day (YYYY-MM-DD); falls back to Jan 1
        today: Override for today's date (for testing)

    Returns:
        List of 12 MonthGroup objects, oldest month first
    """
    if today is None:
        today = date.today()

    today_str = format_date(today)
    start_str = resolve_start_date(start_date, today)

    groups = []
    for offset in range(MONTHS_TO_DISPLAY - 1, -1, -1):
        year, month = _shift_month(today.year, today.month, -offset)
        groups.append(
            _build_month(year, month, history, notes, start_str, today_str)
        )

    return groups


def _shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by delta months, rolling over year boundaries."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _leading_placeholders(year: int, month: int) -> int:
    """Number of empty cells before day 1 (Monday = 0 ... Sunday = 6)."""
    return date(year, month, 1).weekday()


def _build_month(
    year: int,
    month: int,
    history: dict,
    notes: dict,
    start_str: str,
    today_str: str,
) -> MonthGroup:
    days = []

    for position in range(_leading_placeholders(year, month)):
        days.append(
            DayCell(date=f"placeholder-{year}-{month}-{position}", is_placeholder=True)
        )

    days_in_month = calendar.monthrange(year, month)[1]
    for day in range(1, days_in_month + 1):
        date_str = format_date(date(year, month, day))
        note = notes.get(date_str)

        days.append(
            DayCell(
                date=date_str,
                habits_done=list(history.get(date_str) or []),
                is_future=date_str > today_str,
                is_before_start=date_str < start_str,
                is_today=date_str == today_str,
                has_note=bool(note and note.strip()),
            )
        )

    return MonthGroup(name=MONTH_NAMES[month - 1], year=year, days=days)
