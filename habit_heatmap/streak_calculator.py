"""
Calculate clean streaks from the habit history.
"""

from datetime import date, timedelta

from habit_heatmap.models import format_date, is_clean, parse_date, resolve_start_date


def calculate_streak(
    history: dict,
    start_date: str | None,
    today: str | None = None,
) -> dict:
    """
    Calculate streak information from the habit history.

    Args:
        history: Mapping of date string -> list of habit names done that day
        start_date: First tracked day (YYYY-MM-DD). Malformed or missing
            values fall back to January 1 of today's year.
        today: Override today's date for testing (YYYY-MM-DD format).
            Defaults to current date.

    Returns:
        Dictionary with streak statistics:
        - current_streak: Clean days in a row ending today
        - longest_streak: Longest clean run between start date and today
    """
    if today is None:
        today_date = date.today()
    else:
        today_date = parse_date(today)

    start = parse_date(resolve_start_date(start_date, today_date))

    return {
        "current_streak": _calculate_current_streak(history, start, today_date),
        "longest_streak": _calculate_longest_streak(history, start, today_date),
    }


def _calculate_current_streak(history: dict, start: date, today: date) -> int:
    """
    Count clean days backwards from today.

    A habit logged today means no streak at all. Otherwise the count stops
    at the first non-clean day or when the scan passes the start date.
    """
    if not is_clean(history, format_date(today)):
        return 0

    streak = 0
    current_date = today

    while current_date >= start:
        if not is_clean(history, format_date(current_date)):
            break
        streak += 1
        current_date -= timedelta(days=1)

    return streak


def _calculate_longest_streak(history: dict, start: date, today: date) -> int:
    """
    Find the longest run of clean days from the start date through today.
    """
    longest = 0
    current_streak = 0
    current_date = start

    while current_date <= today:
        if is_clean(history, format_date(current_date)):
            current_streak += 1
            longest = max(longest, current_streak)
        else:
            current_streak = 0
        current_date += timedelta(days=1)

    return longest
