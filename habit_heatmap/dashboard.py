"""
Dashboard computation for habit-heatmap.

Runs the grid builder, intensity classifier and streak calculator over
one snapshot with a single "today" value.
"""

import copy
import hashlib
import json
from dataclasses import asdict
from datetime import date
from typing import Callable

from habit_heatmap.calendar_builder import build_month_groups
from habit_heatmap.intensity import classify_day
from habit_heatmap.models import format_date
from habit_heatmap.storage import HabitStorage
from habit_heatmap.streak_calculator import calculate_streak


def compute_dashboard(snapshot: dict, today: date | None = None) -> dict:
    """
    Compute all derived view data for one snapshot.

    Args:
        snapshot: Document with habits, history, notes and settings
        today: Override for today's date (for testing)

    Returns:
        Dictionary with:
            - today: Today's date string
            - months: Month groups, each day carrying its bucket
            - streak: current and longest clean streak
            - habits: The habit list
            - checklist: Each habit with whether it is done today
    """
    if today is None:
        today = date.today()
    today_str = format_date(today)

    habits = snapshot.get("habits") or []
    history = snapshot.get("history") or {}
    notes = snapshot.get("notes") or {}
    start_date = (snapshot.get("settings") or {}).get("start_date")

    months = []
    for group in build_month_groups(history, notes, start_date, today=today):
        days = []
        for day in group.days:
            cell = asdict(day)
            cell["is_clickable"] = day.is_clickable
            cell["bucket"] = classify_day(day, habits)
            days.append(cell)
        months.append({"name": group.name, "year": group.year, "days": days})

    done_today = history.get(today_str) or []

    return {
        "today": today_str,
        "months": months,
        "streak": calculate_streak(history, start_date, today=today_str),
        "habits": [dict(habit) for habit in habits],
        "checklist": [
            {**habit, "done": habit["name"] in done_today} for habit in habits
        ],
    }


class DashboardCache:
    """Cache of computed dashboards keyed by the exact inputs."""

    def __init__(self, max_entries: int = 8):
        self.max_entries = max_entries
        self._entries: dict[str, dict] = {}

    def _cache_key(self, snapshot: dict, today: date) -> str:
        """Generate a cache key from the snapshot fields and today's date."""
        data = json.dumps(
            {
                "habits": snapshot.get("habits"),
                "history": snapshot.get("history"),
                "notes": snapshot.get("notes"),
                "start_date": (snapshot.get("settings") or {}).get("start_date"),
                "today": format_date(today),
            },
            sort_keys=True,
        )
        return f"dashboard:{hashlib.sha256(data.encode()).hexdigest()[:16]}"

    def get(self, snapshot: dict, today: date | None = None) -> dict:
        if today is None:
            today = date.today()

        key = self._cache_key(snapshot, today)
        if key not in self._entries:
            if len(self._entries) >= self.max_entries:
                # Drop the oldest entry
                self._entries.pop(next(iter(self._entries)))
            self._entries[key] = compute_dashboard(snapshot, today=today)
        # Callers get their own copy so cached entries never change
        return copy.deepcopy(self._entries[key])

    def __len__(self) -> int:
        return len(self._entries)


class LiveDashboard:
    """Recomputes the dashboard whenever storage pushes a new snapshot."""

    def __init__(
        self,
        storage: HabitStorage,
        today_provider: Callable[[], date] = date.today,
    ):
        self.storage = storage
        self.today_provider = today_provider
        self.cache = DashboardCache()
        self.current: dict | None = None
        self._listeners: list[Callable[[dict], None]] = []
        self._unsubscribe = storage.subscribe(self._on_snapshot)

    def _on_snapshot(self, snapshot: dict) -> None:
        self.current = self.cache.get(snapshot, today=self.today_provider())
        for listener in list(self._listeners):
            listener(copy.deepcopy(self.current))

    def add_listener(self, listener: Callable[[dict], None]) -> None:
        self._listeners.append(listener)

    def close(self) -> None:
        """Stop receiving snapshots."""
        self._unsubscribe()
