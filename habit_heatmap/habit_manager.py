"""
Habit management for habit-heatmap.

Every operation reads the latest document and writes back one whole
field: the habit list, the history map, the notes map or the settings.
"""

import logging
import uuid
from datetime import date

from habit_heatmap.models import format_date
from habit_heatmap.storage import HabitStorage

logger = logging.getLogger(__name__)


class HabitManager:
    """Applies user actions to the habit document."""

    def __init__(self, storage: HabitStorage | None = None):
        """
        Initialize the habit manager.

        Args:
            storage: HabitStorage instance. Creates default if not provided.
        """
        self.storage = storage or HabitStorage()

    def get_habits(self) -> list[dict]:
        return self.storage.get_snapshot()["habits"]

    def add_habit(self, name: str, weight: int = 1) -> dict | None:
        """
        Add a new habit.

        Args:
            name: Habit name; blank names are ignored
            weight: Severity weight, clamped to at least 1

        Returns:
            The created habit dictionary, or None if name is blank
        """
        if not name or not name.strip():
            return None

        habit = {"id": uuid.uuid4().hex, "name": name, "weight": max(1, weight)}
        self.storage.save_field("habits", self.get_habits() + [habit])
        logger.info("Added habit %r", name)
        return habit

    def delete_habit(self, habit_id: str) -> bool:
        """
        Delete a habit by id. History entries naming it are left alone.

        Returns:
            True if a habit was removed
        """
        habits = self.get_habits()
        remaining = [h for h in habits if h["id"] != habit_id]
        if len(remaining) == len(habits):
            return False

        self.storage.save_field("habits", remaining)
        logger.info("Deleted habit %s", habit_id)
        return True

    def update_weight(self, habit_id: str, weight: int) -> dict | None:
        """
        Change a habit's weight (minimum 1).

        Returns:
            The updated habit, or None if the id is unknown
        """
        habits = self.get_habits()
        updated = None
        for habit in habits:
            if habit["id"] == habit_id:
                habit["weight"] = max(1, weight)
                updated = habit

        if updated is None:
            return None

        self.storage.save_field("habits", habits)
        return updated

    def toggle_habit(self, habit_name: str, today: date | None = None) -> list[str]:
        """
        Mark or unmark a habit as done for today.

        Args:
            habit_name: Name of the habit to toggle
            today: Override for today's date (for testing)

        Returns:
            Today's updated list of done habits
        """
        if today is None:
            today = date.today()
        today_str = format_date(today)

        history = self.storage.get_snapshot()["history"]
        current = history.get(today_str, [])
        if habit_name in current:
            updated = [name for name in current if name != habit_name]
        else:
            updated = current + [habit_name]

        history[today_str] = updated
        self.storage.save_field("history", history)
        return updated

    def set_start_date(self, start_date: str) -> dict:
        """Set the first tracked day. Returns the new settings."""
        settings = self.storage.get_snapshot()["settings"]
        settings["start_date"] = start_date
        self.storage.save_field("settings", settings)
        return settings

    def get_note(self, date_str: str) -> str:
        return self.storage.get_snapshot()["notes"].get(date_str, "")

    def save_note(self, date_str: str, content: str) -> None:
        """Store the journal note for a day, replacing any previous one."""
        notes = self.storage.get_snapshot()["notes"]
        notes[date_str] = content
        self.storage.save_field("notes", notes)

    def get_day(self, date_str: str) -> dict:
        """
        Get detail for a single day.

        Returns:
            Dictionary with date, habits_done, clean flag and note
        """
        snapshot = self.storage.get_snapshot()
        habits_done = snapshot["history"].get(date_str) or []
        return {
            "date": date_str,
            "habits_done": habits_done,
            "clean": not habits_done,
            "note": snapshot["notes"].get(date_str, ""),
        }

    def clear_all(self) -> None:
        """Wipe every field of the document."""
        self.storage.clear()
