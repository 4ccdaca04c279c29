"""
SQLite-based storage for the habit document.

Keeps the whole user state (habits, history, notes, settings) in a single
row and pushes a fresh snapshot to subscribers after every write.
"""

import copy
import json
import logging
import os
import sqlite3
from pathlib import Path
from typing import Callable

from habit_heatmap.models import SNAPSHOT_FIELDS, bootstrap_snapshot, cleared_snapshot

logger = logging.getLogger(__name__)

DEFAULT_USER_ID = "user_default"


def _get_default_db_path() -> Path:
    """Get the default database path."""
    env_path = os.environ.get("HABIT_HEATMAP_DB_PATH")
    if env_path:
        return Path(env_path)
    return Path.home() / ".habit-heatmap" / "habits.db"


class HabitStorage:
    """SQLite-based storage for one user's habit document."""

    def __init__(self, db_path: str | Path | None = None, user_id: str = DEFAULT_USER_ID):
        """
        Initialize the habit storage.

        Args:
            db_path: Path to the SQLite database file.
                     Defaults to ~/.habit-heatmap/habits.db
            user_id: Key of the document row
        """
        if db_path is None:
            db_path = _get_default_db_path()
        self.db_path = Path(db_path)
        self.user_id = user_id
        self._subscribers: list[Callable[[dict], None]] = []
        self._init_db()

    def _init_db(self) -> None:
        """Create the documents table if it doesn't exist."""
        # Ensure parent directory exists
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS documents (
                    user_id TEXT PRIMARY KEY,
                    habits TEXT NOT NULL,
                    history TEXT NOT NULL,
                    notes TEXT NOT NULL,
                    settings TEXT NOT NULL,
                    updated_at TEXT DEFAULT CURRENT_TIMESTAMP
                )
            """)
            conn.commit()

    def _write_document(self, document: dict) -> None:
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                """
                INSERT INTO documents (user_id, habits, history, notes, settings, updated_at)
                VALUES (?, ?, ?, ?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(user_id) DO UPDATE SET
                    habits = excluded.habits,
                    history = excluded.history,
                    notes = excluded.notes,
                    settings = excluded.settings,
                    updated_at = excluded.updated_at
                """,
                (self.user_id, *(json.dumps(document[name]) for name in SNAPSHOT_FIELDS)),
            )
            conn.commit()

    def _read_document(self) -> dict | None:
        with sqlite3.connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            row = conn.execute(
                "SELECT habits, history, notes, settings FROM documents WHERE user_id = ?",
                (self.user_id,),
            ).fetchone()

        if row is None:
            return None
        return {name: json.loads(row[name]) for name in SNAPSHOT_FIELDS}

    def get_snapshot(self) -> dict:
        """
        Get the current document, creating the default one if missing.

        Returns:
            Dictionary with habits, history, notes and settings
        """
        document = self._read_document()
        if document is None:
            logger.info("No document for %s, writing defaults", self.user_id)
            document = bootstrap_snapshot()
            self._write_document(document)
        return document

    def save_field(self, field: str, value) -> None:
        """
        Replace one whole field of the document.

        Args:
            field: One of habits, history, notes, settings
            value: The new value for the entire field

        Raises:
            ValueError: If field is not a document field
        """
        if field not in SNAPSHOT_FIELDS:
            raise ValueError(
                f"Unknown field: {field}. Must be one of: {', '.join(SNAPSHOT_FIELDS)}"
            )

        document = self.get_snapshot()
        document[field] = value
        self._write_document(document)
        logger.debug("Saved field %s for %s", field, self.user_id)
        self._notify(document)

    def clear(self) -> None:
        """Reset all fields: no habits, history or notes, start date today."""
        document = cleared_snapshot()
        self._write_document(document)
        logger.info("Cleared all data for %s", self.user_id)
        self._notify(document)

    def subscribe(self, callback: Callable[[dict], None]) -> Callable[[], None]:
        """
        Register a callback for snapshot pushes.

        The callback receives the current snapshot immediately and again
        after every write.

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)
        callback(copy.deepcopy(self.get_snapshot()))

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, document: dict) -> None:
        for callback in list(self._subscribers):
            callback(copy.deepcopy(document))
