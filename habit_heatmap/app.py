"""
FastAPI web application for habit-heatmap.

Provides the heatmap page and REST API endpoints for habits, history,
notes and settings.
"""

import logging
from datetime import date
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from habit_heatmap.config import DB_PATH, USER_ID, validate_config
from habit_heatmap.dashboard import compute_dashboard
from habit_heatmap.habit_manager import HabitManager
from habit_heatmap.intensity import BUCKETS
from habit_heatmap.models import format_date
from habit_heatmap.storage import HabitStorage

logger = logging.getLogger(__name__)

app = FastAPI(
    title="habit-heatmap",
    description="A heatmap dashboard for habits to avoid",
    version="0.1.0",
)

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")

BUCKET_COLORS = dict(
    zip(
        BUCKETS,
        (
            "transparent",
            "#334155",
            "#10b981",
            "#fecaca",
            "#fca5a5",
            "#ef4444",
            "#b91c1c",
            "#7f1d1d",
        ),
    )
)


class HabitCreate(BaseModel):
    """Request model for creating a habit."""

    name: str = Field(..., min_length=1, max_length=200, description="Habit name")
    weight: int = Field(1, description="Severity weight (values below 1 become 1)")


class WeightUpdate(BaseModel):
    """Request model for changing a habit's weight."""

    weight: int = Field(..., description="Severity weight (values below 1 become 1)")


class HabitToggle(BaseModel):
    """Request model for toggling a habit for today."""

    name: str = Field(..., min_length=1, description="Habit name")


class SettingsUpdate(BaseModel):
    """Request model for updating settings."""

    start_date: date = Field(..., description="First tracked day")


class NoteUpdate(BaseModel):
    """Request model for saving a journal note."""

    content: str = Field("", max_length=10000, description="Journal text")


def _get_storage() -> HabitStorage:
    """
    Create the storage for the configured user.

    Raises:
        HTTPException: on configuration errors
    """
    try:
        validate_config()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Configuration error: {e}")

    return HabitStorage(DB_PATH, user_id=USER_ID)


def _validate_day(date_str: str) -> str:
    try:
        return format_date(date.fromisoformat(date_str))
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Invalid date: {date_str}")


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    """Render the dashboard page."""
    data = compute_dashboard(_get_storage().get_snapshot())
    data["colors"] = BUCKET_COLORS
    return templates.TemplateResponse(request, "index.html", data)


@app.get("/api/dashboard")
def get_dashboard():
    """
    Get all derived dashboard data.

    Returns:
        JSON with months, streak, habits and today's checklist
    """
    return compute_dashboard(_get_storage().get_snapshot())


@app.get("/api/heatmap")
def get_heatmap():
    """
    Get the 12-month heatmap.

    Returns:
        JSON with month groups; every day carries its bucket and color
    """
    data = compute_dashboard(_get_storage().get_snapshot())
    for month in data["months"]:
        for day in month["days"]:
            day["color"] = BUCKET_COLORS[day["bucket"]]
    return {"today": data["today"], "months": data["months"]}


@app.get("/api/streak")
def get_streak():
    """
    Get the current and longest clean streak.

    Returns:
        JSON with current_streak and longest_streak
    """
    return compute_dashboard(_get_storage().get_snapshot())["streak"]


@app.get("/api/habits")
def get_habits():
    """Get the habit list."""
    return {"habits": HabitManager(_get_storage()).get_habits()}


@app.post("/api/habits")
def create_habit(habit: HabitCreate):
    """
    Create a new habit.

    Args:
        habit: HabitCreate with name and optional weight

    Returns:
        JSON with the created habit
    """
    created = HabitManager(_get_storage()).add_habit(habit.name, habit.weight)
    if created is None:
        raise HTTPException(status_code=422, detail="Habit name must not be blank")
    return {"habit": created}


@app.delete("/api/habits/{habit_id}")
def delete_habit(habit_id: str):
    """
    Delete a habit. Past days that recorded it keep the name.

    Args:
        habit_id: The habit ID
    """
    if not HabitManager(_get_storage()).delete_habit(habit_id):
        raise HTTPException(status_code=404, detail="Habit not found")
    return {"deleted": habit_id}


@app.put("/api/habits/{habit_id}/weight")
def update_weight(habit_id: str, update: WeightUpdate):
    """
    Change a habit's weight.

    Args:
        habit_id: The habit ID
        update: WeightUpdate with the new weight

    Returns:
        JSON with the updated habit
    """
    habit = HabitManager(_get_storage()).update_weight(habit_id, update.weight)
    if habit is None:
        raise HTTPException(status_code=404, detail="Habit not found")
    return {"habit": habit}


@app.post("/api/today/toggle")
def toggle_today(toggle: HabitToggle):
    """
    Mark or unmark a habit as done today.

    Returns:
        JSON with today's date and its done habits
    """
    manager = HabitManager(_get_storage())
    if toggle.name not in {habit["name"] for habit in manager.get_habits()}:
        raise HTTPException(status_code=404, detail="Habit not found")

    today = date.today()
    habits_done = manager.toggle_habit(toggle.name, today=today)
    return {"date": format_date(today), "habits_done": habits_done}


@app.get("/api/settings")
def get_settings():
    """Get the settings."""
    return _get_storage().get_snapshot()["settings"]


@app.put("/api/settings")
def update_settings(update: SettingsUpdate):
    """
    Set the tracking start date.

    Returns:
        JSON with the updated settings
    """
    return HabitManager(_get_storage()).set_start_date(format_date(update.start_date))


@app.get("/api/days/{date_str}")
def get_day(date_str: str):
    """
    Get a single day's done habits and journal note.

    Args:
        date_str: Date in YYYY-MM-DD format
    """
    return HabitManager(_get_storage()).get_day(_validate_day(date_str))


@app.put("/api/notes/{date_str}")
def save_note(date_str: str, note: NoteUpdate):
    """
    Save the journal note for a day.

    Args:
        date_str: Date in YYYY-MM-DD format
        note: NoteUpdate with content
    """
    day = _validate_day(date_str)
    HabitManager(_get_storage()).save_note(day, note.content)
    return {"date": day, "note": note.content}


@app.post("/api/clear")
def clear_all():
    """Wipe all habits, history, notes and reset the start date."""
    storage = _get_storage()
    HabitManager(storage).clear_all()
    logger.warning("All data cleared via API")
    return storage.get_snapshot()
