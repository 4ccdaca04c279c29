"""
Intensity classifier for heatmap coloring.

Maps a day's done habits, weighted by the current habit list, to one of
a fixed set of buckets.
"""

from habit_heatmap.models import DayCell

PLACEHOLDER = "none"
UNTRACKED = "untracked"
CLEAN = "clean"

# Inclusive upper bounds for severity-1 .. severity-4; anything above is severity-5
SEVERITY_THRESHOLDS = (0.10, 0.25, 0.50, 0.75)

SEVERITY_BUCKETS = tuple(f"severity-{level}" for level in range(1, 6))

BUCKETS = (PLACEHOLDER, UNTRACKED, CLEAN) + SEVERITY_BUCKETS


def calculate_intensity(habits_done: list[str], habits: list[dict]) -> float:
    """
    Calculate the weighted share of habits done on a day.

    Args:
        habits_done: Names of habits recorded for the day
        habits: Current habit list, each with 'name' and 'weight'

    Returns:
        Done weight divided by total weight (total floors at 1).
        Names that no longer match a habit weigh 0.
    """
    weights = {habit["name"]: habit.get("weight", 0) for habit in habits}
    total_weight = sum(habit.get("weight", 0) for habit in habits) or 1
    current_weight = sum(weights.get(name, 0) for name in habits_done)
    return current_weight / total_weight


def classify_day(day: DayCell, habits: list[dict]) -> str:
    """
    Classify a day cell into a bucket.

    Args:
        day: The DayCell to classify
        habits: Current habit list

    Returns:
        One of BUCKETS
    """
    if day.is_placeholder:
        return PLACEHOLDER
    if day.is_future or day.is_before_start:
        return UNTRACKED
    if not day.habits_done:
        return CLEAN

    level = _calculate_level(calculate_intensity(day.habits_done, habits))
    return SEVERITY_BUCKETS[level - 1]


def _calculate_level(intensity: float) -> int:
    """
    Calculate severity level for a non-clean day.

    Returns:
        Level from 1-5:
            1: <= 0.10
            2: <= 0.25
            3: <= 0.50
            4: <= 0.75
            5: above 0.75
    """
    for level, threshold in enumerate(SEVERITY_THRESHOLDS, start=1):
        if intensity <= threshold:
            return level
    return len(SEVERITY_THRESHOLDS) + 1


def _severity_rank(bucket: str) -> int:
    """Order buckets for comparison: clean is 0, severity-N is N, others -1."""
    if bucket == CLEAN:
        return 0
    if bucket in SEVERITY_BUCKETS:
        return SEVERITY_BUCKETS.index(bucket) + 1
    return -1
