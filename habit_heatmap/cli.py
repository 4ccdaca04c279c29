"""
CLI display functions for habit-heatmap.
"""

from habit_heatmap.intensity import BUCKETS

BUCKET_SYMBOLS = dict(zip(BUCKETS, ("   ", " · ", "[ ]", "[1]", "[2]", "[3]", "[4]", "[5]")))


def get_milestone_message(streak_days: int) -> str | None:
    """
    Get milestone message for a given clean streak length.

    Args:
        streak_days: Current streak in days

    Returns:
        Milestone message string or None if no milestone
    """
    milestones = {
        7: "One clean week!",
        14: "Two weeks clean!",
        30: "One month clean!",
        90: "Three months - habit broken!",
        365: "A whole year clean!",
    }
    return milestones.get(streak_days)


def display_streak(streak_info: dict) -> None:
    """
    Display streak information to the console with milestone messages.

    Args:
        streak_info: Dictionary from calculate_streak() containing:
            - current_streak: int
            - longest_streak: int
    """
    current = streak_info["current_streak"]
    longest = streak_info["longest_streak"]

    if current == 0:
        status = "No clean streak"
    else:
        day_word = "day" if current == 1 else "days"
        status = f"Current Clean Streak: {current} {day_word}"

        milestone = get_milestone_message(current)
        if milestone:
            status = f"{status} - {milestone}"

    print(f"🌱 {status}")
    print(f"   Longest: {longest} {'day' if longest == 1 else 'days'}")
    print()


def display_checklist(checklist: list[dict], today: str) -> None:
    """
    Display today's habits and whether each one was done.

    Args:
        checklist: List of habit dicts with 'name', 'weight' and 'done'
        today: Today's date string
    """
    print(f"Today's Checklist ({today}):")
    if not checklist:
        print("   No habits yet.")
    for habit in checklist:
        mark = "✕" if habit["done"] else " "
        print(f"   [{mark}] {habit['name']} (weight {habit['weight']})")
    print()


def format_month(month: dict) -> list[str]:
    """
    Format one month group as text rows, one row per week.

    Args:
        month: Month dict with 'name', 'year' and 'days' (each day has 'bucket')

    Returns:
        List of lines: a title line followed by week rows
    """
    lines = [f"{month['name']} {month['year']}"]

    cells = [BUCKET_SYMBOLS[day["bucket"]] for day in month["days"]]
    for start in range(0, len(cells), 7):
        lines.append("  " + " ".join(cells[start:start + 7]).rstrip())

    return lines


def display_heatmap(months: list[dict]) -> None:
    """
    Display a text heatmap of the month groups.

    Args:
        months: Month dicts from compute_dashboard()
    """
    print("History Overview:")
    print("  " + " ".join(["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]))

    for month in months:
        for line in format_month(month):
            print(line)

    print()
    print("  [ ] clean  [1]-[5] severity   ·  untracked")
    print()
