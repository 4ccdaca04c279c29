"""
habit-heatmap: A heatmap dashboard for habits to avoid

Entry point for the console application.
"""

from habit_heatmap.cli import display_checklist, display_heatmap, display_streak
from habit_heatmap.config import DB_PATH, USER_ID, setup_logging, validate_config
from habit_heatmap.dashboard import compute_dashboard
from habit_heatmap.storage import HabitStorage


def main():
    print("habit-heatmap - Keep your clean streak going!")
    print("-" * 50)

    # Validate configuration
    try:
        validate_config()
    except ValueError as e:
        print(f"\nConfiguration Error:\n{e}")
        return 1

    setup_logging()

    storage = HabitStorage(DB_PATH, user_id=USER_ID)
    data = compute_dashboard(storage.get_snapshot())

    display_streak(data["streak"])
    display_checklist(data["checklist"], data["today"])
    display_heatmap(data["months"])

    return 0


if __name__ == "__main__":
    exit(main())
