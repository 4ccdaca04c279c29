"""
Configuration management for habit-heatmap.

Loads storage and logging settings from environment variables.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()

DB_PATH = os.getenv("HABIT_HEATMAP_DB_PATH")
USER_ID = os.getenv("HABIT_HEATMAP_USER_ID", "user_default")
LOG_LEVEL = os.getenv("HABIT_HEATMAP_LOG_LEVEL", "INFO").upper()

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_config():
    """Validate that configuration values are usable."""
    invalid = []

    if not USER_ID or not USER_ID.strip():
        invalid.append("HABIT_HEATMAP_USER_ID")

    if LOG_LEVEL not in VALID_LOG_LEVELS:
        invalid.append("HABIT_HEATMAP_LOG_LEVEL")

    if invalid:
        raise ValueError(
            f"Invalid configuration: {', '.join(invalid)}\n"
            "Check your .env file or environment variables.\n"
            f"Log level must be one of: {', '.join(VALID_LOG_LEVELS)}"
        )


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure root logging for the console and web entry points."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # uvicorn access logs are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return logging.getLogger("habit_heatmap")
