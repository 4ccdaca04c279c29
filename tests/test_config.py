"""Tests for configuration validation."""

from unittest.mock import patch

import pytest

from habit_heatmap import config
from habit_heatmap.config import validate_config


def test_defaults_are_valid():
    with patch.object(config, "USER_ID", "user_default"), patch.object(config, "LOG_LEVEL", "INFO"):
        validate_config()


def test_invalid_log_level():
    with patch.object(config, "LOG_LEVEL", "LOUD"):
        with pytest.raises(ValueError, match="HABIT_HEATMAP_LOG_LEVEL"):
            validate_config()


def test_blank_user_id():
    with patch.object(config, "USER_ID", "  "), patch.object(config, "LOG_LEVEL", "INFO"):
        with pytest.raises(ValueError, match="HABIT_HEATMAP_USER_ID"):
            validate_config()


@patch("habit_heatmap.config.logging.basicConfig")
def test_setup_logging_returns_package_logger(mock_basic_config):
    logger = config.setup_logging("DEBUG")

    assert logger.name == "habit_heatmap"
    assert mock_basic_config.call_args.kwargs["level"] == "DEBUG"
