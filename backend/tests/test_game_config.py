"""
Tests for game_config.py - settings from the environment and .env files.
"""

import pytest
import sys
import os
from unittest.mock import patch

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from game_config import Settings, load_settings
from domain.constants import CLASSIC_RULES, CONFINED_RULES


@patch('game_config.load_dotenv')
class TestLoadSettings:
    """Tests for load_settings() with .env loading disabled."""

    def test_defaults(self, mock_load_dotenv):
        """With an empty environment every setting has its default."""
        with patch.dict(os.environ, {}, clear=True):
            settings = load_settings()
        assert settings == Settings()
        assert (settings.width, settings.height) == (80, 24)
        assert settings.seed is None
        assert settings.rules == CONFINED_RULES
        assert settings.log_file is None

    def test_values_from_environment(self, mock_load_dotenv):
        """SNAKE_* variables fill the settings, names normalised."""
        env = {
            "SNAKE_WIDTH": "60",
            "SNAKE_HEIGHT": "20",
            "SNAKE_SEED": "42",
            "SNAKE_RULES": "Classic",
            "SNAKE_LOG_FILE": "/tmp/snake.log",
            "SNAKE_LOG_LEVEL": "debug",
            "SNAKE_AUTOPLAY_DELAY_MS": "25",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = load_settings()
        assert settings.width == 60
        assert settings.height == 20
        assert settings.seed == 42
        assert settings.rules == CLASSIC_RULES
        assert settings.log_file == "/tmp/snake.log"
        assert settings.log_level == "DEBUG"
        assert settings.autoplay_delay_ms == 25

    def test_blank_values_use_defaults(self, mock_load_dotenv):
        """Blank variables fall back to the defaults."""
        with patch.dict(os.environ, {"SNAKE_SEED": " ", "SNAKE_LOG_FILE": ""}, clear=True):
            settings = load_settings()
        assert settings.seed is None
        assert settings.log_file is None

    def test_non_integer_raises(self, mock_load_dotenv):
        """A non-numeric size names the offending variable."""
        with patch.dict(os.environ, {"SNAKE_WIDTH": "wide"}, clear=True):
            with pytest.raises(ValueError, match="SNAKE_WIDTH"):
                load_settings()

    def test_unknown_rules_raise(self, mock_load_dotenv):
        """An unknown SNAKE_RULES is a ValueError."""
        with patch.dict(os.environ, {"SNAKE_RULES": "wrap"}, clear=True):
            with pytest.raises(ValueError, match="SNAKE_RULES"):
                load_settings()

    def test_unknown_log_level_raises(self, mock_load_dotenv):
        """An unknown SNAKE_LOG_LEVEL is a ValueError."""
        with patch.dict(os.environ, {"SNAKE_LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValueError, match="SNAKE_LOG_LEVEL"):
                load_settings()


def test_env_file_is_read(tmp_path):
    """Values are read from an explicit .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("SNAKE_WIDTH=50\nSNAKE_RULES=classic\n")

    with patch.dict(os.environ, {}, clear=True):
        settings = load_settings(str(env_file))

    assert settings.width == 50
    assert settings.rules == CLASSIC_RULES


def test_environment_wins_over_env_file(tmp_path):
    """Real environment variables override the .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("SNAKE_HEIGHT=30\n")

    with patch.dict(os.environ, {"SNAKE_HEIGHT": "12"}, clear=True):
        settings = load_settings(str(env_file))

    assert settings.height == 12
