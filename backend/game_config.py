"""
Runtime settings for the terminal snake.

Values come from the environment (a local .env file is loaded first) and
can be overridden by command-line flags in main.py:

    SNAKE_WIDTH              grid width, border included (default 80)
    SNAKE_HEIGHT             grid height, border included (default 24)
    SNAKE_SEED               seed for cherry placement (default: random)
    SNAKE_RULES              "confined" or "classic" (default "confined")
    SNAKE_LOG_FILE           write logs to this file (default: no logging)
    SNAKE_LOG_LEVEL          DEBUG, INFO, WARNING, ERROR or CRITICAL (default "INFO")
    SNAKE_AUTOPLAY_DELAY_MS  autoplay tick in milliseconds (default 80)
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import CONFINED_RULES, DEFAULT_HEIGHT, DEFAULT_WIDTH, VALID_RULES

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class Settings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    seed: Optional[int] = None
    rules: str = CONFINED_RULES
    log_file: Optional[str] = None
    log_level: str = "INFO"
    autoplay_delay_ms: int = 80


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Load settings from the environment, reading *env_file* (or ./.env) first."""
    load_dotenv(env_file)

    rules = os.getenv("SNAKE_RULES", CONFINED_RULES).strip().lower()
    if rules not in VALID_RULES:
        raise ValueError(f"SNAKE_RULES must be one of {sorted(VALID_RULES)}, got {rules!r}")

    log_level = os.getenv("SNAKE_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"SNAKE_LOG_LEVEL must be one of {LOG_LEVELS}, got {log_level!r}")

    return Settings(
        width=_int_env("SNAKE_WIDTH", DEFAULT_WIDTH),
        height=_int_env("SNAKE_HEIGHT", DEFAULT_HEIGHT),
        seed=_int_env("SNAKE_SEED", None),
        rules=rules,
        log_file=os.getenv("SNAKE_LOG_FILE") or None,
        log_level=log_level,
        autoplay_delay_ms=_int_env("SNAKE_AUTOPLAY_DELAY_MS", 80),
    )
