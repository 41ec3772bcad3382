"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the optional dataset override and log level from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")


@dataclass(frozen=True)
class Settings:
    """Container for configuration read from the environment.

    Attributes:
        data_file: Dataset to load instead of the bundled `brickset.json`,
            or ``None`` to use the bundled one.
        log_level: Numeric logging level.
    """
    data_file: Path | None
    log_level: int


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `BRICKSET_LOG_LEVEL` is not a known level name.
    """
    data_file = os.getenv("BRICKSET_DATA_FILE", "").strip()
    level_name = os.getenv("BRICKSET_LOG_LEVEL", "INFO").strip().upper()

    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise RuntimeError(
            f"BRICKSET_LOG_LEVEL={level_name!r} is not a logging level "
            "(example: 'DEBUG', 'INFO', 'WARNING')."
        )

    return Settings(
        data_file=Path(data_file) if data_file else None,
        log_level=log_level,
    )
