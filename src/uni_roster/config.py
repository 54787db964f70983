"""Configuration for the university roster."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional


class Config:
    """Configuration class for uni_roster."""

    # Default data directory, relative to the repository root
    DEFAULT_DATA_DIR = "data"

    STUDENT_FILE = "Student.txt"
    TEACHER_FILE = "Teacher.txt"

    DEFAULT_LOG_LEVEL = "WARNING"

    @classmethod
    def repo_root(cls) -> Path:
        """Repo-Root: .../src/uni_roster/config.py -> drei Ebenen hoch."""
        return Path(__file__).resolve().parents[2]

    @classmethod
    def get_data_dir(cls, override_path: Optional[str] = None) -> Path:
        """Get the data directory.

        Args:
            override_path: Optional path to override the default data directory

        Returns:
            Path object for the data directory
        """
        if override_path:
            return Path(override_path)

        # Check for environment variable
        env_path = os.getenv("ROSTER_DATA_DIR")
        if env_path:
            return Path(env_path)

        return cls.repo_root() / cls.DEFAULT_DATA_DIR

    @classmethod
    def get_log_level(cls) -> int:
        """Log level from ROSTER_LOG_LEVEL, unknown names fall back to the default."""
        name = os.getenv("ROSTER_LOG_LEVEL", cls.DEFAULT_LOG_LEVEL).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            level = logging.getLevelName(cls.DEFAULT_LOG_LEVEL)
        return level


# Global configuration instance
config = Config()
