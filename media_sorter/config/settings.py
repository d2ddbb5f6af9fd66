"""Configuration settings and constants for the media_sorter package."""

from typing import FrozenSet

# Environment variables overriding the default directories
ENV_SOURCE_DIR = "SORTER_SRC_DIR"
ENV_TARGET_DIR = "SORTER_TARGET_DIR"

# Fallback subdirectories of $HOME
DEFAULT_SOURCE_SUBDIR = "Downloads"
DEFAULT_TARGET_SUBDIR = "Videos"

# Extensions sorted when none are given (no leading dot)
DEFAULT_EXTENSIONS: FrozenSet[str] = frozenset({"mp4"})

# Log file settings
LOG_FILE = "media_sorter.log"
LOG_ROTATION = "10 MB"
LOG_RETENTION = "7 days"

# Name of the dotenv file read at startup
DOTENV_FILE = ".env"
