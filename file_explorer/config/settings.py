"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from file_explorer.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: str = self._get_log_level("FILE_EXPLORER_LOG_LEVEL", "ERROR")
        self.log_file: Optional[str] = self._get_optional_env("FILE_EXPLORER_LOG_FILE")
        self.start_directory: Optional[str] = self._get_optional_env(
            "FILE_EXPLORER_START_DIR"
        )

    def _get_log_level(self, key: str, default: str) -> str:
        """Get a logging level name, raise error if it is not a standard one."""
        value = self._get_env(key, default).strip().upper()
        if value not in _LEVELS:
            raise ConfigurationError(
                f"{key} must be one of {', '.join(_LEVELS)}, got {value!r}"
            )
        return value

    def _get_optional_env(self, key: str) -> Optional[str]:
        """Get an environment variable, treating empty values as unset."""
        value = os.getenv(key)
        return value or None

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def configure_logging(self, level: Optional[str] = None) -> None:
        """Configure the root logger from these settings."""
        logging.basicConfig(
            level=level or self.log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            filename=self.log_file,
        )
