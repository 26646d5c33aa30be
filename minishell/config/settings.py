"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from minishell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.start_directory: str = self._get_env("MINISHELL_START_DIR", os.getcwd())
        self.capture_sentinel: str = self._get_env("MINISHELL_CAPTURE_SENTINEL", "exit")
        self.log_level: str = self._get_env("MINISHELL_LOG_LEVEL", "WARNING").upper()
        self.api_host: str = self._get_env("MINISHELL_API_HOST", "127.0.0.1")
        self.api_port: int = self._get_int_env("MINISHELL_API_PORT", 8000)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        """Get an integer environment variable, raise error if it is not a number."""
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {key} must be an integer, got {value!r}"
            )

    def get_start_directory(self, override: Optional[str] = None) -> str:
        """
        Resolve the directory a new session starts in.

        Args:
            override: Directory given explicitly (CLI flag or API request)

        Returns:
            Absolute path of an existing directory

        Raises:
            ConfigurationError: If the directory does not exist
        """
        directory = os.path.abspath(os.path.expanduser(override or self.start_directory))
        if not os.path.isdir(directory):
            raise ConfigurationError(f"Start directory does not exist: {directory}")
        return directory

    def get_log_level(self, override: Optional[str] = None) -> int:
        """
        Resolve the logging level name into a ``logging`` constant.

        Raises:
            ConfigurationError: If the level name is unknown
        """
        name = (override or self.log_level).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level: {name}")
        return level


# Global settings instance
settings = Settings()
