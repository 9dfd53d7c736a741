"""
Configuration settings for the application.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from src.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: str = self._get_env("FILE_MANAGER_LOG_LEVEL", "WARNING").upper()
        self.log_file: Optional[str] = os.getenv("FILE_MANAGER_LOG_FILE") or None
        self.chunk_size: int = self._get_positive_int_env(
            "FILE_MANAGER_CHUNK_SIZE", 64 * 1024
        )
        self.start_dir: str = self._get_env(
            "FILE_MANAGER_START_DIR", os.path.expanduser("~")
        )
        self.prompt: str = self._get_env("FILE_MANAGER_PROMPT", "> ")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_positive_int_env(self, key: str, default: int) -> int:
        """Get a positive integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer")
        if value <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive")
        return value


# Global settings instance
settings = Settings()
