"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings, configurable via environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_prefix="SPELLCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Path("data")
    dictionary_dir: Path | None = None  # bundled word lists

    # Logging
    log_level: LogLevel = "INFO"
    log_file_enabled: bool = False
    log_file_path: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    @property
    def resolved_log_file_path(self) -> Path:
        """Return log file path, defaulting to data_dir/spellcore.log if not set."""
        return self.log_file_path or self.data_dir / "spellcore.log"

    @property
    def resolved_dictionary_dir(self) -> Path:
        return self.dictionary_dir or self.data_dir / "dictionaries"

    @property
    def db_path(self) -> Path:
        return self.data_dir / "spellcore.db"

    # Engine
    async_loading: bool = True  # False builds dictionaries on the calling thread
    min_word_length: int = 3

    # Suggestions
    suggestion_threshold: int = 5
    suggestion_quality: int = 1

    # User dictionary
    user_dictionary_name: str = "user"


settings = Settings()
