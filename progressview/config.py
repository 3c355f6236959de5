# progressview/config.py
# -----------------------------------------------------------------------------
# Centralized Configuration Management
# -----------------------------------------------------------------------------

# SECTION: IMPORTS
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# SECTION: DEFAULTS
DEFAULT_USER_FILE = Path("user.json")
DEFAULT_CHALLENGES_FILE = Path("challenges.json")


# KLASS: AppConfig
class AppConfig(BaseSettings):
    """Settings read from PROGRESSVIEW_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="PROGRESSVIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    user_file: Path = Field(DEFAULT_USER_FILE, description="JSON file with the user's state.")
    challenges_file: Path = Field(DEFAULT_CHALLENGES_FILE, description="JSON file with the challenge catalog.")
    log_dir: Path | None = Field(None, description="Directory for the rotating log file.")
    log_level: str = Field("INFO", description="Logger level name.")
    color: bool = Field(True, description="Decorate messages with Rich markup.")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> str:
        return str(v).upper()


_config: AppConfig | None = None


# FUNC: get_config
def get_config() -> AppConfig:
    global _config
    if _config is None:
        _config = AppConfig()
    return _config


__all__ = ["AppConfig", "get_config", "DEFAULT_USER_FILE", "DEFAULT_CHALLENGES_FILE"]
