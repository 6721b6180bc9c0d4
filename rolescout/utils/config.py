"""
Configuration management for RoleScout.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rolescout.utils.constants import (
    CASTING_CALL_BASE_SCORE,
    MAX_SKILL_BONUS,
    POINTS_PER_SKILL,
    REQUIREMENT_QUALIFICATION_THRESHOLD,
)


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent


class DatabaseSettings(BaseSettings):
    """MongoDB database configuration."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    host: str = "localhost"
    port: int = 27017
    name: str = "rolescout"
    username: str | None = None
    password: str | None = None

    @property
    def connection_string(self) -> str:
        """Generate MongoDB connection string."""
        if self.username and self.password:
            return f"mongodb://{self.username}:{self.password}@{self.host}:{self.port}"
        return f"mongodb://{self.host}:{self.port}"


class MatchingSettings(BaseSettings):
    """Role suggestion and ranking configuration."""

    model_config = SettingsConfigDict(env_prefix="MATCH_")

    requirement_threshold: int = REQUIREMENT_QUALIFICATION_THRESHOLD
    casting_call_base_score: int = CASTING_CALL_BASE_SCORE
    points_per_skill: int = POINTS_PER_SKILL
    max_skill_bonus: int = MAX_SKILL_BONUS

    # Deadline applied to the store queries of one suggestion run
    query_timeout_seconds: Optional[float] = None

    # Cap on the number of roles returned (None = all)
    max_results: Optional[int] = None

    @field_validator("query_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        """Reject non-positive deadlines."""
        if v is not None and v <= 0:
            raise ValueError("query_timeout_seconds must be positive")
        return v

    @field_validator("max_results")
    @classmethod
    def validate_max_results(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 1:
            raise ValueError("max_results must be at least 1")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = ROOT_DIR / "logs" / "rolescout.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "RoleScout"
    version: str = "0.1.0"
    description: str = "Role suggestion and ranking engine for a casting marketplace"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
