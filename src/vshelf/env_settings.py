"""Environment-based settings using pydantic-settings.

Usage:
    from vshelf.env_settings import get_env_settings

    env = get_env_settings()
    print(env.series.min_series_volumes)  # From VSHELF_MIN_SERIES_VOLUMES

Environment Variables:
    Series detection:
        VSHELF_MIN_SERIES_VOLUMES - Volumes required to form a series (default: 2, minimum 2)
        VSHELF_READ_STATUS - Read-status value counted as finished (default: "read")

    Application:
        LOG_LEVEL - Logging level (default: "INFO")
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from vshelf.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class SeriesEnvSettings(BaseSettings):
    """Series detection tunables from environment variables.

    Reads from VSHELF_MIN_SERIES_VOLUMES, VSHELF_READ_STATUS env vars.
    """

    model_config = SettingsConfigDict(
        env_prefix="VSHELF_",
        extra="ignore",
    )

    min_series_volumes: int = Field(
        default=2,
        ge=2,
        description="Minimum number of volumes for a group to count as a series",
    )
    read_status: str = Field(
        default="read",
        description="Read-status value (case-insensitive) that marks a volume as finished",
    )

    @field_validator("read_status")
    @classmethod
    def normalize_read_status(cls, v: str) -> str:
        """Store the read marker lower-cased; comparisons are case-insensitive."""
        v = v.strip().lower()
        if not v:
            raise ValueError("VSHELF_READ_STATUS must not be empty")
        return v


class AppEnvSettings(BaseSettings):
    """Application-level settings from environment variables.

    Reads from the LOG_LEVEL env var; setup_logging() uses it as its default.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}, got: {v}")
        return upper


class EnvSettings(BaseSettings):
    """Combined environment settings.

    Use get_env_settings() to get a cached instance.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
    )

    series: SeriesEnvSettings = Field(default_factory=SeriesEnvSettings)
    app: AppEnvSettings = Field(default_factory=AppEnvSettings)


@lru_cache(maxsize=1)
def get_env_settings() -> EnvSettings:
    """Get cached environment settings.

    The cache is populated on first call; use clear_env_settings_cache()
    to pick up environment changes.
    """
    return EnvSettings()


def clear_env_settings_cache() -> None:
    """Clear the cached environment settings.

    Useful for testing to ensure fresh settings are loaded.
    """
    get_env_settings.cache_clear()


def load_env_settings_from_file(env_file: Path | str) -> EnvSettings:
    """Load environment settings from a specific .env file.

    The file's values are loaded into os.environ (overriding existing
    values) and the settings cache is rebuilt.

    Args:
        env_file: Path to .env file to load.

    Returns:
        EnvSettings instance with configuration from the file.

    Raises:
        ConfigurationError: If the file does not exist or holds an invalid value.
    """
    from dotenv import load_dotenv

    env_path = Path(env_file)
    if not env_path.is_file():
        raise ConfigurationError(f"Settings file not found: {env_path}", config_file=env_path)

    load_dotenv(env_path, override=True)
    logger.debug("Loaded environment settings from %s", env_path)

    clear_env_settings_cache()
    try:
        return get_env_settings()
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(
            f"Invalid setting {field} in {env_path}: {first['msg']}",
            config_file=env_path,
            field=field,
        ) from e
