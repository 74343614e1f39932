import logging
from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_DIR = Path(__file__).parent

PACKAGE_LOGGER = "fluent_double"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class FluentDoubleSettings(BaseSettings):
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Level applied to the package logger by apply_log_level().",
    )
    ALLOW_EXTRA_CALLS: bool = Field(
        default=False,
        description=(
            "When True, calls received after a chain is fully consumed are logged and "
            "absorbed instead of failing the test. Sessions can override it."
        ),
    )
    MESSAGE_REPR_LIMIT: int = Field(
        default=200,
        ge=20,
        description="Max characters of any single argument repr inside a failure message.",
    )
    VERIFY_ON_TEARDOWN: bool = Field(
        default=True,
        description="Whether the chain_session pytest fixture verifies completeness at teardown.",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    model_config = SettingsConfigDict(
        env_prefix="FLUENT_DOUBLE_",
        env_file=CONFIG_DIR.parent.parent / ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


def apply_log_level(settings_instance: FluentDoubleSettings) -> logging.Logger:
    """Set the package logger to the configured level and return it."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(settings_instance.LOG_LEVEL.value)
    return package_logger


# Global settings instance
settings = FluentDoubleSettings()
