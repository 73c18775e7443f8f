"""
Type-safe configuration using Pydantic Settings
Validates environment variables and provides sensible defaults
"""

import re
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TIME_OF_DAY_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class RegistryConfig(BaseSettings):
    """
    Registry configuration with validation
    Automatically loads from CLINIC_* environment variables and .env file
    """

    model_config = SettingsConfigDict(
        env_prefix="CLINIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Working hours window (inclusive on both ends)
    working_hours_start: str = Field(
        "09:00", description="Start of the working day, HH:MM"
    )
    working_hours_end: str = Field("17:00", description="End of the working day, HH:MM")

    # Cost projection multipliers
    growth_multiplier: Decimal = Field(
        Decimal("1.15"), gt=0, description="Applied when month 2 usage grew"
    )
    steady_multiplier: Decimal = Field(
        Decimal("1.00"), gt=0, description="Applied when usage did not change"
    )
    decline_multiplier: Decimal = Field(
        Decimal("0.95"), gt=0, description="Applied when month 2 usage dropped"
    )

    rounding_places: int = Field(
        2, ge=0, le=6, description="Decimal places for averages and costs"
    )

    log_level: str = Field("INFO", description="Root logger level")

    @field_validator("working_hours_start", "working_hours_end")
    @classmethod
    def validate_time_of_day(cls, v: str) -> str:
        """Validate HH:MM format"""
        if not TIME_OF_DAY_PATTERN.match(v):
            raise ValueError(f"'{v}' is not a valid HH:MM time of day")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate logging level name"""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def validate_working_window(self) -> "RegistryConfig":
        """Ensure the working day does not end before it starts"""
        if self.working_hours_start_minutes > self.working_hours_end_minutes:
            raise ValueError("working_hours_start must not be later than working_hours_end")
        return self

    @property
    def working_hours_start_minutes(self) -> int:
        """Start of the working day in minutes since midnight"""
        return time_to_minutes(self.working_hours_start)

    @property
    def working_hours_end_minutes(self) -> int:
        """End of the working day in minutes since midnight"""
        return time_to_minutes(self.working_hours_end)


def time_to_minutes(time_string: str) -> int:
    """Convert an HH:MM string to minutes since midnight"""
    hours, minutes = time_string.split(":")
    return int(hours) * 60 + int(minutes)


# Singleton instance
_config: Optional[RegistryConfig] = None


def get_config() -> RegistryConfig:
    """
    Get or create the global configuration instance

    Returns:
        RegistryConfig: Validated configuration

    Raises:
        ValidationError: If configuration is invalid
    """
    global _config
    if _config is None:
        _config = RegistryConfig()
    return _config


def reload_config() -> RegistryConfig:
    """Force reload configuration from environment"""
    global _config
    _config = RegistryConfig()
    return _config
