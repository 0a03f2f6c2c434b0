"""Configuration management for the car rental reservation tracker."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from car_rental.models.car import CarType


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = Field(
        default="development"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "text"] = Field(default="json", description="Log format")

    # Fleet capacity (cars of each type available per calendar day)
    sedan_capacity: int = Field(default=10, ge=0, description="Daily sedan capacity")
    suv_capacity: int = Field(default=5, ge=0, description="Daily SUV capacity")
    van_capacity: int = Field(default=3, ge=0, description="Daily van capacity")

    # Reservation ids
    id_start: int = Field(default=1, ge=1, description="First reservation id issued")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v_upper

    def capacity_table(self) -> dict[CarType, int]:
        """Build the per-type capacity table used to construct an inventory."""
        return {
            CarType.SEDAN: self.sedan_capacity,
            CarType.SUV: self.suv_capacity,
            CarType.VAN: self.van_capacity,
        }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
