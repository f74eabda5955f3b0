"""
Application settings.

Values come from (highest priority first) constructor kwargs, environment
variables prefixed with ``OBSERVATION_FINDER_``, and a local ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the observation finder."""

    model_config = SettingsConfigDict(
        env_prefix="OBSERVATION_FINDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Observation Finder"
    app_env: str = "development"
    debug: bool = False

    # Remote API
    api_base_url: str = "https://www.inaturalist.org"
    request_timeout: float = Field(default=30.0, gt=0)

    # Map centre used when geolocation is unavailable (San Francisco)
    default_lat: float = Field(default=37.7749, ge=-90, le=90)
    default_lon: float = Field(default=-122.4194, ge=-180, le=180)

    # Search radius limits, in metres
    default_radius_m: float = 1000.0
    min_radius_m: float = 100.0
    max_radius_m: float = 5000.0

    @model_validator(mode="after")
    def check_radius_limits(self) -> Settings:
        if not 0 < self.min_radius_m <= self.default_radius_m <= self.max_radius_m:
            raise ValueError(
                "radius limits must satisfy 0 < min_radius_m <= default_radius_m <= max_radius_m"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
