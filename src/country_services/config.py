"""Configuration model for the country service."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://restcountries.com/v2"


class CountryServiceConfig(BaseSettings):
    """All configurable parameters for the country service.

    Values can be set via constructor arguments, environment variables
    prefixed with COUNTRY_SERVICE_, or defaults.
    """

    model_config = {"env_prefix": "COUNTRY_SERVICE_"}

    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="REST Countries API base URL."
    )
    request_timeout: float = Field(
        default=10.0, gt=0.0, le=300.0, description="HTTP request timeout in seconds."
    )
    cache_enabled: bool = Field(
        default=True, description="Cache currency lookups in memory."
    )
    cache_max_size: int = Field(
        default=256, ge=1, description="Maximum number of cached currencies."
    )
    cache_ttl_seconds: float = Field(
        default=3600.0, gt=0.0, description="Seconds a cached currency stays fresh."
    )

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        if any(ch.isspace() for ch in value):
            raise ValueError("base_url must not contain whitespace")
        return value
