"""Country currency and capital lookups against the REST Countries API."""

from __future__ import annotations

__version__ = "0.1.0"

from country_services.cache import CurrencyCache
from country_services.config import CountryServiceConfig
from country_services.errors import (
    CountryServiceError,
    InvalidInputError,
    InvalidRemoteResultError,
    NoDataFoundError,
)
from country_services.models import Country, LocalCurrency
from country_services.service import CountryService

__all__ = [
    "Country",
    "CountryService",
    "CountryServiceConfig",
    "CountryServiceError",
    "CurrencyCache",
    "InvalidInputError",
    "InvalidRemoteResultError",
    "LocalCurrency",
    "NoDataFoundError",
    "__version__",
]
