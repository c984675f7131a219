"""Country currency and capital lookups against the REST Countries API.

Every lookup is implemented once, as a coroutine.  The synchronous methods
run that coroutine to completion in a fresh event loop, so they block the
calling thread for the round trip and cannot be used from inside a running
loop.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from types import TracebackType
from typing import Any, TypeVar
from urllib.parse import quote

import httpx

from country_services.cache import CurrencyCache
from country_services.config import CountryServiceConfig
from country_services.errors import (
    InvalidInputError,
    InvalidRemoteResultError,
    NoDataFoundError,
)
from country_services.http import create_client
from country_services.models import Country, LocalCurrency, first_currency

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require(value: str | None, argument: str) -> str:
    """Return ``value`` stripped, or raise if it is None or blank."""
    if value is None or not value.strip():
        raise InvalidInputError(argument)
    return value.strip()


def _run_blocking(coro: Coroutine[Any, Any, T]) -> T:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    coro.close()
    raise RuntimeError(
        "Synchronous CountryService methods cannot be called from a running "
        "event loop; await the *_async variant instead."
    )


class CountryService:
    """Provides local currency and country information from REST Countries.

    Currency lookups are cached in a :class:`CurrencyCache`; capital lookups
    always hit the network.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        config: CountryServiceConfig | None = None,
        cache: CurrencyCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if config is None:
            config = CountryServiceConfig()
        if base_url is not None:
            config = CountryServiceConfig(**{**config.model_dump(), "base_url": base_url})
        self.config = config

        if cache is None and config.cache_enabled:
            cache = CurrencyCache(
                max_size=config.cache_max_size,
                ttl_seconds=config.cache_ttl_seconds,
            )
        self.cache = cache
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self.config.base_url

    # -- context management -------------------------------------------------

    def __enter__(self) -> CountryService:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    async def __aenter__(self) -> CountryService:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Release cached data.  The service stays usable afterwards."""
        self.clear_cache()

    def clear_cache(self) -> None:
        if self.cache is not None:
            self.cache.clear()

    # -- currency -----------------------------------------------------------

    def get_local_currency_by_code(self, code: str | None) -> LocalCurrency:
        """Get the local currency for an ISO 3166-1 alpha-2 or alpha-3 code.

        Raises:
            InvalidInputError: ``code`` is None, empty or whitespace.
            InvalidRemoteResultError: the API rejected the code or could not
                be reached.
            NoDataFoundError: the API returned no currency for the country.
        """
        _require(code, "code")
        return _run_blocking(self.get_local_currency_by_code_async(code))

    async def get_local_currency_by_code_async(self, code: str | None) -> LocalCurrency:
        """Async variant of :meth:`get_local_currency_by_code`.

        Cancelling the awaiting task aborts the request and raises
        :class:`asyncio.CancelledError`; the cache is left untouched.
        """
        code = _require(code, "code")

        if self.cache is not None:
            cached = self.cache.get(code)
            if cached is not None:
                return cached

        payload = await self._get_json(
            f"/alpha/{quote(code, safe='')}", code, "country code"
        )
        if isinstance(payload, list):
            if not payload:
                raise InvalidRemoteResultError(code, f"Invalid country code: {code}")
            payload = payload[0]

        if not isinstance(payload, dict) or first_currency(payload.get("currencies")) is None:
            raise NoDataFoundError(
                code, f"No currency information found for country code: {code}"
            )

        currency = LocalCurrency.from_payload(payload)
        if self.cache is not None:
            self.cache.put(code, currency)
        return currency

    # -- capital ------------------------------------------------------------

    def get_country_info_by_capital(self, capital: str | None) -> Country:
        """Get information about the country whose capital is ``capital``.

        Raises:
            InvalidInputError: ``capital`` is None, empty or whitespace.
            InvalidRemoteResultError: no country has that capital, or the API
                could not be reached, or it returned malformed country data.
        """
        _require(capital, "capital")
        return _run_blocking(self.get_country_info_by_capital_async(capital))

    async def get_country_info_by_capital_async(self, capital: str | None) -> Country:
        """Async variant of :meth:`get_country_info_by_capital`."""
        capital = _require(capital, "capital")

        payload = await self._get_json(
            f"/capital/{quote(capital, safe='')}", capital, "capital name"
        )
        if isinstance(payload, dict):
            payload = [payload]
        if not payload or not isinstance(payload[0], dict):
            raise InvalidRemoteResultError(
                capital, f"No country found with capital: {capital}"
            )
        try:
            return Country.from_payload(payload[0])
        except (TypeError, ValueError) as exc:
            raise InvalidRemoteResultError(
                capital, f"Malformed country data for capital: {capital}"
            ) from exc

    # -- transport ----------------------------------------------------------

    async def _get_json(self, path: str, identifier: str, kind: str) -> Any:
        """GET ``path`` and return the decoded JSON body.

        Every failure short of cancellation is reported as
        InvalidRemoteResultError carrying ``identifier``.
        """
        logger.debug("GET %s%s", self.base_url, path)
        async with create_client(
            self.base_url, self.config.request_timeout, self._transport
        ) as client:
            try:
                response = await client.get(path)
            except httpx.HTTPError as exc:
                logger.warning("Request for %s %r failed: %s", kind, identifier, exc)
                raise InvalidRemoteResultError(
                    identifier, f"Error retrieving information for {kind}: {identifier}."
                ) from exc

        if not response.is_success:
            logger.warning(
                "Upstream returned %d for %s %r", response.status_code, kind, identifier
            )
            raise InvalidRemoteResultError(
                identifier, f"Invalid {kind}: {identifier}", response.status_code
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise InvalidRemoteResultError(
                identifier,
                f"Malformed response for {kind}: {identifier}",
                response.status_code,
            ) from exc

        # Some API versions answer 200 with an error document.
        if isinstance(payload, dict) and isinstance(payload.get("status"), int):
            status = payload["status"]
            if status >= 400:
                logger.warning("Upstream error document %d for %s %r", status, kind, identifier)
                raise InvalidRemoteResultError(
                    identifier, f"Invalid {kind}: {identifier}", status
                )
        return payload
