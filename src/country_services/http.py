"""Shared async HTTP client configuration."""

from __future__ import annotations

import httpx

from country_services import __version__


def create_client(
    base_url: str,
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an AsyncClient rooted at the REST Countries base URL.

    No retries are configured: a failed request is reported to the caller
    straight away.  Callers own the client and must close it, normally with
    ``async with``.
    """
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        transport=transport,
        headers={
            "Accept": "application/json",
            "User-Agent": f"country-services/{__version__}",
        },
    )
