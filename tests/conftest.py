"""Shared fixtures for country_services tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from country_services.config import CountryServiceConfig
from country_services.service import CountryService

FIXTURES_DIR = Path(__file__).parent / "fixtures"

BASE_URL = "https://restcountries.test/v2"


class FakeUpstream:
    """Routes requests by URL path to canned responses and records them."""

    def __init__(self) -> None:
        self.routes: dict[str, Callable[[httpx.Request], Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, *, json: Any = None, status: int = 200, content: bytes | None = None) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status, content=content)
            return httpx.Response(status, json=json)

        self.routes[path] = respond

    def add_handler(self, path: str, handler: Callable[[httpx.Request], Any]) -> None:
        self.routes[path] = handler

    def count(self, path: str) -> int:
        return sum(1 for r in self.requests if r.url.path == path)

    def _handle(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        handler = self.routes.get(request.url.path)
        if handler is None:
            return httpx.Response(404, json={"status": 404, "message": "Not Found"})
        return handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)


@pytest.fixture
def sample_us_currency() -> dict:
    return json.loads((FIXTURES_DIR / "alpha_us.json").read_text())


@pytest.fixture
def sample_london_capital() -> list:
    return json.loads((FIXTURES_DIR / "capital_london.json").read_text(encoding="utf-8"))


@pytest.fixture
def upstream(sample_us_currency, sample_london_capital) -> FakeUpstream:
    """Fake REST Countries API that knows about US and London."""
    fake = FakeUpstream()
    fake.add("/v2/alpha/US", json=sample_us_currency)
    fake.add("/v2/capital/London", json=sample_london_capital)
    return fake


@pytest.fixture
def config() -> CountryServiceConfig:
    return CountryServiceConfig(base_url=BASE_URL)


@pytest.fixture
def service(upstream: FakeUpstream, config: CountryServiceConfig) -> CountryService:
    return CountryService(config=config, transport=upstream.transport)
