"""Tests for the Typer command line front-end."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from country_services import __version__
from country_services.cli import app
from country_services.service import CountryService

BASE_URL = "https://restcountries.test/v2"

runner = CliRunner()


@pytest.fixture(autouse=True)
def fake_service(monkeypatch, upstream):
    """Route every CLI-built service through the fake upstream."""

    def build(**kwargs):
        return CountryService(transport=upstream.transport, **kwargs)

    monkeypatch.setattr("country_services.cli.CountryService", build)
    monkeypatch.setenv("COUNTRY_SERVICE_BASE_URL", BASE_URL)


class TestCli:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_currency_table(self):
        result = runner.invoke(app, ["currency", "US"])
        assert result.exit_code == 0
        assert "USD" in result.output
        assert "United States" in result.output

    def test_currency_json(self):
        result = runner.invoke(app, ["currency", "US", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "country_name": "United States",
            "currency_code": "USD",
            "currency_symbol": "$",
        }

    def test_capital_json(self):
        result = runner.invoke(app, ["capital", "London", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["name"] == "United Kingdom"
        assert data["capital_name"] == "London"

    def test_unknown_code_exits_1(self):
        result = runner.invoke(app, ["currency", "UPSS"])
        assert result.exit_code == 1
        assert "Lookup failed" in result.output

    def test_blank_code_exits_2(self):
        result = runner.invoke(app, ["currency", " "])
        assert result.exit_code == 2

    def test_base_url_option(self, upstream):
        result = runner.invoke(app, ["capital", "London", "--base-url", "https://elsewhere.test/v2"])
        assert result.exit_code == 0
        assert upstream.requests[0].url.host == "elsewhere.test"

    def test_service_closed_after_command(self, monkeypatch, upstream):
        built: list[CountryService] = []

        def build(**kwargs):
            service = CountryService(transport=upstream.transport, **kwargs)
            built.append(service)
            return service

        monkeypatch.setattr("country_services.cli.CountryService", build)
        result = runner.invoke(app, ["currency", "US"])
        assert result.exit_code == 0
        assert upstream.count("/v2/alpha/US") == 1
        assert len(built[0].cache) == 0
