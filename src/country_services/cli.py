"""CLI interface using Typer."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from country_services import __version__
from country_services.config import CountryServiceConfig
from country_services.errors import CountryServiceError, InvalidInputError
from country_services.service import CountryService

app = typer.Typer(
    name="country-services",
    help="Look up country currencies and capitals via the REST Countries API.",
    add_completion=False,
)
console = Console()

BaseUrlOption = Annotated[
    str | None,
    typer.Option("--base-url", help="REST Countries API base URL."),
]
TimeoutOption = Annotated[
    float | None,
    typer.Option("--timeout", "-t", help="HTTP request timeout in seconds."),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Print the record as JSON instead of a table."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose logging."),
]


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"country-services {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Country Services — currency and capital lookups by country."""


def _build_service(base_url: str | None, timeout: float | None, verbose: bool) -> CountryService:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    overrides: dict[str, Any] = {}
    if base_url is not None:
        overrides["base_url"] = base_url
    if timeout is not None:
        overrides["request_timeout"] = timeout
    return CountryService(config=CountryServiceConfig(**overrides))


def _print_record(title: str, record: Any, as_json: bool) -> None:
    data = asdict(record)
    if as_json:
        console.print_json(json.dumps(data))
        return

    table = Table(title=title)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key.replace("_", " ").capitalize(), "-" if value is None else str(value))
    console.print(table)


def _fail(exc: CountryServiceError) -> None:
    console.print(f"[red]Lookup failed:[/red] {exc}")
    code = 2 if isinstance(exc, InvalidInputError) else 1
    raise typer.Exit(code=code) from None


@app.command()
def currency(
    code: Annotated[str, typer.Argument(help="ISO 3166-1 alpha-2 or alpha-3 country code.")],
    base_url: BaseUrlOption = None,
    timeout: TimeoutOption = None,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Show the local currency of a country."""
    with _build_service(base_url, timeout, verbose) as service:
        try:
            result = service.get_local_currency_by_code(code)
        except CountryServiceError as exc:
            _fail(exc)
    _print_record(f"Local currency for {code.strip().upper()}", result, as_json)


@app.command()
def capital(
    name: Annotated[str, typer.Argument(help="Capital city name.")],
    base_url: BaseUrlOption = None,
    timeout: TimeoutOption = None,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Show the country whose capital is NAME."""
    with _build_service(base_url, timeout, verbose) as service:
        try:
            result = service.get_country_info_by_capital(name)
        except CountryServiceError as exc:
            _fail(exc)
    _print_record(f"Country with capital {name.strip()}", result, as_json)
