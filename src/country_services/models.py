"""Data models for country currency and capital lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class LocalCurrency:
    """The local currency of a country."""

    country_name: str = UNKNOWN
    currency_code: str = UNKNOWN
    currency_symbol: str = UNKNOWN

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> LocalCurrency:
        """Build from an ``/alpha/{code}`` document using its first currency.

        Missing or null fields fall back to ``"Unknown"``.  The caller is
        responsible for checking that :func:`first_currency` finds one.
        """
        currency = first_currency(payload.get("currencies")) or {}
        return cls(
            country_name=_country_name(payload.get("name")) or UNKNOWN,
            currency_code=currency.get("code") or UNKNOWN,
            currency_symbol=currency.get("symbol") or UNKNOWN,
        )


@dataclass(frozen=True)
class Country:
    """Country information found by capital city."""

    name: str
    capital_name: str
    area: float | None
    population: int
    flag_url: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Country:
        area = payload.get("area")
        return cls(
            name=_country_name(payload.get("name")) or "",
            capital_name=_capital_name(payload.get("capital")),
            area=float(area) if area is not None else None,
            population=int(payload.get("population") or 0),
            flag_url=_flag_url(payload),
        )


def first_currency(currencies: Any) -> dict[str, Any] | None:
    """Return the first currency as a ``{code, symbol}`` dict, or None.

    v2 sends a list of currency objects; v3 sends an object keyed by
    currency code.
    """
    if isinstance(currencies, list):
        if currencies and isinstance(currencies[0], dict):
            return currencies[0]
        return None
    if isinstance(currencies, dict) and currencies:
        code, details = next(iter(currencies.items()))
        if not isinstance(details, dict):
            return None
        return {"code": code, **details}
    return None


def _country_name(name: Any) -> str | None:
    # v2 returns a plain string, v3 a {"common": ..., "official": ...} object
    if isinstance(name, dict):
        return name.get("common") or name.get("official")
    return name


def _capital_name(capital: Any) -> str:
    if isinstance(capital, list):
        return capital[0] if capital else ""
    return capital or ""


def _flag_url(payload: dict[str, Any]) -> str:
    flag = payload.get("flag")
    if isinstance(flag, str) and flag.startswith("http"):
        return flag
    flags = payload.get("flags")
    if isinstance(flags, dict):
        return flags.get("svg") or flags.get("png") or ""
    if isinstance(flags, list) and flags:
        return flags[0]
    return flag or ""
