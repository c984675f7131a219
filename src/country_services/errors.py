"""Exceptions raised by the country service."""

from __future__ import annotations


class CountryServiceError(Exception):
    """Base class for every error raised by country_services."""


class InvalidInputError(CountryServiceError, ValueError):
    """An identifier was None, empty or whitespace."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"{argument} cannot be null, empty, or whitespace.")


class InvalidRemoteResultError(CountryServiceError, ValueError):
    """The upstream API rejected the identifier or could not be reached.

    Transport failures are reported through this error as well; the
    original ``httpx`` exception is kept as ``__cause__`` and
    ``status_code`` is ``None`` when no response was received.
    """

    def __init__(
        self, identifier: str, message: str, status_code: int | None = None
    ) -> None:
        self.identifier = identifier
        self.status_code = status_code
        super().__init__(message)


class NoDataFoundError(CountryServiceError, LookupError):
    """The upstream API answered successfully but carried no usable data."""

    def __init__(self, identifier: str, message: str) -> None:
        self.identifier = identifier
        super().__init__(message)
