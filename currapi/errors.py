"""Exception hierarchy raised by the currapi client."""

from __future__ import annotations

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class CurrAPIError(Exception):
    """Base class for every error raised by :mod:`currapi`."""


class CurrAPIValidationError(CurrAPIError, ValueError):
    """A rate query was rejected before any request was sent."""


class MissingCredentialError(CurrAPIValidationError):
    def __init__(self) -> None:
        super().__init__("Missing CURRAPI_API_KEY in environment variables.")


class InvalidCurrencyError(CurrAPIValidationError):
    """``currency`` is not part of :data:`currapi.currencies.CURRENCIES`."""

    def __init__(self, currency: object, role: str = "base") -> None:
        self.currency = currency
        self.role = role
        super().__init__(f"Invalid {role} currency: {currency}")


class MissingDateError(CurrAPIValidationError):
    def __init__(self) -> None:
        super().__init__("Date is required")


class MalformedDateError(CurrAPIValidationError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__("Date must be in YYYY-MM-DD format")


class InvalidDateError(CurrAPIValidationError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__("Invalid date")


class FutureDateError(CurrAPIValidationError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__("Date cannot be in the future")


class UpstreamError(CurrAPIError, RuntimeError):
    """currapi.com answered, but not with a usable payload."""


class UpstreamHTTPError(UpstreamError):
    """Non-2xx response; ``body`` is the raw response text."""

    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self.body = body
        super().__init__(f"Error from currapi.com: {status} - {body}")


class UpstreamLogicalError(UpstreamError):
    """2xx response reporting ``success: false`` or carrying no rate."""

    def __init__(self, message: str | None = None) -> None:
        self.message = message or UNKNOWN_ERROR_MESSAGE
        super().__init__(f"Error fetching exchange rate: {self.message}")


__all__ = [
    "CurrAPIError",
    "CurrAPIValidationError",
    "FutureDateError",
    "InvalidCurrencyError",
    "InvalidDateError",
    "MalformedDateError",
    "MissingCredentialError",
    "MissingDateError",
    "UNKNOWN_ERROR_MESSAGE",
    "UpstreamError",
    "UpstreamHTTPError",
    "UpstreamLogicalError",
]
