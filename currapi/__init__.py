"""Public interface for the currapi package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

from currapi.cache import CallbackRateCache, InMemoryRateCache, RateCache
from currapi.client import CurrAPIClient
from currapi.config import BASE_URL, ClientConfig
from currapi.currencies import CURRENCIES, Currency, is_supported_currency
from currapi.errors import (
    CurrAPIError,
    CurrAPIValidationError,
    FutureDateError,
    InvalidCurrencyError,
    InvalidDateError,
    MalformedDateError,
    MissingCredentialError,
    MissingDateError,
    UpstreamError,
    UpstreamHTTPError,
    UpstreamLogicalError,
)
from currapi.legacy import convert_currency, get_exchange_rate, get_valid_currencies
from currapi.models import ExchangeRateData, ExchangeRateResponse, RateLimitInfo, RateQuery
from currapi.resolver import RateResolver

__all__ = [
    "__version__",
    "BASE_URL",
    "CURRENCIES",
    "CallbackRateCache",
    "ClientConfig",
    "CurrAPIClient",
    "CurrAPIError",
    "CurrAPIValidationError",
    "Currency",
    "ExchangeRateData",
    "ExchangeRateResponse",
    "FutureDateError",
    "InMemoryRateCache",
    "InvalidCurrencyError",
    "InvalidDateError",
    "MalformedDateError",
    "MissingCredentialError",
    "MissingDateError",
    "RateCache",
    "RateLimitInfo",
    "RateQuery",
    "RateResolver",
    "UpstreamError",
    "UpstreamHTTPError",
    "UpstreamLogicalError",
    "convert_currency",
    "get_exchange_rate",
    "get_valid_currencies",
    "is_supported_currency",
]

try:
    __version__ = importlib_metadata.version("currapi-client")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"
