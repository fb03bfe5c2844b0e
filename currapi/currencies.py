"""Currency codes accepted by the currapi.com rates endpoint."""

from __future__ import annotations

from typing import Final, Literal

Currency = Literal[
    "EUR",
    "USD",
    "JPY",
    "BGN",
    "CZK",
    "DKK",
    "GBP",
    "HUF",
    "PLN",
    "RON",
    "SEK",
    "CHF",
    "ISK",
    "NOK",
    "TRY",
    "AUD",
    "BRL",
    "CAD",
    "CNY",
    "HKD",
    "IDR",
    "ILS",
    "INR",
    "KRW",
    "MXN",
    "MYR",
    "NZD",
    "PHP",
    "SGD",
    "THB",
    "ZAR",
    "XAU",
    "XAG",
]

# Order matches the upstream ``currencies.json`` listing; gold and silver last.
CURRENCIES: Final[tuple[str, ...]] = (
    "EUR",
    "USD",
    "JPY",
    "BGN",
    "CZK",
    "DKK",
    "GBP",
    "HUF",
    "PLN",
    "RON",
    "SEK",
    "CHF",
    "ISK",
    "NOK",
    "TRY",
    "AUD",
    "BRL",
    "CAD",
    "CNY",
    "HKD",
    "IDR",
    "ILS",
    "INR",
    "KRW",
    "MXN",
    "MYR",
    "NZD",
    "PHP",
    "SGD",
    "THB",
    "ZAR",
    "XAU",
    "XAG",
)

_CURRENCY_SET: Final[frozenset[str]] = frozenset(CURRENCIES)


def is_supported_currency(code: object) -> bool:
    """Return True when ``code`` is one of :data:`CURRENCIES` (case-sensitive)."""

    return isinstance(code, str) and code in _CURRENCY_SET


__all__ = ["CURRENCIES", "Currency", "is_supported_currency"]
