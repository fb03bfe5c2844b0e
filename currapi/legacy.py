"""Deprecated module-level helpers configured from the environment.

Each helper reads the environment once per call and delegates to a
short-lived :class:`~currapi.client.CurrAPIClient`, so validation and error
behaviour are identical to the class surface.
"""

from __future__ import annotations

import warnings
from typing import Any, Mapping

from currapi.client import CurrAPIClient
from currapi.config import ClientConfig
from currapi.models import RateQuery


def _warn(old: str, new: str) -> None:
    warnings.warn(
        f"currapi.{old} is deprecated; use {new} instead.",
        DeprecationWarning,
        stacklevel=3,
    )


async def get_valid_currencies() -> list[str]:
    """Deprecated: use :data:`currapi.CURRENCIES` or ``CurrAPIClient.list_currencies``."""

    _warn("get_valid_currencies", "currapi.CURRENCIES")
    async with CurrAPIClient(ClientConfig.from_env()) as client:
        return await client.list_currencies()


async def get_exchange_rate(params: RateQuery | Mapping[str, Any]) -> float:
    """Deprecated: use :meth:`CurrAPIClient.get_rate`."""

    _warn("get_exchange_rate", "CurrAPIClient.get_rate()")
    query = params if isinstance(params, RateQuery) else RateQuery.from_mapping(params)
    async with CurrAPIClient(ClientConfig.from_env()) as client:
        return await client.resolve(query)


async def convert_currency(
    amount: float,
    currency: str,
    target: str,
    date: str | None = None,
) -> float:
    """Deprecated: use :meth:`CurrAPIClient.convert`."""

    _warn("convert_currency", "CurrAPIClient.convert()")
    async with CurrAPIClient(ClientConfig.from_env()) as client:
        return await client.convert(amount, currency, target, date)


__all__ = ["convert_currency", "get_exchange_rate", "get_valid_currencies"]
