"""Rate resolution pipeline: validate, consult the cache, fetch, populate."""

from __future__ import annotations

from typing import Any

import httpx

from currapi.cache import RateCache
from currapi.config import BASE_URL, ClientConfig
from currapi.errors import UpstreamHTTPError, UpstreamLogicalError
from currapi.models import ExchangeRateResponse, RateQuery
from currapi.utils.logger import get_logger
from currapi.validation import validate_rate_query

LOGGER = get_logger(__name__)


class RateResolver:
    """Turn a :class:`RateQuery` into a rate with at most one HTTP request.

    When ``http_client`` is supplied the caller owns it and :meth:`close` leaves
    it open; otherwise an ``httpx.AsyncClient`` is created on first use.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        cache: RateCache | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self.cache = cache
        self._http_client = http_client
        self._owns_client = http_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(timeout=self.config.timeout)
            self._owns_client = True
        return self._http_client

    async def close(self) -> None:
        if self._http_client is not None and self._owns_client:
            await self._http_client.aclose()
            self._http_client = None

    def validate(self, query: RateQuery) -> None:
        validate_rate_query(query, api_key=self.config.api_key, now=self.config.clock())

    async def resolve(self, query: RateQuery) -> float:
        """Return the rate for ``query``; every failure propagates unchanged."""

        self.validate(query)

        if self.cache is not None:
            cached = await self.cache.get(query.base, query.target, query.date)
            # Hits are coerced to float; a cached 0 counts as a miss, same as None.
            cached_rate = float(cached) if cached else 0.0
            if cached_rate:
                if self.config.verbose_mode:
                    LOGGER.info(
                        "Using cached rate %s",
                        {"rate": cached_rate, **self._describe(query)},
                    )
                return cached_rate

        response = await self._fetch(query)
        rate = response.require_data().rate

        if self.cache is not None:
            await self.cache.set(query.base, query.target, query.date, rate)

        if self.config.verbose_mode:
            LOGGER.info("rateLimit %s", response.rate_limit)
            if self.cache is not None:
                LOGGER.info("Fetched new rate %s", {"rate": rate, **self._describe(query)})

        return rate

    async def list_currencies(self) -> list[str]:
        """Return the codes published at ``/currencies.json`` (no credential sent)."""

        url = f"{BASE_URL}/currencies.json"
        LOGGER.debug("GET %s", url)
        client = await self._get_client()
        response = await client.get(url)
        self._raise_for_status(response)
        payload = self._json(response)
        currencies = payload.get("currencies") if isinstance(payload, dict) else None
        if not isinstance(currencies, list):
            raise UpstreamLogicalError("Missing currencies in response")
        return [str(code) for code in currencies]

    async def _fetch(self, query: RateQuery) -> ExchangeRateResponse:
        url = f"{BASE_URL}/{query.date}/{query.base}/{query.target}/rates.json"
        LOGGER.debug("GET %s", url)
        client = await self._get_client()
        response = await client.get(
            url,
            headers={
                "Authorization": f"Bearer {self.config.api_key}",
                "Content-Type": "application/json",
            },
        )
        self._raise_for_status(response)
        return ExchangeRateResponse.from_payload(self._json(response))

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if not response.is_success:
            raise UpstreamHTTPError(response.status_code, response.text)

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamLogicalError("Invalid JSON in response") from exc

    @staticmethod
    def _describe(query: RateQuery) -> dict[str, str]:
        return {"base": query.base, "target": query.target, "date": query.date}


__all__ = ["RateResolver"]
