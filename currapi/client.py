"""Preferred, injectable entry point for currapi.com."""

from __future__ import annotations

from types import TracebackType

import httpx

from currapi.cache import RateCache
from currapi.config import ClientConfig
from currapi.models import RateQuery
from currapi.resolver import RateResolver
from currapi.validation import today_iso


class CurrAPIClient:
    """Async client for historical exchange rates.

    ``config`` may be a :class:`ClientConfig`, a bare API key, or ``None`` to
    read ``CURRAPI_API_KEY``/``CURRAPI_VERBOSE_MODE`` from the environment.
    Passing a ``cache`` (any :class:`~currapi.cache.RateCache`) avoids repeat
    requests for the same ``(base, target, date)``.
    """

    __slots__ = ("config", "_resolver")

    def __init__(
        self,
        config: ClientConfig | str | None = None,
        *,
        cache: RateCache | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = self._build_config(config)
        self._resolver = RateResolver(self.config, cache=cache, http_client=http_client)

    @staticmethod
    def _build_config(config: ClientConfig | str | None) -> ClientConfig:
        if isinstance(config, ClientConfig):
            return config
        if isinstance(config, str):
            return ClientConfig(api_key=config)
        if config is None:
            return ClientConfig.from_env()
        raise TypeError("config must be a ClientConfig, an API key string or None")

    @property
    def cache(self) -> RateCache | None:
        return self._resolver.cache

    async def get_rate(self, base: str, target: str, date: str | None = None) -> float:
        """Units of ``target`` per one ``base`` on ``date`` (default: today, UTC)."""

        query = RateQuery(base=base, target=target, date=date or today_iso(self.config.clock()))
        return await self._resolver.resolve(query)

    async def convert(
        self,
        amount: float,
        base: str,
        target: str,
        date: str | None = None,
    ) -> float:
        """Convert ``amount`` of ``base`` into ``target``. No rounding is applied."""

        rate = await self.get_rate(base, target, date)
        return amount * rate

    async def resolve(self, query: RateQuery) -> float:
        """Resolve an explicit query; unlike :meth:`get_rate` an empty date is an error."""

        return await self._resolver.resolve(query)

    async def list_currencies(self) -> list[str]:
        return await self._resolver.list_currencies()

    async def close(self) -> None:
        await self._resolver.close()

    async def __aenter__(self) -> "CurrAPIClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()


__all__ = ["CurrAPIClient"]
