"""Optional rate cache collaborators.

The resolver only talks to caches through :class:`RateCache`, so "get without
set" (or the reverse) cannot be configured. Storage and eviction belong to the
caller; :class:`InMemoryRateCache` exists for scripts and tests.
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Protocol, Union, runtime_checkable

CacheKey = tuple[str, str, str]

CacheGetHook = Callable[[str, str, str], Union[float, None, Awaitable[float | None]]]
CacheSetHook = Callable[[str, str, str, float], Union[None, Awaitable[None]]]


@runtime_checkable
class RateCache(Protocol):
    """Contract for caches keyed by ``(base, target, date)``."""

    async def get(self, base: str, target: str, date: str) -> float | None:
        ...  # pragma: no cover - protocol definition

    async def set(self, base: str, target: str, date: str, rate: float) -> None:
        ...  # pragma: no cover - protocol definition


class InMemoryRateCache:
    """Process-local dictionary cache."""

    def __init__(self) -> None:
        self._rates: dict[CacheKey, float] = {}

    async def get(self, base: str, target: str, date: str) -> float | None:
        return self._rates.get((base, target, date))

    async def set(self, base: str, target: str, date: str, rate: float) -> None:
        self._rates[(base, target, date)] = rate

    def clear(self) -> None:
        self._rates.clear()

    def __len__(self) -> int:
        return len(self._rates)

    def __contains__(self, key: object) -> bool:
        return key in self._rates


async def _maybe_await(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


class CallbackRateCache:
    """Adapt a caller-supplied ``get``/``set`` hook pair to :class:`RateCache`.

    Either hook may be a plain function or a coroutine function.
    """

    __slots__ = ("_get", "_set")

    def __init__(self, get: CacheGetHook, set: CacheSetHook) -> None:  # noqa: A002
        if not callable(get) or not callable(set):
            raise TypeError("CallbackRateCache requires both a get and a set hook")
        self._get = get
        self._set = set

    async def get(self, base: str, target: str, date: str) -> float | None:
        return await _maybe_await(self._get(base, target, date))

    async def set(self, base: str, target: str, date: str, rate: float) -> None:
        await _maybe_await(self._set(base, target, date, rate))


__all__ = [
    "CacheGetHook",
    "CacheKey",
    "CacheSetHook",
    "CallbackRateCache",
    "InMemoryRateCache",
    "RateCache",
]
