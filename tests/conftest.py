from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable

import pytest

from currapi import ClientConfig


class RecordingCache:
    """Cache double that records every hook invocation."""

    def __init__(self) -> None:
        self.rates: dict[tuple[str, str, str], float] = {}
        self.get_calls: list[tuple[str, str, str]] = []
        self.set_calls: list[tuple[str, str, str, float]] = []

    async def get(self, base: str, target: str, date: str) -> float | None:
        self.get_calls.append((base, target, date))
        return self.rates.get((base, target, date))

    async def set(self, base: str, target: str, date: str, rate: float) -> None:
        self.set_calls.append((base, target, date, rate))
        self.rates[(base, target, date)] = rate


@pytest.fixture()
def now() -> datetime:
    return datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def config(now: datetime) -> ClientConfig:
    return ClientConfig(api_key="test-key", clock=lambda: now)


@pytest.fixture()
def verbose_config(now: datetime) -> ClientConfig:
    return ClientConfig(api_key="test-key", verbose_mode=True, clock=lambda: now)


@pytest.fixture()
def recording_cache() -> RecordingCache:
    return RecordingCache()


@pytest.fixture()
def rate_payload() -> Callable[..., dict[str, Any]]:
    def _build(
        rate: float,
        base: str = "EUR",
        target: str = "USD",
        date: str = "2024-01-01",
    ) -> dict[str, Any]:
        return {
            "success": True,
            "data": {"rate": rate, "base": base, "target": target, "date": date},
            "rateLimit": {"rateLimit": 100, "remaining": 99, "reset": "2024-01-02T00:00:00Z"},
        }

    return _build
