"""Tests for the deprecated environment-driven helpers."""

from __future__ import annotations

import pytest
import respx
from httpx import Response

import currapi
from currapi import BASE_URL
from currapi.errors import InvalidCurrencyError, MissingCredentialError, UpstreamHTTPError

EUR_USD_URL = f"{BASE_URL}/2024-01-01/EUR/USD/rates.json"


@pytest.fixture()
def api_key_env(monkeypatch) -> str:
    monkeypatch.setenv("CURRAPI_API_KEY", "env-key")
    monkeypatch.delenv("CURRAPI_VERBOSE_MODE", raising=False)
    return "env-key"


@respx.mock
@pytest.mark.asyncio
async def test_get_exchange_rate_uses_environment_key(api_key_env, rate_payload) -> None:
    route = respx.get(EUR_USD_URL).mock(return_value=Response(200, json=rate_payload(1.08)))

    with pytest.deprecated_call():
        rate = await currapi.get_exchange_rate(
            {"date": "2024-01-01", "base": "EUR", "target": "USD"}
        )

    assert rate == 1.08
    assert route.calls.last.request.headers["Authorization"] == f"Bearer {api_key_env}"


@pytest.mark.asyncio
async def test_get_exchange_rate_requires_environment_key(monkeypatch) -> None:
    monkeypatch.delenv("CURRAPI_API_KEY", raising=False)

    with pytest.deprecated_call(), pytest.raises(MissingCredentialError):
        await currapi.get_exchange_rate(
            currapi.RateQuery(base="EUR", target="USD", date="2024-01-01")
        )


@pytest.mark.asyncio
async def test_get_exchange_rate_validates_like_the_client(api_key_env) -> None:
    with respx.mock(assert_all_called=False) as router:
        with pytest.deprecated_call(), pytest.raises(InvalidCurrencyError):
            await currapi.get_exchange_rate({"date": "2024-01-01", "base": "EUR", "target": "BTC"})

    assert router.calls.call_count == 0


@respx.mock
@pytest.mark.asyncio
async def test_convert_currency(api_key_env, rate_payload) -> None:
    respx.get(EUR_USD_URL).mock(return_value=Response(200, json=rate_payload(1.5)))

    with pytest.deprecated_call():
        assert await currapi.convert_currency(10, "EUR", "USD", "2024-01-01") == 15.0


@respx.mock
@pytest.mark.asyncio
async def test_get_valid_currencies(monkeypatch) -> None:
    monkeypatch.delenv("CURRAPI_API_KEY", raising=False)
    respx.get(f"{BASE_URL}/currencies.json").mock(
        return_value=Response(200, json={"currencies": ["EUR", "USD"]})
    )

    with pytest.deprecated_call():
        assert await currapi.get_valid_currencies() == ["EUR", "USD"]


@respx.mock
@pytest.mark.asyncio
async def test_get_valid_currencies_surfaces_http_errors(api_key_env) -> None:
    respx.get(f"{BASE_URL}/currencies.json").mock(return_value=Response(404, text="nope"))

    with pytest.deprecated_call(), pytest.raises(UpstreamHTTPError) as excinfo:
        await currapi.get_valid_currencies()

    assert excinfo.value.status == 404
    assert excinfo.value.body == "nope"
