"""Tests for the public package surface."""

from __future__ import annotations

import currapi
from currapi import CURRENCIES, ClientConfig, is_supported_currency
from currapi.config import BASE_URL


def test_public_names_are_exported() -> None:
    for name in currapi.__all__:
        assert hasattr(currapi, name), name


def test_version_is_a_string() -> None:
    assert isinstance(currapi.__version__, str)


def test_currency_table() -> None:
    assert len(CURRENCIES) == 33
    assert len(set(CURRENCIES)) == 33
    assert CURRENCIES[:2] == ("EUR", "USD")
    assert CURRENCIES[-2:] == ("XAU", "XAG")
    assert is_supported_currency("INR")
    assert not is_supported_currency("inr")
    assert not is_supported_currency(None)


def test_base_url_is_fixed() -> None:
    assert BASE_URL == "https://currapi.com/v1"


def test_config_from_explicit_environ() -> None:
    config = ClientConfig.from_env({"CURRAPI_API_KEY": "secret", "CURRAPI_VERBOSE_MODE": ""})

    assert config.api_key == "secret"
    assert config.verbose_mode is False
    assert "secret" not in repr(config)


def test_config_from_empty_environ() -> None:
    config = ClientConfig.from_env({})

    assert config.api_key == ""
    assert config.timeout == 10.0
