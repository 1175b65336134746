from __future__ import annotations

import pytest

from app.config.settings import DEFAULT_COIN_PAGE_URL, DEFAULT_MARKETS_URL, Settings


def test_defaults(monkeypatch):
    for key in ("COINGECKO_MARKETS_URL", "COINGECKO_TIMEOUT_SECONDS", "COIN_PAGE_URL", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)

    s = Settings.from_env()
    assert s.COINGECKO_MARKETS_URL == DEFAULT_MARKETS_URL
    assert s.COINGECKO_TIMEOUT_SECONDS is None
    assert s.COIN_PAGE_URL == DEFAULT_COIN_PAGE_URL
    assert s.LOG_LEVEL == "INFO"


def test_overrides(monkeypatch):
    monkeypatch.setenv("COINGECKO_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("COIN_PAGE_URL", "https://www.coingecko.com/en/coins/")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    s = Settings.from_env()
    assert s.COINGECKO_TIMEOUT_SECONDS == 2.5
    assert s.COIN_PAGE_URL == "https://www.coingecko.com/en/coins"
    assert s.LOG_LEVEL == "DEBUG"


def test_bad_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        Settings.from_env()
