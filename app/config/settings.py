# app/config/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_MARKETS_URL = "https://api.coingecko.com/api/v3/coins/markets"
DEFAULT_COIN_PAGE_URL = "https://coingecko.com/en/coins"


def parse_str(value: str | None, default: str) -> str:
    if value is None or value.strip() == "":
        return default
    return value.strip()


def parse_optional_float(value: str | None) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    return float(value)


def parse_log_level(value: str | None, default: str = "INFO") -> str:
    level = parse_str(value, default).upper()
    if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
        raise ValueError(f"Bad LOG_LEVEL: {value}")
    return level


@dataclass(frozen=True)
class Settings:
    COINGECKO_MARKETS_URL: str
    COINGECKO_TIMEOUT_SECONDS: Optional[float]
    COIN_PAGE_URL: str
    LOG_LEVEL: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            COINGECKO_MARKETS_URL=parse_str(os.getenv("COINGECKO_MARKETS_URL"), DEFAULT_MARKETS_URL),
            COINGECKO_TIMEOUT_SECONDS=parse_optional_float(os.getenv("COINGECKO_TIMEOUT_SECONDS")),
            COIN_PAGE_URL=parse_str(os.getenv("COIN_PAGE_URL"), DEFAULT_COIN_PAGE_URL).rstrip("/"),
            LOG_LEVEL=parse_log_level(os.getenv("LOG_LEVEL")),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
