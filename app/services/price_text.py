from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Optional, Sequence

from app.config.settings import get_settings
from app.schemas.market import MarketEntry
from app.services.errors import CoinNotFoundError, MalformedResponseError, UpstreamReportedError
from app.utils.formatting import format_number, format_usd
from app.utils.time import parse_timestamp


UP_ARROW = "↗"
DOWN_ARROW = "↘"
NO_CHANGE = "n/a"

_WHITESPACE = re.compile(r"\s")


def _provider_error(payload: Any) -> Optional[str]:
    if not isinstance(payload, dict):
        return None
    if payload.get("error"):
        return str(payload["error"])
    # newer CoinGecko error envelope: {"status": {"error_code": 429, "error_message": "..."}}
    status = payload.get("status")
    if isinstance(status, dict) and status.get("error_message"):
        return str(status["error_message"])
    return None


def check_snapshot(payload: Any) -> list[dict[str, Any]]:
    """
    Structural sanity check of a /coins/markets payload.
    Only the first row's symbol is inspected; the rest is trusted.
    """
    error = _provider_error(payload)
    if error is not None:
        raise UpstreamReportedError(error)

    if not isinstance(payload, list) or not payload:
        raise MalformedResponseError()
    first = payload[0]
    if not isinstance(first, dict) or not isinstance(first.get("symbol"), str):
        raise MalformedResponseError()

    return payload


def _text(entry: dict[str, Any], key: str) -> Optional[str]:
    value = entry.get(key)
    return value.lower() if isinstance(value, str) else None


def find_coin(coins: Sequence[Any], token: str) -> MarketEntry:
    """First row (in market-cap order) matching by name, symbol or id."""
    wanted = token.lower()
    wanted_id = _WHITESPACE.sub("-", wanted)

    for entry in coins:
        if not isinstance(entry, dict):
            continue
        if (
            _text(entry, "name") == wanted
            or _text(entry, "symbol") == wanted
            or _text(entry, "id") == wanted_id
        ):
            return MarketEntry.model_validate(entry)

    raise CoinNotFoundError()


def construct_message(coin: MarketEntry) -> str:
    return f"Current price of {coin.name} is: {format_usd(coin.current_price)}."


def _change(value: Optional[float]) -> str:
    if value is None:
        return NO_CHANGE
    arrow = DOWN_ARROW if value < 0 else UP_ARROW
    return f"{arrow}{format_number(abs(value))}"


def construct_change(coin: MarketEntry) -> str:
    hour = _change(coin.price_change_percentage_1h_in_currency)
    day = _change(coin.price_change_percentage_24h_in_currency)
    week = _change(coin.price_change_percentage_7d_in_currency)
    return f"1h:{hour} / 1d:{day} / 1w:{week}"


def construct_link(coin: MarketEntry) -> str:
    return f"{get_settings().COIN_PAGE_URL}/{coin.id}"


def construct_update(coin: MarketEntry, now: datetime) -> str:
    updated_at = parse_timestamp(coin.last_updated)
    if updated_at is None:
        return "Could not parse update time."
    diff = (now - updated_at).total_seconds()
    return f"updated {format_number(diff)}s ago"


def build_price_text(
    coin: MarketEntry,
    *,
    now: datetime,
    include_price_change: bool = False,
    include_link: bool = False,
) -> str:
    text = construct_message(coin)
    if include_price_change:
        text += f" {construct_change(coin)}."
    if include_link:
        text += f" {construct_link(coin)}"
    text += f" ({construct_update(coin, now)})"
    return text
