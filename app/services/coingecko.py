"""Helpers for interacting with the public CoinGecko API."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Optional

import httpx

from app.config.settings import get_settings
from app.services.errors import MalformedResponseError, UpstreamUnavailableError


logger = logging.getLogger("coin_price.coingecko")

# Top 10 by market cap, USD, with the 1h/24h/7d change windows.
MARKET_PARAMS: dict[str, str | int] = {
    "vs_currency": "usd",
    "order": "market_cap_desc",
    "per_page": 10,
    "page": 1,
    "sparkline": "false",
    "price_change_percentage": "1h,24h,7d",
}

SnapshotFetcher = Callable[[], Awaitable[Any]]


def _client_kwargs(transport: Optional[httpx.AsyncBaseTransport]) -> dict[str, Any]:
    kwargs: dict[str, Any] = {}
    timeout = get_settings().COINGECKO_TIMEOUT_SECONDS
    if timeout is not None:
        kwargs["timeout"] = timeout
    if transport is not None:
        kwargs["transport"] = transport
    return kwargs


async def fetch_market_snapshot(
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """Return the decoded market snapshot exactly as CoinGecko sent it.

    The HTTP status is not checked: error bodies are JSON too and carry
    the provider's own message, which the caller reports.
    """

    url = get_settings().COINGECKO_MARKETS_URL

    try:
        async with httpx.AsyncClient(**_client_kwargs(transport)) as client:
            response = await client.get(url, params=MARKET_PARAMS)
    except httpx.HTTPError as exc:
        logger.warning("coingecko fetch failed | url=%s | err=%s", url, exc)
        raise UpstreamUnavailableError() from exc

    logger.debug("coingecko fetch done | status=%s", response.status_code)

    try:
        return response.json()
    except ValueError as exc:
        logger.warning("coingecko body not json | status=%s", response.status_code)
        raise MalformedResponseError() from exc
