# app/api/price.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.schemas.market import PriceQuery
from app.services.coingecko import SnapshotFetcher, fetch_market_snapshot
from app.services.errors import MissingCoinError, PriceTextError
from app.services.price_text import build_price_text, check_snapshot, find_coin
from app.utils.time import utcnow


logger = logging.getLogger("coin_price.price")

router = APIRouter(tags=["price"])

Clock = Callable[[], datetime]

ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_snapshot_fetcher() -> SnapshotFetcher:
    return fetch_market_snapshot


def get_clock() -> Clock:
    return utcnow


def _text_response(text: str, status_code: int = 200) -> PlainTextResponse:
    return PlainTextResponse(content=text, status_code=status_code)


def _error_response(err: PriceTextError, coin: str) -> PlainTextResponse:
    if err.status_code >= 500:
        logger.warning("price error | coin=%s | status=%s | %s", coin, err.status_code, err.message)
    else:
        logger.info("price rejected | coin=%s | status=%s | %s", coin, err.status_code, err.message)
    return _text_response(err.message, status_code=err.status_code)


@router.api_route("/", methods=ANY_METHOD)
async def get_price_text(
    request: Request,
    fetch_snapshot: SnapshotFetcher = Depends(get_snapshot_fetcher),
    clock: Clock = Depends(get_clock),
):
    """
    Plain-text price summary for one of the top coins.
    Example: /?coin=btc&includePriceChange=true&includeLink=true

    Query params: coin (required), includePriceChange, includeLink.
    A repeated key uses its first value.
    """
    query = PriceQuery.from_query_params(request.query_params)

    try:
        if not query.has_coin:
            raise MissingCoinError()

        payload = await fetch_snapshot()
        coins = check_snapshot(payload)
        entry = find_coin(coins, query.coin)
    except PriceTextError as err:
        return _error_response(err, query.coin)

    text = build_price_text(
        entry,
        now=clock(),
        include_price_change=query.include_price_change,
        include_link=query.include_link,
    )

    logger.info("price reply | coin=%s | %s", query.coin, text)
    return _text_response(text)
