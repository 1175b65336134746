"""Pydantic models for the price text endpoint."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MarketEntry(BaseModel):
    """The subset of a CoinGecko /coins/markets row used to build a reply."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    symbol: str
    name: str
    current_price: float
    # CoinGecko sends null for thinly traded windows
    price_change_percentage_1h_in_currency: Optional[float] = None
    price_change_percentage_24h_in_currency: Optional[float] = None
    price_change_percentage_7d_in_currency: Optional[float] = None
    # ISO text or epoch milliseconds; an unparseable value is reported in the reply, not rejected here
    last_updated: Optional[Union[str, float]] = None

    @field_validator("last_updated", mode="before")
    @classmethod
    def keep_raw_value(cls, value: Any) -> Optional[Union[str, float]]:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        return str(value)


def _first(params: Mapping[str, Any], key: str) -> Optional[str]:
    """First value of a repeated query key (``?coin=btc&coin=eth`` -> ``btc``)."""
    getlist = getattr(params, "getlist", None)
    if getlist is None:
        return params.get(key)
    values = getlist(key)
    return values[0] if values else None


class PriceQuery(BaseModel):
    """Query parameters of the price endpoint."""

    coin: str = Field("", description="Name, symbol or CoinGecko id, lower-cased, not trimmed")
    include_price_change: bool = False
    include_link: bool = False

    @property
    def has_coin(self) -> bool:
        return bool(self.coin.strip())

    @classmethod
    def from_params(
        cls,
        coin: Optional[str],
        include_price_change: Optional[str],
        include_link: Optional[str],
    ) -> "PriceQuery":
        return cls(
            coin=(coin or "").lower(),
            include_price_change=include_price_change == "true",
            include_link=include_link == "true",
        )

    @classmethod
    def from_query_params(cls, params: Mapping[str, Any]) -> "PriceQuery":
        return cls.from_params(
            _first(params, "coin"),
            _first(params, "includePriceChange"),
            _first(params, "includeLink"),
        )
