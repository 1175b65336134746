"""Failures that end a price request with a plain-text reply."""

from __future__ import annotations


class PriceTextError(Exception):
    status_code = 500
    message = "Internal server error."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingCoinError(PriceTextError):
    status_code = 400
    message = "No coin/ticker found in parameters."


class CoinNotFoundError(PriceTextError):
    status_code = 400
    # CoinGecko's ranking goes to 250 even though only one page of 10 is read.
    message = "Coin/ticker was not found in top 250."


class UpstreamReportedError(PriceTextError):
    def __init__(self, error: str) -> None:
        self.error = error
        super().__init__(f"CoinGecko API reported an error ({error}).")


class MalformedResponseError(PriceTextError):
    message = "Malformed API response."


class UpstreamUnavailableError(PriceTextError):
    message = "Unable to reach CoinGecko."
