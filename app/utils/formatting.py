from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def _to_decimal(value: float, fraction_digits: int) -> Decimal:
    quantum = Decimal(1).scaleb(-fraction_digits)
    # repr() keeps the shortest round-tripping digits, so 1.0005 rounds up
    return Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)


def format_number(value: float, max_fraction_digits: int = 3) -> str:
    """
    en-US style: thousands grouping, up to ``max_fraction_digits`` decimals,
    trailing zeros dropped.  1234.5 -> "1,234.5", 10.0 -> "10".
    """
    text = f"{_to_decimal(value, max_fraction_digits):,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def format_usd(value: float) -> str:
    """USD currency with grouping and exactly two decimals: "$1,234.50"."""
    amount = _to_decimal(value, 2)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"
