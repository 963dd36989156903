"""Helper utilities for formatting numeric outputs."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Mapping

CURRENCY_SYMBOLS: Mapping[str, str] = {
    "JPY": "¥",
    "USD": "$",
}

DEFAULT_EXCHANGE_RATE = Decimal("150")
NOT_APPLICABLE = "N/A"
MINUS_SIGN = "−"


def to_decimal(value: object) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if value is None:
        return Decimal("0")
    return Decimal(str(value))


def to_usd(amount: object, exchange_rate: object = DEFAULT_EXCHANGE_RATE) -> Decimal:
    """Convert a JPY *amount* into USD at the fixed *exchange_rate*."""

    return to_decimal(amount) / to_decimal(exchange_rate)


def _format_whole(amount: Decimal, symbol: str) -> str:
    if amount.is_nan() or amount.is_infinite():
        return NOT_APPLICABLE
    rounded = amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    if rounded < 0:
        return f"-{symbol}{abs(rounded):,.0f}"
    return f"{symbol}{rounded:,.0f}"


def format_jpy(value: object) -> str:
    try:
        amount = to_decimal(value)
    except (InvalidOperation, ValueError):
        return NOT_APPLICABLE
    return _format_whole(amount, CURRENCY_SYMBOLS["JPY"])


def format_usd(value: object, exchange_rate: object = DEFAULT_EXCHANGE_RATE) -> str:
    try:
        amount = to_usd(value, exchange_rate)
    except (InvalidOperation, ValueError, ZeroDivisionError):
        return NOT_APPLICABLE
    return _format_whole(amount, CURRENCY_SYMBOLS["USD"])


def format_currency(
    value: object, show_usd: bool = False, *, exchange_rate: object = DEFAULT_EXCHANGE_RATE
) -> str:
    """Render a JPY amount in JPY or, when *show_usd* is set, its USD equivalent."""

    if show_usd:
        return format_usd(value, exchange_rate)
    return format_jpy(value)


def format_signed_currency(
    value: object, show_usd: bool = False, *, exchange_rate: object = DEFAULT_EXCHANGE_RATE
) -> str:
    try:
        amount = to_decimal(value)
    except (InvalidOperation, ValueError):
        return NOT_APPLICABLE
    sign = "+" if amount >= 0 else MINUS_SIGN
    return f"{sign}{format_currency(abs(amount), show_usd, exchange_rate=exchange_rate)}"


def format_percent(value: object) -> str:
    try:
        ratio = to_decimal(value)
    except (InvalidOperation, ValueError):
        return NOT_APPLICABLE
    if ratio.is_nan() or ratio.is_infinite():
        return NOT_APPLICABLE
    return f"{ratio.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)}%"


def format_days(value: object) -> str:
    try:
        days = to_decimal(value)
    except (InvalidOperation, ValueError):
        return NOT_APPLICABLE
    return f"{days.normalize():f}" if days != days.to_integral_value() else f"{days:.0f}"


__all__ = [
    "CURRENCY_SYMBOLS",
    "DEFAULT_EXCHANGE_RATE",
    "NOT_APPLICABLE",
    "format_currency",
    "format_days",
    "format_jpy",
    "format_percent",
    "format_signed_currency",
    "format_usd",
    "to_decimal",
    "to_usd",
]
