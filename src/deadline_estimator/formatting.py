from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Mapping

CURRENCY_SYMBOLS: Mapping[str, str] = {
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "USD": "$",
}


def format_money(amount: float, currency: str) -> str:
    """Format ``amount`` with at most two fraction digits, rounding half up.

    Trailing zero fraction digits are dropped, so 1365.0 renders as ``£1,365``
    and 12.5 as ``£12.5``. Unknown currencies are prefixed with their code.
    """
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.2f}".rstrip("0").rstrip(".")
    code = currency.upper()
    prefix = CURRENCY_SYMBOLS.get(code, f"{code} ")
    return f"{sign}{prefix}{digits}"


__all__ = ["CURRENCY_SYMBOLS", "format_money"]
