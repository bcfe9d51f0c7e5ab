from __future__ import annotations

import datetime
import decimal

_ONE = decimal.Decimal(1)


def format_number(value: decimal.Decimal | int | float) -> str:
    """Render a score without trailing zeros: ``7``, ``87.5``, ``8.25``."""
    d = value if isinstance(value, decimal.Decimal) else decimal.Decimal(str(value))
    if d == d.to_integral_value():
        return str(d.quantize(_ONE))
    return f"{d.normalize():f}"


def format_period(period: str) -> str:
    """``2025-11`` becomes ``Tháng 11/2025``; anything else is returned as is."""
    try:
        month = datetime.datetime.strptime(period, "%Y-%m")
    except ValueError:
        return period
    return f"Tháng {month:%m/%Y}"


def format_date(value: datetime.date) -> str:
    return value.strftime("%d/%m/%Y")
