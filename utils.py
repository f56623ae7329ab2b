"""
Utility functions for SplitBill: date display and ten-cent rounding
"""
from __future__ import annotations
import re
from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP

_LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")


def _leading_int(part: str | None) -> str:
    """Integer prefix of a date part without leading zeros, or NaN"""
    if part is None:
        return "NaN"
    m = _LEADING_INT.match(part)
    if not m:
        return "NaN"
    digits = m.group(2).lstrip("0")
    if not digits:
        return "0"
    return ("-" if m.group(1) == "-" else "") + digits


def format_date(s: str) -> str:
    """
    Format a YYYY-MM-DD string for display, e.g. 2024-03-21 -> 2024年3月21日.
    No calendar validation; never raises.
    """
    parts = s.split("-")
    year = parts[0]
    month = _leading_int(parts[1] if len(parts) > 1 else None)
    day = _leading_int(parts[2] if len(parts) > 2 else None)
    return f"{year}年{month}月{day}日"


def to_tenths(amount: float) -> int:
    """Round an amount to a whole number of ten-cent units, halves up"""
    return int(Decimal(amount * 10).to_integral_value(rounding=ROUND_HALF_UP))


def floor_tenths(amount: float) -> int:
    """Round an amount down to a whole number of ten-cent units"""
    # str() keeps 0.3 as 0.3 instead of its binary expansion 0.2999...
    return int((Decimal(str(amount)) * 10).to_integral_value(rounding=ROUND_FLOOR))


def from_tenths(tenths: int) -> float:
    """Convert ten-cent units back to a monetary float"""
    return tenths / 10


def round_tenth(amount: float) -> float:
    """Round an amount to the nearest 0.1"""
    return from_tenths(to_tenths(amount))
