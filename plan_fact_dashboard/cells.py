"""
Cell evaluation — pure functions with no side effects.

Decides whether a month's record counts as empty and formats metric
values for display. Every function here accepts any input: absent, NaN
or non-numeric values map to the empty display instead of raising.
"""

import numbers
from typing import Any

import pandas as pd

from .config import CURRENCY_SYMBOL
from .models import MonthData, Value


def safe_number(val: Any) -> int | float | None:
    """Coerce a metric to int/float, returning None for anything non-numeric.

    Numeric strings (``"1200"``, ``" 3.5 "``) are accepted, booleans are not.
    NaN is treated as missing.
    """
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, str):
        val = val.strip()
        if not val:
            return None
        try:
            return int(val)
        except ValueError:
            pass
        try:
            val = float(val)
        except ValueError:
            return None
    if isinstance(val, numbers.Integral):
        return int(val)
    if isinstance(val, numbers.Real):
        val = float(val)
        return None if pd.isna(val) else val
    return None


def _is_blank(val: Any) -> bool:
    """Falsy in the display sense: absent, zero, NaN or an empty string."""
    if isinstance(val, str):
        return val == ""
    number = safe_number(val)
    if number is not None:
        return number == 0
    if isinstance(val, float):
        # NaN
        return True
    return not val


def _metrics(side: Value | None) -> tuple[Any, Any]:
    if side is None:
        return None, None
    return side.income, side.active_partners


def is_empty(month: MonthData | None) -> bool:
    """Return True if the month has nothing worth displaying.

    A month is empty when the record is absent or when plan income, plan
    active partners, fact income and fact active partners are all blank.
    A reported zero counts as blank.
    """
    if month is None:
        return True
    values = _metrics(month.plan) + _metrics(month.fact)
    return all(_is_blank(v) for v in values)


def format_currency(val: Any) -> str:
    """Format income with a currency prefix and thousands separators.

    ``format_currency(1234567) == "$1,234,567"``; absent/NaN give ``""``.
    Fractional amounts keep up to three decimals.
    """
    number = safe_number(val)
    if number is None:
        return ""
    if isinstance(number, float) and number.is_integer():
        number = int(number)
    if isinstance(number, int):
        return f"{CURRENCY_SYMBOL}{number:,}"
    text = f"{number:,.3f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{CURRENCY_SYMBOL}{text}"


def format_count(val: Any) -> int | float | str:
    """Return the raw count, or ``""`` when absent or non-numeric."""
    number = safe_number(val)
    if number is None:
        return ""
    return number
