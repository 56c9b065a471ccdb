"""
Cyclic month window over a fixed twelve-month year.

The window never grows or shrinks, so plain modular arithmetic on the
month index is all that is needed.
"""

from .config import MONTH_NAMES, MONTHS_IN_YEAR, WINDOW_SIZE


def cyclic_index(n: int) -> int:
    """Map any integer onto a calendar-month index in [0, 12)."""
    return n % MONTHS_IN_YEAR


def visible_slots(current_index: int) -> list[int]:
    """Return the calendar-month indices shown by the window.

    The window starts at ``current_index`` and wraps at the year boundary,
    e.g. ``visible_slots(10) == [10, 11, 0, 1, 2, 3]``.
    """
    return [cyclic_index(current_index + offset) for offset in range(WINDOW_SIZE)]


def visible_month_names(current_index: int) -> list[str]:
    """Column headers for the window starting at ``current_index``."""
    return [MONTH_NAMES[idx] for idx in visible_slots(current_index)]


def advance(current_index: int) -> int:
    """Shift the window one month forward."""
    return (current_index + 1) % MONTHS_IN_YEAR


def retreat(current_index: int) -> int:
    """Shift the window one month back."""
    # Keep the operand non-negative before the modulus
    return (current_index - 1 + MONTHS_IN_YEAR) % MONTHS_IN_YEAR
