"""
Typed records for the plan/fact payload.

Absent data is ``None`` at every level: a month with no record, a side
(plan or fact) with no record, or a metric that was not reported.
Numeric fields are stored exactly as received; the formatting layer is
responsible for turning malformed values into the empty display.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Value:
    """One side (plan or fact) of a month's metrics."""

    income: Any = None
    active_partners: Any = None


@dataclass(frozen=True)
class MonthData:
    """Plan and fact metrics for one calendar month."""

    plan: Value | None = None
    fact: Value | None = None


@dataclass(frozen=True)
class Manager:
    """A manager row.

    ``months`` always holds twelve entries; index ``i`` is calendar month
    ``i`` (0 = January) regardless of the display window.
    """

    id: Any
    admin_id: Any
    admin_name: str
    year: Any
    months: tuple[MonthData | None, ...]


@dataclass(frozen=True)
class Payload:
    """Normalised payload: manager rows plus the cross-manager total."""

    managers: tuple[Manager, ...] = ()
    total: tuple[MonthData | None, ...] = ()
