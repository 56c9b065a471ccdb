"""
Dashboard-ready view model.

build_table_view() is the single entry point for a front end: it projects
the application state onto the six visible months and resolves every
(row, month) cell to either "empty" or four display values. It is a pure
function of the state and is recomputed on every change.
"""

import logging
from dataclasses import dataclass
from typing import Any, Sequence

import pandas as pd

from .cells import format_count, format_currency, is_empty, safe_number
from .config import (
    EMPTY_CELL_LABEL,
    INCOME_LABEL,
    MONTH_NAMES,
    PARTNERS_LABEL,
    TOTAL_ROW_LABEL,
    WINDOW_SIZE,
)
from .models import MonthData
from .state import AppState
from .window import cyclic_index, visible_slots

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cell:
    """One month of one row, resolved for display."""

    slot: int
    month_index: int
    data: MonthData | None
    empty: bool
    plan_income: str = ""
    fact_income: str = ""
    plan_partners: int | float | str = ""
    fact_partners: int | float | str = ""

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month_index]


@dataclass(frozen=True)
class Row:
    label: str
    cells: tuple[Cell, ...]
    manager_id: Any = None


@dataclass(frozen=True)
class TableView:
    year: int
    current_index: int
    slots: tuple[int, ...]
    month_names: tuple[str, ...]
    total: Row
    managers: tuple[Row, ...]


def month_at(months: Sequence[MonthData | None], index: int) -> MonthData | None:
    """Look up a month record, treating an index past the end as absent."""
    if 0 <= index < len(months):
        return months[index]
    return None


def resolve_cell(months: Sequence[MonthData | None], current_index: int, slot: int) -> Cell:
    """Resolve window slot ``slot`` against a month sequence."""
    month_index = cyclic_index(current_index + slot)
    data = month_at(months, month_index)

    if is_empty(data):
        return Cell(slot=slot, month_index=month_index, data=data, empty=True)

    plan, fact = data.plan, data.fact
    return Cell(
        slot=slot,
        month_index=month_index,
        data=data,
        empty=False,
        plan_income=format_currency(plan.income if plan else None),
        fact_income=format_currency(fact.income if fact else None),
        plan_partners=format_count(plan.active_partners if plan else None),
        fact_partners=format_count(fact.active_partners if fact else None),
    )


def build_row(
    label: str,
    months: Sequence[MonthData | None],
    current_index: int,
    manager_id: Any = None,
) -> Row:
    cells = tuple(resolve_cell(months, current_index, slot) for slot in range(WINDOW_SIZE))
    return Row(label=label, cells=cells, manager_id=manager_id)


def build_table_view(state: AppState) -> TableView:
    """Project the state onto the visible window.

    Returns
    -------
    TableView with the aggregate row (from ``state.total``) and one row per
    manager, each holding six cells in window order.
    """
    slots = visible_slots(state.current_index)
    total_row = build_row(TOTAL_ROW_LABEL, state.total, state.current_index)
    manager_rows = tuple(
        build_row(m.admin_name, m.months, state.current_index, manager_id=m.id)
        for m in state.managers
    )
    return TableView(
        year=state.year,
        current_index=state.current_index,
        slots=tuple(slots),
        month_names=tuple(MONTH_NAMES[i] for i in slots),
        total=total_row,
        managers=manager_rows,
    )


def _pair(plan: Any, fact: Any) -> str:
    return f"{plan} / {fact}"


def table_view_to_frame(view: TableView) -> pd.DataFrame:
    """Flatten the view into a display table.

    Returns
    -------
    DataFrame with columns ``row``, ``metric`` and one column per visible
    month. Two lines per row (income, active partners); each cell reads
    "plan / fact", or "No data" for an empty month.
    """
    records = []
    for row in (view.total,) + view.managers:
        income = {"row": row.label, "metric": INCOME_LABEL}
        partners = {"row": row.label, "metric": PARTNERS_LABEL}
        for name, cell in zip(view.month_names, row.cells):
            if cell.empty:
                income[name] = EMPTY_CELL_LABEL
                partners[name] = EMPTY_CELL_LABEL
            else:
                income[name] = _pair(cell.plan_income, cell.fact_income)
                partners[name] = _pair(cell.plan_partners, cell.fact_partners)
        records.extend([income, partners])

    return pd.DataFrame(records, columns=["row", "metric", *view.month_names])


def window_income_series(view: TableView) -> pd.DataFrame:
    """Aggregate plan vs. fact income for the visible months.

    Returns
    -------
    DataFrame with columns month, plan_income, fact_income (float, NaN
    where the aggregate has no value). Empty months are NaN on both sides.
    """
    rows = []
    for name, cell in zip(view.month_names, view.total.cells):
        plan_income = fact_income = None
        if not cell.empty:
            plan, fact = cell.data.plan, cell.data.fact
            plan_income = safe_number(plan.income) if plan else None
            fact_income = safe_number(fact.income) if fact else None
        rows.append({"month": name, "plan_income": plan_income, "fact_income": fact_income})

    df = pd.DataFrame(rows, columns=["month", "plan_income", "fact_income"])
    for col in ("plan_income", "fact_income"):
        df[col] = pd.to_numeric(df[col], errors="coerce").astype(float)
    logger.debug("Built income series for %d months", len(df))
    return df
