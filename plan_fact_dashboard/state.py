"""
Application state record.

The dashboard holds exactly one AppState. Every transition returns a new
record; nothing is mutated in place.
"""

from dataclasses import dataclass, replace

from .config import DEFAULT_YEAR
from .models import Manager, MonthData, Payload
from .window import advance, retreat


@dataclass(frozen=True)
class AppState:
    managers: tuple[Manager, ...] = ()
    total: tuple[MonthData | None, ...] = ()
    current_index: int = 0
    year: int = DEFAULT_YEAR


def with_payload(state: AppState, payload: Payload | None) -> AppState:
    """Replace the data wholesale after a load.

    A failed load (``payload is None``) leaves the state untouched. A
    successful one resets the window to January.
    """
    if payload is None:
        return state
    return replace(state, managers=payload.managers, total=payload.total, current_index=0)


def next_month(state: AppState) -> AppState:
    return replace(state, current_index=advance(state.current_index))


def previous_month(state: AppState) -> AppState:
    return replace(state, current_index=retreat(state.current_index))


def select_year(state: AppState, year: int) -> AppState:
    """Record the selected year.

    Display only: managers and total are not filtered or refetched.
    """
    return replace(state, year=int(year))
