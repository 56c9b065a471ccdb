"""
Simulated payload generator for the plan/fact dashboard.

Produces a dict in the same shape as the remote feed, so it can be fed
straight into normalise_payload(). All values are synthetic.
"""

import numpy as np

from .config import DEFAULT_YEAR, MONTHS_IN_YEAR

# ---------------------------------------------------------------------------
# Typical manager parameters (monthly)
# ---------------------------------------------------------------------------
_MANAGERS = [
    (101, "Anna Petrova", 48_000, 12),
    (102, "Ivan Sokolov", 35_000, 9),
    (103, "Maria Ivanova", 61_000, 15),
    (104, "Dmitry Orlov", 27_000, 7),
]

# Fraction of a manager's months with no record at all
_MISSING_MONTH_RATE = 0.2


def _side(income: float, partners: int) -> dict:
    return {"income": int(round(income, -2)), "activePartners": int(partners)}


def generate_payload(
    year: int = DEFAULT_YEAR,
    seed: int = 42,
    reported_months: int = MONTHS_IN_YEAR,
) -> dict:
    """Generate a simulated API response.

    Parameters
    ----------
    year : Year stamped on every manager row.
    seed : RNG seed; the same seed always yields the same payload.
    reported_months : Months (from January) that carry fact values. Later
        months only have a plan, as in a year still in progress.

    Returns
    -------
    ``{"data": {"table": [...], "total": [...]}}`` with twelve months per
    manager and a twelve-entry total (null where no manager reported).
    """
    rng = np.random.default_rng(seed)
    table = []
    sums = [None] * MONTHS_IN_YEAR

    for i, (admin_id, name, income_base, partners_base) in enumerate(_MANAGERS):
        months = []
        for month in range(MONTHS_IN_YEAR):
            if rng.uniform() < _MISSING_MONTH_RATE:
                months.append(None)
                continue

            plan_income = income_base * (1 + 0.02 * month)
            plan_partners = partners_base + month // 4
            plan = _side(plan_income, plan_partners)

            fact = None
            if month < reported_months:
                fact_income = plan_income * rng.normal(1.0, 0.08)
                fact_partners = max(plan_partners + int(rng.integers(-2, 3)), 0)
                fact = _side(fact_income, fact_partners)

            months.append({"plan": plan, "fact": fact})
            sums[month] = _accumulate(sums[month], plan, fact)

        table.append({
            "id": i + 1,
            "adminId": admin_id,
            "adminName": name,
            "year": year,
            "months": months,
        })

    return {"data": {"table": table, "total": sums}}


def _accumulate(total: dict | None, plan: dict, fact: dict | None) -> dict:
    """Add one manager-month into the running cross-manager total."""
    if total is None:
        total = {
            "plan": {"income": 0, "activePartners": 0},
            "fact": None,
        }
    for key in ("income", "activePartners"):
        total["plan"][key] += plan[key]
    if fact is not None:
        if total["fact"] is None:
            total["fact"] = {"income": 0, "activePartners": 0}
        for key in ("income", "activePartners"):
            total["fact"][key] += fact[key]
    return total
