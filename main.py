"""
Manager Plan / Fact — console pipeline.

Fetches the feed (or a simulated payload), builds the six-month view and
prints it as tables.

Usage:
    python main.py [--start N] [--sample] [--url URL]
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from plan_fact_dashboard.config import API_URL, MONTH_NAMES, MONTHS_IN_YEAR
from plan_fact_dashboard.loaders import load_payload, normalise_payload
from plan_fact_dashboard.simulator import generate_payload
from plan_fact_dashboard.state import AppState, with_payload
from plan_fact_dashboard.window import cyclic_index
from plan_fact_dashboard.dashboard import (
    build_table_view,
    table_view_to_frame,
    window_income_series,
)

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the plan/fact window.")
    parser.add_argument(
        "--start",
        type=int,
        default=0,
        help="First visible month, 0 = January (wraps modulo 12)",
    )
    parser.add_argument("--sample", action="store_true", help="Use a simulated payload")
    parser.add_argument("--url", default=API_URL, help="Feed URL")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run fetch -> normalise -> view and print the result."""
    args = parse_args(argv)

    print("=" * 70)
    print("  MANAGER PLAN / FACT — six-month window")
    print("=" * 70)

    # ------------------------------------------------------------------
    # 1. Load
    # ------------------------------------------------------------------
    print("\n[ 1 ] LOADING DATA")
    print("-" * 40)

    if args.sample:
        payload = normalise_payload(generate_payload())
    else:
        payload = load_payload(args.url)
        if payload is None:
            logger.warning("Feed unavailable; the table will be empty")

    state = with_payload(AppState(), payload)
    print(f"Managers: {len(state.managers)}")
    print(f"Total months: {len(state.total)}")

    # ------------------------------------------------------------------
    # 2. Window
    # ------------------------------------------------------------------
    start = cyclic_index(args.start)
    state = replace(state, current_index=start)
    view = build_table_view(state)

    print("\n[ 2 ] WINDOW")
    print("-" * 40)
    print(f"Start month: {MONTH_NAMES[start]} ({start + 1}/{MONTHS_IN_YEAR})")
    print(f"Visible: {', '.join(view.month_names)}")

    # ------------------------------------------------------------------
    # 3. Table
    # ------------------------------------------------------------------
    print("\n[ 3 ] TABLE (plan / fact)")
    print("-" * 40)
    print(table_view_to_frame(view).to_string(index=False))

    print("\nTotal income:")
    print(window_income_series(view).to_string(index=False))

    print("\n" + "=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
