"""
Configuration: data source, calendar constants, display constants.

The calendar is a fixed ring of twelve months; the dashboard shows a
window of WINDOW_SIZE consecutive months that wraps at the year boundary.
"""

# ---------------------------------------------------------------------------
# Data source — point API_URL elsewhere to read from another feed
# ---------------------------------------------------------------------------
API_URL = "https://3snet.co/js_test/api.json"

# Seconds before the one-shot fetch gives up and the table stays empty
REQUEST_TIMEOUT_S = 10.0

# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------
MONTHS_IN_YEAR = 12
WINDOW_SIZE = 6

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Year selector options, newest first. Selection does not filter data.
YEAR_OPTIONS: tuple[int, ...] = (2025, 2024)
DEFAULT_YEAR = YEAR_OPTIONS[0]

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------
DASHBOARD_TITLE = "Manager Plan / Fact"
CURRENCY_SYMBOL = "$"
EMPTY_CELL_LABEL = "No data"

# Row labels used by the table and the tabular export
INCOME_LABEL = "Income"
PARTNERS_LABEL = "Active partners"
TOTAL_ROW_LABEL = "Total"
